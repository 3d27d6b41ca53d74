"""Routeplan CLI — routeplan plan / routeplan config.

Entry point for the ``routeplan`` command-line interface.
"""

from __future__ import annotations

import argparse
import sys


def _build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for the routeplan CLI."""
    parser = argparse.ArgumentParser(
        prog="routeplan",
        description="Plan site routes from a headless CMS content graph.",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {_get_version()}",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # routeplan plan
    plan_parser = subparsers.add_parser(
        "plan",
        help="Plan all routes and write a route manifest",
    )
    plan_parser.add_argument("graph", help="JSON file with the content fetch result")
    plan_parser.add_argument("root", nargs="?", default=".", help="Site root directory")
    plan_parser.add_argument("--output", default="routes.json", help="Manifest path")
    plan_parser.add_argument(
        "--base-url", default=None, help="Base URL for sitemap generation",
    )
    plan_parser.add_argument(
        "--base-path", default=None, help="Path prefix for every route",
    )
    plan_parser.add_argument(
        "--posts-per-page", type=int, default=None, help="Index page size",
    )
    plan_parser.add_argument(
        "--infinite-scroll", action="store_true", help="Build infinite-scroll id lists",
    )
    plan_parser.add_argument(
        "--amp", action="store_true", help="Also plan AMP post pages",
    )
    plan_parser.add_argument(
        "--verbose", action="store_true", help="Print planning checkpoints",
    )

    # routeplan config
    config_parser = subparsers.add_parser(
        "config",
        help="Print the site config node as JSON",
    )
    config_parser.add_argument("root", nargs="?", default=".", help="Site root directory")
    config_parser.add_argument(
        "--base-path", default=None, help="Path prefix for every route",
    )

    return parser


def _get_version() -> str:
    """Get the package version."""
    from routeplan import __version__

    return __version__


def _plan_overrides(args: argparse.Namespace) -> dict[str, object]:
    """Config overrides for flags the user actually set."""
    overrides: dict[str, object] = {}
    if args.base_url is not None:
        overrides["base_url"] = args.base_url
    if args.base_path is not None:
        overrides["base_path"] = args.base_path
    if args.posts_per_page is not None:
        overrides["posts_per_page"] = args.posts_per_page
    for flag in ("infinite_scroll", "amp", "verbose"):
        if getattr(args, flag):
            overrides[flag] = True
    return overrides


def main(argv: list[str] | None = None) -> None:
    """CLI entry point."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    from routeplan.app import plan, show_config

    if args.command == "plan":
        plan(args.graph, args.root, output=args.output, **_plan_overrides(args))
    elif args.command == "config":
        overrides = {"base_path": args.base_path} if args.base_path is not None else {}
        print(show_config(args.root, **overrides))


if __name__ == "__main__":
    main()
