"""Load RoutePlanConfig from routeplan.yaml if present.

Merges file config with keyword overrides. Overrides take precedence.

Example ``routeplan.yaml``::

    routeplan:
      base_path: /blog/
      posts_per_page: 6
      infinite_scroll: true
      collections:
        - path: /features/
          selector: {tag: feature}
      templates:
        post: templates/post.html
"""

from __future__ import annotations

import tomllib
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml

from routeplan._errors import ConfigError
from routeplan.config import RoutePlanConfig, Templates
from routeplan.planning.collections import Collection, selector_from_config

_CONFIG_KEYS: frozenset[str] = frozenset({
    "base_path",
    "collections",
    "infinite_scroll",
    "posts_per_page",
    "verbose",
    "amp",
    "base_url",
    "templates",
})

# Theme-style option names accepted as aliases
_ALIASES: dict[str, str] = {
    "basePath": "base_path",
    "infiniteScroll": "infinite_scroll",
    "postsPerPage": "posts_per_page",
    "baseUrl": "base_url",
    "siteUrl": "base_url",
}


def load_config(root: Path, **overrides: object) -> RoutePlanConfig:
    """Load RoutePlanConfig from root, optionally merging routeplan.yaml.

    Looks for routeplan.yaml, routeplan.yml, or routeplan.toml in root. If
    found, loads and merges with overrides. Overrides take precedence.

    Raises:
        ConfigError: If the file cannot be parsed or holds invalid values.

    """
    file_config = _read_routeplan_config(root)
    merged = {**file_config, **overrides}

    if "collections" in merged:
        merged["collections"] = _parse_collections(merged["collections"])
    if "templates" in merged and not isinstance(merged["templates"], Templates):
        merged["templates"] = _parse_templates(merged["templates"])
    if "posts_per_page" in merged:
        merged["posts_per_page"] = _as_int("posts_per_page", merged["posts_per_page"])

    return RoutePlanConfig(**merged)  # type: ignore[arg-type]


def _read_routeplan_config(root: Path) -> dict[str, object]:
    """Read config from yaml/toml if present. Returns empty dict otherwise."""
    for name in ("routeplan.yaml", "routeplan.yml"):
        path = root / name
        if path.is_file():
            return _parse_yaml(path)
    toml_path = root / "routeplan.toml"
    if toml_path.is_file():
        return _parse_toml(toml_path)
    return {}


def _parse_yaml(path: Path) -> dict[str, object]:
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except (OSError, yaml.YAMLError) as exc:
        msg = f"Failed to read {path}: {exc}"
        raise ConfigError(msg) from exc
    if not isinstance(data, dict):
        msg = f"{path} must contain a mapping, got {type(data).__name__}"
        raise ConfigError(msg)
    return _flatten_routeplan_section(data)


def _parse_toml(path: Path) -> dict[str, object]:
    try:
        data = tomllib.loads(path.read_text(encoding="utf-8"))
    except (OSError, tomllib.TOMLDecodeError) as exc:
        msg = f"Failed to read {path}: {exc}"
        raise ConfigError(msg) from exc
    return _flatten_routeplan_section(data)


def _flatten_routeplan_section(data: dict[str, Any]) -> dict[str, object]:
    """Extract routeplan.* keys and known top-level keys into one mapping."""
    result: dict[str, object] = {}
    for k, v in data.items():
        key = _ALIASES.get(k, k)
        if key in _CONFIG_KEYS:
            result[key] = v

    section = data.get("routeplan")
    if isinstance(section, dict):
        for k, v in section.items():
            key = _ALIASES.get(k, k)
            if key not in _CONFIG_KEYS:
                msg = f"Unknown routeplan option {k!r}"
                raise ConfigError(msg)
            result[key] = v
    return result


def _parse_collections(raw: object) -> tuple[Collection, ...]:
    if raw is None:
        return ()
    if isinstance(raw, (str, Mapping)):
        msg = "'collections' must be a list"
        raise ConfigError(msg)

    collections: list[Collection] = []
    for entry in raw:  # type: ignore[union-attr]
        if isinstance(entry, Collection):
            collections.append(entry)
            continue
        if not isinstance(entry, Mapping) or not entry.get("path"):
            msg = f"Each collection needs a 'path', got {entry!r}"
            raise ConfigError(msg)
        collections.append(Collection(
            path=str(entry["path"]),
            selector=selector_from_config(entry.get("selector")),
        ))
    return tuple(collections)


def _parse_templates(raw: object) -> Templates:
    if not isinstance(raw, Mapping):
        msg = f"'templates' must be a mapping, got {type(raw).__name__}"
        raise ConfigError(msg)
    try:
        return Templates(**{str(k): str(v) for k, v in raw.items()})
    except TypeError as exc:
        msg = f"Unknown template kind in {sorted(raw)}: {exc}"
        raise ConfigError(msg) from exc


def _as_int(name: str, value: object) -> int:
    try:
        return int(value)  # type: ignore[arg-type]
    except (TypeError, ValueError) as exc:
        msg = f"{name} must be an integer, got {value!r}"
        raise ConfigError(msg) from exc
