"""Route manifest — write a planned route list to disk as JSON.

The manifest is the hand-off to renderers that run in a separate process:
one object per route, in plan order.
"""

from __future__ import annotations

import json
import time
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING, Literal

from routeplan._errors import RoutePlanError

if TYPE_CHECKING:
    from routeplan.planning.models import Route


@dataclass(frozen=True, slots=True)
class ExportedFile:
    """Record of a single file written by an export step.

    Attributes:
        output_path: Absolute filesystem path to the written file.
        source_type: Category of the exported file.
        entries: Number of routes the file describes.
        size_bytes: Size of the written file in bytes.
        duration_ms: Time taken to build and write this file.

    """

    output_path: Path
    source_type: Literal["manifest", "sitemap"]
    entries: int
    size_bytes: int
    duration_ms: float


def manifest_json(routes: Sequence[Route]) -> str:
    """Serialize routes to a stable JSON document."""
    payload = {"routes": [route.to_dict() for route in routes]}
    return json.dumps(payload, indent=2, ensure_ascii=False) + "\n"


def write_manifest(routes: Sequence[Route], output_path: Path) -> ExportedFile:
    """Write the route manifest to ``output_path``.

    Raises:
        RoutePlanError: If the file cannot be written.

    """
    t0 = time.perf_counter()
    data = manifest_json(routes).encode("utf-8")
    try:
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_bytes(data)
    except OSError as exc:
        msg = f"Failed to write route manifest {output_path}: {exc}"
        raise RoutePlanError(msg) from exc
    elapsed = (time.perf_counter() - t0) * 1000

    return ExportedFile(
        output_path=output_path,
        source_type="manifest",
        entries=len(routes),
        size_bytes=len(data),
        duration_ms=elapsed,
    )
