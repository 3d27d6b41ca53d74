"""Site config node — the process-wide settings exposed to downstream consumers.

Other build steps query this record instead of re-reading configuration.
Its digest changes only when the content does, so consumers can cache on it.
"""

from __future__ import annotations

import hashlib
import json
from dataclasses import dataclass
from typing import Any

from routeplan.planning.urls import resolve_url

CONFIG_NODE_ID = "routeplan-config"
CONFIG_NODE_TYPE = "RoutePlanConfig"


def content_digest(data: Any) -> str:
    """MD5 hex digest of ``data`` serialized as compact JSON."""
    if isinstance(data, str):
        payload = data
    else:
        payload = json.dumps(data, separators=(",", ":"))
    return hashlib.md5(payload.encode("utf-8")).hexdigest()


@dataclass(frozen=True, slots=True)
class ConfigNode:
    """Derived, read-only record of site-wide routing settings.

    Attributes:
        base_path: Normalized site base path.
        content: JSON serialization of the public fields.
        content_digest: Fingerprint of ``content``.
        id: Fixed node identifier.
        type: Node type name.

    """

    base_path: str
    content: str
    content_digest: str
    id: str = CONFIG_NODE_ID
    type: str = CONFIG_NODE_TYPE

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "basePath": self.base_path,
            "internal": {
                "type": self.type,
                "content": self.content,
                "contentDigest": self.content_digest,
            },
        }


def create_config_node(base_path: str = "/") -> ConfigNode:
    """Build the config node for ``base_path``."""
    config = {"basePath": resolve_url(base_path)}
    content = json.dumps(config, separators=(",", ":"))
    return ConfigNode(
        base_path=config["basePath"],
        content=content,
        content_digest=content_digest(config),
    )
