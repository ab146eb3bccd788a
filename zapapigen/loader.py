"""Load the ZAP API registry.

Reads spec/zap_api.json and extracts components and localized messages.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

REGISTRY_PATH = Path(__file__).parent.parent / "spec" / "zap_api.json"


def load_registry(path: Path | None = None) -> dict[str, Any]:
    """Load the API registry from disk."""
    registry_file = path or REGISTRY_PATH
    with open(registry_file, encoding="utf-8") as f:
        return json.load(f)


def get_components(registry: dict[str, Any]) -> list[dict[str, Any]]:
    """Extract component descriptors from the registry."""
    return registry.get("components", [])


def get_messages(registry: dict[str, Any]) -> dict[str, str]:
    """Extract the localized description messages from the registry."""
    return registry.get("messages", {})


def get_component(registry: dict[str, Any], prefix: str) -> dict[str, Any]:
    """Find a component by its prefix."""
    for component in get_components(registry):
        if component["prefix"] == prefix:
            return component
    raise KeyError(prefix)


def description_tag(prefix: str, endpoint_type: str, endpoint: dict[str, Any]) -> str:
    """Return the message key describing an endpoint.

    Defaults to '<prefix>.api.<type>.<name>' when the endpoint sets none.
    """
    tag = endpoint.get("descriptionTag")
    if tag:
        return tag
    return f"{prefix}.api.{endpoint_type}.{endpoint['name']}"


def lookup_description(messages: dict[str, str], tag: str) -> str | None:
    """Resolve a description tag, or None if there is no usable message.

    Blank messages count as missing, so no empty docstring is emitted
    and the tag gets reported along with the absent ones.
    """
    desc = messages.get(tag)
    if desc is None or not desc.strip():
        return None
    return desc
