"""Build Jinja2 template context from a ZAP API component.

Turns each view, action and other endpoint into a function record
and assembles the full context dict for client.py.j2.
"""

from __future__ import annotations

import datetime
from typing import Any, Mapping

from .loader import description_tag, lookup_description
from .naming import RESERVED_NAMES, class_name, file_name, function_name

VIEW_ENDPOINT = "view"
ACTION_ENDPOINT = "action"
OTHER_ENDPOINT = "other"

# Component descriptor key holding each endpoint type, in output order
_ENDPOINT_GROUPS: tuple[tuple[str, str], ...] = (
    (VIEW_ENDPOINT, "views"),
    (ACTION_ENDPOINT, "actions"),
    (OTHER_ENDPOINT, "others"),
)

API_KEY_PARAM = "apikey"

OPTIONAL_MESSAGE = (
    "This component is optional and therefore the API will only work if it is installed"
)


def _build_docstring(
    prefix: str, endpoint_type: str, endpoint: dict[str, Any],
    messages: dict[str, str], optional: bool,
) -> list[str]:
    """Build the docstring lines for an endpoint."""
    tag = description_tag(prefix, endpoint_type, endpoint)
    desc = lookup_description(messages, tag)
    lines: list[str] = []
    if desc is None:
        print(f"No i18n for: {tag}")
    else:
        lines.append(desc)
    if optional:
        lines.append(OPTIONAL_MESSAGE)
    return lines


def build_function(
    prefix: str,
    endpoint_type: str,
    endpoint: dict[str, Any],
    messages: dict[str, str],
    optional: bool = False,
    reserved: Mapping[str, str] = RESERVED_NAMES,
) -> dict[str, Any]:
    """Build the function record for a single endpoint."""
    parameters = endpoint.get("parameters", [])
    takes_api_key = endpoint_type in (ACTION_ENDPOINT, OTHER_ENDPOINT)
    params: list[dict[str, Any]] = []
    mandatory: list[dict[str, str]] = []
    optional_params: list[dict[str, str]] = []

    for parameter in parameters:
        entry = {"key": parameter["name"], "var": parameter["name"].lower()}
        if takes_api_key and entry["var"] == API_KEY_PARAM:
            # Replaced by the trailing API key argument below
            continue
        if parameter.get("required", False):
            params.append({"name": entry["var"], "default": None})
            mandatory.append(entry)
        else:
            params.append({"name": entry["var"], "default": "None"})
            optional_params.append(entry)

    has_payload = bool(parameters)
    if takes_api_key:
        # Always add the API key, there is no way of knowing if it is required
        params.append({"name": API_KEY_PARAM, "default": "''"})
        has_payload = True

    is_other = endpoint_type == OTHER_ENDPOINT

    return {
        "name": function_name(endpoint["name"], reserved),
        "is_property": endpoint_type == VIEW_ENDPOINT and not parameters,
        "params": params,
        "mandatory": mandatory,
        "optional_params": optional_params,
        "has_payload": has_payload,
        "docstring": _build_docstring(prefix, endpoint_type, endpoint, messages, optional),
        "request_method": "_request_other" if is_other else "_request",
        "base_url": "base_other" if is_other else "base",
        "path": f"{prefix}/{endpoint_type}/{endpoint['name']}/",
        "unwrap": not is_other,
    }


def build_context(
    component: dict[str, Any],
    messages: dict[str, str],
    optional: bool = False,
    year: int | None = None,
    reserved: Mapping[str, str] = RESERVED_NAMES,
) -> dict[str, Any]:
    """Build the full template context for one component."""
    prefix = component["prefix"]
    functions: list[dict[str, Any]] = []

    for endpoint_type, key in _ENDPOINT_GROUPS:
        for endpoint in component.get(key, []):
            functions.append(
                build_function(prefix, endpoint_type, endpoint, messages, optional, reserved)
            )

    return {
        "class_name": class_name(prefix, reserved),
        "file_name": file_name(prefix, reserved),
        "year": year or datetime.date.today().year,
        "functions": functions,
        "function_count": len(functions),
    }
