"""Shared fixtures for the generator tests.

The sample component mirrors a small slice of the ZAP core API: a
parameterless view, a view with a required parameter, an action with
mandatory and optional parameters, and an other endpoint.
"""

from __future__ import annotations

import importlib.util
from pathlib import Path
from types import ModuleType
from typing import Any, Callable

import pytest


@pytest.fixture
def component() -> dict[str, Any]:
    return {
        "prefix": "core",
        "views": [
            {"name": "alerts", "parameters": []},
            {"name": "message", "parameters": [{"name": "id", "required": True}]},
        ],
        "actions": [
            {
                "name": "setMode",
                "parameters": [
                    {"name": "Mode", "required": True},
                    {"name": "Force", "required": False},
                ],
            },
        ],
        "others": [
            {"name": "htmlreport", "parameters": []},
        ],
    }


@pytest.fixture
def messages() -> dict[str, str]:
    return {
        "core.api.view.alerts": "Gets the alerts raised by ZAP",
        "core.api.action.setMode": "Sets the mode",
        "core.api.other.htmlreport": "Generates a report in HTML format",
    }


# ---------------------------------------------------------------------------
# Generated module loading, for exercising generated clients
# ---------------------------------------------------------------------------

class FakeZap:
    """Stands in for the zapv2.ZAPv2 handle the generated classes wrap."""

    base = "http://zap/JSON/"
    base_other = "http://zap/OTHER/"

    def __init__(self) -> None:
        self.calls: list[tuple[str, str, Any]] = []

    def _request(self, url, get=None):
        self.calls.append(("_request", url, get))
        return {"Result": "OK"}

    def _request_other(self, url, get=None):
        self.calls.append(("_request_other", url, get))
        return {"raw": "<html/>"}


@pytest.fixture
def fake_zap() -> FakeZap:
    return FakeZap()


@pytest.fixture
def load_module() -> Callable[[Path], ModuleType]:
    """Return a callable that imports a generated file by path."""
    def _load(path: Path) -> ModuleType:
        spec = importlib.util.spec_from_file_location(f"generated_{path.stem}", path)
        module = importlib.util.module_from_spec(spec)
        spec.loader.exec_module(module)
        return module
    return _load
