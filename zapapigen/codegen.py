"""Render templates and write generated output.

Takes the context from context_builder and produces one client module
per ZAP API component.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Iterable, Mapping

import jinja2

from .context_builder import build_context
from .loader import get_component, get_components, get_messages
from .naming import RESERVED_NAMES

TEMPLATE_DIR = Path(__file__).parent / "templates"


class OutputDirectoryNotFoundError(FileNotFoundError):
    """The configured output directory does not exist."""

    def __init__(self, path: Path) -> None:
        self.path = path.resolve()
        super().__init__(f"The directory does not exist: {self.path}")


def py_dict(entries: list[dict[str, str]]) -> str:
    """Render parameter entries as a Python dict literal, e.g. {'Url': url}."""
    items = ", ".join(f"'{entry['key']}': {entry['var']}" for entry in entries)
    return "{" + items + "}"


def _environment() -> jinja2.Environment:
    env = jinja2.Environment(
        loader=jinja2.FileSystemLoader(str(TEMPLATE_DIR)),
        keep_trailing_newline=True,
        trim_blocks=True,
        lstrip_blocks=True,
    )
    env.filters["py_dict"] = py_dict
    return env


def render(context: dict[str, Any]) -> str:
    """Render the client template for one component context."""
    template = _environment().get_template("client.py.j2")
    return template.render(**context)


def check_output_dir(output_dir: Path) -> None:
    """Refuse to generate into a directory that does not exist."""
    if not output_dir.is_dir():
        raise OutputDirectoryNotFoundError(output_dir)


def generate(
    component: dict[str, Any],
    output_dir: Path,
    messages: dict[str, str],
    optional: bool = False,
    year: int | None = None,
    reserved: Mapping[str, str] = RESERVED_NAMES,
) -> Path:
    """Render one component and write it into output_dir."""
    check_output_dir(output_dir)
    context = build_context(component, messages, optional, year, reserved)

    output_path = output_dir / context["file_name"]
    print(f"Generating {output_path.resolve()} ({context['function_count']} functions)")
    output_path.write_text(render(context), encoding="utf-8")
    return output_path


def generate_all(
    registry: dict[str, Any],
    output_dir: Path,
    optional: bool = False,
    prefixes: Iterable[str] | None = None,
) -> list[Path]:
    """Generate a client module for every component in the registry.

    When prefixes is given only those components are generated, in that order.
    """
    check_output_dir(output_dir)
    if prefixes is None:
        components = get_components(registry)
    else:
        components = [get_component(registry, prefix) for prefix in prefixes]

    messages = get_messages(registry)
    return [
        generate(component, output_dir, messages, optional)
        for component in components
    ]
