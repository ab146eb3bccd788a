"""Convert ZAP API names to Python identifiers.

Endpoint names become method names:
  1. reserved words are swapped for a safe replacement
  2. camelCase is split on word boundaries and lower-cased
  3. full stops are dropped

Component prefixes keep their case and only go through steps 1 and 3,
so the class and module names match the ones in the zapv2 package.

Examples:
  alerts           -> alerts
  setMode          -> set_mode
  HTTPRequest      -> http_request
  break            -> brk
  alertFilter      -> alertFilter (class), alertFilter.py (file)
"""

from __future__ import annotations

import re
from types import MappingProxyType
from typing import Mapping

# Names which are reserved in Python, mapped to something legal
RESERVED_NAMES: Mapping[str, str] = MappingProxyType({
    "break": "brk",
    "continue": "cont",
})

# Word boundaries: ACRONYMWord, lowerUpper, letter followed by non-letter
_WORD_BOUNDARY = re.compile(
    r"(?<=[A-Z])(?=[A-Z][a-z])"
    r"|(?<=[^A-Z])(?=[A-Z])"
    r"|(?<=[A-Za-z])(?=[^A-Za-z])"
)


def safe_name(name: str, reserved: Mapping[str, str] = RESERVED_NAMES) -> str:
    """Return the replacement for a reserved name, or the name unchanged."""
    return reserved.get(name, name)


def camel_case_to_lc_underscores(
    name: str, reserved: Mapping[str, str] = RESERVED_NAMES,
) -> str:
    """Convert camelCase or PascalCase to lower_case_with_underscores."""
    return _WORD_BOUNDARY.sub("_", safe_name(name, reserved)).lower()


def remove_full_stops(name: str) -> str:
    return name.replace(".", "")


def function_name(name: str, reserved: Mapping[str, str] = RESERVED_NAMES) -> str:
    """Build the Python method name for an endpoint.

    Returns a name like 'set_mode' for 'setMode'.
    """
    return remove_full_stops(
        camel_case_to_lc_underscores(safe_name(name, reserved), reserved)
    )


def class_name(prefix: str, reserved: Mapping[str, str] = RESERVED_NAMES) -> str:
    """Build the class name for a component prefix."""
    return remove_full_stops(safe_name(prefix, reserved))


def file_name(prefix: str, reserved: Mapping[str, str] = RESERVED_NAMES) -> str:
    """Build the module file name for a component prefix."""
    return class_name(prefix, reserved) + ".py"
