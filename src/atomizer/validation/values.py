"""Pluggable checks for custom CSS values recovered from class names."""

from __future__ import annotations

import re
from typing import Callable

from atomizer.model.rule import RuleDescriptor

ValueValidator = Callable[[RuleDescriptor, str], bool]

_UNITS = (
    "px", "em", "rem", "ex", "ch", "vw", "vh", "vmin", "vmax",
    "cm", "mm", "in", "pt", "pc", "%",
)

_NUMBER_RE = re.compile(r"^-?(?:\d+|\d*\.\d+)$")
_INTEGER_RE = re.compile(r"^-?\d+$")
_LENGTH_RE = re.compile(
    r"^-?(?:\d+|\d*\.\d+)(?:" + "|".join(re.escape(u) for u in _UNITS) + r")$"
)
_HEX_COLOR_RE = re.compile(r"^#(?:[0-9a-fA-F]{3}|[0-9a-fA-F]{4}|[0-9a-fA-F]{6}|[0-9a-fA-F]{8})$")
_KEYWORD_RE = re.compile(r"^[a-zA-Z][a-zA-Z-]*$")

_LENGTH_KEYWORDS = frozenset({"0", "auto", "inherit", "initial", "unset"})


def is_valid_length(value: str) -> bool:
    return value in _LENGTH_KEYWORDS or bool(_LENGTH_RE.match(value))


def is_valid_color(value: str) -> bool:
    # Named colours are accepted as plain keywords.
    return bool(_HEX_COLOR_RE.match(value) or _KEYWORD_RE.match(value))


_CHECKS: dict[str, Callable[[str], bool]] = {
    "any": lambda value: bool(value),
    "length": is_valid_length,
    "number": lambda value: bool(_NUMBER_RE.match(value)) or is_valid_length(value),
    "integer": lambda value: bool(_INTEGER_RE.match(value)) or value == "auto",
    "color": is_valid_color,
}


def is_valid_value(descriptor: RuleDescriptor, value: str) -> bool:
    """Return True if *value* suits the value type of *descriptor*."""
    check = _CHECKS.get(descriptor.value_type, _CHECKS["any"])
    return check(value)
