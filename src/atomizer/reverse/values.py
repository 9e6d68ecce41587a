"""Decoding of custom-value suffixes back into literal CSS values."""

from __future__ import annotations

import re

from atomizer.model.rule import RuleDescriptor

_HEX_RE = re.compile(r"^(?:[0-9a-fA-F]{3}|[0-9a-fA-F]{4}|[0-9a-fA-F]{6}|[0-9a-fA-F]{8})$")


def decode_value(descriptor: RuleDescriptor, suffix: str) -> str:
    """Return the CSS value a custom *suffix* stands for.

    Hex digits on colour properties get their ``#`` back (``07f`` becomes
    ``#07f``).  Lengths, percentages and plain numbers are already literal.
    """
    if descriptor.value_type == "color" and _HEX_RE.match(suffix):
        return "#" + suffix
    return suffix
