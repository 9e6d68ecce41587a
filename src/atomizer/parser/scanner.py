"""Class-name recognizer: find atomic classes in free-form text."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Iterator, MutableMapping

from atomizer.errors import ClassNameError
from atomizer.model.rule import RuleTable
from atomizer.parser.classname import ClassName, parse_class_name
from atomizer.rules import DEFAULT_RULES

# Class-name shaped tokens starting at the beginning of the text, after
# whitespace, after a quote (as in class="...") or after the dot of a selector.
_CANDIDATE_RE = re.compile(r"""(?<![^\s"'.])[A-Za-z]+-[^\s"']+""")

# Selectors taken from generated CSS escape characters such as % and ".".
_ESCAPE_RE = re.compile(r"\\(.)")


@dataclass(frozen=True)
class ScanResult:
    """Distinct atomic classes in first-seen order, and how often each occurs."""

    classes: list[str] = field(default_factory=list)
    counts: dict[str, int] = field(default_factory=dict)


def candidates(text: str) -> Iterator[str]:
    """Yield every class-name shaped token of *text*, duplicates included."""
    for match in _CANDIDATE_RE.finditer(text):
        yield _ESCAPE_RE.sub(r"\1", match.group(0))


def recognize(token: str, rules: RuleTable = DEFAULT_RULES) -> ClassName | None:
    """Return the parsed class name if *token* is an atomic class, else None."""
    try:
        name = parse_class_name(token)
    except ClassNameError:
        return None
    descriptor = rules.by_alias(name.alias)
    if descriptor is None:
        return None
    if descriptor.has_variant(name.suffix) or descriptor.accepts_custom:
        return name
    return None


def parse(
    text: str,
    counts: MutableMapping[str, int] | None = None,
    rules: RuleTable = DEFAULT_RULES,
) -> list[str]:
    """Return the distinct atomic classes found in *text*.

    When *counts* is given it is updated in place with one increment per
    occurrence, so repeated calls can accumulate over several documents.
    """
    if counts is None:
        counts = {}
    found: list[str] = []
    verdicts: dict[str, bool] = {}
    for token in candidates(text):
        if token not in verdicts:
            verdicts[token] = recognize(token, rules) is not None
            if verdicts[token]:
                found.append(token)
        if verdicts[token]:
            counts[token] = counts.get(token, 0) + 1
    return found


def scan(text: str, rules: RuleTable = DEFAULT_RULES) -> ScanResult:
    """Scan *text* and return both the distinct classes and their counts."""
    counts: dict[str, int] = {}
    classes = parse(text, counts, rules)
    return ScanResult(classes=classes, counts=counts)
