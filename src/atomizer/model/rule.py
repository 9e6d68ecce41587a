"""Rule model: RuleDescriptor and the ordered RuleTable registry."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Iterator

from atomizer.errors import RuleTableError

START = "$START"
END = "$END"

VALUE_TYPES = frozenset({"any", "length", "number", "integer", "color"})


@dataclass(frozen=True)
class RuleDescriptor:
    """How one public property turns into atomic classes.

    Attributes:
        id: Public property name used as the configuration key.
        alias: Short class-name prefix, e.g. ``D`` for ``display``.
        properties: CSS property templates, in emission order.  Directional
            templates use the ``$START`` / ``$END`` markers.
        variants: ``(suffix, values)`` pairs in declaration order.
        accepts_custom: Whether arbitrary values may be configured.
        directional: Whether ``$START`` / ``$END`` need substitution.
        value_type: Hint for value validation and suffix decoding.
    """

    id: str
    alias: str
    properties: tuple[str, ...]
    variants: tuple[tuple[str, tuple[str, ...]], ...] = ()
    accepts_custom: bool = False
    directional: bool = False
    value_type: str = "any"
    _variant_map: dict[str, tuple[str, ...]] = field(
        init=False, repr=False, compare=False
    )

    def __post_init__(self) -> None:
        if not self.id or not self.alias:
            raise RuleTableError("Rule descriptors need a non-empty id and alias")
        if not self.alias.isalpha():
            raise RuleTableError(f"Alias {self.alias!r} must contain only letters")
        if not self.properties:
            raise RuleTableError(f"Rule {self.id!r} declares no CSS properties")
        if self.value_type not in VALUE_TYPES:
            raise RuleTableError(
                f"Rule {self.id!r} has unknown value type {self.value_type!r}"
            )
        variant_map: dict[str, tuple[str, ...]] = {}
        for suffix, values in self.variants:
            if suffix in variant_map:
                raise RuleTableError(
                    f"Rule {self.id!r} declares suffix {suffix!r} twice"
                )
            variant_map[suffix] = tuple(values)
        object.__setattr__(self, "_variant_map", variant_map)

    @property
    def suffixes(self) -> tuple[str, ...]:
        return tuple(suffix for suffix, _ in self.variants)

    def variant(self, suffix: str) -> tuple[str, ...] | None:
        """Return the values of the static variant *suffix*, if declared."""
        return self._variant_map.get(suffix)

    def has_variant(self, suffix: str) -> bool:
        return suffix in self._variant_map


class RuleTable:
    """An ordered, read-only collection of rule descriptors.

    Iteration always follows declaration order; that order is what decides
    the order of the generated CSS.
    """

    def __init__(self, descriptors: Iterable[RuleDescriptor] = ()) -> None:
        self._descriptors: tuple[RuleDescriptor, ...] = tuple(descriptors)
        self._by_id: dict[str, RuleDescriptor] = {}
        self._by_alias: dict[str, RuleDescriptor] = {}
        for descriptor in self._descriptors:
            if descriptor.id in self._by_id:
                raise RuleTableError(f"Duplicate rule id {descriptor.id!r}")
            if descriptor.alias in self._by_alias:
                raise RuleTableError(
                    f"Alias {descriptor.alias!r} is used by both "
                    f"{self._by_alias[descriptor.alias].id!r} and {descriptor.id!r}"
                )
            self._by_id[descriptor.id] = descriptor
            self._by_alias[descriptor.alias] = descriptor

    def __iter__(self) -> Iterator[RuleDescriptor]:
        return iter(self._descriptors)

    def __len__(self) -> int:
        return len(self._descriptors)

    def __contains__(self, rule_id: object) -> bool:
        return rule_id in self._by_id

    def __repr__(self) -> str:
        return f"RuleTable({len(self._descriptors)} rules)"

    def get(self, rule_id: str) -> RuleDescriptor | None:
        return self._by_id.get(rule_id)

    def by_alias(self, alias: str) -> RuleDescriptor | None:
        return self._by_alias.get(alias)

    def extend(self, descriptors: Iterable[RuleDescriptor]) -> RuleTable:
        """Return a new table with *descriptors* appended after these ones."""
        extra = tuple(descriptors)
        if not extra:
            return self
        return RuleTable(self._descriptors + extra)
