"""Reverse configuration builder: atomic class names back to a Configuration."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Iterable, Mapping

from atomizer.errors import ClassNameError, UnresolvedClassError
from atomizer.model.config import (
    Configuration,
    CustomEntry,
    PropertyConfig,
    Settings,
    VariantToggle,
)
from atomizer.model.rule import RuleDescriptor, RuleTable
from atomizer.parser.classname import ClassName, parse_class_name
from atomizer.reverse.values import decode_value
from atomizer.rules import DEFAULT_RULES
from atomizer.validation import ValueValidator, is_valid_value

logger = logging.getLogger(__name__)


@dataclass
class _Entry:
    suffix: str
    values: tuple[str, ...]
    break_points: list[str] = field(default_factory=list)

    def add_break_point(self, name: str | None) -> None:
        if name and name not in self.break_points:
            self.break_points.append(name)


@dataclass
class _PropertyBuilder:
    """Collects toggles and custom entries for one property."""

    toggles: dict[str, _Entry] = field(default_factory=dict)
    custom: list[_Entry] = field(default_factory=list)

    def add_toggle(self, suffix: str, break_point: str | None) -> None:
        entry = self.toggles.get(suffix)
        if entry is None:
            entry = self.toggles[suffix] = _Entry(suffix=suffix, values=())
        entry.add_break_point(break_point)

    def add_custom(
        self,
        suffix: str,
        values: tuple[str, ...],
        break_point: str | None,
        dedupe: bool,
    ) -> None:
        if dedupe:
            for entry in self.custom:
                if entry.suffix == suffix:
                    entry.add_break_point(break_point)
                    return
        entry = _Entry(suffix=suffix, values=values)
        entry.add_break_point(break_point)
        self.custom.append(entry)

    def build(self) -> PropertyConfig:
        return PropertyConfig(
            toggles=tuple(
                VariantToggle(
                    suffix=e.suffix,
                    enabled=True,
                    break_points=tuple(e.break_points) or None,
                )
                for e in self.toggles.values()
            ),
            custom=tuple(
                CustomEntry(
                    suffix=e.suffix,
                    values=e.values,
                    break_points=tuple(e.break_points) or None,
                )
                for e in self.custom
            ),
        )


def _base_configuration(
    base: Configuration | Mapping[str, Any] | None,
) -> Configuration:
    if base is None:
        return Configuration()
    if isinstance(base, Configuration):
        return base
    return Configuration.from_dict(base)


class ConfigBuilder:
    """Builds a configuration from atomic class names.

    Custom suffixes already defined in *base_properties* keep the values
    defined there; other custom suffixes are decoded from the class name.
    Tokens that cannot be mapped to a rule are skipped, or raise
    :class:`UnresolvedClassError` when *strict* is set.  With *dedupe*,
    a custom suffix seen again under the same property does not add a second
    entry.
    """

    def __init__(
        self,
        rules: RuleTable = DEFAULT_RULES,
        settings: Settings | None = None,
        base_properties: Mapping[str, PropertyConfig] | None = None,
        strict: bool = False,
        dedupe: bool = True,
        validator: ValueValidator = is_valid_value,
    ) -> None:
        self.rules = rules
        self.settings = settings
        self.base_properties = dict(base_properties or {})
        self.strict = strict
        self.dedupe = dedupe
        self.validator = validator
        self._properties: dict[str, _PropertyBuilder] = {}

    def _unresolved(self, token: str, reason: str) -> None:
        if self.strict:
            raise UnresolvedClassError(token, reason)
        logger.debug("Skipping %r: %s", token, reason)

    def _builder(self, descriptor: RuleDescriptor) -> _PropertyBuilder:
        builder = self._properties.get(descriptor.id)
        if builder is None:
            builder = self._properties[descriptor.id] = _PropertyBuilder()
        return builder

    def _known_values(
        self, descriptor: RuleDescriptor, suffix: str
    ) -> tuple[str, ...] | None:
        prop = self.base_properties.get(descriptor.id)
        if prop is None:
            return None
        for entry in prop.custom:
            if entry.suffix == suffix:
                return entry.values
        return None

    def add(self, token: str) -> None:
        """Fold one class name into the configuration being built."""
        try:
            name: ClassName = parse_class_name(token)
        except ClassNameError:
            self._unresolved(token, "not an atomic class name")
            return

        descriptor = self.rules.by_alias(name.alias)
        if descriptor is None:
            self._unresolved(token, f"unknown property alias {name.alias!r}")
            return

        if name.break_point is not None:
            declared = self.settings.break_points if self.settings else {}
            if name.break_point not in declared:
                self._unresolved(token, f"unknown breakpoint {name.break_point!r}")
                return

        # Static variants win over custom values with the same suffix.
        if descriptor.has_variant(name.suffix):
            self._builder(descriptor).add_toggle(name.suffix, name.break_point)
            return

        if not descriptor.accepts_custom:
            self._unresolved(
                token, f"{descriptor.id!r} has no variant {name.suffix!r}"
            )
            return

        values = self._known_values(descriptor, name.suffix)
        if values is None:
            value = decode_value(descriptor, name.suffix)
            if not self.validator(descriptor, value):
                self._unresolved(token, f"{value!r} is not a valid {descriptor.id} value")
                return
            values = (value,)
        self._builder(descriptor).add_custom(
            name.suffix, values, name.break_point, self.dedupe
        )

    def build(self) -> Configuration:
        """Return the configuration, with properties in rule-table order."""
        properties = {
            descriptor.id: self._properties[descriptor.id].build()
            for descriptor in self.rules
            if descriptor.id in self._properties
        }
        return Configuration(settings=self.settings, properties=properties)


def build_config(
    class_names: Iterable[str],
    base: Configuration | Mapping[str, Any] | None = None,
    strict: bool = False,
    dedupe: bool = True,
    rules: RuleTable = DEFAULT_RULES,
    validator: ValueValidator = is_valid_value,
) -> Configuration:
    """Reconstruct the configuration that would generate *class_names*.

    The result carries the settings of *base* (whose breakpoints decide
    which ``--name`` suffixes are recognized) and only the properties derived
    from the class names.  Custom suffixes named in *base*, such as
    ``Pend-foo`` for ``{"suffix": "foo", "values": ["10px"]}``, are rebuilt
    with the values *base* gives them.
    """
    base_config = _base_configuration(base)
    builder = ConfigBuilder(
        rules=rules,
        settings=base_config.settings,
        base_properties=base_config.properties,
        strict=strict,
        dedupe=dedupe,
        validator=validator,
    )
    for token in class_names:
        builder.add(token)
    return builder.build()
