"""Configuration resolver: turns a configuration into ordered ClassSpecs."""

from __future__ import annotations

import logging
from typing import Any, Mapping

from atomizer.errors import ConfigurationError
from atomizer.model.config import Configuration, PropertyConfig, Settings
from atomizer.model.css import ClassSpec
from atomizer.model.rule import END, START, RuleDescriptor, RuleTable

logger = logging.getLogger(__name__)


def load_configuration(
    configuration: Configuration | Mapping[str, Any] | None,
) -> Configuration:
    """Accept a Configuration or its JSON shape and return a Configuration."""
    if isinstance(configuration, Configuration):
        return configuration
    return Configuration.from_dict(configuration)


def require_settings(configuration: Configuration) -> Settings:
    """Return the settings block, raising if a required field is missing."""
    settings = configuration.settings
    if settings is None:
        raise ConfigurationError(
            "Missing required config info: no 'config' block", key="config"
        )
    missing = settings.missing
    if missing:
        raise ConfigurationError(
            "Missing required config info: " + ", ".join(missing),
            key=missing[0],
        )
    return settings


def direction_map(settings: Settings) -> dict[str, str]:
    """The logical-to-physical side lookup for *settings*."""
    return {START: settings.start, END: settings.end}


def _substitute(text: str, sides: dict[str, str]) -> str:
    for marker, side in sides.items():
        text = text.replace(marker, side)
    return text


def _declarations(
    descriptor: RuleDescriptor,
    values: tuple[str, ...],
    sides: dict[str, str] | None,
) -> tuple[tuple[str, str], ...]:
    """Pair the descriptor's properties with *values*.

    A single value is shared by every property of a shorthand descriptor.
    """
    properties = descriptor.properties
    if len(values) == 1:
        values = values * len(properties)
    elif len(values) != len(properties):
        raise ConfigurationError(
            f"{descriptor.id!r} expects {len(properties)} value(s), got {len(values)}",
            key=descriptor.id,
        )
    pairs = tuple(zip(properties, values))
    if sides is None:
        return pairs
    return tuple((_substitute(p, sides), _substitute(v, sides)) for p, v in pairs)


def _resolve_property(
    descriptor: RuleDescriptor,
    prop: PropertyConfig,
    sides: dict[str, str] | None,
) -> list[ClassSpec]:
    specs: list[ClassSpec] = []

    # Static variants render in rule-table order, not configuration order.
    for suffix, values in descriptor.variants:
        toggle = prop.toggle(suffix)
        if toggle is None or not toggle.enabled:
            continue
        specs.append(
            ClassSpec(
                property=descriptor.id,
                alias=descriptor.alias,
                suffix=suffix,
                declarations=_declarations(descriptor, values, sides),
                break_points=toggle.break_points or (),
            )
        )
    for toggle in prop.toggles:
        if not descriptor.has_variant(toggle.suffix):
            logger.warning(
                "Ignoring unknown variant %r of %r", toggle.suffix, descriptor.id
            )

    if prop.custom and not descriptor.accepts_custom:
        raise ConfigurationError(
            f"{descriptor.id!r} does not accept custom values", key=descriptor.id
        )
    for entry in prop.custom:
        if descriptor.has_variant(entry.suffix):
            logger.warning(
                "Custom suffix %r of %r shadows a static variant; keeping the static one",
                entry.suffix,
                descriptor.id,
            )
            continue
        specs.append(
            ClassSpec(
                property=descriptor.id,
                alias=descriptor.alias,
                suffix=entry.suffix,
                declarations=_declarations(descriptor, entry.values, sides),
                break_points=entry.break_points or (),
            )
        )
    return specs


def resolve(
    rules: RuleTable,
    configuration: Configuration | Mapping[str, Any] | None,
) -> list[ClassSpec]:
    """Resolve *configuration* against *rules* into an ordered list of specs.

    Raises :class:`ConfigurationError` before producing anything if the
    configuration or one of ``namespace``, ``start`` and ``end`` is missing.
    """
    config = load_configuration(configuration)
    settings = require_settings(config)
    sides = direction_map(settings)

    for name in config.properties:
        if name not in rules:
            logger.debug("No rule for configured property %r", name)

    specs: list[ClassSpec] = []
    for descriptor in rules:
        prop = config.properties.get(descriptor.id)
        if prop is None:
            continue
        specs.extend(
            _resolve_property(
                descriptor, prop, sides if descriptor.directional else None
            )
        )
    return specs
