"""Configuration model: settings block and tagged per-property entries.

A configuration in its JSON shape looks like::

    {
        "config": {
            "namespace": "#atomic",
            "start": "left",
            "end": "right",
            "breakPoints": {"sm": "767px", "md": "992px"}
        },
        "display": {"b": true, "ib": {"breakPoints": ["sm"]}},
        "padding-end": {"custom": [{"suffix": "foo", "values": ["10px"]}]}
    }

Per-property values are either static variant toggles or a ``custom`` list.
:meth:`Configuration.from_dict` tells them apart by key and value type and
turns them into :class:`VariantToggle` and :class:`CustomEntry` objects.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping

from atomizer.errors import ConfigurationError

CONFIG_KEY = "config"
CUSTOM_KEY = "custom"


@dataclass(frozen=True)
class Settings:
    """The ``config`` block: namespace, writing direction and breakpoints."""

    namespace: str = ""
    start: str = ""
    end: str = ""
    break_points: dict[str, str] = field(default_factory=dict)

    @property
    def missing(self) -> list[str]:
        """Names of the required fields that are empty."""
        return [
            name
            for name in ("namespace", "start", "end")
            if not getattr(self, name)
        ]

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Settings:
        if not isinstance(data, Mapping):
            raise ConfigurationError(
                "Missing required config info: 'config' must be a mapping",
                key=CONFIG_KEY,
            )
        break_points = data.get("breakPoints") or {}
        if not isinstance(break_points, Mapping):
            raise ConfigurationError(
                "'breakPoints' must map breakpoint names to widths",
                key="breakPoints",
            )
        return cls(
            namespace=str(data.get("namespace") or ""),
            start=str(data.get("start") or ""),
            end=str(data.get("end") or ""),
            break_points={str(k): str(v) for k, v in break_points.items()},
        )

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "namespace": self.namespace,
            "start": self.start,
            "end": self.end,
        }
        if self.break_points:
            data["breakPoints"] = dict(self.break_points)
        return data


@dataclass(frozen=True)
class VariantToggle:
    """Switches a static variant of a property on or off."""

    suffix: str
    enabled: bool = True
    break_points: tuple[str, ...] | None = None


@dataclass(frozen=True)
class CustomEntry:
    """A caller-defined suffix with literal CSS values."""

    suffix: str
    values: tuple[str, ...]
    break_points: tuple[str, ...] | None = None


@dataclass(frozen=True)
class PropertyConfig:
    """All settings of one property: static toggles and custom entries."""

    toggles: tuple[VariantToggle, ...] = ()
    custom: tuple[CustomEntry, ...] = ()

    def toggle(self, suffix: str) -> VariantToggle | None:
        for toggle in self.toggles:
            if toggle.suffix == suffix:
                return toggle
        return None


@dataclass(frozen=True)
class Configuration:
    """A complete configuration: optional settings plus property entries."""

    settings: Settings | None = None
    properties: dict[str, PropertyConfig] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None) -> Configuration:
        """Build a Configuration from its JSON shape."""
        if data is None:
            raise ConfigurationError(
                "Missing required config info: no configuration provided"
            )
        if not isinstance(data, Mapping):
            raise ConfigurationError(
                f"Configuration must be a mapping, got {type(data).__name__}"
            )

        settings = None
        if CONFIG_KEY in data:
            settings = Settings.from_dict(data[CONFIG_KEY])

        properties: dict[str, PropertyConfig] = {}
        for key, value in data.items():
            if key == CONFIG_KEY:
                continue
            properties[key] = _parse_property(key, value)
        return cls(settings=settings, properties=properties)

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON shape of this configuration."""
        data: dict[str, Any] = {}
        if self.settings is not None:
            data[CONFIG_KEY] = self.settings.to_dict()
        for name, prop in self.properties.items():
            entry: dict[str, Any] = {}
            for toggle in prop.toggles:
                if toggle.break_points:
                    entry[toggle.suffix] = {"breakPoints": list(toggle.break_points)}
                else:
                    entry[toggle.suffix] = toggle.enabled
            if prop.custom:
                entry[CUSTOM_KEY] = [_custom_to_dict(c) for c in prop.custom]
            data[name] = entry
        return data


def _custom_to_dict(entry: CustomEntry) -> dict[str, Any]:
    data: dict[str, Any] = {"suffix": entry.suffix, "values": list(entry.values)}
    if entry.break_points:
        data["breakPoints"] = list(entry.break_points)
    return data


def _parse_break_points(key: str, raw: Any) -> tuple[str, ...] | None:
    if raw is None:
        return None
    if isinstance(raw, str) or not isinstance(raw, (list, tuple)):
        raise ConfigurationError(
            f"'breakPoints' of {key!r} must be a list of breakpoint names", key=key
        )
    return tuple(str(name) for name in raw)


def _parse_custom(key: str, raw: Any) -> tuple[CustomEntry, ...]:
    if not isinstance(raw, (list, tuple)):
        raise ConfigurationError(f"'custom' of {key!r} must be a list", key=key)
    entries: list[CustomEntry] = []
    for item in raw:
        if not isinstance(item, Mapping) or "suffix" not in item:
            raise ConfigurationError(
                f"Custom entries of {key!r} need a 'suffix' and 'values'", key=key
            )
        values = item.get("values")
        if isinstance(values, (str, int, float)):
            values = [values]
        if not values:
            raise ConfigurationError(
                f"Custom entry {item['suffix']!r} of {key!r} has no values", key=key
            )
        entries.append(
            CustomEntry(
                suffix=str(item["suffix"]),
                values=tuple(str(v) for v in values),
                break_points=_parse_break_points(key, item.get("breakPoints")),
            )
        )
    return tuple(entries)


def _parse_property(key: str, value: Any) -> PropertyConfig:
    """Split one property's settings into toggles and custom entries."""
    if not isinstance(value, Mapping):
        raise ConfigurationError(
            f"Settings for {key!r} must be a mapping of suffixes", key=key
        )
    toggles: list[VariantToggle] = []
    custom: tuple[CustomEntry, ...] = ()
    for suffix, setting in value.items():
        if suffix == CUSTOM_KEY:
            custom = _parse_custom(key, setting)
        elif isinstance(setting, Mapping):
            toggles.append(
                VariantToggle(
                    suffix=str(suffix),
                    enabled=True,
                    break_points=_parse_break_points(key, setting.get("breakPoints")),
                )
            )
        elif setting is None or isinstance(setting, (bool, int)):
            toggles.append(VariantToggle(suffix=str(suffix), enabled=bool(setting)))
        else:
            raise ConfigurationError(
                f"Toggle {suffix!r} of {key!r} must be a boolean or a mapping",
                key=key,
            )
    return PropertyConfig(toggles=tuple(toggles), custom=custom)
