"""Atomizer model layer -- public type re-exports."""

from atomizer.model.config import (
    Configuration,
    CustomEntry,
    PropertyConfig,
    Settings,
    VariantToggle,
)
from atomizer.model.css import ClassSpec, RuleBlock
from atomizer.model.rule import END, START, RuleDescriptor, RuleTable

__all__ = [
    # rules
    "RuleDescriptor",
    "RuleTable",
    "START",
    "END",
    # configuration
    "Settings",
    "VariantToggle",
    "CustomEntry",
    "PropertyConfig",
    "Configuration",
    # render
    "ClassSpec",
    "RuleBlock",
]
