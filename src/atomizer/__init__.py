"""Atomizer: atomic CSS from configuration, and configuration from markup."""

from atomizer.errors import (
    AtomizerError,
    ClassNameError,
    ConfigurationError,
    RuleTableError,
    UnresolvedClassError,
)
from atomizer.model import Configuration, RuleDescriptor, RuleTable
from atomizer.parser import parse, scan
from atomizer.render import RenderOptions, create_css
from atomizer.reverse import build_config
from atomizer.rules import DEFAULT_RULES

__version__ = "0.1.0"

__all__ = [
    "create_css",
    "RenderOptions",
    "parse",
    "scan",
    "build_config",
    "Configuration",
    "RuleDescriptor",
    "RuleTable",
    "DEFAULT_RULES",
    "AtomizerError",
    "ConfigurationError",
    "RuleTableError",
    "ClassNameError",
    "UnresolvedClassError",
]
