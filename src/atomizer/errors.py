"""Atomizer error types."""

from __future__ import annotations


class AtomizerError(Exception):
    """Base class for all errors raised by atomizer."""


class ConfigurationError(AtomizerError):
    """Raised when a configuration cannot be resolved into class specs."""

    def __init__(self, message: str, key: str | None = None):
        self.key = key
        super().__init__(message)


class RuleTableError(AtomizerError):
    """Raised when rule descriptors conflict with each other."""


class ClassNameError(AtomizerError):
    """Raised when a token does not follow the atomic class-name grammar."""

    def __init__(self, message: str, column: int | None = None):
        self.column = column
        super().__init__(message)


class UnresolvedClassError(AtomizerError):
    """Raised in strict mode when a class name maps to no rule."""

    def __init__(self, class_name: str, reason: str):
        self.class_name = class_name
        self.reason = reason
        super().__init__(f"Cannot resolve class {class_name!r}: {reason}")
