"""Intermediate render model: ClassSpec and RuleBlock."""

from __future__ import annotations

from dataclasses import dataclass, replace


@dataclass(frozen=True)
class ClassSpec:
    """One atomic class to render, with its declarations already resolved."""

    property: str  # rule id, e.g. "padding-end"
    alias: str  # class prefix, e.g. "Pend"
    suffix: str
    declarations: tuple[tuple[str, str], ...]
    break_points: tuple[str, ...] = ()

    @property
    def class_name(self) -> str:
        return f"{self.alias}-{self.suffix}"


@dataclass(frozen=True)
class RuleBlock:
    """A selector with its ordered declarations, optionally tied to a breakpoint."""

    selector: str
    declarations: tuple[tuple[str, str], ...]
    break_point: str | None = None

    def for_break_point(self, name: str) -> RuleBlock:
        """Clone this block for breakpoint *name*, suffixing the selector."""
        return replace(self, selector=f"{self.selector}--{name}", break_point=name)
