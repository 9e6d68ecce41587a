"""Lark-based parser for single atomic class names."""

from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path

from lark import Lark, Token, Transformer
from lark.exceptions import LarkError

from atomizer.errors import ClassNameError

GRAMMAR_PATH = Path(__file__).parent / "grammar.lark"


@dataclass(frozen=True)
class ClassName:
    """The three parts of an atomic class name."""

    alias: str
    suffix: str
    break_point: str | None = None

    def __str__(self) -> str:
        text = f"{self.alias}-{self.suffix}"
        if self.break_point:
            text += f"--{self.break_point}"
        return text


class ClassNameTransformer(Transformer):  # type: ignore[type-arg]
    """Turn the parse tree of one class name into a :class:`ClassName`."""

    def breakpoint(self, items: list[Token]) -> str:
        return str(items[0])

    def start(self, items: list[object]) -> ClassName:
        alias, suffix = str(items[0]), str(items[1])
        break_point = str(items[2]) if len(items) > 2 else None
        return ClassName(alias=alias, suffix=suffix, break_point=break_point)


@lru_cache(maxsize=1)
def _parser() -> Lark:
    return Lark(
        GRAMMAR_PATH.read_text(encoding="utf-8"),
        parser="lalr",
        start="start",
    )


def parse_class_name(token: str) -> ClassName:
    """Split *token* into alias, suffix and optional breakpoint.

    Raises :class:`ClassNameError` if the token is not class-name shaped.
    """
    try:
        tree = _parser().parse(token)
    except LarkError as e:
        column = getattr(e, "column", None)
        raise ClassNameError(
            f"Not an atomic class name: {token!r}", column=column
        ) from e
    return ClassNameTransformer().transform(tree)
