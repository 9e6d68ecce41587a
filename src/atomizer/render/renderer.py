"""CSS renderer: ClassSpecs to RuleBlocks, RuleBlocks to text."""

from __future__ import annotations

import re

from atomizer.model.css import ClassSpec, RuleBlock

__all__ = ["escape_selector", "render_class", "format_block"]

INDENT = "  "

# Anything that is not safe inside a bare class selector.
_ILLEGAL_RE = re.compile(r"[^A-Za-z0-9_-]")


def escape_selector(text: str) -> str:
    """Backslash-escape every character that is illegal in a class selector."""
    return _ILLEGAL_RE.sub(lambda m: "\\" + m.group(0), text)


def render_class(spec: ClassSpec, namespace: str) -> list[RuleBlock]:
    """Render *spec* into its base block plus one block per breakpoint."""
    selector = f".{spec.alias}-{escape_selector(spec.suffix)}"
    if namespace:
        selector = f"{namespace} {selector}"
    base = RuleBlock(selector=selector, declarations=spec.declarations)
    blocks = [base]
    for name in spec.break_points:
        blocks.append(base.for_break_point(name))
    return blocks


def format_block(block: RuleBlock, indent: int = 0) -> str:
    """Format *block* as ``selector {`` / declarations / ``}``.

    *indent* is the nesting depth; each level adds two spaces to every line.
    """
    pad = INDENT * indent
    lines = [f"{pad}{block.selector} {{"]
    for prop, value in block.declarations:
        lines.append(f"{pad}{INDENT}{prop}: {value};")
    lines.append(f"{pad}}}")
    return "\n".join(lines) + "\n"
