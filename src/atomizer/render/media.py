"""Media query grouping: base rules first, then one @media block per breakpoint."""

from __future__ import annotations

import logging
from typing import Iterable, Mapping

from atomizer.model.css import RuleBlock
from atomizer.render.renderer import format_block

logger = logging.getLogger(__name__)


def media_query(width: str) -> str:
    return f"@media(min-width:{width})"


def group(blocks: Iterable[RuleBlock], break_points: Mapping[str, str]) -> str:
    """Join *blocks* into the final stylesheet text.

    Breakpoint groups follow the declaration order of *break_points*.  Groups
    with no rules are omitted, and so are blocks whose breakpoint is not
    declared.
    """
    base: list[RuleBlock] = []
    grouped: dict[str, list[RuleBlock]] = {}
    for block in blocks:
        if block.break_point is None:
            base.append(block)
        elif block.break_point in break_points:
            grouped.setdefault(block.break_point, []).append(block)
        else:
            logger.warning(
                "Skipping %s: breakpoint %r is not declared",
                block.selector,
                block.break_point,
            )

    parts = [format_block(block) for block in base]
    for name, width in break_points.items():
        members = grouped.get(name)
        if not members:
            continue
        parts.append(f"{media_query(width)} {{\n")
        parts.extend(format_block(block, indent=1) for block in members)
        parts.append("}\n")
    return "".join(parts)
