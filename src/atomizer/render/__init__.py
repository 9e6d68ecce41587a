from atomizer.render.compiler import RenderOptions, StyleApi, create_css
from atomizer.render.media import group
from atomizer.render.renderer import escape_selector, format_block, render_class

__all__ = [
    "create_css",
    "RenderOptions",
    "StyleApi",
    "group",
    "escape_selector",
    "format_block",
    "render_class",
]
