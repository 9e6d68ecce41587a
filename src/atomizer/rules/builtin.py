"""Built-in rule table.

Order matters: generated CSS follows the order of this list, whatever order
the configuration was written in.
"""

from __future__ import annotations

from atomizer.model.rule import RuleDescriptor, RuleTable


def _v(*pairs: tuple[str, str]) -> tuple[tuple[str, tuple[str, ...]], ...]:
    return tuple((suffix, (value,)) for suffix, value in pairs)


_AUTO = ("a", "auto")
_ZERO = ("0", "0")
_HIDDEN = ("h", "hidden")
_VISIBLE = ("v", "visible")
_SCROLL = ("s", "scroll")

DEFAULT_RULES = RuleTable([
    # ---- background ----
    RuleDescriptor(
        id="background-clip",
        alias="Bgcp",
        properties=("background-clip",),
        variants=_v(("bb", "border-box"), ("pb", "padding-box"), ("cb", "content-box")),
    ),
    RuleDescriptor(
        id="background-color",
        alias="Bgc",
        properties=("background-color",),
        variants=_v(("t", "transparent"), ("cc", "currentColor")),
        accepts_custom=True,
        value_type="color",
    ),
    RuleDescriptor(
        id="background-origin",
        alias="Bgo",
        properties=("background-origin",),
        variants=_v(("bb", "border-box"), ("pb", "padding-box"), ("cb", "content-box")),
    ),
    # ---- border ----
    RuleDescriptor(
        id="border",
        alias="Bd",
        properties=("border",),
        variants=_v(("0", "0"), ("n", "none")),
        accepts_custom=True,
    ),
    RuleDescriptor(
        id="border-start",
        alias="Bdstart",
        properties=("border-$START",),
        variants=_v(("0", "0"), ("n", "none")),
        accepts_custom=True,
        directional=True,
    ),
    RuleDescriptor(
        id="border-end",
        alias="Bdend",
        properties=("border-$END",),
        variants=_v(("0", "0"), ("n", "none")),
        accepts_custom=True,
        directional=True,
    ),
    # ---- box ----
    RuleDescriptor(
        id="box-sizing",
        alias="Bxz",
        properties=("box-sizing",),
        variants=_v(("cb", "content-box"), ("pb", "padding-box"), ("bb", "border-box")),
    ),
    RuleDescriptor(
        id="color",
        alias="C",
        properties=("color",),
        variants=_v(("t", "transparent"), ("cc", "currentColor")),
        accepts_custom=True,
        value_type="color",
    ),
    RuleDescriptor(
        id="cursor",
        alias="Cur",
        properties=("cursor",),
        variants=_v(("a", "auto"), ("d", "default"), ("p", "pointer"), ("t", "text")),
    ),
    RuleDescriptor(
        id="display",
        alias="D",
        properties=("display",),
        variants=_v(
            ("n", "none"),
            ("b", "block"),
            ("f", "flex"),
            ("i", "inline"),
            ("ib", "inline-block"),
            ("tb", "table"),
            ("tbc", "table-cell"),
        ),
    ),
    RuleDescriptor(
        id="float",
        alias="Fl",
        properties=("float",),
        variants=_v(("n", "none"), ("start", "$START"), ("end", "$END")),
        directional=True,
    ),
    # ---- typography ----
    RuleDescriptor(
        id="font-size",
        alias="Fz",
        properties=("font-size",),
        variants=_v(("xs", "x-small"), ("s", "small"), ("m", "medium"), ("l", "large")),
        accepts_custom=True,
        value_type="length",
    ),
    RuleDescriptor(
        id="font-weight",
        alias="Fw",
        properties=("font-weight",),
        variants=_v(("n", "normal"), ("b", "bold"), ("br", "bolder"), ("lr", "lighter")),
    ),
    RuleDescriptor(
        id="height",
        alias="H",
        properties=("height",),
        variants=_v(_AUTO, ("100", "100%")),
        accepts_custom=True,
        value_type="length",
    ),
    RuleDescriptor(
        id="line-height",
        alias="Lh",
        properties=("line-height",),
        variants=_v(("n", "normal")),
        accepts_custom=True,
        value_type="number",
    ),
    # ---- spacing ----
    RuleDescriptor(
        id="margin",
        alias="M",
        properties=("margin",),
        variants=_v(_AUTO, _ZERO),
        accepts_custom=True,
        value_type="length",
    ),
    RuleDescriptor(
        id="margin-x",
        alias="Mx",
        properties=("margin-$START", "margin-$END"),
        variants=_v(_AUTO, _ZERO),
        accepts_custom=True,
        directional=True,
        value_type="length",
    ),
    RuleDescriptor(
        id="margin-y",
        alias="My",
        properties=("margin-top", "margin-bottom"),
        variants=_v(_AUTO, _ZERO),
        accepts_custom=True,
        value_type="length",
    ),
    RuleDescriptor(
        id="margin-start",
        alias="Mstart",
        properties=("margin-$START",),
        variants=_v(_AUTO, _ZERO),
        accepts_custom=True,
        directional=True,
        value_type="length",
    ),
    RuleDescriptor(
        id="margin-end",
        alias="Mend",
        properties=("margin-$END",),
        variants=_v(_AUTO, _ZERO),
        accepts_custom=True,
        directional=True,
        value_type="length",
    ),
    RuleDescriptor(
        id="overflow",
        alias="Ov",
        properties=("overflow",),
        variants=_v(_AUTO, _HIDDEN, _SCROLL, _VISIBLE),
    ),
    RuleDescriptor(
        id="overflow-scrolling",
        alias="Ovs",
        properties=("-webkit-overflow-scrolling",),
        variants=_v(("a", "auto"), ("t", "touch")),
    ),
    RuleDescriptor(
        id="padding",
        alias="P",
        properties=("padding",),
        variants=_v(_ZERO),
        accepts_custom=True,
        value_type="length",
    ),
    RuleDescriptor(
        id="padding-x",
        alias="Px",
        properties=("padding-$START", "padding-$END"),
        variants=_v(_ZERO),
        accepts_custom=True,
        directional=True,
        value_type="length",
    ),
    RuleDescriptor(
        id="padding-y",
        alias="Py",
        properties=("padding-top", "padding-bottom"),
        variants=_v(_ZERO),
        accepts_custom=True,
        value_type="length",
    ),
    RuleDescriptor(
        id="padding-start",
        alias="Pstart",
        properties=("padding-$START",),
        variants=_v(_ZERO),
        accepts_custom=True,
        directional=True,
        value_type="length",
    ),
    RuleDescriptor(
        id="padding-end",
        alias="Pend",
        properties=("padding-$END",),
        variants=_v(_ZERO),
        accepts_custom=True,
        directional=True,
        value_type="length",
    ),
    # ---- positioning ----
    RuleDescriptor(
        id="position",
        alias="Pos",
        properties=("position",),
        variants=_v(
            ("s", "static"), ("r", "relative"), ("a", "absolute"), ("f", "fixed")
        ),
    ),
    RuleDescriptor(
        id="text-align",
        alias="Ta",
        properties=("text-align",),
        variants=_v(("c", "center"), ("j", "justify"), ("start", "$START"), ("end", "$END")),
        directional=True,
    ),
    RuleDescriptor(
        id="visibility",
        alias="V",
        properties=("visibility",),
        variants=_v(_VISIBLE, _HIDDEN, ("c", "collapse")),
    ),
    RuleDescriptor(
        id="width",
        alias="W",
        properties=("width",),
        variants=_v(_AUTO, ("100", "100%")),
        accepts_custom=True,
        value_type="length",
    ),
    RuleDescriptor(
        id="z-index",
        alias="Z",
        properties=("z-index",),
        variants=_v(_AUTO),
        accepts_custom=True,
        value_type="integer",
    ),
])
