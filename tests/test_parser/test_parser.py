"""Tests for the class-name grammar and the markup scanner."""

from pathlib import Path

import pytest

from atomizer import ClassNameError
from atomizer.model import RuleDescriptor
from atomizer.parser import (
    ClassName,
    candidates,
    parse,
    parse_class_name,
    recognize,
    scan,
)
from atomizer.rules import DEFAULT_RULES

FIXTURES = Path(__file__).parent.parent / "fixtures"


# ---------------------------------------------------------------------------
# Class-name grammar
# ---------------------------------------------------------------------------


class TestParseClassName:
    def test_static(self) -> None:
        assert parse_class_name("D-b") == ClassName(alias="D", suffix="b")

    def test_breakpoint(self) -> None:
        assert parse_class_name("D-b--sm") == ClassName(
            alias="D", suffix="b", break_point="sm"
        )

    def test_custom_values(self) -> None:
        assert parse_class_name("Lh-1.2").suffix == "1.2"
        assert parse_class_name("M-100%").suffix == "100%"
        assert parse_class_name("Pend-10px").alias == "Pend"

    def test_negative_value(self) -> None:
        name = parse_class_name("M--10px")
        assert name.alias == "M"
        assert name.suffix == "-10px"
        assert name.break_point is None

    def test_negative_value_with_breakpoint(self) -> None:
        assert parse_class_name("M--10px--md") == ClassName(
            alias="M", suffix="-10px", break_point="md"
        )

    def test_str(self) -> None:
        assert str(parse_class_name("D-b--sm")) == "D-b--sm"
        assert str(ClassName(alias="P", suffix="0")) == "P-0"

    @pytest.mark.parametrize("token", ["D-", "-b", "D", "D b", "1-b", ""])
    def test_rejects_malformed(self, token: str) -> None:
        with pytest.raises(ClassNameError):
            parse_class_name(token)


# ---------------------------------------------------------------------------
# Recognition against the rule table
# ---------------------------------------------------------------------------


class TestRecognize:
    def test_static_variant(self) -> None:
        assert recognize("Ovs-t") == ClassName(alias="Ovs", suffix="t")

    def test_unknown_alias(self) -> None:
        assert recognize("Fake-t") is None

    def test_unknown_static_suffix(self) -> None:
        assert recognize("D-zz") is None

    def test_custom_value(self) -> None:
        assert recognize("Fz-3em") is not None

    def test_custom_rules(self) -> None:
        rules = DEFAULT_RULES.extend(
            [RuleDescriptor(id="opacity", alias="Op", properties=("opacity",), accepts_custom=True)]
        )
        assert recognize("Op-5", rules) is not None
        assert recognize("Op-5") is None


# ---------------------------------------------------------------------------
# Scanning markup
# ---------------------------------------------------------------------------


class TestScan:
    def test_static_classes(self) -> None:
        markup = '<div class="Fake-t Ovs-t Bgo-bb"><span class="Bgo-bb">Foobar</span></div>'
        result = scan(markup)
        assert sorted(result.classes) == sorted(["Ovs-t", "Bgo-bb"])
        assert result.counts == {"Bgo-bb": 2, "Ovs-t": 1}

    def test_custom_classes(self) -> None:
        markup = (
            '<div class="Fake-xs Fz-3em Lh-1.2 Z-3 C-07f Bgc-1 M-100%">'
            '<span class="P-10px">Foobar</span></div>'
        )
        result = scan(markup)
        assert result.classes == [
            "Fz-3em", "Lh-1.2", "Z-3", "C-07f", "Bgc-1", "M-100%", "P-10px",
        ]
        assert all(count == 1 for count in result.counts.values())

    def test_first_seen_order(self) -> None:
        result = scan("P-0 D-b P-0 C-t D-b")
        assert result.classes == ["P-0", "D-b", "C-t"]
        assert result.counts == {"P-0": 2, "D-b": 2, "C-t": 1}

    def test_single_quotes_and_newlines(self) -> None:
        result = scan("<a class='D-b'>\n<b class='D-b\nD-ib'>")
        assert result.counts == {"D-b": 2, "D-ib": 1}

    def test_ignores_words_inside_text(self) -> None:
        assert scan("a well-known re-D-b idea").classes == []

    def test_breakpoint_tokens(self) -> None:
        assert scan('class="D-b--sm"').classes == ["D-b--sm"]

    def test_css_selectors_unescaped(self) -> None:
        css = "#atomic .H-55\\% {\n  height: 55%;\n}\n#atomic .Lh-1\\.2 {\n}\n"
        assert scan(css).classes == ["H-55%", "Lh-1.2"]

    def test_fixture_page(self) -> None:
        result = scan((FIXTURES / "page.html").read_text())
        assert result.classes == ["D-b", "D-ib", "Pend-foo", "D-b--sm", "Lh-1.2"]
        assert result.counts["D-ib"] == 2

    def test_empty(self) -> None:
        result = scan("")
        assert result.classes == []
        assert result.counts == {}


class TestParse:
    def test_fills_counts_in_place(self) -> None:
        counts: dict[str, int] = {}
        classes = parse('<div class="Fake-t Ovs-t Bgo-bb"><i class="Bgo-bb">', counts)
        assert classes == ["Ovs-t", "Bgo-bb"]
        assert counts == {"Bgo-bb": 2, "Ovs-t": 1}

    def test_counts_accumulate_across_calls(self) -> None:
        counts: dict[str, int] = {}
        assert parse("D-b", counts) == ["D-b"]
        assert parse("D-b D-ib", counts) == ["D-b", "D-ib"]
        assert counts == {"D-b": 2, "D-ib": 1}

    def test_without_counts(self) -> None:
        assert parse("D-b D-b") == ["D-b"]

    def test_candidates_keep_duplicates(self) -> None:
        assert list(candidates("x-y x-y")) == ["x-y", "x-y"]
