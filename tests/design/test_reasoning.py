"""Tests for reasoning rule parsing and lookup."""

from __future__ import annotations

import pytest

from uxguide.design import DEFAULT_RULE, ReasoningTable
from uxguide.design.reasoning import parse_rule


def test_parse_rule_reads_every_column() -> None:
    rule = parse_rule(
        {
            "UI_Category": "Fintech/Crypto",
            "Recommended_Pattern": "Conversion-Optimized",
            "Style_Priority": "Glassmorphism + Dark Mode (OLED) + ",
            "Color_Mood": "Dark tech",
            "Typography_Mood": "Modern",
            "Key_Effects": "Glow effects",
            "Anti_Patterns": "Light backgrounds + No security indicators",
            "Decision_Rules": '{"must_have": "security-badges"}',
            "Severity": "HIGH",
        }
    )

    assert rule.category == "Fintech/Crypto"
    assert rule.style_priority == ("Glassmorphism", "Dark Mode (OLED)")
    assert rule.decision_rules == {"must_have": "security-badges"}
    assert rule.severity == "HIGH"


@pytest.mark.parametrize("raw", ["", "not json", "[1, 2]", '"text"'])
def test_parse_rule_ignores_unusable_decision_rules(raw: str) -> None:
    rule = parse_rule({"UI_Category": "Any", "Decision_Rules": raw})

    assert rule.decision_rules == {}


def test_parse_rule_defaults_blank_severity() -> None:
    assert parse_rule({"UI_Category": "Any", "Severity": ""}).severity == "MEDIUM"


@pytest.fixture
def table() -> ReasoningTable:
    return ReasoningTable(
        [
            {"UI_Category": "E-commerce", "Recommended_Pattern": "Feature-Rich Showcase"},
            {"UI_Category": "E-commerce Luxury", "Recommended_Pattern": "Luxury Showcase"},
            {"UI_Category": "Healthcare App", "Recommended_Pattern": "Social Proof-Focused"},
        ]
    )


def test_exact_match_beats_earlier_partial_match(table: ReasoningTable) -> None:
    tier, rule = table.match("E-commerce Luxury")

    assert tier == "exact"
    assert rule.category == "E-commerce Luxury"


def test_partial_match_uses_substring_containment(table: ReasoningTable) -> None:
    tier, rule = table.match("Luxury E-commerce Store")

    assert tier == "partial"
    assert rule.category == "E-commerce"


def test_keyword_match_splits_rule_category(table: ReasoningTable) -> None:
    tier, rule = table.match("Medical portal for healthcare")

    assert tier == "keyword"
    assert rule.category == "Healthcare App"


def test_unmatched_category_falls_back_to_default_rule(table: ReasoningTable) -> None:
    assert table.match("Gardening") is None
    assert table.find("Gardening") is DEFAULT_RULE
    assert DEFAULT_RULE.style_priority == ("Minimalism", "Flat Design")
    assert DEFAULT_RULE.severity == "MEDIUM"


def test_rows_without_category_are_skipped() -> None:
    table = ReasoningTable([{"UI_Category": "  ", "Recommended_Pattern": "Ignored"}])

    assert len(table) == 0
    assert table.find("Anything") is DEFAULT_RULE
