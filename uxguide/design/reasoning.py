"""Category-keyed reasoning rules and the tiered lookup that selects them."""

from __future__ import annotations

import json
import re
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Iterable, List, Optional, Sequence, Tuple

from ..models import Row

_CATEGORY_SPLIT = re.compile(r"[/\-]")


@dataclass(frozen=True)
class ReasoningRule:
    """Recommended pattern, style priorities and guard rails for a UI category."""

    category: str = ""
    pattern: str = ""
    style_priority: Tuple[str, ...] = ()
    color_mood: str = ""
    typography_mood: str = ""
    key_effects: str = ""
    anti_patterns: str = ""
    decision_rules: Dict[str, Any] = field(default_factory=dict)
    severity: str = "MEDIUM"


DEFAULT_RULE = ReasoningRule(
    category="",
    pattern="Hero + Features + CTA",
    style_priority=("Minimalism", "Flat Design"),
    color_mood="Professional",
    typography_mood="Clean",
    key_effects="Subtle hover transitions",
    anti_patterns="",
    decision_rules={},
    severity="MEDIUM",
)


def parse_rule(row: Row) -> ReasoningRule:
    """Build a rule from a ``ui-reasoning.csv`` row."""
    return ReasoningRule(
        category=row.get("UI_Category", ""),
        pattern=row.get("Recommended_Pattern", ""),
        style_priority=tuple(
            part.strip() for part in row.get("Style_Priority", "").split("+") if part.strip()
        ),
        color_mood=row.get("Color_Mood", ""),
        typography_mood=row.get("Typography_Mood", ""),
        key_effects=row.get("Key_Effects", ""),
        anti_patterns=row.get("Anti_Patterns", ""),
        decision_rules=_parse_decision_rules(row.get("Decision_Rules", "")),
        severity=row.get("Severity") or "MEDIUM",
    )


def _parse_decision_rules(raw: str) -> Dict[str, Any]:
    if not raw.strip():
        return {}
    try:
        loaded = json.loads(raw)
    except json.JSONDecodeError:
        return {}
    return loaded if isinstance(loaded, dict) else {}


# Each matcher receives (lowercased rule category, lowercased detected category).
Matcher = Callable[[str, str], bool]


def _exact(rule_category: str, category: str) -> bool:
    return rule_category == category


def _partial(rule_category: str, category: str) -> bool:
    return rule_category in category or category in rule_category


def _keyword(rule_category: str, category: str) -> bool:
    keywords = _CATEGORY_SPLIT.sub(" ", rule_category).split()
    return any(len(keyword) > 2 and keyword in category for keyword in keywords)


MATCHERS: Tuple[Tuple[str, Matcher], ...] = (
    ("exact", _exact),
    ("partial", _partial),
    ("keyword", _keyword),
)


class ReasoningTable:
    """Ordered reasoning rules; lookups try each matcher tier over all rules."""

    def __init__(self, rows: Iterable[Row]) -> None:
        self._rows: List[Row] = [row for row in rows if row.get("UI_Category", "").strip()]

    def __len__(self) -> int:
        return len(self._rows)

    def match(
        self, category: str, matchers: Sequence[Tuple[str, Matcher]] = MATCHERS
    ) -> Optional[Tuple[str, ReasoningRule]]:
        """Return ``(tier name, rule)`` for the first tier with a hit, else None."""
        lowered = category.lower()
        for tier, matcher in matchers:
            for row in self._rows:
                if matcher(row["UI_Category"].lower(), lowered):
                    return tier, parse_rule(row)
        return None

    def find(self, category: str) -> ReasoningRule:
        matched = self.match(category)
        if matched is None:
            return DEFAULT_RULE
        return matched[1]


__all__ = ["DEFAULT_RULE", "MATCHERS", "ReasoningRule", "ReasoningTable", "parse_rule"]
