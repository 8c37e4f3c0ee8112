"""Composes a design system from several knowledge base searches."""

from __future__ import annotations

import json
from typing import Dict, Optional, Sequence

from ..kb.loader import KnowledgeBase
from ..logging import get_logger
from ..models import (
    ColorPalette,
    DesignSystem,
    PatternChoice,
    Row,
    StyleChoice,
    TypographyPairing,
)
from ..search import search_domain
from .reasoning import ReasoningRule, ReasoningTable

# Requested result counts per domain. Only the first color row is consumed.
SEARCH_LIMITS: Dict[str, int] = {
    "product": 1,
    "style": 3,
    "color": 2,
    "typography": 2,
    "landing": 2,
}

DEFAULT_CATEGORY = "General"

# Overlap weights for the fallback style selection.
NAME_WEIGHT = 10
KEYWORDS_WEIGHT = 3
ANYWHERE_WEIGHT = 1


class DesignSystemGenerator:
    """Turns a free-text product description into a design system recommendation."""

    def __init__(self, kb: KnowledgeBase) -> None:
        self.kb = kb
        self.reasoning = ReasoningTable(kb.reasoning)
        self.logger = get_logger("design")

    def generate(self, query: str, project_name: Optional[str] = None) -> DesignSystem:
        product = search_domain(query, "product", SEARCH_LIMITS["product"], self.kb)
        category = DEFAULT_CATEGORY
        if product.results:
            category = product.results[0].get("Product Type", DEFAULT_CATEGORY)

        rule = self.reasoning.find(category)
        self.logger.debug("Category %r resolved to rule %r", category, rule.category or "default")

        style_query = query
        if rule.style_priority:
            style_query = f"{query} {' '.join(rule.style_priority[:2])}"

        styles = search_domain(style_query, "style", SEARCH_LIMITS["style"], self.kb)
        colors = search_domain(query, "color", SEARCH_LIMITS["color"], self.kb)
        typography = search_domain(query, "typography", SEARCH_LIMITS["typography"], self.kb)
        landing = search_domain(query, "landing", SEARCH_LIMITS["landing"], self.kb)

        best_style = select_best_match(styles.results, rule.style_priority)
        best_color = colors.results[0] if colors.results else {}
        best_typography = typography.results[0] if typography.results else {}
        best_landing = landing.results[0] if landing.results else {}

        return _assemble(
            project_name=project_name or query.upper(),
            category=category,
            rule=rule,
            style=best_style,
            color=best_color,
            typography=best_typography,
            landing=best_landing,
        )


def select_best_match(results: Sequence[Row], priority_keywords: Sequence[str]) -> Row:
    """Choose the style row that best honours the rule's style priorities."""
    if not results:
        return {}
    if not priority_keywords:
        return results[0]

    for priority in priority_keywords:
        wanted = priority.lower().strip()
        for result in results:
            name = result.get("Style Category", "").lower()
            if wanted in name or name in wanted:
                return result

    best_score = -1
    best_result = results[0]
    for result in results:
        name = result.get("Style Category", "").lower()
        keywords = result.get("Keywords", "").lower()
        serialised = json.dumps(result, ensure_ascii=False).lower()
        score = 0
        for keyword in priority_keywords:
            wanted = keyword.lower().strip()
            if wanted in name:
                score += NAME_WEIGHT
            elif wanted in keywords:
                score += KEYWORDS_WEIGHT
            elif wanted in serialised:
                score += ANYWHERE_WEIGHT
        if score > best_score:
            best_score = score
            best_result = result
    return best_result


def _assemble(
    *,
    project_name: str,
    category: str,
    rule: ReasoningRule,
    style: Row,
    color: Row,
    typography: Row,
    landing: Row,
) -> DesignSystem:
    style_effects = style.get("Effects & Animation", "")
    return DesignSystem(
        project_name=project_name,
        category=category,
        pattern=PatternChoice(
            name=landing.get("Pattern Name", rule.pattern),
            sections=landing.get("Section Order", "Hero > Features > CTA"),
            cta_placement=landing.get("Primary CTA Placement", "Above fold"),
            color_strategy=landing.get("Color Strategy", ""),
            conversion=landing.get("Conversion Optimization", ""),
        ),
        style=StyleChoice(
            name=style.get("Style Category", "Minimalism"),
            type=style.get("Type", "General"),
            effects=style_effects,
            keywords=style.get("Keywords", ""),
            best_for=style.get("Best For", ""),
            performance=style.get("Performance", ""),
            accessibility=style.get("Accessibility", ""),
        ),
        colors=ColorPalette(
            primary=color.get("Primary (Hex)", "#2563EB"),
            secondary=color.get("Secondary (Hex)", "#3B82F6"),
            cta=color.get("CTA (Hex)", "#F97316"),
            background=color.get("Background (Hex)", "#F8FAFC"),
            text=color.get("Text (Hex)", "#1E293B"),
            notes=color.get("Notes", ""),
        ),
        typography=TypographyPairing(
            heading=typography.get("Heading Font", "Inter"),
            body=typography.get("Body Font", "Inter"),
            mood=typography.get("Mood/Style Keywords", rule.typography_mood),
            best_for=typography.get("Best For", ""),
            google_fonts_url=typography.get("Google Fonts URL", ""),
            css_import=typography.get("CSS Import", ""),
        ),
        key_effects=style_effects or rule.key_effects,
        anti_patterns=rule.anti_patterns,
        decision_rules=dict(rule.decision_rules),
        severity=rule.severity,
    )


__all__ = ["DesignSystemGenerator", "SEARCH_LIMITS", "select_best_match"]
