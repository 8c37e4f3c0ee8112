from __future__ import annotations

import pytest

from uxguide.kb import KnowledgeBase, load_knowledge_base
from uxguide.models import (
    ColorPalette,
    DesignSystem,
    PatternChoice,
    StyleChoice,
    TypographyPairing,
)


@pytest.fixture(scope="session")
def knowledge_base() -> KnowledgeBase:
    """Load the packaged knowledge base once for the whole session."""
    return load_knowledge_base()


@pytest.fixture
def design_system() -> DesignSystem:
    """Provide a fully populated design system with predictable values."""
    return DesignSystem(
        project_name="Test App",
        category="SaaS (General)",
        pattern=PatternChoice(
            name="Hero + Features + CTA",
            sections="Hero > Features > Pricing > CTA",
            cta_placement="Hero (sticky) + Bottom",
            color_strategy="Brand primary hero with accent CTA",
            conversion="Clear value prop in first 5 seconds",
        ),
        style=StyleChoice(
            name="Glassmorphism",
            type="General",
            effects="Backdrop blur (10-20px)",
            keywords="Frosted glass, transparent, layered",
            best_for="Modern SaaS, financial dashboards",
            performance="Good",
            accessibility="Ensure 4.5:1",
        ),
        colors=ColorPalette(
            primary="#112233",
            secondary="#445566",
            cta="#FF5500",
            background="#FAFAFA",
            text="#101010",
            notes="Trust blue with orange CTA",
        ),
        typography=TypographyPairing(
            heading="Poppins",
            body="Open Sans",
            mood="modern, professional",
            best_for="SaaS, startups",
            google_fonts_url="https://fonts.google.com/share?selection.family=Poppins",
            css_import="@import url('https://fonts.googleapis.com/css2?family=Poppins&display=swap');",
        ),
        key_effects="Backdrop blur (10-20px)",
        anti_patterns="Excessive animation + Dark mode by default",
        decision_rules={"if_ux_focused": "prioritize-minimalism"},
        severity="HIGH",
    )
