"""Core data models shared across uxguide components."""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any, Dict, List

Row = Dict[str, str]


@dataclass
class SearchResult:
    """Ranked, projected rows from one domain collection."""

    domain: str
    query: str
    file: str
    count: int
    results: List[Row] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass
class StackSearchResult:
    """Ranked, projected rows from one stack guideline collection."""

    stack: str
    query: str
    file: str
    count: int
    results: List[Row] = field(default_factory=list)
    domain: str = "stack"

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class PatternChoice:
    name: str
    sections: str
    cta_placement: str
    color_strategy: str
    conversion: str


@dataclass(frozen=True)
class StyleChoice:
    name: str
    type: str
    effects: str
    keywords: str
    best_for: str
    performance: str
    accessibility: str


@dataclass(frozen=True)
class ColorPalette:
    primary: str
    secondary: str
    cta: str
    background: str
    text: str
    notes: str


@dataclass(frozen=True)
class TypographyPairing:
    heading: str
    body: str
    mood: str
    best_for: str
    google_fonts_url: str
    css_import: str


@dataclass(frozen=True)
class DesignSystem:
    """Composed design system recommendation for a single query."""

    project_name: str
    category: str
    pattern: PatternChoice
    style: StyleChoice
    colors: ColorPalette
    typography: TypographyPairing
    key_effects: str
    anti_patterns: str
    decision_rules: Dict[str, Any]
    severity: str

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    def summary(self) -> str:
        """One-line digest used when injecting the active design system."""
        colors = self.colors
        return (
            f"{self.project_name}: {self.style.name} | "
            f"{colors.primary} {colors.secondary} {colors.cta} | "
            f"{self.typography.heading}/{self.typography.body}"
        )


__all__ = [
    "ColorPalette",
    "DesignSystem",
    "PatternChoice",
    "Row",
    "SearchResult",
    "StackSearchResult",
    "StyleChoice",
    "TypographyPairing",
]
