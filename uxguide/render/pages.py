"""Page archetype and layout inference for page-specific documents."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Dict, List, Mapping, Optional, Sequence, Tuple

GENERAL_PAGE_TYPE = "General"

# Declaration order breaks ties.
PAGE_TYPES: Tuple[Tuple[str, Tuple[str, ...]], ...] = (
    ("Dashboard", ("dashboard", "admin", "analytics", "metrics", "stats", "monitor", "overview")),
    ("Checkout", ("checkout", "payment", "cart", "purchase", "order", "billing")),
    ("Settings", ("settings", "profile", "account", "preferences", "config")),
    ("Landing", ("landing", "marketing", "homepage", "hero", "promo")),
    ("Auth", ("login", "signin", "sign in", "signup", "sign up", "register", "auth", "password")),
    ("Pricing", ("pricing", "plans", "subscription", "tiers", "packages")),
    ("Blog", ("blog", "article", "post", "news", "story")),
    ("Product", ("product", "detail", "pdp", "shop", "store")),
    ("Search", ("search", "results", "browse", "filter", "catalog")),
    ("Empty", ("empty", "404", "not found", "no results", "zero state")),
)

PAGE_RECOMMENDATIONS: Dict[str, Tuple[str, ...]] = {
    "Dashboard": (
        "Lead with the three to five metrics users check most",
        "Keep filters and date ranges sticky above the data",
        "Use skeleton loaders instead of spinners for widgets",
    ),
    "Checkout": (
        "Show order summary and total at every step",
        "Display trust badges next to the payment form",
        "Keep the number of form fields to the minimum",
    ),
    "Settings": (
        "Group related preferences under clear section headings",
        "Confirm destructive actions with an explicit dialog",
        "Save automatically or show an obvious save state",
    ),
    "Landing": (
        "Place the primary CTA above the fold",
        "Follow the Master section order",
        "Support claims with social proof close to the CTA",
    ),
    "Auth": (
        "Keep the form to a single focused column",
        "Show password requirements before submission",
        "Offer a visible path to account recovery",
    ),
    "Pricing": (
        "Highlight the recommended plan",
        "Make the billing period toggle explicit",
        "Answer common objections in an FAQ below the plans",
    ),
    "Blog": (
        "Limit line length to 65-75 characters",
        "Use generous line height for body text",
        "Show reading time and publish date near the title",
    ),
    "Product": (
        "Keep the add-to-cart action visible while scrolling",
        "Show price, availability and shipping together",
        "Use large zoomable media",
    ),
    "Search": (
        "Echo the query and result count above results",
        "Keep filters reachable without losing scroll position",
        "Provide a helpful empty state with suggestions",
    ),
    "Empty": (
        "Explain why the view is empty",
        "Offer one clear next action",
        "Use illustration sparingly and keep it on-brand",
    ),
}


@dataclass(frozen=True)
class LayoutPreset:
    name: str
    max_width: str
    layout: str
    sections: str


DENSE_LAYOUT = LayoutPreset(
    name="dense",
    max_width="1400px or full-width",
    layout="12-column grid for data flexibility",
    sections="Minimal padding, compact spacing",
)
MINIMAL_LAYOUT = LayoutPreset(
    name="minimal",
    max_width="800px (narrow, focused)",
    layout="Single column, centered",
    sections="Generous padding, ample whitespace",
)
STANDARD_LAYOUT = LayoutPreset(
    name="standard",
    max_width="1200px (standard)",
    layout="Full-width sections, centered content",
    sections="Consistent vertical rhythm between sections",
)

_DENSE_PATTERN = re.compile(r"\b(data|dense|dashboards?|grid|analytics|tables?|enterprise)\b")
_MINIMAL_PATTERN = re.compile(r"\b(minimal|minimalism|simple|clean|single|whitespace|focused)\b")


@dataclass
class PageOverrides:
    """Page-specific deltas layered on top of the Master design system."""

    page_name: str
    title: str
    page_type: str
    layout: LayoutPreset
    recommendations: List[str] = field(default_factory=list)


def detect_page_type(
    context: Optional[str], style_results: Optional[Sequence[Mapping[str, str]]] = None
) -> str:
    """Classify ``context`` into a page archetype, falling back to the top style's "Best For"."""
    page_type = _match_page_type(context)
    if page_type is None and style_results:
        page_type = _match_page_type(style_results[0].get("Best For"))
    return page_type or GENERAL_PAGE_TYPE


def _match_page_type(text: Optional[str]) -> Optional[str]:
    lowered = (text or "").lower()
    best_type: Optional[str] = None
    best_score = 0
    for page_type, keywords in PAGE_TYPES:
        score = sum(1 for keyword in keywords if keyword in lowered)
        if score > best_score:
            best_score = score
            best_type = page_type
    return best_type


def infer_layout(style_results: Optional[Sequence[Mapping[str, str]]]) -> LayoutPreset:
    if not style_results:
        return STANDARD_LAYOUT
    combined = " ".join(
        str(value) for result in style_results for value in result.values()
    ).lower()
    if _DENSE_PATTERN.search(combined):
        return DENSE_LAYOUT
    if _MINIMAL_PATTERN.search(combined):
        return MINIMAL_LAYOUT
    return STANDARD_LAYOUT


def page_title(page: str) -> str:
    spaced = re.sub(r"[-_]", " ", page)
    return re.sub(r"\b\w", lambda match: match.group(0).upper(), spaced)


def build_page_overrides(
    page: str,
    context: str,
    style_results: Optional[Sequence[Mapping[str, str]]] = None,
) -> PageOverrides:
    page_type = detect_page_type(f"{page} {context}", style_results)
    return PageOverrides(
        page_name=page,
        title=page_title(page),
        page_type=page_type,
        layout=infer_layout(style_results),
        recommendations=list(PAGE_RECOMMENDATIONS.get(page_type, ())),
    )


__all__ = [
    "DENSE_LAYOUT",
    "GENERAL_PAGE_TYPE",
    "LayoutPreset",
    "MINIMAL_LAYOUT",
    "PAGE_TYPES",
    "PageOverrides",
    "STANDARD_LAYOUT",
    "build_page_overrides",
    "detect_page_type",
    "infer_layout",
    "page_title",
]
