"""Collection configuration for the packaged knowledge base."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Tuple


@dataclass(frozen=True)
class DomainConfig:
    """Backing file and column layout of a domain collection."""

    file: str
    search_columns: Tuple[str, ...]
    output_columns: Tuple[str, ...]


_GUIDELINE_OUTPUT: Tuple[str, ...] = (
    "Category",
    "Issue",
    "Platform",
    "Description",
    "Do",
    "Don't",
    "Code Example Good",
    "Code Example Bad",
    "Severity",
)

DOMAIN_CONFIG: Dict[str, DomainConfig] = {
    "style": DomainConfig(
        file="styles.csv",
        search_columns=("Style Category", "Keywords", "Best For", "Type", "AI Prompt Keywords"),
        output_columns=(
            "Style Category",
            "Type",
            "Keywords",
            "Primary Colors",
            "Effects & Animation",
            "Best For",
            "Performance",
            "Accessibility",
            "Framework Compatibility",
            "Complexity",
            "AI Prompt Keywords",
            "CSS/Technical Keywords",
            "Implementation Checklist",
            "Design System Variables",
        ),
    ),
    "color": DomainConfig(
        file="colors.csv",
        search_columns=("Product Type", "Notes"),
        output_columns=(
            "Product Type",
            "Primary (Hex)",
            "Secondary (Hex)",
            "CTA (Hex)",
            "Background (Hex)",
            "Text (Hex)",
            "Notes",
        ),
    ),
    "chart": DomainConfig(
        file="charts.csv",
        search_columns=("Data Type", "Keywords", "Best Chart Type", "Accessibility Notes"),
        output_columns=(
            "Data Type",
            "Keywords",
            "Best Chart Type",
            "Secondary Options",
            "Color Guidance",
            "Accessibility Notes",
            "Library Recommendation",
            "Interactive Level",
        ),
    ),
    "landing": DomainConfig(
        file="landing.csv",
        search_columns=("Pattern Name", "Keywords", "Conversion Optimization", "Section Order"),
        output_columns=(
            "Pattern Name",
            "Keywords",
            "Section Order",
            "Primary CTA Placement",
            "Color Strategy",
            "Conversion Optimization",
        ),
    ),
    "product": DomainConfig(
        file="products.csv",
        search_columns=("Product Type", "Keywords", "Primary Style Recommendation", "Key Considerations"),
        output_columns=(
            "Product Type",
            "Keywords",
            "Primary Style Recommendation",
            "Secondary Styles",
            "Landing Page Pattern",
            "Dashboard Style (if applicable)",
            "Color Palette Focus",
        ),
    ),
    "ux": DomainConfig(
        file="ux-guidelines.csv",
        search_columns=("Category", "Issue", "Description", "Platform"),
        output_columns=_GUIDELINE_OUTPUT,
    ),
    "typography": DomainConfig(
        file="typography.csv",
        search_columns=(
            "Font Pairing Name",
            "Category",
            "Mood/Style Keywords",
            "Best For",
            "Heading Font",
            "Body Font",
        ),
        output_columns=(
            "Font Pairing Name",
            "Category",
            "Heading Font",
            "Body Font",
            "Mood/Style Keywords",
            "Best For",
            "Google Fonts URL",
            "CSS Import",
            "Tailwind Config",
            "Notes",
        ),
    ),
    "icons": DomainConfig(
        file="icons.csv",
        search_columns=("Category", "Icon Name", "Keywords", "Best For"),
        output_columns=(
            "Category",
            "Icon Name",
            "Keywords",
            "Library",
            "Import Code",
            "Usage",
            "Best For",
            "Style",
        ),
    ),
    "react": DomainConfig(
        file="react-performance.csv",
        search_columns=("Category", "Issue", "Keywords", "Description"),
        output_columns=_GUIDELINE_OUTPUT,
    ),
    "web": DomainConfig(
        file="web-interface.csv",
        search_columns=("Category", "Issue", "Keywords", "Description"),
        output_columns=_GUIDELINE_OUTPUT,
    ),
}

STACK_FILES: Dict[str, str] = {
    "html-tailwind": "stacks/html-tailwind.csv",
    "react": "stacks/react.csv",
    "nextjs": "stacks/nextjs.csv",
    "vue": "stacks/vue.csv",
    "svelte": "stacks/svelte.csv",
    "swiftui": "stacks/swiftui.csv",
    "react-native": "stacks/react-native.csv",
    "flutter": "stacks/flutter.csv",
    "shadcn": "stacks/shadcn.csv",
    "jetpack-compose": "stacks/jetpack-compose.csv",
    "astro": "stacks/astro.csv",
    "nuxtjs": "stacks/nuxtjs.csv",
    "nuxt-ui": "stacks/nuxt-ui.csv",
}

STACK_SEARCH_COLUMNS: Tuple[str, ...] = ("Category", "Guideline", "Description", "Do", "Don't")
STACK_OUTPUT_COLUMNS: Tuple[str, ...] = (
    "Category",
    "Guideline",
    "Description",
    "Do",
    "Don't",
    "Code Good",
    "Code Bad",
    "Severity",
    "Docs URL",
)

REASONING_FILE = "ui-reasoning.csv"

DOMAIN_NAMES: Tuple[str, ...] = tuple(DOMAIN_CONFIG)
STACK_NAMES: Tuple[str, ...] = tuple(STACK_FILES)

DEFAULT_DOMAIN = "style"

# Declaration order breaks ties during auto-detection.
DOMAIN_KEYWORDS: Dict[str, Tuple[str, ...]] = {
    "color": ("color", "palette", "hex", "#", "rgb"),
    "chart": (
        "chart", "graph", "visualization", "trend", "bar", "pie", "scatter", "heatmap", "funnel",
    ),
    "landing": (
        "landing", "page", "cta", "conversion", "hero", "testimonial", "pricing", "section",
    ),
    "product": (
        "saas", "ecommerce", "e-commerce", "fintech", "healthcare", "gaming", "portfolio",
        "crypto", "dashboard",
    ),
    "style": (
        "style", "design", "ui", "minimalism", "glassmorphism", "neumorphism", "brutalism",
        "dark mode", "flat", "aurora", "prompt", "css", "implementation", "variable",
        "checklist", "tailwind",
    ),
    "ux": (
        "ux", "usability", "accessibility", "wcag", "touch", "scroll", "animation", "keyboard",
        "navigation", "mobile",
    ),
    "typography": ("font", "typography", "heading", "serif", "sans"),
    "icons": ("icon", "icons", "lucide", "heroicons", "symbol", "glyph", "pictogram", "svg icon"),
    "react": (
        "react", "next.js", "nextjs", "suspense", "memo", "usecallback", "useeffect", "rerender",
        "bundle", "waterfall", "barrel", "dynamic import", "rsc", "server component",
    ),
    "web": (
        "aria", "focus", "outline", "semantic", "virtualize", "autocomplete", "form",
        "input type", "preconnect",
    ),
}


__all__ = [
    "DEFAULT_DOMAIN",
    "DOMAIN_CONFIG",
    "DOMAIN_KEYWORDS",
    "DOMAIN_NAMES",
    "DomainConfig",
    "REASONING_FILE",
    "STACK_FILES",
    "STACK_NAMES",
    "STACK_OUTPUT_COLUMNS",
    "STACK_SEARCH_COLUMNS",
]
