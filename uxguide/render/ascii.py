"""Boxed plain-text rendering of a design system."""

from __future__ import annotations

from typing import List

from ..models import DesignSystem
from .documents import split_anti_patterns

BOX_WIDTH = 90


def wrap_text(text: str, prefix: str, width: int = BOX_WIDTH) -> List[str]:
    """Greedy word wrap; continuation lines repeat ``prefix``."""
    words = text.split()
    if not words:
        return []
    lines: List[str] = []
    current = prefix
    for word in words:
        if current == prefix:
            candidate = prefix + word
        else:
            candidate = f"{current} {word}"
        if len(candidate) <= width - 2 or current == prefix:
            current = candidate
        else:
            lines.append(current)
            current = prefix + word
    if current != prefix:
        lines.append(current)
    return lines


def format_ascii_box(ds: DesignSystem) -> str:
    border = "+" + "-" * (BOX_WIDTH - 1) + "+"
    body: List[str] = []

    def add(text: str = "") -> None:
        body.append(text)

    add(f"  TARGET: {ds.project_name} - RECOMMENDED DESIGN SYSTEM")
    add()
    add(f"  PATTERN: {ds.pattern.name}")
    if ds.pattern.conversion:
        body.extend(wrap_text(ds.pattern.conversion, "     Conversion: "))
    if ds.pattern.cta_placement:
        add(f"     CTA: {ds.pattern.cta_placement}")
    sections = [part.strip() for part in ds.pattern.sections.split(">") if part.strip()]
    if sections:
        add("     Sections:")
        for index, section in enumerate(sections, 1):
            add(f"       {index}. {section}")
    add()
    add(f"  STYLE: {ds.style.name}")
    body.extend(wrap_text(ds.style.keywords, "     Keywords: "))
    body.extend(wrap_text(ds.style.best_for, "     Best For: "))
    if ds.style.performance or ds.style.accessibility:
        add(f"     Performance: {ds.style.performance} | Accessibility: {ds.style.accessibility}")
    add()
    add("  COLORS:")
    add(f"     Primary:    {ds.colors.primary}")
    add(f"     Secondary:  {ds.colors.secondary}")
    add(f"     CTA:        {ds.colors.cta}")
    add(f"     Background: {ds.colors.background}")
    add(f"     Text:       {ds.colors.text}")
    body.extend(wrap_text(ds.colors.notes, "     Notes: "))
    add()
    add(f"  TYPOGRAPHY: {ds.typography.heading} / {ds.typography.body}")
    body.extend(wrap_text(ds.typography.mood, "     Mood: "))
    body.extend(wrap_text(ds.typography.best_for, "     Best For: "))
    if ds.typography.google_fonts_url:
        add(f"     Google Fonts: {ds.typography.google_fonts_url}")
    add()
    if ds.key_effects:
        add("  KEY EFFECTS:")
        body.extend(wrap_text(ds.key_effects, "     "))
        add()
    anti_patterns = split_anti_patterns(ds.anti_patterns)
    if anti_patterns:
        add("  AVOID (Anti-patterns):")
        body.extend(wrap_text(" | ".join(anti_patterns), "     "))
        add()
    add("  PRE-DELIVERY CHECKLIST:")
    for item in (
        "No emojis as icons (use SVG: Heroicons/Lucide)",
        "cursor-pointer on all clickable elements",
        "Hover states with smooth transitions (150-300ms)",
        "Light mode: text contrast 4.5:1 minimum",
        "Focus states visible for keyboard nav",
        "prefers-reduced-motion respected",
        "Responsive: 375px, 768px, 1024px, 1440px",
    ):
        add(f"     [ ] {item}")
    add()

    lines = [border]
    lines.extend(f"|{text[: BOX_WIDTH - 1].ljust(BOX_WIDTH - 1)}|" for text in body)
    lines.append(border)
    return "\n".join(lines)


__all__ = ["BOX_WIDTH", "format_ascii_box", "wrap_text"]
