"""Compact and expanded plain-text views of tool results."""

from __future__ import annotations

from typing import List, Mapping, Optional, Sequence

from ..models import DesignSystem, SearchResult, StackSearchResult

MAX_CELL_CHARS = 200


def _truncate(value: str, limit: int = MAX_CELL_CHARS) -> str:
    return value if len(value) <= limit else value[:limit] + "..."


def _expanded_rows(rows: Sequence[Mapping[str, str]]) -> List[str]:
    lines: List[str] = []
    for index, row in enumerate(rows, 1):
        lines.append(f"  Result {index}")
        for key, value in row.items():
            if value:
                lines.append(f"    {key}: {_truncate(value)}")
        lines.append("")
    return lines


def render_search(result: SearchResult, *, expanded: bool = False) -> str:
    if not expanded:
        lines = [f"  ✓ {result.domain} ({result.count} results)"]
        for row in result.results:
            first = next(iter(row.values()), "")
            severity = row.get("Severity", "")
            label = f" ({severity})" if severity else ""
            lines.append(f"    • {first}{label}")
        return "\n".join(lines)

    lines = [f'  {result.domain} - "{result.query}" - {result.count} results', ""]
    lines.extend(_expanded_rows(result.results))
    return "\n".join(lines).rstrip() + "\n"


def render_stack(result: StackSearchResult, *, expanded: bool = False) -> str:
    if not expanded:
        lines = [f"  ✓ {result.stack} ({result.count} results)"]
        for row in result.results:
            guideline = row.get("Guideline", "")
            severity = row.get("Severity", "")
            label = f" ({severity})" if severity else ""
            lines.append(f"    • {guideline}{label}")
        return "\n".join(lines)

    lines = [f'  {result.stack} - "{result.query}" - {result.count} results', ""]
    lines.extend(_expanded_rows(result.results))
    return "\n".join(lines).rstrip() + "\n"


def render_design_system(
    ds: DesignSystem, *, expanded: bool = False, persisted: Optional[str] = None
) -> str:
    lines = [
        f"  ✓ {ds.project_name} ({ds.category})",
        f"    Style: {ds.style.name} | Pattern: {ds.pattern.name}",
        f"    Colors: {ds.colors.primary} {ds.colors.secondary} {ds.colors.cta}",
        f"    Typography: {ds.typography.heading} / {ds.typography.body}",
    ]
    if expanded:
        lines.append(f"    Background/Text: {ds.colors.background} / {ds.colors.text}")
        if ds.typography.mood:
            lines.append(f"    Mood: {_truncate(ds.typography.mood)}")
        lines.append(f"    Sections: {ds.pattern.sections}")
        lines.append(f"    CTA: {ds.pattern.cta_placement}")
        if ds.key_effects:
            lines.append(f"    Effects: {_truncate(ds.key_effects)}")
        if ds.anti_patterns:
            lines.append(f"    Avoid: {_truncate(ds.anti_patterns)}")
        for key, value in ds.decision_rules.items():
            lines.append(f"    Rule {key}: {value}")
        lines.append(f"    Severity: {ds.severity}")
    if persisted:
        lines.append(f"    Saved: {persisted}")
    return "\n".join(lines)


__all__ = ["render_design_system", "render_search", "render_stack"]
