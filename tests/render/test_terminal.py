"""Tests for compact and expanded terminal views."""

from __future__ import annotations

from uxguide.models import DesignSystem, SearchResult, StackSearchResult
from uxguide.render.terminal import MAX_CELL_CHARS, render_design_system, render_search, render_stack


def test_render_search_compact() -> None:
    result = SearchResult(
        domain="ux",
        query="contrast",
        file="ux-guidelines.csv",
        count=2,
        results=[
            {"Category": "Accessibility", "Issue": "Color Contrast", "Severity": "HIGH"},
            {"Category": "Layout"},
        ],
    )

    assert render_search(result) == "  ✓ ux (2 results)\n    • Accessibility (HIGH)\n    • Layout"


def test_render_search_expanded_truncates_long_values() -> None:
    long_value = "x" * (MAX_CELL_CHARS + 50)
    result = SearchResult(
        domain="style",
        query="glass",
        file="styles.csv",
        count=1,
        results=[{"Style Category": "Glassmorphism", "Keywords": long_value, "Type": ""}],
    )

    output = render_search(result, expanded=True)

    assert output.startswith('  style - "glass" - 1 results\n')
    assert "  Result 1" in output
    assert "    Style Category: Glassmorphism" in output
    assert f"    Keywords: {'x' * MAX_CELL_CHARS}..." in output
    assert "Type:" not in output


def test_render_stack_compact() -> None:
    result = StackSearchResult(
        stack="react",
        query="keys",
        file="stacks/react.csv",
        count=1,
        results=[{"Guideline": "Stable Keys", "Severity": "HIGH"}],
    )

    assert render_stack(result) == "  ✓ react (1 results)\n    • Stable Keys (HIGH)"


def test_render_design_system(design_system: DesignSystem) -> None:
    compact = render_design_system(design_system)
    expanded = render_design_system(design_system, expanded=True, persisted="design-system/test-app/MASTER.md")

    assert compact.splitlines()[0] == "  ✓ Test App (SaaS (General))"
    assert "Severity" not in compact
    assert "    Rule if_ux_focused: prioritize-minimalism" in expanded
    assert "    Severity: HIGH" in expanded
    assert expanded.endswith("    Saved: design-system/test-app/MASTER.md")
