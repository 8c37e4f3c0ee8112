"""Tests for page type and layout inference."""

from __future__ import annotations

import pytest

from uxguide.render.pages import (
    DENSE_LAYOUT,
    GENERAL_PAGE_TYPE,
    MINIMAL_LAYOUT,
    PAGE_RECOMMENDATIONS,
    STANDARD_LAYOUT,
    build_page_overrides,
    detect_page_type,
    infer_layout,
    page_title,
)


@pytest.mark.parametrize(
    ("context", "expected"),
    [
        ("admin analytics dashboard", "Dashboard"),
        ("login page with password reset", "Auth"),
        ("pricing plans comparison", "Pricing"),
        ("checkout for our blog", "Checkout"),
        ("xyzzy foobar baz", GENERAL_PAGE_TYPE),
    ],
)
def test_detect_page_type(context: str, expected: str) -> None:
    assert detect_page_type(context) == expected


def test_detect_page_type_falls_back_to_top_style() -> None:
    styles = [
        {"Best For": "Operational dashboards and admin tools"},
        {"Best For": "Blogs and articles"},
    ]

    assert detect_page_type("xyzzy", styles) == "Dashboard"
    assert detect_page_type("xyzzy", []) == GENERAL_PAGE_TYPE


def test_infer_layout() -> None:
    assert infer_layout(None) is STANDARD_LAYOUT
    assert infer_layout([{"Best For": "Enterprise dashboards"}]) is DENSE_LAYOUT
    assert infer_layout([{"Keywords": "Clean, simple"}]) is MINIMAL_LAYOUT
    assert infer_layout([{"Keywords": "Clean data tables"}]) is DENSE_LAYOUT
    assert infer_layout([{"Keywords": "Vibrant gradients"}]) is STANDARD_LAYOUT


def test_page_title() -> None:
    assert page_title("user-settings_page") == "User Settings Page"


def test_build_page_overrides() -> None:
    overrides = build_page_overrides("checkout", "E-commerce")

    assert overrides.page_name == "checkout"
    assert overrides.title == "Checkout"
    assert overrides.page_type == "Checkout"
    assert overrides.layout is STANDARD_LAYOUT
    assert overrides.recommendations == list(PAGE_RECOMMENDATIONS["Checkout"])


def test_build_page_overrides_unknown_page_has_no_recommendations() -> None:
    overrides = build_page_overrides("xyzzy", "plugh")

    assert overrides.page_type == GENERAL_PAGE_TYPE
    assert overrides.recommendations == []


def test_detect_page_type_fallback_with_style_best_for() -> None:
    assert detect_page_type("xyzzy foobar", [{"Best For": "SaaS dashboard analytics"}]) == "Dashboard"


def test_inference_tolerates_missing_input() -> None:
    assert detect_page_type(None) == GENERAL_PAGE_TYPE
    assert detect_page_type("", [{"Style Category": "Minimalism"}]) == GENERAL_PAGE_TYPE
    assert detect_page_type(None, [{"Best For": "Operational dashboards and admin tools"}]) == "Dashboard"
    assert infer_layout([]) is STANDARD_LAYOUT
    assert infer_layout([{}]) is STANDARD_LAYOUT
