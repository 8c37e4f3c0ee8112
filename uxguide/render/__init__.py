"""Document assembly and text rendering for design systems and search results."""

from .ascii import format_ascii_box
from .documents import DocumentRenderer
from .lint import MarkdownLinter
from .pages import (
    LayoutPreset,
    PageOverrides,
    build_page_overrides,
    detect_page_type,
    infer_layout,
)
from .terminal import render_design_system, render_search, render_stack

__all__ = [
    "DocumentRenderer",
    "LayoutPreset",
    "MarkdownLinter",
    "PageOverrides",
    "build_page_overrides",
    "detect_page_type",
    "format_ascii_box",
    "infer_layout",
    "render_design_system",
    "render_search",
    "render_stack",
]
