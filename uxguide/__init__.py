"""Curated UI/UX knowledge lookup and design system recommendations."""

from .design import DesignSystemGenerator
from .kb import KnowledgeBase, load_knowledge_base
from .search import detect_domain, search_domain, search_stack

__all__ = [
    "DesignSystemGenerator",
    "KnowledgeBase",
    "detect_domain",
    "load_knowledge_base",
    "search_domain",
    "search_stack",
]
