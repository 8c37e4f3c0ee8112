"""Knowledge base configuration and loading."""

from .constants import DOMAIN_NAMES, STACK_NAMES
from .loader import (
    Collection,
    KnowledgeBase,
    KnowledgeBaseError,
    build_collection,
    default_data_dir,
    load_domain,
    load_knowledge_base,
    load_reasoning,
    load_stack,
    parse_csv,
)

__all__ = [
    "Collection",
    "DOMAIN_NAMES",
    "KnowledgeBase",
    "KnowledgeBaseError",
    "STACK_NAMES",
    "build_collection",
    "default_data_dir",
    "load_domain",
    "load_knowledge_base",
    "load_reasoning",
    "load_stack",
    "parse_csv",
]
