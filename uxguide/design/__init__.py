"""Design system composition."""

from .generator import DesignSystemGenerator, select_best_match
from .reasoning import DEFAULT_RULE, ReasoningRule, ReasoningTable

__all__ = [
    "DEFAULT_RULE",
    "DesignSystemGenerator",
    "ReasoningRule",
    "ReasoningTable",
    "select_best_match",
]
