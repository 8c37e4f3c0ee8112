"""Text ranking primitives."""

from .bm25 import BM25Ranker, tokenize

__all__ = ["BM25Ranker", "tokenize"]
