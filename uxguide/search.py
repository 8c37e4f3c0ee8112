"""Domain and stack search over the loaded knowledge base."""

from __future__ import annotations

from typing import List, Optional

from .kb.constants import DEFAULT_DOMAIN, DOMAIN_KEYWORDS
from .kb.loader import Collection, KnowledgeBase
from .logging import get_logger
from .models import Row, SearchResult, StackSearchResult

logger = get_logger("search")


def detect_domain(query: str) -> str:
    """Pick the domain whose keywords occur most often in ``query``."""
    lowered = query.lower()
    best_domain = DEFAULT_DOMAIN
    best_score = 0
    for domain, keywords in DOMAIN_KEYWORDS.items():
        score = sum(1 for keyword in keywords if keyword in lowered)
        if score > best_score:
            best_score = score
            best_domain = domain
    return best_domain


def search_domain(
    query: str,
    domain: Optional[str],
    max_results: int,
    kb: KnowledgeBase,
) -> SearchResult:
    """Rank a domain collection against ``query``; ``domain=None`` auto-detects."""
    resolved = domain or detect_domain(query)
    collection = kb.domains.get(resolved)
    if collection is None:
        logger.debug("No collection for domain %r", resolved)
        return SearchResult(domain=resolved, query=query, file="", count=0, results=[])

    results = _rank(collection, query, max_results)
    logger.debug("Domain %s matched %d rows for %r", resolved, len(results), query)
    return SearchResult(
        domain=resolved,
        query=query,
        file=collection.file,
        count=len(results),
        results=results,
    )


def search_stack(
    query: str,
    stack: str,
    max_results: int,
    kb: KnowledgeBase,
) -> StackSearchResult:
    """Rank one stack's guidelines against ``query``."""
    collection = kb.stacks.get(stack)
    if collection is None:
        logger.debug("No collection for stack %r", stack)
        return StackSearchResult(stack=stack, query=query, file="", count=0, results=[])

    results = _rank(collection, query, max_results)
    logger.debug("Stack %s matched %d rows for %r", stack, len(results), query)
    return StackSearchResult(
        stack=stack,
        query=query,
        file=collection.file,
        count=len(results),
        results=results,
    )


def _rank(collection: Collection, query: str, max_results: int) -> List[Row]:
    results: List[Row] = []
    for index, score in collection.ranker.score(query):
        if score <= 0 or len(results) >= max_results:
            break
        row = collection.rows[index]
        results.append(
            {column: row[column] for column in collection.output_columns if column in row}
        )
    return results


__all__ = ["detect_domain", "search_domain", "search_stack"]
