"""BM25 ranking over small in-memory corpora."""

from __future__ import annotations

import math
import re
from collections import Counter
from typing import Dict, List, Sequence, Tuple

_NON_WORD_PATTERN = re.compile(r"[^\w\s]")


def tokenize(text: str) -> List[str]:
    """Lowercase, strip punctuation and drop tokens of two characters or fewer."""
    cleaned = _NON_WORD_PATTERN.sub(" ", str(text).lower())
    return [token for token in cleaned.split() if len(token) > 2]


class BM25Ranker:
    """Okapi BM25 scorer fitted once over an ordered list of documents."""

    def __init__(self, k1: float = 1.5, b: float = 0.75) -> None:
        self.k1 = k1
        self.b = b
        self._doc_lengths: List[int] = []
        self._term_freqs: List[Counter[str]] = []
        self._avgdl = 0.0
        self._idf: Dict[str, float] = {}

    def __len__(self) -> int:
        return len(self._doc_lengths)

    @property
    def avgdl(self) -> float:
        return self._avgdl

    def idf(self, term: str) -> float:
        return self._idf.get(term, 0.0)

    def fit(self, documents: Sequence[str]) -> None:
        """Index ``documents``; replaces any previously fitted state."""
        corpus = [tokenize(document) for document in documents]
        doc_lengths = [len(tokens) for tokens in corpus]
        term_freqs = [Counter(tokens) for tokens in corpus]
        total = len(corpus)

        doc_freqs: Counter[str] = Counter()
        for freqs in term_freqs:
            doc_freqs.update(freqs.keys())

        idf = {
            term: math.log((total - df + 0.5) / (df + 0.5) + 1)
            for term, df in doc_freqs.items()
        }
        avgdl = sum(doc_lengths) / total if total else 0.0

        self._doc_lengths = doc_lengths
        self._term_freqs = term_freqs
        self._avgdl = avgdl
        self._idf = idf

    def score(self, query: str) -> List[Tuple[int, float]]:
        """Return ``(document index, score)`` for every document, best first."""
        query_tokens = [token for token in tokenize(query) if token in self._idf]
        scores: List[Tuple[int, float]] = []
        for index, freqs in enumerate(self._term_freqs):
            total = 0.0
            for token in query_tokens:
                tf = freqs.get(token, 0)
                if not tf:
                    continue
                # tf > 0 implies a non-empty corpus, so avgdl is positive here.
                length_norm = 1 - self.b + self.b * self._doc_lengths[index] / self._avgdl
                total += self._idf[token] * (tf * (self.k1 + 1)) / (tf + self.k1 * length_norm)
            scores.append((index, total))
        # sorted() is stable, so equal scores keep corpus order.
        return sorted(scores, key=lambda item: item[1], reverse=True)


__all__ = ["BM25Ranker", "tokenize"]
