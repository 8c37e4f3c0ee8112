"""Loads the CSV knowledge base and fits one ranker per collection."""

from __future__ import annotations

import csv
import io
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, List, Mapping, Sequence, Tuple

from ..logging import get_logger
from ..models import Row
from ..rank import BM25Ranker
from .constants import (
    DOMAIN_CONFIG,
    REASONING_FILE,
    STACK_FILES,
    STACK_OUTPUT_COLUMNS,
    STACK_SEARCH_COLUMNS,
)

_DEFAULT_DATA_DIR = Path(__file__).resolve().parent.parent / "data"

logger = get_logger("kb")


class KnowledgeBaseError(RuntimeError):
    """Raised when a collection cannot be located or read."""


@dataclass(frozen=True)
class Collection:
    """Rows of one CSV file plus the ranker fitted over their search text.

    ``rows[i]`` is the i-th document the ranker was fitted on.
    """

    name: str
    file: str
    rows: Tuple[Row, ...]
    ranker: BM25Ranker
    search_columns: Tuple[str, ...]
    output_columns: Tuple[str, ...]


@dataclass(frozen=True)
class KnowledgeBase:
    """All collections, built once and shared read-only by search and generation."""

    domains: Mapping[str, Collection] = field(default_factory=dict)
    stacks: Mapping[str, Collection] = field(default_factory=dict)
    reasoning: Tuple[Row, ...] = ()


def default_data_dir() -> Path:
    return _DEFAULT_DATA_DIR


def parse_csv(text: str) -> List[Row]:
    """Parse CSV text into row mappings keyed by the header line."""
    if not text.strip():
        return []
    records = list(csv.reader(io.StringIO(text, newline="")))
    if len(records) < 2:
        return []
    headers = records[0]
    rows: List[Row] = []
    for record in records[1:]:
        if not record or record == [""]:
            continue
        rows.append(
            {header: (record[index] if index < len(record) else "") for index, header in enumerate(headers)}
        )
    return rows


def build_collection(
    name: str,
    rows: Iterable[Row],
    search_columns: Sequence[str],
    output_columns: Sequence[str],
    *,
    file: str = "",
) -> Collection:
    """Fit a ranker over ``rows`` and wrap everything in a collection."""
    frozen_rows = tuple(dict(row) for row in rows)
    documents = [" ".join(row.get(column, "") for column in search_columns) for row in frozen_rows]
    ranker = BM25Ranker()
    ranker.fit(documents)
    return Collection(
        name=name,
        file=file,
        rows=frozen_rows,
        ranker=ranker,
        search_columns=tuple(search_columns),
        output_columns=tuple(output_columns),
    )


def load_domain(domain: str, data_dir: Path) -> Collection:
    config = DOMAIN_CONFIG.get(domain)
    if config is None:
        raise KnowledgeBaseError(f"Unknown domain: {domain}")
    rows = _read_rows(Path(data_dir) / config.file)
    return build_collection(
        domain,
        rows,
        config.search_columns,
        config.output_columns,
        file=config.file,
    )


def load_stack(stack: str, data_dir: Path) -> Collection:
    file = STACK_FILES.get(stack)
    if file is None:
        raise KnowledgeBaseError(f"Unknown stack: {stack}")
    rows = _read_rows(Path(data_dir) / file)
    return build_collection(stack, rows, STACK_SEARCH_COLUMNS, STACK_OUTPUT_COLUMNS, file=file)


def load_reasoning(data_dir: Path) -> Tuple[Row, ...]:
    return tuple(_read_rows(Path(data_dir) / REASONING_FILE))


def load_knowledge_base(data_dir: Path | str | None = None) -> KnowledgeBase:
    """Load every domain, stack and the reasoning table from ``data_dir``."""
    root = Path(data_dir).expanduser() if data_dir is not None else _DEFAULT_DATA_DIR
    if not root.is_dir():
        raise KnowledgeBaseError(f"Knowledge base directory not found: {root}")

    domains = {name: load_domain(name, root) for name in DOMAIN_CONFIG}
    stacks = {name: load_stack(name, root) for name in STACK_FILES}
    reasoning = load_reasoning(root)

    logger.debug(
        "Loaded %d domains (%d rows), %d stacks (%d rows), %d reasoning rules from %s",
        len(domains),
        sum(len(collection.rows) for collection in domains.values()),
        len(stacks),
        sum(len(collection.rows) for collection in stacks.values()),
        len(reasoning),
        root,
    )
    return KnowledgeBase(domains=domains, stacks=stacks, reasoning=reasoning)


def _read_rows(path: Path) -> List[Row]:
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise KnowledgeBaseError(f"Failed to read {path}: {exc}") from exc
    return parse_csv(text)


__all__ = [
    "Collection",
    "KnowledgeBase",
    "KnowledgeBaseError",
    "build_collection",
    "default_data_dir",
    "load_domain",
    "load_knowledge_base",
    "load_reasoning",
    "load_stack",
    "parse_csv",
]
