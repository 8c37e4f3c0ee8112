"""Writes design system documents to disk (MASTER.md plus page overrides)."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from typing import List, Optional

from ..logging import get_logger
from ..models import DesignSystem
from ..render.documents import DocumentRenderer
from ..render.pages import PageOverrides, build_page_overrides

DESIGN_SYSTEM_DIRNAME = "design-system"
MASTER_FILENAME = "MASTER.md"
UNTITLED_SLUG = "untitled"

_UNSAFE = re.compile(r"[^\w-]+")
_DASHES = re.compile(r"-{2,}")

logger = get_logger("persist")


@dataclass
class PersistResult:
    """Locations written by a persist call; the Master file is always first."""

    design_system_dir: Path
    created_files: List[Path] = field(default_factory=list)

    @property
    def master(self) -> Path:
        return self.created_files[0]

    @property
    def page(self) -> Optional[Path]:
        return self.created_files[1] if len(self.created_files) > 1 else None


def slugify(name: str) -> str:
    """Reduce ``name`` to a single path component of word characters and dashes."""
    slug = _DASHES.sub("-", _UNSAFE.sub("-", name.lower())).strip("-")
    return slug or UNTITLED_SLUG


def persist_design_system(
    ds: DesignSystem,
    output_dir: Path,
    *,
    page: Optional[str] = None,
    overrides: Optional[PageOverrides] = None,
    renderer: Optional[DocumentRenderer] = None,
    generated_at: Optional[datetime] = None,
) -> PersistResult:
    """Render and write the Master file and, when ``page`` is set, its override file."""
    renderer = renderer or DocumentRenderer()
    design_system_dir = Path(output_dir) / DESIGN_SYSTEM_DIRNAME / slugify(ds.project_name)
    pages_dir = design_system_dir / "pages"
    pages_dir.mkdir(parents=True, exist_ok=True)

    result = PersistResult(design_system_dir=design_system_dir)

    master_path = design_system_dir / MASTER_FILENAME
    master_path.write_text(renderer.render_master(ds, generated_at=generated_at), encoding="utf-8")
    result.created_files.append(master_path)

    if page:
        page_overrides = overrides or build_page_overrides(page, ds.category)
        page_path = pages_dir / f"{slugify(page)}.md"
        page_path.write_text(
            renderer.render_page(ds, page_overrides, generated_at=generated_at),
            encoding="utf-8",
        )
        result.created_files.append(page_path)

    logger.info("Persisted design system for %s to %s", ds.project_name, design_system_dir)
    return result


__all__ = [
    "DESIGN_SYSTEM_DIRNAME",
    "MASTER_FILENAME",
    "PersistResult",
    "UNTITLED_SLUG",
    "persist_design_system",
    "slugify",
]
