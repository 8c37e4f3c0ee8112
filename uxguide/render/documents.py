"""Renders design systems into MASTER.md and page override documents."""

from __future__ import annotations

from datetime import UTC, datetime
from pathlib import Path
from typing import List, Optional

from jinja2 import Environment, FileSystemLoader

from ..models import DesignSystem
from .lint import MarkdownLinter
from .pages import PageOverrides

_DEFAULT_TEMPLATES = Path(__file__).with_name("templates")
_TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"


def split_anti_patterns(text: str) -> List[str]:
    return [item.strip() for item in text.split("+") if item.strip()]


class DocumentRenderer:
    """Jinja2-backed renderer; a user ``templates_dir`` shadows the packaged templates."""

    MASTER_TEMPLATE = "master.md.j2"
    PAGE_TEMPLATE = "page.md.j2"

    def __init__(self, templates_dir: Path | None = None, *, linter: MarkdownLinter | None = None) -> None:
        self.templates_dir = templates_dir
        self.linter = linter or MarkdownLinter()
        self._env = self._create_env(templates_dir)

    def render_master(self, ds: DesignSystem, *, generated_at: Optional[datetime] = None) -> str:
        template = self._env.get_template(self.MASTER_TEMPLATE)
        rendered = template.render(
            ds=ds,
            generated=_timestamp(generated_at),
            anti_patterns=split_anti_patterns(ds.anti_patterns),
        )
        return self.linter.lint(rendered)

    def render_page(
        self,
        ds: DesignSystem,
        overrides: PageOverrides,
        *,
        generated_at: Optional[datetime] = None,
    ) -> str:
        template = self._env.get_template(self.PAGE_TEMPLATE)
        rendered = template.render(
            ds=ds,
            page=overrides,
            generated=_timestamp(generated_at),
        )
        return self.linter.lint(rendered)

    @staticmethod
    def _create_env(templates_dir: Path | None) -> Environment:
        directories: List[str] = []
        if templates_dir is not None:
            directories.append(str(templates_dir))
        if str(_DEFAULT_TEMPLATES) not in directories:
            directories.append(str(_DEFAULT_TEMPLATES))
        return Environment(
            loader=FileSystemLoader(directories),
            autoescape=False,
            trim_blocks=True,
            lstrip_blocks=True,
        )


def _timestamp(value: Optional[datetime]) -> str:
    return (value or datetime.now(UTC)).strftime(_TIMESTAMP_FORMAT)


__all__ = ["DocumentRenderer", "split_anti_patterns"]
