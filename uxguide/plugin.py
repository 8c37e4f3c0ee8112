"""Tool-calling host integration: tool specs, parameter models and session hooks."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Callable, Dict, List, Literal, Mapping, Optional, Protocol, Sequence, Type

from pydantic import BaseModel, Field

from .config import UxGuideConfig, load_config
from .design import DesignSystemGenerator
from .kb import KnowledgeBase, load_knowledge_base
from .kb.constants import DOMAIN_NAMES, STACK_NAMES
from .logging import get_logger
from .render.ascii import format_ascii_box
from .render.documents import DocumentRenderer
from .render.pages import build_page_overrides
from .search import search_domain, search_stack
from .stores.persist import persist_design_system

SUPERSEDED_TEXT = "(superseded by later iteration)"
DESIGN_SYSTEM_TOOL = "design_system"
PROMPT_EVENT = "before_agent_start"

StackName = Literal[STACK_NAMES]  # type: ignore[valid-type]
DomainName = Literal[DOMAIN_NAMES]  # type: ignore[valid-type]


class DesignSystemParams(BaseModel):
    query: str = Field(..., min_length=1, description="Descriptive query: product type, industry, mood, keywords")
    project_name: Optional[str] = Field(None, description="Project name for the design system")
    stack: Optional[StackName] = None
    format: Optional[Literal["markdown", "ascii"]] = None
    persist: bool = Field(False, description="Save design system to design-system/<project>/MASTER.md")
    page: Optional[str] = Field(None, description="Generate page-specific override file")


class SearchParams(BaseModel):
    query: str = Field(..., min_length=1, description="Search keywords")
    domain: Optional[DomainName] = None
    max_results: Optional[int] = Field(None, ge=1, description="Max results, default 3")


class StackGuideParams(BaseModel):
    query: str = Field(..., min_length=1, description="What you need guidance on")
    stack: StackName
    max_results: Optional[int] = Field(None, ge=1, description="Max results, default 3")


@dataclass
class ToolResult:
    """Text shown to the model plus structured details for renderers."""

    content: str
    details: Dict[str, Any] = field(default_factory=dict)


@dataclass
class ToolSpec:
    name: str
    label: str
    description: str
    parameters: Type[BaseModel]
    execute: Callable[[Mapping[str, Any]], ToolResult]


class PluginHost(Protocol):
    def register_tool(self, spec: ToolSpec) -> None: ...

    def on(self, event: str, handler: Callable[..., Any]) -> None: ...


class UiUxPlugin:
    """Exposes design_system, ui_search and ui_stack_guide over a shared knowledge base."""

    def __init__(
        self,
        kb: KnowledgeBase,
        *,
        config: UxGuideConfig | None = None,
        cwd: Path | None = None,
    ) -> None:
        self.kb = kb
        self.cwd = Path(cwd) if cwd is not None else Path.cwd()
        self.config = config or UxGuideConfig(root=self.cwd)
        self.generator = DesignSystemGenerator(kb)
        self.active_design_system: Optional[Dict[str, str]] = None
        self.logger = get_logger("plugin")

    # ------------------------------------------------------------------
    # Tools

    def design_system(self, params: DesignSystemParams) -> ToolResult:
        ds = self.generator.generate(params.query, params.project_name)
        details: Dict[str, Any] = {
            "design_system": ds.to_dict(),
            "query": params.query,
        }

        stack = params.stack or self.config.design_system.default_stack
        stack_rows: List[Dict[str, str]] = []
        if stack:
            stack_rows = search_stack(params.query, stack, self.config.search.max_results, self.kb).results
            details["stack"] = {"name": stack, "results": stack_rows}

        if params.persist:
            overrides = None
            if params.page:
                page_styles = search_domain(f"{params.page} {params.query}", "style", 3, self.kb)
                overrides = build_page_overrides(params.page, params.query, page_styles.results)
            result = persist_design_system(
                ds,
                self.config.output_dir or self.cwd,
                page=params.page,
                overrides=overrides,
                renderer=DocumentRenderer(self.config.templates_dir),
            )
            details["persisted"] = {
                "master": str(result.master),
                "page": str(result.page) if result.page else None,
            }
            self.active_design_system = {"summary": ds.summary(), "path": str(result.master)}

        output_format = params.format or self.config.design_system.default_format
        if output_format == "ascii":
            lines = [format_ascii_box(ds)]
        else:
            lines = [
                f"Design System: {ds.project_name}",
                f"Style: {ds.style.name} | Pattern: {ds.pattern.name}",
                (
                    f"Colors: primary={ds.colors.primary} secondary={ds.colors.secondary} "
                    f"cta={ds.colors.cta} bg={ds.colors.background} text={ds.colors.text}"
                ),
                f"Typography: {ds.typography.heading} / {ds.typography.body} ({ds.typography.mood})",
            ]
            if ds.anti_patterns:
                lines.append(f"Anti-patterns: {ds.anti_patterns}")
        for row in stack_rows:
            lines.append(f"{stack}: {row.get('Guideline', '')} - {row.get('Do', '')[:100]}")
        if "persisted" in details:
            lines.append(f"Saved: {details['persisted']['master']}")
        lines.append("Refine query or call again to explore alternatives.")
        return ToolResult(content="\n".join(lines), details=details)

    def ui_search(self, params: SearchParams) -> ToolResult:
        max_results = params.max_results or self.config.search.max_results
        result = search_domain(params.query, params.domain, max_results, self.kb)
        lines = [f"Domain: {result.domain} | Found: {result.count} results"]
        for row in result.results:
            entries = list(row.items())[:4]
            lines.append(" | ".join(f"{key}: {value[:80]}" for key, value in entries))
        return ToolResult(
            content="\n".join(lines),
            details={"domain": result.domain, "query": result.query, "results": result.results},
        )

    def ui_stack_guide(self, params: StackGuideParams) -> ToolResult:
        max_results = params.max_results or self.config.search.max_results
        result = search_stack(params.query, params.stack, max_results, self.kb)
        lines = [f"Stack: {result.stack} | Found: {result.count} results"]
        for row in result.results:
            guideline = row.get("Guideline", "")
            severity = row.get("Severity", "")
            lines.append(f"{guideline} ({severity}): {row.get('Do', '')[:100]}")
        return ToolResult(
            content="\n".join(lines),
            details={"stack": result.stack, "query": result.query, "results": result.results},
        )

    def tools(self) -> List[ToolSpec]:
        return [
            ToolSpec(
                name=DESIGN_SYSTEM_TOOL,
                label="Design System",
                description=(
                    "Generate a tailored UI/UX design system from the curated styles, color palettes, "
                    "font pairings, reasoning rules and landing patterns. Returns pattern, style, colors, "
                    "typography, effects and anti-patterns. Call again with a refined query to explore "
                    "alternatives; set persist to save it to disk."
                ),
                parameters=DesignSystemParams,
                execute=_executor(DesignSystemParams, self.design_system),
            ),
            ToolSpec(
                name="ui_search",
                label="UI Search",
                description=(
                    "Search the UI/UX knowledge base by domain: " + ", ".join(DOMAIN_NAMES)
                    + ". Auto-detects the domain from the query if omitted."
                ),
                parameters=SearchParams,
                execute=_executor(SearchParams, self.ui_search),
            ),
            ToolSpec(
                name="ui_stack_guide",
                label="UI Stack Guide",
                description=(
                    "Get implementation guidelines for a specific tech stack: best practices, "
                    "Do/Don't patterns and code examples."
                ),
                parameters=StackGuideParams,
                execute=_executor(StackGuideParams, self.ui_stack_guide),
            ),
        ]

    # ------------------------------------------------------------------
    # Hooks

    def on_session_start(self, cwd: Path | str) -> None:
        self.cwd = Path(cwd)
        self.config = load_config(self.cwd)
        self.logger.debug("Loaded settings from %s", self.config.path)

    def system_prompt_addendum(self) -> Optional[str]:
        if not self.config.design_system.auto_inject or not self.active_design_system:
            return None
        return (
            f"Active design system: {self.active_design_system['summary']} "
            f"(see {self.active_design_system['path']})"
        )

    def on_before_agent_start(self, *_event: Any) -> Optional[Dict[str, str]]:
        addendum = self.system_prompt_addendum()
        return {"system_prompt_addendum": addendum} if addendum else None

    def register(self, host: PluginHost) -> None:
        for spec in self.tools():
            host.register_tool(spec)
        host.on("session_start", self.on_session_start)
        host.on("context", prune_superseded)
        host.on(PROMPT_EVENT, self.on_before_agent_start)


def _executor(
    model: Type[BaseModel], handler: Callable[[Any], ToolResult]
) -> Callable[[Mapping[str, Any]], ToolResult]:
    def execute(arguments: Mapping[str, Any]) -> ToolResult:
        return handler(model.model_validate(dict(arguments)))

    return execute


def prune_superseded(messages: Sequence[Dict[str, Any]]) -> List[Dict[str, Any]]:
    """Blank out every design_system tool result except the most recent one."""
    pruned = list(messages)
    latest_seen = False
    for index in range(len(pruned) - 1, -1, -1):
        message = pruned[index]
        if message.get("role") != "toolResult" or message.get("tool_name") != DESIGN_SYSTEM_TOOL:
            continue
        if not latest_seen:
            latest_seen = True
            continue
        pruned[index] = {**message, "content": [{"type": "text", "text": SUPERSEDED_TEXT}]}
    return pruned


def register(host: PluginHost, kb: KnowledgeBase | None = None, *, cwd: Path | None = None) -> UiUxPlugin:
    """Load the knowledge base (unless given) and register tools and hooks on ``host``."""
    plugin = UiUxPlugin(kb or load_knowledge_base(), cwd=cwd)
    plugin.register(host)
    return plugin


__all__ = [
    "DesignSystemParams",
    "PROMPT_EVENT",
    "PluginHost",
    "SearchParams",
    "StackGuideParams",
    "ToolResult",
    "ToolSpec",
    "UiUxPlugin",
    "prune_superseded",
    "register",
]
