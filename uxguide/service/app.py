"""FastAPI application exposing search and design system generation."""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional

from fastapi import Depends, FastAPI
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field

from ..design import DesignSystemGenerator
from ..kb import KnowledgeBase, KnowledgeBaseError, load_knowledge_base
from ..plugin import DomainName, StackName
from ..search import search_domain, search_stack


class SearchRequest(BaseModel):
    query: str = Field(..., min_length=1)
    domain: Optional[DomainName] = None
    max_results: int = Field(3, ge=1)


class SearchResponse(BaseModel):
    domain: str
    query: str
    file: str
    count: int
    results: List[Dict[str, str]]


class StackRequest(BaseModel):
    query: str = Field(..., min_length=1)
    stack: StackName
    max_results: int = Field(3, ge=1)


class StackResponse(BaseModel):
    stack: str
    query: str
    file: str
    count: int
    results: List[Dict[str, str]]


class DesignSystemRequest(BaseModel):
    query: str = Field(..., min_length=1)
    project_name: Optional[str] = None


class DesignSystemResponse(BaseModel):
    design_system: Dict[str, Any]
    summary: str


class HealthResponse(BaseModel):
    status: str


def create_app(
    kb_factory: Callable[[], KnowledgeBase] = load_knowledge_base,
) -> FastAPI:
    """Create the FastAPI application; the knowledge base is built once per app."""

    app = FastAPI(title="uxguide", version="0.1.0")

    @lru_cache(maxsize=1)
    def get_kb() -> KnowledgeBase:
        return kb_factory()

    @app.get("/health", response_model=HealthResponse)
    async def health() -> HealthResponse:
        return HealthResponse(status="ok")

    @app.post("/search", response_model=SearchResponse)
    def search(payload: SearchRequest, kb: KnowledgeBase = Depends(get_kb)) -> SearchResponse:
        result = search_domain(payload.query, payload.domain, payload.max_results, kb)
        return SearchResponse(**result.to_dict())

    @app.post("/stack", response_model=StackResponse)
    def stack(payload: StackRequest, kb: KnowledgeBase = Depends(get_kb)) -> StackResponse:
        result = search_stack(payload.query, payload.stack, payload.max_results, kb)
        return StackResponse(
            stack=result.stack,
            query=result.query,
            file=result.file,
            count=result.count,
            results=result.results,
        )

    @app.post("/design-system", response_model=DesignSystemResponse)
    def design_system(
        payload: DesignSystemRequest, kb: KnowledgeBase = Depends(get_kb)
    ) -> DesignSystemResponse:
        ds = DesignSystemGenerator(kb).generate(payload.query, payload.project_name)
        return DesignSystemResponse(design_system=ds.to_dict(), summary=ds.summary())

    @app.exception_handler(KnowledgeBaseError)
    async def knowledge_base_error_handler(
        _: Any, exc: KnowledgeBaseError
    ) -> JSONResponse:  # pragma: no cover - simple mapping
        return JSONResponse(status_code=500, content={"detail": str(exc)})

    return app


def run_service(
    host: str = "127.0.0.1", port: int = 8000, *, data_dir: Path | None = None
) -> None:  # pragma: no cover - integration path
    import uvicorn

    app = create_app(lambda: load_knowledge_base(data_dir))
    uvicorn.run(app, host=host, port=port)
