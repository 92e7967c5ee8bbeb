"""
Builder endpoints - block catalogue, editor config, HTML generation,
placeholder rendering, migrations and markdown.
"""

from typing import Any, Dict, List, Optional

from fastapi import APIRouter, HTTPException, Query, status

from laradash.api.deps import Builder, Markdown, Migrator, Renderer
from laradash.engines.builder.markdown_service import MarkdownResult
from laradash.schemas.builder import (
    GenerateHtmlRequest,
    HtmlResponse,
    MarkdownConvertRequest,
    MarkdownFetchRequest,
    MigrateBlocksRequest,
    MigrateBlocksResponse,
    PendingMigration,
    RenderContentRequest,
)
from laradash.schemas.common import ErrorResponse

router = APIRouter()

NOT_FOUND = {404: {"model": ErrorResponse, "description": "Unknown builder context"}}


def _require_context(builder, context: str) -> None:
    if not builder.adapters.has(context):
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Unknown builder context: {context}",
        )


@router.get("/blocks")
async def list_blocks(builder: Builder, context: Optional[str] = None) -> List[Dict[str, Any]]:
    """Block definitions, optionally limited to a context."""
    blocks = builder.registry.get_for_context(context) if context else builder.registry.all()
    return [block.to_dict() for block in blocks]


@router.get("/blocks/categories")
async def list_categories(builder: Builder) -> List[str]:
    return builder.registry.get_categories()


@router.get("/blocks/search")
async def search_blocks(
    builder: Builder,
    q: str = Query("", max_length=100),
    context: Optional[str] = None,
) -> List[Dict[str, Any]]:
    return [block.to_dict() for block in builder.registry.search(q, context)]


@router.get("/config/{context}")
async def get_config(context: str, builder: Builder) -> Dict[str, Any]:
    """Editor configuration: labels, features and blocks for the context."""
    return builder.get_config(context)


@router.get("/frontend-data")
async def get_frontend_data(builder: Builder, context: Optional[str] = None) -> Dict[str, Any]:
    return builder.get_frontend_data(context)


@router.get("/contexts")
async def list_contexts(builder: Builder) -> List[str]:
    return builder.adapters.get_contexts()


@router.get("/settings/{context}", responses=NOT_FOUND)
async def get_default_settings(context: str, builder: Builder) -> Dict[str, Any]:
    _require_context(builder, context)
    return builder.adapters.get_default_settings(context)


@router.post("/generate", response_model=HtmlResponse, responses=NOT_FOUND)
async def generate_html(request: GenerateHtmlRequest, builder: Builder):
    """Turn blocks into context HTML."""
    _require_context(builder, request.context)
    return HtmlResponse(html=builder.generate_html(request.context, request.blocks, request.settings))


# Placeholders may fetch remote markdown; runs in the threadpool.
@router.post("/render", response_model=HtmlResponse)
def render_content(request: RenderContentRequest, renderer: Renderer):
    """Render data-lara-block placeholders in stored HTML."""
    return HtmlResponse(html=renderer.process_content(request.content, request.context))


@router.post("/migrate", response_model=MigrateBlocksResponse)
async def migrate_blocks(request: MigrateBlocksRequest, migrator: Migrator):
    pending = migrator.get_blocks_needing_migration(request.blocks)
    return MigrateBlocksResponse(
        blocks=migrator.migrate_blocks(request.blocks),
        pending=[PendingMigration(**item) for item in pending],
    )


@router.post("/markdown/convert", response_model=MarkdownResult)
async def convert_markdown(request: MarkdownConvertRequest, markdown: Markdown):
    return markdown.convert_markdown(request.markdown)


# Blocking fetch; runs in the threadpool.
@router.post("/markdown/fetch", response_model=MarkdownResult)
def fetch_markdown(request: MarkdownFetchRequest, markdown: Markdown):
    """Fetch a remote markdown file and convert it."""
    return markdown.fetch_and_convert(request.url, use_cache=request.use_cache)
