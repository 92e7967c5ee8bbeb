"""
Builder schemas.
"""

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field


class GenerateHtmlRequest(BaseModel):
    """Blocks to turn into context HTML."""

    context: str = "page"
    blocks: List[Dict[str, Any]] = []
    settings: Optional[Dict[str, Any]] = None


class RenderContentRequest(BaseModel):
    """Stored HTML with data-lara-block placeholders."""

    content: str = ""
    context: str = "page"


class HtmlResponse(BaseModel):
    html: str


class MigrateBlocksRequest(BaseModel):
    blocks: List[Dict[str, Any]] = []


class PendingMigration(BaseModel):
    type: str
    id: Optional[str] = None
    stored_version: str
    current_version: str


class MigrateBlocksResponse(BaseModel):
    """Migrated blocks plus what needed migrating beforehand."""

    blocks: List[Dict[str, Any]]
    pending: List[PendingMigration]


class MarkdownConvertRequest(BaseModel):
    markdown: str = ""


class MarkdownFetchRequest(BaseModel):
    url: str = Field(..., min_length=1, max_length=2048)
    use_cache: bool = True
