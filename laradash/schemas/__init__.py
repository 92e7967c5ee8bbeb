"""
Pydantic schemas for API request/response validation.
"""

from laradash.schemas.common import ErrorResponse, HealthResponse
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
from laradash.schemas.email import (
    EmailComposeRequest,
    EmailPreviewRequest,
    EmailVariableOption,
    RenderedTemplate,
    TemplateDesignRequest,
)
from laradash.schemas.modules import (
    BulkModulesRequest,
    BulkModulesResponse,
    ModuleListResponse,
    ModuleToggleResponse,
)

__all__ = [
    "ErrorResponse",
    "HealthResponse",
    "GenerateHtmlRequest",
    "HtmlResponse",
    "MarkdownConvertRequest",
    "MarkdownFetchRequest",
    "MigrateBlocksRequest",
    "MigrateBlocksResponse",
    "PendingMigration",
    "RenderContentRequest",
    "EmailComposeRequest",
    "EmailPreviewRequest",
    "EmailVariableOption",
    "RenderedTemplate",
    "TemplateDesignRequest",
    "BulkModulesRequest",
    "BulkModulesResponse",
    "ModuleListResponse",
    "ModuleToggleResponse",
]
