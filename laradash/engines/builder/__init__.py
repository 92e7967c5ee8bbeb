"""
Builder Engine - block-based content builder.

Parts:
- Registry: block types, their save generators and render callbacks
- Adapters: page (HTML5) and email (table-based) output
- Renderer: server-side rendering of data-lara-block placeholders
- Service: facade used by modules and the API
- Migrator: upgrades stored block props between versions
- Block Service: email template factories
- Markdown: markdown conversion and remote fetching
"""

from laradash.engines.builder.context import ALL_CONTEXTS, BuilderContext
from laradash.engines.builder.block_registry import (
    BlockDefinition,
    BlockInstance,
    BlockMigration,
    BlockRegistry,
    BlockSupports,
)
from laradash.engines.builder.adapters import (
    BaseAdapter,
    EmailAdapter,
    OutputAdapterRegistry,
    WebAdapter,
)
from laradash.engines.builder.builder_service import BuilderService
from laradash.engines.builder.block_renderer import BlockRenderer
from laradash.engines.builder.block_migrator import BlockMigrator
from laradash.engines.builder.block_service import BlockService
from laradash.engines.builder.markdown_service import MarkdownFetchService, MarkdownResult

__all__ = [
    "ALL_CONTEXTS",
    "BuilderContext",
    "BlockDefinition",
    "BlockInstance",
    "BlockMigration",
    "BlockRegistry",
    "BlockSupports",
    "BaseAdapter",
    "EmailAdapter",
    "OutputAdapterRegistry",
    "WebAdapter",
    "BuilderService",
    "BlockRenderer",
    "BlockMigrator",
    "BlockService",
    "MarkdownFetchService",
    "MarkdownResult",
]
