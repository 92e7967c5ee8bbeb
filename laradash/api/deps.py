"""
FastAPI dependencies for the builder, email and module services.

Services are process-wide singletons built lazily on first use. Tests swap
them through ``app.dependency_overrides`` or reset them with
``reset_dependencies``.
"""

from functools import lru_cache
from typing import Annotated

from fastapi import Depends

from laradash.config import get_settings
from laradash.engines.builder.adapters import EmailAdapter, OutputAdapterRegistry, WebAdapter
from laradash.engines.builder.block_migrator import BlockMigrator
from laradash.engines.builder.block_registry import BlockRegistry
from laradash.engines.builder.block_renderer import BlockRenderer
from laradash.engines.builder.block_service import BlockService
from laradash.engines.builder.builder_service import BuilderService
from laradash.engines.builder.context import BuilderContext
from laradash.engines.builder.markdown_service import MarkdownFetchService
from laradash.engines.emails.email_sender import EmailSender
from laradash.engines.emails.email_variable import EmailVariable
from laradash.engines.emails.template_renderer import EmailTemplateRenderer
from laradash.kernel.hooks import HookManager, get_hook_manager
from laradash.kernel.modules.module_manager import ModuleManager
from laradash.plugins.blocks import register_core_blocks
from laradash.plugins.modules import BUNDLED_MODULES


def build_adapters(registry: BlockRegistry, hooks: HookManager) -> OutputAdapterRegistry:
    """Page and email adapters; campaigns share the email adapter."""
    adapters = OutputAdapterRegistry(hooks)
    email = EmailAdapter(registry, hooks)
    adapters.register(BuilderContext.EMAIL, email)
    adapters.register(BuilderContext.PAGE, WebAdapter(registry, hooks))
    adapters.register(BuilderContext.CAMPAIGN, email)
    return adapters


def build_builder_service(hooks: HookManager, markdown_service: MarkdownFetchService) -> BuilderService:
    """Registry with the core blocks, adapters, and the service over them."""
    registry = BlockRegistry(hooks)
    register_core_blocks(registry, markdown_service)
    return BuilderService(registry, build_adapters(registry, hooks), hooks)


@lru_cache
def get_markdown_service() -> MarkdownFetchService:
    return MarkdownFetchService(get_settings())


@lru_cache
def get_builder_service() -> BuilderService:
    return build_builder_service(get_hook_manager(), get_markdown_service())


@lru_cache
def get_block_renderer() -> BlockRenderer:
    return BlockRenderer(get_builder_service())


@lru_cache
def get_block_migrator() -> BlockMigrator:
    return BlockMigrator(get_builder_service().registry)


@lru_cache
def get_block_service() -> BlockService:
    return BlockService()


@lru_cache
def get_email_variable() -> EmailVariable:
    return EmailVariable(get_hook_manager(), get_settings())


def get_email_sender() -> EmailSender:
    # Per request: the sender holds subject and content state.
    return EmailSender(get_email_variable(), get_block_renderer(), get_hook_manager(), get_settings())


@lru_cache
def get_template_renderer() -> EmailTemplateRenderer:
    return EmailTemplateRenderer(get_block_renderer(), get_email_variable())


@lru_cache
def get_module_manager() -> ModuleManager:
    manager = ModuleManager(get_settings().modules_statuses_path, get_hook_manager())
    for module_class in BUNDLED_MODULES:
        manager.add(module_class())
    return manager


def reset_dependencies() -> None:
    """Drop every cached service so the next request rebuilds them."""
    for getter in (
        get_markdown_service,
        get_builder_service,
        get_block_renderer,
        get_block_migrator,
        get_block_service,
        get_email_variable,
        get_template_renderer,
        get_module_manager,
        get_hook_manager,
    ):
        getter.cache_clear()


Builder = Annotated[BuilderService, Depends(get_builder_service)]
Renderer = Annotated[BlockRenderer, Depends(get_block_renderer)]
Migrator = Annotated[BlockMigrator, Depends(get_block_migrator)]
Blocks = Annotated[BlockService, Depends(get_block_service)]
Markdown = Annotated[MarkdownFetchService, Depends(get_markdown_service)]
Variables = Annotated[EmailVariable, Depends(get_email_variable)]
Sender = Annotated[EmailSender, Depends(get_email_sender)]
TemplateRenderer = Annotated[EmailTemplateRenderer, Depends(get_template_renderer)]
Modules = Annotated[ModuleManager, Depends(get_module_manager)]
