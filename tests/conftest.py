"""
Pytest fixtures for builder tests.
"""

import time
from datetime import datetime
from typing import AsyncGenerator

import httpx
import pytest
import pytest_asyncio

from laradash.api.deps import build_adapters
from laradash.config import Settings
from laradash.engines.builder.block_registry import BlockRegistry
from laradash.engines.builder.block_renderer import BlockRenderer
from laradash.engines.builder.builder_service import BuilderService
from laradash.engines.builder.markdown_service import MarkdownFetchService
from laradash.engines.emails.email_variable import EmailVariable
from laradash.kernel.hooks import HookManager
from laradash.kernel.modules.module_manager import ModuleManager
from laradash.plugins.blocks import register_core_blocks

README_MARKDOWN = "# Project\n\nSome **bold** text.\n"
FIXED_NOW = datetime(2026, 3, 5, 15, 7)
SLOW_FETCH_SECONDS = 1.0


def markdown_handler(request: httpx.Request) -> httpx.Response:
    """Serves README.md, a 404 for missing.md, an empty body for empty.md and a slow slow.md."""
    path = request.url.path
    if path.endswith("/slow.md"):
        time.sleep(SLOW_FETCH_SECONDS)
        return httpx.Response(200, text=README_MARKDOWN)
    if path.endswith("/README.md"):
        return httpx.Response(200, text=README_MARKDOWN)
    if path.endswith("/empty.md"):
        return httpx.Response(200, text="   ")
    return httpx.Response(404, text="Not Found")


@pytest.fixture
def settings(tmp_path) -> Settings:
    """Settings isolated from the environment's .env file."""
    return Settings(
        _env_file=None,
        app_name="Acme",
        app_url="https://acme.test",
        site_icon="/images/icon.png",
        mail_from_address="hello@acme.test",
        modules_statuses_path=str(tmp_path / "modules_statuses.json"),
    )


@pytest.fixture
def hooks() -> HookManager:
    return HookManager()


@pytest.fixture
def markdown_service(settings) -> MarkdownFetchService:
    return MarkdownFetchService(settings, transport=httpx.MockTransport(markdown_handler))


@pytest.fixture
def registry(hooks, markdown_service) -> BlockRegistry:
    """Registry holding every core block, markdown included."""
    registry = BlockRegistry(hooks)
    register_core_blocks(registry, markdown_service)
    return registry


@pytest.fixture
def adapters(registry, hooks):
    return build_adapters(registry, hooks)


@pytest.fixture
def builder(registry, adapters, hooks) -> BuilderService:
    return BuilderService(registry, adapters, hooks)


@pytest.fixture
def renderer(builder) -> BlockRenderer:
    return BlockRenderer(builder)


@pytest.fixture
def email_variable(hooks, settings) -> EmailVariable:
    """Variables with the clock pinned to March 5, 2026 3:07 PM."""
    return EmailVariable(hooks, settings, clock=lambda: FIXED_NOW)


@pytest.fixture
def module_manager(tmp_path, hooks) -> ModuleManager:
    return ModuleManager(tmp_path / "modules_statuses.json", hooks)


@pytest_asyncio.fixture
async def client(
    builder,
    renderer,
    markdown_service,
    email_variable,
    module_manager,
) -> AsyncGenerator[httpx.AsyncClient, None]:
    """API client wired to the test fixtures through dependency overrides."""
    from laradash.api import deps
    from laradash.engines.builder.block_migrator import BlockMigrator
    from laradash.engines.emails.email_sender import EmailSender
    from laradash.engines.emails.template_renderer import EmailTemplateRenderer
    from laradash.main import app
    from laradash.plugins.modules import BUNDLED_MODULES

    for module_class in BUNDLED_MODULES:
        module_manager.add(module_class())

    app.dependency_overrides[deps.get_builder_service] = lambda: builder
    app.dependency_overrides[deps.get_block_renderer] = lambda: renderer
    app.dependency_overrides[deps.get_block_migrator] = lambda: BlockMigrator(builder.registry)
    app.dependency_overrides[deps.get_markdown_service] = lambda: markdown_service
    app.dependency_overrides[deps.get_email_variable] = lambda: email_variable
    app.dependency_overrides[deps.get_template_renderer] = lambda: EmailTemplateRenderer(renderer, email_variable)
    app.dependency_overrides[deps.get_email_sender] = lambda: EmailSender(
        email_variable, renderer, builder.hooks, email_variable.settings
    )
    app.dependency_overrides[deps.get_module_manager] = lambda: module_manager

    async with httpx.AsyncClient(
        transport=httpx.ASGITransport(app=app),
        base_url="http://test",
    ) as ac:
        yield ac

    app.dependency_overrides.clear()
