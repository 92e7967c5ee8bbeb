"""Integration tests for the builder, email and module API endpoints."""

import asyncio
import json
import time

from httpx import AsyncClient

from laradash.engines.builder.block_registry import BlockMigration

API = "/api/v1"
README_URL = "https://github.com/acme/site/blob/main/README.md"
SLOW_URL = "https://github.com/acme/site/blob/main/slow.md"


def placeholder(block_type, props, block_id="b1"):
    return f"<div data-lara-block=\"{block_type}\" data-block-id=\"{block_id}\" data-props='{json.dumps(props)}'>x</div>"


class TestBuilderAPI:
    """Integration tests for /api/v1/builder endpoints."""

    async def test_list_blocks(self, client: AsyncClient):
        """All blocks are listed by default; the email context leaves out page-only ones."""
        response = await client.get(f"{API}/builder/blocks")
        assert response.status_code == 200
        all_types = {block["type"] for block in response.json()}
        assert {"heading", "section", "markdown"} <= all_types

        response = await client.get(f"{API}/builder/blocks", params={"context": "email"})
        email_types = {block["type"] for block in response.json()}
        assert "heading" in email_types
        assert "section" not in email_types

    async def test_categories_and_search(self, client: AsyncClient):
        """Categories come back sorted and search ignores case."""
        response = await client.get(f"{API}/builder/blocks/categories")
        assert response.status_code == 200
        assert response.json() == sorted(response.json())

        response = await client.get(f"{API}/builder/blocks/search", params={"q": "HEAD"})
        assert "heading" in {block["type"] for block in response.json()}

    async def test_contexts(self, client: AsyncClient):
        """Contexts are listed in registration order."""
        response = await client.get(f"{API}/builder/contexts")
        assert response.json() == ["email", "page", "campaign"]

    async def test_config(self, client: AsyncClient):
        """Known contexts get their own labels; unknown ones fall back to generic labels."""
        response = await client.get(f"{API}/builder/config/email")
        assert response.status_code == 200
        assert response.json()["labels"]["title"] == "Email Builder"

        response = await client.get(f"{API}/builder/config/newsletter")
        assert response.status_code == 200
        assert response.json()["labels"]["title"] == "Builder"

    async def test_frontend_data(self, client: AsyncClient):
        """Frontend data carries the context config, module scripts and blocks."""
        response = await client.get(f"{API}/builder/frontend-data", params={"context": "page"})
        data = response.json()
        assert data["config"]["context"] == "page"
        assert data["module_scripts"] == []
        assert len(data["blocks"]) > 0

    async def test_default_settings(self, client: AsyncClient):
        """Canvas defaults are served per context; unknown contexts give 404."""
        response = await client.get(f"{API}/builder/settings/email")
        assert response.status_code == 200
        assert response.json()["width"] == "700px"

        response = await client.get(f"{API}/builder/settings/newsletter")
        assert response.status_code == 404
        assert response.json() == {"detail": "Unknown builder context: newsletter"}

    async def test_generate(self, client: AsyncClient):
        """Page output is a content div and email output a full document."""
        blocks = [{"id": "h", "type": "heading", "props": {"text": "Hello", "level": "h2"}}]
        response = await client.post(f"{API}/builder/generate", json={"context": "page", "blocks": blocks})
        assert response.status_code == 200
        assert response.json()["html"].startswith('<div class="lb-content">')

        response = await client.post(f"{API}/builder/generate", json={"context": "email", "blocks": blocks})
        assert response.json()["html"].startswith("<!DOCTYPE html>")

    async def test_generate_unknown_context(self, client: AsyncClient):
        """Generating for an unregistered context gives 404."""
        response = await client.post(f"{API}/builder/generate", json={"context": "fax", "blocks": []})
        assert response.status_code == 404

    async def test_render(self, client: AsyncClient):
        """Placeholders in stored HTML are replaced and the surrounding markup kept."""
        content = "<p>Intro</p>" + placeholder("heading", {"text": "Title", "level": "h2"})
        response = await client.post(f"{API}/builder/render", json={"content": content})
        assert response.status_code == 200
        html = response.json()["html"]
        assert html.startswith("<p>Intro</p><h2")
        assert "data-lara-block" not in html

    async def test_render_keeps_event_loop_free(self, client: AsyncClient):
        """A slow markdown fetch during /render leaves /health responsive."""
        content = placeholder(
            "markdown",
            {"sourceType": "url", "url": SLOW_URL, "cacheEnabled": False},
        )

        async def timed_health():
            await asyncio.sleep(0.1)
            started = time.perf_counter()
            response = await client.get("/health")
            return response, time.perf_counter() - started

        rendered, (health, elapsed) = await asyncio.gather(
            client.post(f"{API}/builder/render", json={"content": content}),
            timed_health(),
        )
        assert rendered.status_code == 200
        assert "<h1>Project</h1>" in rendered.json()["html"]
        assert health.status_code == 200
        assert elapsed < 0.5

    async def test_migrate(self, client: AsyncClient, builder):
        """Migration returns upgraded blocks plus the list of pending upgrades."""

        def add_size(props):
            return {**props, "size": "md"}

        builder.register_block(
            {
                "type": "promo",
                "version": "2.0.0",
                "migrations": [BlockMigration(from_version="1.0.0", to_version="2.0.0", migrate=add_size)],
            }
        )
        blocks = [{"id": "p1", "type": "promo", "props": {}}]
        response = await client.post(f"{API}/builder/migrate", json={"blocks": blocks})
        assert response.status_code == 200
        data = response.json()
        assert data["blocks"][0]["props"] == {"size": "md"}
        assert data["blocks"][0]["version"] == "2.0.0"
        assert data["pending"] == [
            {"type": "promo", "id": "p1", "stored_version": "1.0.0", "current_version": "2.0.0"}
        ]

    async def test_markdown_convert(self, client: AsyncClient):
        """Markdown converts to HTML; empty input reports an error."""
        response = await client.post(f"{API}/builder/markdown/convert", json={"markdown": "**hi**"})
        assert response.status_code == 200
        assert "<strong>hi</strong>" in response.json()["html"]

        response = await client.post(f"{API}/builder/markdown/convert", json={"markdown": ""})
        assert response.json()["error"] == "Empty content"

    async def test_markdown_fetch(self, client: AsyncClient):
        """A repository URL is fetched and rendered."""
        response = await client.post(f"{API}/builder/markdown/fetch", json={"url": README_URL})
        data = response.json()
        assert data["success"] is True
        assert "<h1>Project</h1>" in data["html"]

    async def test_validation_error_shape(self, client: AsyncClient):
        """422 bodies list each invalid field with its location."""
        response = await client.post(f"{API}/builder/markdown/fetch", json={})
        assert response.status_code == 422
        data = response.json()
        assert data["detail"] == "Validation error"
        assert data["errors"][0]["field"] == "body.url"


class TestEmailsAPI:
    """Integration tests for /api/v1/emails endpoints."""

    async def test_variables(self, client: AsyncClient):
        """Variables list label and value pairs; samples use the site name."""
        response = await client.get(f"{API}/emails/variables")
        assert response.status_code == 200
        assert {"label": "Recipient's first name", "value": "first_name"} in response.json()

        response = await client.get(f"{API}/emails/variables/sample")
        assert response.json()["company"] == "Acme"

    async def test_preview(self, client: AsyncClient):
        """Preview substitutes sample values into subject and body."""
        response = await client.post(
            f"{API}/emails/preview",
            json={"subject": "Hi {first_name}", "body_html": "<p>{company}</p>"},
        )
        assert response.json() == {"subject": "Hi John", "body_html": "<p>Acme</p>"}

    async def test_compose(self, client: AsyncClient):
        """Compose substitutes recipient variables and keeps the sender address."""
        response = await client.post(
            f"{API}/emails/compose",
            json={
                "subject": "Hi {first_name}",
                "content": "<p>Welcome {{first_name}}</p>",
                "variables": {"first_name": "Ada"},
                "from_email": "team@acme.test",
            },
        )
        assert response.status_code == 200
        data = response.json()
        assert data["subject"] == "Hi Ada"
        assert data["html"] == "<p>Welcome Ada</p>"
        assert data["from_email"] == "team@acme.test"

    async def test_template_design(self, client: AsyncClient):
        """Template design returns email HTML, the design JSON and ISO timestamps."""
        blocks = [{"id": "h", "type": "heading", "props": {"text": "Welcome", "level": "h1"}}]
        response = await client.post(
            f"{API}/emails/templates/design",
            json={"name": "Welcome", "subject": "Hello", "blocks": blocks},
        )
        assert response.status_code == 200
        data = response.json()
        assert data["type"] == "custom"
        assert data["body_html"].startswith("<!DOCTYPE html>")
        assert "Welcome</h1>" in data["body_html"]
        assert data["design_json"]["blocks"] == blocks
        assert isinstance(data["created_at"], str)

    async def test_template_design_requires_name(self, client: AsyncClient):
        """A blank template name fails validation."""
        response = await client.post(f"{API}/emails/templates/design", json={"name": "", "subject": "x"})
        assert response.status_code == 422


class TestModulesAPI:
    """Integration tests for /api/v1/modules endpoints."""

    async def test_list(self, client: AsyncClient):
        """The bundled CRM module is listed, disabled by default."""
        response = await client.get(f"{API}/modules/")
        assert response.status_code == 200
        data = response.json()
        assert data["total"] == 1
        assert data["modules"][0]["name"] == "crm"
        assert data["modules"][0]["status"] is False

    async def test_toggle(self, client: AsyncClient):
        """Toggling flips the status and normalises the name."""
        response = await client.post(f"{API}/modules/CRM/toggle")
        assert response.json() == {"name": "crm", "status": True}

        response = await client.post(f"{API}/modules/crm/toggle")
        assert response.json() == {"name": "crm", "status": False}

    async def test_toggle_unknown(self, client: AsyncClient):
        """Toggling an unknown module gives 404 with the module name."""
        response = await client.post(f"{API}/modules/ghost/toggle")
        assert response.status_code == 404
        assert response.json() == {"detail": "Module not found: ghost"}

    async def test_bulk(self, client: AsyncClient):
        """Bulk requests report per-name results and persist the status."""
        response = await client.post(f"{API}/modules/bulk-activate", json={"names": ["crm", "ghost"]})
        assert response.json() == {"results": {"crm": True, "ghost": False}}

        response = await client.get(f"{API}/modules/")
        assert response.json()["modules"][0]["status"] is True

        response = await client.post(f"{API}/modules/bulk-deactivate", json={"names": ["crm"]})
        assert response.json() == {"results": {"crm": True}}

    async def test_bulk_requires_names(self, client: AsyncClient):
        """An empty names list fails validation on body.names."""
        response = await client.post(f"{API}/modules/bulk-activate", json={"names": []})
        assert response.status_code == 422
        assert response.json()["errors"][0]["field"] == "body.names"


class TestHealth:
    """Integration tests for service-level endpoints."""

    async def test_health(self, client: AsyncClient):
        """Health reports ok and the number of registered modules."""
        response = await client.get("/health")
        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "ok"
        assert data["modules"] == 1

    async def test_root(self, client: AsyncClient):
        """The root endpoint advertises the v1 API prefix."""
        response = await client.get("/")
        assert response.json()["api"]["v1"] == "/api/v1"

    async def test_request_id_echoed(self, client: AsyncClient):
        """An incoming X-Request-ID comes back on the response."""
        response = await client.get("/health", headers={"X-Request-ID": "req-42"})
        assert response.headers["X-Request-ID"] == "req-42"

    async def test_request_id_generated(self, client: AsyncClient):
        """Without an incoming header a 32-character hex ID is generated."""
        response = await client.get("/health")
        assert len(response.headers["X-Request-ID"]) == 32
