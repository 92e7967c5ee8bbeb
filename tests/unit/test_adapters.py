"""Unit tests for the output adapters."""

import pytest

from laradash.engines.builder.adapters import EmailAdapter, OutputAdapterRegistry, WebAdapter
from laradash.kernel.hooks import BuilderActionHook, BuilderFilterHook, HookManager


def heading(text="Hello", **props):
    return {"id": "h1", "type": "heading", "props": {"text": text, "level": "h2", **props}}


class TestOutputAdapterRegistry:
    """Tests for context to adapter mapping."""

    def test_first_registration_is_default(self, registry, hooks: HookManager):
        """Unknown contexts fall back to the first adapter registered."""
        email = EmailAdapter(registry, hooks)
        adapters = OutputAdapterRegistry(hooks).register("email", email).register("page", WebAdapter(registry, hooks))
        assert adapters.default_context == "email"
        assert adapters.get("newsletter") is email
        assert adapters.has("page")
        assert not adapters.has("newsletter")

    def test_register_requires_adapter(self, hooks: HookManager):
        """Registering None as an adapter raises ValueError."""
        with pytest.raises(ValueError):
            OutputAdapterRegistry(hooks).register("email", None)

    def test_set_default_unknown(self, hooks: HookManager):
        """Only a registered context can become the default."""
        with pytest.raises(ValueError):
            OutputAdapterRegistry(hooks).set_default("page")

    def test_unregister_moves_default(self, registry, hooks: HookManager):
        """Dropping the default promotes the next adapter."""
        adapters = OutputAdapterRegistry(hooks)
        adapters.register("email", EmailAdapter(registry, hooks)).register("page", WebAdapter(registry, hooks))
        adapters.unregister("email")
        assert adapters.default_context == "page"
        assert adapters.get_contexts() == ["page"]

    def test_generate_without_adapters(self, hooks: HookManager):
        """With nothing registered, generation yields an empty string."""
        assert OutputAdapterRegistry(hooks).generate_html("page", [heading()]) == ""

    def test_contexts(self, adapters):
        """email, page and campaign are registered; campaign reuses the email adapter."""
        assert adapters.get_contexts() == ["email", "page", "campaign"]
        assert adapters.get("campaign") is adapters.get("email")

    def test_generation_hooks(self, adapters, hooks: HookManager):
        """Before/after actions fire around the generated-HTML filter."""
        events = []
        hooks.add_action(BuilderActionHook.HTML_BEFORE_GENERATE, lambda blocks, settings, ctx: events.append(("before", ctx)))
        hooks.add_action(BuilderActionHook.HTML_AFTER_GENERATE, lambda html, blocks, settings, ctx: events.append(("after", html)))
        hooks.add_filter(BuilderFilterHook.HTML_GENERATED, lambda html, blocks, settings, ctx: "<!--x-->" + html)

        html = adapters.generate_html("page", [heading()])
        assert html.startswith("<!--x-->")
        assert events == [("before", "page"), ("after", html)]

    def test_default_settings_filter(self, adapters, hooks: HookManager):
        """Canvas defaults pass through the settings filter with the context."""
        hooks.add_filter(BuilderFilterHook.CANVAS_DEFAULT_SETTINGS, lambda settings, ctx: {**settings, "ctx": ctx})
        settings = adapters.get_default_settings("email")
        assert settings["width"] == "700px"
        assert settings["ctx"] == "email"


class TestWebAdapter:
    """Tests for page output."""

    def test_wrapped_in_content_div(self, adapters):
        """Page output is wrapped in div.lb-content and headings get toc anchors."""
        html = adapters.generate_html("page", [heading("Welcome")])
        assert html.startswith('<div class="lb-content">')
        assert ">Welcome</h2>" in html
        assert 'id="toc-welcome-h1"' in html

    def test_unknown_block_renders_nothing(self, adapters):
        """An unregistered block type contributes no markup."""
        assert adapters.generate_html("page", [{"type": "nope", "props": {}}]) == '<div class="lb-content"></div>'

    def test_section_renders_children(self, adapters):
        """Sections are rendered by the adapter itself and nest their children."""
        section = {"type": "section", "props": {"children": [heading("Inside")], "maxWidth": "900px"}}
        html = adapters.generate_html("page", [section])
        assert '<section class="lb-block lb-section"' in html
        assert "max-width: 900px" in html
        assert ">Inside</h2>" in html

    def test_columns_nest_blocks(self, adapters):
        """Each column list becomes an lb-column, in order."""
        columns = {
            "type": "columns",
            "props": {"columns": 2, "children": [[heading("Left")], [heading("Right")]]},
        }
        html = adapters.generate_html("page", [columns])
        assert html.count('class="lb-column"') == 2
        assert "lb-columns-2" in html
        assert html.index("Left") < html.index("Right")

    def test_block_filters(self, adapters, hooks: HookManager):
        """The generic and the context block filters both apply."""
        hooks.add_filter("builder.html.block.heading", lambda html, props, options: html + "<!--generic-->")
        hooks.add_filter("builder.page.block.heading", lambda html, props, options: html + "<!--page-->")
        html = adapters.generate_html("page", [heading()])
        assert "<!--generic--><!--page-->" in html

    def test_failing_generator_is_skipped(self, registry, adapters):
        """A block whose generator raises renders as an empty string."""

        def broken(props, options):
            raise RuntimeError("boom")

        registry.register({"type": "broken", "save": broken})
        html = adapters.generate_html("page", [{"type": "broken", "props": {}}, heading("After")])
        assert ">After</h2>" in html

    def test_standalone_page(self, adapters):
        """The standalone page is a full document honouring maxWidth."""
        page = adapters.get("page").generate_standalone_page([heading("Doc")], {"maxWidth": "800px"})
        assert page.startswith("<!DOCTYPE html>")
        assert "max-width: 800px" in page
        assert ">Doc</h2>" in page


class TestEmailAdapter:
    """Tests for email output."""

    def test_document_shell(self, adapters):
        """Email output is a full document with MSO conditionals."""
        html = adapters.generate_html("email", [heading("Hi there")], {"width": "640px"})
        assert html.startswith("<!DOCTYPE html>")
        assert "<!--[if mso]>" in html
        assert "max-width: 640px" in html
        assert "Hi there</h2>" in html

    def test_layout_styles_wrap_block(self, adapters):
        """Blocks with layoutStyles get an extra styled table cell."""
        block = heading("Styled", layoutStyles={"background": {"color": "#eee"}})
        html = adapters.generate_html("email", [block])
        assert '<td style="background-color: #eee">' in html

    def test_page_only_block_skipped(self, adapters):
        """A page-only section is left out of email output."""
        html = adapters.generate_html("email", [{"type": "section", "props": {}}])
        assert "lb-section" not in html

    def test_email_context_filter(self, adapters, hooks: HookManager):
        """builder.email.block.<type> can replace a block's email HTML."""
        hooks.add_filter("builder.email.block.spacer", lambda html, props, options: "<!--spacer-->")
        html = adapters.generate_html("email", [{"type": "spacer", "props": {"height": "10px"}}])
        assert "<!--spacer-->" in html

    def test_border_and_shadow(self, adapters):
        """Canvas border, radius and shadow settings reach the email container."""
        settings = {
            "layoutStyles": {
                "border": {"width": {"top": "2px"}, "color": "#000", "radius": {"topLeft": "12px"}},
                "boxShadow": {"blur": "10px"},
            }
        }
        html = adapters.generate_html("email", [], settings)
        assert "border: 2px solid #000;" in html
        assert "border-radius: 12px;" in html
        assert "box-shadow: 0px 0px 10px 0px rgba(0, 0, 0, 0.1);" in html
