"""Unit tests for data-lara-block placeholder rendering."""

import json

from laradash.engines.builder.block_renderer import BlockRenderer, decode_props, find_block_end


def placeholder(block_type, props, block_id=None, inner="<p>editor preview</p>"):
    id_attr = f' data-block-id="{block_id}"' if block_id else ""
    return f"<div data-lara-block=\"{block_type}\"{id_attr} data-props='{json.dumps(props)}'>{inner}</div>"


class TestHelpers:
    """Tests for prop decoding and div matching."""

    def test_decode_props(self):
        """Props JSON may be entity-encoded; invalid or non-object JSON decodes to {}."""
        assert decode_props('{"a": 1}') == {"a": 1}
        assert decode_props("{&quot;a&quot;: &#39;x&#39;}") == {}
        assert decode_props("{&quot;a&quot;: 2}") == {"a": 2}
        assert decode_props("not json") == {}
        assert decode_props("[1, 2]") == {}

    def test_find_block_end_nested(self):
        """Nested divs are balanced before the block closes."""
        content = "<div a><div b></div><div c><div d></div></div></div>tail"
        assert content[: find_block_end(content, 0)].endswith("</div></div></div>")
        assert content[find_block_end(content, 0):] == "tail"

    def test_find_block_end_unbalanced(self):
        """A block whose closing div never arrives has no end."""
        assert find_block_end("<div a><div b></div>", 0) is None


class TestBlockRenderer:
    """Tests for process_content."""

    def test_empty_content(self, renderer: BlockRenderer):
        """Empty content comes back unchanged."""
        assert renderer.process_content("") == ""

    def test_no_placeholders(self, renderer: BlockRenderer):
        """Content without data-lara-block is returned byte for byte."""
        content = "<p>Plain {braces} and <div>divs</div></p>"
        assert renderer.process_content(content) == content

    def test_replaces_placeholder(self, renderer: BlockRenderer):
        """A placeholder with a render callback is swapped for its output."""
        content = "<p>Before</p>" + placeholder("heading", {"text": "Title", "level": "h2"}, "b1") + "<p>After</p>"
        html = renderer.process_content(content)
        assert "editor preview" not in html
        assert html.startswith("<p>Before</p><h2 id=\"toc-title-b1\"")
        assert html.endswith("Title</h2><p>After</p>")

    def test_block_without_callback_kept(self, renderer: BlockRenderer):
        """Blocks with no render callback keep their saved markup."""
        content = placeholder("spacer", {"height": "10px"})
        assert renderer.process_content(content) == content

    def test_callback_returning_none_kept(self, renderer: BlockRenderer, builder):
        """A callback returning None keeps the placeholder markup."""
        builder.register_block_render_callback("spacer", lambda props, ctx, block_id: None)
        content = placeholder("spacer", {})
        assert renderer.process_content(content) == content

    def test_failing_callback_kept(self, renderer: BlockRenderer, builder):
        """A raising callback leaves the placeholder and later blocks still render."""

        def broken(props, ctx, block_id):
            raise RuntimeError("boom")

        builder.register_block_render_callback("spacer", broken)
        content = placeholder("spacer", {}) + placeholder("text", {"content": "ok"})
        html = renderer.process_content(content)
        assert html.startswith(placeholder("spacer", {}))
        assert 'class="lb-block lb-text"' in html

    def test_context_passed_to_callback(self, renderer: BlockRenderer, builder):
        """The callback receives the render context and the data-block-id."""
        seen = []
        builder.register_block_render_callback("spacer", lambda props, ctx, block_id: seen.append((ctx, block_id)) or "x")
        renderer.process_content(placeholder("spacer", {}, "s1"), "email")
        assert seen == [("email", "s1")]

    def test_time_to_read_gets_word_count(self, renderer: BlockRenderer):
        """time-to-read counts the words of the whole document."""
        words = " ".join(["word"] * 450)
        content = placeholder("time-to-read", {"showIcon": False, "suffix": " read"}) + f"<p>{words}</p>"
        html = renderer.process_content(content)
        assert "2-3 minutes read" in html

    def test_toc_sees_other_placeholders(self, renderer: BlockRenderer):
        """toc lists headings found among the document's placeholders."""
        content = (
            placeholder("toc", {"title": "Contents"}, "t1")
            + placeholder("heading", {"text": "First", "level": "h2"}, "h1")
            + placeholder("heading", {"text": "Second", "level": "h2"}, "h2")
        )
        html = renderer.process_content(content)
        assert 'href="#toc-first-h1"' in html
        assert 'href="#toc-second-h2"' in html
        assert 'id="toc-first-h1"' in html

    def test_toc_keeps_own_block_list(self, renderer: BlockRenderer):
        """A toc saved with its own _allBlocks lists those headings, not the placeholders."""
        saved = [{"type": "heading", "id": "h1", "props": {"level": "h2", "text": "Intro"}}]
        content = "<h2>Intro</h2>" + placeholder("toc", {"_allBlocks": saved}, "t1")
        html = renderer.process_content(content)
        assert 'href="#toc-intro-h1"' in html
        assert "Intro</a>" in html
        assert "No headings found." not in html

    def test_nested_placeholder_inside_replaced_block(self, renderer: BlockRenderer):
        """Only the outer placeholder is replaced when they nest."""
        inner = placeholder("heading", {"text": "Inner", "level": "h3"}, "in")
        content = placeholder("text", {"content": "Outer"}, "out", inner=inner)
        html = renderer.process_content(content)
        assert "Outer" in html
        assert "Inner" not in html

    def test_html_entity_props(self, renderer: BlockRenderer):
        """Entity-encoded data-props are unescaped before rendering."""
        content = (
            "<div data-lara-block=\"text\" data-props='{&quot;content&quot;: &quot;Hi&quot;}'>x</div>"
        )
        assert ">Hi</div>" in renderer.process_content(content)

    def test_registered_callback_wins(self, renderer: BlockRenderer, builder):
        """A callback registered on the builder overrides the definition's render."""
        builder.register_block_render_callback("heading", lambda props, ctx, block_id: "<h1>custom</h1>")
        assert renderer.process_content(placeholder("heading", {"text": "x"})) == "<h1>custom</h1>"

    def test_markdown_placeholder(self, renderer: BlockRenderer):
        """Inline markdown props render as HTML inside markdown-body."""
        html = renderer.process_content(placeholder("markdown", {"content": "# Hello"}))
        assert '<div class="markdown-body"><h1>Hello</h1>' in html

    def test_legacy_markdown(self, renderer: BlockRenderer):
        """Old markdown divs are fetched and rendered by URL."""
        content = (
            '<div data-block-type="markdown" data-url="https%3A%2F%2Fgithub.com%2Facme%2Fsite%2Fblob%2Fmain%2FREADME.md" '
            'data-show-source="false">loading</div>'
        )
        html = renderer.process_content(content)
        assert "<h1>Project</h1>" in html
        assert "markdown-source" not in html
        assert "loading" not in html
