"""Unit tests for programmatic email construction."""

import re
from datetime import date, datetime, timedelta

import pytest

from laradash.engines.builder.block_service import BlockService


@pytest.fixture
def blocks() -> BlockService:
    return BlockService()


class TestFactories:
    """Tests for block factories."""

    def test_block_id(self, blocks: BlockService):
        """Ids are 'block_' plus eight alphanumerics."""
        assert re.fullmatch(r"block_[A-Za-z0-9]{8}", blocks.block_id())
        assert blocks.block_id() != blocks.block_id()

    def test_factories_add_layout_styles(self, blocks: BlockService):
        """Factory blocks carry their props plus an empty layoutStyles skeleton."""
        heading = blocks.heading("Welcome")
        assert heading["type"] == "heading"
        assert heading["props"]["text"] == "Welcome"
        assert heading["props"]["layoutStyles"]["margin"] == {"top": "", "right": "", "bottom": "", "left": ""}

    def test_footer_copyright(self, blocks: BlockService):
        """The footer copyright line names the company with a {year} token."""
        footer = blocks.footer("Acme")
        assert footer["props"]["copyright"] == "© {year} Acme. All rights reserved."

    def test_social_merges_links(self, blocks: BlockService):
        """Given links override the empty defaults for each network."""
        social = blocks.social({"twitter": "https://x.test/acme"})
        assert social["props"]["links"]["twitter"] == "https://x.test/acme"
        assert social["props"]["links"]["facebook"] == ""

    def test_countdown_default_date(self, blocks: BlockService):
        """Countdowns default to a week from today at 23:59."""
        props = blocks.countdown()["props"]
        assert props["targetDate"] == (date.today() + timedelta(days=7)).isoformat()
        assert props["targetTime"] == "23:59"

    def test_list_copies_items(self, blocks: BlockService):
        """Later changes to the caller's item list do not leak into the block."""
        items = ["a"]
        block = blocks.list_block(items, "number")
        items.append("b")
        assert block["props"]["items"] == ["a"]


class TestRendering:
    """Tests for the inline email renderers."""

    def test_unknown_type(self, blocks: BlockService):
        """Unknown or typeless blocks render as an empty string."""
        assert blocks.render_block({"type": "mystery", "props": {}}) == ""
        assert blocks.render_block({}) == ""

    def test_heading(self, blocks: BlockService):
        """Headings render at the requested level with inline colour."""
        html = blocks.render_block(blocks.heading("Hi", level="h2", color="#111"))
        assert html.startswith('<h2 style="text-align: center; color: #111;')
        assert html.endswith(">Hi</h2>")

    def test_image_requires_src(self, blocks: BlockService):
        """Images need a src and are wrapped in their link when one is set."""
        assert blocks.render_image({}) == ""
        html = blocks.render_image({"src": "https://cdn.test/a.png", "link": "https://acme.test"})
        assert '<a href="https://acme.test" target="_blank"><img src="https://cdn.test/a.png"' in html

    def test_list(self, blocks: BlockService):
        """Empty lists render nothing; number lists become <ol>."""
        assert blocks.render_list({"items": []}) == ""
        assert blocks.render_list({"items": ["a"], "listType": "number"}).startswith("<ol ")

    def test_social(self, blocks: BlockService):
        """Social rows skip empty links and use the PNG icon per network."""
        assert blocks.render_social({"links": {"facebook": ""}}) == ""
        html = blocks.render_social({"links": {"youtube": "https://yt.test/acme"}})
        assert "174883.png" in html

    def test_footer_contact_line(self, blocks: BlockService):
        """Email and phone share one line separated by a pipe."""
        html = blocks.render_footer({"companyName": "Acme", "email": "hi@acme.test", "phone": "555"})
        assert '<a href="mailto:hi@acme.test" style="color: #635bff;">hi@acme.test</a> | 555' in html

    def test_countdown_is_static(self, blocks: BlockService):
        """The inline countdown shows four zeroed units under its title."""
        html = blocks.render_countdown({"title": "Soon"})
        assert html.count(">00</span>") == 4
        assert ">Soon</p>" in html

    def test_video_placeholder(self, blocks: BlockService):
        """Videos without a thumbnail render a dark placeholder card."""
        html = blocks.render_video({"alt": "Launch"})
        assert "&#9654;" in html
        assert ">Launch</p>" in html
        linked = blocks.render_video({"thumbnailUrl": "https://cdn.test/t.png", "videoUrl": "https://v.test"})
        assert 'href="https://v.test" target="_blank"' in linked


class TestDocuments:
    """Tests for whole email documents and template data."""

    def test_generate_email_html(self, blocks: BlockService):
        """The email document uses a 600px white container with rounded corners."""
        html = blocks.generate_email_html([blocks.text("Body copy")])
        assert html.startswith("<!DOCTYPE html>")
        assert "max-width: 600px; background-color: #ffffff;" in html
        assert "border-top-left-radius: 8px" in html
        assert "Body copy" in html

    def test_canvas_settings_respected(self, blocks: BlockService):
        """Canvas width and background override the container defaults."""
        canvas = {"width": "480px", "layoutStyles": {"background": {"color": "#fafafa"}}}
        html = blocks.generate_email_html([], canvas)
        assert "max-width: 480px; background-color: #fafafa;" in html

    def test_create_template_data(self, blocks: BlockService):
        """Template rows carry HTML, design JSON and timestamps."""
        content = [blocks.heading("Hello")]
        data = blocks.create_template_data("Welcome", "Hi {first_name}", "transactional", "First email", content)
        assert data["name"] == "Welcome"
        assert data["type"] == "transactional"
        assert data["design_json"]["blocks"] == content
        assert data["design_json"]["version"] == 1
        assert data["design_json"]["canvasSettings"]["width"] == "600px"
        assert ">Hello</h1>" in data["body_html"]
        assert data["is_active"] is False
        assert data["is_deleteable"] is True
        assert isinstance(data["created_at"], datetime)
        assert len(data["uuid"]) == 36
