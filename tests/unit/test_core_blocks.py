"""Unit tests for the core block generators."""

from datetime import datetime

from laradash.plugins.blocks.dynamic_blocks import (
    collect_headings,
    countdown_email,
    countdown_remaining,
    countdown_target,
    reading_minutes,
    reading_time_text,
    render_time_to_read,
    render_toc,
)
from laradash.plugins.blocks.media_blocks import (
    button_email,
    parse_video_url,
    render_button,
    render_image,
    sanitize_link,
    social_email,
    social_page,
    video_email,
    video_page,
)
from laradash.plugins.blocks.text_blocks import (
    html_save,
    render_code,
    render_heading,
    render_list,
    render_quote,
    table_email,
)


class TestTextBlocks:
    """Tests for heading, list, quote, code and table output."""

    def test_heading_anchor(self):
        """Headings rendered with a block id get a toc anchor."""
        html = render_heading({"text": "<b>Getting Started</b>", "level": "h3"}, "page", "abc")
        assert html.startswith('<h3 id="toc-getting-started-abc" class="lb-block lb-heading"')
        assert html.endswith("<b>Getting Started</b></h3>")

    def test_heading_invalid_level(self):
        """An unknown level falls back to h2, and without a block id there is no anchor."""
        html = render_heading({"text": "Hi", "level": "h9"})
        assert html.startswith("<h2 ")
        assert ' id="' not in html

    def test_heading_typography_wins(self):
        """Typography from layoutStyles overrides the flat props."""
        html = render_heading({"text": "Hi", "color": "#111", "layoutStyles": {"typography": {"color": "#f00"}}})
        assert "color: #f00" in html
        assert "color: #111" not in html

    def test_list_types(self):
        """Number lists use <ol>; check lists add the tick marker and class."""
        assert render_list({"items": ["a"], "listType": "number"}).startswith("<ol ")
        check = render_list({"items": ["a"], "listType": "check"})
        assert "✓" in check
        assert "lb-list-check" in check

    def test_quote_author(self):
        """Quotes are wrapped in quotation marks and the author is escaped."""
        html = render_quote({"text": "Ship it", "author": "Ada <L>", "authorTitle": "CTO"})
        assert '"Ship it"' in html
        assert "Ada &lt;L&gt;</cite>" in html
        assert ">CTO</span>" in html

    def test_code_is_escaped(self):
        """Code content and language are escaped."""
        html = render_code({"code": "<script>x</script>", "language": "js<x>"})
        assert "&lt;script&gt;x&lt;/script&gt;" in html
        assert 'class="language-jsx"' in html

    def test_table_header_toggle(self):
        """showHeader False drops the email table's <thead>."""
        props = {"headers": ["A"], "rows": [["1"]]}
        assert "<thead>" in table_email(props, {})
        assert "<thead>" not in table_email({**props, "showHeader": False}, {})

    def test_html_passthrough(self):
        """The html block saves its code untouched."""
        assert html_save({"code": "<em>raw</em>"}, {}) == "<em>raw</em>"


class TestMediaBlocks:
    """Tests for button, image, video and social output."""

    def test_sanitize_link(self):
        """http(s) and mailto pass; javascript URLs, even spaced out, become #."""
        assert sanitize_link("https://acme.test") == "https://acme.test"
        assert sanitize_link("mailto:a@b.c") == "mailto:a@b.c"
        assert sanitize_link("javascript:alert(1)") == "#"
        assert sanitize_link("java script:alert(1)") == "#"

    def test_button_rel(self):
        """New-tab and sponsored links carry the matching rel values."""
        html = render_button({"text": "Buy", "link": "https://acme.test", "target": "_blank", "sponsored": True})
        assert 'rel="noopener noreferrer sponsored"' in html
        assert 'target="_blank"' in html

    def test_button_without_link(self):
        """A button with no link renders as a span."""
        assert "<span class=" in render_button({"text": "Static", "link": ""})

    def test_button_email_sanitizes(self):
        """Email buttons neutralise javascript links."""
        assert 'href="#"' in button_email({"link": "javascript:alert(1)"}, {})

    def test_image_rejects_unsafe_src(self):
        """A javascript image source is emptied."""
        html = render_image({"src": "javascript:alert(1)"})
        assert 'src=""' in html

    def test_image_link_wrapper(self):
        """Linked images open their link in a new tab."""
        html = render_image({"src": "/img/a.png", "link": "https://acme.test"})
        assert '<a href="https://acme.test" target="_blank"' in html

    def test_parse_video_url(self):
        """YouTube and Vimeo URLs resolve to platform data; anything else gives None."""
        youtube = parse_video_url("https://www.youtube.com/watch?v=dQw4w9WgXcQ")
        assert youtube["platform"] == "youtube"
        assert youtube["thumbnail"] == "https://img.youtube.com/vi/dQw4w9WgXcQ/maxresdefault.jpg"
        assert parse_video_url("https://vimeo.com/123456")["embed_url"] == "https://player.vimeo.com/video/123456"
        assert parse_video_url("https://example.com/video") is None
        assert parse_video_url("") is None

    def test_video_page_embed(self):
        """Page video from YouTube embeds the privacy-friendly iframe."""
        html = video_page({"videoUrl": "https://youtu.be/dQw4w9WgXcQ"}, {"block_id": "v1"})
        assert "lb-video-youtube" in html
        assert 'src="https://www.youtube.com/embed/dQw4w9WgXcQ?rel=0"' in html

    def test_video_page_direct_file(self):
        """Direct video files use <video> with the loop flag."""
        html = video_page({"videoUrl": "https://cdn.test/clip.mp4", "loop": True}, {})
        assert '<video src="https://cdn.test/clip.mp4" controls loop' in html

    def test_video_email_thumbnail(self):
        """Email video is a linked thumbnail with a play button."""
        html = video_email({"videoUrl": "https://youtu.be/dQw4w9WgXcQ"}, {})
        assert 'href="https://youtu.be/dQw4w9WgXcQ"' in html
        assert "img.youtube.com/vi/dQw4w9WgXcQ" in html
        assert "background-color: #FF0000" in html

    def test_video_email_preview_embeds_player(self):
        """Preview mode embeds the iframe or <video> instead of a linked thumbnail."""
        embedded = video_email({"videoUrl": "https://youtu.be/dQw4w9WgXcQ"}, {"preview_mode": True})
        assert '<iframe src="https://www.youtube.com/embed/dQw4w9WgXcQ?rel=0"' in embedded
        assert "img.youtube.com" not in embedded

        direct = video_email({"videoUrl": "https://cdn.test/clip.mp4"}, {"preview_mode": True})
        assert '<video src="https://cdn.test/clip.mp4" controls' in direct

        with_thumbnail = video_email(
            {"videoUrl": "https://youtu.be/dQw4w9WgXcQ", "thumbnailUrl": "https://cdn.test/poster.jpg"},
            {"preview_mode": True},
        )
        assert "<iframe" not in with_thumbnail
        assert "https://cdn.test/poster.jpg" in with_thumbnail

    def test_parse_dailymotion_url(self):
        """Dailymotion page and short links resolve to the embed and thumbnail URLs."""
        info = parse_video_url("https://www.dailymotion.com/video/x8abc12")
        assert info["platform"] == "dailymotion"
        assert info["embed_url"] == "https://www.dailymotion.com/embed/video/x8abc12"
        assert info["thumbnail"] == "https://www.dailymotion.com/thumbnail/video/x8abc12"
        assert parse_video_url("https://dai.ly/x8abc12")["id"] == "x8abc12"

    def test_social_skips_empty_links(self):
        """Empty and unknown networks are skipped, and gap sets the icon margin."""
        assert social_page({"links": {"facebook": ""}}, {}) == ""
        html = social_email({"links": {"facebook": "https://fb.test/acme", "myspace": "https://x"}, "gap": "10px"}, {})
        assert "733547.png" in html
        assert "myspace" not in html
        assert "margin: 0 5px" in html


class TestDynamicBlocks:
    """Tests for countdown, time-to-read and table of contents."""

    def test_countdown_remaining(self):
        """Remaining time splits into units and is zero once the target has passed."""
        target = datetime(2026, 1, 2, 1, 1, 1)
        remaining = countdown_remaining(target, now=datetime(2026, 1, 1))
        assert remaining == {"days": 1, "hours": 1, "mins": 1, "secs": 1, "total": 90061}
        assert countdown_remaining(target, now=datetime(2027, 1, 1))["total"] == 0

    def test_countdown_target(self):
        """targetDate and targetTime combine into a single datetime."""
        assert countdown_target({"targetDate": "2026-12-31", "targetTime": "18:30"}) == datetime(2026, 12, 31, 18, 30)

    def test_countdown_email_expired(self):
        """Once the target has passed, email shows expiredMessage instead of the digits."""
        props = {"targetDate": "2026-01-01", "targetTime": "09:00", "expiredMessage": "Sale ended"}
        html = countdown_email(props, {"now": datetime(2026, 2, 1)})
        assert "Sale ended</p>" in html
        assert "<table" not in html

        running = countdown_email(props, {"now": datetime(2025, 12, 31, 9, 0)})
        assert "Sale ended" not in running
        assert ">01</span>" in running

    def test_reading_time(self):
        """Minutes round up with a floor of one and format as a range or exact value."""
        assert reading_minutes(401, 200) == 3
        assert reading_minutes(0, 200) == 1
        assert reading_minutes(100, 0) == 1
        assert reading_time_text(3) == "2-3 minutes"
        assert reading_time_text(1) == "1 minute"
        assert reading_time_text(4, as_range=False) == "4 minutes"

    def test_render_time_to_read(self):
        """Word count drives the label, and showIcon False omits the SVG."""
        html = render_time_to_read({"_wordCount": 450, "suffix": " read", "showIcon": False})
        assert "2-3 minutes read" in html
        assert "<svg" not in html

    def test_collect_headings_nested(self):
        """Headings inside columns are found and filtered by level."""
        blocks = [
            {"id": "a", "type": "heading", "props": {"text": "Intro", "level": "h1"}},
            {
                "type": "columns",
                "props": {"children": [[{"id": "b", "type": "heading", "props": {"text": "Deep", "level": "h3"}}]]},
            },
            {"id": "c", "type": "heading", "props": {"text": "Tiny", "level": "h6"}},
        ]
        headings = collect_headings(blocks, 1, 4)
        assert [(h["text"], h["level"]) for h in headings] == [("Intro", 1), ("Deep", 3)]

    def test_render_toc(self):
        """Heading blocks become anchored entries in a numbered list."""
        blocks = [{"id": "a", "type": "heading", "props": {"text": "Intro", "level": "h2"}}]
        html = render_toc({"_allBlocks": blocks, "listStyle": "number"})
        assert 'href="#toc-intro-a"' in html
        assert "<ol " in html

    def test_render_toc_empty(self):
        """Without headings the toc says so."""
        assert "No headings found." in render_toc({})
