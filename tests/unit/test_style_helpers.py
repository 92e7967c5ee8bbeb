"""Unit tests for layout style and save helpers."""

from laradash.engines.builder.save_helpers import create_save, email_button, email_spacer, page_div
from laradash.engines.builder.style_helpers import (
    box_shadow_value,
    build_block_classes,
    esc,
    justify_content,
    layout_styles_to_inline_css,
    merge_block_styles,
    side_declarations,
)
from laradash.engines.builder.text_utils import slugify, strip_tags, word_count


class TestLayoutStyles:
    """Tests for layoutStyles to inline CSS conversion."""

    def test_empty(self):
        """No layoutStyles means no CSS."""
        assert layout_styles_to_inline_css(None) == ""
        assert layout_styles_to_inline_css({}) == ""

    def test_declaration_order(self):
        """Background, spacing, typography and border come out in a fixed order."""
        css = layout_styles_to_inline_css(
            {
                "background": {"color": "#fff"},
                "margin": {"top": "10px", "bottom": ""},
                "padding": {"left": "4px"},
                "typography": {"color": "#111", "fontSize": "18px"},
                "border": {"width": {"top": "1px"}, "style": "solid", "color": "#ddd"},
            }
        )
        assert css == (
            "background-color: #fff; margin-top: 10px; padding-left: 4px; color: #111; "
            "font-size: 18px; border-top-width: 1px; border-style: solid; border-color: #ddd"
        )

    def test_background_image(self):
        """A background image is set to cover without repeating."""
        css = layout_styles_to_inline_css({"background": {"image": "https://cdn.test/bg.png"}})
        assert "background-image: url(https://cdn.test/bg.png)" in css
        assert "background-size: cover" in css
        assert "background-repeat: no-repeat" in css

    def test_box_shadow(self):
        """Missing shadow components default to zero and a soft black."""
        assert box_shadow_value({}) is None
        assert box_shadow_value({"blur": "8px", "inset": True}) == "inset 0px 0px 8px 0px rgba(0,0,0,0.1)"
        css = layout_styles_to_inline_css({"boxShadow": {"x": "2px", "color": "#000"}})
        assert css == "box-shadow: 2px 0px 0px 0px #000"

    def test_side_declarations_keep_empty(self):
        """keep_empty emits blank sides that are present."""
        layout = {"margin": {"top": "", "right": "4px"}}
        assert side_declarations(layout, "margin") == ["margin-right: 4px"]
        assert side_declarations(layout, "margin", keep_empty=True) == ["margin-top: ", "margin-right: 4px"]


class TestBlockClasses:
    """Tests for class and style merging."""

    def test_classes(self):
        """Classes start with lb-block lb-<type>, then customClass and extras."""
        assert build_block_classes("heading", {}) == "lb-block lb-heading"
        assert build_block_classes("list", {"customClass": "fancy"}, extra="lb-list-check") == (
            "lb-block lb-list fancy lb-list-check"
        )

    def test_merge_styles(self):
        """Layout CSS, block CSS and customCSS join in order, skipping blanks."""
        props = {"layoutStyles": {"padding": {"top": "8px"}}, "customCSS": "color: red"}
        assert merge_block_styles(props, "height: 20px") == "padding-top: 8px; height: 20px; color: red"
        assert merge_block_styles({}) == ""

    def test_esc(self):
        """None escapes to an empty string and markup is entity-encoded."""
        assert esc(None) == ""
        assert esc('<a href="x">') == "&lt;a href=&quot;x&quot;&gt;"

    def test_justify_content(self):
        """Alignment maps to flex values, defaulting to center."""
        assert justify_content("left") == "flex-start"
        assert justify_content("right") == "flex-end"
        assert justify_content("center") == "center"
        assert justify_content(None) == "center"


class TestSaveHelpers:
    """Tests for the shared save generators."""

    def test_create_save_from_content(self):
        """A content generator feeds both contexts."""
        save = create_save(content=lambda props, options: "<b>hi</b>", type="callout")
        page = save["page"]({}, {})
        email = save["email"]({}, {})
        assert page == '<div class="lb-block lb-callout" style=""><b>hi</b></div>'
        assert email.startswith('<table width="100%"')
        assert "<b>hi</b>" in email

    def test_create_save_explicit_wins(self):
        """An explicit email generator overrides the content generator."""
        def email(props, options):
            return "email"

        save = create_save(content=lambda props, options: "content", email=email, email_wrapper=False)
        assert save["email"] is email
        assert save["page"]({}, {}) == "content"

    def test_create_save_without_wrapper(self):
        """email_wrapper False returns the content without a table wrapper."""
        save = create_save(content=lambda props, options: "raw", email_wrapper=False)
        assert save["email"]({}, {}) == "raw"

    def test_page_div(self):
        """page_div joins block classes with customCSS."""
        html = page_div("spacer", {"customCSS": "height: 4px"}, "")
        assert html == '<div class="lb-block lb-spacer" style="height: 4px"></div>'

    def test_email_button_vml(self):
        """Buttons carry a VML roundrect sized from padding and radius."""
        html = email_button({"text": "Go", "link": "https://acme.test", "padding": "10px 20px", "borderRadius": "4px"})
        assert 'style="height:40px;v-text-anchor:middle;width:auto;" arcsize="8%"' in html
        assert 'href="https://acme.test"' in html

    def test_email_spacer(self):
        """Email spacers fix both height and line-height."""
        assert "height: 30px; line-height: 30px" in email_spacer("30px")


class TestTextUtils:
    """Tests for tag stripping, slugs and word counts."""

    def test_strip_tags(self):
        """Tags are removed and None gives an empty string."""
        assert strip_tags("<b>Hello</b> <i>world</i>") == "Hello world"
        assert strip_tags(None) == ""

    def test_slugify(self):
        """Slugs drop accents and punctuation and collapse spaces."""
        assert slugify("Getting Started!") == "getting-started"
        assert slugify("Café & Crème") == "cafe-creme"
        assert slugify("  multiple   spaces ") == "multiple-spaces"

    def test_word_count(self):
        """Entities and empty markup do not count as words."""
        assert word_count("<p>One two</p> <p>three &amp; four</p>") == 4
        assert word_count("<div></div>") == 0
