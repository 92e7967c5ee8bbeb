"""
Text blocks - heading, text, list, quote, code, preformatted, table, html.

Heading, text, list, quote and code carry a server-side ``render`` callback.
The page save output is the same markup, so stored pages and placeholder
rendering stay in step.
"""

import re
from typing import Any, Dict, List, Optional

from laradash.engines.builder.save_helpers import email_table, email_text_styles
from laradash.engines.builder.style_helpers import (
    build_block_classes,
    border_declarations,
    dimension_declarations,
    esc,
    layout_section,
    merge_block_styles,
    side_declarations,
)
from laradash.engines.builder.text_utils import slugify, strip_tags

HEADING_LEVELS = ("h1", "h2", "h3", "h4", "h5", "h6")


def _typography_or(props: Dict[str, Any], key: str, css: str, fallback: Any) -> Optional[str]:
    typography = layout_section(props, "typography")
    if typography.get(key):
        return f"{css}: {typography[key]}"
    if fallback:
        return f"{css}: {fallback}"
    return None


def _box_declarations(props: Dict[str, Any]) -> List[str]:
    layout = props.get("layoutStyles") if isinstance(props.get("layoutStyles"), dict) else None
    return side_declarations(layout, "margin", keep_empty=True) + side_declarations(
        layout, "padding", keep_empty=True
    )


def _page_from_render(render):
    def page(props: Dict[str, Any], options: Dict[str, Any]) -> str:
        return render(props, "page", options.get("block_id")) or ""

    return page


# Heading

def render_heading(props: Dict[str, Any], context: str = "page", block_id: Optional[str] = None) -> str:
    text = props.get("text", "")
    level = props.get("level", "h2")
    plain_text = strip_tags(text)

    heading_id = ""
    if block_id and plain_text:
        heading_id = f"toc-{slugify(plain_text)}-{block_id}"

    styles: List[str] = []
    if props.get("align", "left"):
        styles.append(f"text-align: {props.get('align', 'left')}")

    for key, css, default in (
        ("color", "color", "#333333"),
        ("fontSize", "font-size", "32px"),
        ("fontWeight", "font-weight", "bold"),
        ("lineHeight", "line-height", "1.2"),
    ):
        declaration = _typography_or(props, key, css, props.get(key, default))
        if declaration:
            styles.append(declaration)

    letter_spacing = props.get("letterSpacing", "0")
    declaration = _typography_or(props, "letterSpacing", "letter-spacing", letter_spacing if letter_spacing != "0" else "")
    if declaration:
        styles.append(declaration)

    styles.extend(_box_declarations(props))
    layout = props.get("layoutStyles") if isinstance(props.get("layoutStyles"), dict) else None
    styles.extend(dimension_declarations(layout))
    if props.get("customCSS"):
        styles.append(props["customCSS"])

    if level not in HEADING_LEVELS:
        level = "h2"

    id_attr = f' id="{esc(heading_id)}"' if heading_id else ""
    classes = build_block_classes("heading", props)
    return f'<{level}{id_attr} class="{esc(classes)}" style="{esc("; ".join(styles))}">{text}</{level}>'


def heading_email(props: Dict[str, Any], options: Dict[str, Any]) -> str:
    level = props.get("level") if props.get("level") in HEADING_LEVELS else "h2"
    styled = {"fontSize": "32px", "fontWeight": "bold", "lineHeight": "1.2", **props}
    inner = f'<{level} style="{email_text_styles(styled)}">{props.get("text", "")}</{level}>'
    return email_table(props, inner)


# Text

def render_text(props: Dict[str, Any], context: str = "page", block_id: Optional[str] = None) -> str:
    styles: List[str] = []
    if props.get("align", "left"):
        styles.append(f"text-align: {props.get('align', 'left')}")

    for key, css, default in (
        ("color", "color", "#666666"),
        ("fontSize", "font-size", "16px"),
        ("lineHeight", "line-height", "1.6"),
        ("fontWeight", "font-weight", ""),
        ("letterSpacing", "letter-spacing", ""),
    ):
        declaration = _typography_or(props, key, css, props.get(key, default) if default else "")
        if declaration:
            styles.append(declaration)

    styles.extend(_box_declarations(props))
    layout = props.get("layoutStyles") if isinstance(props.get("layoutStyles"), dict) else None
    styles.extend(dimension_declarations(layout))

    background = layout_section(props, "background")
    if background.get("color"):
        styles.append(f"background-color: {background['color']}")
    if props.get("customCSS"):
        styles.append(props["customCSS"])

    classes = build_block_classes("text", props)
    return f'<div class="{esc(classes)}" style="{esc("; ".join(styles))}">{props.get("content", "")}</div>'


def text_email(props: Dict[str, Any], options: Dict[str, Any]) -> str:
    styled = {"color": "#666666", "lineHeight": "1.6", **props}
    inner = f'<div style="{email_text_styles(styled)}">{props.get("content", "")}</div>'
    return email_table(props, inner)


# List

def render_list(props: Dict[str, Any], context: str = "page", block_id: Optional[str] = None) -> str:
    items = props.get("items") or []
    list_type = props.get("listType", "bullet")
    icon_color = props.get("iconColor", "#635bff")
    typography = layout_section(props, "typography")

    styles = ["line-height: 1.8", "margin: 0"]
    if list_type == "check":
        styles.extend(["list-style: none", "padding-left: 0"])
    else:
        styles.append("padding-left: 24px")
    styles.append(f"color: {typography.get('color') or props.get('color', '#333333')}")
    styles.append(f"font-size: {typography.get('fontSize') or props.get('fontSize', '16px')}")
    if typography.get("fontWeight"):
        styles.append(f"font-weight: {typography['fontWeight']}")
    if typography.get("lineHeight"):
        styles.append(f"line-height: {typography['lineHeight']}")
    styles.extend(_box_declarations(props))
    if props.get("customCSS"):
        styles.append(props["customCSS"])

    items_html = ""
    for item in items:
        if list_type == "check":
            items_html += (
                '<li style="display: flex; align-items: flex-start; gap: 8px; margin-bottom: 8px;">'
                f'<span style="color: {esc(icon_color)}; flex-shrink: 0;">✓</span><span>{item}</span></li>'
            )
        else:
            items_html += f'<li style="margin-bottom: 8px;">{item}</li>'

    tag = "ol" if list_type == "number" else "ul"
    classes = build_block_classes("list", props, extra=f"lb-list-{list_type}")
    return f'<{tag} class="{esc(classes)}" style="{esc("; ".join(styles))}">{items_html}</{tag}>'


def list_email(props: Dict[str, Any], options: Dict[str, Any]) -> str:
    items = props.get("items") or []
    if not items:
        return ""
    list_type = props.get("listType", "bullet")
    color = props.get("color") or "#666666"
    font_size = props.get("fontSize") or "16px"

    if list_type == "check":
        icon_color = props.get("iconColor") or "#635bff"
        rows = "".join(
            f'<tr><td style="width: 24px; vertical-align: top; color: {icon_color}; font-size: {font_size};">✓</td>'
            f'<td style="color: {color}; font-size: {font_size}; line-height: 1.8; padding-bottom: 8px;">{item}</td></tr>'
            for item in items
        )
        return f'<table width="100%" cellpadding="0" cellspacing="0" border="0" role="presentation">{rows}</table>'

    tag = "ol" if list_type == "number" else "ul"
    items_html = "".join(f'<li style="margin-bottom: 8px;">{item}</li>' for item in items)
    return (
        f'<{tag} style="color: {color}; font-size: {font_size}; line-height: 1.8; margin: 0; '
        f'padding-left: 24px; font-family: Arial, sans-serif;">{items_html}</{tag}>'
    )


# Quote

def render_quote(props: Dict[str, Any], context: str = "page", block_id: Optional[str] = None) -> str:
    border_color = props.get("borderColor", "#635bff")
    text_color = props.get("textColor", "#475569")
    background = layout_section(props, "background")
    border = layout_section(props, "border")

    styles = ["padding: 20px", "padding-left: 24px", f"text-align: {props.get('align', 'left')}", "margin: 10px 0"]
    styles.append(f"background-color: {background.get('color') or props.get('backgroundColor', '#f8fafc')}")

    if border:
        width = border.get("width") if isinstance(border.get("width"), dict) else {}
        styles.append(f"border-left-width: {width.get('left') or '4px'}")
        styles.append("border-left-style: solid")
        styles.append(f"border-left-color: {border.get('color', border_color)}")
        radius = border.get("radius") if isinstance(border.get("radius"), dict) else {}
        if radius:
            if radius.get("topLeft"):
                styles.append(f"border-top-left-radius: {radius['topLeft']}")
            if radius.get("bottomLeft"):
                styles.append(f"border-bottom-left-radius: {radius['bottomLeft']}")
        else:
            styles.append("border-radius: 4px")
    else:
        styles.append(f"border-left: 4px solid {border_color}")
        styles.append("border-radius: 4px")

    styles.extend(_box_declarations(props))
    if props.get("customCSS"):
        styles.append(props["customCSS"])

    quote_html = (
        f'<p style="color: {esc(text_color)}; font-size: 1.125rem; font-style: italic; '
        f'line-height: 1.6; margin: 0 0 12px 0;">"{props.get("text", "")}"</p>'
    )
    author_html = ""
    if props.get("author"):
        author_html = (
            f'<cite style="color: {esc(props.get("authorColor", "#1e293b"))}; font-size: 0.875rem; '
            f'font-weight: 600; font-style: normal; display: block;">{esc(props["author"])}</cite>'
        )
    title_html = ""
    if props.get("authorTitle"):
        title_html = f'<span style="color: {esc(text_color)}; font-size: 0.75rem;">{esc(props["authorTitle"])}</span>'

    classes = build_block_classes("quote", props)
    return (
        f'<blockquote class="{esc(classes)}" style="{esc("; ".join(styles))}">'
        f"{quote_html}{author_html}{title_html}</blockquote>"
    )


def quote_email(props: Dict[str, Any], options: Dict[str, Any]) -> str:
    text_color = props.get("textColor") or "#475569"
    author_html = ""
    if props.get("author"):
        title = props.get("authorTitle")
        title_html = f'<span style="color: {text_color}; font-size: 14px;"> - {title}</span>' if title else ""
        author_html = (
            f'<p style="color: {props.get("authorColor") or "#1e293b"}; font-size: 14px; font-weight: 600; '
            f'margin: 12px 0 0 0;">{props["author"]}{title_html}</p>'
        )
    return (
        f'<div style="padding: 20px; padding-left: 24px; background-color: {props.get("backgroundColor") or "#f8fafc"}; '
        f'border-left: 4px solid {props.get("borderColor") or "#635bff"}; border-radius: 4px; margin: 10px 0;">'
        f'<p style="color: {text_color}; font-size: 16px; font-style: italic; line-height: 1.6; margin: 0;">'
        f'"{props.get("text", "")}"</p>{author_html}</div>'
    )


# Code

def _safe_language(language: Any) -> str:
    return re.sub(r"[^a-zA-Z0-9_-]", "", str(language or ""))


def render_code(props: Dict[str, Any], context: str = "page", block_id: Optional[str] = None) -> str:
    language = _safe_language(props.get("language", "plaintext"))

    wrapper_styles = _box_declarations(props)
    border = layout_section(props, "border")
    if border:
        wrapper_styles.extend(border_declarations(border))
    if props.get("customCSS"):
        wrapper_styles.append(props["customCSS"])

    pre_styles = "; ".join(
        [
            "margin: 0",
            "white-space: pre-wrap",
            "word-wrap: break-word",
            f"font-size: {props.get('fontSize', '14px')}",
            "line-height: 1.5",
            f"border-radius: {props.get('borderRadius', '8px')}",
        ]
    )
    style_attr = f' style="{esc("; ".join(wrapper_styles))}"' if wrapper_styles else ""
    classes = build_block_classes("code", props)
    return (
        f'<div class="{esc(classes)}"{style_attr}>'
        f'<pre class="language-{esc(language)}" style="{esc(pre_styles)}">'
        f'<code class="language-{esc(language)}">{esc(props.get("code", ""))}</code></pre></div>'
    )


def code_email(props: Dict[str, Any], options: Dict[str, Any]) -> str:
    return (
        f'<pre style="margin: 0; background-color: {props.get("backgroundColor") or "#1e1e1e"}; '
        f'color: {props.get("textColor") or "#d4d4d4"}; border-radius: {props.get("borderRadius") or "8px"}; '
        f'padding: 16px; font-family: monospace; font-size: {props.get("fontSize") or "14px"}; '
        f'line-height: 1.5; white-space: pre-wrap; word-wrap: break-word;">{esc(props.get("code", ""))}</pre>'
    )


# Preformatted

PREFORMATTED_FONT = 'ui-monospace, SFMono-Regular, "SF Mono", Menlo, Consolas, "Liberation Mono", monospace'


def preformatted_page(props: Dict[str, Any], options: Dict[str, Any]) -> str:
    typography = layout_section(props, "typography")
    background = layout_section(props, "background")
    border = layout_section(props, "border")

    styles = ["overflow-x: auto", "white-space: pre-wrap", "word-wrap: break-word"]
    if not typography.get("fontFamily"):
        styles.append(f"font-family: {PREFORMATTED_FONT}")
    if not typography.get("fontSize"):
        styles.append("font-size: 14px")
    if not typography.get("lineHeight"):
        styles.append("line-height: 1.6")
    if not typography.get("color"):
        styles.append("color: #333333")
    if not background.get("color"):
        styles.append("background-color: #f5f5f5")
    if not border.get("width"):
        styles.append("border: 1px solid #e0e0e0")
    if not border.get("radius"):
        styles.append("border-radius: 4px")
    if not layout_section(props, "padding"):
        styles.append("padding: 16px")

    classes = build_block_classes("preformatted", props)
    merged = merge_block_styles(props, "; ".join(styles))
    return f'<pre class="{classes}" style="margin: 0; {merged}">{props.get("text") or ""}</pre>'


def preformatted_email(props: Dict[str, Any], options: Dict[str, Any]) -> str:
    typography = layout_section(props, "typography")
    border = layout_section(props, "border")
    radius = border.get("radius") if isinstance(border.get("radius"), dict) else {}
    width = border.get("width") if isinstance(border.get("width"), dict) else {}
    return (
        f'<pre style="margin: 0; background-color: {layout_section(props, "background").get("color") or "#f5f5f5"}; '
        f'border-radius: {radius.get("topLeft") or "4px"}; padding: 16px; overflow-x: auto; '
        f"white-space: pre-wrap; word-wrap: break-word; font-family: monospace; "
        f'font-size: {typography.get("fontSize") or "14px"}; line-height: {typography.get("lineHeight") or "1.6"}; '
        f'color: {typography.get("color") or "#333333"}; '
        f'border: {width.get("top") or "1px"} solid {border.get("color") or "#e0e0e0"};">{props.get("text") or ""}</pre>'
    )


# Table

def _table_html(props: Dict[str, Any], extra_styles: str = "") -> str:
    headers = props.get("headers") or []
    rows = props.get("rows") or []
    padding = props.get("cellPadding") or "12px"
    border_color = props.get("borderColor") or "#e2e8f0"

    header_html = ""
    if props.get("showHeader", True) and headers:
        cells = "".join(
            f'<th style="padding: {padding}; text-align: left; border: 1px solid {border_color}; font-weight: 600;">{h}</th>'
            for h in headers
        )
        header_html = (
            f'<thead><tr style="background-color: {props.get("headerBgColor") or "#f1f5f9"}; '
            f'color: {props.get("headerTextColor") or "#1e293b"};">{cells}</tr></thead>'
        )

    body_html = "".join(
        "<tr>"
        + "".join(f'<td style="padding: {padding}; border: 1px solid {border_color};">{cell}</td>' for cell in row)
        + "</tr>"
        for row in rows
    )
    style = f"font-size: {props.get('fontSize') or '14px'}; border-collapse: collapse; margin: 10px 0"
    if extra_styles:
        style = f"{style}; {extra_styles}"
    return (
        f'<table role="presentation" width="100%" cellpadding="0" cellspacing="0" style="{style};">'
        f"{header_html}<tbody>{body_html}</tbody></table>"
    )


def table_page(props: Dict[str, Any], options: Dict[str, Any]) -> str:
    classes = build_block_classes("table", props)
    return f'<div class="{classes}" style="{merge_block_styles(props, "overflow-x: auto")}">{_table_html(props)}</div>'


def table_email(props: Dict[str, Any], options: Dict[str, Any]) -> str:
    return _table_html(props)


# HTML

def html_save(props: Dict[str, Any], options: Dict[str, Any]) -> str:
    return props.get("code") or ""


HEADING = {
    "type": "heading",
    "label": "Heading",
    "category": "Text",
    "icon": "lucide:heading",
    "keywords": ["title", "h1", "h2", "header"],
    "defaultProps": {
        "text": "Your Heading Here",
        "level": "h1",
        "align": "center",
        "color": "#333333",
        "fontSize": "28px",
        "fontWeight": "bold",
    },
    "save": {"page": _page_from_render(render_heading), "email": heading_email},
    "render": render_heading,
}

TEXT = {
    "type": "text",
    "label": "Text",
    "category": "Text",
    "icon": "lucide:type",
    "keywords": ["paragraph", "content"],
    "defaultProps": {
        "content": "Enter your text here...",
        "align": "left",
        "color": "#666666",
        "fontSize": "16px",
        "lineHeight": "1.6",
    },
    "save": {"page": _page_from_render(render_text), "email": text_email},
    "render": render_text,
}

LIST = {
    "type": "list",
    "label": "List",
    "category": "Text",
    "icon": "lucide:list",
    "keywords": ["bullet", "numbered", "checklist"],
    "defaultProps": {
        "items": ["First item", "Second item", "Third item"],
        "listType": "bullet",
        "color": "#333333",
        "fontSize": "16px",
        "iconColor": "#635bff",
    },
    "save": {"page": _page_from_render(render_list), "email": list_email},
    "render": render_list,
}

QUOTE = {
    "type": "quote",
    "label": "Quote",
    "category": "Text",
    "icon": "lucide:quote",
    "keywords": ["blockquote", "testimonial", "citation"],
    "defaultProps": {
        "text": "This is a quote.",
        "author": "",
        "authorTitle": "",
        "borderColor": "#635bff",
        "backgroundColor": "#f8fafc",
        "textColor": "#475569",
        "authorColor": "#1e293b",
        "align": "left",
    },
    "save": {"page": _page_from_render(render_quote), "email": quote_email},
    "render": render_quote,
}

CODE = {
    "type": "code",
    "label": "Code",
    "category": "Advanced",
    "icon": "lucide:code",
    "keywords": ["snippet", "syntax", "programming"],
    "defaultProps": {
        "code": "",
        "language": "plaintext",
        "fontSize": "14px",
        "backgroundColor": "#1e1e1e",
        "textColor": "#d4d4d4",
        "borderRadius": "8px",
    },
    "save": {"page": _page_from_render(render_code), "email": code_email},
    "render": render_code,
}

PREFORMATTED = {
    "type": "preformatted",
    "label": "Preformatted",
    "category": "Text",
    "icon": "lucide:file-code",
    "keywords": ["pre", "monospace"],
    "defaultProps": {"text": ""},
    "save": {"page": preformatted_page, "email": preformatted_email},
}

TABLE = {
    "type": "table",
    "label": "Table",
    "category": "Content",
    "icon": "lucide:table",
    "keywords": ["grid", "data", "rows"],
    "defaultProps": {
        "headers": ["Header 1", "Header 2", "Header 3"],
        "rows": [["Cell 1", "Cell 2", "Cell 3"]],
        "showHeader": True,
        "headerBgColor": "#f1f5f9",
        "headerTextColor": "#1e293b",
        "borderColor": "#e2e8f0",
        "cellPadding": "12px",
        "fontSize": "14px",
    },
    "save": {"page": table_page, "email": table_email},
}

HTML = {
    "type": "html",
    "label": "HTML",
    "category": "Advanced",
    "icon": "lucide:code-xml",
    "keywords": ["custom", "embed", "raw"],
    "defaultProps": {"code": ""},
    "save": {"*": html_save},
}

TEXT_BLOCKS = [HEADING, TEXT, LIST, QUOTE, CODE, PREFORMATTED, TABLE, HTML]
