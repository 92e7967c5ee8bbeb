"""
Dynamic blocks - output depends on the date, the surrounding document, or a
remote source.

- countdown: live script widget on pages, static snapshot in email
- footer: company details, plus an unsubscribe link in email
- time-to-read: reading time from the document word count (``_wordCount``)
- toc: table of contents from the document's headings (``_allBlocks``)
- markdown: markdown content or a remote markdown file rendered to HTML
"""

import math
from datetime import datetime, timedelta
from typing import Any, Dict, List, Optional

from laradash.engines.builder.style_helpers import (
    border_declarations,
    build_block_classes,
    esc,
    layout_section,
    merge_block_styles,
    side_declarations,
)
from laradash.engines.builder.text_utils import slugify, strip_tags
from laradash.logging_config import get_logger

logger = get_logger(__name__)


def _layout(props: Dict[str, Any]) -> Optional[Dict[str, Any]]:
    layout = props.get("layoutStyles")
    return layout if isinstance(layout, dict) else None


# Countdown

COUNTDOWN_UNITS = (("days", "Days"), ("hours", "Hours"), ("mins", "Mins"), ("secs", "Secs"))


def _default_target_date() -> str:
    return (datetime.now() + timedelta(days=7)).strftime("%Y-%m-%d")


def countdown_target(props: Dict[str, Any]) -> datetime:
    """Target moment from ``targetDate``/``targetTime`` (defaults: a week out, 23:59)."""
    date = props.get("targetDate") or _default_target_date()
    time = props.get("targetTime") or "23:59"
    try:
        return datetime.fromisoformat(f"{date}T{time}:00")
    except ValueError:
        logger.warning("Invalid countdown target", extra={"target_date": date, "target_time": time})
        return datetime.now()


def countdown_remaining(target: datetime, now: Optional[datetime] = None) -> Dict[str, int]:
    """Whole days/hours/mins/secs until ``target``; all zero once it has passed."""
    seconds = max(0, int((target - (now or datetime.now())).total_seconds()))
    return {
        "days": seconds // 86400,
        "hours": (seconds // 3600) % 24,
        "mins": (seconds // 60) % 60,
        "secs": seconds % 60,
        "total": seconds,
    }


def countdown_page(props: Dict[str, Any], options: Dict[str, Any]) -> str:
    countdown_id = f"countdown-{options.get('block_id') or 'block'}"
    target = countdown_target(props).strftime("%Y-%m-%dT%H:%M:%S")
    background = layout_section(props, "background")
    text_color = layout_section(props, "typography").get("color") or props.get("textColor") or "#ffffff"
    number_color = props.get("numberColor") or "#635bff"

    block_styles = ["padding: 24px", f"text-align: {props.get('align') or 'center'}"]
    if not background.get("color"):
        block_styles.append(f"background-color: {props.get('backgroundColor') or '#1e293b'}")
    if not layout_section(props, "border"):
        block_styles.append("border-radius: 8px")

    title_html = ""
    if props.get("title"):
        title_html = (
            f'<p style="color: {text_color}; font-size: 18px; font-weight: 600; margin: 0 0 16px 0;">'
            f'{props["title"]}</p>'
        )
    units_html = "".join(
        f'<div style="background-color: rgba(255,255,255,0.1); border-radius: 8px; padding: 12px 16px; min-width: 60px;">'
        f'<span class="lb-countdown-{key}" style="color: {number_color}; font-size: 36px; font-weight: 700; '
        f'display: block;">00</span><span style="color: {text_color}; font-size: 11px; text-transform: uppercase; '
        f'letter-spacing: 1px;">{label}</span></div>'
        for key, label in COUNTDOWN_UNITS
    )

    classes = build_block_classes("countdown", props)
    return f"""<div class="{classes}" id="{countdown_id}" data-target="{target}" data-expired-message="{esc(props.get("expiredMessage") or "")}" style="{merge_block_styles(props, "; ".join(block_styles))}">
    {title_html}
    <div style="display: flex; justify-content: center; gap: 16px; flex-wrap: wrap;">{units_html}</div>
</div>
<script>
(function() {{
    const el = document.getElementById('{countdown_id}');
    if (!el) return;
    const target = new Date(el.dataset.target);
    const expiredMsg = el.dataset.expiredMessage;
    function update() {{
        const diff = Math.max(0, target - new Date());
        if (diff <= 0 && expiredMsg) {{
            el.innerHTML = '<p style="color: #ffffff; font-size: 18px; font-weight: 600; margin: 0;">' + expiredMsg + '</p>';
            return;
        }}
        el.querySelector('.lb-countdown-days').textContent = String(Math.floor(diff / 86400000)).padStart(2, '0');
        el.querySelector('.lb-countdown-hours').textContent = String(Math.floor((diff / 3600000) % 24)).padStart(2, '0');
        el.querySelector('.lb-countdown-mins').textContent = String(Math.floor((diff / 60000) % 60)).padStart(2, '0');
        el.querySelector('.lb-countdown-secs').textContent = String(Math.floor((diff / 1000) % 60)).padStart(2, '0');
    }}
    update();
    setInterval(update, 1000);
}})();
</script>"""


def countdown_email(props: Dict[str, Any], options: Dict[str, Any]) -> str:
    remaining = countdown_remaining(countdown_target(props), options.get("now"))
    background = props.get("backgroundColor") or "#1e293b"
    text_color = props.get("textColor") or "#ffffff"
    number_color = props.get("numberColor") or "#635bff"
    box = f"padding: 24px; background-color: {background}; border-radius: 8px; text-align: {props.get('align') or 'center'};"

    if remaining["total"] <= 0 and props.get("expiredMessage"):
        return (
            f'<div style="{box}"><p style="color: {text_color}; font-size: 18px; font-weight: 600; margin: 0;">'
            f'{props["expiredMessage"]}</p></div>'
        )

    separator = f'<td style="color: {number_color}; font-size: 28px; font-weight: 700; padding: 0 4px;">:</td>'
    cells = separator.join(
        f'<td style="text-align: center; padding: 0 12px;"><div style="background-color: rgba(255,255,255,0.1); '
        f'border-radius: 8px; padding: 12px 16px;"><span style="color: {number_color}; font-size: 36px; '
        f'font-weight: 700; display: block;">{remaining[key]:02d}</span><span style="color: {text_color}; '
        f'font-size: 11px; text-transform: uppercase; letter-spacing: 1px;">{label}</span></div></td>'
        for key, label in COUNTDOWN_UNITS
    )
    title_html = ""
    if props.get("title"):
        title_html = (
            f'<p style="color: {text_color}; font-size: 18px; font-weight: 600; margin: 0 0 16px 0;">'
            f'{props["title"]}</p>'
        )
    return (
        f'<div style="{box}">{title_html}<table width="100%" cellpadding="0" cellspacing="0" border="0"><tr>'
        f'<td align="center"><table cellpadding="0" cellspacing="0" border="0"><tr>{cells}</tr></table></td>'
        f"</tr></table></div>"
    )


# Footer

def _footer_lines(props: Dict[str, Any], text_color: str, font_size: str, email: bool) -> List[str]:
    link_color = props.get("linkColor") or "#635bff"
    underline = " text-decoration: underline;" if email else ""
    lines: List[str] = []
    if props.get("companyName"):
        lines.append(
            f'<p style="color: {text_color}; font-size: 14px; font-weight: 600; margin: 0 0 12px 0;">'
            f'{props["companyName"]}</p>'
        )
    if props.get("address"):
        lines.append(f'<p style="color: {text_color}; font-size: {font_size}; margin: 0 0 8px 0;">{props["address"]}</p>')
    if props.get("phone") or props.get("email"):
        contact = props.get("phone") or ""
        if props.get("phone") and props.get("email"):
            contact += " | "
        if props.get("email"):
            contact += f'<a href="mailto:{props["email"]}" style="color: {link_color};{underline}">{props["email"]}</a>'
        lines.append(f'<p style="color: {text_color}; font-size: {font_size}; margin: 0 0 8px 0;">{contact}</p>')
    if email and props.get("unsubscribeText"):
        lines.append(
            f'<p style="color: {text_color}; font-size: {font_size}; margin: 16px 0 0 0;">'
            f'<a href="{props.get("unsubscribeUrl") or "#"}" style="color: {link_color}; text-decoration: underline;">'
            f'{props["unsubscribeText"]}</a></p>'
        )
    if props.get("copyright"):
        lines.append(f'<p style="color: {text_color}; font-size: 11px; margin: 12px 0 0 0;">{props["copyright"]}</p>')
    return lines


def footer_page(props: Dict[str, Any], options: Dict[str, Any]) -> str:
    typography = layout_section(props, "typography")
    text_color = typography.get("color") or props.get("textColor") or "#6b7280"
    font_size = typography.get("fontSize") or props.get("fontSize") or "12px"

    block_styles = ["padding: 24px 16px", f"text-align: {props.get('align') or 'center'}"]
    if not layout_section(props, "border"):
        block_styles.append("border-top: 1px solid #e5e7eb")

    classes = build_block_classes("footer", props)
    content = "".join(_footer_lines(props, text_color, font_size, email=False))
    return f'<footer class="{classes}" style="{merge_block_styles(props, "; ".join(block_styles))}">{content}</footer>'


def footer_email(props: Dict[str, Any], options: Dict[str, Any]) -> str:
    text_color = props.get("textColor") or "#6b7280"
    font_size = props.get("fontSize") or "12px"
    content = "".join(_footer_lines(props, text_color, font_size, email=True))
    return (
        f'<div style="padding: 24px 16px; text-align: {props.get("align") or "center"}; '
        f'border-top: 1px solid #e5e7eb;">{content}</div>'
    )


# Time to read

CLOCK_ICON = (
    '<svg style="{style}" viewBox="0 0 24 24" fill="none" stroke="currentColor" stroke-width="2" '
    'stroke-linecap="round" stroke-linejoin="round"><circle cx="12" cy="12" r="10"/>'
    '<polyline points="12 6 12 12 16 14"/></svg>'
)


def reading_minutes(word_count: int, words_per_minute: int) -> int:
    if words_per_minute <= 0:
        return 1
    return max(1, math.ceil(word_count / words_per_minute))


def reading_time_text(minutes: int, as_range: bool = True) -> str:
    """
    >>> reading_time_text(3)
    '2-3 minutes'
    >>> reading_time_text(1)
    '1 minute'
    """
    if as_range:
        low = max(1, minutes - 1)
        if low != minutes:
            return f"{low}-{minutes} minutes"
    return "1 minute" if minutes == 1 else f"{minutes} minutes"


def render_time_to_read(props: Dict[str, Any], context: str = "page", block_id: Optional[str] = None) -> str:
    try:
        words_per_minute = int(props.get("wordsPerMinute", 200))
    except (TypeError, ValueError):
        words_per_minute = 200
    minutes = reading_minutes(int(props.get("_wordCount") or 0), words_per_minute)
    time_text = reading_time_text(minutes, bool(props.get("displayAsRange", True)))

    align = props.get("align", "left")
    justify = {"center": "center", "right": "flex-end"}.get(align, "flex-start")
    styles = ["display: flex", "align-items: center", "gap: 6px", f"justify-content: {justify}"]
    styles.extend(side_declarations(_layout(props), "margin", keep_empty=True))
    styles.extend(side_declarations(_layout(props), "padding", keep_empty=True))
    if props.get("customCSS"):
        styles.append(props["customCSS"])

    typography = layout_section(props, "typography")
    text_style = "; ".join(
        [
            f"color: {typography.get('color', props.get('color', '#666666'))}",
            f"font-size: {typography.get('fontSize', props.get('fontSize', '14px'))}",
            "line-height: 1.4",
        ]
    )

    icon = ""
    if props.get("showIcon", True):
        icon_style = f"color: {props.get('iconColor', '#666666')}; width: 16px; height: 16px; flex-shrink: 0"
        icon = CLOCK_ICON.format(style=esc(icon_style))

    display = f"{esc(props.get('prefix', ''))}{time_text}{esc(props.get('suffix', ''))}"
    classes = build_block_classes("time-to-read", props)
    return (
        f'<div class="{esc(classes)}" style="{esc("; ".join(styles))}">{icon}'
        f'<span style="{esc(text_style)}">{display}</span></div>'
    )


def _time_to_read_save(props: Dict[str, Any], options: Dict[str, Any]) -> str:
    return render_time_to_read(props, "page", options.get("block_id"))


# Table of contents

def _level_number(level: Any, default: int) -> int:
    try:
        return int(str(level).lower().replace("h", ""))
    except ValueError:
        return default


def collect_headings(blocks: List[Any], min_level: int, max_level: int) -> List[Dict[str, Any]]:
    """Headings between ``min_level`` and ``max_level``, descending into column children."""
    headings: List[Dict[str, Any]] = []

    def walk(items: List[Any]) -> None:
        for block in items:
            if not isinstance(block, dict):
                continue
            props = block.get("props") or {}
            if block.get("type") == "heading":
                level = _level_number(props.get("level", "h2"), 2)
                text = strip_tags(props.get("text", ""))
                if min_level <= level <= max_level and text:
                    headings.append(
                        {"level": level, "text": text, "id": block.get("id") or f"heading-{len(headings)}"}
                    )
            children = props.get("children")
            if children and isinstance(children, list):
                for column in children:
                    if isinstance(column, list):
                        walk(column)

    walk(blocks or [])
    return headings


def render_toc(props: Dict[str, Any], context: str = "page", block_id: Optional[str] = None) -> str:
    min_level = _level_number(props.get("minLevel", "h1"), 1)
    max_level = _level_number(props.get("maxLevel", "h4"), 4)
    list_style = props.get("listStyle", "bullet")
    border_color = props.get("borderColor", "#e2e8f0")
    link_color = props.get("linkColor", "#635bff")

    headings = collect_headings(props.get("_allBlocks") or [], min_level, max_level)

    title_html = ""
    if props.get("showTitle", True):
        title_html = (
            f'<h4 style="color: {esc(props.get("titleColor", "#1e293b"))}; font-size: 18px; font-weight: 600; '
            f'margin: 0 0 12px 0; padding-bottom: 8px; border-bottom: 1px solid {esc(border_color)};">'
            f'{esc(props.get("title", "Table of Contents"))}</h4>'
        )

    if not headings:
        items_html = '<li style="color: #94a3b8; font-style: italic;">No headings found.</li>'
    else:
        items_html = "".join(
            f'<li style="margin-left: {(h["level"] - min_level) * 16}px; margin-bottom: 6px; line-height: 1.6;">'
            f'<a href="#{esc("toc-" + slugify(h["text"]) + "-" + str(h["id"]))}" '
            f'style="color: {esc(link_color)}; text-decoration: none;">{esc(h["text"])}</a></li>'
            for h in headings
        )

    styles = [
        f"background-color: {props.get('backgroundColor', '#f8fafc')}",
        f"border: 1px solid {border_color}",
        "border-radius: 8px",
        "padding: 16px 20px",
        "margin-bottom: 16px",
    ]
    margin = layout_section(props, "margin")
    for side in ("top", "bottom"):
        if margin.get(side) is not None:
            styles.append(f"margin-{side}: {margin[side]}")
    if props.get("customCSS"):
        styles.append(props["customCSS"])

    tag = "ol" if list_style == "number" else "ul"
    list_css = {"none": "none", "number": "decimal"}.get(list_style, "disc")
    padding_left = "0" if list_style == "none" else "20px"
    classes = build_block_classes("toc", props)
    return (
        f'<div class="{classes}" style="{"; ".join(styles)}">{title_html}'
        f'<nav class="lb-toc-nav"><{tag} class="lb-toc-list" style="margin: 0; padding: 0; '
        f'list-style: {list_css}; padding-left: {padding_left};">{items_html}</{tag}></nav></div>'
    )


def _toc_save(props: Dict[str, Any], options: Dict[str, Any]) -> str:
    all_blocks = props.get("_allBlocks") or options.get("all_blocks") or []
    return render_toc({**props, "_allBlocks": all_blocks}, "page", options.get("block_id"))


# Markdown

MARKDOWN_EMPTY = (
    '<div class="lb-block lb-markdown markdown-empty" style="padding: 24px; text-align: center; color: #9ca3af; '
    'background: #f9fafb; border: 1px dashed #e5e7eb; border-radius: 8px;">'
    '<p style="margin: 0; font-size: 14px;">{message}</p></div>'
)


def _markdown_wrapper_styles(props: Dict[str, Any]) -> str:
    styles: List[str] = []
    background = layout_section(props, "background")
    if background.get("color"):
        styles.append(f"background-color: {esc(background['color'])}")
    styles.extend(esc(d) for d in side_declarations(_layout(props), "padding"))
    styles.extend(esc(d) for d in side_declarations(_layout(props), "margin"))
    border = layout_section(props, "border")
    if border:
        styles.extend(esc(d) for d in border_declarations(border))
    return f' style="{"; ".join(styles)}"' if styles else ""


def make_markdown_renderer(markdown_service):
    """Render callback bound to a markdown service (``convert_markdown``/``fetch_and_convert``)."""

    def render_markdown(props: Dict[str, Any], context: str = "page", block_id: Optional[str] = None) -> str:
        source_type = props.get("sourceType", "content")
        url = props.get("url", "")

        if source_type == "content":
            if not props.get("content"):
                return MARKDOWN_EMPTY.format(message="No markdown content configured")
            result = markdown_service.convert_markdown(props["content"])
        else:
            if not url:
                return MARKDOWN_EMPTY.format(message="No markdown URL configured")
            result = markdown_service.fetch_and_convert(url, bool(props.get("cacheEnabled", True)))

        style_attr = _markdown_wrapper_styles(props)

        if not result.success:
            return (
                f'<div class="lb-block lb-markdown markdown-error"{style_attr}>'
                '<div style="padding: 16px; background: #fef2f2; border: 1px solid #fecaca; border-radius: 8px;">'
                '<p style="margin: 0; color: #dc2626; font-size: 14px; font-weight: 500;">Failed to load markdown</p>'
                f'<p style="margin: 8px 0 0; color: #ef4444; font-size: 12px;">{esc(result.error or "Unknown error")}</p>'
                "</div></div>"
            )

        output = f'<div class="lb-block lb-markdown markdown-content"{style_attr}>'
        if props.get("showSource", True) and source_type == "url" and url:
            source_url = esc(result.source_url or url)
            output += (
                '<div class="markdown-source" style="margin-bottom: 12px; padding: 8px 12px; background: #f9fafb; '
                'border-radius: 6px; font-size: 12px; color: #6b7280;"><span style="margin-right: 8px;">Source:</span>'
                f'<a href="{source_url}" target="_blank" rel="noopener noreferrer" '
                f'style="color: #6366f1; text-decoration: underline;">{source_url}</a></div>'
            )
        output += f'<div class="markdown-body">{result.html or ""}</div></div>'
        return output

    return render_markdown


def markdown_definition(markdown_service) -> Dict[str, Any]:
    render = make_markdown_renderer(markdown_service)

    def save(props: Dict[str, Any], options: Dict[str, Any]) -> str:
        return render(props, "page", options.get("block_id"))

    return {
        "type": "markdown",
        "label": "Markdown",
        "category": "Content",
        "icon": "lucide:file-text",
        "keywords": ["md", "readme", "github", "documentation"],
        "defaultProps": {
            "sourceType": "content",
            "content": "",
            "url": "",
            "showSource": True,
            "cacheEnabled": True,
        },
        "save": {"*": save},
        "render": render,
    }


COUNTDOWN = {
    "type": "countdown",
    "label": "Countdown",
    "category": "Content",
    "icon": "lucide:timer",
    "keywords": ["timer", "sale", "deadline"],
    "defaultProps": {
        "targetDate": "",
        "targetTime": "23:59",
        "title": "Sale Ends In",
        "backgroundColor": "#1e293b",
        "textColor": "#ffffff",
        "numberColor": "#635bff",
        "align": "center",
        "expiredMessage": "This offer has expired!",
    },
    "save": {"page": countdown_page, "email": countdown_email},
}

FOOTER = {
    "type": "footer",
    "label": "Footer",
    "category": "Content",
    "icon": "lucide:panel-bottom",
    "keywords": ["unsubscribe", "copyright", "address"],
    "defaultProps": {
        "companyName": "{app_name}",
        "address": "",
        "phone": "",
        "email": "",
        "unsubscribeText": "Unsubscribe from these emails",
        "unsubscribeUrl": "#unsubscribe",
        "copyright": "© {year} {app_name}. All rights reserved.",
        "textColor": "#6b7280",
        "linkColor": "#635bff",
        "fontSize": "12px",
        "align": "center",
    },
    "save": {"page": footer_page, "email": footer_email},
}

TIME_TO_READ = {
    "type": "time-to-read",
    "label": "Time to Read",
    "category": "Content",
    "icon": "lucide:clock",
    "keywords": ["reading time", "minutes", "estimate"],
    "contexts": ["page"],
    "defaultProps": {
        "wordsPerMinute": 200,
        "displayAsRange": True,
        "prefix": "",
        "suffix": " read",
        "align": "left",
        "color": "#666666",
        "fontSize": "14px",
        "iconColor": "#666666",
        "showIcon": True,
    },
    "save": {"page": _time_to_read_save},
    "render": render_time_to_read,
}

TOC = {
    "type": "toc",
    "label": "Table of Contents",
    "category": "Content",
    "icon": "lucide:list-tree",
    "keywords": ["contents", "navigation", "headings"],
    "contexts": ["page"],
    "defaultProps": {
        "title": "Table of Contents",
        "showTitle": True,
        "minLevel": "h1",
        "maxLevel": "h4",
        "listStyle": "bullet",
        "backgroundColor": "#f8fafc",
        "borderColor": "#e2e8f0",
        "titleColor": "#1e293b",
        "linkColor": "#635bff",
    },
    "save": {"page": _toc_save},
    "render": render_toc,
}

DYNAMIC_BLOCKS = [COUNTDOWN, FOOTER, TIME_TO_READ, TOC]
