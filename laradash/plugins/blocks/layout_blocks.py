"""
Layout blocks - columns, section, accordion.

Columns nest other blocks: ``props["children"]`` is a list of columns and
each column is a list of blocks, rendered through the adapter's
``generate_block_html`` option.
"""

from typing import Any, Dict, List

from laradash.engines.builder.style_helpers import (
    build_block_classes,
    layout_section,
    merge_block_styles,
)

ALIGN_ITEMS = {"start": "flex-start", "center": "center", "end": "flex-end", "stretch": "stretch"}
JUSTIFY_CONTENT = {
    **ALIGN_ITEMS,
    "space-between": "space-between",
    "space-around": "space-around",
}
EMAIL_VERTICAL_ALIGN = {"start": "top", "center": "middle", "end": "bottom", "stretch": "top"}


def _column_count(props: Dict[str, Any]) -> int:
    try:
        return max(1, int(props.get("columns") or 2))
    except (TypeError, ValueError):
        return 2


def _render_column(column: Any, options: Dict[str, Any]) -> str:
    generate = options.get("generate_block_html")
    if not generate or not isinstance(column, list):
        return ""
    return "".join(generate(block, options) for block in column if isinstance(block, dict))


def columns_page(props: Dict[str, Any], options: Dict[str, Any]) -> str:
    gap = props.get("gap") or "20px"
    columns = _column_count(props)
    horizontal = props.get("horizontalAlign") or "stretch"
    share = f"{100 / columns:g}%"

    if horizontal == "stretch":
        column_width = f"flex: 1 1 calc({share} - {gap})"
    else:
        column_width = f"flex: 0 0 auto; width: calc({share} - {gap})"

    columns_html = "".join(
        f'<div class="lb-column" style="{column_width}; min-width: 0;">{_render_column(column, options)}</div>'
        for column in props.get("children") or []
    )

    block_styles = "; ".join(
        [
            "display: flex",
            "flex-wrap: wrap",
            f"gap: {gap}",
            f"align-items: {ALIGN_ITEMS.get(props.get('verticalAlign') or 'stretch', 'stretch')}",
            f"justify-content: {JUSTIFY_CONTENT.get(horizontal, 'stretch')}",
        ]
    )
    classes = [build_block_classes("columns", props), f"lb-columns-{columns}"]
    if props.get("stackOnMobile") is not False:
        classes.append("lb-columns-stack-mobile")

    return f'<div class="{" ".join(classes)}" style="{merge_block_styles(props, block_styles)}">{columns_html}</div>'


def columns_email(props: Dict[str, Any], options: Dict[str, Any]) -> str:
    columns = _column_count(props)
    width = f"{100 / columns:g}%"
    valign = EMAIL_VERTICAL_ALIGN.get(props.get("verticalAlign") or "stretch", "top")
    gap = props.get("gap") or "20px"

    cells: List[str] = []
    for index, column in enumerate(props.get("children") or []):
        right = gap if index < columns - 1 else "0"
        content = _render_column(column, options) or "&nbsp;"
        cells.append(f'<td style="width: {width}; vertical-align: {valign}; padding: 0 {right} 0 0;">{content}</td>')

    return f'<table width="100%" cellpadding="0" cellspacing="0" border="0"><tr>{"".join(cells)}</tr></table>'


# Accordion

DEFAULT_ACCORDION_ITEMS = [{"title": "Accordion Item", "content": "Content goes here..."}]

CHEVRON_ICON = (
    '<svg width="20" height="20" viewBox="0 0 24 24" fill="none" stroke="currentColor" stroke-width="2" '
    'stroke-linecap="round" stroke-linejoin="round"><polyline points="6 9 12 15 18 9"></polyline></svg>'
)


def _accordion_script(accordion_id: str, header_bg: str, header_bg_active: str) -> str:
    return f"""<script>
(function() {{
    const accordion = document.getElementById('{accordion_id}');
    if (!accordion) return;
    const isIndependent = accordion.dataset.independent === 'true';
    const headers = accordion.querySelectorAll('.lb-accordion-header');
    headers.forEach(header => {{
        header.addEventListener('click', function() {{
            const content = document.getElementById(this.dataset.target);
            const icon = this.querySelector('.lb-accordion-icon');
            const isOpen = content.style.maxHeight && content.style.maxHeight !== '0px';
            if (!isIndependent) {{
                accordion.querySelectorAll('.lb-accordion-content').forEach(c => {{ c.style.maxHeight = '0px'; }});
                accordion.querySelectorAll('.lb-accordion-icon').forEach(i => {{ i.style.transform = 'rotate(0deg)'; }});
                accordion.querySelectorAll('.lb-accordion-header').forEach(h => {{ h.style.backgroundColor = '{header_bg}'; }});
            }}
            if (isOpen) {{
                content.style.maxHeight = '0px';
                icon.style.transform = 'rotate(0deg)';
                this.style.backgroundColor = '{header_bg}';
            }} else {{
                content.style.maxHeight = content.scrollHeight + 'px';
                icon.style.transform = 'rotate(180deg)';
                this.style.backgroundColor = '{header_bg_active}';
            }}
        }});
    }});
    if (headers[0]) headers[0].click();
}})();
</script>"""


def accordion_page(props: Dict[str, Any], options: Dict[str, Any]) -> str:
    items = props.get("items") or DEFAULT_ACCORDION_ITEMS
    accordion_id = f"accordion-{options.get('block_id') or 'block'}"
    border = layout_section(props, "border")
    typography = layout_section(props, "typography")
    radius = border.get("radius") if isinstance(border.get("radius"), dict) else {}

    border_color = border.get("color") or props.get("borderColor") or "#e5e7eb"
    border_radius = radius.get("topLeft") or props.get("borderRadius") or "8px"
    header_bg = props.get("headerBgColor") or "#ffffff"
    header_bg_active = props.get("headerBgColorActive") or "#f9fafb"
    title_color = typography.get("color") or props.get("titleColor") or "#1f2937"
    title_size = typography.get("fontSize") or props.get("titleFontSize") or "16px"
    title_weight = typography.get("fontWeight") or props.get("titleFontWeight") or "600"
    icon_left = (props.get("iconPosition") or "right") == "left"
    duration = props.get("transitionDuration") or 200

    items_html = ""
    for index, item in enumerate(items):
        item_id = f"{accordion_id}-item-{index}"
        divider = "none" if index == len(items) - 1 else f"1px solid {border_color}"
        icon_margin = "margin-right: 12px;" if icon_left else "margin-left: 12px;"
        items_html += (
            f'<div class="lb-accordion-item" data-index="{index}" style="border-bottom: {divider};">'
            f'<button type="button" class="lb-accordion-header" data-target="{item_id}" style="display: flex; '
            f"align-items: center; justify-content: space-between; width: 100%; "
            f'padding: {props.get("headerPadding") or "16px"}; background-color: {header_bg}; border: none; '
            f"cursor: pointer; text-align: left; transition: background-color 0.2s; "
            f'flex-direction: {"row-reverse" if icon_left else "row"};">'
            f'<span style="font-weight: {title_weight}; font-size: {title_size}; color: {title_color}; flex: 1;">'
            f'{item.get("title", "")}</span>'
            f'<span class="lb-accordion-icon" style="color: {props.get("iconColor") or "#6b7280"}; '
            f'transition: transform {duration}ms ease; {icon_margin}">{CHEVRON_ICON}</span></button>'
            f'<div id="{item_id}" class="lb-accordion-content" style="max-height: 0; overflow: hidden; '
            f'transition: max-height {duration}ms ease-in-out;">'
            f'<div style="padding: {props.get("contentPadding") or "16px"}; '
            f'background-color: {props.get("contentBgColor") or "#ffffff"}; color: {props.get("contentColor") or "#4b5563"}; '
            f'font-size: {props.get("contentFontSize") or "14px"}; line-height: 1.6;">{item.get("content", "")}</div>'
            f"</div></div>"
        )

    block_styles = ["overflow: hidden"]
    if not border:
        block_styles.extend([f"border: 1px solid {border_color}", f"border-radius: {border_radius}"])

    independent = "true" if props.get("independentToggle") else "false"
    classes = build_block_classes("accordion", props)
    return (
        f'<div class="{classes}" id="{accordion_id}" data-independent="{independent}" '
        f'style="{merge_block_styles(props, "; ".join(block_styles))}">{items_html}</div>'
        f"{_accordion_script(accordion_id, header_bg, header_bg_active)}"
    )


def accordion_email(props: Dict[str, Any], options: Dict[str, Any]) -> str:
    items = props.get("items") or DEFAULT_ACCORDION_ITEMS
    border_color = props.get("borderColor") or "#e5e7eb"

    items_html = ""
    for index, item in enumerate(items):
        divider = "none" if index == len(items) - 1 else f"1px solid {border_color}"
        items_html += (
            f'<div style="border-bottom: {divider};">'
            f'<div style="display: flex; align-items: center; justify-content: space-between; '
            f'padding: {props.get("headerPadding") or "16px"}; background-color: {props.get("headerBgColor") or "#ffffff"};">'
            f'<span style="font-weight: {props.get("titleFontWeight") or "600"}; '
            f'font-size: {props.get("titleFontSize") or "16px"}; color: {props.get("titleColor") or "#1f2937"};">'
            f'{item.get("title", "")}</span>'
            f'<span style="color: {props.get("iconColor") or "#6b7280"}; font-size: 12px;">&#9660;</span></div>'
            f'<div style="padding: {props.get("contentPadding") or "16px"}; '
            f'background-color: {props.get("contentBgColor") or "#ffffff"}; color: {props.get("contentColor") or "#4b5563"}; '
            f'font-size: {props.get("contentFontSize") or "14px"}; line-height: 1.6;">{item.get("content", "")}</div>'
            f"</div>"
        )

    return (
        f'<div style="border: 1px solid {border_color}; border-radius: {props.get("borderRadius") or "8px"}; '
        f'overflow: hidden;">{items_html}</div>'
    )


COLUMNS = {
    "type": "columns",
    "label": "Columns",
    "category": "Layout",
    "icon": "lucide:columns-2",
    "keywords": ["grid", "layout", "row"],
    "defaultProps": {
        "columns": 2,
        "gap": "20px",
        "verticalAlign": "stretch",
        "horizontalAlign": "stretch",
        "stackOnMobile": True,
        "children": [[], []],
    },
    "supports": {"nesting": True},
    "save": {"page": columns_page, "email": columns_email},
}

# Page-only container; the web adapter renders it without a save table.
SECTION = {
    "type": "section",
    "label": "Section",
    "category": "Layout",
    "icon": "lucide:square",
    "keywords": ["container", "wrapper"],
    "contexts": ["page"],
    "defaultProps": {
        "padding": "40px 20px",
        "backgroundColor": "transparent",
        "maxWidth": "1200px",
        "children": [],
    },
    "supports": {"nesting": True},
}

ACCORDION = {
    "type": "accordion",
    "label": "Accordion",
    "category": "Content",
    "icon": "lucide:chevrons-down-up",
    "keywords": ["faq", "collapse", "toggle"],
    "defaultProps": {
        "items": [
            {"title": "Accordion Item 1", "content": "Content for the first item."},
            {"title": "Accordion Item 2", "content": "Content for the second item."},
        ],
        "iconPosition": "right",
        "independentToggle": False,
    },
    "save": {"page": accordion_page, "email": accordion_email},
}

LAYOUT_BLOCKS = [COLUMNS, SECTION, ACCORDION]
