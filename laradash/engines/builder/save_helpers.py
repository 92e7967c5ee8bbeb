"""
Save helpers - shared HTML generators for block save tables.

Page output is modern HTML5 with ``lb-*`` classes; email output is
table-based with inline styles so it survives mail clients.

Usage:
    save = create_save(
        type="callout",
        content=lambda props, options: f"<p>{props['text']}</p>",
    )
    registry.register({"type": "callout", "save": save})
"""

from typing import Any, Callable, Dict, Mapping, Optional

from laradash.engines.builder.style_helpers import build_block_classes, merge_block_styles

Generator = Callable[[Dict[str, Any], Dict[str, Any]], str]

TABLE_OPEN = '<table width="100%" cellpadding="0" cellspacing="0" border="0" role="presentation">'


def page_div(block_type: str, props: Mapping[str, Any], content: str, extra_styles: str = "") -> str:
    """Wrap content in a div carrying the block classes and merged styles."""
    classes = build_block_classes(block_type, props)
    styles = merge_block_styles(props, extra_styles)
    return f'<div class="{classes}" style="{styles}">{content}</div>'


def email_table(
    props: Mapping[str, Any],
    content: str,
    width: str = "100%",
    align: Optional[str] = None,
    padding: str = "0",
    bg_color: str = "",
    extra_styles: str = "",
) -> str:
    """Wrap content in a single-cell presentation table."""
    td_styles = [
        f"padding: {padding}",
        f"text-align: {align or props.get('align') or 'left'}",
        f"background-color: {bg_color}" if bg_color else "",
        extra_styles,
    ]
    td_style = "; ".join(s for s in td_styles if s)
    return (
        f'<table width="{width}" cellpadding="0" cellspacing="0" border="0" role="presentation">\n'
        f"    <tr>\n"
        f'        <td style="{td_style}">\n'
        f"            {content}\n"
        f"        </td>\n"
        f"    </tr>\n"
        f"</table>"
    )


def email_table_with_layout(props: Mapping[str, Any], content: str) -> str:
    """Email table with the block's layout styles reduced to email-safe CSS."""
    styles = []
    layout = props.get("layoutStyles") or {}

    margin = layout.get("margin") or {}
    for side in ("top", "right", "bottom", "left"):
        if margin.get(side):
            styles.append(f"margin-{side}: {margin[side]}")

    padding = layout.get("padding")
    if padding:
        sides = " ".join(padding.get(side) or "0" for side in ("top", "right", "bottom", "left"))
        styles.append(f"padding: {sides}")

    background = layout.get("background") or {}
    if background.get("color"):
        styles.append(f"background-color: {background['color']}")

    border = layout.get("border") or {}
    border_width = border.get("width") or {}
    if border_width.get("top"):
        styles.append(
            f"border: {border_width['top']} {border.get('style') or 'solid'} {border.get('color') or '#000'}"
        )
    radius = border.get("radius") or {}
    if radius.get("topLeft"):
        styles.append(f"border-radius: {radius['topLeft']}")

    return email_table(props, content, align=props.get("align"), extra_styles="; ".join(styles))


def create_save(
    page: Optional[Generator] = None,
    email: Optional[Generator] = None,
    content: Optional[Generator] = None,
    email_wrapper: bool = True,
    type: Optional[str] = None,
) -> Dict[str, Generator]:
    """
    Build a ``{"page": fn, "email": fn}`` save table.

    Explicit ``page``/``email`` generators win. Otherwise ``content`` is used
    for both: wrapped in :func:`page_div` when ``type`` is given, and in
    :func:`email_table_with_layout` unless ``email_wrapper`` is False.
    """
    save: Dict[str, Generator] = {}

    if page:
        save["page"] = page
    elif content:
        def page_from_content(props: Dict[str, Any], options: Dict[str, Any]) -> str:
            inner = content(props, options)
            return page_div(type, props, inner) if type else inner

        save["page"] = page_from_content

    if email:
        save["email"] = email
    elif content:
        def email_from_content(props: Dict[str, Any], options: Dict[str, Any]) -> str:
            inner = content(props, options)
            return email_table_with_layout(props, inner) if email_wrapper else inner

        save["email"] = email_from_content

    return save


def email_text_styles(props: Mapping[str, Any]) -> str:
    styles = [
        f"color: {props.get('color') or '#333333'}",
        f"font-size: {props.get('fontSize') or '16px'}",
        f"font-weight: {props.get('fontWeight') or 'normal'}",
        f"line-height: {props.get('lineHeight') or '1.5'}",
        f"text-align: {props.get('align') or 'left'}",
        "font-family: Arial, sans-serif",
        "margin: 0",
    ]
    if props.get("letterSpacing"):
        styles.append(f"letter-spacing: {props['letterSpacing']}")
    return "; ".join(styles)


def _leading_int(value: Any, default: int = 0) -> int:
    digits = ""
    for ch in str(value).strip():
        if ch.isdigit():
            digits += ch
        else:
            break
    return int(digits) if digits else default


def email_button(props: Mapping[str, Any]) -> str:
    """Bulletproof email button: VML roundrect for Outlook, styled link elsewhere."""
    text = props.get("text") or "Click Here"
    link = props.get("link") or "#"
    background = props.get("backgroundColor") or "#635bff"
    color = props.get("textColor") or "#ffffff"
    radius = props.get("borderRadius") or "6px"
    padding = props.get("padding") or "12px 24px"
    font_size = props.get("fontSize") or "16px"
    font_weight = props.get("fontWeight") or "600"
    align = props.get("align") or "center"

    v_pad = _leading_int(padding.split(" ")[0])
    height = v_pad * 2 + 20
    arcsize = _leading_int(radius) * 2

    return f"""{TABLE_OPEN}
    <tr>
        <td align="{align}">
            <!--[if mso]>
            <v:roundrect xmlns:v="urn:schemas-microsoft-com:vml" xmlns:w="urn:schemas-microsoft-com:office:word" href="{link}" style="height:{height}px;v-text-anchor:middle;width:auto;" arcsize="{arcsize}%" strokecolor="{background}" fillcolor="{background}">
                <w:anchorlock/>
                <center style="color:{color};font-family:Arial,sans-serif;font-size:{font_size};font-weight:{font_weight};">{text}</center>
            </v:roundrect>
            <![endif]-->
            <!--[if !mso]><!-->
            <a href="{link}" style="display: inline-block; background-color: {background}; color: {color}; font-size: {font_size}; font-weight: {font_weight}; font-family: Arial, sans-serif; text-decoration: none; padding: {padding}; border-radius: {radius}; text-align: center; mso-hide: all;">
                {text}
            </a>
            <!--<![endif]-->
        </td>
    </tr>
</table>"""


def email_image(props: Mapping[str, Any]) -> str:
    src = props.get("src")
    if not src:
        return ""

    alt = props.get("alt") or ""
    width = props.get("width") or "100%"
    align = props.get("align") or "center"
    link = props.get("link")
    radius = props.get("borderRadius") or "0"

    img_style = "; ".join(
        s
        for s in (
            "display: block",
            f"max-width: {width}",
            "height: auto",
            f"border-radius: {radius}" if radius != "0" else "",
        )
        if s
    )
    img = f'<img src="{src}" alt="{alt}" style="{img_style}" width="{width.replace("%", "")}" />'
    if link:
        img = f'<a href="{link}" style="display: block;">{img}</a>'

    return f"""{TABLE_OPEN}
    <tr>
        <td align="{align}">
            {img}
        </td>
    </tr>
</table>"""


def email_divider(props: Mapping[str, Any]) -> str:
    color = props.get("color") or "#e5e7eb"
    height = props.get("height") or props.get("thickness") or "1px"
    width = props.get("width") or "100%"
    style = props.get("style") or "solid"
    margin = props.get("margin") or "20px 0"

    return f"""<table width="100%" cellpadding="0" cellspacing="0" border="0" role="presentation" style="margin: {margin};">
    <tr>
        <td>
            <div style="border-top: {height} {style} {color}; width: {width}; margin: 0 auto;"></div>
        </td>
    </tr>
</table>"""


def email_spacer(height: str = "20px") -> str:
    return f"""{TABLE_OPEN}
    <tr>
        <td style="height: {height}; line-height: {height}; font-size: 1px;">&nbsp;</td>
    </tr>
</table>"""
