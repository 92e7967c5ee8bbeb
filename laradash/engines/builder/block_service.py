"""
Block Service - programmatic email template construction.

Factories return ``{id, type, props}`` blocks with sensible defaults so seed
data and default templates can be assembled in code, then turned into a
self-contained email document without going through the adapters.
"""

import secrets
import string
import uuid
from datetime import date, datetime, timedelta
from typing import Any, Dict, List, Optional

ID_ALPHABET = string.ascii_letters + string.digits

SOCIAL_ICON_URLS = {
    "facebook": "https://cdn-icons-png.flaticon.com/512/124/124010.png",
    "twitter": "https://cdn-icons-png.flaticon.com/512/124/124021.png",
    "instagram": "https://cdn-icons-png.flaticon.com/512/174/174855.png",
    "linkedin": "https://cdn-icons-png.flaticon.com/512/174/174857.png",
    "youtube": "https://cdn-icons-png.flaticon.com/512/174/174883.png",
}

PLAY_BUTTON = '<span style="color: #ffffff; font-size: 24px;">&#9654;</span>'


class BlockService:
    """Builds email blocks and whole email templates."""

    def block_id(self) -> str:
        return "block_" + "".join(secrets.choice(ID_ALPHABET) for _ in range(8))

    def default_layout_styles(self) -> Dict[str, Any]:
        return {
            "margin": {"top": "", "right": "", "bottom": "", "left": ""},
            "padding": {"top": "", "right": "", "bottom": "", "left": ""},
        }

    def get_default_canvas_settings(self) -> Dict[str, Any]:
        return {
            "width": "600px",
            "contentPadding": "32px",
            "contentMargin": "40px",
            "layoutStyles": {
                "background": {"color": "#ffffff"},
                "typography": {
                    "fontFamily": "Arial, sans-serif",
                    "fontSize": "16px",
                    "color": "#333333",
                },
                "border": {
                    "radius": {
                        "topLeft": "8px",
                        "topRight": "8px",
                        "bottomLeft": "8px",
                        "bottomRight": "8px",
                    },
                },
            },
        }

    def _block(self, block_type: str, props: Dict[str, Any]) -> Dict[str, Any]:
        return {
            "id": self.block_id(),
            "type": block_type,
            "props": {**props, "layoutStyles": self.default_layout_styles()},
        }

    # ------------------------------------------------------------------
    # Factories
    # ------------------------------------------------------------------

    def heading(
        self,
        text: str,
        level: str = "h1",
        align: str = "center",
        color: str = "#333333",
        font_size: str = "28px",
    ) -> Dict[str, Any]:
        return self._block("heading", {
            "text": text,
            "level": level,
            "align": align,
            "color": color,
            "fontSize": font_size,
            "fontWeight": "bold",
        })

    def text(
        self,
        content: str,
        align: str = "left",
        color: str = "#666666",
        font_size: str = "16px",
    ) -> Dict[str, Any]:
        return self._block("text", {
            "content": content,
            "align": align,
            "color": color,
            "fontSize": font_size,
            "lineHeight": "1.6",
        })

    def button(
        self,
        text: str,
        link: str = "#",
        bg_color: str = "#635bff",
        text_color: str = "#ffffff",
        align: str = "center",
    ) -> Dict[str, Any]:
        return self._block("button", {
            "text": text,
            "link": link,
            "backgroundColor": bg_color,
            "textColor": text_color,
            "borderRadius": "6px",
            "padding": "14px 28px",
            "align": align,
            "fontSize": "16px",
            "fontWeight": "600",
        })

    def image(
        self,
        src: str,
        alt: str = "",
        width: str = "100%",
        align: str = "center",
        link: str = "",
    ) -> Dict[str, Any]:
        return self._block("image", {
            "src": src,
            "alt": alt,
            "width": width,
            "height": "auto",
            "align": align,
            "link": link,
        })

    def spacer(self, height: str = "20px") -> Dict[str, Any]:
        return self._block("spacer", {"height": height})

    def divider(self, color: str = "#e5e7eb", thickness: str = "1px", width: str = "100%") -> Dict[str, Any]:
        return self._block("divider", {
            "style": "solid",
            "color": color,
            "thickness": thickness,
            "width": width,
            "margin": "20px 0",
        })

    def list_block(self, items: List[str], list_type: str = "bullet", color: str = "#666666") -> Dict[str, Any]:
        return self._block("list", {
            "items": list(items),
            "listType": list_type,
            "color": color,
            "fontSize": "16px",
            "iconColor": "#635bff",
        })

    def quote(self, text: str, author: str = "", author_title: str = "") -> Dict[str, Any]:
        return self._block("quote", {
            "text": text,
            "author": author,
            "authorTitle": author_title,
            "borderColor": "#635bff",
            "backgroundColor": "#f8fafc",
            "textColor": "#475569",
            "authorColor": "#1e293b",
            "align": "left",
        })

    def table(self, headers: List[str], rows: List[List[str]], show_header: bool = True) -> Dict[str, Any]:
        return self._block("table", {
            "headers": list(headers),
            "rows": [list(row) for row in rows],
            "showHeader": show_header,
            "headerBgColor": "#f1f5f9",
            "headerTextColor": "#1e293b",
            "borderColor": "#e2e8f0",
            "cellPadding": "12px",
            "fontSize": "14px",
        })

    def footer(self, company_name: str = "{app_name}", address: str = "", email: str = "") -> Dict[str, Any]:
        return self._block("footer", {
            "companyName": company_name,
            "address": address,
            "phone": "",
            "email": email,
            "unsubscribeText": "Unsubscribe from these emails",
            "unsubscribeUrl": "#unsubscribe",
            "copyright": f"© {{year}} {company_name}. All rights reserved.",
            "textColor": "#6b7280",
            "linkColor": "#635bff",
            "fontSize": "12px",
            "align": "center",
        })

    def social(self, links: Optional[Dict[str, str]] = None, align: str = "center") -> Dict[str, Any]:
        return self._block("social", {
            "align": align,
            "iconSize": "32px",
            "gap": "12px",
            "links": {
                "facebook": "",
                "twitter": "",
                "instagram": "",
                "linkedin": "",
                "youtube": "",
                **(links or {}),
            },
        })

    def countdown(self, title: str = "Sale Ends In", target_date: str = "") -> Dict[str, Any]:
        return self._block("countdown", {
            "targetDate": target_date or (date.today() + timedelta(days=7)).isoformat(),
            "targetTime": "23:59",
            "title": title,
            "backgroundColor": "#1e293b",
            "textColor": "#ffffff",
            "numberColor": "#635bff",
            "align": "center",
            "expiredMessage": "This offer has expired!",
        })

    def video(self, thumbnail_url: str = "", video_url: str = "", alt: str = "Video") -> Dict[str, Any]:
        return self._block("video", {
            "thumbnailUrl": thumbnail_url,
            "videoUrl": video_url,
            "alt": alt,
            "width": "100%",
            "align": "center",
            "playButtonColor": "#635bff",
        })

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------

    def render_block(self, block: Dict[str, Any]) -> str:
        renderer = getattr(self, f"render_{block.get('type') or ''}", None)
        if renderer is None:
            return ""
        return renderer(block.get("props") or {})

    def parse_blocks(self, blocks: List[Dict[str, Any]]) -> str:
        return "".join(self.render_block(block) for block in blocks)

    def render_heading(self, props: Dict[str, Any]) -> str:
        level = props.get("level", "h1")
        return (
            f'<{level} style="text-align: {props.get("align", "center")}; color: {props.get("color", "#333333")}; '
            f'font-size: {props.get("fontSize", "28px")}; font-weight: {props.get("fontWeight", "bold")}; '
            f'margin: 0 0 16px 0;">{props.get("text", "")}</{level}>'
        )

    def render_text(self, props: Dict[str, Any]) -> str:
        return (
            f'<div style="text-align: {props.get("align", "left")}; color: {props.get("color", "#666666")}; '
            f'font-size: {props.get("fontSize", "16px")}; line-height: {props.get("lineHeight", "1.6")};">'
            f'{props.get("content", "")}</div>'
        )

    def render_button(self, props: Dict[str, Any]) -> str:
        return (
            f'<div style="text-align: {props.get("align", "center")}; padding: 10px 0;">'
            f'<a href="{props.get("link", "#")}" target="_blank" style="display: inline-block; '
            f'background-color: {props.get("backgroundColor", "#635bff")}; color: {props.get("textColor", "#ffffff")}; '
            f'padding: {props.get("padding", "14px 28px")}; border-radius: {props.get("borderRadius", "6px")}; '
            f'text-decoration: none; font-size: {props.get("fontSize", "16px")}; '
            f'font-weight: {props.get("fontWeight", "600")};">{props.get("text", "Click Here")}</a></div>'
        )

    def render_image(self, props: Dict[str, Any]) -> str:
        src = props.get("src") or ""
        if not src:
            return ""
        img = (
            f'<img src="{src}" alt="{props.get("alt", "")}" '
            f'style="max-width: {props.get("width", "100%")}; height: auto; display: block;" />'
        )
        if props.get("link"):
            img = f'<a href="{props["link"]}" target="_blank">{img}</a>'
        return f'<div style="text-align: {props.get("align", "center")}; padding: 10px 0;">{img}</div>'

    def render_spacer(self, props: Dict[str, Any]) -> str:
        return f'<div style="height: {props.get("height", "20px")};"></div>'

    def render_divider(self, props: Dict[str, Any]) -> str:
        return (
            f'<hr style="border: none; border-top: {props.get("thickness", "1px")} solid '
            f'{props.get("color", "#e5e7eb")}; width: {props.get("width", "100%")}; '
            f'margin: {props.get("margin", "20px 0")};" />'
        )

    def render_list(self, props: Dict[str, Any]) -> str:
        items = props.get("items") or []
        if not items:
            return ""
        tag = "ol" if props.get("listType") == "number" else "ul"
        items_html = "".join(f'<li style="margin-bottom: 8px;">{item}</li>' for item in items)
        return (
            f'<{tag} style="color: {props.get("color", "#666666")}; font-size: {props.get("fontSize", "16px")}; '
            f'line-height: 1.8; margin: 0; padding-left: 24px;">{items_html}</{tag}>'
        )

    def render_quote(self, props: Dict[str, Any]) -> str:
        text_color = props.get("textColor", "#475569")
        author_html = ""
        if props.get("author"):
            title_html = (
                f'<span style="color: {text_color}; font-size: 14px;"> - {props["authorTitle"]}</span>'
                if props.get("authorTitle") else ""
            )
            author_html = (
                f'<p style="color: {props.get("authorColor", "#1e293b")}; font-size: 14px; font-weight: 600; '
                f'margin: 12px 0 0 0;">{props["author"]}{title_html}</p>'
            )
        return (
            f'<div style="padding: 20px; padding-left: 24px; background-color: {props.get("backgroundColor", "#f8fafc")}; '
            f'border-left: 4px solid {props.get("borderColor", "#635bff")}; border-radius: 4px; margin: 10px 0;">'
            f'<p style="color: {text_color}; font-size: 16px; font-style: italic; line-height: 1.6; margin: 0;">'
            f'"{props.get("text", "")}"</p>{author_html}</div>'
        )

    def render_table(self, props: Dict[str, Any]) -> str:
        headers = props.get("headers") or []
        padding = props.get("cellPadding", "12px")
        border_color = props.get("borderColor", "#e2e8f0")

        header_html = ""
        if props.get("showHeader", True) and headers:
            cells = "".join(
                f'<th style="padding: {padding}; text-align: left; border: 1px solid {border_color}; '
                f'font-weight: 600;">{header}</th>'
                for header in headers
            )
            header_html = (
                f'<thead><tr style="background-color: {props.get("headerBgColor", "#f1f5f9")}; '
                f'color: {props.get("headerTextColor", "#1e293b")};">{cells}</tr></thead>'
            )

        body_html = "".join(
            "<tr>" + "".join(
                f'<td style="padding: {padding}; border: 1px solid {border_color};">{cell}</td>' for cell in row
            ) + "</tr>"
            for row in props.get("rows") or []
        )
        return (
            f'<table role="presentation" width="100%" cellpadding="0" cellspacing="0" '
            f'style="font-size: {props.get("fontSize", "14px")}; border-collapse: collapse; margin: 10px 0;">'
            f"{header_html}<tbody>{body_html}</tbody></table>"
        )

    def render_footer(self, props: Dict[str, Any]) -> str:
        text_color = props.get("textColor", "#6b7280")
        link_color = props.get("linkColor", "#635bff")
        font_size = props.get("fontSize", "12px")

        address_html = (
            f'<p style="color: {text_color}; font-size: {font_size}; margin: 8px 0;">{props["address"]}</p>'
            if props.get("address") else ""
        )
        parts = []
        if props.get("email"):
            parts.append(f'<a href="mailto:{props["email"]}" style="color: {link_color};">{props["email"]}</a>')
        if props.get("phone"):
            parts.append(props["phone"])
        contact_html = (
            f'<p style="color: {text_color}; font-size: {font_size}; margin: 8px 0;">{" | ".join(parts)}</p>'
            if parts else ""
        )
        return (
            f'<div style="padding: 24px 16px; text-align: {props.get("align", "center")}; border-top: 1px solid #e5e7eb;">'
            f'<p style="color: {text_color}; font-size: 14px; font-weight: 600; margin: 0 0 12px 0;">'
            f'{props.get("companyName", "")}</p>{address_html}{contact_html}'
            f'<p style="color: {text_color}; font-size: {font_size}; margin: 16px 0 0 0;">'
            f'<a href="{props.get("unsubscribeUrl", "#unsubscribe")}" style="color: {link_color}; '
            f'text-decoration: underline;">{props.get("unsubscribeText", "Unsubscribe")}</a></p>'
            f'<p style="color: {text_color}; font-size: 11px; margin: 12px 0 0 0;">{props.get("copyright", "")}</p>'
            f"</div>"
        )

    def render_social(self, props: Dict[str, Any]) -> str:
        size = props.get("iconSize", "32px")
        gap = props.get("gap", "12px")
        icons = "".join(
            f'<a href="{url}" target="_blank" style="display: inline-block; margin: 0 {gap};">'
            f'<img src="{SOCIAL_ICON_URLS[platform]}" alt="{platform}" width="{size}" height="{size}" '
            f'style="border-radius: 4px;" /></a>'
            for platform, url in (props.get("links") or {}).items()
            if url and platform in SOCIAL_ICON_URLS
        )
        if not icons:
            return ""
        return f'<div style="text-align: {props.get("align", "center")}; padding: 20px 0;">{icons}</div>'

    def render_countdown(self, props: Dict[str, Any]) -> str:
        text_color = props.get("textColor", "#ffffff")
        number_color = props.get("numberColor", "#635bff")
        # Static zeros; the live countdown lives in the page output.
        units = "".join(
            f'<div style="text-align: center;"><span style="color: {number_color}; font-size: 32px; '
            f'font-weight: bold;">00</span><p style="color: {text_color}; font-size: 12px; '
            f'margin: 4px 0 0 0;">{unit}</p></div>'
            for unit in ("Days", "Hours", "Minutes", "Seconds")
        )
        return (
            f'<div style="background-color: {props.get("backgroundColor", "#1e293b")}; padding: 24px; '
            f'padding-top: 10px; border-radius: 8px; text-align: {props.get("align", "center")}; margin: 10px 0;">'
            f'<p style="color: {text_color}; font-size: 16px; font-weight: 600; margin: 0 0 16px 0;">'
            f'{props.get("title", "Sale Ends In")}</p>'
            f'<div style="display: inline-flex; gap: 16px;">{units}</div></div>'
        )

    def render_video(self, props: Dict[str, Any]) -> str:
        align = props.get("align", "center")
        alt = props.get("alt", "Video")
        button_color = props.get("playButtonColor", "#635bff")
        thumbnail = props.get("thumbnailUrl") or ""

        if not thumbnail:
            return (
                f'<div style="text-align: {align}; padding: 10px 0;">'
                f'<div style="background-color: #1e293b; padding: 60px 20px; border-radius: 8px; text-align: center;">'
                f'<div style="width: 60px; height: 60px; background-color: {button_color}; border-radius: 50%; '
                f'margin: 0 auto; display: flex; align-items: center; justify-content: center;">{PLAY_BUTTON}</div>'
                f'<p style="color: #94a3b8; font-size: 14px; margin: 16px 0 0 0;">{alt}</p></div></div>'
            )

        link = f'href="{props["videoUrl"]}" target="_blank" ' if props.get("videoUrl") else ""
        return (
            f'<div style="text-align: {align}; padding: 10px 0;">'
            f'<a {link}style="display: block; position: relative; text-decoration: none;">'
            f'<img src="{thumbnail}" alt="{alt}" style="max-width: {props.get("width", "100%")}; height: auto; '
            f'display: block; border-radius: 8px;" />'
            f'<div style="position: absolute; top: 50%; left: 50%; transform: translate(-50%, -50%); width: 60px; '
            f'height: 60px; background-color: {button_color}; border-radius: 50%; display: flex; '
            f'align-items: center; justify-content: center;">{PLAY_BUTTON}</div></a></div>'
        )

    # ------------------------------------------------------------------
    # Documents
    # ------------------------------------------------------------------

    def generate_email_html(
        self,
        blocks: List[Dict[str, Any]],
        canvas_settings: Optional[Dict[str, Any]] = None,
    ) -> str:
        canvas = canvas_settings if canvas_settings is not None else self.get_default_canvas_settings()
        layout = canvas.get("layoutStyles") or {}
        bg_color = (layout.get("background") or {}).get("color") or "#ffffff"
        radius = (layout.get("border") or {}).get("radius") or {}
        corners = "; ".join(
            f"border-{css}-radius: {radius.get(key) or '8px'}"
            for key, css in (
                ("topLeft", "top-left"),
                ("topRight", "top-right"),
                ("bottomLeft", "bottom-left"),
                ("bottomRight", "bottom-right"),
            )
        )
        content_padding = canvas.get("contentPadding") or "32px"
        content_margin = canvas.get("contentMargin") or "40px"
        max_width = canvas.get("width") or "600px"

        return f"""<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <meta http-equiv="X-UA-Compatible" content="IE=edge">
    <title>Email</title>
    <!--[if mso]>
    <noscript>
        <xml>
            <o:OfficeDocumentSettings>
                <o:PixelsPerInch>96</o:PixelsPerInch>
            </o:OfficeDocumentSettings>
        </xml>
    </noscript>
    <![endif]-->
</head>
<body style="margin: 0; padding: 0; background-color: #f4f4f4;">
    <table role="presentation" width="100%" cellpadding="0" cellspacing="0" border="0" style="background-color: #f4f4f4;">
        <tr>
            <td align="center" style="padding: {content_margin} 20px;">
                <table role="presentation" width="100%" cellpadding="0" cellspacing="0" border="0" style="max-width: {max_width}; background-color: {bg_color}; {corners};">
                    <tr>
                        <td style="padding: {content_padding};">
                            {self.parse_blocks(blocks)}
                        </td>
                    </tr>
                </table>
            </td>
        </tr>
    </table>
</body>
</html>"""

    def create_template_data(
        self,
        name: str,
        subject: str,
        template_type: str,
        description: str,
        blocks: List[Dict[str, Any]],
        is_active: bool = False,
        is_deleteable: bool = True,
        created_by: int = 1,
    ) -> Dict[str, Any]:
        """Row-shaped data for a new email template, with HTML and design JSON."""
        canvas = self.get_default_canvas_settings()
        now = datetime.now()
        return {
            "uuid": str(uuid.uuid4()),
            "name": name,
            "subject": subject,
            "body_html": self.generate_email_html(blocks, canvas),
            "design_json": {
                "blocks": blocks,
                "canvasSettings": canvas,
                "version": 1,
            },
            "type": template_type,
            "description": description,
            "is_active": is_active,
            "is_deleteable": is_deleteable,
            "created_by": created_by,
            "created_at": now,
            "updated_at": now,
        }
