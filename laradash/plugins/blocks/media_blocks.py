"""
Media blocks - button, image, video, social, spacer, divider.
"""

import re
from typing import Any, Dict, List, Optional

from laradash.engines.builder.save_helpers import (
    email_button,
    email_divider,
    email_image,
    email_spacer,
)
from laradash.engines.builder.style_helpers import (
    box_shadow_value,
    build_block_classes,
    background_declarations,
    border_declarations,
    esc,
    justify_content,
    layout_section,
    merge_block_styles,
    side_declarations,
)

ALLOWED_LINK_PREFIXES = ("http://", "https://", "mailto:", "tel:", "#", "/")


def sanitize_link(link: str) -> str:
    """Keep http(s), mailto, tel, anchor and root-relative links; anything else becomes '#'."""
    link = re.sub(r"\s", "", link or "")
    return link if link.startswith(ALLOWED_LINK_PREFIXES) else "#"


def _layout(props: Dict[str, Any]) -> Optional[Dict[str, Any]]:
    layout = props.get("layoutStyles")
    return layout if isinstance(layout, dict) else None


# Button

def render_button(props: Dict[str, Any], context: str = "page", block_id: Optional[str] = None) -> str:
    text = props.get("text", "Click Here")
    link = props.get("link", "")
    target = props.get("target", "_self")
    background = layout_section(props, "background")
    typography = layout_section(props, "typography")
    border = layout_section(props, "border")

    styles = [
        "display: inline-block",
        "text-decoration: none",
        "border: none",
        "cursor: pointer",
        "transition: opacity 0.2s ease",
        f"background-color: {background.get('color') or props.get('backgroundColor', '#635bff')}",
        f"color: {typography.get('color') or props.get('textColor', '#ffffff')}",
        f"font-size: {typography.get('fontSize') or props.get('fontSize', '16px')}",
        f"font-weight: {typography.get('fontWeight') or props.get('fontWeight', '600')}",
    ]
    radius = border.get("radius") if isinstance(border.get("radius"), dict) else {}
    styles.append(f"border-radius: {radius.get('topLeft') or props.get('borderRadius', '6px')}")
    styles.append(f"padding: {props.get('padding', '12px 24px')}")
    styles.extend(side_declarations(_layout(props), "margin", keep_empty=True))
    if props.get("customCSS"):
        styles.append(props["customCSS"])

    classes = esc(build_block_classes("button", props))
    style_attr = esc("; ".join(styles))

    if link:
        rel_parts: List[str] = []
        if target == "_blank":
            rel_parts.extend(["noopener", "noreferrer"])
        if props.get("nofollow"):
            rel_parts.append("nofollow")
        if props.get("sponsored"):
            rel_parts.append("sponsored")
        rel_attr = f' rel="{" ".join(rel_parts)}"' if rel_parts else ""
        target_attr = f' target="{esc(target)}"' if target != "_self" else ""
        element = (
            f'<a href="{esc(sanitize_link(link))}"{target_attr}{rel_attr} class="{classes}" '
            f'style="{style_attr}">{text}</a>'
        )
    else:
        element = f'<span class="{classes}" style="{style_attr}">{text}</span>'

    return (
        f'<div class="lb-button-wrapper" style="text-align: {esc(props.get("align", "center"))}; '
        f'padding: 10px 0;">{element}</div>'
    )


def button_page(props: Dict[str, Any], options: Dict[str, Any]) -> str:
    return render_button(props, "page", options.get("block_id"))


def button_email(props: Dict[str, Any], options: Dict[str, Any]) -> str:
    return email_button({**props, "link": sanitize_link(props.get("link") or "#")})


# Image

def _image_src(src: str) -> str:
    src = re.sub(r"\s", "", src or "")
    return src if re.match(r"^(https?://|/)", src) else ""


def render_image(props: Dict[str, Any], context: str = "page", block_id: Optional[str] = None) -> str:
    src = _image_src(props.get("src", ""))
    width = props.get("width", "100%")
    height = props.get("height", "auto")
    custom_width = props.get("customWidth", "")
    custom_height = props.get("customHeight", "")

    img_styles: List[str] = []
    if width == "custom" and custom_width:
        img_styles.extend([f"width: {custom_width}", f"max-width: {custom_width}"])
    elif re.match(r"^\d+%$", str(width)):
        img_styles.extend([f"width: {width}", f"max-width: {width}"])
    else:
        img_styles.append("max-width: 100%")

    if height == "custom" and custom_height:
        img_styles.extend([f"height: {custom_height}", "object-fit: cover"])
    else:
        img_styles.append("height: auto")

    border = layout_section(props, "border")
    if border:
        img_styles.extend(border_declarations(border))
    shadow = layout_section(props, "boxShadow")
    if shadow:
        img_styles.append(f"box-shadow: {box_shadow_value(shadow) or '0px 0px 0px 0px rgba(0,0,0,0.1)'}")
    if props.get("customCSS"):
        img_styles.append(props["customCSS"])

    wrapper_styles = background_declarations(layout_section(props, "background"))
    wrapper_styles.extend(side_declarations(_layout(props), "margin"))
    wrapper_styles.extend(side_declarations(_layout(props), "padding"))

    classes = build_block_classes("image", props)
    img_html = (
        f'<img src="{esc(src)}" alt="{esc(props.get("alt", "Image"))}" class="{esc(classes)}" '
        f'style="{esc("; ".join(img_styles))}" loading="lazy" />'
    )
    if props.get("link"):
        img_html = (
            f'<a href="{esc(sanitize_link(props["link"]))}" target="_blank" rel="noopener noreferrer" '
            f'class="lb-image-link">{img_html}</a>'
        )
    if wrapper_styles:
        img_html = f'<div class="lb-image-bg-wrapper" style="{esc("; ".join(wrapper_styles))}">{img_html}</div>'

    return (
        f'<figure class="lb-image-wrapper" style="display: flex; justify-content: '
        f'{justify_content(props.get("align", "center"))}; margin: 0 0 16px 0;">{img_html}</figure>'
    )


def image_page(props: Dict[str, Any], options: Dict[str, Any]) -> str:
    return render_image(props, "page", options.get("block_id"))


def image_email(props: Dict[str, Any], options: Dict[str, Any]) -> str:
    return email_image({**props, "src": _image_src(props.get("src") or "")})


# Spacer and divider

def spacer_page(props: Dict[str, Any], options: Dict[str, Any]) -> str:
    height = props.get("height") or "20px"
    classes = build_block_classes("spacer", props)
    return f'<div class="{classes}" style="{merge_block_styles(props, f"height: {height}")}"></div>'


def spacer_email(props: Dict[str, Any], options: Dict[str, Any]) -> str:
    return email_spacer(props.get("height") or "20px")


def divider_page(props: Dict[str, Any], options: Dict[str, Any]) -> str:
    thickness = props.get("thickness") or props.get("height") or "1px"
    line = (
        f"border: none; border-top: {thickness} {props.get('style') or 'solid'} {props.get('color') or '#e5e7eb'}; "
        f"width: {props.get('width') or '100%'}; margin: {props.get('margin') or '20px 0'}"
    )
    classes = build_block_classes("divider", props)
    return f'<hr class="{classes}" style="{merge_block_styles(props, line)}" />'


def divider_email(props: Dict[str, Any], options: Dict[str, Any]) -> str:
    return email_divider(props)


# Video

VIDEO_FILE_PATTERN = re.compile(r"\.(mp4|webm|ogg|mov|avi|m4v)(\?.*)?$", re.IGNORECASE)
YOUTUBE_PATTERN = re.compile(
    r"(?:youtube\.com/watch\?v=|youtu\.be/|youtube\.com/embed/|youtube\.com/shorts/)([a-zA-Z0-9_-]{11})"
)
VIMEO_PATTERN = re.compile(r"vimeo\.com/(\d+)")
DAILYMOTION_PATTERN = re.compile(r"(?:dailymotion\.com/video/|dai\.ly/)([a-zA-Z0-9]+)")

DIRECT_VIDEO_THUMBNAIL = (
    "data:image/svg+xml,%3Csvg xmlns='http://www.w3.org/2000/svg' width='600' height='340' "
    "viewBox='0 0 600 340'%3E%3Crect fill='%231a1a2e' width='600' height='340'/%3E%3Ctext fill='%23ffffff' "
    "font-family='Arial' font-size='16' x='50%25' y='60%25' text-anchor='middle'%3EClick to play video"
    "%3C/text%3E%3C/svg%3E"
)
PLACEHOLDER_THUMBNAIL = "https://via.placeholder.com/600x340/1a1a2e/ffffff?text=Video"

PLAY_OVERLAY = (
    '<div class="lb-video-play-btn" style="position: absolute; top: 50%; left: 50%; transform: translate(-50%, -50%); '
    "width: 68px; height: 48px; background: rgba(0,0,0,0.8); border-radius: 12px; display: flex; "
    'align-items: center; justify-content: center; transition: background 0.2s;">'
    '<svg width="24" height="24" viewBox="0 0 24 24" fill="white"><path d="M8 5v14l11-7z"/></svg></div>'
)


def is_direct_video_file(url: Optional[str]) -> bool:
    return bool(url) and bool(VIDEO_FILE_PATTERN.search(url))


def parse_video_url(url: Optional[str]) -> Optional[Dict[str, Any]]:
    """Platform info for YouTube, Vimeo and Dailymotion URLs, else None."""
    if not url:
        return None
    match = YOUTUBE_PATTERN.search(url)
    if match:
        video_id = match.group(1)
        return {
            "platform": "youtube",
            "id": video_id,
            "thumbnail": f"https://img.youtube.com/vi/{video_id}/maxresdefault.jpg",
            "color": "#FF0000",
            "embed_url": f"https://www.youtube.com/embed/{video_id}?rel=0",
        }
    match = VIMEO_PATTERN.search(url)
    if match:
        video_id = match.group(1)
        return {
            "platform": "vimeo",
            "id": video_id,
            "thumbnail": None,
            "color": "#1AB7EA",
            "embed_url": f"https://player.vimeo.com/video/{video_id}",
        }
    match = DAILYMOTION_PATTERN.search(url)
    if match:
        video_id = match.group(1)
        return {
            "platform": "dailymotion",
            "id": video_id,
            "thumbnail": f"https://www.dailymotion.com/thumbnail/video/{video_id}",
            "color": "#00AAFF",
            "embed_url": f"https://www.dailymotion.com/embed/video/{video_id}",
        }
    return None


def _click_to_play(element_id: str, inner_html: str) -> str:
    return (
        "<script>(function() {"
        f"var container = document.getElementById('{element_id}');"
        "if (!container) return;"
        "container.addEventListener('click', function() {"
        "var wrapper = container.querySelector('.lb-video-thumbnail');"
        f"wrapper.innerHTML = '{inner_html}';"
        "});"
        "})();</script>"
    )


def video_page(props: Dict[str, Any], options: Dict[str, Any]) -> str:
    url = props.get("videoUrl") or ""
    info = parse_video_url(url)
    width = props.get("width") or "100%"
    thumbnail = props.get("thumbnailUrl") or props.get("thumbnail") or ""
    block_id = options.get("block_id") or "video"
    element_id = f"lb-video-{block_id}"

    classes = build_block_classes("video", props)
    merged = merge_block_styles(props, f"display: flex; justify-content: {justify_content(props.get('align'))}")

    def thumbnail_container(alt: str) -> str:
        return (
            f'<div id="{element_id}" class="lb-video-container" style="position: relative; max-width: {width}; '
            f'width: 100%; cursor: pointer;"><div class="lb-video-thumbnail" style="position: relative; '
            f'padding-bottom: 56.25%; height: 0; overflow: hidden; border-radius: 8px; background: #000;">'
            f'<img src="{thumbnail}" alt="{alt}" style="position: absolute; top: 0; left: 0; width: 100%; '
            f'height: 100%; object-fit: cover;" />{PLAY_OVERLAY}</div></div>'
        )

    if is_direct_video_file(url):
        if thumbnail:
            player = (
                f'<video src="{url}" controls autoplay style="position: absolute; top: 0; left: 0; width: 100%; '
                f'height: 100%; border: 0; border-radius: 8px;"></video>'
            )
            return (
                f'<div class="{classes}" style="{merged}">{thumbnail_container(props.get("alt") or "Video thumbnail")}</div>'
                f"{_click_to_play(element_id, player)}"
            )
        flags = " ".join(f for f in ("autoplay muted" if props.get("autoplay") else "", "loop" if props.get("loop") else "") if f)
        flags = f" {flags}" if flags else ""
        return (
            f'<div class="{classes}" style="{merged}"><video src="{url}" controls{flags} '
            f'style="max-width: {width}; width: 100%; height: auto; border-radius: 8px;" preload="metadata">'
            f"Your browser does not support the video tag.</video></div>"
        )

    if info and info.get("embed_url"):
        platform_classes = f"{classes} lb-video-{info['platform']}"
        if thumbnail:
            player = (
                f'<iframe src="{info["embed_url"]}&autoplay=1" style="position: absolute; top: 0; left: 0; '
                f'width: 100%; height: 100%; border: 0; border-radius: 8px;" allowfullscreen '
                f'allow="autoplay; encrypted-media; picture-in-picture"></iframe>'
            )
            return (
                f'<div class="{platform_classes}" style="{merged}">{thumbnail_container("Video thumbnail")}</div>'
                f"{_click_to_play(element_id, player)}"
            )
        return (
            f'<div class="{platform_classes}" style="{merged}"><div style="position: relative; max-width: {width}; '
            f'width: 100%;"><div style="position: relative; padding-bottom: 56.25%; height: 0; overflow: hidden; '
            f'border-radius: 8px;"><iframe src="{info["embed_url"]}" style="position: absolute; top: 0; left: 0; '
            f'width: 100%; height: 100%; border: 0;" allowfullscreen '
            f'allow="autoplay; encrypted-media; picture-in-picture"></iframe></div></div></div>'
        )

    return (
        f'<div class="{classes}" style="{merged}"><a href="{url}" target="_blank" rel="noopener noreferrer" '
        f'class="lb-video-link">Watch Video</a></div>'
    )


def video_email(props: Dict[str, Any], options: Dict[str, Any]) -> str:
    url = props.get("videoUrl") or ""
    info = parse_video_url(url)
    is_direct = is_direct_video_file(url)
    align = props.get("align") or "center"
    width = props.get("width") or "100%"

    if options.get("preview_mode"):
        if is_direct and not props.get("thumbnailUrl"):
            return (
                f'<div style="text-align: {align};"><video src="{url}" controls style="max-width: {width}; '
                f"width: 100%; height: auto; display: inline-block; border-radius: 8px; "
                f'background-color: #1a1a2e;" preload="metadata"></video></div>'
            )
        if info and info.get("embed_url") and not props.get("thumbnailUrl"):
            return (
                f'<div style="text-align: {align};"><div style="position: relative; max-width: {width}; '
                f'width: 100%; display: inline-block;"><div style="position: relative; padding-bottom: 56.25%; '
                f'height: 0; overflow: hidden; border-radius: 8px;"><iframe src="{info["embed_url"]}" '
                f'style="position: absolute; top: 0; left: 0; width: 100%; height: 100%; border: 0;" '
                f"allowfullscreen></iframe></div></div></div>"
            )

    if props.get("thumbnailUrl"):
        thumbnail = props["thumbnailUrl"]
    elif info and info.get("thumbnail"):
        thumbnail = info["thumbnail"]
    elif is_direct:
        thumbnail = DIRECT_VIDEO_THUMBNAIL
    else:
        thumbnail = PLACEHOLDER_THUMBNAIL

    play_color = props.get("playButtonColor") or (info or {}).get("color") or ("#635bff" if is_direct else "#ff0000")
    return (
        f'<div style="text-align: {align};"><div style="position: relative; display: inline-block; '
        f'max-width: {width}; width: 100%;"><a href="{url}" target="_blank" style="display: block; '
        f'text-decoration: none;"><img src="{thumbnail}" alt="{props.get("alt") or "Video thumbnail"}" '
        f'style="width: 100%; height: auto; display: block; border-radius: 8px; background-color: #1a1a2e;" />'
        f'<div style="position: absolute; top: 50%; left: 50%; transform: translate(-50%, -50%); width: 68px; '
        f"height: 68px; background-color: {play_color}; border-radius: 50%; display: flex; align-items: center; "
        f'justify-content: center;"><span style="width: 0; height: 0; border-top: 12px solid transparent; '
        f'border-bottom: 12px solid transparent; border-left: 20px solid white; margin-left: 4px;"></span>'
        f"</div></a></div></div>"
    )


# Social

SOCIAL_SVG_ICONS = {
    "facebook": '<svg xmlns="http://www.w3.org/2000/svg" width="24" height="24" viewBox="0 0 24 24" fill="currentColor"><path d="M24 12.073c0-6.627-5.373-12-12-12s-12 5.373-12 12c0 5.99 4.388 10.954 10.125 11.854v-8.385H7.078v-3.47h3.047V9.43c0-3.007 1.792-4.669 4.533-4.669 1.312 0 2.686.235 2.686.235v2.953H15.83c-1.491 0-1.956.925-1.956 1.874v2.25h3.328l-.532 3.47h-2.796v8.385C19.612 23.027 24 18.062 24 12.073z"/></svg>',
    "twitter": '<svg xmlns="http://www.w3.org/2000/svg" width="24" height="24" viewBox="0 0 24 24" fill="currentColor"><path d="M18.244 2.25h3.308l-7.227 8.26 8.502 11.24H16.17l-5.214-6.817L4.99 21.75H1.68l7.73-8.835L1.254 2.25H8.08l4.713 6.231zm-1.161 17.52h1.833L7.084 4.126H5.117z"/></svg>',
    "instagram": '<svg xmlns="http://www.w3.org/2000/svg" width="24" height="24" viewBox="0 0 24 24" fill="currentColor"><path d="M12 2.163c3.204 0 3.584.012 4.85.07 3.252.148 4.771 1.691 4.919 4.919.058 1.265.069 1.645.069 4.849 0 3.205-.012 3.584-.069 4.849-.149 3.225-1.664 4.771-4.919 4.919-1.266.058-1.644.07-4.85.07-3.204 0-3.584-.012-4.849-.07-3.26-.149-4.771-1.699-4.919-4.92-.058-1.265-.07-1.644-.07-4.849 0-3.204.013-3.583.07-4.849.149-3.227 1.664-4.771 4.919-4.919 1.266-.057 1.645-.069 4.849-.069zm0 5.838c-3.403 0-6.162 2.759-6.162 6.162s2.759 6.163 6.162 6.163 6.162-2.759 6.162-6.163c0-3.403-2.759-6.162-6.162-6.162zm0 10.162c-2.209 0-4-1.79-4-4 0-2.209 1.791-4 4-4s4 1.791 4 4c0 2.21-1.791 4-4 4z"/></svg>',
    "linkedin": '<svg xmlns="http://www.w3.org/2000/svg" width="24" height="24" viewBox="0 0 24 24" fill="currentColor"><path d="M20.447 20.452h-3.554v-5.569c0-1.328-.027-3.037-1.852-3.037-1.853 0-2.136 1.445-2.136 2.939v5.667H9.351V9h3.414v1.561h.046c.477-.9 1.637-1.85 3.37-1.85 3.601 0 4.267 2.37 4.267 5.455v6.286zM5.337 7.433c-1.144 0-2.063-.926-2.063-2.065 0-1.138.92-2.063 2.063-2.063 1.14 0 2.064.925 2.064 2.063 0 1.139-.925 2.065-2.064 2.065zm1.782 13.019H3.555V9h3.564v11.452z"/></svg>',
    "youtube": '<svg xmlns="http://www.w3.org/2000/svg" width="24" height="24" viewBox="0 0 24 24" fill="currentColor"><path d="M23.498 6.186a3.016 3.016 0 0 0-2.122-2.136C19.505 3.545 12 3.545 12 3.545s-7.505 0-9.377.505A3.017 3.017 0 0 0 .502 6.186C0 8.07 0 12 0 12s0 3.93.502 5.814a3.016 3.016 0 0 0 2.122 2.136c1.871.505 9.376.505 9.376.505s7.505 0 9.377-.505a3.015 3.015 0 0 0 2.122-2.136C24 15.93 24 12 24 12s0-3.93-.502-5.814zM9.545 15.568V8.432L15.818 12l-6.273 3.568z"/></svg>',
}

SOCIAL_EMAIL_ICONS = {
    "facebook": "https://cdn-icons-png.flaticon.com/32/733/733547.png",
    "twitter": "https://cdn-icons-png.flaticon.com/32/733/733579.png",
    "instagram": "https://cdn-icons-png.flaticon.com/32/2111/2111463.png",
    "linkedin": "https://cdn-icons-png.flaticon.com/32/733/733561.png",
    "youtube": "https://cdn-icons-png.flaticon.com/32/733/733646.png",
}


def _social_links(props: Dict[str, Any]) -> List[tuple]:
    links = props.get("links") or {}
    return [(platform, url) for platform, url in links.items() if url]


def _leading_number(value: Any) -> Optional[float]:
    match = re.match(r"^\s*(\d+(?:\.\d+)?)", str(value or ""))
    return float(match.group(1)) if match else None


def social_page(props: Dict[str, Any], options: Dict[str, Any]) -> str:
    links = _social_links(props)
    if not links:
        return ""
    icon_size = props.get("iconSize") or "24px"
    align = props.get("align") or "center"
    block_styles = (
        f"text-align: {align}; display: flex; justify-content: {justify_content(align)}; "
        f"gap: {props.get('gap') or '12px'}; padding: 10px 0"
    )
    links_html = "".join(
        f'<a href="{url}" target="_blank" rel="noopener noreferrer" class="lb-social-link lb-social-{platform}" '
        f'style="display: inline-flex; width: {icon_size}; height: {icon_size}; color: inherit;">'
        f"{SOCIAL_SVG_ICONS.get(platform, '')}</a>"
        for platform, url in links
    )
    classes = build_block_classes("social", props)
    return f'<div class="{classes}" style="{merge_block_styles(props, block_styles)}">{links_html}</div>'


def social_email(props: Dict[str, Any], options: Dict[str, Any]) -> str:
    links = [(p, u) for p, u in _social_links(props) if p in SOCIAL_EMAIL_ICONS]
    if not links:
        return ""
    icon_size = int(_leading_number(props.get("iconSize")) or 32)
    gap = _leading_number(props.get("gap"))
    margin = f"{gap / 2:g}" if gap else "6"
    links_html = "".join(
        f'<a href="{url}" target="_blank" style="display: inline-block; margin: 0 {margin}px;">'
        f'<img src="{SOCIAL_EMAIL_ICONS[platform]}" alt="{platform}" width="{icon_size}" height="{icon_size}" '
        f'style="border: 0;" /></a>'
        for platform, url in links
    )
    return f'<div style="text-align: {props.get("align") or "center"}; padding: 10px 0;">{links_html}</div>'


BUTTON = {
    "type": "button",
    "label": "Button",
    "category": "Content",
    "icon": "lucide:mouse-pointer-click",
    "keywords": ["link", "cta", "call to action"],
    "defaultProps": {
        "text": "Click Here",
        "link": "#",
        "target": "_self",
        "backgroundColor": "#635bff",
        "textColor": "#ffffff",
        "borderRadius": "6px",
        "padding": "12px 24px",
        "align": "center",
        "fontSize": "16px",
        "fontWeight": "600",
        "nofollow": False,
        "sponsored": False,
    },
    "save": {"page": button_page, "email": button_email},
    "render": render_button,
}

IMAGE = {
    "type": "image",
    "label": "Image",
    "category": "Media",
    "icon": "lucide:image",
    "keywords": ["picture", "photo", "media"],
    "defaultProps": {
        "src": "",
        "alt": "Image",
        "width": "100%",
        "height": "auto",
        "customWidth": "",
        "customHeight": "",
        "align": "center",
        "link": "",
    },
    "save": {"page": image_page, "email": image_email},
    "render": render_image,
}

SPACER = {
    "type": "spacer",
    "label": "Spacer",
    "category": "Layout",
    "icon": "lucide:move-vertical",
    "keywords": ["space", "gap", "empty"],
    "defaultProps": {"height": "20px"},
    "save": {"page": spacer_page, "email": spacer_email},
}

DIVIDER = {
    "type": "divider",
    "label": "Divider",
    "category": "Layout",
    "icon": "lucide:minus",
    "keywords": ["separator", "line", "hr"],
    "defaultProps": {
        "style": "solid",
        "color": "#e5e7eb",
        "thickness": "1px",
        "width": "100%",
        "margin": "20px 0",
    },
    "save": {"page": divider_page, "email": divider_email},
}

VIDEO = {
    "type": "video",
    "label": "Video",
    "category": "Media",
    "icon": "lucide:video",
    "keywords": ["youtube", "vimeo", "embed", "movie"],
    "defaultProps": {
        "videoUrl": "",
        "thumbnailUrl": "",
        "alt": "Video",
        "width": "100%",
        "align": "center",
        "playButtonColor": "#635bff",
    },
    "save": {"page": video_page, "email": video_email},
}

SOCIAL = {
    "type": "social",
    "label": "Social Links",
    "category": "Content",
    "icon": "lucide:share-2",
    "keywords": ["facebook", "twitter", "instagram", "linkedin", "youtube"],
    "defaultProps": {
        "align": "center",
        "iconSize": "32px",
        "gap": "12px",
        "links": {"facebook": "", "twitter": "", "instagram": "", "linkedin": "", "youtube": ""},
    },
    "save": {"page": social_page, "email": social_email},
}

MEDIA_BLOCKS = [BUTTON, IMAGE, SPACER, DIVIDER, VIDEO, SOCIAL]
