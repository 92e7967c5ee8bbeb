"""
Layout style helpers.

Blocks carry a ``layoutStyles`` prop edited in the builder sidebar:

    {
        "background": {"color", "image", "size", "position", "repeat"},
        "margin": {"top", "right", "bottom", "left"},
        "padding": {"top", "right", "bottom", "left"},
        "width", "minWidth", "maxWidth", "height", "minHeight", "maxHeight",
        "typography": {"color", "fontSize", "textAlign", ...},
        "border": {"width": {...sides}, "style", "color", "radius": {...corners}},
        "boxShadow": {"x", "y", "blur", "spread", "color", "inset"},
    }

These helpers turn that structure into inline CSS declarations.
"""

import html
from typing import Any, Dict, List, Mapping, Optional

SIDES = ("top", "right", "bottom", "left")
CORNERS = (
    ("topLeft", "top-left"),
    ("topRight", "top-right"),
    ("bottomLeft", "bottom-left"),
    ("bottomRight", "bottom-right"),
)
DIMENSIONS = (
    ("width", "width"),
    ("minWidth", "min-width"),
    ("maxWidth", "max-width"),
    ("height", "height"),
    ("minHeight", "min-height"),
    ("maxHeight", "max-height"),
)
TYPOGRAPHY = (
    ("color", "color"),
    ("fontSize", "font-size"),
    ("textAlign", "text-align"),
    ("textTransform", "text-transform"),
    ("fontFamily", "font-family"),
    ("fontWeight", "font-weight"),
    ("fontStyle", "font-style"),
    ("lineHeight", "line-height"),
    ("letterSpacing", "letter-spacing"),
    ("textDecoration", "text-decoration"),
)
JUSTIFY = {"left": "flex-start", "right": "flex-end"}


def esc(value: Any) -> str:
    """HTML-escape a value for attribute or text output."""
    if value is None:
        return ""
    return html.escape(str(value), quote=True)


def _section(layout_styles: Optional[Mapping[str, Any]], key: str) -> Dict[str, Any]:
    if not layout_styles:
        return {}
    value = layout_styles.get(key)
    return value if isinstance(value, dict) else {}


def justify_content(align: Optional[str]) -> str:
    """Flexbox justify-content for a left/center/right alignment."""
    return JUSTIFY.get(align or "", "center")


def background_declarations(background: Mapping[str, Any]) -> List[str]:
    declarations = []
    if background.get("color"):
        declarations.append(f"background-color: {background['color']}")
    if background.get("image"):
        declarations.append(f"background-image: url({background['image']})")
        declarations.append(f"background-size: {background.get('size') or 'cover'}")
        declarations.append(f"background-position: {background.get('position') or 'center'}")
        declarations.append(f"background-repeat: {background.get('repeat') or 'no-repeat'}")
    return declarations


def side_declarations(
    layout_styles: Optional[Mapping[str, Any]],
    prop: str,
    keep_empty: bool = False,
) -> List[str]:
    """
    ``margin-*`` / ``padding-*`` declarations.

    By default only sides with a value are emitted. With ``keep_empty`` every
    side present in the mapping is emitted, even when blank.
    """
    box = _section(layout_styles, prop)
    declarations = []
    for side in SIDES:
        if side not in box or box[side] is None:
            continue
        if box[side] or keep_empty:
            declarations.append(f"{prop}-{side}: {box[side]}")
    return declarations


def dimension_declarations(layout_styles: Optional[Mapping[str, Any]]) -> List[str]:
    if not layout_styles:
        return []
    return [f"{css}: {layout_styles[key]}" for key, css in DIMENSIONS if layout_styles.get(key)]


def border_declarations(border: Mapping[str, Any]) -> List[str]:
    declarations = []
    width = border.get("width") if isinstance(border.get("width"), dict) else {}
    for side in SIDES:
        if width.get(side):
            declarations.append(f"border-{side}-width: {width[side]}")
    if border.get("style"):
        declarations.append(f"border-style: {border['style']}")
    if border.get("color"):
        declarations.append(f"border-color: {border['color']}")
    radius = border.get("radius") if isinstance(border.get("radius"), dict) else {}
    for key, css in CORNERS:
        if radius.get(key):
            declarations.append(f"border-{css}-radius: {radius[key]}")
    return declarations


def box_shadow_value(shadow: Mapping[str, Any]) -> Optional[str]:
    """CSS box-shadow value, or None when no component is set."""
    if not any(shadow.get(k) for k in ("x", "y", "blur", "spread", "color")):
        return None
    inset = "inset " if shadow.get("inset") else ""
    return (
        f"{inset}{shadow.get('x') or '0px'} {shadow.get('y') or '0px'} "
        f"{shadow.get('blur') or '0px'} {shadow.get('spread') or '0px'} "
        f"{shadow.get('color') or 'rgba(0,0,0,0.1)'}"
    )


def layout_styles_to_inline_css(layout_styles: Optional[Mapping[str, Any]]) -> str:
    """Convert a layoutStyles mapping into a ``"; "``-joined inline CSS string."""
    if not layout_styles:
        return ""

    declarations: List[str] = []
    declarations.extend(background_declarations(_section(layout_styles, "background")))
    declarations.extend(side_declarations(layout_styles, "margin"))
    declarations.extend(side_declarations(layout_styles, "padding"))
    declarations.extend(dimension_declarations(layout_styles))

    typography = _section(layout_styles, "typography")
    declarations.extend(f"{css}: {typography[key]}" for key, css in TYPOGRAPHY if typography.get(key))

    declarations.extend(border_declarations(_section(layout_styles, "border")))

    shadow = box_shadow_value(_section(layout_styles, "boxShadow"))
    if shadow:
        declarations.append(f"box-shadow: {shadow}")

    return "; ".join(declarations)


def layout_section(props: Mapping[str, Any], key: str) -> Dict[str, Any]:
    """A sub-mapping of ``props['layoutStyles']`` (``{}`` when absent)."""
    layout = props.get("layoutStyles")
    return _section(layout if isinstance(layout, dict) else None, key)


def build_block_classes(block_type: str, props: Mapping[str, Any], extra: str = "") -> str:
    classes = ["lb-block", f"lb-{block_type.lower()}" if block_type else ""]
    if props.get("customClass"):
        classes.append(str(props["customClass"]))
    if extra:
        classes.append(extra)
    return " ".join(c for c in classes if c)


def merge_block_styles(props: Mapping[str, Any], block_styles: str = "") -> str:
    """Layout CSS, block-specific CSS and the user's customCSS, in that order."""
    layout = props.get("layoutStyles")
    parts = [
        layout_styles_to_inline_css(layout if isinstance(layout, dict) else None),
        block_styles,
        props.get("customCSS") or "",
    ]
    return "; ".join(p for p in parts if p)
