"""
Output Adapters - turn a list of blocks into context-specific HTML.

Each adapter orchestrates the per-block save generators registered in the
block registry and wraps the result in the context's outer document:
- EmailAdapter: table-based layout, inline styles, MSO conditionals
- WebAdapter: HTML5 with ``lb-*`` classes, wrapped in ``div.lb-content``
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional, Union

from laradash.engines.builder.block_registry import BlockRegistry
from laradash.engines.builder.context import BuilderContext, context_value
from laradash.engines.builder.style_helpers import (
    build_block_classes,
    layout_section,
    layout_styles_to_inline_css,
)
from laradash.kernel.hooks import (
    BuilderActionHook,
    BuilderFilterHook,
    HookManager,
    block_hook,
)
from laradash.logging_config import get_logger

logger = get_logger(__name__)

Block = Dict[str, Any]
Settings = Dict[str, Any]


class BaseAdapter(ABC):
    """
    Base class for output adapters.

    Subclasses provide default canvas settings, per-block HTML and the outer
    wrapper; ``generate_html`` ties them together.
    """

    def __init__(self, context: str, registry: BlockRegistry, hooks: HookManager):
        self.context = context
        self.registry = registry
        self.hooks = hooks

    @abstractmethod
    def get_default_settings(self) -> Settings:
        """Default canvas settings for this context."""
        pass

    @abstractmethod
    def generate_block_html(self, block: Block, options: Optional[Dict[str, Any]] = None) -> str:
        """HTML for a single block."""
        pass

    @abstractmethod
    def wrap_output(self, content: str, settings: Settings) -> str:
        """Wrap rendered blocks in the context's outer markup."""
        pass

    def generate_html(self, blocks: List[Block], settings: Optional[Settings] = None) -> str:
        merged = {**self.get_default_settings(), **(settings or {})}
        options = {"settings": merged, "all_blocks": blocks}
        content = "".join(self.generate_block_html(block, options) for block in blocks)
        return self.wrap_output(content, merged)

    def _run_generator(self, block_type: str, generator: Any, props: Dict[str, Any], options: Dict[str, Any]) -> str:
        try:
            return generator(props, options) or ""
        except Exception as e:
            logger.warning(
                "Block render failed",
                extra={"block_type": block_type, "context": self.context, "error": str(e)},
            )
            return ""

    def _apply_block_filters(self, html: str, block_type: str, props: Dict[str, Any], options: Dict[str, Any]) -> str:
        html = self.hooks.apply_filters(block_hook(BuilderFilterHook.HTML_BLOCK, block_type), html, props, options)
        return self.hooks.apply_filters(f"builder.{self.context}.block.{block_type}", html, props, options)


class EmailAdapter(BaseAdapter):
    """Email-safe HTML: tables and inline styles."""

    def __init__(self, registry: BlockRegistry, hooks: HookManager):
        super().__init__(BuilderContext.EMAIL.value, registry, hooks)

    def get_default_settings(self) -> Settings:
        return {
            "width": "700px",
            "backgroundColor": "#f3f4f6",
            "backgroundImage": "",
            "backgroundSize": "cover",
            "backgroundPosition": "center",
            "backgroundRepeat": "no-repeat",
            "contentBackgroundColor": "#ffffff",
            "contentBackgroundImage": "",
            "contentBackgroundSize": "cover",
            "contentBackgroundPosition": "center",
            "contentBackgroundRepeat": "no-repeat",
            "contentPadding": "32px",
            "contentMargin": "40px",
            "contentBorderWidth": "0px",
            "contentBorderColor": "#e5e7eb",
            "contentBorderRadius": "8px",
            "fontFamily": "Arial, sans-serif",
        }

    def generate_block_html(self, block: Block, options: Optional[Dict[str, Any]] = None) -> str:
        block_type = block.get("type", "")
        props = block.get("props") or {}
        extended = {
            **(options or {}),
            "generate_block_html": lambda b, opts=None: self.generate_block_html(b, opts or options),
        }

        generator = self.registry.get_html_generator(block_type, self.context)
        if generator is None:
            logger.warning(
                "No HTML generator for block type",
                extra={"block_type": block_type, "context": self.context},
            )
            return ""

        html = self._run_generator(block_type, generator, props, extended)
        html = self._wrap_with_layout_styles(html, props.get("layoutStyles"))
        return self._apply_block_filters(html, block_type, props, extended)

    def _wrap_with_layout_styles(self, html: str, layout_styles: Optional[Dict[str, Any]]) -> str:
        css = layout_styles_to_inline_css(layout_styles)
        if not css:
            return html
        return (
            '<table width="100%" cellpadding="0" cellspacing="0" border="0">'
            f'<tr><td style="{css}">{html}</td></tr></table>'
        )

    def wrap_output(self, content: str, settings: Settings) -> str:
        max_width = settings.get("width") or "600px"
        content_padding = settings.get("contentPadding") or "40px"
        content_margin = settings.get("contentMargin") or "40px"

        background = layout_section(settings, "background")
        border = layout_section(settings, "border")
        shadow = layout_section(settings, "boxShadow")

        outer_bg = "background-color: #f4f4f4;"

        content_bg = f"background-color: {background.get('color') or '#ffffff'};"
        if background.get("image"):
            content_bg += (
                f" background-image: url('{background['image']}');"
                f" background-size: {background.get('size') or 'cover'};"
                f" background-position: {background.get('position') or 'center'};"
                f" background-repeat: {background.get('repeat') or 'no-repeat'};"
            )

        border_width = (border.get("width") or {}).get("top") or "0px"
        border_style = ""
        if border_width != "0px":
            border_style = f"border: {border_width} {border.get('style') or 'solid'} {border.get('color') or '#e5e7eb'};"

        radius = (border.get("radius") or {}).get("topLeft") or "8px"

        shadow_style = ""
        if shadow.get("blur") and shadow["blur"] != "0px":
            inset = "inset " if shadow.get("inset") else ""
            shadow_style = (
                f"box-shadow: {inset}{shadow.get('x') or '0px'} {shadow.get('y') or '0px'} "
                f"{shadow['blur']} {shadow.get('spread') or '0px'} {shadow.get('color') or 'rgba(0, 0, 0, 0.1)'};"
            )

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
<body style="margin: 0; padding: 0; {outer_bg}">
    <table role="presentation" width="100%" cellpadding="0" cellspacing="0" border="0" style="{outer_bg}">
        <tr>
            <td align="center" style="padding: {content_margin} 20px;">
                <table role="presentation" width="100%" cellpadding="0" cellspacing="0" border="0" style="max-width: {max_width}; {content_bg} border-radius: {radius}; {border_style} {shadow_style}">
                    <tr>
                        <td style="padding: {content_padding};">
                            {content}
                        </td>
                    </tr>
                </table>
            </td>
        </tr>
    </table>
</body>
</html>"""


class WebAdapter(BaseAdapter):
    """Page HTML: semantic markup with ``lb-*`` classes."""

    DEFAULT_FONT = 'system-ui, -apple-system, BlinkMacSystemFont, "Segoe UI", Roboto, sans-serif'

    def __init__(self, registry: BlockRegistry, hooks: HookManager):
        super().__init__(BuilderContext.PAGE.value, registry, hooks)

    def get_default_settings(self) -> Settings:
        return {
            "width": "100%",
            "maxWidth": "1200px",
            "backgroundColor": "#ffffff",
            "contentPadding": "24px",
            "fontFamily": self.DEFAULT_FONT,
            "fontSize": "16px",
            "lineHeight": "1.6",
            "textColor": "#1f2937",
        }

    def generate_block_html(self, block: Block, options: Optional[Dict[str, Any]] = None) -> str:
        options = options or {}
        block_type = block.get("type", "")
        props = block.get("props") or {}
        extended = {
            **options,
            "block_id": block.get("id"),
            "generate_block_html": lambda b, opts=None: self.generate_block_html(
                b, {**(opts or options), "all_blocks": options.get("all_blocks")}
            ),
        }

        generator = self.registry.get_html_generator(block_type, self.context)
        if generator is not None:
            html = self._run_generator(block_type, generator, props, extended)
        else:
            html = self._fallback_block_html(block, extended)

        return self._apply_block_filters(html, block_type, props, extended)

    def _fallback_block_html(self, block: Block, options: Dict[str, Any]) -> str:
        if block.get("type") == "section":
            return self._section_html(block.get("props") or {}, options)
        logger.warning(
            "No HTML generator for block type",
            extra={"block_type": block.get("type"), "context": self.context},
        )
        return ""

    def _section_html(self, props: Dict[str, Any], options: Dict[str, Any]) -> str:
        classes = build_block_classes("section", props)
        layout_css = layout_styles_to_inline_css(props.get("layoutStyles"))
        background = layout_section(props, "background")

        block_styles = [f"padding: {props.get('padding') or '40px 20px'}"]
        if not background.get("color"):
            block_styles.append(f"background-color: {props.get('backgroundColor') or 'transparent'}")
        if props.get("backgroundImage") and not background.get("image"):
            block_styles.append(f"background-image: url('{props['backgroundImage']}')")
            block_styles.append(f"background-size: {props.get('backgroundSize') or 'cover'}")
            block_styles.append(f"background-position: {props.get('backgroundPosition') or 'center'}")

        styles = "; ".join(s for s in (layout_css, "; ".join(block_styles), props.get("customCSS") or "") if s)
        content = "".join(self.generate_block_html(child, options) for child in props.get("children") or [])

        return (
            f'<section class="{classes}" style="{styles}">'
            f'<div style="max-width: {props.get("maxWidth") or "1200px"}; margin: 0 auto;">{content}</div>'
            f"</section>"
        )

    def wrap_output(self, content: str, settings: Settings) -> str:
        return f'<div class="lb-content">{content}</div>'

    def generate_standalone_page(self, blocks: List[Block], settings: Optional[Settings] = None) -> str:
        """Full HTML document for previews and exports."""
        merged = {**self.get_default_settings(), **(settings or {})}
        options = {"settings": merged, "all_blocks": blocks}
        blocks_html = "".join(self.generate_block_html(block, options) for block in blocks)

        return f"""<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>Page</title>
    <style>
        * {{ box-sizing: border-box; }}
        body {{
            margin: 0;
            padding: 0;
            font-family: {merged.get("fontFamily") or self.DEFAULT_FONT};
            font-size: {merged.get("fontSize") or "16px"};
            line-height: {merged.get("lineHeight") or "1.6"};
            color: {merged.get("textColor") or "#1f2937"};
            background-color: {merged.get("backgroundColor") or "#ffffff"};
        }}
        img {{ max-width: 100%; height: auto; }}
        a {{ color: inherit; }}
        .lb-content {{
            max-width: {merged.get("maxWidth") or "1200px"};
            margin: 0 auto;
            padding: {merged.get("contentPadding") or "24px"};
        }}
        .lb-heading {{ margin: 0 0 16px 0; }}
        .lb-text {{ margin: 0 0 16px 0; }}
        .lb-image-wrapper {{ margin: 0 0 16px 0; }}
        .lb-button:hover {{ opacity: 0.9; }}
        .lb-columns {{ margin: 0 0 16px 0; }}
        @media (max-width: 768px) {{
            .lb-columns {{ flex-direction: column; }}
            .lb-column {{ flex: none !important; width: 100% !important; }}
        }}
    </style>
</head>
<body>
    <div class="lb-content">
        {blocks_html}
    </div>
</body>
</html>"""


class OutputAdapterRegistry:
    """
    Maps contexts to adapters.

    The first registered adapter becomes the default and serves contexts that
    have no adapter of their own.
    """

    def __init__(self, hooks: HookManager):
        self.hooks = hooks
        self._adapters: Dict[str, BaseAdapter] = {}
        self._default: Optional[str] = None

    def register(self, context: Union[str, BuilderContext], adapter: BaseAdapter) -> "OutputAdapterRegistry":
        if adapter is None:
            raise ValueError(f"Adapter is required for context: {context_value(context)}")
        ctx = context_value(context)
        self._adapters[ctx] = adapter
        if self._default is None:
            self._default = ctx
        return self

    def get(self, context: Union[str, BuilderContext]) -> Optional[BaseAdapter]:
        ctx = context_value(context)
        if ctx in self._adapters:
            return self._adapters[ctx]
        if self._default is not None:
            return self._adapters[self._default]
        return None

    def has(self, context: Union[str, BuilderContext]) -> bool:
        return context_value(context) in self._adapters

    def get_contexts(self) -> List[str]:
        return list(self._adapters)

    @property
    def default_context(self) -> Optional[str]:
        return self._default

    def set_default(self, context: Union[str, BuilderContext]) -> "OutputAdapterRegistry":
        ctx = context_value(context)
        if ctx not in self._adapters:
            raise ValueError(f"Unknown output context: {ctx}")
        self._default = ctx
        return self

    def unregister(self, context: Union[str, BuilderContext]) -> "OutputAdapterRegistry":
        ctx = context_value(context)
        self._adapters.pop(ctx, None)
        if self._default == ctx:
            self._default = next(iter(self._adapters), None)
        return self

    def generate_html(
        self,
        context: Union[str, BuilderContext],
        blocks: List[Block],
        settings: Optional[Settings] = None,
    ) -> str:
        ctx = context_value(context)
        settings = settings or {}
        adapter = self.get(ctx)
        if adapter is None:
            logger.error("No output adapter for context", extra={"context": ctx})
            return ""

        self.hooks.do_action(BuilderActionHook.HTML_BEFORE_GENERATE, blocks, settings, ctx)
        html = adapter.generate_html(blocks, settings)
        html = self.hooks.apply_filters(BuilderFilterHook.HTML_GENERATED, html, blocks, settings, ctx)
        self.hooks.do_action(BuilderActionHook.HTML_AFTER_GENERATE, html, blocks, settings, ctx)
        return html

    def get_default_settings(self, context: Union[str, BuilderContext]) -> Settings:
        ctx = context_value(context)
        adapter = self.get(ctx)
        if adapter is None:
            return {}
        return self.hooks.apply_filters(
            BuilderFilterHook.CANVAS_DEFAULT_SETTINGS,
            adapter.get_default_settings(),
            ctx,
        )

    def reset(self) -> None:
        self._adapters.clear()
        self._default = None
