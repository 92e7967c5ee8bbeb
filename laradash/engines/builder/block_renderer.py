"""
Block Renderer - server-side rendering of ``data-lara-block`` placeholders.

Saved content may contain placeholders such as:

    <div data-lara-block="toc" data-block-id="block-1" data-props='{"title": "On this page"}'>…</div>

``process_content`` swaps each placeholder for the output of the block's
render callback. Placeholders whose callback is missing, returns None or
raises keep their original markup.
"""

import html
import json
import re
from typing import Any, Dict, List, Optional, Tuple
from urllib.parse import unquote_plus

from laradash.engines.builder.builder_service import BuilderService
from laradash.engines.builder.text_utils import word_count
from laradash.logging_config import get_logger

logger = get_logger(__name__)

OPENING_TAG_PATTERN = re.compile(
    r"<div\s+data-lara-block=\"([^\"]+)\"(?:\s+data-block-id=\"([^\"]*)\")?"
    r"\s+data-props='([^']*(?:&#39;[^']*)*)'[^>]*>",
    re.IGNORECASE | re.DOTALL,
)
LEGACY_MARKDOWN_PATTERN = re.compile(
    r"<div[^>]*data-block-type=\"markdown\"[^>]*data-url=\"([^\"]*)\"[^>]*"
    r"data-show-source=\"([^\"]*)\"[^>]*>.*?</div>",
    re.IGNORECASE | re.DOTALL,
)


def decode_props(raw: str) -> Dict[str, Any]:
    """HTML-unescape then JSON-decode placeholder props; anything invalid gives {}."""
    try:
        decoded = json.loads(html.unescape(raw))
    except (TypeError, ValueError):
        return {}
    return decoded if isinstance(decoded, dict) else {}


def find_block_end(content: str, start: int) -> Optional[int]:
    """
    End offset of the div opened at ``start``, found by counting nested
    ``<div``/``</div>`` tags. None when the markup is unbalanced.
    """
    tag_end = content.find(">", start)
    if tag_end == -1:
        return None

    depth = 1
    pos = tag_end + 1
    while depth > 0 and pos < len(content):
        next_open = content.find("<div", pos)
        next_close = content.find("</div>", pos)
        if next_close == -1:
            break
        if next_open != -1 and next_open < next_close:
            depth += 1
            pos = next_open + 4
        else:
            depth -= 1
            pos = next_close + 6

    return pos if depth == 0 else None


class BlockRenderer:
    """
    Renders dynamic blocks inside stored HTML.

    Callbacks come from the builder service: an explicitly registered render
    callback wins over the block definition's own ``render``.
    """

    def __init__(self, builder: BuilderService):
        self.builder = builder

    def render_block(
        self,
        block_type: str,
        props: Dict[str, Any],
        context: str,
        block_id: Optional[str] = None,
    ) -> Optional[str]:
        return self.builder.render_block(block_type, props, context, block_id)

    def process_content(self, content: str, context: str = "page") -> str:
        """Replace every renderable placeholder in ``content``."""
        if not content:
            return content

        content = self._process_legacy_markdown(content, context)

        matches = list(OPENING_TAG_PATTERN.finditer(content))
        if not matches:
            return content

        words = word_count(content)
        all_blocks = [
            {"type": m.group(1), "id": m.group(2) or None, "props": decode_props(m.group(3))}
            for m in matches
        ]

        replacements: List[Tuple[int, int, str]] = []
        for match, block in zip(matches, all_blocks):
            start = match.start()
            end = find_block_end(content, start)
            if end is None:
                logger.debug("Unbalanced block markup", extra={"block_type": block["type"], "offset": start})
                continue

            block_type = block["type"]
            props = dict(block["props"])
            if block_type == "time-to-read":
                props["_wordCount"] = words
            elif block_type == "toc":
                props.setdefault("_allBlocks", all_blocks)

            try:
                rendered = self.render_block(block_type, props, context, block["id"])
            except Exception as e:
                logger.warning(
                    "Failed to render block",
                    extra={"block_type": block_type, "context": context, "error": str(e)},
                )
                continue

            if rendered is not None:
                replacements.append((start, end, rendered))

        return self._apply_replacements(content, replacements)

    @staticmethod
    def _apply_replacements(content: str, replacements: List[Tuple[int, int, str]]) -> str:
        # Outer placeholders win; anything inside a replaced range is dropped.
        accepted: List[Tuple[int, int, str]] = []
        last_end = -1
        for start, end, rendered in sorted(replacements, key=lambda r: r[0]):
            if start < last_end:
                continue
            accepted.append((start, end, rendered))
            last_end = end

        for start, end, rendered in reversed(accepted):
            content = content[:start] + rendered + content[end:]
        return content

    def _process_legacy_markdown(self, content: str, context: str) -> str:
        def replace(match: "re.Match[str]") -> str:
            url = unquote_plus(match.group(1))
            if not url:
                return match.group(0)
            props = {
                "sourceType": "url",
                "url": url,
                "showSource": match.group(2) != "false",
                "cacheEnabled": True,
                "layoutStyles": {},
            }
            try:
                rendered = self.render_block("markdown", props, context)
            except Exception as e:
                logger.warning(
                    "Failed to render block",
                    extra={"block_type": "markdown", "context": context, "error": str(e)},
                )
                return match.group(0)
            return match.group(0) if rendered is None else rendered

        return LEGACY_MARKDOWN_PATTERN.sub(replace, content)
