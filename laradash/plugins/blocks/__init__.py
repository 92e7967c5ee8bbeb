"""
Core Blocks - the block types every builder context ships with.

Groups:
- Text: heading, text, list, quote, code, preformatted, table, html
- Media: button, image, video, social, spacer, divider
- Layout: columns, section, accordion
- Dynamic: countdown, footer, time-to-read, toc, markdown
"""

from typing import List, Optional

from laradash.engines.builder.block_registry import BlockDefinition, BlockRegistry
from laradash.plugins.blocks.dynamic_blocks import DYNAMIC_BLOCKS, markdown_definition
from laradash.plugins.blocks.layout_blocks import LAYOUT_BLOCKS
from laradash.plugins.blocks.media_blocks import MEDIA_BLOCKS
from laradash.plugins.blocks.text_blocks import TEXT_BLOCKS

CORE_BLOCKS = TEXT_BLOCKS + MEDIA_BLOCKS + LAYOUT_BLOCKS + DYNAMIC_BLOCKS


def register_core_blocks(registry: BlockRegistry, markdown_service=None) -> List[BlockDefinition]:
    """
    Register every core block type.

    The markdown block needs a markdown service and is skipped without one.
    """
    registered = [registry.register(definition) for definition in CORE_BLOCKS]
    if markdown_service is not None:
        registered.append(registry.register(markdown_definition(markdown_service)))
    return registered


__all__ = [
    "CORE_BLOCKS",
    "register_core_blocks",
]
