"""
Block Registry - the catalogue of block types the builder knows about.

Each block type maps to a definition: editor metadata (label, category, icon,
default props) plus a save table of HTML generators keyed by context
("page", "email" or "*") and an optional server-side render callback.
"""

import copy
import re
import uuid
from typing import Any, Callable, Dict, List, Mapping, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from laradash.engines.builder.context import ALL_CONTEXTS, BuilderContext, context_value
from laradash.kernel.hooks import (
    BuilderActionHook,
    BuilderFilterHook,
    HookManager,
    context_hook,
)
from laradash.logging_config import get_logger

logger = get_logger(__name__)

# (props, options) -> html
SaveFn = Callable[[Dict[str, Any], Dict[str, Any]], str]
# (props, context, block_id) -> html, or None to keep the placeholder
RenderFn = Callable[[Dict[str, Any], str, Optional[str]], Optional[str]]

BLOCK_TYPE_PATTERN = re.compile(r"^[a-z][a-z0-9-]*$")


class BlockSupports(BaseModel):
    """Editor capabilities a block type opts into."""

    model_config = ConfigDict(extra="allow")

    align: bool = True
    spacing: bool = True
    colors: bool = True
    nesting: bool = False
    html: bool = True
    duplicate: bool = True
    remove: bool = True


class BlockMigration(BaseModel):
    """A props transform from one block version to the next."""

    from_version: str
    to_version: str
    migrate: Callable[[Dict[str, Any]], Dict[str, Any]]


class BlockDefinition(BaseModel):
    """A registered block type."""

    model_config = ConfigDict(populate_by_name=True, arbitrary_types_allowed=True)

    type: str
    label: str = ""
    category: str = "Content"
    icon: str = "lucide:box"
    description: str = ""
    keywords: List[str] = []
    contexts: List[str] = Field(default_factory=lambda: [ALL_CONTEXTS])
    default_props: Dict[str, Any] = Field(default_factory=dict, alias="defaultProps")
    supports: BlockSupports = Field(default_factory=BlockSupports)
    save: Dict[str, SaveFn] = Field(default_factory=dict)
    render: Optional[RenderFn] = None
    validate_props: Optional[Callable[[Dict[str, Any]], bool]] = Field(default=None, alias="validate")
    version: str = "1.0.0"
    migrations: List[BlockMigration] = []
    is_custom: bool = Field(default=False, alias="isCustom")

    @field_validator("type")
    @classmethod
    def check_type(cls, v: str) -> str:
        if not v:
            raise ValueError("Block type is required")
        if not BLOCK_TYPE_PATTERN.match(v):
            raise ValueError(
                "Block type must start with a lowercase letter and contain only "
                "lowercase letters, numbers, and hyphens"
            )
        return v

    @field_validator("contexts", mode="before")
    @classmethod
    def normalize_contexts(cls, v: Any) -> List[str]:
        if v is None:
            return [ALL_CONTEXTS]
        if isinstance(v, (str, BuilderContext)):
            v = [v]
        if not isinstance(v, (list, tuple, set)):
            raise ValueError("contexts must be a list")
        contexts = [context_value(c) for c in v]
        return contexts or [ALL_CONTEXTS]

    @field_validator("save", mode="before")
    @classmethod
    def normalize_save(cls, v: Any) -> Dict[str, SaveFn]:
        if v is None:
            return {}
        if callable(v):
            return {ALL_CONTEXTS: v}
        if not isinstance(v, Mapping):
            raise ValueError("save must be a mapping of context to generator")
        return {context_value(k): fn for k, fn in v.items()}

    @model_validator(mode="after")
    def default_label(self) -> "BlockDefinition":
        if not self.label:
            self.label = self.type[:1].upper() + self.type[1:]
        return self

    def available_in(self, context: Union[str, BuilderContext]) -> bool:
        ctx = context_value(context)
        return ALL_CONTEXTS in self.contexts or ctx in self.contexts

    def to_dict(self) -> Dict[str, Any]:
        """JSON-safe view of the definition for the editor frontend."""
        return {
            "type": self.type,
            "label": self.label,
            "category": self.category,
            "icon": self.icon,
            "description": self.description,
            "keywords": list(self.keywords),
            "contexts": list(self.contexts),
            "defaultProps": copy.deepcopy(self.default_props),
            "supports": self.supports.model_dump(),
            "version": self.version,
            "isCustom": self.is_custom,
            "save_contexts": sorted(self.save),
            "has_render": self.render is not None,
        }


class BlockInstance(BaseModel):
    """A block placed on a canvas."""

    id: str
    type: str
    props: Dict[str, Any] = {}


DefinitionInput = Union[BlockDefinition, Mapping[str, Any]]


class BlockRegistry:
    """
    Registry of block types.

    Usage:
        registry = BlockRegistry(hooks)
        registry.register({"type": "callout", "save": {"page": render_page}})
        blocks = registry.get_for_context("email")
    """

    def __init__(self, hooks: HookManager):
        self.hooks = hooks
        self._blocks: Dict[str, BlockDefinition] = {}

    def register(self, definition: DefinitionInput) -> BlockDefinition:
        """
        Register (or replace) a block type.

        Raises:
            ValueError: if the definition is invalid
        """
        if isinstance(definition, BlockDefinition):
            block = definition
        elif isinstance(definition, Mapping):
            block = BlockDefinition.model_validate(dict(definition))
        else:
            raise ValueError("Block definition must be a BlockDefinition or a mapping")

        if block.type in self._blocks:
            logger.debug("Replacing block definition", extra={"block_type": block.type})

        self._blocks[block.type] = block
        self.hooks.do_action(BuilderActionHook.BLOCK_REGISTERED, block)
        return block

    def unregister(self, block_type: str) -> bool:
        if self._blocks.pop(block_type, None) is None:
            return False
        self.hooks.do_action(BuilderActionHook.BLOCK_UNREGISTERED, block_type)
        return True

    def get(self, block_type: str) -> Optional[BlockDefinition]:
        return self._blocks.get(block_type)

    def has(self, block_type: str) -> bool:
        return block_type in self._blocks

    def all(self) -> List[BlockDefinition]:
        return list(self._blocks.values())

    def get_for_context(self, context: Union[str, BuilderContext]) -> List[BlockDefinition]:
        """Blocks available in a context, after the context and global block filters."""
        ctx = context_value(context)
        blocks = [b for b in self._blocks.values() if b.available_in(ctx)]
        blocks = self.hooks.apply_filters(context_hook(BuilderFilterHook.BLOCKS, ctx), blocks)
        return self.hooks.apply_filters(BuilderFilterHook.BLOCKS, blocks, ctx)

    def get_by_category(
        self,
        context: Optional[Union[str, BuilderContext]] = None,
    ) -> Dict[str, List[BlockDefinition]]:
        blocks = self.get_for_context(context) if context else self.all()
        categories: Dict[str, List[BlockDefinition]] = {}
        for block in blocks:
            categories.setdefault(block.category, []).append(block)
        return self.hooks.apply_filters(BuilderFilterHook.BLOCK_CATEGORIES, categories, context)

    def get_categories(self) -> List[str]:
        return sorted({b.category for b in self._blocks.values()})

    def search(
        self,
        query: str,
        context: Optional[Union[str, BuilderContext]] = None,
    ) -> List[BlockDefinition]:
        """Case-insensitive match on label, type, category, keywords and description."""
        blocks = self.get_for_context(context) if context else self.all()
        needle = query.strip().lower()
        if not needle:
            return blocks

        def matches(block: BlockDefinition) -> bool:
            haystack = [block.label, block.type, block.category, block.description, *block.keywords]
            return any(needle in (value or "").lower() for value in haystack)

        return [b for b in blocks if matches(b)]

    def create_instance(
        self,
        block_type: str,
        overrides: Optional[Dict[str, Any]] = None,
    ) -> Optional[BlockInstance]:
        """New block instance with fresh default props, or None for an unknown type."""
        block = self.get(block_type)
        if block is None:
            return None
        props = copy.deepcopy(block.default_props)
        if overrides:
            props.update(copy.deepcopy(overrides))
        props = self.hooks.apply_filters(BuilderFilterHook.BLOCK_PROPS, props, block_type)
        return BlockInstance(id=f"block-{uuid.uuid4().hex[:12]}", type=block_type, props=props)

    def validate(self, block_type: str, props: Dict[str, Any]) -> bool:
        block = self.get(block_type)
        if block is None:
            return False
        if block.validate_props is None:
            return True
        return bool(block.validate_props(props))

    def supports(self, block_type: str, feature: str) -> bool:
        block = self.get(block_type)
        if block is None:
            return False
        return bool(getattr(block.supports, feature, False))

    def get_default_props(self, block_type: str) -> Dict[str, Any]:
        block = self.get(block_type)
        return copy.deepcopy(block.default_props) if block else {}

    def get_html_generator(
        self,
        block_type: str,
        context: Union[str, BuilderContext],
    ) -> Optional[SaveFn]:
        """Context-specific save generator, falling back to the '*' generator."""
        block = self.get(block_type)
        if block is None:
            return None
        return block.save.get(context_value(context)) or block.save.get(ALL_CONTEXTS)

    def to_dict(self) -> Dict[str, Any]:
        return {"blocks": [b.to_dict() for b in self._blocks.values()]}

    def get_javascript_data(self) -> Dict[str, Any]:
        """Payload the editor bootstraps from; same shape as to_dict()."""
        return self.to_dict()

    def reset(self) -> None:
        self._blocks.clear()
