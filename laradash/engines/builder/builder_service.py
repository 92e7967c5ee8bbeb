"""
Builder Service - single entry point for the content builder.

Ties together the block registry, the output adapters, the hook manager and
explicitly registered render callbacks. Modules talk to the builder through
this service.
"""

import copy
from typing import Any, Callable, Dict, List, Optional, Union

from laradash.engines.builder.adapters import OutputAdapterRegistry
from laradash.engines.builder.block_registry import (
    BlockDefinition,
    BlockRegistry,
    DefinitionInput,
    RenderFn,
)
from laradash.engines.builder.context import BuilderContext, context_value
from laradash.kernel.hooks import (
    DEFAULT_PRIORITY,
    BuilderFilterHook,
    HookManager,
    context_hook,
)
from laradash.logging_config import get_logger

logger = get_logger(__name__)


CONTEXT_LABELS: Dict[str, Dict[str, str]] = {
    BuilderContext.EMAIL.value: {
        "title": "Email Builder",
        "backText": "Back to Templates",
        "saveText": "Update",
    },
    BuilderContext.PAGE.value: {
        "title": "Page Builder",
        "backText": "Back to Posts",
        "saveText": "Save",
    },
    BuilderContext.CAMPAIGN.value: {
        "title": "Campaign Editor",
        "backText": "Back to Campaign",
        "saveText": "Save Campaign",
    },
}
DEFAULT_LABELS = {"title": "Builder", "backText": "Back", "saveText": "Save"}

EMAIL_FEATURES = {
    "inlineStyles": True,
    "tables": True,
    "msoConditionals": True,
    "videoThumbnails": True,
    "cssClasses": False,
    "nativeVideo": False,
}
CONTEXT_FEATURES: Dict[str, Dict[str, bool]] = {
    BuilderContext.EMAIL.value: EMAIL_FEATURES,
    BuilderContext.PAGE.value: {
        "inlineStyles": False,
        "tables": False,
        "msoConditionals": False,
        "videoThumbnails": False,
        "cssClasses": True,
        "nativeVideo": True,
    },
    BuilderContext.CAMPAIGN.value: {**EMAIL_FEATURES, "personalization": True},
}


class BuilderService:
    """
    Facade over the builder internals.

    Usage:
        builder = BuilderService(registry, adapters, hooks)
        builder.register_block({"type": "callout", "save": {"page": callout_page}})
        builder.register_block_render_callback("callout", render_callout)
        html = builder.generate_html("email", blocks, settings)
    """

    def __init__(
        self,
        registry: BlockRegistry,
        adapters: OutputAdapterRegistry,
        hooks: HookManager,
    ):
        self.registry = registry
        self.adapters = adapters
        self.hooks = hooks
        self._module_scripts: List[Dict[str, str]] = []
        self._render_callbacks: Dict[str, RenderFn] = {}

    # ------------------------------------------------------------------
    # Blocks
    # ------------------------------------------------------------------

    def register_block(self, definition: DefinitionInput) -> BlockDefinition:
        return self.registry.register(definition)

    def register_module_block(
        self,
        definition: DefinitionInput,
        script_path: Optional[str] = None,
    ) -> BlockDefinition:
        """Register a block contributed by a module, plus its editor script if any."""
        block = self.registry.register(definition)
        if script_path:
            self.register_module_script(script_path)
        return block

    def register_module_script(self, path: str, build_path: str = "build") -> "BuilderService":
        """Queue a module's editor bundle for loading by the frontend."""
        self._module_scripts.append({"path": path, "buildPath": build_path})
        return self

    def get_module_scripts(self) -> List[Dict[str, str]]:
        return list(self._module_scripts)

    # ------------------------------------------------------------------
    # Server-side render callbacks
    # ------------------------------------------------------------------

    def register_block_render_callback(self, block_type: str, callback: RenderFn) -> "BuilderService":
        """
        Register a server-side render callback for a block type.

        The callback receives (props, context, block_id) and wins over the
        definition's own render.

        Raises:
            ValueError: if callback is not callable
        """
        if not callable(callback):
            raise ValueError(f"Render callback for '{block_type}' must be callable")
        self._render_callbacks[block_type] = callback
        logger.debug("Registered block render callback", extra={"block_type": block_type})
        return self

    def has_block_render_callback(self, block_type: str) -> bool:
        return block_type in self._render_callbacks

    def get_block_render_callback(self, block_type: str) -> Optional[RenderFn]:
        return self._render_callbacks.get(block_type)

    def get_block_render_callbacks(self) -> Dict[str, RenderFn]:
        return dict(self._render_callbacks)

    def resolve_render_callback(self, block_type: str) -> Optional[RenderFn]:
        callback = self._render_callbacks.get(block_type)
        if callback is not None:
            return callback
        definition = self.registry.get(block_type)
        return definition.render if definition else None

    def render_block(
        self,
        block_type: str,
        props: Dict[str, Any],
        context: Union[str, BuilderContext] = "page",
        block_id: Optional[str] = None,
    ) -> Optional[str]:
        """Server-side render of one block, or None when the type has no callback."""
        callback = self.resolve_render_callback(block_type)
        if callback is None:
            return None
        return callback(props, context_value(context), block_id)

    # ------------------------------------------------------------------
    # Editor configuration
    # ------------------------------------------------------------------

    def get_config(self, context: Union[str, BuilderContext]) -> Dict[str, Any]:
        ctx = context_value(context)
        config = {
            "context": ctx,
            "labels": dict(CONTEXT_LABELS.get(ctx, DEFAULT_LABELS)),
            "features": dict(CONTEXT_FEATURES.get(ctx, {})),
            "blocks": [block.to_dict() for block in self.registry.get_for_context(ctx)],
        }
        return self.hooks.apply_filters(context_hook(BuilderFilterHook.CONFIG, ctx), config)

    def get_frontend_data(self, context: Optional[Union[str, BuilderContext]] = None) -> Dict[str, Any]:
        """Payload the editor bootstraps from."""
        data: Dict[str, Any] = self.registry.get_javascript_data()
        if context is not None:
            data["config"] = self.get_config(context)
        data["module_scripts"] = self.get_module_scripts()
        return data

    # ------------------------------------------------------------------
    # Output
    # ------------------------------------------------------------------

    def generate_html(
        self,
        context: Union[str, BuilderContext],
        blocks: List[Dict[str, Any]],
        settings: Optional[Dict[str, Any]] = None,
    ) -> str:
        return self.adapters.generate_html(context, blocks, settings)

    def prepare_save_data(self, data: Dict[str, Any]) -> Dict[str, Any]:
        return self.hooks.apply_filters(BuilderFilterHook.SAVE_DATA, copy.deepcopy(data))

    def prepare_load_data(self, data: Dict[str, Any]) -> Dict[str, Any]:
        return self.hooks.apply_filters(BuilderFilterHook.LOAD_DATA, copy.deepcopy(data))

    # ------------------------------------------------------------------
    # Hook passthroughs
    # ------------------------------------------------------------------

    def add_filter(
        self,
        tag: str,
        callback: Callable[..., Any],
        priority: int = DEFAULT_PRIORITY,
        accepted_args: Optional[int] = None,
    ) -> None:
        self.hooks.add_filter(tag, callback, priority, accepted_args)

    def add_action(
        self,
        tag: str,
        callback: Callable[..., Any],
        priority: int = DEFAULT_PRIORITY,
        accepted_args: Optional[int] = None,
    ) -> None:
        self.hooks.add_action(tag, callback, priority, accepted_args)

    def apply_filters(self, tag: str, value: Any, *args: Any) -> Any:
        return self.hooks.apply_filters(tag, value, *args)

    def do_action(self, tag: str, *args: Any) -> None:
        self.hooks.do_action(tag, *args)
