"""
Hook name catalogue.

Every extension point the builder, email and module layers expose is listed
here so callers never hand-type hook strings.
"""

from enum import Enum
from typing import Union


class HookType(str, Enum):
    """Kind of hook."""
    FILTER = "filter"
    ACTION = "action"


class BuilderFilterHook(str, Enum):
    """Filters applied by the content builder."""

    # Configuration
    CONFIG = "builder.config"
    CONFIG_EMAIL = "builder.config.email"
    CONFIG_PAGE = "builder.config.page"
    CONFIG_CAMPAIGN = "builder.config.campaign"

    # Block lists
    BLOCKS = "builder.blocks"
    BLOCKS_EMAIL = "builder.blocks.email"
    BLOCKS_PAGE = "builder.blocks.page"
    BLOCKS_CAMPAIGN = "builder.blocks.campaign"
    BLOCK_CATEGORIES = "builder.blocks.categories"

    # Single blocks
    BLOCK_PROPS = "builder.block.props"
    BLOCK_RENDER = "builder.block.render"

    # HTML output
    HTML_GENERATED = "builder.html.generated"
    HTML_BLOCK = "builder.html.block"
    HTML_WRAPPER = "builder.html.wrapper"

    # Canvas
    CANVAS_SETTINGS = "builder.canvas.settings"
    CANVAS_DEFAULT_SETTINGS = "builder.canvas.defaultSettings"

    # State and persistence
    INITIAL_STATE = "builder.state.initial"
    STATE_BEFORE_SAVE = "builder.state.beforeSave"
    STATE_AFTER_LOAD = "builder.state.afterLoad"
    SAVE_DATA = "builder.data.save"
    LOAD_DATA = "builder.data.load"


class BuilderActionHook(str, Enum):
    """Actions fired by the content builder."""

    INIT = "builder.init"
    READY = "builder.ready"
    DESTROY = "builder.destroy"

    BEFORE_SAVE = "builder.save.before"
    AFTER_SAVE = "builder.save.after"
    SAVE_ERROR = "builder.save.error"

    BLOCK_REGISTERED = "builder.block.registered"
    BLOCK_UNREGISTERED = "builder.block.unregistered"
    BLOCK_ADDED = "builder.block.added"
    BLOCK_REMOVED = "builder.block.removed"
    BLOCK_UPDATED = "builder.block.updated"
    BLOCK_MOVED = "builder.block.moved"
    BLOCK_DUPLICATED = "builder.block.duplicated"

    HTML_BEFORE_GENERATE = "builder.html.beforeGenerate"
    HTML_AFTER_GENERATE = "builder.html.afterGenerate"


class EmailFilterHook(str, Enum):
    """Filters applied while composing emails."""
    EMAIL_SUBJECT = "filter.email.subject"
    EMAIL_CONTENT = "filter.email.content"
    EMAIL_RECIPIENT = "filter.email.recipient"
    EMAIL_FROM_ADDRESS = "filter.email.from_address"
    EMAIL_FROM_NAME = "filter.email.from_name"
    EMAIL_REPLY_TO = "filter.email.reply_to"
    EMAIL_VARIABLES = "filter.email.variables"
    EMAIL_REPLACEMENT_DATA = "filter.email.replacement_data"
    EMAIL_TEMPLATE_DATA = "filter.email.template.data"
    EMAIL_BUILDER_BLOCKS = "filter.email.builder.blocks"
    TEMPLATE_VARIABLES_DATA = "email_template_variables_data"


class EmailActionHook(str, Enum):
    """Actions fired around email composition."""
    EMAIL_SENDING_BEFORE = "action.email.sending_before"
    EMAIL_SENT_AFTER = "action.email.sent_after"
    EMAIL_SEND_FAILED = "action.email.send_failed"


class ModuleFilterHook(str, Enum):
    """Filters applied when module status changes."""
    MODULE_ENABLE_BEFORE = "filter.module.enable_before"
    MODULE_ENABLE_AFTER = "filter.module.enable_after"
    MODULE_DISABLE_BEFORE = "filter.module.disable_before"
    MODULE_DISABLE_AFTER = "filter.module.disable_after"


class ModuleActionHook(str, Enum):
    """Actions fired when module status changes."""
    MODULE_ENABLING_BEFORE = "action.module.enabling_before"
    MODULE_ENABLED_AFTER = "action.module.enabled_after"
    MODULE_DISABLING_BEFORE = "action.module.disabling_before"
    MODULE_DISABLED_AFTER = "action.module.disabled_after"
    MODULES_BULK_ACTIVATING_BEFORE = "action.module.bulk.activating_before"
    MODULES_BULK_ACTIVATED_AFTER = "action.module.bulk.activated_after"
    MODULES_BULK_DEACTIVATING_BEFORE = "action.module.bulk.deactivating_before"
    MODULES_BULK_DEACTIVATED_AFTER = "action.module.bulk.deactivated_after"


HookTag = Union[str, Enum]


def hook_name(tag: HookTag) -> str:
    """Resolve a hook tag (plain string or enum member) to its string name."""
    if isinstance(tag, Enum):
        return str(tag.value)
    return tag


def context_hook(base: HookTag, context: str) -> str:
    """Context-scoped hook name, e.g. ``builder.blocks.email``."""
    return f"{hook_name(base)}.{hook_name(context)}"


def block_hook(base: HookTag, block_type: str) -> str:
    """Block-scoped hook name, e.g. ``builder.html.block.heading``."""
    return f"{hook_name(base)}.{block_type}"
