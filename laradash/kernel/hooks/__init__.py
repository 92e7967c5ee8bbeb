"""
Hook system.

Named extension points: filters transform a value through a priority-sorted
callback chain, actions fire side-effecting callbacks in priority order.
"""

from laradash.kernel.hooks.hook_manager import (
    DEFAULT_PRIORITY,
    HookCallback,
    HookManager,
    get_hook_manager,
)
from laradash.kernel.hooks.hook_names import (
    BuilderActionHook,
    BuilderFilterHook,
    EmailActionHook,
    EmailFilterHook,
    HookType,
    ModuleActionHook,
    ModuleFilterHook,
    block_hook,
    context_hook,
    hook_name,
)

__all__ = [
    "DEFAULT_PRIORITY",
    "HookCallback",
    "HookManager",
    "get_hook_manager",
    "HookType",
    "BuilderFilterHook",
    "BuilderActionHook",
    "EmailFilterHook",
    "EmailActionHook",
    "ModuleFilterHook",
    "ModuleActionHook",
    "block_hook",
    "context_hook",
    "hook_name",
]
