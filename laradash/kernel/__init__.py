"""
Kernel Layer

Foundations the builder and modules are written against:
- Hooks: named filters and actions for extension
- Modules: plugin providers and their enabled state

Plugins reach the builder only through these interfaces.
"""

from laradash.kernel.hooks import (
    BuilderActionHook,
    BuilderFilterHook,
    EmailActionHook,
    EmailFilterHook,
    HookManager,
    HookType,
    ModuleActionHook,
    ModuleFilterHook,
    get_hook_manager,
)
from laradash.kernel.modules import ModuleInfo, ModuleManager, ModuleProvider

__all__ = [
    "BuilderActionHook",
    "BuilderFilterHook",
    "EmailActionHook",
    "EmailFilterHook",
    "HookManager",
    "HookType",
    "ModuleActionHook",
    "ModuleFilterHook",
    "get_hook_manager",
    "ModuleInfo",
    "ModuleManager",
    "ModuleProvider",
]
