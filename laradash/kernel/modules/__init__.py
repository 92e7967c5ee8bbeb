"""
Module system.

Modules are self-contained plugins. When enabled in the statuses file their
provider registers blocks, render callbacks and hooks with the builder.
"""

from laradash.kernel.modules.base import ModuleInfo, ModuleProvider
from laradash.kernel.modules.module_manager import ModuleManager, normalize_module_name

__all__ = [
    "ModuleInfo",
    "ModuleProvider",
    "ModuleManager",
    "normalize_module_name",
]
