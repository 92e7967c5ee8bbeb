"""
Module Manager - tracks known modules and their enabled state.

Enabled state lives in a JSON file mapping module name to bool:

    {
        "crm": true,
        "newsletter": false
    }
"""

import json
from pathlib import Path
from typing import TYPE_CHECKING, Dict, Iterable, List, Optional, Union

from laradash.kernel.hooks import HookManager, ModuleActionHook, ModuleFilterHook
from laradash.kernel.modules.base import ModuleInfo, ModuleProvider
from laradash.logging_config import get_logger

if TYPE_CHECKING:
    from laradash.engines.builder.builder_service import BuilderService

logger = get_logger(__name__)


def normalize_module_name(name: str) -> str:
    return name.strip().lower()


class ModuleManager:
    """
    Enables, disables and boots modules.

    Usage:
        manager = ModuleManager("modules_statuses.json", hooks)
        manager.add(CrmModule())
        manager.toggle_module("crm", True)
        manager.boot_enabled(builder)
    """

    def __init__(self, statuses_path: Union[str, Path], hooks: HookManager):
        self.statuses_path = Path(statuses_path)
        self.hooks = hooks
        self._modules: Dict[str, ModuleProvider] = {}

    # ------------------------------------------------------------------
    # Known modules
    # ------------------------------------------------------------------

    def add(self, provider: ModuleProvider) -> "ModuleManager":
        self._modules[normalize_module_name(provider.name)] = provider
        return self

    def all(self) -> List[ModuleProvider]:
        return [self._modules[name] for name in sorted(self._modules)]

    def get(self, name: str) -> Optional[ModuleProvider]:
        return self._modules.get(normalize_module_name(name))

    def has(self, name: str) -> bool:
        return normalize_module_name(name) in self._modules

    def list_modules(self) -> List[ModuleInfo]:
        statuses = self.get_module_statuses()
        return [
            provider.info(status=statuses.get(name, False))
            for name, provider in sorted(self._modules.items())
        ]

    # ------------------------------------------------------------------
    # Status file
    # ------------------------------------------------------------------

    def get_module_statuses(self) -> Dict[str, bool]:
        """Statuses keyed by normalised name. A missing or unreadable file gives {}."""
        if not self.statuses_path.exists():
            return {}
        try:
            raw = json.loads(self.statuses_path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as e:
            logger.warning(
                "Unreadable module statuses file",
                extra={"path": str(self.statuses_path), "error": str(e)},
            )
            return {}
        if not isinstance(raw, dict):
            return {}

        statuses: Dict[str, bool] = {}
        for name, status in raw.items():
            key = normalize_module_name(str(name))
            statuses[key] = statuses.get(key, False) or status is True
        return statuses

    def _save_module_statuses(self, statuses: Dict[str, bool]) -> None:
        self.statuses_path.write_text(json.dumps(statuses, indent=4), encoding="utf-8")

    def is_enabled(self, name: str) -> bool:
        return self.get_module_statuses().get(normalize_module_name(name), False)

    # ------------------------------------------------------------------
    # Toggling
    # ------------------------------------------------------------------

    def toggle_module(self, name: str, enable: bool = True) -> bool:
        """
        Enable or disable a module and persist the new status.

        The before filter receives the statuses about to be written; the
        after filter receives the resulting status.

        Raises:
            ValueError: if the module is unknown
        """
        module_name = normalize_module_name(name)
        if module_name not in self._modules:
            raise ValueError(f"Module not found: {name}")

        action = "enable" if enable else "disable"
        logger.info(f"Attempting to {action} module", extra={"module_name": module_name})

        if enable:
            self.hooks.do_action(ModuleActionHook.MODULE_ENABLING_BEFORE, module_name)
        else:
            self.hooks.do_action(ModuleActionHook.MODULE_DISABLING_BEFORE, module_name)

        try:
            statuses = self.get_module_statuses()
            statuses[module_name] = enable
            before = ModuleFilterHook.MODULE_ENABLE_BEFORE if enable else ModuleFilterHook.MODULE_DISABLE_BEFORE
            statuses = self.hooks.apply_filters(before, statuses, module_name)
            self._save_module_statuses(statuses)
        except Exception as e:
            logger.error(
                f"Failed to {action} module",
                extra={"module_name": module_name, "error": str(e), "exception": type(e).__name__},
            )
            raise

        status = bool(statuses.get(module_name, False))
        after = ModuleFilterHook.MODULE_ENABLE_AFTER if enable else ModuleFilterHook.MODULE_DISABLE_AFTER
        status = bool(self.hooks.apply_filters(after, status, module_name))

        logger.info(f"Successfully {action}d module", extra={"module_name": module_name})
        if enable:
            self.hooks.do_action(ModuleActionHook.MODULE_ENABLED_AFTER, module_name)
        else:
            self.hooks.do_action(ModuleActionHook.MODULE_DISABLED_AFTER, module_name)
        return status

    def toggle_module_status(self, name: str) -> bool:
        """
        Flip a module's status. A module missing from the file counts as
        disabled, so the first toggle enables it.

        Raises:
            ValueError: if the module is unknown
        """
        module_name = normalize_module_name(name)
        if module_name not in self._modules:
            raise ValueError(f"Module not found: {name}")
        new_status = not self.get_module_statuses().get(module_name, False)
        self.toggle_module(module_name, new_status)
        return new_status

    def bulk_activate(self, names: Iterable[str]) -> Dict[str, bool]:
        names = list(names)
        self.hooks.do_action(ModuleActionHook.MODULES_BULK_ACTIVATING_BEFORE, names)
        results = self._bulk_toggle(names, True)
        self.hooks.do_action(ModuleActionHook.MODULES_BULK_ACTIVATED_AFTER, results)
        return results

    def bulk_deactivate(self, names: Iterable[str]) -> Dict[str, bool]:
        names = list(names)
        self.hooks.do_action(ModuleActionHook.MODULES_BULK_DEACTIVATING_BEFORE, names)
        results = self._bulk_toggle(names, False)
        self.hooks.do_action(ModuleActionHook.MODULES_BULK_DEACTIVATED_AFTER, results)
        return results

    def _bulk_toggle(self, names: List[str], enable: bool) -> Dict[str, bool]:
        results: Dict[str, bool] = {}
        for name in names:
            if not self.has(name):
                results[name] = False
                continue
            module_name = normalize_module_name(name)
            try:
                self.toggle_module(module_name, enable)
                results[module_name] = True
            except Exception as e:
                logger.error(
                    f"Failed to {'activate' if enable else 'deactivate'} module",
                    extra={"module_name": module_name, "error": str(e)},
                )
                results[module_name] = False
        return results

    def cleanup_orphaned_module_statuses(self) -> List[str]:
        """Drop status entries for modules that are not known. Returns the removed names."""
        statuses = self.get_module_statuses()
        orphaned = [name for name in statuses if name not in self._modules]
        if not orphaned:
            return []
        for name in orphaned:
            logger.info("Cleaned up orphaned module status entry", extra={"module_name": name})
            del statuses[name]
        self._save_module_statuses(statuses)
        return orphaned

    # ------------------------------------------------------------------
    # Boot
    # ------------------------------------------------------------------

    def boot_enabled(self, builder: "BuilderService") -> List[str]:
        """Register then boot every enabled module, in name order."""
        statuses = self.get_module_statuses()
        enabled = [name for name in sorted(self._modules) if statuses.get(name, False)]

        for name in enabled:
            self._modules[name].register(builder)
        for name in enabled:
            self._modules[name].boot(builder)

        if enabled:
            logger.info("Booted modules", extra={"modules": enabled})
        return enabled
