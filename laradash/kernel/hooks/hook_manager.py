"""
Hook Manager - ordered filter/action callback chains.

Filters pass a value through every registered callback and return the result;
actions call every registered callback for its side effects. Callbacks run in
ascending priority, ties broken by registration order.
"""

import itertools
from dataclasses import dataclass, field
from functools import lru_cache
from typing import Any, Callable, Dict, List, Optional

from laradash.config import get_settings
from laradash.kernel.hooks.hook_names import HookTag, HookType, hook_name
from laradash.logging_config import get_logger

logger = get_logger(__name__)

DEFAULT_PRIORITY = 20


@dataclass(order=True)
class HookCallback:
    """A registered callback. Sorts by (priority, sequence)."""

    priority: int
    sequence: int
    callback: Callable[..., Any] = field(compare=False)
    accepted_args: Optional[int] = field(default=None, compare=False)

    def invoke(self, *args: Any) -> Any:
        if self.accepted_args is not None:
            args = args[: self.accepted_args]
        return self.callback(*args)


class HookManager:
    """
    Registry of filter and action callbacks keyed by hook name.

    Usage:
        hooks = HookManager()
        hooks.add_filter(BuilderFilterHook.HTML_GENERATED, minify, priority=90)
        html = hooks.apply_filters(BuilderFilterHook.HTML_GENERATED, html, blocks)
    """

    def __init__(self, strict: bool = False):
        self.strict = strict
        self._filters: Dict[str, List[HookCallback]] = {}
        self._actions: Dict[str, List[HookCallback]] = {}
        self._sequence = itertools.count()

    def _store(self, hook_type: HookType) -> Dict[str, List[HookCallback]]:
        return self._filters if hook_type == HookType.FILTER else self._actions

    def _add(
        self,
        hook_type: HookType,
        tag: HookTag,
        callback: Callable[..., Any],
        priority: int,
        accepted_args: Optional[int],
    ) -> None:
        if not callable(callback):
            raise ValueError(f"Callback for {hook_type.value} '{hook_name(tag)}' is not callable")
        entries = self._store(hook_type).setdefault(hook_name(tag), [])
        entries.append(
            HookCallback(
                priority=priority,
                sequence=next(self._sequence),
                callback=callback,
                accepted_args=accepted_args,
            )
        )
        entries.sort()

    def _remove(
        self,
        hook_type: HookType,
        tag: HookTag,
        callback: Callable[..., Any],
        priority: Optional[int],
    ) -> bool:
        name = hook_name(tag)
        entries = self._store(hook_type).get(name, [])
        for entry in entries:
            if entry.callback == callback and (priority is None or entry.priority == priority):
                entries.remove(entry)
                if not entries:
                    del self._store(hook_type)[name]
                return True
        return False

    # ------------------------------------------------------------------
    # Filters
    # ------------------------------------------------------------------

    def add_filter(
        self,
        tag: HookTag,
        callback: Callable[..., Any],
        priority: int = DEFAULT_PRIORITY,
        accepted_args: Optional[int] = None,
    ) -> None:
        """Register a filter callback. Lower priority runs first."""
        self._add(HookType.FILTER, tag, callback, priority, accepted_args)

    def apply_filters(self, tag: HookTag, value: Any, *args: Any) -> Any:
        """
        Pass value through every filter registered for tag.

        Each callback receives (current_value, *args). A callback returning
        None leaves the value unchanged.
        """
        name = hook_name(tag)
        for entry in list(self._filters.get(name, [])):
            try:
                result = entry.invoke(value, *args)
            except Exception:
                if self.strict:
                    raise
                logger.exception(
                    "Hook callback failed",
                    extra={"hook": name, "hook_type": HookType.FILTER.value},
                )
                continue
            if result is not None:
                value = result
        return value

    def remove_filter(
        self,
        tag: HookTag,
        callback: Callable[..., Any],
        priority: Optional[int] = None,
    ) -> bool:
        return self._remove(HookType.FILTER, tag, callback, priority)

    def remove_all_filters(self, tag: Optional[HookTag] = None) -> None:
        if tag is None:
            self._filters.clear()
        else:
            self._filters.pop(hook_name(tag), None)

    def has_filter(self, tag: HookTag, callback: Optional[Callable[..., Any]] = None) -> bool:
        entries = self._filters.get(hook_name(tag), [])
        if callback is None:
            return bool(entries)
        return any(entry.callback == callback for entry in entries)

    # ------------------------------------------------------------------
    # Actions
    # ------------------------------------------------------------------

    def add_action(
        self,
        tag: HookTag,
        callback: Callable[..., Any],
        priority: int = DEFAULT_PRIORITY,
        accepted_args: Optional[int] = None,
    ) -> None:
        """Register an action callback. Lower priority runs first."""
        self._add(HookType.ACTION, tag, callback, priority, accepted_args)

    def do_action(self, tag: HookTag, *args: Any) -> None:
        """Call every action registered for tag. Return values are ignored."""
        name = hook_name(tag)
        for entry in list(self._actions.get(name, [])):
            try:
                entry.invoke(*args)
            except Exception:
                if self.strict:
                    raise
                logger.exception(
                    "Hook callback failed",
                    extra={"hook": name, "hook_type": HookType.ACTION.value},
                )

    def remove_action(
        self,
        tag: HookTag,
        callback: Callable[..., Any],
        priority: Optional[int] = None,
    ) -> bool:
        return self._remove(HookType.ACTION, tag, callback, priority)

    def remove_all_actions(self, tag: Optional[HookTag] = None) -> None:
        if tag is None:
            self._actions.clear()
        else:
            self._actions.pop(hook_name(tag), None)

    def has_action(self, tag: HookTag, callback: Optional[Callable[..., Any]] = None) -> bool:
        entries = self._actions.get(hook_name(tag), [])
        if callback is None:
            return bool(entries)
        return any(entry.callback == callback for entry in entries)

    # ------------------------------------------------------------------
    # Introspection
    # ------------------------------------------------------------------

    def has_hook(self, tag: HookTag, hook_type: HookType = HookType.FILTER) -> bool:
        return bool(self._store(HookType(hook_type)).get(hook_name(tag)))

    def get_hook_count(self, tag: HookTag, hook_type: HookType = HookType.FILTER) -> int:
        return len(self._store(HookType(hook_type)).get(hook_name(tag), []))

    def get_registered_hooks(self, hook_type: Optional[HookType] = None) -> List[str]:
        """List registered hook names as 'filter:name' / 'action:name'."""
        hooks: List[str] = []
        if hook_type is None or HookType(hook_type) == HookType.FILTER:
            hooks.extend(f"filter:{name}" for name in self._filters)
        if hook_type is None or HookType(hook_type) == HookType.ACTION:
            hooks.extend(f"action:{name}" for name in self._actions)
        return hooks

    def reset(self) -> None:
        """Remove every filter and action."""
        self._filters.clear()
        self._actions.clear()


@lru_cache
def get_hook_manager() -> HookManager:
    """Get the process-wide hook manager."""
    return HookManager(strict=get_settings().hooks_strict)
