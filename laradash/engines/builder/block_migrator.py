"""
Block Migrator - upgrades stored block props to the current block version.

Each block definition carries a ``version`` and a list of ``BlockMigration``
steps. A block saved at an older version is walked forward one step at a
time until it reaches the current version or no further step exists.
"""

import copy
from typing import Any, Callable, Dict, List, Optional

from packaging.version import InvalidVersion, Version

from laradash.engines.builder.block_registry import BlockRegistry
from laradash.kernel.hooks import BuilderActionHook
from laradash.logging_config import get_logger

logger = get_logger(__name__)

DEFAULT_VERSION = "1.0.0"

MigrateFn = Callable[[Dict[str, Any]], Dict[str, Any]]


def parse_version(value: Optional[str]) -> Optional[Version]:
    try:
        return Version(str(value or DEFAULT_VERSION))
    except InvalidVersion:
        return None


class BlockMigrator:
    """
    Migrates block props between versions.

    Usage:
        migrator = BlockMigrator(registry)
        blocks = migrator.migrate_blocks(design["blocks"])
    """

    def __init__(self, registry: BlockRegistry):
        self.registry = registry
        self._path_cache: Dict[str, List[MigrateFn]] = {}
        # A re-registered or removed type may carry different migrations
        registry.hooks.add_action(BuilderActionHook.BLOCK_REGISTERED, self._forget_paths)
        registry.hooks.add_action(BuilderActionHook.BLOCK_UNREGISTERED, self._forget_paths)

    def get_current_version(self, block_type: str) -> str:
        definition = self.registry.get(block_type)
        return definition.version if definition else DEFAULT_VERSION

    def needs_migration(self, block: Dict[str, Any]) -> bool:
        block_type = block.get("type")
        if not block_type:
            return False

        stored = parse_version(block.get("version"))
        current = parse_version(self.get_current_version(block_type))
        if stored is None or current is None:
            return False
        return stored < current

    def get_migration_path(self, block_type: str, from_version: str, to_version: str) -> List[MigrateFn]:
        """Ordered migration steps from one version to another. Cached per (type, from, to)."""
        cache_key = f"{block_type}:{from_version}:{to_version}"
        if cache_key in self._path_cache:
            return self._path_cache[cache_key]

        definition = self.registry.get(block_type)
        target = parse_version(to_version)
        current = parse_version(from_version)
        steps: List[MigrateFn] = []

        if definition is not None and target is not None and current is not None:
            available = sorted(
                (m for m in definition.migrations if parse_version(m.from_version) is not None),
                key=lambda m: parse_version(m.from_version),
            )
            used = set()
            while current < target:
                step = next(
                    (
                        i for i, m in enumerate(available)
                        if i not in used and parse_version(m.from_version) == current
                    ),
                    None,
                )
                next_version = parse_version(available[step].to_version) if step is not None else None
                if step is None or next_version is None:
                    break
                used.add(step)
                steps.append(available[step].migrate)
                current = next_version

        self._path_cache[cache_key] = steps
        return steps

    def migrate_block(self, block: Dict[str, Any]) -> Dict[str, Any]:
        """
        Migrate a single block.

        Returns the block untouched when it is already current, otherwise a
        new dict with migrated props and the current version.
        """
        if not self.needs_migration(block):
            return block

        block_type = block["type"]
        stored = str(block.get("version") or DEFAULT_VERSION)
        current = self.get_current_version(block_type)

        props = copy.deepcopy(block.get("props") or {})
        for migrate in self.get_migration_path(block_type, stored, current):
            try:
                props = migrate(props)
            except Exception as e:
                logger.warning(
                    "Block migration failed",
                    extra={"block_type": block_type, "error": str(e)},
                )

        return {**block, "version": current, "props": props}

    def migrate_blocks(self, blocks: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
        """Migrate a block list, including blocks nested in column children."""
        migrated = []
        for block in blocks:
            block = self.migrate_block(block)
            children = (block.get("props") or {}).get("children")
            if isinstance(children, list):
                block = {
                    **block,
                    "props": {
                        **block["props"],
                        "children": [
                            self.migrate_blocks(column) if isinstance(column, list) else column
                            for column in children
                        ],
                    },
                }
            migrated.append(block)
        return migrated

    def get_blocks_needing_migration(self, blocks: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
        pending: List[Dict[str, Any]] = []
        for block in blocks:
            if self.needs_migration(block):
                pending.append({
                    "type": block["type"],
                    "id": block.get("id"),
                    "stored_version": str(block.get("version") or DEFAULT_VERSION),
                    "current_version": self.get_current_version(block["type"]),
                })
            children = (block.get("props") or {}).get("children")
            if isinstance(children, list):
                for column in children:
                    if isinstance(column, list):
                        pending.extend(self.get_blocks_needing_migration(column))
        return pending

    def clear_cache(self) -> None:
        self._path_cache.clear()

    def _forget_paths(self, *_args: Any) -> None:
        self.clear_cache()
