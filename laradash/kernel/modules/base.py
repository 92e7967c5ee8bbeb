"""
Base Module Provider - Abstract interface for all modules.
"""

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, List, Optional

from pydantic import BaseModel

if TYPE_CHECKING:
    from laradash.engines.builder.builder_service import BuilderService


class ModuleInfo(BaseModel):
    """Listing metadata for a module."""

    name: str
    title: str
    description: str = ""
    icon: str = "lucide:box"
    version: str = "1.0.0"
    author: Optional[str] = None
    category: Optional[str] = None
    tags: List[str] = []
    priority: int = 0
    status: bool = False


class ModuleProvider(ABC):
    """
    Abstract base class for modules.

    A module contributes to the builder when enabled:
    - Block definitions (with their editor scripts)
    - Server-side render callbacks
    - Filters and actions
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Module identifier. Compared case-insensitively."""
        pass

    @property
    @abstractmethod
    def title(self) -> str:
        """Human readable module name."""
        pass

    @property
    def description(self) -> str:
        return ""

    @property
    def version(self) -> str:
        return "1.0.0"

    @property
    def icon(self) -> str:
        return "lucide:box"

    @property
    def tags(self) -> List[str]:
        return []

    @abstractmethod
    def register(self, builder: "BuilderService") -> None:
        """Contribute blocks, render callbacks and hooks."""
        pass

    def boot(self, builder: "BuilderService") -> None:
        """Runs after every enabled module has registered."""
        return None

    def info(self, status: bool = False) -> ModuleInfo:
        return ModuleInfo(
            name=self.name.strip().lower(),
            title=self.title,
            description=self.description,
            icon=self.icon,
            version=self.version,
            tags=list(self.tags),
            status=status,
        )
