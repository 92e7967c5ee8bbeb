"""
Builder render contexts.
"""

from enum import Enum
from typing import Optional, Union

ALL_CONTEXTS = "*"


class BuilderContext(str, Enum):
    """Where builder output ends up."""
    EMAIL = "email"        # Table-based, inline styles
    PAGE = "page"          # Modern HTML5 with classes
    CAMPAIGN = "campaign"  # Email output plus personalization

    @classmethod
    def try_from(cls, value: str) -> Optional["BuilderContext"]:
        try:
            return cls(value)
        except ValueError:
            return None


def context_value(context: Union[str, "BuilderContext"]) -> str:
    """Plain string for a context given as enum or string."""
    return context.value if isinstance(context, BuilderContext) else context
