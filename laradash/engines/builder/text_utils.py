"""
Text helpers shared by block renderers and the placeholder renderer.
"""

import html
import re
import unicodedata
from typing import Any

TAG_PATTERN = re.compile(r"<[^>]*>")
WORD_PATTERN = re.compile(r"[A-Za-z'-]+")


def strip_tags(value: Any) -> str:
    if value is None:
        return ""
    return TAG_PATTERN.sub("", str(value))


def slugify(value: Any, separator: str = "-") -> str:
    """
    URL slug: ASCII-folded, lowercase, words joined by ``separator``.

    >>> slugify("Getting Started!")
    'getting-started'
    """
    text = unicodedata.normalize("NFKD", str(value or "")).encode("ascii", "ignore").decode("ascii")
    text = text.replace("@", f"{separator}at{separator}")
    text = re.sub(r"[^\w\s-]", "", text.lower()).replace("_", separator)
    text = re.sub(rf"[{re.escape(separator)}\s]+", separator, text)
    return text.strip(separator)


def word_count(content: str) -> int:
    """Number of alphabetic words in an HTML fragment."""
    text = html.unescape(strip_tags(content))
    text = re.sub(r"\s+", " ", text).strip()
    if not text:
        return 0
    return sum(1 for word in WORD_PATTERN.findall(text) if any(ch.isalpha() for ch in word))
