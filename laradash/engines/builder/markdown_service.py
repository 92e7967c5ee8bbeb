"""
Markdown Fetch Service - markdown to HTML, from inline content or a remote file.

Conversion is CommonMark plus tables and strikethrough, with raw HTML
disabled. The HTML is sanitised afterwards so unsafe link schemes never
reach the page.

Remote files are fetched over HTTP. Repository "view" URLs (GitHub, GitLab,
Bitbucket) are rewritten to their raw equivalents first. Results are cached
in-process per raw URL.
"""

import hashlib
import re
from datetime import datetime, timedelta
from typing import Dict, Optional, Tuple
from urllib.parse import urlparse

import bleach
import httpx
from markdown_it import MarkdownIt
from pydantic import BaseModel

from laradash.config import Settings, get_settings
from laradash.logging_config import get_logger

logger = get_logger(__name__)

ACCEPT_HEADER = "text/plain, text/markdown, */*"

# Everything markdown-it can emit with tables and strikethrough enabled
ALLOWED_TAGS = [
    "p", "br", "hr", "strong", "em", "s", "del", "h1", "h2", "h3", "h4", "h5", "h6",
    "ul", "ol", "li", "a", "img", "blockquote", "code", "pre",
    "table", "thead", "tbody", "tr", "th", "td",
]

ALLOWED_ATTRIBUTES = {
    "a": ["href", "title"],
    "img": ["src", "alt", "title"],
    "code": ["class"],
    "ol": ["start"],
}

SUPPORTED_HOSTS = (
    "github.com",
    "raw.githubusercontent.com",
    "gitlab.com",
    "bitbucket.org",
    "gist.github.com",
    "gist.githubusercontent.com",
)

RAW_URL_REWRITES = [
    (
        re.compile(r"^https?://github\.com/([^/]+)/([^/]+)/blob/([^/]+)/(.+)$"),
        "https://raw.githubusercontent.com/{0}/{1}/{2}/{3}",
    ),
    (
        re.compile(r"^https?://raw\.githubusercontent\.com/([^/]+)/([^/]+)/refs/heads/([^/]+)/(.+)$"),
        "https://raw.githubusercontent.com/{0}/{1}/{2}/{3}",
    ),
    (
        re.compile(r"^https?://gitlab\.com/(.+)/-/blob/(.+)$"),
        "https://gitlab.com/{0}/-/raw/{1}",
    ),
    (
        re.compile(r"^https?://bitbucket\.org/([^/]+)/([^/]+)/src/([^/]+)/(.+)$"),
        "https://bitbucket.org/{0}/{1}/raw/{2}/{3}",
    ),
]


class MarkdownResult(BaseModel):
    """Outcome of a conversion or fetch. Never raised, always returned."""

    success: bool
    html: Optional[str] = None
    markdown: Optional[str] = None
    error: Optional[str] = None
    cached: bool = False
    source_url: Optional[str] = None


def cache_key_for(raw_url: str) -> str:
    return "markdown_fetch:" + hashlib.md5(raw_url.encode("utf-8")).hexdigest()


def is_valid_url(url: str) -> bool:
    parsed = urlparse(url)
    return parsed.scheme in ("http", "https") and bool(parsed.netloc)


class MarkdownFetchService:
    """
    Converts markdown and fetches remote markdown files.

    Usage:
        service = MarkdownFetchService()
        result = service.fetch_and_convert("https://github.com/org/repo/blob/main/README.md")
        if result.success:
            html = result.html
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        self.settings = settings or get_settings()
        self._transport = transport
        self._cache: Dict[str, Tuple[datetime, Dict[str, str]]] = {}
        self._md = MarkdownIt("commonmark", {"html": False}).enable(["table", "strikethrough"])

    # ------------------------------------------------------------------
    # Conversion
    # ------------------------------------------------------------------

    def convert_to_html(self, markdown: str) -> str:
        return bleach.clean(
            self._md.render(markdown),
            tags=ALLOWED_TAGS,
            attributes=ALLOWED_ATTRIBUTES,
            strip=True,
        )

    def convert_markdown(self, markdown: str) -> MarkdownResult:
        if not markdown or not markdown.strip():
            return MarkdownResult(success=False, error="Empty content")
        try:
            return MarkdownResult(success=True, html=self.convert_to_html(markdown))
        except Exception as e:
            logger.warning("Markdown conversion failed", extra={"error": str(e)})
            return MarkdownResult(success=False, error=f"Failed to convert markdown: {e}")

    # ------------------------------------------------------------------
    # Remote sources
    # ------------------------------------------------------------------

    def to_raw_url(self, url: str) -> str:
        """Rewrite a repository view URL to the raw file URL. Other URLs pass through."""
        for pattern, template in RAW_URL_REWRITES:
            match = pattern.match(url)
            if match:
                return template.format(*match.groups())
        return url

    def is_supported_source(self, url: str) -> bool:
        parsed = urlparse(url)
        if parsed.path.lower().endswith(".md"):
            return True
        return parsed.hostname in SUPPORTED_HOSTS

    def fetch_and_convert(
        self,
        url: str,
        use_cache: bool = True,
        cache_ttl: Optional[int] = None,
    ) -> MarkdownResult:
        if not is_valid_url(url):
            return MarkdownResult(success=False, error="Invalid URL format")

        raw_url = self.to_raw_url(url)
        cache_key = cache_key_for(raw_url)

        if use_cache:
            cached = self._get_cached(cache_key)
            if cached is not None:
                return MarkdownResult(
                    success=True,
                    html=cached["html"],
                    markdown=cached["markdown"],
                    cached=True,
                    source_url=raw_url,
                )

        try:
            response = self._get(raw_url)
        except httpx.HTTPError as e:
            logger.warning("Markdown fetch failed", extra={"url": raw_url, "error": str(e)})
            return MarkdownResult(success=False, error=f"Failed to fetch content: {e}")

        if not response.is_success:
            return MarkdownResult(
                success=False,
                error=f"Failed to fetch content: HTTP {response.status_code}",
            )

        markdown = response.text
        if not markdown.strip():
            return MarkdownResult(success=False, error="Empty content received")

        html = self.convert_to_html(markdown)
        if use_cache:
            ttl = cache_ttl if cache_ttl is not None else self.settings.markdown_cache_ttl
            self._cache[cache_key] = (
                datetime.now() + timedelta(seconds=ttl),
                {"html": html, "markdown": markdown},
            )

        return MarkdownResult(
            success=True,
            html=html,
            markdown=markdown,
            cached=False,
            source_url=raw_url,
        )

    def clear_cache(self, url: Optional[str] = None) -> None:
        """Forget one URL's cached result, or everything when url is None."""
        if url is None:
            self._cache.clear()
            return
        self._cache.pop(cache_key_for(self.to_raw_url(url)), None)

    def _get_cached(self, cache_key: str) -> Optional[Dict[str, str]]:
        entry = self._cache.get(cache_key)
        if entry is None:
            return None
        expires_at, payload = entry
        if datetime.now() >= expires_at:
            del self._cache[cache_key]
            return None
        return payload

    def _get(self, url: str) -> httpx.Response:
        headers = {
            "Accept": ACCEPT_HEADER,
            "User-Agent": self.settings.markdown_user_agent,
        }
        with httpx.Client(
            transport=self._transport,
            timeout=self.settings.markdown_fetch_timeout,
            follow_redirects=True,
        ) as client:
            return client.get(url, headers=headers)
