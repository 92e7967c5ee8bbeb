"""Unit tests for markdown conversion and remote fetching."""

import httpx
import pytest

from laradash.engines.builder.markdown_service import MarkdownFetchService, cache_key_for, is_valid_url

README_URL = "https://github.com/acme/site/blob/main/README.md"
RAW_README_URL = "https://raw.githubusercontent.com/acme/site/main/README.md"


class TestConversion:
    """Tests for inline markdown conversion."""

    def test_convert(self, markdown_service: MarkdownFetchService):
        """Tables and strikethrough are enabled on top of CommonMark."""
        result = markdown_service.convert_markdown("| a |\n|---|\n| 1 |\n\n~~old~~")
        assert result.success
        assert "<table>" in result.html
        assert "<s>old</s>" in result.html

    def test_empty_content(self, markdown_service: MarkdownFetchService):
        """Blank markdown fails with Empty content."""
        result = markdown_service.convert_markdown("  \n")
        assert not result.success
        assert result.error == "Empty content"

    def test_raw_html_not_passed_through(self, markdown_service: MarkdownFetchService):
        """Inline HTML and script links never reach the output as markup."""
        html = markdown_service.convert_to_html('<script>alert(1)</script>\n\n[x](javascript:alert(1))')
        assert "<script>" not in html
        assert 'href="javascript' not in html


class TestRawUrls:
    """Tests for repository URL rewriting."""

    @pytest.mark.parametrize(
        "url,expected",
        [
            (README_URL, RAW_README_URL),
            ("https://raw.githubusercontent.com/acme/site/refs/heads/main/README.md", RAW_README_URL),
            (
                "https://gitlab.com/acme/docs/site/-/blob/main/README.md",
                "https://gitlab.com/acme/docs/site/-/raw/main/README.md",
            ),
            (
                "https://bitbucket.org/acme/site/src/main/README.md",
                "https://bitbucket.org/acme/site/raw/main/README.md",
            ),
            ("https://example.com/docs/README.md", "https://example.com/docs/README.md"),
        ],
    )
    def test_to_raw_url(self, markdown_service: MarkdownFetchService, url, expected):
        """View URLs become raw URLs and anything else passes through."""
        assert markdown_service.to_raw_url(url) == expected

    def test_supported_sources(self, markdown_service: MarkdownFetchService):
        """A .md path or a known repository host is a supported source."""
        assert markdown_service.is_supported_source("https://example.com/notes.MD")
        assert markdown_service.is_supported_source("https://gist.github.com/acme/abc123")
        assert not markdown_service.is_supported_source("https://example.com/page")

    def test_is_valid_url(self):
        """Only absolute http(s) URLs are valid."""
        assert is_valid_url("https://example.com/a.md")
        assert not is_valid_url("ftp://example.com/a.md")
        assert not is_valid_url("not a url")


class TestFetch:
    """Tests for fetch_and_convert."""

    def test_fetch_and_convert(self, markdown_service: MarkdownFetchService):
        """The raw URL is fetched and rendered."""
        result = markdown_service.fetch_and_convert(README_URL)
        assert result.success
        assert result.cached is False
        assert result.source_url == RAW_README_URL
        assert "<h1>Project</h1>" in result.html
        assert "<strong>bold</strong>" in result.html
        assert result.markdown.startswith("# Project")

    def test_second_fetch_is_cached(self, markdown_service: MarkdownFetchService):
        """A repeated fetch is served from the cache."""
        markdown_service.fetch_and_convert(README_URL)
        result = markdown_service.fetch_and_convert(README_URL)
        assert result.cached is True
        assert "<h1>Project</h1>" in result.html

    def test_cache_bypass_and_expiry(self, markdown_service: MarkdownFetchService):
        """use_cache=False and a zero TTL both force a fresh fetch."""
        markdown_service.fetch_and_convert(README_URL, use_cache=False)
        assert markdown_service.fetch_and_convert(README_URL).cached is False

        markdown_service.clear_cache()
        markdown_service.fetch_and_convert(README_URL, cache_ttl=0)
        assert markdown_service.fetch_and_convert(README_URL).cached is False

    def test_clear_cache_single_url(self, markdown_service: MarkdownFetchService):
        """Clearing one URL drops the entry stored under its raw URL."""
        markdown_service.fetch_and_convert(README_URL)
        markdown_service.clear_cache(README_URL)
        assert cache_key_for(RAW_README_URL) not in markdown_service._cache

    def test_invalid_url(self, markdown_service: MarkdownFetchService):
        """A malformed URL fails without a request."""
        result = markdown_service.fetch_and_convert("not a url")
        assert not result.success
        assert result.error == "Invalid URL format"

    def test_http_error_status(self, markdown_service: MarkdownFetchService):
        """A non-2xx response reports its status code."""
        result = markdown_service.fetch_and_convert("https://example.com/missing.md")
        assert result.error == "Failed to fetch content: HTTP 404"

    def test_empty_body(self, markdown_service: MarkdownFetchService):
        """A whitespace-only body is reported as empty."""
        result = markdown_service.fetch_and_convert("https://example.com/empty.md")
        assert result.error == "Empty content received"

    def test_transport_failure(self, settings):
        """Connection errors are returned, not raised."""

        def refuse(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        service = MarkdownFetchService(settings, transport=httpx.MockTransport(refuse))
        result = service.fetch_and_convert(README_URL)
        assert not result.success
        assert result.error == "Failed to fetch content: connection refused"
