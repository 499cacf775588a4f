"""Exceptions raised by the news search pipeline."""
from __future__ import annotations


class NewsSearchError(Exception):
    """Base class for every error this package raises."""


class ConfigError(NewsSearchError):
    """Settings are missing or invalid; the process must not start."""


class PageParseError(NewsSearchError):
    """The caller-supplied page is not a positive integer."""

    def __init__(self, value: str) -> None:
        shown = value if len(value) <= 20 else value[:20] + "..."
        super().__init__(f"page must be a positive integer, got {shown!r}")
        self.value = value


class UpstreamError(NewsSearchError):
    """Fetching from the news API failed."""


class TransportError(UpstreamError):
    """The news API could not be reached, or did not answer within the timeout."""

    def __init__(self, message: str, *, timeout: bool = False) -> None:
        super().__init__(message)
        self.timeout = timeout


class UpstreamStatusError(UpstreamError):
    """The news API answered with a non-success status."""

    def __init__(self, status_code: int, body: str, code: str | None = None, message: str | None = None) -> None:
        detail = message or body[:200] or "empty body"
        super().__init__(f"news API returned {status_code}: {detail}")
        self.status_code = status_code
        self.body = body
        self.code = code
        self.message = message


class ParseError(UpstreamError):
    """The news API answered with a body that is not the expected JSON."""
