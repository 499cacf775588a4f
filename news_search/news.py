"""NewsAPI client: one blocking HTTP call per search page.

The client is synchronous on top of ``requests``. Async callers wrap
:meth:`NewsClient.fetch` with ``asyncio.to_thread``.
"""
from __future__ import annotations

import logging
from time import perf_counter
from typing import Any, Dict

import requests
from pydantic import ValidationError

from .config import Settings
from .errors import PageParseError, ParseError, TransportError, UpstreamStatusError
from .models import SearchResult
from .pagination import parse_page

logger = logging.getLogger(__name__)

API_KEY_HEADER = "X-Api-Key"
USER_AGENT = "news-search/0.1"


def _error_details(response: requests.Response) -> tuple[str | None, str | None]:
    """Pull NewsAPI's ``code``/``message`` out of an error body, if it has them."""
    try:
        payload = response.json()
    except ValueError:
        return None, None
    if not isinstance(payload, dict):
        return None, None
    return payload.get("code"), payload.get("message")


class NewsClient:
    def __init__(self, settings: Settings, session: requests.Session | None = None) -> None:
        self._api_key = settings.api_key
        self.page_size = settings.page_size
        self.timeout = settings.request_timeout
        self.base_url = settings.news_api_url
        self.language = settings.language
        self.sort_by = settings.sort_by
        # An injected session is the caller's to share; otherwise every fetch
        # goes through requests.get, which opens and closes its own session.
        self._session = session

    def build_params(self, query: str, page: int) -> Dict[str, Any]:
        return {
            "q": query,
            "page": page,
            "pageSize": self.page_size,
            "language": self.language,
            "sortBy": self.sort_by,
        }

    def fetch(self, query: str, page: int | str) -> SearchResult:
        """Fetch one page of articles matching ``query``.

        Raises :class:`PageParseError` for a page that is not a positive
        integer (before any request is made), :class:`TransportError` when
        the API cannot be reached in time, :class:`UpstreamStatusError` for a
        non-2xx answer and :class:`ParseError` for a body that is not the
        expected JSON.
        """
        if isinstance(page, str):
            page = parse_page(page)
        elif isinstance(page, bool) or page < 1:
            raise PageParseError(str(page))
        params = self.build_params(query, page)
        headers = {API_KEY_HEADER: self._api_key, "User-Agent": USER_AGENT}
        logger.debug("news API request url=%s params=%s", self.base_url, params)

        started = perf_counter()
        try:
            get = self._session.get if self._session is not None else requests.get
            response = get(self.base_url, params=params, headers=headers, timeout=self.timeout)
        except requests.Timeout as exc:
            raise TransportError(f"news API did not answer within {self.timeout}s", timeout=True) from exc
        except requests.RequestException as exc:
            raise TransportError(f"news API request failed: {exc.__class__.__name__}") from exc
        took_ms = (perf_counter() - started) * 1000

        if not 200 <= response.status_code < 300:
            code, message = _error_details(response)
            logger.info(
                "news API error q=%r page=%s status=%s code=%s took=%.2fms",
                query,
                page,
                response.status_code,
                code,
                took_ms,
            )
            raise UpstreamStatusError(response.status_code, response.text, code=code, message=message)

        try:
            payload = response.json()
        except ValueError as exc:
            raise ParseError("news API response is not valid JSON") from exc
        try:
            result = SearchResult.model_validate(payload)
        except ValidationError as exc:
            raise ParseError(f"unexpected news API response: {exc.error_count()} invalid field(s)") from exc

        logger.info(
            "search q=%r page=%s total=%s articles=%s took=%.2fms",
            query,
            page,
            result.total_results,
            len(result.articles),
            took_ms,
        )
        return result
