"""Search pipeline shared by the web app and the CLI."""
from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from typing import Protocol

from .models import Article, SearchRequest, SearchResult
from .pagination import PageState, compute_page_state

logger = logging.getLogger(__name__)


class ArticleFetcher(Protocol):
    page_size: int

    def fetch(self, query: str, page: int | str) -> SearchResult: ...


@dataclass(frozen=True)
class SearchPage:
    """Everything the results template needs for one rendered page."""

    query: str
    result: SearchResult
    page_state: PageState

    @property
    def articles(self) -> tuple[Article, ...]:
        return self.result.articles

    @property
    def total_results(self) -> int:
        return self.result.total_results

    @property
    def total_pages(self) -> int:
        return self.page_state.total_pages

    @property
    def is_last_page(self) -> bool:
        return self.page_state.is_last_page

    @property
    def current_page(self) -> int:
        return self.page_state.current_page

    @property
    def previous_page(self) -> int:
        return self.page_state.previous_page

    @property
    def next_page(self) -> int:
        return self.page_state.next_page_to_request

    @property
    def has_previous_page(self) -> bool:
        return self.previous_page >= 1


async def search_news(client: ArticleFetcher, query: str | None, raw_page: str | None) -> SearchPage:
    # Page validation happens before the upstream call; every failure below
    # propagates so nothing is rendered from a partial result.
    request = SearchRequest.from_params(query, raw_page)
    result = await asyncio.to_thread(client.fetch, request.query, request.page)
    page_state = compute_page_state(request.page, client.page_size, result.total_results)
    logger.debug(
        "page state q=%r requested=%s total_pages=%s last=%s",
        request.query,
        page_state.requested_page,
        page_state.total_pages,
        page_state.is_last_page,
    )
    return SearchPage(query=request.query, result=result, page_state=page_state)
