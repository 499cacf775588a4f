"""Page parsing and page-state arithmetic for search results.

``PageState`` keeps the display convention of the original front end:
page 1 is shown as page 1, while any later requested page ``n`` is shown as
``n - 1``. The previous link is derived from that displayed page.
"""
from __future__ import annotations

import re
from dataclasses import dataclass

from .errors import PageParseError

# Nine digits keeps int() well inside its conversion limit.
_DIGITS_RE = re.compile(r"[0-9]{1,9}")


def parse_page(raw: str | None) -> int:
    """Turn the ``page`` query parameter into a positive integer.

    A missing or blank value means page 1. Anything other than one to nine
    plain ASCII digits with a value of at least 1 raises :class:`PageParseError`.
    """
    if raw is None or not raw.strip():
        return 1
    value = raw.strip()
    if not _DIGITS_RE.fullmatch(value):
        raise PageParseError(raw)
    page = int(value)
    if page < 1:
        raise PageParseError(raw)
    return page


@dataclass(frozen=True)
class PageState:
    requested_page: int
    page_size: int
    total_pages: int

    @property
    def is_last_page(self) -> bool:
        return self.requested_page >= self.total_pages

    @property
    def current_page(self) -> int:
        if self.requested_page == 1:
            return self.requested_page
        return self.requested_page - 1

    @property
    def previous_page(self) -> int:
        # 0 or negative near the start; callers decide whether to link it
        return self.current_page - 1

    @property
    def next_page_to_request(self) -> int:
        if self.is_last_page:
            return self.requested_page
        return self.requested_page + 1


def compute_page_state(requested_page: int, page_size: int, total_results: int) -> PageState:
    """Build the page state for ``requested_page`` out of ``total_results`` matches.

    ``requested_page`` and ``total_results`` are used as given, including zero
    and negative values. ``total_pages`` is the ceiling of
    ``total_results / page_size`` floored at 0.
    """
    if page_size <= 0:
        raise ValueError(f"page_size must be positive, got {page_size}")
    total_pages = max(0, -(-total_results // page_size))
    return PageState(requested_page=requested_page, page_size=page_size, total_pages=total_pages)
