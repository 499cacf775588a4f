"""Tests for page parsing and page-state arithmetic."""

import math

import pytest

from news_search.errors import PageParseError
from news_search.pagination import compute_page_state, parse_page


def test_first_page_of_many():
    """100 results at 20 per page, page 1: five pages, next is 2."""

    state = compute_page_state(1, 20, 100)

    assert state.total_pages == 5
    assert state.is_last_page is False
    assert state.current_page == 1
    assert state.next_page_to_request == 2


def test_last_page_does_not_advance():
    """Requesting the final page keeps the next page where it is."""

    state = compute_page_state(5, 20, 100)

    assert state.total_pages == 5
    assert state.is_last_page is True
    assert state.current_page == 4
    assert state.next_page_to_request == 5


def test_no_results_is_last_page():
    state = compute_page_state(1, 20, 0)

    assert state.total_pages == 0
    assert state.is_last_page is True
    assert state.next_page_to_request == 1


@pytest.mark.parametrize("total", [0, 1, 19, 20, 21, 99, 100, 101, 1234])
def test_total_pages_is_ceiling(total):
    state = compute_page_state(1, 20, total)

    assert state.total_pages == math.ceil(total / 20)
    assert (state.total_pages == 0) == (total == 0)


def test_partial_last_page_counts():
    """A short final page still counts as a page."""

    state = compute_page_state(3, 20, 41)

    assert state.total_pages == 3
    assert state.is_last_page is True


def test_current_and_previous_page_convention():
    """Page 1 is shown as 1; later pages are shown one lower."""

    assert compute_page_state(1, 20, 100).current_page == 1
    assert compute_page_state(2, 20, 100).current_page == 1
    assert compute_page_state(3, 20, 100).current_page == 2

    for requested in range(1, 8):
        state = compute_page_state(requested, 20, 100)
        assert state.previous_page == state.current_page - 1


def test_previous_page_reaches_zero_at_start():
    assert compute_page_state(1, 20, 100).previous_page == 0
    assert compute_page_state(2, 20, 100).previous_page == 0


def test_past_the_end_stays_put():
    state = compute_page_state(9, 20, 100)

    assert state.is_last_page is True
    assert state.next_page_to_request == 9


def test_zero_requested_page_is_not_coerced():
    state = compute_page_state(0, 20, 100)

    assert state.requested_page == 0
    assert state.is_last_page is False
    assert state.current_page == -1
    assert state.previous_page == -2
    assert state.next_page_to_request == 1


def test_negative_total_results_floor_at_zero_pages():
    state = compute_page_state(1, 20, -25)

    assert state.total_pages == 0
    assert state.is_last_page is True


def test_non_positive_page_size_rejected():
    with pytest.raises(ValueError):
        compute_page_state(1, 0, 100)


def test_page_state_is_deterministic():
    assert compute_page_state(4, 10, 95) == compute_page_state(4, 10, 95)


@pytest.mark.parametrize("raw", [None, "", "   "])
def test_parse_page_defaults_to_first(raw):
    assert parse_page(raw) == 1


@pytest.mark.parametrize("raw, expected", [("1", 1), ("7", 7), (" 12 ", 12)])
def test_parse_page_accepts_digits(raw, expected):
    assert parse_page(raw) == expected


@pytest.mark.parametrize("raw", ["abc", "0", "-1", "1.5", "+2", "2a", "١", "1234567890", "9" * 5000])
def test_parse_page_rejects_non_positive_integers(raw):
    with pytest.raises(PageParseError) as excinfo:
        parse_page(raw)

    assert excinfo.value.value == raw
    assert len(str(excinfo.value)) < 80
