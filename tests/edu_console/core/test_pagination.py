from __future__ import annotations

import pytest

from edu_console.core.exceptions import PaginationError
from edu_console.core.pagination import clamp_page, page_count, page_rows, slice_page


def test_slice_middle_page():
    page = slice_page(total=45, current_page=2, page_size=10)

    assert (page.start, page.end) == (11, 20)
    assert page.has_prev and page.has_next
    assert page.page_count == 5
    assert page.showing_text == "Showing 11-20 of 45"


def test_slice_last_partial_page():
    page = slice_page(total=45, current_page=5, page_size=10)

    assert (page.start, page.end) == (41, 45)
    assert page.has_prev and not page.has_next


def test_slice_clamps_out_of_range_page():
    assert slice_page(total=45, current_page=9, page_size=10).current_page == 5
    assert slice_page(total=45, current_page=0, page_size=10).current_page == 1


def test_slice_empty_result_set():
    page = slice_page(total=0, current_page=3, page_size=10)

    assert (page.start, page.end) == (0, 0)
    assert page.current_page == 1
    assert page.page_count == 0
    assert not page.has_next and not page.has_prev
    assert page.showing_text == "No data"
    assert page.page_text == "Page 1 of 1"
    assert page_rows([], page) == []


def test_page_rows_slices_sequence():
    rows = list(range(23))

    assert page_rows(rows, slice_page(23, 3, 10)) == [20, 21, 22]


def test_invalid_sizes_raise():
    with pytest.raises(PaginationError):
        page_count(10, 0)
    with pytest.raises(PaginationError):
        clamp_page(1, -1, 10)
