from __future__ import annotations

from edu_console.core.selection import PAGE_ALL, PAGE_NONE, PAGE_SOME, SelectionTracker, keys_of


def test_toggle_adds_then_removes():
    sel = SelectionTracker().toggle(1).toggle(2)
    assert sel.selected_keys == [1, 2]

    sel = sel.toggle(1)
    assert sel.selected_keys == [2]


def test_operations_return_new_trackers():
    original = SelectionTracker([1])
    original.toggle(2)
    original.clear()

    assert original.selected_keys == [1]


def test_select_all_visible_is_union_with_page():
    sel = SelectionTracker([7]).select_all_visible([1, 2, 7])

    assert sel.selected_keys == [7, 1, 2]


def test_select_all_filtered_covers_every_page():
    sel = SelectionTracker().select_all_filtered(range(1, 26))

    assert len(sel) == 25


def test_selection_survives_page_changes():
    # selected on page 1, then the user moves to page 2
    sel = SelectionTracker().select_all_visible([1, 2, 3])

    assert sel.page_state([4, 5, 6]) == PAGE_NONE
    assert sel.page_state([1, 2, 3]) == PAGE_ALL
    assert 2 in sel


def test_page_state_some_and_empty_page():
    sel = SelectionTracker([1])

    assert sel.page_state([1, 2]) == PAGE_SOME
    assert sel.page_state([]) == PAGE_NONE


def test_deselect_visible_keeps_other_pages():
    sel = SelectionTracker([1, 2, 10]).deselect_visible([1, 2, 3])

    assert sel.selected_keys == [10]


def test_prune_drops_unknown_keys():
    sel = SelectionTracker([1, 2, 3]).prune([1, 3, 4])

    assert sel.selected_keys == [1, 3]


def test_clear_and_equality():
    assert SelectionTracker([1, 2]).clear() == SelectionTracker()
    assert SelectionTracker([1, 2]) == SelectionTracker([2, 1])


def test_selected_records_in_source_order():
    records = [{"id": "a"}, {"id": "b"}, {"id": "c"}]
    sel = SelectionTracker(["c", "a"])

    assert keys_of(sel.selected_records(records, "id"), "id") == ["a", "c"]
