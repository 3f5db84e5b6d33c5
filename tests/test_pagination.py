import pytest
from werkzeug.datastructures import MultiDict

from topup_admin.utils.pagination import ELLIPSIS, PageState, compute_page_window, parse_page_args


@pytest.mark.parametrize('current, total, expected', [
    (1, 10, (1, 2, 3, 4, ELLIPSIS, 10)),
    (10, 10, (1, ELLIPSIS, 7, 8, 9, 10)),
    (5, 10, (1, ELLIPSIS, 4, 5, 6, ELLIPSIS, 10)),
    (3, 10, (1, 2, 3, 4, ELLIPSIS, 10)),
    (8, 10, (1, ELLIPSIS, 7, 8, 9, 10)),
    (1, 1, (1,)),
    (3, 5, (1, 2, 3, 4, 5)),
    (4, 0, ()),
])
def test_known_windows(current, total, expected):
    assert compute_page_window(current, total) == expected


def test_out_of_range_current_page_is_clamped():
    assert compute_page_window(0, 10) == compute_page_window(1, 10)
    assert compute_page_window(-3, 10) == compute_page_window(1, 10)
    assert compute_page_window(99, 10) == compute_page_window(10, 10)


def test_negative_total_gives_empty_window():
    assert compute_page_window(1, -1) == ()


def test_wider_window():
    assert compute_page_window(10, 20, max_visible=7) == (1, ELLIPSIS, 8, 9, 10, 11, 12, ELLIPSIS, 20)


def test_max_visible_below_three_is_rejected():
    with pytest.raises(ValueError):
        compute_page_window(1, 10, max_visible=2)


@pytest.mark.parametrize('max_visible', [3, 4, 5, 6, 7])
def test_window_invariants(max_visible):
    for total in range(1, 40):
        for current in range(-1, total + 3):
            window = compute_page_window(current, total, max_visible)
            numbers = [entry for entry in window if entry != ELLIPSIS]
            clamped = min(max(current, 1), total)

            assert window[0] == 1
            assert window[-1] == total
            assert clamped in numbers
            assert numbers == sorted(set(numbers))
            assert all(1 <= n <= total for n in numbers)
            assert len(window) <= max_visible + 2
            for left, right in zip(window, window[1:]):
                assert not (left == ELLIPSIS and right == ELLIPSIS)


def test_page_state_summary_and_neighbours():
    state = PageState.build(page=2, per_page=25, total_items=60)

    assert state.total_pages == 3
    assert (state.start_item, state.end_item) == (26, 50)
    assert state.has_previous and state.has_next
    assert (state.previous_page, state.next_page) == (1, 3)
    assert state.should_render
    assert not state.show_jump


def test_page_state_single_page_renders_nothing():
    state = PageState.build(page=1, per_page=25, total_items=10)

    assert state.total_pages == 1
    assert not state.should_render
    assert state.window == (1,)


def test_page_state_empty():
    state = PageState.build(page=3, per_page=25, total_items=0)

    assert state.page == 1
    assert state.total_pages == 0
    assert (state.start_item, state.end_item) == (0, 0)
    assert state.window == ()


def test_page_state_clamps_page_and_offers_jump_for_long_lists():
    state = PageState.build(page=50, per_page=10, total_items=150)

    assert state.page == 15
    assert state.show_jump
    assert not state.has_next


def test_page_state_from_items_slices_the_list():
    state, chunk = PageState.from_items(list(range(1, 61)), page=3, per_page=25)

    assert chunk == list(range(51, 61))
    assert state.end_item == 60


def test_parse_page_args_defaults_and_fallbacks(app):
    assert parse_page_args(MultiDict()) == (1, 25)
    assert parse_page_args(MultiDict({'page': '4', 'limit': '100'})) == (4, 100)
    assert parse_page_args(MultiDict({'page': 'abc', 'limit': '7'})) == (1, 25)
    assert parse_page_args(MultiDict({'page': '-2'})) == (1, 25)


def test_configured_max_visible_is_used(app):
    app.config['PAGINATION_MAX_VISIBLE'] = 7
    state = PageState.build(page=10, per_page=10, total_items=200)

    assert len(state.window) == 9
