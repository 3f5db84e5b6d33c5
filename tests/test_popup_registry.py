import logging
import threading

import pytest

from topup_admin.popups.registry import PopupKind, PopupRegistry


@pytest.fixture
def fresh_registry():
    return PopupRegistry()


def test_everything_starts_closed(fresh_registry):
    assert set(fresh_registry.active_popups) == set(PopupKind)
    assert not any(fresh_registry.active_popups.values())
    assert dict(fresh_registry.popup_data) == {}


def test_open_sets_flag_and_payload(fresh_registry):
    fresh_registry.open(PopupKind.PRODUCT_DETAILS, {'product_id': 7})

    assert fresh_registry.is_open(PopupKind.PRODUCT_DETAILS)
    assert fresh_registry.get_data(PopupKind.PRODUCT_DETAILS) == {'product_id': 7}


def test_open_without_payload_gives_empty_dict(fresh_registry):
    fresh_registry.open('custom')

    assert fresh_registry.get_data(PopupKind.CUSTOM) == {}


def test_reopen_replaces_payload(fresh_registry):
    fresh_registry.open(PopupKind.CUSTOM, {'title': 'A', 'size': 'sm'})
    fresh_registry.open(PopupKind.CUSTOM, {'title': 'B'})

    assert fresh_registry.get_data(PopupKind.CUSTOM) == {'title': 'B'}


def test_payload_is_copied_on_open(fresh_registry):
    payload = {'product_id': 1}
    fresh_registry.open(PopupKind.CREATE_ORDER, payload)
    payload['product_id'] = 2

    assert fresh_registry.get_data(PopupKind.CREATE_ORDER) == {'product_id': 1}


def test_close_clears_payload(fresh_registry):
    fresh_registry.open(PopupKind.EDIT_ORDER, {'order_id': 3})
    fresh_registry.close(PopupKind.EDIT_ORDER)

    assert not fresh_registry.is_open(PopupKind.EDIT_ORDER)
    assert fresh_registry.get_data(PopupKind.EDIT_ORDER) is None


def test_close_can_retain_payload(fresh_registry):
    fresh_registry.open(PopupKind.EDIT_ORDER, {'order_id': 3})
    fresh_registry.close(PopupKind.EDIT_ORDER, retain_data=True)

    assert not fresh_registry.is_open(PopupKind.EDIT_ORDER)
    assert fresh_registry.get_data(PopupKind.EDIT_ORDER) == {'order_id': 3}


def test_close_of_closed_kind_is_harmless(fresh_registry):
    fresh_registry.close(PopupKind.CUSTOM)

    assert not fresh_registry.is_open(PopupKind.CUSTOM)


def test_update_merges_shallowly(fresh_registry):
    fresh_registry.open(PopupKind.CREATE_ORDER, {'product_id': 1, 'preselected_item_id': 0})
    fresh_registry.update_popup_data(PopupKind.CREATE_ORDER, {'preselected_item_id': 2, 'extra': True})

    assert fresh_registry.get_data(PopupKind.CREATE_ORDER) == {
        'product_id': 1, 'preselected_item_id': 2, 'extra': True,
    }


def test_update_on_closed_kind_is_ignored_with_warning(fresh_registry, caplog):
    with caplog.at_level(logging.WARNING, logger='topup_admin.popups.registry'):
        fresh_registry.update_popup_data(PopupKind.CUSTOM, {'title': 'late'})

    assert not fresh_registry.is_open(PopupKind.CUSTOM)
    assert fresh_registry.get_data(PopupKind.CUSTOM) is None
    assert 'closed popup custom' in caplog.text


def test_kinds_are_independent(fresh_registry):
    fresh_registry.open(PopupKind.CUSTOM, {'title': 'x'})
    fresh_registry.open(PopupKind.PRODUCT_DETAILS, {'product_id': 1})
    fresh_registry.close(PopupKind.CUSTOM)
    fresh_registry.update_popup_data(PopupKind.PRODUCT_DETAILS, {'product': {'name': 'P'}})

    assert fresh_registry.is_open(PopupKind.PRODUCT_DETAILS)
    assert not fresh_registry.is_open(PopupKind.CUSTOM)
    assert not fresh_registry.is_open(PopupKind.CREATE_ORDER)
    assert fresh_registry.get_data(PopupKind.PRODUCT_DETAILS) == {'product_id': 1, 'product': {'name': 'P'}}


def test_close_all(fresh_registry):
    for kind in PopupKind:
        fresh_registry.open(kind, {'kind': kind.value})
    fresh_registry.close_all()

    assert not any(fresh_registry.active_popups.values())
    assert dict(fresh_registry.popup_data) == {}


def test_open_kinds_follow_opening_order(fresh_registry):
    fresh_registry.open(PopupKind.CUSTOM)
    fresh_registry.open(PopupKind.EDIT_ORDER)
    fresh_registry.open(PopupKind.CUSTOM)

    assert fresh_registry.open_kinds() == [PopupKind.EDIT_ORDER, PopupKind.CUSTOM]


def test_unknown_kind_is_rejected(fresh_registry):
    with pytest.raises(ValueError):
        fresh_registry.open('confetti')
    with pytest.raises(ValueError):
        fresh_registry.close('confetti')


def test_read_surface_is_a_snapshot(fresh_registry):
    fresh_registry.open(PopupKind.CUSTOM, {'title': 'x'})
    snapshot = fresh_registry.popup_data

    with pytest.raises(TypeError):
        snapshot[PopupKind.CUSTOM] = {}
    snapshot[PopupKind.CUSTOM]['title'] = 'changed'
    assert fresh_registry.get_data(PopupKind.CUSTOM) == {'title': 'x'}


def test_subscribers_see_every_transition(fresh_registry):
    events = []

    def receiver(sender, kind, **kwargs):
        events.append((kind, sorted(kwargs)))

    fresh_registry.subscribe(receiver)
    fresh_registry.open(PopupKind.CUSTOM, {'title': 't'})
    fresh_registry.update_popup_data(PopupKind.CUSTOM, {'content': 'c'})
    fresh_registry.close(PopupKind.CUSTOM)
    fresh_registry.unsubscribe(receiver)
    fresh_registry.open(PopupKind.CUSTOM)

    assert events == [
        (PopupKind.CUSTOM, ['payload']),
        (PopupKind.CUSTOM, ['payload']),
        (PopupKind.CUSTOM, ['retained']),
    ]


def test_subscribers_only_hear_their_registry(fresh_registry):
    other = PopupRegistry()
    heard = []

    def receiver(sender, **kwargs):
        heard.append(sender)

    fresh_registry.subscribe(receiver)
    other.open(PopupKind.CUSTOM)

    assert heard == []


def test_take_returns_payload_and_closes(fresh_registry):
    fresh_registry.open(PopupKind.DELETE_CONFIRMATION, {'id': 7, 'entity_type': 'product'})

    assert fresh_registry.take(PopupKind.DELETE_CONFIRMATION) == {'id': 7, 'entity_type': 'product'}
    assert not fresh_registry.is_open(PopupKind.DELETE_CONFIRMATION)
    assert fresh_registry.get_data(PopupKind.DELETE_CONFIRMATION) is None
    assert fresh_registry.take(PopupKind.DELETE_CONFIRMATION) is None


def test_take_leaves_rejected_payload_open(fresh_registry):
    fresh_registry.open(PopupKind.DELETE_CONFIRMATION, {'id': 3, 'entity_type': 'order'})

    taken = fresh_registry.take(PopupKind.DELETE_CONFIRMATION, where=lambda data: data['entity_type'] == 'product')

    assert taken is None
    assert fresh_registry.get_data(PopupKind.DELETE_CONFIRMATION) == {'id': 3, 'entity_type': 'order'}


def test_take_hands_payload_out_once_across_threads(fresh_registry):
    fresh_registry.open(PopupKind.DELETE_CONFIRMATION, {'id': 1})
    results = []
    barrier = threading.Barrier(8)

    def worker():
        barrier.wait()
        results.append(fresh_registry.take(PopupKind.DELETE_CONFIRMATION))

    threads = [threading.Thread(target=worker) for _ in range(8)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert [r for r in results if r is not None] == [{'id': 1}]
