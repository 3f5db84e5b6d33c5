from conftest import confirm_delete
from topup_admin.popups.registry import PopupKind
from topup_admin.popups.sessions import PopupRegistryStore

PRODUCT = {'id': 7, 'name': 'PUBG Mobile UC', 'replenishment': [{'price': 99, 'amount': 60, 'type': 'UC'}]}


def test_store_gives_each_session_its_own_registry():
    store = PopupRegistryStore()

    first = store.get('a')
    first.open(PopupKind.CUSTOM, {'title': 'only for a'})

    assert store.get('a') is first
    assert not store.get('b').is_open(PopupKind.CUSTOM)
    assert store.host('a').mounted_popups()[0].payload == {'title': 'only for a'}
    assert store.host('c') is None


def test_store_drops_least_recently_used_session():
    store = PopupRegistryStore(max_sessions=2)
    store.get('a')
    store.get('b')
    store.get('a')

    store.get('c')

    assert len(store) == 2
    assert store.host('b') is None
    assert store.host('a') is not None


def test_discard_closes_the_sessions_popups():
    store = PopupRegistryStore()
    registry = store.get('a')
    registry.open(PopupKind.EDIT_ORDER, {'order_id': 1})

    store.discard('a')

    assert registry.open_kinds() == []
    assert store.host('a') is None


def test_dialog_is_not_shown_to_another_admin(admin_client, second_admin_client, backend, registry):
    backend.add('GET', '/product', body={'data': [PRODUCT], 'meta': {'totalItems': 1, 'totalPages': 1}})

    admin_client.post('/products/7/delete', data={'name': 'PUBG Mobile UC'})
    assert registry.is_open(PopupKind.DELETE_CONFIRMATION)

    html = second_admin_client.get('/products/').get_data(as_text=True)

    assert 'popups/deleteConfirmation/confirm' not in html


def test_another_admin_cannot_confirm_a_foreign_dialog(admin_client, second_admin_client, backend, registry):
    backend.add('DELETE', '/product/7', status=204)
    admin_client.post('/products/7/delete', data={'name': 'PUBG Mobile UC'})

    confirm_delete(second_admin_client, 'product', 7)

    assert backend.calls_to('DELETE', '/product/7') == []
    assert registry.is_open(PopupKind.DELETE_CONFIRMATION)


def test_each_admin_deletes_what_they_confirmed(admin_client, second_admin_client, backend, registry, second_registry):
    backend.add('DELETE', '/product/7', status=204)
    backend.add('DELETE', '/order/3', status=204)

    admin_client.post('/products/7/delete', data={'name': 'PUBG Mobile UC'})
    second_admin_client.post('/orders/3/delete')
    confirm_delete(admin_client, 'product', 7)

    assert len(backend.calls_to('DELETE', '/product/7')) == 1
    assert backend.calls_to('DELETE', '/order/3') == []
    assert second_registry.get_data(PopupKind.DELETE_CONFIRMATION)['id'] == '3'


def test_logout_keeps_other_admins_popups(admin_client, second_admin_client, registry, second_registry):
    second_registry.open(PopupKind.CUSTOM, {'title': 'working on it'})
    registry.open(PopupKind.CUSTOM, {'title': 'about to leave'})

    admin_client.post('/auth/logout')

    assert registry.open_kinds() == []
    assert second_registry.get_data(PopupKind.CUSTOM) == {'title': 'working on it'}
