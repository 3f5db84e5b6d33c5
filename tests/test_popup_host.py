import pytest

from conftest import confirm_delete, operator_request
from topup_admin.core.error_handlers import ApiError
from topup_admin.core.signals import admin_logged_out, entity_deleted
from topup_admin.popups.actions import request_confirmation, show_message
from topup_admin.popups.host import PopupHost
from topup_admin.popups.registry import PopupKind, PopupRegistry


def test_host_mounts_and_unmounts_with_the_registry():
    registry = PopupRegistry()
    host = PopupHost(registry)

    registry.open(PopupKind.PRODUCT_DETAILS, {'product_id': 1})
    registry.open(PopupKind.CUSTOM, {'title': 'Hi'})
    assert [p.kind for p in host.mounted_popups()] == [PopupKind.PRODUCT_DETAILS, PopupKind.CUSTOM]
    assert host.mounted_popups()[0].template == 'popups/product_details.html'

    registry.update_popup_data(PopupKind.CUSTOM, {'content': 'there'})
    assert host.mounted_popups()[1].payload == {'title': 'Hi', 'content': 'there'}

    registry.close(PopupKind.PRODUCT_DETAILS)
    assert [p.kind for p in host.mounted_popups()] == [PopupKind.CUSTOM]

    registry.take(PopupKind.CUSTOM)
    assert host.mounted_popups() == []


def test_host_picks_up_popups_opened_before_it_existed():
    registry = PopupRegistry()
    registry.open(PopupKind.EDIT_ORDER, {'order_id': 9})

    host = PopupHost(registry)

    assert host.mounted_popups()[0].payload == {'order_id': 9}


def test_mounted_popup_is_rendered_in_layout(app, admin_client, backend):
    backend.add('GET', '/order/analytics', body={})
    backend.add('GET', '/user', body={'data': [], 'meta': {'totalItems': 0}})
    backend.add('GET', '/product', body={'data': [], 'meta': {'totalItems': 0}})
    with operator_request(app):
        show_message('Heads up', 'Backend maintenance at night', size='lg')

    html = admin_client.get('/').get_data(as_text=True)

    assert 'Backend maintenance at night' in html
    assert 'popup-lg' in html


def test_close_route_closes_one_kind(admin_client, registry):
    registry.open(PopupKind.CUSTOM, {'title': 'x'})
    registry.open(PopupKind.EDIT_ORDER, {'order_id': 1})

    response = admin_client.post('/popups/custom/close', data={'next': '/orders/'})

    assert response.status_code == 302
    assert response.headers['Location'].endswith('/orders/')
    assert not registry.is_open(PopupKind.CUSTOM)
    assert registry.is_open(PopupKind.EDIT_ORDER)


@pytest.mark.parametrize('target', ['https://evil.example/phish', '//evil.example/', '/\\evil.example/', 'javascript:alert(1)'])
def test_close_route_ignores_foreign_next(admin_client, registry, target):
    registry.open(PopupKind.CUSTOM)

    response = admin_client.post('/popups/custom/close', data={'next': target})

    assert 'evil.example' not in response.headers['Location']
    assert 'javascript' not in response.headers['Location']
    assert response.headers['Location'].endswith('/')


def test_close_route_rejects_unknown_kind(admin_client):
    assert admin_client.post('/popups/confetti/close').status_code == 404


def test_close_all_route(admin_client, registry):
    registry.open(PopupKind.CUSTOM)
    registry.open(PopupKind.CREATE_ORDER)

    admin_client.post('/popups/close-all')

    assert registry.open_kinds() == []


def test_confirm_form_names_its_entity(admin_client, backend, registry):
    backend.add('GET', '/coupon/all', body=[])
    registry.open(PopupKind.DELETE_CONFIRMATION, {
        'id': 5, 'entity_type': 'coupon', 'title': 'Delete coupon SALE', 'message': 'Sure?',
        'on_confirm': lambda: None,
    })

    html = admin_client.get('/coupons/').get_data(as_text=True)

    assert 'name="entity_type" value="coupon"' in html
    assert 'name="entity_id" value="5"' in html


def test_confirm_runs_action_and_reports(app, admin_client, registry):
    calls = []
    deleted = []

    def on_deleted(sender, **kwargs):
        deleted.append(kwargs)

    entity_deleted.connect(on_deleted)
    try:
        with operator_request(app):
            request_confirmation('coupon', 5, title='Delete coupon SALE', message='Sure?',
                                 on_confirm=lambda: calls.append(5), return_url='/coupons/',
                                 success_message='Coupon SALE deleted.')

        response = confirm_delete(admin_client, 'coupon', 5)
    finally:
        entity_deleted.disconnect(on_deleted)

    assert calls == [5]
    assert response.headers['Location'].endswith('/coupons/')
    assert not registry.is_open(PopupKind.DELETE_CONFIRMATION)
    assert deleted == [{'entity_type': 'coupon', 'entity_id': 5, 'title': 'Delete coupon SALE'}]
    with admin_client.session_transaction() as sess:
        assert ('success', 'Coupon SALE deleted.') in sess['_flashes']


def test_confirm_runs_action_only_once(app, admin_client, registry):
    calls = []
    with operator_request(app):
        request_confirmation('coupon', 5, title='Delete', message='Sure?', on_confirm=lambda: calls.append(5))

    confirm_delete(admin_client, 'coupon', 5)
    confirm_delete(admin_client, 'coupon', 5)

    assert calls == [5]


def test_confirm_for_another_entity_is_refused(app, admin_client, registry):
    calls = []
    with operator_request(app):
        request_confirmation('order', 3, title='Delete order #3', message='Sure?',
                             on_confirm=lambda: calls.append('order 3'))

    confirm_delete(admin_client, 'product', 7)

    assert calls == []
    assert registry.get_data(PopupKind.DELETE_CONFIRMATION)['id'] == 3
    with admin_client.session_transaction() as sess:
        assert ('warning', 'This confirmation is out of date. Check the dialog and try again.') in sess['_flashes']


def test_confirm_reports_backend_failure(app, admin_client, registry):
    def failing():
        raise ApiError('Coupon is in use')

    with operator_request(app):
        request_confirmation('coupon', 5, title='Delete', message='Sure?', on_confirm=failing,
                             return_url='/coupons/')

    response = confirm_delete(admin_client, 'coupon', 5)

    assert response.status_code == 302
    assert not registry.is_open(PopupKind.DELETE_CONFIRMATION)
    with admin_client.session_transaction() as sess:
        assert ('danger', 'Coupon is in use') in sess['_flashes']


def test_confirm_without_open_popup(admin_client):
    response = confirm_delete(admin_client, 'coupon', 5)

    assert response.status_code == 302
    with admin_client.session_transaction() as sess:
        assert ('info', 'Nothing to confirm.') in sess['_flashes']


def test_request_confirmation_validates_entity_type(app):
    with operator_request(app):
        with pytest.raises(ValueError):
            request_confirmation('planet', 1, title='t', message='m', on_confirm=lambda: None)
        with pytest.raises(TypeError):
            request_confirmation('order', 1, title='t', message='m', on_confirm=None)


def test_logout_signal_ends_the_operators_popups(app, registry, second_registry):
    registry.open(PopupKind.CUSTOM)
    registry.open(PopupKind.PRODUCT_DETAILS)
    second_registry.open(PopupKind.CUSTOM, {'title': 'still here'})

    with operator_request(app):
        admin_logged_out.send(app, identifier='hoyakap@gmail.com')

    assert registry.open_kinds() == []
    assert second_registry.get_data(PopupKind.CUSTOM) == {'title': 'still here'}
