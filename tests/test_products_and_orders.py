import io
import json

from conftest import confirm_delete
from topup_admin.popups.registry import PopupKind

PRODUCT = {
    'id': 7,
    'name': 'PUBG Mobile',
    'description': 'Unknown Cash for PUBG Mobile',
    'image': 'https://cdn.example/pubg.png',
    'smile_api_game': 'pubgm',
    'replenishment': [
        {'price': 99, 'amount': 60, 'type': 'UC'},
        {'price': 449, 'amount': 325, 'type': 'UC', 'sku': 'UC325'},
    ],
}


def _product_form(**overrides):
    data = {
        'name': 'Genshin Impact',
        'description': 'Genesis Crystals top-up',
        'smile_api_game': '',
        'replenishment-0-price': '99.00',
        'replenishment-0-amount': '60',
        'replenishment-0-type': 'Crystals',
        'replenishment-0-sku': '',
    }
    data.update(overrides)
    return data


def test_products_list(admin_client, backend):
    backend.add('GET', '/product', body={'data': [PRODUCT], 'meta': {'totalItems': 1, 'totalPages': 1}})

    html = admin_client.get('/products/?search=pubg').get_data(as_text=True)

    assert 'PUBG Mobile' in html
    assert '99 ₽' in html
    assert backend.calls[0]['params']['search'] == 'pubg'


def test_create_product_sends_multipart(admin_client, backend):
    backend.add('GET', '/product/smile', body=[{'id': 'genshin', 'name': 'Genshin Impact'}])
    backend.add('POST', '/product', status=201, body={'id': 8})

    data = _product_form(smile_api_game='genshin')
    data['images'] = [(io.BytesIO(b'fake-png'), 'cover.png')]
    response = admin_client.post('/products/create', data=data, content_type='multipart/form-data')

    assert response.status_code == 302
    call = backend.calls_to('POST', '/product')[0]
    assert call['data']['name'] == 'Genshin Impact'
    assert call['data']['smile_api_game'] == 'genshin'
    assert json.loads(call['data']['replenishment']) == [{'price': 99.0, 'amount': 60, 'type': 'Crystals'}]
    field, (filename, content, _mimetype) = call['files'][0]
    assert (field, filename, content) == ('images[0]', 'cover.png', b'fake-png')


def test_create_product_validation(admin_client, backend):
    backend.add('GET', '/product/smile', body=[])

    response = admin_client.post('/products/create', data=_product_form(
        name='G', description='short', **{'replenishment-0-price': '0', 'replenishment-0-type': ''},
    ))
    html = response.get_data(as_text=True)

    assert response.status_code == 200
    assert 'Name must be at least 2 characters.' in html
    assert 'Description must be at least 10 characters.' in html
    assert 'Type is required.' in html
    assert backend.calls_to('POST', '/product') == []


def test_add_package_row_does_not_submit(admin_client, backend):
    backend.add('GET', '/product/smile', body=[])

    response = admin_client.post('/products/create', data=_product_form(add_row='Add package'))
    html = response.get_data(as_text=True)

    assert 'replenishment-1-price' in html
    assert backend.calls_to('POST', '/product') == []


def test_smile_catalogue_outage_does_not_block_the_form(admin_client, backend):
    backend.add('GET', '/product/smile', status=503, body={'message': 'down'})

    response = admin_client.get('/products/create')

    assert response.status_code == 200
    assert 'No Smile game' in response.get_data(as_text=True)


def test_edit_product_prefills_packages(admin_client, backend):
    backend.add('GET', '/product/7', body=PRODUCT)
    backend.add('GET', '/product/smile', body=[])

    html = admin_client.get('/products/7/edit').get_data(as_text=True)

    assert 'value="UC325"' in html
    assert 'replenishment-1-amount' in html


def test_product_details_popup(admin_client, backend, registry):
    backend.add('GET', '/product/7', body=PRODUCT)

    admin_client.post('/products/7/details')

    assert registry.get_data(PopupKind.PRODUCT_DETAILS) == {'product_id': 7, 'product': PRODUCT}


def test_delete_product_needs_confirmation(admin_client, backend, registry):
    backend.add('DELETE', '/product/7', status=204)

    admin_client.post('/products/7/delete', data={'name': 'PUBG Mobile'})
    assert backend.calls_to('DELETE', '/product/7') == []

    response = confirm_delete(admin_client, 'product', 7)

    assert response.headers['Location'].endswith('/products/')
    assert len(backend.calls_to('DELETE', '/product/7')) == 1


def test_orders_list_forwards_filters(admin_client, backend):
    backend.add('GET', '/order', body={
        'data': [{'id': 'o1', 'price': 99, 'amount': 60, 'type': 'UC', 'status': 'Pending',
                  'method': 'SBP', 'customer': 'gamer@example.com', 'date': '2024-05-01T10:00:00Z'}],
        'total': 1, 'totalPages': 1,
    })

    html = admin_client.get('/orders/?status=Pending&method=SBP&providerStatus=').get_data(as_text=True)

    assert backend.calls[0]['params'] == {'page': 1, 'limit': 25, 'status': 'Pending', 'method': 'SBP'}
    assert 'badge-warning' in html
    assert 'status: Pending' in html


def test_create_order_through_popup(admin_client, backend, registry):
    backend.add('GET', '/product', body={'data': [PRODUCT], 'meta': {'totalItems': 1}})
    backend.add('GET', '/product/7', body=PRODUCT)
    backend.add('POST', '/order', status=201, body={'id': 'o2'})

    admin_client.post('/orders/new')
    assert registry.get_data(PopupKind.CREATE_ORDER)['products'] == [PRODUCT]

    admin_client.post('/orders/new', data={'product_id': '7'})
    payload = registry.get_data(PopupKind.CREATE_ORDER)
    assert payload['product'] == PRODUCT
    assert payload['products'] == [PRODUCT]

    response = admin_client.post('/orders/create', data={
        'product_id': '7', 'item_id': '1', 'payment': 'Pagsmile',
        'account_id': ' 5123 ', 'server_id': '', 'quantity': '1',
    })

    assert response.status_code == 302
    assert backend.calls_to('POST', '/order')[0]['json'] == {
        'product_id': 7, 'item_id': 1, 'payment': 'Pagsmile',
        'account_id': '5123', 'server_id': '', 'quantity': 1,
    }
    assert not registry.is_open(PopupKind.CREATE_ORDER)


def test_create_order_rejects_unknown_payment(admin_client, backend, registry):
    registry.open(PopupKind.CREATE_ORDER, {'product_id': 7, 'product': PRODUCT})

    admin_client.post('/orders/create', data={'product_id': '7', 'item_id': '0', 'payment': 'Cash'})

    assert backend.calls_to('POST', '/order') == []
    assert registry.is_open(PopupKind.CREATE_ORDER)


def test_order_details_and_payment_link(admin_client, backend, registry):
    backend.add('GET', '/order/o1', body={'id': 'o1', 'status': 'Pending'})
    backend.add('GET', '/payment/tbank/url/o1', body={'url': 'https://pay.example/o1'})

    admin_client.post('/orders/o1/details')
    admin_client.post('/orders/o1/payment-link')

    assert registry.get_data(PopupKind.EDIT_ORDER) == {
        'order_id': 'o1', 'data': {'id': 'o1', 'status': 'Pending'}, 'payment_url': 'https://pay.example/o1',
    }
