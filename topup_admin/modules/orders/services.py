import logging

from ...schemas import ListPage
from ...services.api_client import get_api_client

logger = logging.getLogger(__name__)

FILTER_KEYS = ('search', 'status', 'method', 'providerStatus')


class OrderService:
    @staticmethod
    def list_orders(page: int = 1, limit: int = 25, filters: dict = None) -> ListPage:
        params = {'page': page, 'limit': limit}
        for key in FILTER_KEYS:
            value = (filters or {}).get(key)
            if value:
                params[key] = value
        body = get_api_client().get('/order', params=params)
        return ListPage.parse(body, page=page, per_page=limit)

    @staticmethod
    def get_order(order_id):
        return get_api_client().get(f'/order/{order_id}')

    @staticmethod
    def create_order(form):
        payload = {
            'product_id': form.product_id.data,
            'item_id': form.item_id.data,
            'payment': form.payment.data,
            'account_id': (form.account_id.data or '').strip(),
            'server_id': (form.server_id.data or '').strip(),
            'quantity': form.quantity.data or 1,
        }
        logger.info("Creating order for product %s, package %s", payload['product_id'], payload['item_id'])
        return get_api_client().post('/order', json_data=payload)

    @staticmethod
    def delete_order(order_id):
        return get_api_client().delete(f'/order/{order_id}')

    @staticmethod
    def payment_url(order_id):
        body = get_api_client().get(f'/payment/tbank/url/{order_id}')
        if isinstance(body, dict):
            return body.get('url') or body.get('paymentUrl') or body.get('PaymentURL')
        return body
