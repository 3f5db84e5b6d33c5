"""Payment methods offered at checkout and the banks behind them."""

import logging
from typing import Optional

from ...schemas import ListPage
from ...services.api_client import get_api_client

logger = logging.getLogger(__name__)

AMOUNT_FIELDS = ('minAmount', 'maxAmount', 'fee')


class PaymentMethodService:
    @staticmethod
    def list_methods(country: Optional[str] = None, active: Optional[bool] = None) -> list:
        params = {'country': country or None}
        if active is not None:
            params['isActive'] = 'true' if active else 'false'
        body = get_api_client().get('/payment-methods', params=params)
        return ListPage.parse(body).items

    @staticmethod
    def get_method(method_id):
        return get_api_client().get(f'/payment-methods/{method_id}')

    @staticmethod
    def _payload(form) -> dict:
        payload = {
            'name': form.name.data.strip(),
            'code': form.code.data.strip(),
            'country': form.country.data.strip().upper(),
            'currency': form.currency.data.strip().upper(),
            'isActive': bool(form.isActive.data),
        }
        for name in AMOUNT_FIELDS:
            value = getattr(form, name).data
            if value is not None:
                payload[name] = float(value)
        if form.description.data:
            payload['description'] = form.description.data.strip()
        return payload

    @staticmethod
    def create_method(form):
        payload = PaymentMethodService._payload(form)
        logger.info("Creating payment method %s for %s", payload['code'], payload['country'])
        return get_api_client().post('/payment-methods', json_data=payload)

    @staticmethod
    def update_method(method_id, form):
        return get_api_client().patch(f'/payment-methods/{method_id}', json_data=PaymentMethodService._payload(form))

    @staticmethod
    def set_active(method_id, active: bool):
        return get_api_client().patch(f'/payment-methods/{method_id}', json_data={'isActive': active})

    @staticmethod
    def delete_method(method_id):
        return get_api_client().delete(f'/payment-methods/{method_id}')


class BankService:
    @staticmethod
    def list_banks(page: int = 1, limit: int = 25) -> ListPage:
        body = get_api_client().get('/banks', params={'page': page, 'limit': limit})
        return ListPage.parse(body, page=page, per_page=limit)

    @staticmethod
    def set_active(bank_id, active: bool):
        return get_api_client().patch(f'/banks/{bank_id}', json_data={'isActive': active})
