import logging

from ...services.api_client import get_api_client

logger = logging.getLogger(__name__)


class DiamondPriceService:
    @staticmethod
    def all_prices() -> list:
        body = get_api_client().get('/diamond-price')
        if isinstance(body, dict):
            body = body.get('data') or []
        return body or []

    @staticmethod
    def get_price(price_id):
        return get_api_client().get(f'/diamond-price/{price_id}')

    @staticmethod
    def _payload(form) -> dict:
        return {
            'price_per_diamond': float(form.price_per_diamond.data),
            'currency': form.currency.data,
            'custom_amount_enabled': bool(form.custom_amount_enabled.data),
        }

    @staticmethod
    def create_price(form):
        return get_api_client().post('/diamond-price', json_data=DiamondPriceService._payload(form))

    @staticmethod
    def update_price(price_id, form):
        return get_api_client().patch(f'/diamond-price/{price_id}', json_data=DiamondPriceService._payload(form))

    @staticmethod
    def activate_price(price_id):
        """Make this price the one the storefront charges; the backend deactivates the rest."""
        logger.info("Activating diamond price %s", price_id)
        return get_api_client().patch(f'/diamond-price/{price_id}/activate')

    @staticmethod
    def delete_price(price_id):
        return get_api_client().delete(f'/diamond-price/{price_id}')
