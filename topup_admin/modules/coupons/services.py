import logging

from ...core.error_handlers import ApiError
from ...services.api_client import get_api_client
from ..products.services import ProductService

logger = logging.getLogger(__name__)


class CouponService:
    @staticmethod
    def all_coupons() -> list:
        body = get_api_client().get('/coupon/all')
        if isinstance(body, dict):
            body = body.get('data') or []
        return body or []

    @staticmethod
    def get_coupon(coupon_id):
        return get_api_client().get(f'/coupon/{coupon_id}')

    @staticmethod
    def game_choices() -> list:
        """Products a coupon can be limited to; empty when the catalogue cannot be loaded."""
        try:
            products = ProductService.all_products()
        except ApiError as exc:
            logger.warning("Games for coupons unavailable: %s", exc.message)
            return []
        return [(p['id'], p.get('name') or f"#{p['id']}") for p in products if p.get('id') is not None]

    @staticmethod
    def form_data(coupon: dict) -> dict:
        data = dict(coupon or {})
        game_ids = data.get('gameIds')
        if game_ids is None:
            game_ids = [game.get('id') for game in data.get('games') or [] if isinstance(game, dict)]
        data['gameIds'] = [int(game_id) for game_id in game_ids if game_id is not None]
        return data

    @staticmethod
    def _payload(form) -> dict:
        payload = {
            'code': form.code.data.strip().upper(),
            'discount': form.discount.data,
            'gameIds': list(form.gameIds.data or []),
        }
        if form.limit.data:
            payload['limit'] = form.limit.data
        return payload

    @staticmethod
    def create_coupon(form):
        return get_api_client().post('/coupon', json_data=CouponService._payload(form))

    @staticmethod
    def update_coupon(coupon_id, form):
        return get_api_client().patch(f'/coupon/{coupon_id}', json_data=CouponService._payload(form))

    @staticmethod
    def set_active(coupon_id, active: bool):
        return get_api_client().patch(f'/coupon/{coupon_id}', json_data={'active': active})

    @staticmethod
    def delete_coupon(coupon_id):
        return get_api_client().delete(f'/coupon/{coupon_id}')

    @staticmethod
    def check_code(code: str):
        return get_api_client().get('/coupon/check', params={'code': code.strip()})
