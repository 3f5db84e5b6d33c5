import logging

from pydantic import ValidationError as PydanticValidationError

from ...core.error_handlers import ApiError
from ...schemas import ListPage, OrderAnalytics
from ...services.api_client import get_api_client

logger = logging.getLogger(__name__)

TOP_PACKAGES = 5


class DashboardService:
    @staticmethod
    def get_analytics() -> OrderAnalytics:
        body = get_api_client().get('/order/analytics')
        try:
            return OrderAnalytics.model_validate(body or {})
        except PydanticValidationError as exc:
            logger.error("Unexpected analytics payload: %s", exc)
            raise ApiError('The analytics service returned an unexpected response.') from exc

    @staticmethod
    def count(path: str) -> int:
        """Total number of items behind a paginated list endpoint."""
        body = get_api_client().get(path, params={'page': 1, 'limit': 1})
        return ListPage.parse(body, per_page=1).meta.total_items

    @staticmethod
    def get_overview() -> dict:
        analytics = DashboardService.get_analytics()

        peak = max((month.total for month in analytics.orders_by_month), default=0)
        months = [
            {
                'name': month.name,
                'total': month.total,
                'height': round(month.total / peak * 100) if peak else 0,
            }
            for month in analytics.orders_by_month
        ]
        top_packages = sorted(analytics.packages_purchased, key=lambda p: p.count, reverse=True)[:TOP_PACKAGES]

        return {
            'analytics': analytics,
            'months': months,
            'top_packages': top_packages,
            'total_users': DashboardService.count('/user'),
            'total_products': DashboardService.count('/product'),
        }
