from typing import Optional

from ...schemas import ListPage
from ...services.api_client import get_api_client


class UserService:
    @staticmethod
    def list_users(page: int = 1, limit: int = 25, search: Optional[str] = None) -> ListPage:
        body = get_api_client().get('/user', params={'page': page, 'limit': limit, 'search': search})
        return ListPage.parse(body, page=page, per_page=limit)

    @staticmethod
    def get_user(user_id):
        return get_api_client().get(f'/user/{user_id}')

    @staticmethod
    def get_payments(user_id, page: int = 1, limit: int = 25) -> ListPage:
        body = get_api_client().get(f'/user/{user_id}/payments', params={'page': page, 'limit': limit})
        return ListPage.parse(body, page=page, per_page=limit)

    @staticmethod
    def block_user(user_id):
        return get_api_client().patch(f'/user/{user_id}/ban')

    @staticmethod
    def unblock_user(user_id):
        return get_api_client().patch(f'/user/{user_id}/unban')
