"""Customer feedback moderation."""

import logging

from ...schemas import ListPage
from ...services.api_client import get_api_client

logger = logging.getLogger(__name__)

TABS = ('incoming', 'accepted')


def moderation_status(item: dict) -> str:
    # isVerified stays null until a moderator decides
    verified = item.get('isVerified')
    if verified is None:
        return 'Pending'
    return 'Accepted' if verified else 'Declined'


class FeedbackService:
    @staticmethod
    def list_feedback(tab: str = 'incoming', page: int = 1, limit: int = 10) -> ListPage:
        if tab not in TABS:
            raise ValueError("Unknown feedback tab %r" % (tab,))
        body = get_api_client().get(f'/feedback/{tab}', params={'page': page, 'limit': limit})
        return ListPage.parse(body, page=page, per_page=limit)

    @staticmethod
    def set_verified(feedback_id, verified: bool):
        logger.info("Feedback %s %s", feedback_id, 'accepted' if verified else 'declined')
        return get_api_client().patch(f'/feedback/{feedback_id}', json_data={'isVerified': verified})

    @staticmethod
    def delete_feedback(feedback_id):
        return get_api_client().delete(f'/feedback/{feedback_id}')
