import logging

from flask import current_app
from pydantic import ValidationError as PydanticValidationError

from ...core.error_handlers import ApiError
from ...schemas import TokenPair
from ...services import token_session
from ...services.api_client import get_api_client
from .models import AdminUser

logger = logging.getLogger(__name__)


class AuthService:
    @staticmethod
    def is_allowed(identifier: str) -> bool:
        """Only the configured admin emails may use the dashboard."""
        allowed = current_app.config.get('ADMIN_EMAILS', ())
        return (identifier or '').strip().lower() in allowed

    @staticmethod
    def login(identifier: str, password: str) -> AdminUser:
        """Exchange credentials for a token pair and store it in the session."""
        body = get_api_client().post(
            '/auth/login',
            json_data={'identifier': identifier, 'password': password},
            authenticated=False,
        )
        try:
            pair = TokenPair.model_validate(body)
        except PydanticValidationError as exc:
            logger.error("Unexpected login response: %s", exc)
            raise ApiError('Unexpected response from the sign-in service.') from exc

        claims = token_session.save_tokens(pair)
        return AdminUser.from_claims(claims, fallback_identifier=identifier, user_id=pair.id)

    @staticmethod
    def logout() -> None:
        token_session.clear_tokens()
