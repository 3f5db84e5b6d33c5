# File: topup_admin/services/token_session.py
# Access/refresh tokens and the identity claims shown in the header.
#
# Tokens live in the signed Flask session cookie. The claims decoded here are
# for display only; the backend enforces authorization.

from __future__ import annotations

import logging
import time
from typing import Optional

import jwt
from flask import session
from pydantic import ValidationError as PydanticValidationError

from ..schemas import DecodedToken, TokenPair

logger = logging.getLogger(__name__)

ACCESS_TOKEN_KEY = 'access_token'
REFRESH_TOKEN_KEY = 'refresh_token'
USER_ID_KEY = 'user_id'
USER_ROLE_KEY = 'user_role'
USER_IDENTIFIER_KEY = 'user_identifier'

_SESSION_KEYS = (ACCESS_TOKEN_KEY, REFRESH_TOKEN_KEY, USER_ID_KEY, USER_ROLE_KEY, USER_IDENTIFIER_KEY)


def decode_token(token: Optional[str]) -> Optional[DecodedToken]:
    """Decode a JWT payload without verifying its signature."""
    if not token:
        return None
    try:
        claims = jwt.decode(token, options={"verify_signature": False})
        return DecodedToken.model_validate(claims)
    except (jwt.PyJWTError, PydanticValidationError) as exc:
        logger.warning("Failed to decode token: %s", exc)
        return None


def is_token_expired(token: Optional[str], now: Optional[float] = None) -> bool:
    decoded = decode_token(token)
    if decoded is None or decoded.exp is None:
        return True
    current_time = int(now if now is not None else time.time())
    return decoded.exp < current_time


def initials(identifier: Optional[str]) -> str:
    """Avatar initials: first letter of an email, otherwise the first two characters."""
    if not identifier:
        return 'U'
    if '@' in identifier:
        return identifier[0].upper()
    return identifier[:2].upper()


def save_tokens(pair: TokenPair) -> Optional[DecodedToken]:
    """Store a token pair and the identity claims carried by the access token."""
    session[ACCESS_TOKEN_KEY] = pair.access_token
    session[REFRESH_TOKEN_KEY] = pair.refresh_token
    if pair.id is not None:
        session[USER_ID_KEY] = pair.id

    claims = decode_token(pair.access_token)
    if claims is not None:
        if claims.role is not None:
            session[USER_ROLE_KEY] = claims.role
        if claims.identifier is not None:
            session[USER_IDENTIFIER_KEY] = claims.identifier
        if pair.id is None and claims.id is not None:
            session[USER_ID_KEY] = claims.id
    return claims


def clear_tokens() -> None:
    for key in _SESSION_KEYS:
        session.pop(key, None)


def get_access_token() -> Optional[str]:
    return session.get(ACCESS_TOKEN_KEY)


def get_refresh_token() -> Optional[str]:
    return session.get(REFRESH_TOKEN_KEY)


def is_authenticated() -> bool:
    return bool(session.get(ACCESS_TOKEN_KEY))


def is_current_token_expired() -> bool:
    return is_token_expired(get_access_token())


def user_info() -> dict:
    return {
        'id': session.get(USER_ID_KEY),
        'identifier': session.get(USER_IDENTIFIER_KEY),
        'role': session.get(USER_ROLE_KEY),
    }
