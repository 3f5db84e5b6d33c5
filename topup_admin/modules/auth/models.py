# File: topup_admin/modules/auth/models.py
# The signed-in operator, rebuilt from the token session on every request.

from __future__ import annotations

from typing import Optional

from flask_login import UserMixin

from ...schemas import DecodedToken
from ...services import token_session


class AdminUser(UserMixin):
    """Identity shown in the header; the backend is the only authority."""

    def __init__(self, user_id, identifier: Optional[str] = None, role: Optional[str] = None):
        self.id = str(user_id)
        self.identifier = identifier
        self.role = role

    @property
    def initials(self) -> str:
        return token_session.initials(self.identifier)

    @classmethod
    def from_claims(cls, claims: Optional[DecodedToken], fallback_identifier: str, user_id=None) -> "AdminUser":
        identifier = (claims.identifier if claims else None) or fallback_identifier
        role = claims.role if claims else None
        if user_id is None:
            user_id = (claims.id if claims else None) or identifier
        return cls(user_id, identifier=identifier, role=role)

    @classmethod
    def from_session(cls, user_id: str) -> Optional["AdminUser"]:
        """Return the operator for this session, or None once the token is gone or expired."""
        if not token_session.is_authenticated():
            return None
        if token_session.is_current_token_expired():
            token_session.clear_tokens()
            return None
        info = token_session.user_info()
        return cls(info['id'] if info['id'] is not None else user_id,
                   identifier=info['identifier'], role=info['role'])

    def __repr__(self) -> str:
        return f"<AdminUser {self.identifier or self.id}>"
