"""Login gate: every page except sign-in needs an authenticated operator."""

from flask import request
from flask_login import current_user

from ...extensions import login_manager

PUBLIC_ENDPOINTS = frozenset({'auth.login', 'static'})


def register_auth_guard(app):
    @app.before_request
    def require_admin_session():
        if request.endpoint is None or request.endpoint in PUBLIC_ENDPOINTS:
            return None
        if current_user.is_authenticated:
            return None
        return login_manager.unauthorized()
