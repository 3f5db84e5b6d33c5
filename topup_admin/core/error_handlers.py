"""
Error Handlers for the admin dashboard

Provides:
- Custom exception classes
- Consistent error response format
- Flask error handlers
"""

from flask import jsonify, request, current_app, flash, redirect, render_template, url_for
from typing import Optional, Dict, Any


class DashboardError(Exception):
    """Base exception class for the dashboard."""

    def __init__(
        self,
        message: str,
        code: str = 'UNKNOWN_ERROR',
        status_code: int = 500,
        details: Optional[Dict[str, Any]] = None
    ):
        self.message = message
        self.code = code
        self.status_code = status_code
        self.details = details or {}
        super().__init__(message)

    def to_dict(self) -> dict:
        """Convert error to dictionary for JSON response."""
        return {
            'success': False,
            'message': self.message,
            'code': self.code,
            'details': self.details
        }


class ApiError(DashboardError):
    """The REST backend rejected a request or could not be reached."""

    def __init__(self, message: str, backend_status: Optional[int] = None, payload: Any = None):
        super().__init__(
            message=message,
            code='API_ERROR',
            status_code=502,
            details={'backend_status': backend_status} if backend_status else None
        )
        self.backend_status = backend_status
        self.payload = payload


class AuthenticationExpiredError(DashboardError):
    """The session tokens are gone or could not be refreshed."""

    def __init__(self, message: str = 'Session expired. Please sign in again.'):
        super().__init__(
            message=message,
            code='AUTH_EXPIRED',
            status_code=401
        )


class NotFoundError(ApiError):
    """The backend has no such resource (HTTP 404)."""

    def __init__(self, message: str = 'Resource not found', payload: Any = None):
        super().__init__(message, backend_status=404, payload=payload)
        self.code = 'NOT_FOUND'
        self.status_code = 404


def error_response(
    message: str,
    code: str = 'ERROR',
    status_code: int = 400,
    details: Dict = None
) -> tuple:
    """Create a standardized error response."""
    response = {
        'success': False,
        'message': message,
        'code': code
    }
    if details:
        response['details'] = details

    return jsonify(response), status_code


def _wants_json() -> bool:
    return request.path.startswith('/api/') or request.is_json


def register_error_handlers(app):
    """Register error handlers with Flask app."""

    @app.errorhandler(AuthenticationExpiredError)
    def handle_auth_expired(error):
        from flask_login import logout_user
        from ..services.token_session import clear_tokens

        current_app.logger.info(f"{error.code}: {error.message}")
        clear_tokens()
        logout_user()
        if _wants_json():
            return jsonify(error.to_dict()), error.status_code
        flash(error.message, 'warning')
        return redirect(url_for('auth.login', next=request.path))

    @app.errorhandler(DashboardError)
    def handle_dashboard_error(error):
        current_app.logger.error(f"{error.code}: {error.message}")
        if _wants_json():
            return jsonify(error.to_dict()), error.status_code
        if request.method == 'GET':
            return render_template('errors/backend_error.html', error=error), error.status_code
        # Form submissions go back to the page they came from, like a toast
        flash(error.message, 'danger')
        return redirect(request.referrer or url_for('dashboard.index'))

    @app.errorhandler(404)
    def handle_not_found(error):
        if request.path.startswith('/api/'):
            return error_response('Endpoint not found', 'NOT_FOUND', 404)
        return error

    @app.errorhandler(500)
    def handle_internal_error(error):
        current_app.logger.exception('Internal server error')
        if request.path.startswith('/api/'):
            return error_response('Internal server error', 'SERVER_ERROR', 500)
        return error
