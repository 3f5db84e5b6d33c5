"""Bootstrap helpers for configuring the Flask application."""

from __future__ import annotations

import logging
from typing import Callable

from flask import Flask
from flask_login import current_user

from ..extensions import csrf_protect, login_manager, popup_registries
from ..services.api_client import ApiClient
from ..services import token_session
from ..utils.template_filters import register_filters
from .error_handlers import register_error_handlers
from .logging_config import setup_logging
from .module_registry import navigation_entries, register_default_modules


def configure_logging(app: Flask) -> None:
    """Configure the package logger and the Flask app logger."""

    setup_logging(
        app,
        log_level=app.config.get("LOG_LEVEL", "INFO"),
        log_dir=app.config.get("LOG_DIR"),
        json_format=app.config.get("LOG_JSON", False),
    )

    if app.logger.handlers:
        return

    app.logger.setLevel(logging.DEBUG if app.debug else logging.INFO)
    handler = logging.StreamHandler()
    formatter = logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")
    handler.setFormatter(formatter)
    app.logger.addHandler(handler)
    app.logger.propagate = False
    app.logger.info("Flask app logger configured successfully.")


def register_extensions(app: Flask) -> None:
    """Initialize shared extensions with the Flask app instance."""

    login_manager.init_app(app)
    csrf_protect.init_app(app)
    ApiClient.init_app(app)
    popup_registries.init_app(app)
    app.logger.info("REST backend: %s", app.config["API_BASE_URL"])


def register_context_processors(app: Flask) -> None:
    """Register the user loader and global template context."""

    @login_manager.user_loader
    def load_user(user_id: str):
        from ..modules.auth.models import AdminUser

        return AdminUser.from_session(user_id)

    @app.context_processor
    def inject_user() -> dict[str, object]:
        return {"current_user": current_user}

    @app.context_processor
    def inject_navigation() -> dict[str, Callable[..., object]]:
        return {
            "navigation_entries": navigation_entries,
            "user_initials": token_session.initials,
        }

    register_filters(app)


def register_blueprints(app: Flask) -> None:
    """Register all default blueprints with the app."""

    register_default_modules(app)


def register_handlers(app: Flask) -> None:
    """Error handlers and the login gate."""

    from ..modules.auth.guard import register_auth_guard

    register_error_handlers(app)
    register_auth_guard(app)
