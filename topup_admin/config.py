# File: topup_admin/config.py
# Application configuration, loaded from the environment (.env supported).

import os
from dotenv import load_dotenv

load_dotenv()

# Project root (the directory containing the topup_admin package)
BASE_DIR = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))

DEFAULT_ADMIN_EMAILS = ('hoyakap@gmail.com', 'erlanzh.gg@gmail.com')


def _split_csv(value):
    return tuple(part.strip().lower() for part in value.split(',') if part.strip())


class Config:
    """Configuration for the top-up admin dashboard."""

    SECRET_KEY = os.environ.get('SECRET_KEY')
    if not SECRET_KEY:
        # Fallback for development, though env is preferred
        SECRET_KEY = 'dev-secret-key-replace-in-production'

    # REST backend
    API_BASE_URL = os.environ.get('API_BASE_URL', 'https://don-vip-backend-production.up.railway.app/api')
    API_TIMEOUT = float(os.environ.get('API_TIMEOUT', '30'))
    API_MAX_RETRIES = int(os.environ.get('API_MAX_RETRIES', '3'))

    # Login gate
    ADMIN_EMAILS = _split_csv(os.environ.get('ADMIN_EMAILS', '')) or DEFAULT_ADMIN_EMAILS

    # Pagination
    ITEMS_PER_PAGE = 25
    PAGE_SIZE_OPTIONS = (25, 50, 100, 200)
    PAGINATION_MAX_VISIBLE = 5

    # Popup registries kept in memory, one per signed-in browser session
    POPUP_MAX_SESSIONS = int(os.environ.get('POPUP_MAX_SESSIONS', '500'))

    # The storefront whose maintenance mode the dashboard switches
    TECH_WORKS_SITE_ID = int(os.environ.get('TECH_WORKS_SITE_ID', '1'))

    # Dates from the backend are shown in this timezone
    DISPLAY_TIMEZONE = os.environ.get('DISPLAY_TIMEZONE', 'UTC')

    # Logging
    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO')
    LOG_DIR = os.environ.get('LOG_DIR') or os.path.join(BASE_DIR, 'logs')
    LOG_JSON = os.environ.get('LOG_JSON', '').lower() in ('1', 'true', 'yes')

    SESSION_COOKIE_HTTPONLY = True
    SESSION_COOKIE_SAMESITE = 'Lax'

    @classmethod
    def init_app(cls, app):
        """Create the directories the app writes to."""
        if app.config.get('LOG_DIR'):
            os.makedirs(app.config['LOG_DIR'], exist_ok=True)
