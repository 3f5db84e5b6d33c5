"""Maintenance ("tech works") mode of the storefront."""

import logging
from datetime import datetime
from typing import Optional

import pytz
from flask import current_app

from ...services.api_client import get_api_client

logger = logging.getLogger(__name__)


def display_timezone():
    try:
        return pytz.timezone(current_app.config.get('DISPLAY_TIMEZONE', 'UTC'))
    except pytz.UnknownTimeZoneError:
        return pytz.UTC


def to_backend_time(local: Optional[datetime]) -> Optional[str]:
    """Naive wall-clock time in the display timezone -> UTC ISO string."""
    if local is None:
        return None
    aware = display_timezone().localize(local)
    return aware.astimezone(pytz.UTC).strftime('%Y-%m-%dT%H:%M:%S.000Z')


def to_local_time(value: Optional[str]) -> Optional[datetime]:
    """Backend ISO timestamp -> naive wall-clock time in the display timezone."""
    if not value:
        return None
    try:
        moment = datetime.fromisoformat(value.replace('Z', '+00:00'))
    except ValueError:
        logger.warning("Unreadable maintenance end time %r", value)
        return None
    if moment.tzinfo is None:
        moment = pytz.UTC.localize(moment)
    return moment.astimezone(display_timezone()).replace(tzinfo=None)


def is_in_future(local: datetime) -> bool:
    now = datetime.now(pytz.UTC).astimezone(display_timezone()).replace(tzinfo=None)
    return local > now


class TechWorksService:
    @staticmethod
    def _site_id():
        return current_app.config.get('TECH_WORKS_SITE_ID', 1)

    @staticmethod
    def get_status() -> dict:
        return get_api_client().get(f'/techworks/{TechWorksService._site_id()}') or {}

    @staticmethod
    def update(enabled: bool, ends_at: Optional[datetime] = None):
        # An end time only makes sense while maintenance is on
        payload = {
            'isTechWorks': enabled,
            'techWorksEndsAt': to_backend_time(ends_at) if enabled else None,
        }
        logger.info("Maintenance mode %s until %s", 'on' if enabled else 'off', payload['techWorksEndsAt'])
        return get_api_client().patch(f'/techworks/{TechWorksService._site_id()}', json_data=payload)

    @staticmethod
    def toggle():
        return get_api_client().patch(f'/techworks/{TechWorksService._site_id()}/toggle') or {}
