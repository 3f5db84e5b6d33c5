"""
Custom Jinja2 template filters for the dashboard.
"""
from datetime import datetime, timezone

import pytz
from flask import current_app

from .pagination import page_url

# Badge colour per status value shown in the tables
STATUS_STYLES = {
    'success': ('completed', 'Paid', 'Active', 'success', 'Unblocked', 'Accepted', 'Online'),
    'warning': ('processing', 'Pending', 'pending', 'Maintenance'),
    'danger': ('failed', 'Blocked', 'Disabled', 'Cancelled', 'cancelled', 'Declined'),
    'info': ('New', 'Used'),
    'muted': ('Expired',),
}


def datetime_filter(value, format='%d.%m.%Y %H:%M'):
    """
    Format a backend timestamp (ISO string or datetime) in DISPLAY_TIMEZONE.

    Returns the raw value unchanged when it cannot be parsed.
    """
    if not value:
        return ""

    dt = value
    if isinstance(value, str):
        try:
            dt = datetime.fromisoformat(value.replace('Z', '+00:00'))
        except ValueError:
            return value
    if not isinstance(dt, datetime):
        return str(value)

    try:
        display_tz = pytz.timezone(current_app.config.get('DISPLAY_TIMEZONE', 'UTC'))
    except pytz.UnknownTimeZoneError:
        display_tz = pytz.UTC

    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(display_tz).strftime(format)


def money_filter(value, currency='₽'):
    """Format an amount with thousands separators: 12500.5 -> '12 500.50 ₽'."""
    try:
        amount = float(value or 0)
    except (TypeError, ValueError):
        return str(value)
    formatted = f"{amount:,.2f}".replace(',', ' ')
    if formatted.endswith('.00'):
        formatted = formatted[:-3]
    return f"{formatted} {currency}"


def status_class_filter(status):
    """CSS modifier for a status badge."""
    for style, values in STATUS_STYLES.items():
        if status in values:
            return f"badge-{style}"
    return "badge-muted"


def register_filters(app):
    """Register custom filters with the Flask app."""
    app.jinja_env.filters['datetime'] = datetime_filter
    app.jinja_env.filters['money'] = money_filter
    app.jinja_env.filters['status_class'] = status_class_filter
    app.jinja_env.globals['page_url'] = page_url
