"""Shortcuts views use to put a popup in front of the operator."""

from typing import Any, Callable, Dict, Optional

from .host import CUSTOM_SIZES
from .registry import PopupKind
from .sessions import current_registry

ENTITY_TYPES = (
    'product', 'order', 'user', 'coupon', 'banner',
    'article', 'tag', 'design_service', 'game_content',
    'feedback', 'payment_method', 'diamond_price',
)


def request_confirmation(
    entity_type: str,
    entity_id,
    title: str,
    message: str,
    on_confirm: Callable[[], Any],
    return_url: Optional[str] = None,
    confirm_label: str = 'Delete',
    success_message: Optional[str] = None,
) -> None:
    """Open the delete confirmation popup; on_confirm runs only after the operator agrees."""
    if entity_type not in ENTITY_TYPES:
        raise ValueError("Unknown entity type %r" % (entity_type,))
    if not callable(on_confirm):
        raise TypeError("on_confirm must be callable")

    current_registry().open(PopupKind.DELETE_CONFIRMATION, {
        'id': entity_id,
        'entity_type': entity_type,
        'title': title,
        'message': message,
        'on_confirm': on_confirm,
        'return_url': return_url,
        'confirm_label': confirm_label,
        'success_message': success_message,
    })


def show_message(title: str, content: str, size: str = 'md', **extra) -> None:
    """Open the free-form popup."""
    if size not in CUSTOM_SIZES:
        raise ValueError("Unknown popup size %r" % (size,))
    payload: Dict[str, Any] = {'title': title, 'content': content, 'size': size}
    payload.update(extra)
    current_registry().open(PopupKind.CUSTOM, payload)


def open_popup(kind, payload: Optional[Dict[str, Any]] = None) -> None:
    current_registry().open(kind, payload)
