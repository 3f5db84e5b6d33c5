"""
Event handlers for the popup module.

Keeps the operator's registry consistent with the auth lifecycle and logs
confirmed deletions.
"""
from flask import current_app, has_request_context

from ..core.signals import admin_logged_in, admin_logged_out, entity_deleted
from .sessions import end_popup_session


@admin_logged_in.connect
@admin_logged_out.connect
def on_auth_changed(sender, **kwargs):
    """Sign-in and sign-out both start the operator with no dialogs."""
    if has_request_context():
        end_popup_session()


@entity_deleted.connect
def on_entity_deleted(sender, **kwargs):
    current_app.logger.info(
        "[Audit] %s %s removed (%s)",
        kwargs.get('entity_type'),
        kwargs.get('entity_id'),
        kwargs.get('title', ''),
    )
