"""
Central Signal Registry for the dashboard.

Uses blinker (Flask's signal backend) so that unrelated parts of the
dashboard can react to each other without direct imports.

Usage:
    # Publisher (sender)
    from topup_admin.core.signals import entity_deleted
    entity_deleted.send(current_app._get_current_object(), entity_type='product', entity_id=7)

    # Subscriber (receiver) - in a module's events.py
    @entity_deleted.connect
    def on_entity_deleted(sender, **kwargs):
        ...
"""
from blinker import Namespace

# ============================================
# Popup Signals
# ============================================
popup_signals = Namespace()

# Sender: the PopupRegistry. Payload: kind (PopupKind), payload (dict)
popup_opened = popup_signals.signal('popup_opened')

# Sender: the PopupRegistry. Payload: kind (PopupKind), retained (bool)
popup_closed = popup_signals.signal('popup_closed')

# Sender: the PopupRegistry. Payload: kind (PopupKind), payload (dict, merged)
popup_data_updated = popup_signals.signal('popup_data_updated')

# ============================================
# Auth Signals
# ============================================
auth_signals = Namespace()

# Payload: identifier, role
admin_logged_in = auth_signals.signal('admin_logged_in')

# Payload: identifier
admin_logged_out = auth_signals.signal('admin_logged_out')

# Payload: user_id
tokens_refreshed = auth_signals.signal('tokens_refreshed')

# ============================================
# Content Management Signals
# ============================================
content_signals = Namespace()

# Payload: entity_type, entity_id, title
entity_deleted = content_signals.signal('entity_deleted')
