"""Application-wide extensions.

This module centralizes extension instances so they can be imported without
causing circular dependencies. The popup registries live here as well: one
store per process, holding a registry for every operator session.
"""

from flask_login import LoginManager
from flask_wtf import CSRFProtect

from .popups.sessions import PopupRegistryStore

login_manager = LoginManager()
login_manager.login_view = "auth.login"
login_manager.login_message = "Please sign in to access the dashboard."
login_manager.login_message_category = "info"

csrf_protect = CSRFProtect()
popup_registries = PopupRegistryStore()

__all__ = ["login_manager", "csrf_protect", "popup_registries"]
