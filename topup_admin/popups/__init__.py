# File: topup_admin/popups/__init__.py
from flask import Blueprint

from .host import MountedPopup, PopupHost
from .registry import PopupKind, PopupRegistry
from .sessions import PopupRegistryStore, current_registry

popups_bp = Blueprint('popups', __name__)

from . import routes, events  # noqa: E402,F401

__all__ = [
    "popups_bp", "PopupHost", "PopupKind", "PopupRegistry", "PopupRegistryStore",
    "MountedPopup", "current_registry",
]
