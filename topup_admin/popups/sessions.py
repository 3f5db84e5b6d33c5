"""
Popup registries per operator session.

Every signed-in browser session gets its own PopupRegistry and PopupHost, so
a dialog opened by one operator is never shown to, or confirmed by, another.
The session is identified by a random key kept in the signed session cookie.
"""

from __future__ import annotations

import logging
import secrets
import threading
from collections import OrderedDict
from typing import List, Optional, Tuple

from flask import current_app, session

from .host import MountedPopup, PopupHost
from .registry import PopupRegistry

logger = logging.getLogger(__name__)

SESSION_KEY = 'popup_session'
EXTENSION_KEY = 'popup_registries'


class PopupRegistryStore:
    """Least recently used map of session key -> (registry, host)."""

    def __init__(self, max_sessions: int = 500):
        self.max_sessions = max_sessions
        self._lock = threading.Lock()
        self._entries: "OrderedDict[str, Tuple[PopupRegistry, PopupHost]]" = OrderedDict()

    def init_app(self, app) -> None:
        """Attach to an application; a fresh app starts without any popups."""
        self.max_sessions = app.config.get('POPUP_MAX_SESSIONS', self.max_sessions)
        self.reset()
        app.extensions[EXTENSION_KEY] = self

        @app.context_processor
        def inject_popups():
            return {'mounted_popups': current_mounted_popups()}

    def get(self, key: str) -> PopupRegistry:
        """Registry of a session, created on first use."""
        with self._lock:
            entry = self._entries.get(key)
            if entry is None:
                registry = PopupRegistry()
                entry = (registry, PopupHost(registry))
                self._entries[key] = entry
                self._evict()
            else:
                self._entries.move_to_end(key)
            return entry[0]

    def host(self, key: str) -> Optional[PopupHost]:
        with self._lock:
            entry = self._entries.get(key)
            return entry[1] if entry else None

    def discard(self, key: Optional[str]) -> None:
        """Close every popup of a session and forget it."""
        if not key:
            return
        with self._lock:
            entry = self._entries.pop(key, None)
        if entry is not None:
            registry, host = entry
            registry.close_all()
            registry.unsubscribe(host.sync)

    def reset(self) -> None:
        with self._lock:
            keys = list(self._entries)
        for key in keys:
            self.discard(key)

    def __len__(self) -> int:
        return len(self._entries)

    def _evict(self) -> None:
        while len(self._entries) > self.max_sessions:
            key, (registry, host) = self._entries.popitem(last=False)
            registry.unsubscribe(host.sync)
            logger.info("Dropped popups of idle session %s", key[:8])


def _store() -> PopupRegistryStore:
    return current_app.extensions[EXTENSION_KEY]


def session_key(create: bool = True) -> Optional[str]:
    key = session.get(SESSION_KEY)
    if key is None and create:
        key = secrets.token_urlsafe(16)
        session[SESSION_KEY] = key
    return key


def current_registry() -> PopupRegistry:
    """Popup registry of the operator making the current request."""
    return _store().get(session_key())


def current_mounted_popups() -> List[MountedPopup]:
    key = session_key(create=False)
    host = _store().host(key) if key else None
    return host.mounted_popups() if host else []


def end_popup_session() -> Optional[str]:
    """Drop the current session's popups; the next dialog starts a new registry."""
    key = session.pop(SESSION_KEY, None)
    _store().discard(key)
    return key
