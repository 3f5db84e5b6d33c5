"""
Popup registry of one operator session.

Any view can ask for a dialog to be shown with a payload; the popup host
(see host.py) listens for the registry's signals and mounts the matching
template on the next rendered page. The two never reference each other.

Per kind the registry is a two-state machine, Closed and Open(payload):

    open(kind, payload)          Closed | Open(old) -> Open(payload)   (replace)
    close(kind)                  Open(payload)      -> Closed          (payload dropped)
    close_all()                  every kind         -> Closed
    update_popup_data(kind, p)   Open(payload)      -> Open(payload | p) (shallow merge)
    take(kind, where)            Open(payload)      -> Closed, returns payload

update_popup_data on a closed kind is a no-op and logs a warning.
take checks and closes under one lock acquisition; a payload is handed out at
most once.
"""

from __future__ import annotations

import logging
import threading
from enum import Enum
from types import MappingProxyType
from typing import Any, Callable, Dict, Mapping, Optional, Union

from ..core.signals import popup_closed, popup_data_updated, popup_opened

logger = logging.getLogger(__name__)

Payload = Dict[str, Any]


class PopupKind(str, Enum):
    CREATE_ORDER = "createOrder"
    EDIT_ORDER = "editOrder"
    DELETE_CONFIRMATION = "deleteConfirmation"
    PRODUCT_DETAILS = "productDetails"
    CUSTOM = "custom"


KindLike = Union[PopupKind, str]


class PopupRegistry:
    """Keyed open/closed state plus a payload for every popup kind."""

    def __init__(self) -> None:
        self._lock = threading.RLock()
        self._active: Dict[PopupKind, bool] = {kind: False for kind in PopupKind}
        self._data: Dict[PopupKind, Payload] = {}

    def reset(self) -> None:
        with self._lock:
            self._active = {kind: False for kind in PopupKind}
            self._data = {}

    # --- transitions -------------------------------------------------------

    def open(self, kind: KindLike, payload: Optional[Payload] = None) -> None:
        kind = PopupKind(kind)
        with self._lock:
            new_payload = dict(payload or {})
            # Re-insert so open_kinds() reflects the latest opening order
            self._data.pop(kind, None)
            self._data[kind] = new_payload
            self._active[kind] = True
        logger.debug("Popup %s opened", kind.value)
        popup_opened.send(self, kind=kind, payload=new_payload)

    def close(self, kind: KindLike, retain_data: bool = False) -> None:
        kind = PopupKind(kind)
        with self._lock:
            was_open = self._active[kind]
            self._active[kind] = False
            if not retain_data:
                self._data.pop(kind, None)
        if was_open:
            logger.debug("Popup %s closed", kind.value)
            popup_closed.send(self, kind=kind, retained=retain_data)

    def close_all(self, retain_data: bool = False) -> None:
        with self._lock:
            closed = [kind for kind, is_open in self._active.items() if is_open]
            self._active = {kind: False for kind in PopupKind}
            if not retain_data:
                self._data = {}
        for kind in closed:
            popup_closed.send(self, kind=kind, retained=retain_data)

    def update_popup_data(self, kind: KindLike, partial: Payload) -> None:
        kind = PopupKind(kind)
        with self._lock:
            if not self._active[kind]:
                logger.warning("Ignoring data update for closed popup %s", kind.value)
                return
            merged = {**self._data.get(kind, {}), **partial}
            self._data[kind] = merged
        popup_data_updated.send(self, kind=kind, payload=merged)

    def take(self, kind: KindLike, where: Optional[Callable[[Payload], bool]] = None) -> Optional[Payload]:
        """
        Close an open popup and return its payload.

        Returns None, leaving the popup untouched, when it is closed or when
        `where` rejects the payload.
        """
        kind = PopupKind(kind)
        with self._lock:
            if not self._active[kind]:
                return None
            data = dict(self._data.get(kind, {}))
            if where is not None and not where(data):
                return None
            self._active[kind] = False
            self._data.pop(kind, None)
        logger.debug("Popup %s taken", kind.value)
        popup_closed.send(self, kind=kind, retained=False)
        return data

    # --- read surface ------------------------------------------------------

    @property
    def active_popups(self) -> Mapping[PopupKind, bool]:
        with self._lock:
            return MappingProxyType(dict(self._active))

    @property
    def popup_data(self) -> Mapping[PopupKind, Payload]:
        with self._lock:
            return MappingProxyType({kind: dict(data) for kind, data in self._data.items()})

    def is_open(self, kind: KindLike) -> bool:
        return self._active[PopupKind(kind)]

    def get_data(self, kind: KindLike) -> Optional[Payload]:
        kind = PopupKind(kind)
        with self._lock:
            data = self._data.get(kind)
            return dict(data) if data is not None else None

    def open_kinds(self) -> list[PopupKind]:
        """Open kinds in the order they were opened."""
        with self._lock:
            return [kind for kind in self._data if self._active[kind]]

    # --- observers ---------------------------------------------------------

    def subscribe(self, receiver: Callable[..., Any]) -> None:
        """
        Connect a receiver to every transition of this registry.

        The receiver is called as receiver(registry, kind=..., payload=...) on
        open and data updates, and receiver(registry, kind=..., retained=...)
        on close. Receivers are held weakly, like any blinker receiver.
        """
        popup_opened.connect(receiver, sender=self)
        popup_closed.connect(receiver, sender=self)
        popup_data_updated.connect(receiver, sender=self)

    def unsubscribe(self, receiver: Callable[..., Any]) -> None:
        popup_opened.disconnect(receiver, sender=self)
        popup_closed.disconnect(receiver, sender=self)
        popup_data_updated.disconnect(receiver, sender=self)
