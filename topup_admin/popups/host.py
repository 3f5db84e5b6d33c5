"""Popup host: mounts the templates of whatever popups the registry has open."""

from __future__ import annotations

import threading
from collections import OrderedDict
from dataclasses import dataclass, field
from typing import Any, Dict, List

from .registry import PopupKind, PopupRegistry

POPUP_TEMPLATES = {
    PopupKind.CREATE_ORDER: 'popups/create_order.html',
    PopupKind.EDIT_ORDER: 'popups/order_details.html',
    PopupKind.DELETE_CONFIRMATION: 'popups/delete_confirmation.html',
    PopupKind.PRODUCT_DETAILS: 'popups/product_details.html',
    PopupKind.CUSTOM: 'popups/custom.html',
}

CUSTOM_SIZES = ('sm', 'md', 'lg', 'xl', '2xl', '3xl', '4xl', 'full')


@dataclass(frozen=True)
class MountedPopup:
    kind: PopupKind
    template: str
    payload: Dict[str, Any] = field(default_factory=dict)

    @property
    def close_kind(self) -> str:
        return self.kind.value


class PopupHost:
    """
    Observer of a PopupRegistry.

    The host never polls: it keeps its mounted list in step with the registry
    through the registry's signals; sessions.py hands that list to the templates.
    """

    def __init__(self, registry: PopupRegistry):
        self.registry = registry
        self._lock = threading.Lock()
        self._mounted: "OrderedDict[PopupKind, Dict[str, Any]]" = OrderedDict()
        for kind in registry.open_kinds():
            self._mounted[kind] = registry.get_data(kind) or {}
        registry.subscribe(self.sync)

    def sync(self, sender: PopupRegistry, kind: PopupKind, **_kwargs) -> None:
        with self._lock:
            if sender.is_open(kind):
                self._mounted.pop(kind, None)
                self._mounted[kind] = sender.get_data(kind) or {}
            else:
                self._mounted.pop(kind, None)

    def mounted_popups(self) -> List[MountedPopup]:
        with self._lock:
            return [
                MountedPopup(kind=kind, template=POPUP_TEMPLATES[kind], payload=payload)
                for kind, payload in self._mounted.items()
            ]
