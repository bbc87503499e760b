"""Multicast callbacks bound to game objects through weak references."""

from __future__ import annotations

import weakref
from typing import Any, Callable


class Delegate:
    """A list of callbacks that are dropped once their target object is gone.

    Each callback is called as ``callback(target, *args)``; pass an unbound
    method such as ``SpaceShip.on_health_empty``.
    """

    def __init__(self) -> None:
        self._bindings: list[tuple[weakref.ref, Callable[..., Any]]] = []

    def bind_action(self, obj: Any, callback: Callable[..., Any]) -> None:
        ref = obj if isinstance(obj, weakref.ref) else weakref.ref(obj)
        self._bindings.append((ref, callback))

    def broadcast(self, *args: Any) -> None:
        """Call every live binding; forget those whose target has been freed."""
        dead = []
        for binding in list(self._bindings):
            ref, callback = binding
            target = ref()
            if target is None:
                dead.append(binding)
                continue
            callback(target, *args)
        for binding in dead:
            self._bindings.remove(binding)

    def __len__(self) -> int:
        return len(self._bindings)