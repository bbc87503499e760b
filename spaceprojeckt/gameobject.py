"""Base class for everything that can be marked for destruction."""

from __future__ import annotations

import weakref


class GameObject:
    """An object that can be flagged as pending destruction."""

    def __init__(self) -> None:
        self._pending_destroy = False

    @property
    def pending_destroy(self) -> bool:
        return self._pending_destroy

    def destroy(self) -> None:
        """Mark the object to be removed on the next clean cycle."""
        self._pending_destroy = True

    def weak_ref(self) -> weakref.ref:
        return weakref.ref(self)