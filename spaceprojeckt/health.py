"""Hit points with notifications for changes, damage and death."""

from __future__ import annotations

from .delegate import Delegate


class HealthComponent:
    """Tracks health between 0 and a maximum and broadcasts what happens to it.

    ``on_health_changed`` and ``on_damage_taken`` pass
    ``(amount, health, max_health)``; ``on_health_empty`` passes nothing.
    """

    def __init__(self, health: float, max_health: float) -> None:
        self._health = health
        self._max_health = max_health
        self.on_health_changed = Delegate()
        self.on_damage_taken = Delegate()
        self.on_health_empty = Delegate()

    @property
    def health(self) -> float:
        return self._health

    @property
    def max_health(self) -> float:
        return self._max_health

    def set_health(self, amount: float) -> None:
        """Add ``amount`` (negative for damage); ignored once health reaches zero."""
        if amount == 0 or self._health == 0:
            return

        self._health = min(max(self._health + amount, 0.0), self._max_health)

        if amount < 0:
            self.on_damage_taken.broadcast(-amount, self._health, self._max_health)
            if self._health <= 0:
                self.on_health_empty.broadcast()
        self.on_health_changed.broadcast(amount, self._health, self._max_health)