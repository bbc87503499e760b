"""Ships: moving actors with health that blink when hit and explode when dead."""

from __future__ import annotations

from typing import TYPE_CHECKING

from .actor import Actor
from .explosion import Explosion
from .health import HealthComponent
from .mathutil import Color, Vector2D, lerp_color, log

if TYPE_CHECKING:
    from .world import World


class SpaceShip(Actor):
    """An actor that moves at ``velocity`` and reacts to its health changing."""

    def __init__(self, world: World, texture_path: str = "") -> None:
        super().__init__(world, texture_path)
        self.velocity = Vector2D()
        self.health_component = HealthComponent(100.0, 100.0)
        self._blink_time = 0.0
        self.blink_duration = 0.5
        self.blink_color = Color.RED
        self._shot_count = 0

    @property
    def blink_time(self) -> float:
        return self._blink_time

    @property
    def shot_count(self) -> int:
        """How many times the base shoot hook has been asked to fire."""
        return self._shot_count

    def tick(self, delta_time: float) -> None:
        super().tick(delta_time)
        self.add_actor_position_offset(self.velocity * delta_time)
        self.update_blink(delta_time)

    def shoot(self) -> None:
        self._shot_count += 1

    def begin_play(self) -> None:
        super().begin_play()
        self.set_physics_enabled(True)
        health = self.health_component
        health.on_health_changed.bind_action(
            self, lambda ship, *args: ship.on_health_changed(*args)
        )
        health.on_damage_taken.bind_action(
            self, lambda ship, *args: ship.on_damage_taken(*args)
        )
        health.on_health_empty.bind_action(self, lambda ship: ship.on_health_empty())

    def apply_damage(self, amount: float) -> None:
        super().apply_damage(amount)
        self.health_component.set_health(-amount)

    def blink(self) -> None:
        """Start a blink unless one is already running."""
        if self._blink_time == 0:
            self._blink_time = self.blink_duration

    def update_blink(self, delta_time: float) -> None:
        if self._blink_time > 0:
            self._blink_time = max(self._blink_time - delta_time, 0.0)
            self.sprite.color = lerp_color(Color.WHITE, self.blink_color, self._blink_time)

    def blow(self) -> None:
        """Spawn an explosion where the ship is and destroy it."""
        Explosion().spawn_explosion(self.world, self.position)
        self.destroy()

    def on_health_changed(self, amount: float, health: float, max_health: float) -> None:
        log(
            "Health is changed %f and now the current is %f of the %f maxHealth",
            amount,
            health,
            max_health,
        )

    def on_damage_taken(self, amount: float, health: float, max_health: float) -> None:
        self.blink()

    def on_health_empty(self) -> None:
        self.blow()