"""Short-lived actors that drift, shrink and fade out."""

from __future__ import annotations

import time
from typing import TYPE_CHECKING, Callable

from .actor import Actor
from .mathutil import (
    Color,
    Vector2D,
    lerp_color,
    lerp_vector,
    random_range,
    random_unit_vector,
)

if TYPE_CHECKING:
    from .world import World


class Particle(Actor):
    """Moves at a constant velocity and destroys itself after its lifetime."""

    def __init__(
        self,
        world: World,
        texture_path: str,
        *,
        clock: Callable[[], float] = time.perf_counter,
    ) -> None:
        super().__init__(world, texture_path)
        self.velocity = Vector2D()
        self.lifetime = 1.0
        self._clock = clock
        self._start = clock()

    def _elapsed(self) -> float:
        return self._clock() - self._start

    def tick(self, delta_time: float) -> None:
        super().tick(delta_time)
        self._move(delta_time)
        self._fade(delta_time)
        if self._elapsed() >= self.lifetime:
            self.destroy()

    def random_velocity(self, min_speed: float, max_speed: float) -> None:
        self.velocity = random_unit_vector() * random_range(min_speed, max_speed)

    def random_size(self, min_size: float, max_size: float) -> None:
        scale = random_range(min_size, max_size)
        self.sprite.scale = Vector2D(scale, scale)

    def random_lifetime(self, min_time: float, max_time: float) -> None:
        self.lifetime = random_range(min_time, max_time)

    def _move(self, delta_time: float) -> None:
        self.add_actor_position_offset(self.velocity * delta_time)

    def _fade(self, delta_time: float) -> None:
        elapsed = self._elapsed()
        alpha = elapsed / self.lifetime if self.lifetime > 0 else 1.0
        sprite = self.sprite
        sprite.color = lerp_color(sprite.color, Color.TRANSPARENT_WHITE, alpha)
        sprite.scale = lerp_vector(sprite.scale, Vector2D(0.0, 0.0), alpha)