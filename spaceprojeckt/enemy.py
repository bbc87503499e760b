"""Enemy ships: they damage hostile actors they touch and leave once off screen."""

from __future__ import annotations

import time
from typing import TYPE_CHECKING, Callable, Optional

from .mathutil import Vector2D
from .spaceship import SpaceShip
from .weapons import BulletShooter

if TYPE_CHECKING:
    from .actor import Actor
    from .world import World

ENEMY_TEAM_ID = 2
DEFAULT_VANGUARD_TEXTURE = "SpaceShooterRedux/PNG/Enemies/enemyGreen1.png"


class EnemySpaceShip(SpaceShip):
    """A ship on the enemy team that rams hostile actors for ``collision_damage``."""

    def __init__(
        self,
        world: World,
        texture_path: str,
        collision_damage: float = 200.0,
    ) -> None:
        super().__init__(world, texture_path)
        self.collision_damage = collision_damage
        self.team_id = ENEMY_TEAM_ID

    def tick(self, delta_time: float) -> None:
        super().tick(delta_time)
        if self.is_out_of_bounds(self.global_bounds().width):
            self.destroy()

    def on_actor_overlap(self, other: Optional[Actor]) -> None:
        super().on_actor_overlap(other)
        if other is not None and self.is_other_hostile(other):
            other.apply_damage(self.collision_damage)

    def on_actor_end_overlap(self, other: Optional[Actor]) -> None:
        super().on_actor_end_overlap(other)


class Vanguard(EnemySpaceShip):
    """A basic enemy that flies down the screen and fires whenever it can."""

    def __init__(
        self,
        world: World,
        texture_path: str = DEFAULT_VANGUARD_TEXTURE,
        velocity: Vector2D = Vector2D(0.0, 150.0),
        *,
        clock: Callable[[], float] = time.perf_counter,
    ) -> None:
        super().__init__(world, texture_path)
        self.bullet_shooter = BulletShooter(self, clock=clock)
        self.velocity = velocity
        self.set_actor_rotation(180.0)

    def tick(self, delta_time: float) -> None:
        super().tick(delta_time)
        self.shoot()

    def shoot(self) -> None:
        super().shoot()
        self.bullet_shooter.shoot()