"""Weapons owned by actors and the bullets they fire."""

from __future__ import annotations

import time
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Callable, Optional

from .actor import Actor

if TYPE_CHECKING:
    from .world import World

BULLET_TEXTURE = "SpaceShooterRedux/PNG/Lasers/laserBlue07.png"


class WeaponBase(ABC):
    """A weapon that fires when allowed and not cooling down."""

    def __init__(self, owner: Actor) -> None:
        self._owner = owner

    @property
    def owner(self) -> Actor:
        return self._owner

    def shoot(self) -> None:
        if self.can_shoot() and not self.is_in_cooldown():
            self.shoot_impl()

    def can_shoot(self) -> bool:
        return True

    def is_in_cooldown(self) -> bool:
        return False

    @abstractmethod
    def shoot_impl(self) -> None:
        """Actually fire the weapon."""


class Bullet(Actor):
    """Flies forward, damages the first hostile actor it touches and disappears."""

    def __init__(
        self,
        world: World,
        owner: Actor,
        texture_path: str,
        damage: float = 10.0,
        speed: float = 500.0,
    ) -> None:
        super().__init__(world, texture_path)
        self.owner = owner
        self.damage = damage
        self.speed = speed
        self.team_id = owner.team_id

    def tick(self, delta_time: float) -> None:
        super().tick(delta_time)
        self.move(delta_time)
        if self.is_out_of_bounds(0):
            self.destroy()

    def begin_play(self) -> None:
        super().begin_play()
        self.set_physics_enabled(True)

    def on_actor_overlap(self, other: Optional[Actor]) -> None:
        super().on_actor_overlap(other)
        if other is not None and self.is_other_hostile(other):
            other.apply_damage(self.damage)
            self.destroy()

    def move(self, delta_time: float) -> None:
        self.add_actor_position_offset(self.forward_vector() * self.speed * delta_time)


class BulletShooter(WeaponBase):
    """Fires a bullet from the owner at most once per ``shooting_interval`` seconds."""

    def __init__(
        self,
        owner: Actor,
        shooting_interval: float = 1.0,
        *,
        clock: Callable[[], float] = time.perf_counter,
    ) -> None:
        super().__init__(owner)
        self.shooting_interval = shooting_interval
        self._clock = clock
        self._last_shot = clock()

    def is_in_cooldown(self) -> bool:
        return not (self._clock() - self._last_shot > self.shooting_interval)

    def shoot_impl(self) -> None:
        self._last_shot = self._clock()
        owner = self.owner
        bullet = owner.world.spawn_actor(Bullet, owner, BULLET_TEXTURE)
        bullet.set_actor_position(owner.position)
        bullet.set_actor_rotation(owner.rotation)