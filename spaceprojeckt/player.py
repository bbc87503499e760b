"""The ship the player steers with the keyboard."""

from __future__ import annotations

import time
from collections import defaultdict
from typing import TYPE_CHECKING, Callable, Mapping

import pygame

from .mathutil import Vector2D
from .spaceship import SpaceShip
from .weapons import BulletShooter

if TYPE_CHECKING:
    from .world import World

PLAYER_TEAM_ID = 1
DEFAULT_PLAYER_TEXTURE = "SpaceShooterRedux/PNG/playerShip1_blue.png"


def _pressed_keys() -> Mapping[int, bool]:
    if pygame.display.get_init():
        return pygame.key.get_pressed()
    return defaultdict(bool)


class Player(SpaceShip):
    """Moves with W/A/S/D and fires with space."""

    def __init__(
        self,
        world: World,
        texture_path: str = DEFAULT_PLAYER_TEXTURE,
        *,
        clock: Callable[[], float] = time.perf_counter,
        key_state: Callable[[], Mapping[int, bool]] = _pressed_keys,
    ) -> None:
        super().__init__(world, texture_path)
        self.input_vector = Vector2D()
        self.speed = 200.0
        self.bullet_shooter = BulletShooter(self, 0.1, clock=clock)
        self._key_state = key_state
        self.team_id = PLAYER_TEAM_ID

    def tick(self, delta_time: float) -> None:
        super().tick(delta_time)
        self.handle_input()
        self.consume_input(delta_time)

    def shoot(self) -> None:
        if self.bullet_shooter is not None:
            self.bullet_shooter.shoot()

    def handle_input(self) -> None:
        """Read the keyboard into a normalised input direction and fire on space."""
        keys = self._key_state()
        x, y = self.input_vector.x, self.input_vector.y
        if keys[pygame.K_w]:
            y = -1.0
        elif keys[pygame.K_s]:
            y = 1.0
        if keys[pygame.K_a]:
            x = -1.0
        elif keys[pygame.K_d]:
            x = 1.0
        self.input_vector = Vector2D(x, y)
        self.clamp_in_window()
        self.input_vector = self.input_vector.normalized()

        if keys[pygame.K_SPACE]:
            self.shoot()

    def consume_input(self, delta_time: float) -> None:
        self.velocity = self.input_vector * self.speed
        self.input_vector = Vector2D()

    def clamp_in_window(self) -> None:
        """Cancel input that would push the ship further past a window edge."""
        width, height = self.world.window_size()
        position = self.position
        x, y = self.input_vector.x, self.input_vector.y
        if position.x < 0.0 and x == -1:
            x = 0.0
        if position.x > width and x == 1:
            x = 0.0
        if position.y < 0.0 and y == -1:
            y = 0.0
        if position.y > height and y == 1:
            y = 0.0
        self.input_vector = Vector2D(x, y)