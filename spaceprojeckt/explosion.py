"""A burst of particles spawned into a world."""

from __future__ import annotations

from typing import TYPE_CHECKING, Sequence

from .mathutil import Color, Vector2D, random_range
from .particle import Particle

if TYPE_CHECKING:
    from .world import World

DEFAULT_TEXTURE_PATHS = (
    "SpaceShooterRedux/PNG/Effects/star1.png",
    "SpaceShooterRedux/PNG/Effects/star2.png",
    "SpaceShooterRedux/PNG/Effects/star3.png",
)


class Explosion:
    """Describes an explosion: how many particles and their size, life and speed."""

    def __init__(
        self,
        particle_amount: int = 20,
        max_size: float = 1.0,
        min_size: float = 0.5,
        max_lifetime: float = 5.0,
        min_lifetime: float = 3.0,
        max_speed: float = 200.0,
        min_speed: float = 100.0,
        color: Color = Color(255, 111, 0, 255),
        texture_paths: Sequence[str] = DEFAULT_TEXTURE_PATHS,
    ) -> None:
        self.particle_amount = particle_amount
        self.max_size = max_size
        self.min_size = min_size
        self.max_lifetime = max_lifetime
        self.min_lifetime = min_lifetime
        self.max_speed = max_speed
        self.min_speed = min_speed
        self.color = color
        self.texture_paths = tuple(texture_paths)

    def _random_texture_path(self) -> str:
        count = len(self.texture_paths)
        index = min(int(random_range(0, count)), count - 1)
        return self.texture_paths[index]

    def spawn_explosion(self, world: World, position: Vector2D) -> list[Particle]:
        """Spawn the particles at ``position`` and return them."""
        particles = []
        for _ in range(self.particle_amount):
            particle = world.spawn_actor(Particle, self._random_texture_path())
            particle.random_lifetime(self.min_lifetime, self.max_lifetime)
            particle.set_actor_position(position)
            particle.random_size(self.min_size, self.max_size)
            particle.random_velocity(self.min_speed, self.max_speed)
            particle.sprite.color = self.color
            particles.append(particle)
        return particles