"""Actors: textured, positioned objects that live in a world."""

from __future__ import annotations

import math
import weakref
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, ClassVar, NamedTuple, Optional

import pygame

from .assets import AssetManager, Texture
from .gameobject import GameObject
from .mathutil import Color, Vector2D, degrees_to_radians, rotation_to_vector
from .physics import PhysicsBody, PhysicsSystem

if TYPE_CHECKING:
    from .world import World


class _FloatRect(NamedTuple):
    left: float
    top: float
    width: float
    height: float


@dataclass(eq=False)
class Sprite:
    """A texture placed with position, rotation (degrees), scale and origin."""

    texture: Optional[Texture] = None
    texture_rect: tuple[int, int, int, int] = (0, 0, 0, 0)
    position: Vector2D = field(default_factory=Vector2D)
    rotation: float = 0.0
    scale: Vector2D = field(default_factory=lambda: Vector2D(1.0, 1.0))
    origin: Vector2D = field(default_factory=Vector2D)
    color: Color = Color.WHITE

    def _transform(self, x: float, y: float) -> tuple[float, float]:
        angle = math.radians(self.rotation)
        cos, sin = math.cos(angle), math.sin(angle)
        lx = (x - self.origin.x) * self.scale.x
        ly = (y - self.origin.y) * self.scale.y
        return (
            self.position.x + cos * lx - sin * ly,
            self.position.y + sin * lx + cos * ly,
        )

    def global_bounds(self) -> _FloatRect:
        """Axis-aligned bounds of the transformed sprite."""
        width, height = abs(self.texture_rect[2]), abs(self.texture_rect[3])
        points = [
            self._transform(x, y)
            for x, y in ((0, 0), (width, 0), (0, height), (width, height))
        ]
        xs = [p[0] for p in points]
        ys = [p[1] for p in points]
        return _FloatRect(min(xs), min(ys), max(xs) - min(xs), max(ys) - min(ys))

    def draw(self, surface: pygame.Surface) -> None:
        if self.texture is None:
            return
        image = self.texture.surface
        rect = pygame.Rect(self.texture_rect).clip(image.get_rect())
        if rect.width == 0 or rect.height == 0:
            return
        image = image.subsurface(rect)
        width = round(abs(rect.width * self.scale.x))
        height = round(abs(rect.height * self.scale.y))
        if width == 0 or height == 0:
            return
        image = pygame.transform.scale(image, (width, height)).convert_alpha(
        ) if pygame.display.get_init() and pygame.display.get_surface() else (
            pygame.transform.scale(image, (width, height))
        )
        image = image.copy()
        image.fill(self.color.as_tuple(), special_flags=pygame.BLEND_RGBA_MULT)
        image = pygame.transform.rotate(image, -self.rotation)
        bounds = self.global_bounds()
        center = (bounds.left + bounds.width / 2.0, bounds.top + bounds.height / 2.0)
        surface.blit(image, image.get_rect(center=(round(center[0]), round(center[1]))))


class Actor(GameObject):
    """An object in a world with a sprite, a team and optional physics."""

    NEUTRAL_TEAM_ID: ClassVar[int] = 255

    def __init__(self, world: World, texture_path: str = "") -> None:
        super().__init__()
        self._world = world
        self._has_begun_play = False
        self._sprite = Sprite()
        self._texture: Optional[Texture] = None
        self._physics_body: Optional[PhysicsBody] = None
        self._physics_enabled = False
        self._overlapping: weakref.WeakSet[Actor] = weakref.WeakSet()
        self.team_id = self.NEUTRAL_TEAM_ID
        self.set_texture(texture_path)

    @property
    def world(self) -> World:
        return self._world

    @property
    def sprite(self) -> Sprite:
        return self._sprite

    @property
    def texture(self) -> Optional[Texture]:
        return self._texture

    @property
    def physics_body(self) -> Optional[PhysicsBody]:
        return self._physics_body

    @property
    def physics_enabled(self) -> bool:
        return self._physics_enabled

    @property
    def position(self) -> Vector2D:
        return self._sprite.position

    @property
    def rotation(self) -> float:
        return self._sprite.rotation

    @property
    def overlapping_actors(self) -> tuple[Actor, ...]:
        """Actors whose overlap with this one has begun and not yet ended."""
        return tuple(self._overlapping)

    def begin_play_internal(self) -> None:
        if not self._has_begun_play:
            self.begin_play()
            self._has_begun_play = True

    def tick_internal(self, delta_time: float) -> None:
        if not self.pending_destroy:
            self.tick(delta_time)

    def begin_play(self) -> None:
        pass

    def tick(self, delta_time: float) -> None:
        pass

    def set_texture(self, texture_path: str) -> None:
        self._texture = AssetManager.get().load_texture(texture_path)
        if self._texture is None:
            return
        width, height = self._texture.size
        self._sprite.texture = self._texture
        self._sprite.texture_rect = (0, 0, width, height)
        self._center_pivot()

    def render(self, surface: pygame.Surface) -> None:
        if self.pending_destroy:
            return
        self._sprite.draw(surface)

    def set_actor_position(self, position: Vector2D) -> None:
        self._sprite.position = position
        self._update_physics_body_transform()

    def set_actor_rotation(self, rotation: float) -> None:
        self._sprite.rotation = rotation % 360.0
        self._update_physics_body_transform()

    def add_actor_position_offset(self, offset: Vector2D) -> None:
        self.set_actor_position(self.position + offset)

    def add_actor_rotation_offset(self, rotation: float) -> None:
        self.set_actor_rotation(self.rotation + rotation)

    def forward_vector(self) -> Vector2D:
        """Direction the actor faces; rotation 0 points up the screen."""
        return rotation_to_vector(self.rotation - 90.0)

    def right_vector(self) -> Vector2D:
        return rotation_to_vector(self.rotation)

    def global_bounds(self) -> _FloatRect:
        return self._sprite.global_bounds()

    def is_out_of_bounds(self, allowance: float) -> bool:
        """True once the actor is past the window edge by its size plus ``allowance``."""
        window_width, window_height = self._world.window_size()
        bounds = self.global_bounds()
        width, height = bounds.width, bounds.height
        position = self.position
        return (
            position.x < -width - allowance
            or position.x > window_width + width + allowance
            or position.y < -height - allowance
            or position.y > window_height + height + allowance
        )

    def set_physics_enabled(self, enabled: bool) -> None:
        self._physics_enabled = enabled
        if enabled:
            self._initialize_physics()
        else:
            self._deinitialize_physics()

    def on_actor_overlap(self, other: Optional[Actor]) -> None:
        if other is not None:
            self._overlapping.add(other)

    def on_actor_end_overlap(self, other: Optional[Actor]) -> None:
        if other is not None:
            self._overlapping.discard(other)

    def destroy(self) -> None:
        self._deinitialize_physics()
        super().destroy()

    def is_other_hostile(self, other: Actor) -> bool:
        if self.NEUTRAL_TEAM_ID in (self.team_id, other.team_id):
            return False
        return self.team_id != other.team_id

    def apply_damage(self, amount: float) -> None:
        pass

    def _initialize_physics(self) -> None:
        if self._physics_body is None:
            self._physics_body = PhysicsSystem.get().add_listener(self)

    def _deinitialize_physics(self) -> None:
        if self._physics_body is not None:
            PhysicsSystem.get().remove_listener(self._physics_body)
            self._physics_body = None

    def _update_physics_body_transform(self) -> None:
        if self._physics_body is not None:
            scale = PhysicsSystem.get().physics_scale
            self._physics_body.set_transform(
                self.position * scale, degrees_to_radians(self.rotation)
            )

    def _center_pivot(self) -> None:
        bounds = self._sprite.global_bounds()
        self._sprite.origin = Vector2D(bounds.width / 2.0, bounds.height / 2.0)