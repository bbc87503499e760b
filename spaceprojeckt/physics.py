"""Sensor-only collision detection between actors' bounding boxes."""

from __future__ import annotations

import itertools
import math
import weakref
from typing import TYPE_CHECKING, Any, ClassVar, Optional

from .mathutil import Vector2D, degrees_to_radians

if TYPE_CHECKING:
    from .actor import Actor


class PhysicsBody:
    """An oriented box in physics units that belongs to an actor."""

    def __init__(
        self,
        actor: Any,
        position: Vector2D,
        angle: float,
        half_width: float,
        half_height: float,
    ) -> None:
        self._actor = weakref.ref(actor)
        self.position = position
        self.angle = angle
        self.half_width = half_width
        self.half_height = half_height

    @property
    def actor(self) -> Optional[Actor]:
        return self._actor()

    def set_transform(self, position: Vector2D, angle: float) -> None:
        self.position = position
        self.angle = angle

    def corners(self) -> list[tuple[float, float]]:
        cos, sin = math.cos(self.angle), math.sin(self.angle)
        hx, hy = self.half_width, self.half_height
        px, py = self.position.x, self.position.y
        return [
            (px + cos * dx - sin * dy, py + sin * dx + cos * dy)
            for dx, dy in ((-hx, -hy), (hx, -hy), (hx, hy), (-hx, hy))
        ]


def _overlaps(a: PhysicsBody, b: PhysicsBody) -> bool:
    corners_a, corners_b = a.corners(), b.corners()
    for angle in (a.angle, b.angle):
        cos, sin = math.cos(angle), math.sin(angle)
        for ax, ay in ((cos, sin), (-sin, cos)):
            proj_a = [x * ax + y * ay for x, y in corners_a]
            proj_b = [x * ax + y * ay for x, y in corners_b]
            if max(proj_a) <= min(proj_b) or max(proj_b) <= min(proj_a):
                return False
    return True


def _begin_contact(a: PhysicsBody, b: PhysicsBody) -> None:
    actor_a, actor_b = a.actor, b.actor
    if actor_a is not None and not actor_a.pending_destroy:
        actor_a.on_actor_overlap(actor_b)
    if actor_b is not None and not actor_b.pending_destroy:
        actor_b.on_actor_overlap(actor_a)


def _end_contact(a: PhysicsBody, b: PhysicsBody) -> None:
    actor_a, actor_b = a.actor, b.actor
    if actor_a is not None and not actor_a.pending_destroy:
        actor_a.on_actor_end_overlap(actor_b)
    if actor_b is not None and not actor_b.pending_destroy:
        actor_b.on_actor_end_overlap(actor_a)


class PhysicsSystem:
    """Tracks actor bodies and reports when they start and stop overlapping."""

    _instance: ClassVar[Optional[PhysicsSystem]] = None

    def __init__(self) -> None:
        # Physics works in metres; one pixel is a centimetre.
        self.physics_scale = 0.01
        self._bodies: dict[PhysicsBody, None] = {}
        self._pending: dict[PhysicsBody, None] = {}
        self._contacts: dict[frozenset, tuple[PhysicsBody, PhysicsBody]] = {}

    @classmethod
    def get(cls) -> PhysicsSystem:
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    @property
    def bodies(self) -> tuple[PhysicsBody, ...]:
        return tuple(self._bodies)

    def step(self, delta_time: float) -> None:
        """Remove pending bodies, then fire begin and end overlap events."""
        self.remove_pending_listeners()
        touching: dict[frozenset, tuple[PhysicsBody, PhysicsBody]] = {}
        for a, b in itertools.combinations(list(self._bodies), 2):
            if _overlaps(a, b):
                touching[frozenset((a, b))] = (a, b)
        for key, pair in list(self._contacts.items()):
            if key not in touching:
                del self._contacts[key]
                _end_contact(*pair)
        for key, pair in touching.items():
            if key not in self._contacts:
                self._contacts[key] = pair
                _begin_contact(*pair)

    def add_listener(self, actor: Actor) -> Optional[PhysicsBody]:
        """Create a body matching the actor's bounds; None if it is being destroyed."""
        if actor.pending_destroy:
            return None
        scale = self.physics_scale
        bounds = actor.global_bounds()
        body = PhysicsBody(
            actor,
            actor.position * scale,
            degrees_to_radians(actor.rotation),
            bounds.width / 2.0 * scale,
            bounds.height / 2.0 * scale,
        )
        self._bodies[body] = None
        return body

    def remove_listener(self, body: PhysicsBody) -> None:
        """Schedule ``body`` for removal at the start of the next step."""
        self._pending[body] = None

    def remove_pending_listeners(self) -> None:
        for body in list(self._pending):
            for key, pair in list(self._contacts.items()):
                if body in key:
                    del self._contacts[key]
                    _end_contact(*pair)
            self._bodies.pop(body, None)
        self._pending.clear()