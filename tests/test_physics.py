from types import SimpleNamespace

import pytest

from spaceprojeckt.mathutil import Vector2D
from spaceprojeckt.physics import PhysicsBody, PhysicsSystem


class FakeActor:
    def __init__(self, x, y, size=10.0):
        self.position = Vector2D(x, y)
        self.rotation = 0.0
        self.size = size
        self.pending_destroy = False
        self.overlaps = []
        self.ended = []

    def global_bounds(self):
        return SimpleNamespace(width=self.size, height=self.size)

    def on_actor_overlap(self, other):
        self.overlaps.append(other)

    def on_actor_end_overlap(self, other):
        self.ended.append(other)


@pytest.fixture
def system():
    return PhysicsSystem()


def test_get_returns_shared_instance():
    shared = PhysicsSystem.get()
    actor = FakeActor(-9000, -9000)
    body = shared.add_listener(actor)
    assert body in PhysicsSystem.get().bodies
    shared.remove_listener(body)
    shared.remove_pending_listeners()
    assert body not in PhysicsSystem.get().bodies


def test_physics_scale(system):
    assert system.physics_scale == pytest.approx(0.01)


def test_add_listener_creates_body(system):
    actor = FakeActor(100, 200)
    body = system.add_listener(actor)
    assert body.actor is actor
    assert body in system.bodies
    assert body.position.x == pytest.approx(actor.position.x * system.physics_scale)
    assert body.half_width == pytest.approx(actor.size / 2 * system.physics_scale)


def test_add_listener_refuses_pending_actor(system):
    actor = FakeActor(0, 0)
    actor.pending_destroy = True
    assert system.add_listener(actor) is None
    assert system.bodies == ()


def test_overlapping_bodies_notify_each_other(system):
    a, b = FakeActor(100, 100), FakeActor(105, 100)
    system.add_listener(a)
    system.add_listener(b)
    system.step(1 / 60)
    assert a.overlaps == [b]
    assert b.overlaps == [a]


def test_overlap_reported_once(system):
    a, b = FakeActor(100, 100), FakeActor(105, 100)
    system.add_listener(a)
    system.add_listener(b)
    system.step(1 / 60)
    system.step(1 / 60)
    assert len(a.overlaps) == 1


def test_separate_bodies_do_not_overlap(system):
    a, b = FakeActor(100, 100), FakeActor(300, 100)
    system.add_listener(a)
    system.add_listener(b)
    system.step(1 / 60)
    assert a.overlaps == []
    assert b.overlaps == []


def test_moving_apart_ends_contact(system):
    a, b = FakeActor(100, 100), FakeActor(105, 100)
    body_a = system.add_listener(a)
    system.add_listener(b)
    system.step(1 / 60)
    body_a.set_transform(Vector2D(10, 10), 0.0)
    system.step(1 / 60)
    assert a.ended == [b]
    assert b.ended == [a]


def test_removed_body_ends_contact_after_step(system):
    a, b = FakeActor(100, 100), FakeActor(105, 100)
    body_a = system.add_listener(a)
    system.add_listener(b)
    system.step(1 / 60)
    system.remove_listener(body_a)
    assert body_a in system.bodies
    system.step(1 / 60)
    assert body_a not in system.bodies
    assert b.ended == [a]


def test_pending_actor_is_not_notified(system):
    a, b = FakeActor(100, 100), FakeActor(105, 100)
    system.add_listener(a)
    system.add_listener(b)
    a.pending_destroy = True
    system.step(1 / 60)
    assert a.overlaps == []
    assert b.overlaps == [a]


def test_rotated_boxes_use_orientation():
    a = PhysicsBody(FakeActor(0, 0), Vector2D(0.0, 0.0), 0.0, 1.0, 0.1)
    b = PhysicsBody(FakeActor(0, 0), Vector2D(0.0, 0.5), 0.0, 1.0, 0.1)
    system = PhysicsSystem()
    system._bodies = {a: None, b: None}
    system.step(0.0)
    assert a.actor.overlaps == []
    a.set_transform(Vector2D(0.0, 0.0), 1.5707963)
    system.step(0.0)
    assert a.actor.overlaps == [b.actor]