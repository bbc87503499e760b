import pytest

from spaceprojeckt.explosion import Explosion
from spaceprojeckt.mathutil import Color, Vector2D
from spaceprojeckt.particle import Particle
from spaceprojeckt.world import World


class _App:
    def window_size(self):
        return (600, 980)


@pytest.fixture
def world():
    return World(_App())


def test_default_explosion_spawns_twenty_particles(world):
    particles = Explosion().spawn_explosion(world, Vector2D(40.0, 50.0))
    assert len(particles) == 20
    assert list(world.pending_actors) == particles
    assert all(isinstance(p, Particle) for p in particles)


def test_particles_start_at_position_with_colour(world):
    position = Vector2D(40.0, 50.0)
    particles = Explosion().spawn_explosion(world, position)
    assert all(p.position == position for p in particles)
    assert all(p.sprite.color == Color(255, 111, 0, 255) for p in particles)


def test_particle_values_within_ranges(world):
    explosion = Explosion(
        particle_amount=10,
        max_size=2.0,
        min_size=1.0,
        max_lifetime=4.0,
        min_lifetime=2.0,
        max_speed=50.0,
        min_speed=20.0,
        color=Color.RED,
    )
    particles = explosion.spawn_explosion(world, Vector2D())
    assert len(particles) == 10
    for particle in particles:
        assert 2.0 <= particle.lifetime <= 4.0
        assert 1.0 <= particle.sprite.scale.x <= 2.0
        assert particle.sprite.scale.x == particle.sprite.scale.y
        assert particle.velocity.length() <= 50.0 + 1e-6
        assert particle.sprite.color == Color.RED


def test_zero_particles_spawns_nothing(world):
    assert Explosion(particle_amount=0).spawn_explosion(world, Vector2D()) == []
    assert world.pending_actors == ()