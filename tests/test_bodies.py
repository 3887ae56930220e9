import random

import pytest

from nbodybench.bodies import Body, random_bodies, random_integer_bodies


def test_body_defaults_to_rest():
    body = Body(1.0, 2.0, 3.0, 5.0)
    assert (body.vx, body.vy, body.vz) == (0.0, 0.0, 0.0)
    assert (body.x, body.y, body.z, body.mass) == (1.0, 2.0, 3.0, 5.0)


def test_random_bodies_count_and_mass():
    bodies = random_bodies(50, random.Random(1))
    assert len(bodies) == 50
    assert all(b.mass == 1e10 for b in bodies)


def test_random_bodies_within_cube_and_at_rest():
    for b in random_bodies(200, random.Random(2)):
        assert 0.0 <= b.x <= 100.0
        assert 0.0 <= b.y <= 100.0
        assert 0.0 <= b.z <= 100.0
        assert (b.vx, b.vy, b.vz) == (0.0, 0.0, 0.0)


def test_random_bodies_reproducible_with_seed():
    first = random_bodies(10, random.Random(7))
    second = random_bodies(10, random.Random(7))
    assert len(first) == 10
    assert [(b.x, b.y, b.z) for b in first] == [(b.x, b.y, b.z) for b in second]
    other = random_bodies(10, random.Random(8))
    assert [(b.x, b.y, b.z) for b in first] != [(b.x, b.y, b.z) for b in other]


def test_random_integer_bodies_integral_coordinates():
    bodies = random_integer_bodies(200, random.Random(3))
    assert len(bodies) == 200
    for b in bodies:
        assert b.mass == 1e12
        for coord in (b.x, b.y, b.z):
            assert coord == int(coord)
            assert 0 <= coord < 1000
        assert (b.vx, b.vy, b.vz) == (0.0, 0.0, 0.0)


def test_random_integer_bodies_reproducible_with_seed():
    first = random_integer_bodies(10, random.Random(9))
    second = random_integer_bodies(10, random.Random(9))
    assert len(first) == 10
    assert [(b.x, b.y, b.z) for b in first] == [(b.x, b.y, b.z) for b in second]


def test_zero_bodies():
    assert random_bodies(0) == []
    assert random_integer_bodies(0) == []


@pytest.mark.parametrize("factory", [random_bodies, random_integer_bodies])
def test_negative_count_rejected(factory):
    with pytest.raises(ValueError):
        factory(-1)