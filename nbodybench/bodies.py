"""Point-mass bodies and random initial configurations."""

from __future__ import annotations

import random
from dataclasses import dataclass

UNIFORM_BODY_MASS = 1e10
INTEGER_BODY_MASS = 1e12
UNIFORM_EXTENT = 100.0
INTEGER_EXTENT = 1000


@dataclass
class Body:
    """A point mass with a position and a velocity."""

    x: float
    y: float
    z: float
    mass: float
    vx: float = 0.0
    vy: float = 0.0
    vz: float = 0.0


def _check_count(n: int) -> None:
    if n < 0:
        raise ValueError(f"number of bodies must not be negative, got {n}")


def random_bodies(n: int, rng: random.Random | None = None) -> list[Body]:
    """Bodies at rest, spread uniformly over a 100-unit cube, each of mass 1e10."""
    _check_count(n)
    rng = rng if rng is not None else random.Random()
    return [
        Body(
            x=rng.uniform(0.0, UNIFORM_EXTENT),
            y=rng.uniform(0.0, UNIFORM_EXTENT),
            z=rng.uniform(0.0, UNIFORM_EXTENT),
            mass=UNIFORM_BODY_MASS,
        )
        for _ in range(n)
    ]


def random_integer_bodies(n: int, rng: random.Random | None = None) -> list[Body]:
    """Bodies at rest on integer coordinates in [0, 1000), each of mass 1e12."""
    _check_count(n)
    rng = rng if rng is not None else random.Random()
    return [
        Body(
            x=float(rng.randrange(INTEGER_EXTENT)),
            y=float(rng.randrange(INTEGER_EXTENT)),
            z=float(rng.randrange(INTEGER_EXTENT)),
            mass=INTEGER_BODY_MASS,
        )
        for _ in range(n)
    ]