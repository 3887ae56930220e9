"""Particle display modes and the Gaussian splat texture used to draw sprites."""

from __future__ import annotations

import math
from enum import IntEnum
from os import PathLike


class RenderMode(IntEnum):
    """How particles are drawn: plain points, textured sprites, or coloured sprites."""

    POINTS = 0
    SPRITES = 1
    SPRITES_COLOR = 2

    def next(self) -> RenderMode:
        """The mode that follows this one, wrapping back to the first."""
        members = list(type(self))
        return members[(members.index(self) + 1) % len(members)]


def eval_hermite(pa: float, pb: float, va: float, vb: float, u: float) -> float:
    """Evaluate the cubic Hermite curve with end points pa, pb and tangents va, vb at u."""
    u2 = u * u
    u3 = u2 * u
    b0 = 2 * u3 - 3 * u2 + 1
    b1 = -2 * u3 + 3 * u2
    b2 = u3 - 2 * u2 + u
    b3 = u3 - u
    return b0 * pa + b1 * pb + b2 * va + b3 * vb


def create_gaussian_map(n: int) -> bytes:
    """An n-by-n RGBA image of a radial falloff, bright at the centre and dark at the rim.

    Each pixel's four channels hold the same value. Rows run from y = -1 and
    columns from x = -1, stepping by 2/n.
    """
    if n < 0:
        raise ValueError(f"texture resolution must not be negative, got {n}")
    if n == 0:
        return b""
    incr = 2.0 / n
    out = bytearray()
    y = -1.0
    for _ in range(n):
        y2 = y * y
        x = -1.0
        for _ in range(n):
            dist = min(math.sqrt(x * x + y2), 1.0)
            value = int(eval_hermite(1.0, 0.0, 0.0, 0.0, dist) * 255)
            out.extend((value, value, value, value))
            x += incr
        y += incr
    return bytes(out)


def read_text_file(path: str | PathLike[str]) -> str:
    """Return the whole content of a text file; an empty file is an error."""
    with open(path, encoding="utf-8") as handle:
        content = handle.read()
    if not content:
        raise ValueError(f"could not load in file {path}")
    return content