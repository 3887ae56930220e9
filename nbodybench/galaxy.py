"""Galaxy collision viewer state: initial data loading, camera and input handling."""

from __future__ import annotations

from dataclasses import dataclass, field
from itertools import islice
from os import PathLike

from nbodybench.sprites import RenderMode

SCALE_FACTOR = 1.5
VEL_FACTOR = 8.0
MASS_FACTOR = 120000.0
TIME_STEP = 0.001
APPROX = 4
INERTIA = 0.1

MAX_BODIES = 49152
DEFAULT_BODIES = 8192
BODY_MULTIPLE = 4096

SCREEN_WIDTH = 720.0
SCREEN_HEIGHT = 480.0

LEFT_BUTTON = 0
MIDDLE_BUTTON = 1
RIGHT_BUTTON = 2

_FIELDS_PER_RECORD = 7

Vec4 = tuple[float, float, float, float]


@dataclass
class GalaxyData:
    """Per-body positions (x, y, z, mass) and velocities (vx, vy, vz, w)."""

    positions: list[Vec4]
    velocities: list[Vec4]

    def __post_init__(self) -> None:
        if len(self.positions) != len(self.velocities):
            raise ValueError(
                f"{len(self.positions)} positions but {len(self.velocities)} velocities"
            )

    def __len__(self) -> int:
        return len(self.positions)


def _parse_record(line: str) -> list[float]:
    fields = line.split()
    if len(fields) < _FIELDS_PER_RECORD:
        raise ValueError(f"expected {_FIELDS_PER_RECORD} numbers, got {line.strip()!r}")
    return [float(value) for value in fields[:_FIELDS_PER_RECORD]]


def load_galaxy_data(
    path: str | PathLike[str],
    bodies: int,
    scale_factor: float = SCALE_FACTOR,
    vel_factor: float = VEL_FACTOR,
    mass_factor: float = MASS_FACTOR,
) -> GalaxyData:
    """Read a galaxy table, sampling every (MAX_BODIES // bodies)-th record.

    Each record holds mass, x, y, z, vx, vy, vz. Positions are scaled by
    scale_factor, masses by mass_factor and velocities by vel_factor.
    """
    if bodies <= 0 or bodies > MAX_BODIES:
        raise ValueError(f"number of bodies must be in 1..{MAX_BODIES}, got {bodies}")
    skip = MAX_BODIES // bodies
    positions: list[Vec4] = []
    velocities: list[Vec4] = []
    with open(path, encoding="utf-8") as handle:
        for body in range(bodies):
            chunk = list(islice(handle, skip))
            if len(chunk) < skip:
                raise ValueError(f"{path}: data ends before body {body}")
            mass, x, y, z, vx, vy, vz = _parse_record(chunk[-1])
            positions.append((x * scale_factor, y * scale_factor, z * scale_factor, mass * mass_factor))
            velocities.append((vx * vel_factor, vy * vel_factor, vz * vel_factor, 1.0))
    return GalaxyData(positions, velocities)


def interleave_particles(data: GalaxyData) -> GalaxyData:
    """Reorder bodies so that odd slots draw from the far side of the data set.

    Even bodies keep their place; odd bodies take the record found half a
    body-count of floats further along the flat position array.
    """
    n = len(data)
    size = 4 * n
    flat_pos = [c for position in data.positions for c in position]
    flat_vel = [c for velocity in data.velocities for c in velocity]
    positions: list[Vec4] = []
    velocities: list[Vec4] = []
    for i in range(n):
        idx = 4 * i
        offset = idx if i % 2 == 0 else (idx + n // 2) % size
        window = [(offset + k) % size for k in range(4)]
        positions.append(tuple(flat_pos[k] for k in window))  # type: ignore[arg-type]
        velocities.append(tuple(flat_vel[k] for k in window))  # type: ignore[arg-type]
    return GalaxyData(positions, velocities)


def choose_body_count(requested: int | None = None) -> int:
    """Validate a requested body count, applying the default and the upper limit."""
    if requested is None:
        return DEFAULT_BODIES
    if requested > MAX_BODIES:
        print(f"maximun number of bodies is {MAX_BODIES}.")
        requested = MAX_BODIES
    if requested <= 0 or requested % BODY_MULTIPLE != 0:
        raise ValueError(f"number of body must be mulples of {BODY_MULTIPLE}, got {requested}")
    return requested


@dataclass
class Camera:
    """A view transform that eases towards its target with some inertia."""

    scale_factor: float = SCALE_FACTOR
    inertia: float = INERTIA
    trans: list[float] = field(init=False)
    rot: list[float] = field(init=False)
    trans_lag: list[float] = field(init=False)
    rot_lag: list[float] = field(init=False)

    def __post_init__(self) -> None:
        self.reset()

    def reset(self) -> None:
        """Return target and eased transform to the starting view."""
        home = [0.0, 6 * self.scale_factor, -45 * self.scale_factor]
        self.trans = list(home)
        self.trans_lag = list(home)
        self.rot = [0.0, 0.0, 0.0]
        self.rot_lag = [0.0, 0.0, 0.0]

    def step(self) -> tuple[tuple[float, ...], tuple[float, ...]]:
        """Move the eased transform one frame towards the target and return it."""
        self.trans_lag = [
            lag + (target - lag) * self.inertia for target, lag in zip(self.trans, self.trans_lag)
        ]
        self.rot_lag = [
            lag + (target - lag) * self.inertia for target, lag in zip(self.rot, self.rot_lag)
        ]
        return tuple(self.trans_lag), tuple(self.rot_lag)


@dataclass
class GalaxyViewer:
    """Interactive state of the galaxy viewer: camera, draw settings and particles."""

    initial: GalaxyData | None = None
    scale_factor: float = SCALE_FACTOR
    step_size: float = TIME_STEP
    approx: int = APPROX
    draw_mode: RenderMode = RenderMode.SPRITES
    point_size: float = 1.0
    width: float = SCREEN_WIDTH
    height: float = SCREEN_HEIGHT
    camera: Camera = field(init=False)
    sprite_size: float = field(init=False)
    particles: GalaxyData | None = field(init=False)
    button_state: int = field(default=0, init=False)
    ox: int = field(default=0, init=False)
    oy: int = field(default=0, init=False)
    offset: int = field(default=0, init=False)

    def __post_init__(self) -> None:
        self.camera = Camera(self.scale_factor)
        self.sprite_size = self.scale_factor * 0.25
        self.particles = self._fresh_particles()

    def _fresh_particles(self) -> GalaxyData | None:
        if self.initial is None:
            return None
        return GalaxyData(list(self.initial.positions), list(self.initial.velocities))

    def mouse(self, button: int, pressed: bool, x: int, y: int) -> None:
        """Record a button press or release at (x, y)."""
        self.button_state = button + 1 if pressed else 0
        self.ox, self.oy = x, y

    def motion(self, x: int, y: int) -> None:
        """Drag to (x, y): zoom, pan or rotate depending on the held button."""
        dx = float(x - self.ox)
        dy = float(y - self.oy)
        trans = self.camera.trans
        if self.button_state == 3:
            trans[2] += (dy / 100.0) * 0.5 * abs(trans[2])
        elif self.button_state & 2:
            trans[0] += 0.005 * abs(trans[2]) * dx * (SCREEN_WIDTH / self.width) / 2.0
            trans[1] -= 0.005 * abs(trans[2]) * dy * (SCREEN_HEIGHT / self.height) / 2.0
        elif self.button_state & 1:
            self.camera.rot[0] += dy / 5.0
            self.camera.rot[1] += dx / 5.0
        self.ox, self.oy = x, y

    def key(self, key: str) -> bool:
        """Handle a key press; return False when the viewer should quit."""
        if key in ("\033", "q"):
            return False
        if key == "r":
            self.camera.reset()
            self.particles = self._fresh_particles()
        elif key == "d":
            self.draw_mode = self.draw_mode.next()
        elif key in ("=", "-"):
            sign = 1.0 if key == "=" else -1.0
            self.point_size = _clamp(
                self.point_size + sign * self.scale_factor * 0.0002, 1.0, self.scale_factor * 1.0
            )
            self.sprite_size = _clamp(
                self.sprite_size + sign * self.scale_factor * 0.02, 0.1, self.scale_factor * 2.0
            )
        return True

    def reshape(self, width: float, height: float) -> None:
        """Adapt point and sprite sizes to a new window size."""
        ratio = width / self.width
        self.sprite_size *= ratio
        self.point_size *= ratio
        self.width = width
        self.height = height

    def advance_offset(self) -> int:
        """Move to the next of the approx interleaved update slices and return it."""
        self.offset = (self.offset + 1) % self.approx
        return self.offset


def _clamp(value: float, low: float, high: float) -> float:
    if value > high:
        value = high
    if value < low:
        value = low
    return value