# nbodybench

Building blocks for gravitational N-body work: point-mass bodies with
random starting configurations, and the parts of an interactive galaxy
viewer that need no graphics library. These are data loading, camera
easing, mouse and keyboard handling, frame-rate counting and the sprite
splat texture.

## Installation

```
pip install .
```

To run the test suite:

```
pip install .[test]
pytest
```

## Modules

`nbodybench.bodies`
: `Body` is a dataclass with position (`x`, `y`, `z`), `mass` and velocity
  (`vx`, `vy`, `vz`, which default to 0).
  `random_bodies(n, rng=None)` places `n` bodies at rest uniformly in a
  100-unit cube, each with mass 1e10.
  `random_integer_bodies(n, rng=None)` places them on integer coordinates in
  [0, 1000), each with mass 1e12.
  Both draw from the `random.Random` you pass, or from a fresh one if you
  pass none. Both raise `ValueError` for a negative count.

`nbodybench.sprites`
: `RenderMode` is an `IntEnum` with `POINTS`, `SPRITES` and `SPRITES_COLOR`.
  `RenderMode.next()` returns the following mode and wraps back to the first.
  `eval_hermite(pa, pb, va, vb, u)` evaluates a cubic Hermite curve.
  `create_gaussian_map(n)` returns an n×n RGBA image as `bytes`. It is a
  radial falloff that is bright at the centre, and all four channels of a
  pixel hold the same value.
  `read_text_file(path)` returns a file's text and raises `ValueError` if
  the file is empty.

`nbodybench.framerate`
: `FrameRateCounter(title="OpenGL App", refresh_time=1.0, clock=time.monotonic)`
  counts frames. Each `update()` records one frame. Once more than
  `refresh_time` seconds have gathered, `update()` recomputes `fps`, sets
  `window_title` to `"<title> : <fps> fps"` and returns that title. At all
  other times it returns `None`. `set_title(title)` changes the title.

`nbodybench.galaxy`
: `load_galaxy_data(path, bodies, scale_factor=1.5, vel_factor=8.0, mass_factor=120000.0)`
  reads a whitespace-separated table whose rows are `mass x y z vx vy vz`.
  It takes every (49152 // `bodies`)-th row and returns a `GalaxyData` of
  scaled `positions` (x, y, z, mass) and `velocities` (vx, vy, vz, 1.0).
  `interleave_particles(data)` reorders the bodies the way the viewer lays
  them out.
  `choose_body_count(requested=None)` returns 8192 by default. It caps the
  count at 49152 and requires a multiple of 4096.
  `Camera` eases its lagged translation and rotation towards the target on
  each `step()`, and `reset()` returns it to the starting view.
  `GalaxyViewer` keeps the viewer state:
  - `mouse` and `motion` drive zoom, pan and rotation.
  - `key` handles the keys `q`/Esc (quit, returns `False`), `r` (reset),
    `d` (cycle the draw mode) and `=`/`-` (grow or shrink the point and
    sprite sizes).
  - `reshape` rescales the sizes to a new window width.
  - `advance_offset` steps through the `approx` update slices.

## What this package does not do

The package has no force integrator and no benchmark command or CSV report.
Bodies can be created, but nothing here advances them in time. The galaxy
viewer classes hold state only. They do not open a window, draw particles
or run a simulation on a GPU.