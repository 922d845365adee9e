# volition

Building blocks for a small software 3D renderer, in plain Python with no
dependencies outside the standard library.

## Modules

- `volition.fixed`: signed 32-bit fixed-point helpers in 16.16, 10.22 and
  4.28 formats. `wrap_i32` wraps any integer into the signed 32-bit range;
  `int_to_fx16`, `float_to_fx16`, `fx16_to_int`, `fx16_to_int_rounded`,
  `mul_fx16`, `div_fx16`, `fx16_whole_part`, `fx16_decimal_part`,
  `int_to_fx22`, `fx22_to_int`, `int_to_fx28` and `fx28_to_int` all return
  wrapped 32-bit integers. `fx16_to_float` gives a float and `format_fx16` a
  `%f`-style string. `div_fx16` truncates toward zero and raises
  `ZeroDivisionError` on a zero divisor and `OverflowError` when the quotient
  does not fit in 32 bits.
- `volition.mathutil`: `fast_sin` and `fast_cos` (degrees, from 0..360
  lookup tables with linear interpolation), `sin_deg`, `cos_deg`, `tan_deg`,
  `deg_to_rad`, `rad_to_deg`, the integer distance estimates `fast_dist_2d`
  and `fast_dist_3d`, `sign`, `is_equal_float` (tolerance 1e-3), `fmod`,
  `random_below` and `random_between`.
- `volition.vector`: `Vector2`, `Vector3` and `Vector4`. `Vector4` is
  homogeneous: its arithmetic sets `w` back to 1, and `divide_by_w` does the
  perspective divide. Normalizing a vector shorter than 1e-5 leaves it
  unchanged (`normalize`) or returns the zero vector (`normalized`).
- `volition.matrix`: the immutable `Matrix44` with `identity`, `zeros`,
  `translation`, `rotation_xyz` (degrees, X then Y then Z), `@`
  multiplication, `transform` for row vectors, and `inverse` for affine
  matrices (raises `ValueError` when singular). `identity_matrix` and
  `zero_matrix` build lists of rows of any size.
- `volition.geometry`: `Quat`, `ParamLine3`, `Plane3`, `Polar2`,
  `Cylindrical3`, `Spherical3`, `Rect` and `RelativeRect`.
- `volition.color`: the packed 32-bit `ColorARGB` with `a`, `r`, `g`, `b`
  properties, `map_argb32`, `map_xrgb32`, and the constants `TRANSPARENT`,
  `WHITE`, `BLACK`, `RED`, `GREEN`, `BLUE`.
- `volition.vertex`: `Vertex`, `Poly`, `PolyFace`, the flags `VertexAttr`
  and `PolyState`, and the `TransformType` enum. `is_renderable` and
  `needs_lighting` test a polygon's state bits.
- `volition.interpolation`: `Texture`, `InterpolationContext`, the no-op base
  `Interpolator` and `modulate`, which multiplies two colours channel by
  channel.
- `volition.shading`: `FlatInterpolator`, `AlphaInterpolator`,
  `EmissiveInterpolator` and `GouraudInterpolator`.
- `volition.affine`: `AffineTextureInterpolator`.
- `volition.perspective`: `LinearPiecewiseTextureInterpolator`,
  `PerspectiveCorrectTextureInterpolator` and
  `BilinearPerspectiveTextureInterpolator`, built on
  `PerspectiveTextureInterpolator`.
- `volition.events`: `EventId`, `Event` and the per-frame `EventBus`.
- `volition.timing`: `FrameTimer`, which tracks delta time, fixed-step
  counts, a 10-frame FPS average and optional frame limiting. Its clock and
  sleep functions can be replaced.
- `volition.config`: `Config`, `WindowSpecification`, `RenderSpecification`,
  `WindowFlags` and `open_process`.
- `volition.debuglog`: `DebugLog`, which writes ANSI-coloured messages to the
  console and to a log file (`Log.txt` by default) after `start_up`, plus
  `format_message` and `ansi_color`.
- `volition.locks`: `SpinLock`, `ReentrantLock`, the reader/writer
  `PushLock`, and `UnnecessaryLock`, which does not block and raises
  `LockStateError` when a section is entered twice at once.

## Install

    pip install .

To run the tests:

    pip install ".[test]"
    pytest

## Examples

Fixed-point arithmetic:

    from volition.fixed import int_to_fx16, mul_fx16, fx16_to_int

    a = int_to_fx16(3)
    b = int_to_fx16(4)
    assert fx16_to_int(mul_fx16(a, b)) == 12

Transforming a point:

    from volition.vector import Vector4
    from volition.matrix import Matrix44

    m = Matrix44.translation(Vector4(1.0, 2.0, 3.0)) @ Matrix44.identity()
    p = m.transform(Vector4(0.0, 0.0, 0.0))
    # p == Vector4(1.0, 2.0, 3.0, 1.0)

Shading one pixel with a flat colour:

    from volition.color import ColorARGB, WHITE, map_xrgb32
    from volition.interpolation import InterpolationContext
    from volition.shading import FlatInterpolator

    context = InterpolationContext(pixel=WHITE)
    context.lit_color[0] = ColorARGB(map_xrgb32(128, 64, 32))
    flat = FlatInterpolator(context)
    flat.start()
    flat.process_pixel()
    # context.pixel now holds the tinted colour

Reading settings from command-line style arguments:

    from volition.config import Config

    config = Config()
    config.start_up(["game", "/Size", "800", "600", "/LimitFPS", "1"])
    print(config.window_spec.desired_size)   # Vector2(x=800, y=600)
    print(config.render_spec.limit_fps)      # True

Options start with `/` and have a short and a long form: `/l` `/Launcher`,
`/s` `/Size` (width height), `/wtf` `/WindowTypeFullscreen`, `/wtb`
`/WindowTypeBorderless`, `/wtw` `/WindowTypeWindowed`, `/tfps` `/TargetFPS`,
`/ffps` `/FixedFPS`, `/mmm` `/MaxMipMaps`, `/lfps` `/LimitFPS` and `/bfr`
`/BackfaceRemoval` (each taking one number). `start_up` logs every argument
and warns about unknown options or missing parameters through its
`DebugLog`, which prints to standard output. If `/Launcher` was given,
`shut_down` starts `Launcher.exe` with `open_process`.

## What this package does not do

It has no window, no frame loop and no triangle rasterizer. The interpolators
compute per-edge, per-span and per-pixel values for a triangle, but walking a
triangle's scanlines and calling them is left to the caller. `EventBus` does
not read events from the operating system: the caller passes them to
`update`. There is no command-line program to run.