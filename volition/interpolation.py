"""Scanline interpolation: textures, per-triangle context and the no-op base interpolator."""

from dataclasses import dataclass, field

from .color import ColorARGB, map_xrgb32
from .fixed import wrap_i32
from .vertex import Vertex


def _trunc_div(a, b):
    """Signed 32-bit division truncating toward zero; raises ZeroDivisionError on zero."""
    quotient = abs(a) // abs(b)
    return wrap_i32(quotient if (a < 0) == (b < 0) else -quotient)


def _edge_start(vtx, start, end, y_diff):
    """Start values and per-row deltas for every channel along one triangle edge."""
    values = list(vtx[start])
    deltas = [_trunc_div(e - s, y_diff) for s, e in zip(vtx[start], vtx[end])]
    return values, deltas


def _span_deltas(left, right, x_diff):
    """Per-pixel deltas across a span; the whole difference when the span is empty."""
    if x_diff > 0:
        return [_trunc_div(r - l, x_diff) for l, r in zip(left, right)]
    return [wrap_i32(r - l) for l, r in zip(left, right)]


def _step(values, deltas, count):
    """Advance every channel by ``count`` steps of its delta."""
    return [wrap_i32(v + wrap_i32(d * count)) for v, d in zip(values, deltas)]


def modulate(color, pixel):
    """Multiply two colours channel by channel in 8-bit fixed point; the result is opaque."""
    return ColorARGB(
        map_xrgb32(
            (color.r * pixel.r) >> 8,
            (color.g * pixel.g) >> 8,
            (color.b * pixel.b) >> 8,
        )
    )


@dataclass
class Texture:
    """A 32-bit ARGB image; ``pitch`` is the row length in pixels."""

    width: int
    height: int
    pixels: list
    pitch: int = 0

    def __post_init__(self):
        if self.pitch == 0:
            self.pitch = self.width
        if self.width <= 0 or self.height <= 0:
            raise ValueError("texture dimensions must be positive")
        if len(self.pixels) < self.pitch * self.height:
            raise ValueError("texture has fewer pixels than pitch * height")

    def pixel(self, index):
        """The texel at a linear index into the pixel buffer."""
        if not 0 <= index < len(self.pixels):
            raise IndexError(f"texel index {index} out of range")
        return ColorARGB(self.pixels[index])


def _three_colors():
    return [ColorARGB() for _ in range(3)]


@dataclass
class InterpolationContext:
    """Everything an interpolator reads or writes while a triangle is rasterised.

    ``textures`` holds the mip levels of the material's texture; ``z`` is the
    current pixel's depth in 4.28 fixed point.
    """

    vtx: list = field(default_factory=lambda: [Vertex() for _ in range(3)])
    vtx_indices: list = field(default_factory=lambda: [0, 1, 2])
    lit_color: list = field(default_factory=_three_colors)
    original_color: ColorARGB = field(default_factory=ColorARGB)
    pixel: ColorARGB = field(default_factory=ColorARGB)
    buffer: list = field(default_factory=list)
    buffer_pitch: int = 0
    x: int = 0
    y: int = 0
    z: int = 0
    textures: list = field(default_factory=list)
    mip_mapping_level: int = 0

    def texture(self):
        """The texture at the current mip level."""
        if not self.textures:
            raise ValueError("context has no texture")
        return self.textures[self.mip_mapping_level]

    def buffer_pixel(self):
        """The colour already in the frame buffer at (x, y)."""
        return ColorARGB(self.buffer[self.y * self.buffer_pitch + self.x])


class Interpolator:
    """Base interpolator: every stage does nothing until a subclass overrides it."""

    def __init__(self, context=None):
        self.context = context

    def start(self):
        """Prepare per-triangle values."""

    def compute_y_starts_and_deltas_left(self, y_diff_left, left_start_vtx, left_end_vtx):
        """Set up the left edge."""

    def compute_y_starts_and_deltas_right(self, y_diff_right, right_start_vtx, right_end_vtx):
        """Set up the right edge."""

    def compute_y_starts_and_deltas(
        self, y_diff_left, left_start_vtx, left_end_vtx, y_diff_right, right_start_vtx, right_end_vtx
    ):
        """Set up both edges, left first."""
        self.compute_y_starts_and_deltas_left(y_diff_left, left_start_vtx, left_end_vtx)
        self.compute_y_starts_and_deltas_right(y_diff_right, right_start_vtx, right_end_vtx)

    def compute_x_starts_and_deltas(self, x_diff, z_left, z_right):
        """Set up a horizontal span."""

    def swap_left_right(self):
        """Exchange left and right edges."""

    def process_pixel(self):
        """Update the context's pixel."""

    def interpolate_x(self, x):
        """Step along the span by ``x`` pixels."""

    def interpolate_y_left(self, y_left):
        """Step the left edge by ``y_left`` rows."""

    def interpolate_y_right(self, y_right):
        """Step the right edge by ``y_right`` rows."""

    def interpolate_y(self, y_left, y_right):
        """Step both edges, left first."""
        self.interpolate_y_left(y_left)
        self.interpolate_y_right(y_right)