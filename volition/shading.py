"""Colour interpolators: flat, alpha blending, emissive and Gouraud."""

from .color import ColorARGB, map_xrgb32
from .fixed import FX16_ROUND_UP, fx16_to_int, int_to_fx16, wrap_i32
from .interpolation import Interpolator, _edge_start, _span_deltas, _step, modulate


class FlatInterpolator(Interpolator):
    """Tints every pixel with the first vertex's lit colour."""

    def __init__(self, context=None):
        super().__init__(context)
        self.color = ColorARGB()

    def start(self):
        self.color = self.context.lit_color[0]

    def process_pixel(self):
        self.context.pixel = modulate(self.color, self.context.pixel)


class AlphaInterpolator(Interpolator):
    """Blends the pixel over the frame buffer using the first lit colour's alpha."""

    def __init__(self, context=None):
        super().__init__(context)
        self.alpha = 0

    def start(self):
        self.alpha = self.context.lit_color[0].a

    def process_pixel(self):
        alpha = self.alpha
        inverse = 255 - alpha
        pixel = self.context.pixel
        under = self.context.buffer_pixel()
        self.context.pixel = ColorARGB(
            map_xrgb32(
                (alpha * pixel.r + inverse * under.r) >> 8,
                (alpha * pixel.g + inverse * under.g) >> 8,
                (alpha * pixel.b + inverse * under.b) >> 8,
            )
        )


class EmissiveInterpolator(Interpolator):
    """Tints every pixel with the unlit original colour."""

    def __init__(self, context=None):
        super().__init__(context)
        self.color = ColorARGB()

    def start(self):
        self.color = self.context.original_color

    def process_pixel(self):
        self.context.pixel = modulate(self.color, self.context.pixel)


class GouraudInterpolator(Interpolator):
    """Interpolates lit vertex colours across the triangle in 16.16 fixed point.

    Each value is a list of [r, g, b] channels.
    """

    def __init__(self, context=None):
        super().__init__(context)
        self.vtx = [[0, 0, 0] for _ in range(3)]
        self.value = [0, 0, 0]
        self.left = [0, 0, 0]
        self.right = [0, 0, 0]
        self.delta_left = [0, 0, 0]
        self.delta_right = [0, 0, 0]
        self.delta_x = [0, 0, 0]

    def start(self):
        self.vtx = [
            [int_to_fx16(c.r), int_to_fx16(c.g), int_to_fx16(c.b)]
            for c in self.context.lit_color[:3]
        ]

    def compute_y_starts_and_deltas_left(self, y_diff_left, left_start_vtx, left_end_vtx):
        self.left, self.delta_left = _edge_start(self.vtx, left_start_vtx, left_end_vtx, y_diff_left)

    def compute_y_starts_and_deltas_right(self, y_diff_right, right_start_vtx, right_end_vtx):
        self.right, self.delta_right = _edge_start(
            self.vtx, right_start_vtx, right_end_vtx, y_diff_right
        )

    def compute_x_starts_and_deltas(self, x_diff, z_left, z_right):
        self.value = [wrap_i32(c + FX16_ROUND_UP) for c in self.left]
        self.delta_x = _span_deltas(self.left, self.right, x_diff)

    def swap_left_right(self):
        self.delta_left, self.delta_right = self.delta_right, self.delta_left
        self.left, self.right = self.right, self.left
        i1, i2 = self.context.vtx_indices[1], self.context.vtx_indices[2]
        self.vtx[i1], self.vtx[i2] = self.vtx[i2], self.vtx[i1]

    def process_pixel(self):
        r, g, b = (fx16_to_int(c) for c in self.value)
        pixel = self.context.pixel
        self.context.pixel = ColorARGB(
            map_xrgb32((r * pixel.r) >> 8, (g * pixel.g) >> 8, (b * pixel.b) >> 8)
        )

    def interpolate_x(self, x):
        self.value = _step(self.value, self.delta_x, x)

    def interpolate_y_left(self, y_left):
        self.left = _step(self.left, self.delta_left, y_left)

    def interpolate_y_right(self, y_right):
        self.right = _step(self.right, self.delta_right, y_right)