"""Perspective texture mapping: piecewise-linear, per-pixel correct and bilinear-filtered.

Texel coordinates are divided by depth at the vertices in 10.22 fixed point,
interpolated linearly in screen space, and multiplied back by the pixel's
4.28 depth when a texel is fetched.
"""

from .color import ColorARGB, map_xrgb32
from .fixed import FX22_SHIFT, FX28_SHIFT, fx22_to_int, int_to_fx22, wrap_i32
from .interpolation import (
    Interpolator,
    _edge_start,
    _span_deltas,
    _step,
    _trunc_div,
    modulate,
)

_Z_SHIFT = FX28_SHIFT - FX22_SHIFT


def _shl(value, count):
    """Left shift with signed 32-bit wrap-around."""
    return wrap_i32(value << count)


def _texel_coord(value, z):
    """Turn an interpolated u/z or v/z back into a whole texel coordinate."""
    return _trunc_div(_shl(value, _Z_SHIFT), wrap_i32(z))


class PerspectiveTextureInterpolator(Interpolator):
    """Shared set-up and stepping of u/z and v/z values in 10.22 fixed point.

    Each value is a [u, v] pair.
    """

    def __init__(self, context=None):
        super().__init__(context)
        self.texture = None
        self.uv_vtx = [[0, 0] for _ in range(3)]
        self.uv = [0, 0]
        self.left = [0, 0]
        self.right = [0, 0]
        self.delta_left = [0, 0]
        self.delta_right = [0, 0]
        self.delta_x = [0, 0]

    def start(self):
        self.texture = self.context.texture()
        width, height = float(self.texture.width), float(self.texture.height)
        self.uv_vtx = []
        for vtx in self.context.vtx[:3]:
            depth = int(vtx.z + 0.5)
            self.uv_vtx.append(
                [
                    _trunc_div(int_to_fx22(int(vtx.u * width + 0.5)), depth),
                    _trunc_div(int_to_fx22(int(vtx.v * height + 0.5)), depth),
                ]
            )

    def compute_y_starts_and_deltas_left(self, y_diff_left, left_start_vtx, left_end_vtx):
        self.left, self.delta_left = _edge_start(
            self.uv_vtx, left_start_vtx, left_end_vtx, y_diff_left
        )

    def compute_y_starts_and_deltas_right(self, y_diff_right, right_start_vtx, right_end_vtx):
        self.right, self.delta_right = _edge_start(
            self.uv_vtx, right_start_vtx, right_end_vtx, y_diff_right
        )

    def compute_x_starts_and_deltas(self, x_diff, z_left, z_right):
        self.uv = list(self.left)
        self.delta_x = _span_deltas(self.left, self.right, x_diff)

    def swap_left_right(self):
        self.delta_left, self.delta_right = self.delta_right, self.delta_left
        self.left, self.right = self.right, self.left
        i1, i2 = self.context.vtx_indices[1], self.context.vtx_indices[2]
        self.uv_vtx[i1], self.uv_vtx[i2] = self.uv_vtx[i2], self.uv_vtx[i1]

    def interpolate_x(self, x):
        self.uv = _step(self.uv, self.delta_x, x)

    def interpolate_y_left(self, y_left):
        self.left = _step(self.left, self.delta_left, y_left)

    def interpolate_y_right(self, y_right):
        self.right = _step(self.right, self.delta_right, y_right)


def _divide_by_edge_depth(value, z):
    return _shl(_trunc_div(_shl(value, _Z_SHIFT), wrap_i32(z) >> 6), 16)


class LinearPiecewiseTextureInterpolator(PerspectiveTextureInterpolator):
    """Corrects perspective once per span and interpolates affinely across it."""

    def compute_x_starts_and_deltas(self, x_diff, z_left, z_right):
        left = [_divide_by_edge_depth(c, z_left) for c in self.left]
        right = [_divide_by_edge_depth(c, z_right) for c in self.right]
        self.uv = left
        self.delta_x = _span_deltas(left, right, x_diff)

    def process_pixel(self):
        u, v = (fx22_to_int(c) for c in self.uv)
        texel = self.texture.pixel(v * self.texture.pitch + u)
        self.context.pixel = modulate(texel, self.context.pixel)


class PerspectiveCorrectTextureInterpolator(PerspectiveTextureInterpolator):
    """Divides by the pixel's depth for every texel fetched."""

    def process_pixel(self):
        z = self.context.z
        u = _texel_coord(self.uv[0], z)
        v = min(_texel_coord(self.uv[1], z), self.texture.height)
        texel = self.texture.pixel(v * self.texture.pitch + u)
        self.context.pixel = modulate(texel, self.context.pixel)


class BilinearPerspectiveTextureInterpolator(PerspectiveTextureInterpolator):
    """Perspective-correct fetch that blends the four nearest texels."""

    def process_pixel(self):
        texture = self.texture
        pitch = texture.pitch
        z = self.context.z
        u, v = self.uv

        x0 = _texel_coord(u, z)
        y0 = _texel_coord(v, z) * pitch
        x1 = x0 + 1 if x0 + 1 < texture.width else x0
        y1 = y0 + pitch if y0 + pitch < texture.height * pitch else y0

        corners = (
            texture.pixel(y0 + x0),
            texture.pixel(y0 + x1),
            texture.pixel(y1 + x0),
            texture.pixel(y1 + x1),
        )

        frac_u = (u >> 14) & 0xFF
        frac_v = (v >> 14) & 0xFF
        inv_u = 256 - frac_u
        inv_v = 256 - frac_v
        weights = (inv_u * inv_v, frac_u * inv_v, inv_u * frac_v, frac_u * frac_v)

        def blend(channel):
            total = sum(w * channel(c) for w, c in zip(weights, corners))
            return (total >> 16) & 0xFF

        filtered = ColorARGB(
            map_xrgb32(
                blend(lambda c: c.r),
                blend(lambda c: c.g),
                blend(lambda c: c.b),
            )
        )
        self.context.pixel = modulate(filtered, self.context.pixel)