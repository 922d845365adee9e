"""Affine (not perspective-corrected) texture mapping in 16.16 fixed point."""

from .fixed import float_to_fx16, fx16_to_int
from .interpolation import Interpolator, _edge_start, _span_deltas, _step, modulate


class AffineTextureInterpolator(Interpolator):
    """Interpolates texel coordinates linearly in screen space.

    Each value is a [u, v] pair in 16.16 fixed point, measured in texels.
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
        self.uv_vtx = [
            [float_to_fx16(vtx.u * width), float_to_fx16(vtx.v * height)]
            for vtx in self.context.vtx[:3]
        ]

    def compute_y_starts_and_deltas_left(self, y_diff_left, left_start_vtx, left_end_vtx):
        self.left, self.delta_left = _edge_start(self.uv_vtx, left_start_vtx, left_end_vtx, y_diff_left)

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

    def process_pixel(self):
        u, v = (fx16_to_int(c) for c in self.uv)
        texel = self.texture.pixel(v * self.texture.pitch + u)
        self.context.pixel = modulate(texel, self.context.pixel)

    def interpolate_x(self, x):
        self.uv = _step(self.uv, self.delta_x, x)

    def interpolate_y_left(self, y_left):
        self.left = _step(self.left, self.delta_left, y_left)

    def interpolate_y_right(self, y_right):
        self.right = _step(self.right, self.delta_right, y_right)