import pytest

from volition.affine import AffineTextureInterpolator
from volition.color import WHITE, ColorARGB, map_xrgb32
from volition.fixed import float_to_fx16, int_to_fx16
from volition.interpolation import InterpolationContext, Texture, modulate
from volition.vector import Vector2
from volition.vertex import Vertex


def _texture():
    pixels = [map_xrgb32(i * 10, 255 - i * 10, i * 5) for i in range(16)]
    return Texture(4, 4, pixels)


def _vertex(u, v):
    return Vertex(texture_coords=Vector2(u, v))


def _context(uvs):
    return InterpolationContext(
        vtx=[_vertex(u, v) for u, v in uvs],
        textures=[_texture()],
        pixel=WHITE,
    )


def test_start_scales_uv_by_texture_size():
    ctx = _context([(0.0, 0.0), (0.25, 0.5), (1.0, 0.75)])
    interp = AffineTextureInterpolator(ctx)
    interp.start()
    assert interp.uv_vtx[0] == [0, 0]
    assert interp.uv_vtx[1] == [float_to_fx16(1.0), float_to_fx16(2.0)]


def test_origin_vertex_samples_first_texel():
    ctx = _context([(0.0, 0.0), (0.0, 1.0), (1.0, 1.0)])
    interp = AffineTextureInterpolator(ctx)
    interp.start()
    interp.compute_y_starts_and_deltas(3, 0, 1, 3, 0, 2)
    interp.compute_x_starts_and_deltas(0, 0, 0)
    interp.process_pixel()
    assert ctx.pixel == modulate(ctx.texture().pixel(0), WHITE)


def test_process_pixel_indexes_by_pitch():
    ctx = _context([(0.0, 0.0)] * 3)
    interp = AffineTextureInterpolator(ctx)
    interp.start()
    interp.uv = [int_to_fx16(2), int_to_fx16(1)]
    interp.process_pixel()
    assert ctx.pixel == modulate(ctx.texture().pixel(6), WHITE)


def test_single_row_edge_reaches_end_vertex():
    ctx = _context([(0.1, 0.2), (0.9, 0.7), (0.3, 0.3)])
    interp = AffineTextureInterpolator(ctx)
    interp.start()
    interp.compute_y_starts_and_deltas_left(1, 0, 1)
    interp.interpolate_y_left(1)
    assert interp.left == interp.uv_vtx[1]


def test_interpolate_x_with_zero_delta_stays_put():
    ctx = _context([(0.5, 0.5)] * 3)
    interp = AffineTextureInterpolator(ctx)
    interp.start()
    interp.compute_y_starts_and_deltas(2, 0, 1, 2, 0, 2)
    interp.compute_x_starts_and_deltas(4, 0, 0)
    before = list(interp.uv)
    interp.interpolate_x(3)
    assert interp.uv == before


def test_empty_span_uses_whole_difference():
    ctx = _context([(0.0, 0.0), (0.0, 0.0), (1.0, 0.5)])
    interp = AffineTextureInterpolator(ctx)
    interp.start()
    interp.compute_y_starts_and_deltas(1, 0, 1, 1, 2, 2)
    interp.compute_x_starts_and_deltas(0, 0, 0)
    assert interp.delta_x == [r - l for l, r in zip(interp.left, interp.right)]


def test_swap_left_right_exchanges_edges_and_vertices():
    ctx = _context([(0.0, 0.0), (0.5, 0.25), (0.75, 1.0)])
    interp = AffineTextureInterpolator(ctx)
    interp.start()
    interp.compute_y_starts_and_deltas(2, 0, 1, 2, 0, 2)
    left, right = list(interp.left), list(interp.right)
    v1, v2 = list(interp.uv_vtx[1]), list(interp.uv_vtx[2])
    interp.swap_left_right()
    assert interp.left == right and interp.right == left
    assert interp.uv_vtx[1] == v2 and interp.uv_vtx[2] == v1


def test_start_without_texture_raises():
    ctx = InterpolationContext()
    with pytest.raises(ValueError):
        AffineTextureInterpolator(ctx).start()


def test_zero_height_edge_raises():
    ctx = _context([(0.0, 0.0), (1.0, 1.0), (0.5, 0.5)])
    interp = AffineTextureInterpolator(ctx)
    interp.start()
    with pytest.raises(ZeroDivisionError):
        interp.compute_y_starts_and_deltas_right(0, 0, 2)


def test_out_of_texture_coordinate_raises():
    ctx = _context([(0.0, 0.0)] * 3)
    interp = AffineTextureInterpolator(ctx)
    interp.start()
    interp.uv = [int_to_fx16(0), int_to_fx16(4)]
    with pytest.raises(IndexError):
        interp.process_pixel()
    assert ctx.pixel == ColorARGB(int(WHITE))