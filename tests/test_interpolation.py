import pytest

from volition.color import BLACK, WHITE, ColorARGB, map_xrgb32
from volition.interpolation import InterpolationContext, Interpolator, Texture, modulate


class _Recorder(Interpolator):
    def __init__(self, context=None):
        super().__init__(context)
        self.calls = []

    def compute_y_starts_and_deltas_left(self, y_diff_left, left_start_vtx, left_end_vtx):
        self.calls.append(("left", y_diff_left, left_start_vtx, left_end_vtx))

    def compute_y_starts_and_deltas_right(self, y_diff_right, right_start_vtx, right_end_vtx):
        self.calls.append(("right", y_diff_right, right_start_vtx, right_end_vtx))

    def interpolate_y_left(self, y_left):
        self.calls.append(("ileft", y_left))

    def interpolate_y_right(self, y_right):
        self.calls.append(("iright", y_right))


def test_modulate_with_black_is_opaque_black():
    assert modulate(ColorARGB(map_xrgb32(10, 200, 30)), BLACK) == BLACK


def test_modulate_is_commutative():
    a = ColorARGB(map_xrgb32(10, 200, 30))
    b = ColorARGB(map_xrgb32(99, 7, 255))
    assert modulate(a, b) == modulate(b, a)


def test_modulate_result_is_opaque_and_never_brighter():
    a = ColorARGB(map_xrgb32(120, 60, 240))
    result = modulate(a, WHITE)
    assert result.a == 0xFF
    assert result.r <= a.r and result.g <= a.g and result.b <= a.b


def test_texture_pitch_defaults_to_width():
    tex = Texture(2, 2, [1, 2, 3, 4])
    assert tex.pitch == 2
    assert tex.pixel(3) == ColorARGB(4)


def test_texture_pixel_out_of_range():
    tex = Texture(2, 2, [1, 2, 3, 4])
    with pytest.raises(IndexError):
        tex.pixel(4)
    with pytest.raises(IndexError):
        tex.pixel(-1)


def test_texture_too_small_buffer():
    with pytest.raises(ValueError):
        Texture(2, 2, [1, 2, 3])


def test_context_texture_by_mip_level():
    level0 = Texture(2, 2, [0] * 4)
    level1 = Texture(1, 1, [7])
    ctx = InterpolationContext(textures=[level0, level1], mip_mapping_level=1)
    assert ctx.texture() is level1


def test_context_without_texture_raises():
    with pytest.raises(ValueError):
        InterpolationContext().texture()


def test_buffer_pixel_uses_pitch():
    ctx = InterpolationContext(buffer=[0, 1, 2, 3, 4, 5], buffer_pitch=3, x=2, y=1)
    assert ctx.buffer_pixel() == ColorARGB(5)


def test_base_interpolator_leaves_pixel_alone():
    ctx = InterpolationContext(pixel=WHITE)
    interp = Interpolator(ctx)
    interp.start()
    interp.compute_y_starts_and_deltas(1, 0, 1, 1, 0, 2)
    interp.compute_x_starts_and_deltas(3, 0, 0)
    interp.interpolate_x(1)
    interp.interpolate_y(1, 1)
    interp.swap_left_right()
    interp.process_pixel()
    assert ctx.pixel == WHITE


def test_compute_y_starts_calls_left_then_right():
    rec = _Recorder()
    Interpolator.compute_y_starts_and_deltas(rec, 3, 0, 1, 5, 0, 2)
    assert rec.calls == [("left", 3, 0, 1), ("right", 5, 0, 2)]


def test_interpolate_y_calls_left_then_right():
    rec = _Recorder()
    Interpolator.interpolate_y(rec, 2, 4)
    assert rec.calls == [("ileft", 2), ("iright", 4)]