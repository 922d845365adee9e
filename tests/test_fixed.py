import pytest

from volition import fixed


@pytest.mark.parametrize("value", [0, 1, -1, 7, -123, 32767, -32768])
def test_int_fx16_round_trip(value):
    assert fixed.fx16_to_int(fixed.int_to_fx16(value)) == value
    assert fixed.fx16_whole_part(fixed.int_to_fx16(value)) == value
    assert fixed.fx16_decimal_part(fixed.int_to_fx16(value)) == 0


def test_wrap_i32_limits():
    assert fixed.wrap_i32(2**31) == -(2**31)
    assert fixed.wrap_i32(2**32 + 5) == 5
    assert fixed.wrap_i32(-(2**31)) == -(2**31)


def test_int_to_fx16_overflow_wraps():
    assert fixed.int_to_fx16(32768) == -(2**31)


@pytest.mark.parametrize("value", [0, 2, 100, -50])
def test_float_int_consistency(value):
    fx = fixed.float_to_fx16(float(value))
    assert fixed.fx16_to_float(fx) == pytest.approx(value, abs=1e-4)


def test_decimal_part_keeps_fraction_bits():
    fx = fixed.int_to_fx16(9) + 5
    assert fixed.fx16_decimal_part(fx) == 5
    assert fixed.fx16_whole_part(fx) == 9


def test_rounded_conversion_halves_round_up():
    base = fixed.int_to_fx16(3)
    assert fixed.fx16_to_int_rounded(base + fixed.FX16_ROUND_UP) == 4
    assert fixed.fx16_to_int_rounded(base + fixed.FX16_ROUND_UP - 1) == 3
    assert fixed.fx16_to_int(base + fixed.FX16_ROUND_UP) == 3


def test_negative_truncation_is_arithmetic():
    fx = fixed.int_to_fx16(-2) + 1
    assert fixed.fx16_to_int(fx) == -2


@pytest.mark.parametrize("a,b", [(2, 3), (-4, 5), (-6, -7), (0, 11), (100, 100)])
def test_mul_matches_integer_product(a, b):
    result = fixed.mul_fx16(fixed.int_to_fx16(a), fixed.int_to_fx16(b))
    assert result == fixed.int_to_fx16(a * b)


@pytest.mark.parametrize("a,b", [(6, 3), (-12, 4), (-20, -5), (0, 9)])
def test_div_inverts_mul(a, b):
    fa, fb = fixed.int_to_fx16(a), fixed.int_to_fx16(b)
    quotient = fixed.div_fx16(fa, fb)
    assert fixed.mul_fx16(quotient, fb) == fa


def test_div_truncates_toward_zero():
    assert fixed.div_fx16(-1, fixed.int_to_fx16(2)) == 0
    assert fixed.div_fx16(1, fixed.int_to_fx16(2)) == 0


def test_div_by_zero_raises():
    with pytest.raises(ZeroDivisionError):
        fixed.div_fx16(fixed.int_to_fx16(1), 0)


def test_div_overflow_raises():
    with pytest.raises(OverflowError):
        fixed.div_fx16(fixed.int_to_fx16(30000), 1)


def test_format_zero():
    assert fixed.format_fx16(0) == "0.000000"


def test_format_matches_float_conversion():
    fx = fixed.float_to_fx16(2.5)
    assert fixed.format_fx16(fx) == f"{fixed.fx16_to_float(fx):f}"


@pytest.mark.parametrize("value", [0, 1, -1, 100, -512, 511])
def test_fx22_round_trip(value):
    assert fixed.fx22_to_int(fixed.int_to_fx22(value)) == value


@pytest.mark.parametrize("value", [0, 1, -1, 7, -8])
def test_fx28_round_trip(value):
    assert fixed.fx28_to_int(fixed.int_to_fx28(value)) == value


def test_fx28_overflow_wraps():
    assert fixed.int_to_fx28(8) == -(2**31)