"""Signed 32-bit fixed-point helpers in 16.16, 10.22 and 4.28 formats."""

FX16_SHIFT = 16
FX16_MAGNITUDE = 65535.0
FX16_ROUND_UP = 0x00008000
FX16_WHOLE_MASK = 0xFFFF0000
FX16_DECIMAL_MASK = 0x0000FFFF

FX22_SHIFT = 22
FX28_SHIFT = 28

_I32_MIN = -(1 << 31)
_I32_MAX = (1 << 31) - 1


def wrap_i32(value):
    """Wrap an integer into the signed 32-bit range, as a C int would."""
    value &= 0xFFFFFFFF
    return value - (1 << 32) if value & 0x80000000 else value


def int_to_fx16(value):
    """Convert an integer to 16.16 fixed point."""
    return wrap_i32(int(value) << FX16_SHIFT)


def float_to_fx16(value):
    """Convert a float to 16.16 fixed point, rounding by adding one half."""
    return wrap_i32(int(value * FX16_MAGNITUDE + 0.5))


def fx16_to_int(fx):
    """Drop the fractional part of a 16.16 number (arithmetic shift)."""
    return wrap_i32(fx) >> FX16_SHIFT


def fx16_to_int_rounded(fx):
    """Convert a 16.16 number to the nearest integer, halves rounding up."""
    return wrap_i32(wrap_i32(fx) + FX16_ROUND_UP) >> FX16_SHIFT


def fx16_to_float(fx):
    """Convert a 16.16 number to a float."""
    return wrap_i32(fx) / FX16_MAGNITUDE


def mul_fx16(a, b):
    """Multiply two 16.16 numbers using a 64-bit intermediate."""
    return wrap_i32((wrap_i32(a) * wrap_i32(b)) >> FX16_SHIFT)


def div_fx16(a, b):
    """Divide two 16.16 numbers, truncating toward zero.

    Raises ZeroDivisionError for a zero divisor and OverflowError when the
    quotient does not fit in 32 bits.
    """
    b = wrap_i32(b)
    if b == 0:
        raise ZeroDivisionError("fixed-point division by zero")
    numerator = wrap_i32(a) << FX16_SHIFT
    quotient = abs(numerator) // abs(b)
    if (numerator < 0) != (b < 0):
        quotient = -quotient
    if not _I32_MIN <= quotient <= _I32_MAX:
        raise OverflowError("fixed-point quotient does not fit in 32 bits")
    return quotient


def fx16_whole_part(fx):
    """Return the integer part of a 16.16 number."""
    return wrap_i32(fx) >> FX16_SHIFT


def fx16_decimal_part(fx):
    """Return the raw 16 fractional bits of a 16.16 number."""
    return wrap_i32(fx) & FX16_DECIMAL_MASK


def format_fx16(fx):
    """Render a 16.16 number the way printf's %f would."""
    return f"{fx16_to_float(fx):f}"


def int_to_fx22(value):
    """Convert an integer to 10.22 fixed point."""
    return wrap_i32(int(value) << FX22_SHIFT)


def fx22_to_int(fx):
    """Drop the fractional part of a 10.22 number."""
    return wrap_i32(fx) >> FX22_SHIFT


def int_to_fx28(value):
    """Convert an integer to 4.28 fixed point."""
    return wrap_i32(int(value) << FX28_SHIFT)


def fx28_to_int(fx):
    """Drop the fractional part of a 4.28 number."""
    return wrap_i32(fx) >> FX28_SHIFT