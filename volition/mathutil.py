"""Scalar math helpers: degree trigonometry, fast approximations, randoms."""

import math
import random

PI = 3.141592654
PI2 = 6.283185307
PI_DIV_2 = 1.570796327
PI_DIV_4 = 0.785398163
PI_INV = 0.318309886

DEG_TO_RAD = PI / 180.0
RAD_TO_DEG = 180.0 / PI

EPSILON3 = 1e-3
EPSILON4 = 1e-4
EPSILON5 = 1e-5
EPSILON6 = 1e-6

SIN_COS_LOOK_SIZE = 361

# Tables for whole degrees 0..360 inclusive.
SIN_LOOK = tuple(math.sin(i * DEG_TO_RAD) for i in range(SIN_COS_LOOK_SIZE))
COS_LOOK = tuple(math.cos(i * DEG_TO_RAD) for i in range(SIN_COS_LOOK_SIZE))


def sign(x):
    """Return -1.0 for negative values and 1.0 otherwise (zero included)."""
    return 1.0 - 2.0 * float(x < 0.0)


def is_equal_float(a, b):
    """True when the two values differ by less than 1e-3."""
    return abs(a - b) < EPSILON3


def fast_dist_2d(x, y):
    """Integer approximation of the 2D distance, roughly 3.5% error."""
    ix = int(abs(x))
    iy = int(abs(y))
    low = min(ix, iy)
    return float(ix + iy - (low >> 1) - (low >> 2) + (low >> 4))


def fast_dist_3d(x, y, z):
    """Integer approximation of the 3D distance, roughly 8% error."""
    ix, iy, iz = sorted(int(abs(c)) << 10 for c in (x, y, z))
    return float((iz + 11 * (iy >> 5) + (ix >> 2)) >> 10)


def _look_up(table, deg):
    deg = math.fmod(deg, 360.0)
    if deg < 0:
        deg += 360.0
    index = min(int(deg), SIN_COS_LOOK_SIZE - 2)
    remainder = deg - index
    return table[index] + remainder * (table[index + 1] - table[index])


def fast_sin(deg):
    """Sine of an angle in degrees by table lookup and linear interpolation."""
    return _look_up(SIN_LOOK, deg)


def fast_cos(deg):
    """Cosine of an angle in degrees by table lookup and linear interpolation."""
    return _look_up(COS_LOOK, deg)


def sin_deg(deg):
    """Sine of an angle given in degrees."""
    return math.sin(deg * DEG_TO_RAD)


def cos_deg(deg):
    """Cosine of an angle given in degrees."""
    return math.cos(deg * DEG_TO_RAD)


def tan_deg(deg):
    """Tangent of an angle given in degrees."""
    return math.tan(deg * DEG_TO_RAD)


def deg_to_rad(deg):
    """Convert degrees to radians."""
    return deg * DEG_TO_RAD


def rad_to_deg(rad):
    """Convert radians to degrees."""
    return rad * RAD_TO_DEG


def random_below(limit):
    """Random integer from 0 to limit - 1."""
    return random.randrange(limit)


def random_between(low, high):
    """Random integer from low to high, both included."""
    return random.randint(low, high)


def fmod(dividend, divisor):
    """Floating remainder with the sign of the dividend."""
    return math.fmod(dividend, divisor)