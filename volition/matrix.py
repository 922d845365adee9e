"""Row-major 4x4 matrices for row-vector transforms, plus small matrix helpers."""

from .mathutil import EPSILON5, fast_cos, fast_sin
from .vector import Vector4


def _checked_rows(rows, count, width):
    result = tuple(tuple(float(c) for c in row) for row in rows)
    if len(result) != count or any(len(row) != width for row in result):
        raise ValueError(f"expected a {count}x{width} matrix")
    return result


class Matrix44:
    """An immutable 4x4 matrix; vectors are rows multiplied on the left."""

    __slots__ = ("_rows",)

    def __init__(self, rows):
        self._rows = _checked_rows(rows, 4, 4)

    @classmethod
    def identity(cls):
        """The 4x4 identity matrix."""
        return cls(identity_matrix(4, 4))

    @classmethod
    def zeros(cls):
        """The 4x4 matrix of zeros."""
        return cls(zero_matrix(4, 4))

    @classmethod
    def translation(cls, v):
        """A matrix that moves points by the x, y, z of ``v``."""
        return cls(
            (
                (1, 0, 0, 0),
                (0, 1, 0, 0),
                (0, 0, 1, 0),
                (v.x, v.y, v.z, 1),
            )
        )

    @classmethod
    def rotation_xyz(cls, x, y, z):
        """Rotation about X, then Y, then Z; angles in degrees.

        Angles whose magnitude is not above 1e-5 contribute no rotation.
        """
        mat_x = mat_y = mat_z = cls.identity()

        if abs(x) > EPSILON5:
            s, c = fast_sin(x), fast_cos(x)
            mat_x = cls(
                (
                    (1, 0, 0, 0),
                    (0, c, s, 0),
                    (0, -s, c, 0),
                    (0, 0, 0, 1),
                )
            )

        if abs(y) > EPSILON5:
            s, c = fast_sin(y), fast_cos(y)
            mat_y = cls(
                (
                    (c, 0, -s, 0),
                    (0, 1, 0, 0),
                    (s, 0, c, 0),
                    (0, 0, 0, 1),
                )
            )

        if abs(z) > EPSILON5:
            s, c = fast_sin(z), fast_cos(z)
            mat_z = cls(
                (
                    (c, s, 0, 0),
                    (-s, c, 0, 0),
                    (0, 0, 1, 0),
                    (0, 0, 0, 1),
                )
            )

        return mat_x @ mat_y @ mat_z

    def __matmul__(self, other):
        if not isinstance(other, Matrix44):
            return NotImplemented
        columns = tuple(zip(*other._rows))
        return Matrix44(
            tuple(
                sum(a * b for a, b in zip(row, column)) for column in columns
            )
            for row in self._rows
        )

    def transform(self, v):
        """Multiply the row vector ``v`` (x, y, z, w) by this matrix."""
        components = tuple(v)
        columns = zip(*self._rows)
        return Vector4(
            *(sum(a * b for a, b in zip(components, column)) for column in columns)
        )

    def inverse(self):
        """Inverse of an affine matrix whose last column is (0, 0, 0, 1).

        Raises ValueError when the upper 3x3 part is singular.
        """
        (a00, a01, a02, _), (a10, a11, a12, _), (a20, a21, a22, _), (a30, a31, a32, _) = self._rows

        det = (
            a00 * (a11 * a22 - a12 * a21)
            - a01 * (a10 * a22 - a12 * a20)
            + a02 * (a10 * a21 - a11 * a20)
        )
        if abs(det) < EPSILON5:
            raise ValueError("matrix is not invertible")

        inv = 1.0 / det
        r00 = inv * (a11 * a22 - a12 * a21)
        r01 = -inv * (a01 * a22 - a02 * a21)
        r02 = inv * (a01 * a12 - a02 * a11)

        r10 = -inv * (a10 * a22 - a12 * a20)
        r11 = inv * (a00 * a22 - a02 * a20)
        r12 = -inv * (a00 * a12 - a02 * a10)

        r20 = inv * (a10 * a21 - a11 * a20)
        r21 = -inv * (a00 * a21 - a01 * a20)
        r22 = inv * (a00 * a11 - a01 * a10)

        r30 = -(a30 * r00 + a31 * r10 + a32 * r20)
        r31 = -(a30 * r01 + a31 * r11 + a32 * r21)
        r32 = -(a30 * r02 + a31 * r12 + a32 * r22)

        return Matrix44(
            (
                (r00, r01, r02, 0.0),
                (r10, r11, r12, 0.0),
                (r20, r21, r22, 0.0),
                (r30, r31, r32, 1.0),
            )
        )

    def __getitem__(self, index):
        """``m[row]`` gives a row tuple, ``m[row, col]`` a single element."""
        if isinstance(index, tuple):
            row, col = index
            return self._rows[row][col]
        return self._rows[index]

    def __iter__(self):
        return iter(self._rows)

    def __eq__(self, other):
        if not isinstance(other, Matrix44):
            return NotImplemented
        return self._rows == other._rows

    def __hash__(self):
        return hash(self._rows)

    def __repr__(self):
        return f"Matrix44({self._rows!r})"


def identity_matrix(rows, cols):
    """Rows of a rows x cols matrix with ones on the main diagonal."""
    if rows < 1 or cols < 1:
        raise ValueError("matrix dimensions must be positive")
    return [[1.0 if r == c else 0.0 for c in range(cols)] for r in range(rows)]


def zero_matrix(rows, cols):
    """Rows of a rows x cols matrix of zeros."""
    if rows < 1 or cols < 1:
        raise ValueError("matrix dimensions must be positive")
    return [[0.0] * cols for _ in range(rows)]