"""Two-, three- and four-component vectors."""

from dataclasses import dataclass

from .mathutil import EPSILON5, fast_dist_3d


@dataclass
class Vector2:
    """A 2D vector of ints or floats."""

    x: float = 0
    y: float = 0

    def __add__(self, other):
        return Vector2(self.x + other.x, self.y + other.y)

    def __sub__(self, other):
        return Vector2(self.x - other.x, self.y - other.y)

    def __iadd__(self, other):
        self.x += other.x
        self.y += other.y
        return self

    def __isub__(self, other):
        self.x -= other.x
        self.y -= other.y
        return self

    def __iter__(self):
        yield self.x
        yield self.y

    def zero(self):
        """Set both components to zero."""
        self.x = self.y = 0


@dataclass
class Vector3:
    """A 3D vector of floats."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __iter__(self):
        yield self.x
        yield self.y
        yield self.z

    def zero(self):
        """Set all components to zero."""
        self.x = self.y = self.z = 0.0

    def length(self):
        """Euclidean length."""
        return (self.x * self.x + self.y * self.y + self.z * self.z) ** 0.5

    def length_fast(self):
        """Approximate length using the integer distance estimate."""
        return fast_dist_3d(self.x, self.y, self.z)

    def normalize(self):
        """Scale to unit length in place; near-zero vectors are left alone."""
        length = self.length()
        if length < EPSILON5:
            return
        inv = 1.0 / length
        self.x *= inv
        self.y *= inv
        self.z *= inv

    def normalized(self):
        """Return a unit-length copy, or the zero vector for near-zero input."""
        length = self.length()
        if length < EPSILON5:
            return Vector3(0.0, 0.0, 0.0)
        inv = 1.0 / length
        return Vector3(self.x * inv, self.y * inv, self.z * inv)

    def cross(self, other):
        """Cross product self x other."""
        return Vector3(
            self.y * other.z - self.z * other.y,
            -(self.x * other.z - self.z * other.x),
            self.x * other.y - self.y * other.x,
        )


@dataclass
class Vector4:
    """A homogeneous 3D vector; arithmetic resets w to 1."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    w: float = 1.0

    def __iter__(self):
        yield self.x
        yield self.y
        yield self.z
        yield self.w

    def __add__(self, other):
        return Vector4(self.x + other.x, self.y + other.y, self.z + other.z, 1.0)

    def __sub__(self, other):
        return Vector4(self.x - other.x, self.y - other.y, self.z - other.z, 1.0)

    def __iadd__(self, other):
        self.x += other.x
        self.y += other.y
        self.z += other.z
        self.w = 1.0
        return self

    def __isub__(self, other):
        self.x -= other.x
        self.y -= other.y
        self.z -= other.z
        self.w = 1.0
        return self

    def __mul__(self, scalar):
        if not isinstance(scalar, (int, float)):
            return NotImplemented
        return Vector4(self.x * scalar, self.y * scalar, self.z * scalar, 1.0)

    def __rmul__(self, scalar):
        return self.__mul__(scalar)

    def __truediv__(self, scalar):
        if not isinstance(scalar, (int, float)):
            return NotImplemented
        inv = 1.0 / scalar
        return Vector4(self.x * inv, self.y * inv, self.z * inv, 1.0)

    def __itruediv__(self, scalar):
        inv = 1.0 / scalar
        self.x *= inv
        self.y *= inv
        self.z *= inv
        return self

    def zero(self):
        """Set x, y and z to zero and w to one."""
        self.x = self.y = self.z = 0.0
        self.w = 1.0

    def divide_by_w(self):
        """Divide x, y and z by w in place (perspective divide)."""
        self.x /= self.w
        self.y /= self.w
        self.z /= self.w

    def length(self):
        """Euclidean length of the x, y, z part."""
        return (self.x * self.x + self.y * self.y + self.z * self.z) ** 0.5

    def length_fast(self):
        """Approximate length using the integer distance estimate."""
        return fast_dist_3d(self.x, self.y, self.z)

    def _scale_to_unit(self, length):
        if length < EPSILON5:
            return
        inv = 1.0 / length
        self.x *= inv
        self.y *= inv
        self.z *= inv
        self.w = 1.0

    def normalize(self):
        """Scale to unit length in place; near-zero vectors are left alone."""
        self._scale_to_unit(self.length())

    def normalize_fast(self):
        """Scale in place by the approximate length."""
        self._scale_to_unit(self.length_fast())

    def normalized(self):
        """Return a unit-length copy, or the zero point for near-zero input."""
        length = self.length()
        if length < EPSILON5:
            return Vector4(0.0, 0.0, 0.0, 1.0)
        inv = 1.0 / length
        return Vector4(self.x * inv, self.y * inv, self.z * inv, 1.0)

    def dot(self, other):
        """Dot product of the x, y, z parts."""
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other):
        """Cross product of the x, y, z parts, with w set to 1."""
        return Vector4(
            self.y * other.z - self.z * other.y,
            -(self.x * other.z - self.z * other.x),
            self.x * other.y - self.y * other.x,
            1.0,
        )