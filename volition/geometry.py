"""Quaternions, lines, planes, coordinate systems and rectangles."""

from dataclasses import dataclass, field

from .vector import Vector3


@dataclass
class Quat:
    """A quaternion stored as (w, x, y, z)."""

    w: float = 0.0
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __iter__(self):
        yield self.w
        yield self.x
        yield self.y
        yield self.z

    @property
    def q0(self):
        """The real part."""
        return self.w

    @property
    def qv(self):
        """The imaginary part as a vector."""
        return Vector3(self.x, self.y, self.z)

    def zero(self):
        """Set every component to zero."""
        self.w = self.x = self.y = self.z = 0.0

    @classmethod
    def from_vector3(cls, v):
        """A pure quaternion with zero real part and ``v`` as imaginary part."""
        return cls(0.0, v.x, v.y, v.z)


@dataclass
class ParamLine3:
    """A parametric 3D line segment from p0 to p1 along direction v."""

    p0: Vector3 = field(default_factory=Vector3)
    p1: Vector3 = field(default_factory=Vector3)
    v: Vector3 = field(default_factory=Vector3)


@dataclass
class Plane3:
    """A plane through point p0 with normal n."""

    p0: Vector3 = field(default_factory=Vector3)
    n: Vector3 = field(default_factory=Vector3)


@dataclass
class Polar2:
    """2D polar coordinates: radius and angle in radians."""

    r: float = 0.0
    theta: float = 0.0


@dataclass
class Cylindrical3:
    """Cylindrical coordinates: radius, angle about z, and height."""

    r: float = 0.0
    theta: float = 0.0
    z: float = 0.0


@dataclass
class Spherical3:
    """Spherical coordinates: distance from origin and two angles."""

    p: float = 0.0
    theta: float = 0.0
    phi: float = 0.0


@dataclass
class Rect:
    """A rectangle given by two corners."""

    x1: float = 0
    y1: float = 0
    x2: float = 0
    y2: float = 0


@dataclass
class RelativeRect:
    """A rectangle given by its origin and size."""

    x: float = 0
    y: float = 0
    w: float = 0
    h: float = 0