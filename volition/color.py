"""32-bit ARGB colours."""

from dataclasses import dataclass


def map_argb32(a, r, g, b):
    """Pack alpha, red, green and blue bytes into a 32-bit ARGB value."""
    return ((a << 24) | (r << 16) | (g << 8) | b) & 0xFFFFFFFF


def map_xrgb32(r, g, b):
    """Pack an opaque colour (alpha 0xFF) into a 32-bit ARGB value."""
    return map_argb32(0xFF, r, g, b)


@dataclass(frozen=True)
class ColorARGB:
    """A packed 32-bit ARGB colour."""

    argb: int = 0

    def __post_init__(self):
        object.__setattr__(self, "argb", int(self.argb) & 0xFFFFFFFF)

    @classmethod
    def from_components(cls, a, r, g, b):
        """Build a colour from four byte components."""
        return cls(map_argb32(a, r, g, b))

    @property
    def a(self):
        """Alpha byte."""
        return (self.argb >> 24) & 0xFF

    @property
    def r(self):
        """Red byte."""
        return (self.argb >> 16) & 0xFF

    @property
    def g(self):
        """Green byte."""
        return (self.argb >> 8) & 0xFF

    @property
    def b(self):
        """Blue byte."""
        return self.argb & 0xFF

    def __int__(self):
        return self.argb

    def __index__(self):
        return self.argb

    def __eq__(self, other):
        if isinstance(other, ColorARGB):
            return self.argb == other.argb
        if isinstance(other, int):
            return self.argb == other & 0xFFFFFFFF
        return NotImplemented

    def __hash__(self):
        return hash(self.argb)

    def __repr__(self):
        return f"ColorARGB(0x{self.argb:08X})"


TRANSPARENT = ColorARGB(map_argb32(0x00, 0x00, 0x00, 0x00))
WHITE = ColorARGB(map_xrgb32(0xFF, 0xFF, 0xFF))
BLACK = ColorARGB(map_xrgb32(0x00, 0x00, 0x00))
RED = ColorARGB(map_xrgb32(0xFF, 0x00, 0x00))
GREEN = ColorARGB(map_xrgb32(0x00, 0xFF, 0x00))
BLUE = ColorARGB(map_xrgb32(0x00, 0x00, 0xFF))