"""Vertices, polygons and transform selectors."""

import enum
from dataclasses import dataclass, field

from .color import ColorARGB
from .vector import Vector2, Vector4


class VertexAttr(enum.IntFlag):
    """Optional data a vertex carries."""

    NONE = 0
    HAS_NORMAL = 1
    HAS_TEXTURE_COORDS = 2


@dataclass
class Vertex:
    """A vertex with position, normal and texture coordinates."""

    attr: VertexAttr = VertexAttr.NONE
    position: Vector4 = field(default_factory=Vector4)
    normal: Vector4 = field(default_factory=Vector4)
    texture_coords: Vector2 = field(default_factory=lambda: Vector2(0.0, 0.0))

    def components(self):
        """All ten floats: x, y, z, w, nx, ny, nz, nw, u, v."""
        return (*self.position, *self.normal, *self.texture_coords)

    @property
    def x(self):
        return self.position.x

    @property
    def y(self):
        return self.position.y

    @property
    def z(self):
        return self.position.z

    @property
    def u(self):
        return self.texture_coords.x

    @property
    def v(self):
        return self.texture_coords.y


class PolyState(enum.IntFlag):
    """Per-polygon state bits."""

    NONE = 0
    ACTIVE = 1
    CLIPPED = 2
    BACKFACE = 4
    LIT = 8

    NOT_RENDER_TEST = CLIPPED | BACKFACE
    NOT_LIGHT_TEST = CLIPPED | BACKFACE | LIT


def _passes(state, rejecting_mask):
    return bool(state & PolyState.ACTIVE) and not (state & rejecting_mask)


def _three_colors():
    return [ColorARGB() for _ in range(3)]


@dataclass
class Poly:
    """A triangle that indexes into a shared vertex list."""

    state: PolyState = PolyState.NONE
    material: object = None
    vtx_indices: tuple = (0, 0, 0)
    texture_coords_indices: tuple = (0, 0, 0)
    lit_color: list = field(default_factory=_three_colors)
    normal_length: float = 0.0

    def is_renderable(self):
        """Active and neither clipped nor facing away."""
        return _passes(self.state, PolyState.NOT_RENDER_TEST)

    def needs_lighting(self):
        """Active, visible and not yet lit."""
        return _passes(self.state, PolyState.NOT_LIGHT_TEST)


@dataclass
class PolyFace:
    """A self-contained triangle holding its own local and transformed vertices."""

    state: PolyState = PolyState.NONE
    material: object = None
    local_vtx: list = field(default_factory=lambda: [Vertex() for _ in range(3)])
    trans_vtx: list = field(default_factory=lambda: [Vertex() for _ in range(3)])
    lit_color: list = field(default_factory=_three_colors)
    normal_length: float = 0.0

    def is_renderable(self):
        """Active and neither clipped nor facing away."""
        return _passes(self.state, PolyState.NOT_RENDER_TEST)

    def needs_lighting(self):
        """Active, visible and not yet lit."""
        return _passes(self.state, PolyState.NOT_LIGHT_TEST)


class TransformType(enum.Enum):
    """Which vertex set a transform reads and writes."""

    LOCAL_ONLY = 0
    TRANS_ONLY = 1
    LOCAL_TO_TRANS = 2