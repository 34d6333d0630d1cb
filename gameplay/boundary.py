"""Invisible walls just outside the viewport."""

from numbers import Real

from core.errors import InvalidDimensions

EDGE_THICKNESS = 20
EDGE_INSET = EDGE_THICKNESS / 2


class BoundaryRig:
    """The four edge sprites plus the group holding them."""

    __slots__ = ("top", "bottom", "left", "right", "all")

    def __init__(self, top, bottom, left, right, all):
        self.top = top
        self.bottom = bottom
        self.left = left
        self.right = right
        self.all = all

    @property
    def edges(self):
        return (self.top, self.bottom, self.left, self.right)


def _valid_dimension(value):
    return isinstance(value, Real) and not isinstance(value, bool) and value > 0


def create_boundary(world, viewport_width, viewport_height):
    """Create four invisible, immovable edges around the viewport.

    Each edge is a 20px strip centered 10px past its side of the viewport.
    Nothing is created when either dimension is not a positive number.
    """
    if not (_valid_dimension(viewport_width) and _valid_dimension(viewport_height)):
        raise InvalidDimensions(viewport_width, viewport_height)

    width, height = viewport_width, viewport_height
    top = world.create_sprite(width / 2, -EDGE_INSET, width, EDGE_THICKNESS, name="top-edge")
    bottom = world.create_sprite(width / 2, height + EDGE_INSET, width, EDGE_THICKNESS, name="bottom-edge")
    left = world.create_sprite(-EDGE_INSET, height / 2, EDGE_THICKNESS, height, name="left-edge")
    right = world.create_sprite(width + EDGE_INSET, height / 2, EDGE_THICKNESS, height, name="right-edge")

    for edge in (top, bottom, left, right):
        edge.visible = False
        edge.immovable = True

    edges = world.create_group()
    for edge in (top, bottom, left, right):
        edges.add(edge)

    return BoundaryRig(top, bottom, left, right, edges)
