"""Viewport defines the drawing surface size."""

GRASS_HEIGHT = 100


class Viewport:
    """Fixed-size drawing surface, read once at setup."""

    __slots__ = ("width", "height")

    def __init__(self, width, height):
        self.width = width
        self.height = height

    @property
    def ground_y(self):
        """Top of the grass strip along the bottom."""
        return self.height - GRASS_HEIGHT
