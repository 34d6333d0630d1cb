"""Sprites, groups and the world that owns them.

Positions are sprite centers in viewport pixels and velocities are pixels per
frame. Contact queries take either a single sprite or a group as target; a
single sprite is treated as a one-element group.
"""

DEFAULT_SIZE = 100


class Sprite:
    """An axis-aligned box that can move and touch other sprites."""

    def __init__(self, x, y, width=DEFAULT_SIZE, height=DEFAULT_SIZE, name=""):
        self.name = name
        self.x = x
        self.y = y
        self.width = width
        self.height = height
        self.velocity_x = 0
        self.velocity_y = 0
        self.visible = True
        self.immovable = False
        self.removed = False
        self.animation = None

    def __repr__(self):
        return f"Sprite({self.name!r}, x={self.x}, y={self.y}, w={self.width}, h={self.height})"

    @property
    def left(self):
        return self.x - self.width / 2

    @property
    def right(self):
        return self.x + self.width / 2

    @property
    def top(self):
        return self.y - self.height / 2

    @property
    def bottom(self):
        return self.y + self.height / 2

    def add_animation(self, label):
        """Attach an animation by name. Frames are drawn by the viewer."""
        self.animation = label

    def set_velocity(self, velocity_x, velocity_y):
        self.velocity_x = velocity_x
        self.velocity_y = velocity_y

    def update(self):
        """Advance one frame."""
        if self.removed or self.immovable:
            return
        self.x += self.velocity_x
        self.y += self.velocity_y

    def remove(self):
        self.removed = True

    def overlaps(self, other):
        if other is self or self.removed or other.removed:
            return False
        return (self.left < other.right and self.right > other.left
                and self.top < other.bottom and self.bottom > other.top)

    def is_touching(self, target):
        return any(self.overlaps(other) for other in _members(target))

    def bounce_off(self, target):
        """Push out of each touching sprite and reverse velocity on that axis."""
        touched = False
        for other in _members(target):
            if not self.overlaps(other):
                continue
            touched = True
            if self.immovable:
                continue
            axis, sign = _separate(self, other)
            if axis == "x":
                self.velocity_x = sign * abs(self.velocity_x)
            else:
                self.velocity_y = sign * abs(self.velocity_y)
        return touched

    def collide(self, target):
        """Push out of each touching sprite and stop on that axis."""
        touched = False
        for other in _members(target):
            if not self.overlaps(other):
                continue
            touched = True
            if self.immovable:
                continue
            axis, _ = _separate(self, other)
            if axis == "x":
                self.velocity_x = 0
            else:
                self.velocity_y = 0
        return touched

    def displace(self, target):
        """Push each touching movable sprite out of this one."""
        touched = False
        for other in _members(target):
            if not self.overlaps(other):
                continue
            touched = True
            if not other.immovable:
                _separate(other, self)
        return touched


class Group:
    """Ordered set of sprites queried as one unit."""

    def __init__(self, sprites=()):
        self._sprites = []
        for sprite in sprites:
            self.add(sprite)

    def _prune(self):
        self._sprites = [sprite for sprite in self._sprites if not sprite.removed]

    def __iter__(self):
        self._prune()
        return iter(list(self._sprites))

    def __len__(self):
        return sum(1 for _ in self)

    def __getitem__(self, index):
        return list(self)[index]

    def __contains__(self, sprite):
        self._prune()
        return sprite in self._sprites

    def add(self, sprite):
        self._prune()
        if sprite not in self._sprites:
            self._sprites.append(sprite)

    def remove(self, sprite):
        if sprite in self._sprites:
            self._sprites.remove(sprite)
            return True
        return False

    def remove_sprites(self):
        for sprite in self._sprites:
            sprite.remove()
        self._sprites.clear()

    def is_touching(self, target):
        return any(sprite.is_touching(target) for sprite in self)

    def bounce_off(self, target):
        return _any_applied(self, lambda sprite: sprite.bounce_off(target))

    def collide(self, target):
        return _any_applied(self, lambda sprite: sprite.collide(target))

    def displace(self, target):
        return _any_applied(self, lambda sprite: sprite.displace(target))


class SpriteWorld:
    """Registry of every sprite in a game, advanced once per frame."""

    def __init__(self):
        self.sprites = []

    def create_sprite(self, x, y, width=DEFAULT_SIZE, height=DEFAULT_SIZE, name=""):
        sprite = Sprite(x, y, width, height, name=name)
        self.sprites.append(sprite)
        return sprite

    def create_group(self, sprites=()):
        return Group(sprites)

    def update(self):
        self.sprites = [sprite for sprite in self.sprites if not sprite.removed]
        for sprite in self.sprites:
            sprite.update()


def _members(target):
    if isinstance(target, Sprite):
        return (target,)
    return list(target)


def _any_applied(group, apply):
    # evaluate every member, no short-circuit
    results = [apply(sprite) for sprite in group]
    return any(results)


def _separate(mover, other):
    """Move `mover` out of `other` along the shallower overlap.

    Returns the axis and the direction `mover` was pushed (-1 or 1).
    """
    overlap_x = min(mover.right, other.right) - max(mover.left, other.left)
    overlap_y = min(mover.bottom, other.bottom) - max(mover.top, other.top)
    if overlap_x < overlap_y:
        sign = -1 if mover.x < other.x else 1
        mover.x += sign * overlap_x
        return "x", sign
    sign = -1 if mover.y < other.y else 1
    mover.y += sign * overlap_y
    return "y", sign
