from utils.ksuid import generate_ksuid
from utils.timestamp import format_timestamp


class SpriteState:
    __slots__ = ("name", "x", "y", "width", "height", "velocity_x", "velocity_y", "visible", "animation")

    def __init__(self, name, x, y, width, height, velocity_x=0, velocity_y=0, visible=True, animation=None):
        self.name, self.x, self.y = name, x, y
        self.width, self.height = width, height
        self.velocity_x, self.velocity_y = velocity_x, velocity_y
        self.visible = visible
        self.animation = animation

    @classmethod
    def of(cls, sprite):
        return cls(sprite.name, sprite.x, sprite.y, sprite.width, sprite.height,
                   sprite.velocity_x, sprite.velocity_y, sprite.visible, sprite.animation)

    def to_dict(self):
        return {"name": self.name, "x": self.x, "y": self.y, "width": self.width, "height": self.height,
                "vx": self.velocity_x, "vy": self.velocity_y, "visible": self.visible,
                "animation": self.animation}


class StateSnapshot:
    __slots__ = ("id", "timestamp", "frame", "time", "sprites", "score", "health", "game_over", "boards")

    def __init__(self, frame, time, sprites, score=0, health=0, game_over=False, boards=(),
                 id=None, timestamp=None):
        self.id = id or generate_ksuid()
        self.timestamp = timestamp or format_timestamp()
        self.frame = frame
        self.time = time
        self.sprites = sprites
        self.score = score
        self.health = health
        self.game_over = game_over
        self.boards = list(boards)

    def to_dict(self):
        return {
            "id": self.id,
            "timestamp": self.timestamp,
            "frame": self.frame,
            "game_time_s": self.time,
            "score": self.score,
            "health": self.health,
            "game_over": self.game_over,
            "sprites": [sprite.to_dict() for sprite in self.sprites],
            "boards": [line.to_dict() for line in self.boards],
        }
