"""Score and health boards."""

WHITE = (255, 255, 255)
GAME_OVER_RED = (210, 1, 3)


class BoardLine:
    __slots__ = ("text", "x", "y", "size", "color", "align")

    def __init__(self, text, x, y, size=24, color=WHITE, align="left"):
        self.text = text
        self.x = x
        self.y = y
        self.size = size
        self.color = color
        self.align = align

    def to_dict(self):
        return {"text": self.text, "x": self.x, "y": self.y, "size": self.size,
                "color": list(self.color), "align": self.align}


def build_boards(score, health, viewport):
    lines = [
        BoardLine(f"Score: {score}", 10, 10),
        BoardLine(f"Health: {health}", 10, 40),
    ]
    if health <= 0:
        lines.append(BoardLine("Game Over!", viewport.width / 2, viewport.height / 2,
                               size=48, color=GAME_OVER_RED, align="center"))
    return lines
