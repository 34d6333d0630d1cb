import json
from pathlib import Path

_DEFAULT_CONFIG = Path(__file__).parent / "config.json"


class GameConfig:
    __slots__ = ("tick_interval", "viewport_width", "viewport_height", "starting_health",
                 "player_speed", "enemy_min_speed", "enemy_max_speed", "seed")

    def __init__(self, tick_interval=1 / 30, viewport_width=400, viewport_height=400, starting_health=3,
                 player_speed=4, enemy_min_speed=3, enemy_max_speed=7, seed=None):
        self.tick_interval = tick_interval
        self.viewport_width = viewport_width
        self.viewport_height = viewport_height
        self.starting_health = starting_health
        self.player_speed = player_speed
        self.enemy_min_speed = enemy_min_speed
        self.enemy_max_speed = enemy_max_speed
        self.seed = seed


class ServerConfig:
    __slots__ = ("host", "port")

    def __init__(self, host="127.0.0.1", port=8080):
        self.host = host
        self.port = port


class LoggingConfig:
    __slots__ = ("level", "file", "crash_file")

    def __init__(self, level="INFO", file="logs/game.log", crash_file="logs/crash.log"):
        self.level = level
        self.file = file
        self.crash_file = crash_file


class Config:
    __slots__ = ("game", "server", "logging")

    def __init__(self, game=None, server=None, logging=None):
        self.game = game or GameConfig()
        self.server = server or ServerConfig()
        self.logging = logging or LoggingConfig()

    @classmethod
    def from_dict(cls, d):
        return cls(
            GameConfig(**d.get("game", {})),
            ServerConfig(**d.get("server", {})),
            LoggingConfig(**d.get("logging", {})),
        )


def load_config(path=None):
    config_path = Path(path) if path else _DEFAULT_CONFIG

    if not config_path.exists():
        return Config()

    with open(config_path) as file:
        return Config.from_dict(json.load(file))
