"""One game of Frog Feast: sprites, rules and score."""

import math
import random

from core.errors import InvalidInput
from gameplay.boards import build_boards
from gameplay.boundary import create_boundary
from gameplay.rng import random_range
from gameplay.sounds import SoundBoard
from gameplay.sprites import SpriteWorld
from gameplay.state import SpriteState, StateSnapshot
from gameplay.viewport import Viewport
from internal.logging import get_logger

EAT_SOUND = "sounds/eat.wav"
HIT_SOUND = "sounds/hit.wav"
GAME_OVER_SOUND = "sounds/game-over.wav"

DIRECTIONS = ("left", "right", "up", "down", "stop")

# food never spawns closer than this to the sky or the grass
FOOD_MARGIN = 50


class GameSession:
    """Owns everything a single game needs; built once per reset."""

    def __init__(self, config, rng=None):
        self.config = config
        self.rng = rng or random.Random(config.seed)
        self.viewport = Viewport(config.viewport_width, config.viewport_height)
        self._log = get_logger()
        self.setup()

    def setup(self):
        width, height = self.viewport.width, self.viewport.height
        self.world = SpriteWorld()
        self.boundary = create_boundary(self.world, width, height)
        self.sounds = SoundBoard()
        self.score = 0
        self.health = self.config.starting_health
        self.frame = 0
        self.game_over = False
        self._pending = None

        # food drifts in from the right
        self.food = self.world.create_sprite(width, 150, 30, 30, name="food")
        self.food.add_animation("food")
        self.food.set_velocity(-1, 0)

        self.player = self.world.create_sprite(width / 2, height - 80, 40, 40, name="player")
        self.player.add_animation("player")

        # enemy slides along the grass, faster than the food
        self.enemy = self.world.create_sprite(width, height - 80, 35, 35, name="enemy")
        self.enemy.add_animation("enemy")
        self.enemy.set_velocity(-5, 0)

        self._log.debug("session setup", width=width, height=height, health=self.health)
        if self.health <= 0:
            self._end_game()

    def press(self, direction):
        """Queue player input for the next frame."""
        if direction not in DIRECTIONS:
            raise InvalidInput(direction)
        self._pending = direction

    def step(self):
        """Advance one frame."""
        if not self.game_over:
            self._respond_to_input()
            self._move_sprites()
            self._interact()
            if not self.game_over:
                self.world.update()
        self.frame += 1

    def boards(self):
        return build_boards(self.score, self.health, self.viewport)

    def to_snapshot(self, time=0.0):
        sprites = [SpriteState.of(sprite) for sprite in self.world.sprites]
        return StateSnapshot(self.frame, time, sprites, self.score, self.health, self.game_over, self.boards())

    def _respond_to_input(self):
        direction, self._pending = self._pending, None
        if direction is None:
            return
        speed = self.config.player_speed
        if direction == "left":
            self.player.velocity_x = -speed
        elif direction == "right":
            self.player.velocity_x = speed
        elif direction == "up":
            self.player.velocity_y = -speed
        elif direction == "down":
            self.player.velocity_y = speed
        else:
            self.player.set_velocity(0, 0)

    def _move_sprites(self):
        if self.food.right < 0:
            self.respawn_food()
        if self.enemy.right < 0:
            self.respawn_enemy()
        self.player.bounce_off(self.boundary.all)

    def _interact(self):
        if self.player.is_touching(self.food):
            self.score += 1
            self.sounds.play(EAT_SOUND)
            self.respawn_food()

        if self.player.is_touching(self.enemy):
            self.health -= 1
            self.sounds.play(HIT_SOUND)
            self.respawn_enemy()
            if self.health <= 0:
                self._end_game()

    def respawn_food(self):
        top = FOOD_MARGIN
        # whole pixels, so float viewports stay above the grass
        bottom = max(top, math.floor(self.viewport.ground_y - FOOD_MARGIN))
        self.food.x = self.viewport.width + self.food.width / 2
        self.food.y = random_range(top, bottom, self.rng)

    def respawn_enemy(self):
        self.enemy.x = self.viewport.width + self.enemy.width / 2
        speed = random_range(self.config.enemy_min_speed, self.config.enemy_max_speed, self.rng)
        self.enemy.velocity_x = -speed

    def _end_game(self):
        self.game_over = True
        for sprite in (self.player, self.enemy, self.food):
            sprite.visible = False
            sprite.set_velocity(0, 0)
        self.sounds.play(GAME_OVER_SOUND)
        self._log.info("game over", score=self.score, frame=self.frame)
