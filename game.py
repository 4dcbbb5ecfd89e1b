import logging
import random
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Protocol

import numpy as np

from snake import Cell, Direction, Snake, SnakeGameError

logger = logging.getLogger(__name__)

# --- Config ---
START_X, START_Y = 2, 2
DEFAULT_FOOD = Cell(6, 4)
MIN_WIDTH, MIN_HEIGHT = DEFAULT_FOOD.x + 2, DEFAULT_FOOD.y + 2

# Board codes for get_state()
EMPTY, SNAKE, FOOD, WALL = 0, 1, 2, 3


@dataclass(frozen=True)
class GameConfig:
    moving_period: float = 0.1
    restart_time: float = 1.0
    arena_width: int = 20
    arena_height: int = 20
    max_food_attempts: int = 1000

    def __post_init__(self):
        if self.moving_period <= 0 or self.restart_time <= 0:
            raise ValueError("moving_period and restart_time must be positive")
        if self.max_food_attempts < 0:
            raise ValueError("max_food_attempts must not be negative")


DEFAULT_CONFIG = GameConfig()


class ArenaFull(SnakeGameError):
    """No interior cell is free for food."""


class Key(Enum):
    UP = "UP"
    DOWN = "DOWN"
    LEFT = "LEFT"
    RIGHT = "RIGHT"
    OTHER = "OTHER"


KEY_DIRECTIONS = {
    Key.UP: Direction.UP,
    Key.DOWN: Direction.DOWN,
    Key.LEFT: Direction.LEFT,
    Key.RIGHT: Direction.RIGHT,
}


class Renderer(Protocol):
    def draw(self, body: List[Cell], food: Optional[Cell], width: int, height: int, game_over: bool) -> None: ...


class Game:
    """
    Single-snake arena. The outermost ring of cells is wall.

    Driven from outside: update(delta_time) once per frame, key_pressed(key)
    per input event, draw(renderer) when a frame should be painted.
    """

    def __init__(self, width: int, height: int, config: Optional[GameConfig] = None,
                 rng: Optional[random.Random] = None):
        if width < MIN_WIDTH or height < MIN_HEIGHT:
            raise ValueError(f"arena must be at least {MIN_WIDTH}x{MIN_HEIGHT}, got {width}x{height}")
        self.width, self.height = width, height
        self.config = config or DEFAULT_CONFIG
        self.rng = rng or random.Random()

        self.snake = Snake(START_X, START_Y)
        self.food_exists = True
        self.food = DEFAULT_FOOD
        self.game_over = False
        self.waiting_time = 0.0

    @classmethod
    def from_config(cls, config: GameConfig, rng: Optional[random.Random] = None):
        return cls(config.arena_width, config.arena_height, config=config, rng=rng)

    def key_pressed(self, key: Key):
        if self.game_over:
            return
        dir = KEY_DIRECTIONS.get(key, self.snake.head_direction())
        if dir == self.snake.head_direction().opposite():
            logger.debug("Ignoring reversal to %s", dir.name)
            return
        self.update_snake(dir)

    def update(self, delta_time: float):
        if delta_time < 0:
            raise ValueError(f"delta_time must not be negative, got {delta_time}")
        self.waiting_time += delta_time

        if self.game_over:
            if self.waiting_time > self.config.restart_time:
                self.restart()
            return

        if not self.food_exists:
            self.add_food()

        if self.waiting_time > self.config.moving_period:
            self.update_snake(None)

    def in_interior(self, x: int, y: int) -> bool:
        return 0 < x < self.width - 1 and 0 < y < self.height - 1

    def check_if_snake_alive(self, dir: Optional[Direction] = None) -> bool:
        next_x, next_y = self.snake.next_head(dir)
        if self.snake.overlap_tail(next_x, next_y):
            return False
        return self.in_interior(next_x, next_y)

    def update_snake(self, dir: Optional[Direction] = None):
        if self.check_if_snake_alive(dir):
            self.snake.move_forward(dir)
            self.check_eating()
        else:
            self.game_over = True
            logger.info("Game over at %s, length %d", self.snake.next_head(dir), len(self.snake))
        self.waiting_time = 0.0

    def check_eating(self):
        if self.food_exists and self.snake.head_position() == self.food:
            self.food_exists = False
            self.snake.restore_tail()

    def free_cells(self) -> List[Cell]:
        return [Cell(x, y)
                for y in range(1, self.height - 1)
                for x in range(1, self.width - 1)
                if not self.snake.overlap_tail(x, y)]

    def add_food(self):
        for _ in range(self.config.max_food_attempts):
            x = self.rng.randrange(1, self.width - 1)
            y = self.rng.randrange(1, self.height - 1)
            if not self.snake.overlap_tail(x, y):
                break
        else:
            # sampling kept missing, pick from what is actually left
            free = self.free_cells()
            if not free:
                raise ArenaFull(f"no free cell for food in {self.width}x{self.height} arena")
            x, y = self.rng.choice(free)

        self.food = Cell(x, y)
        self.food_exists = True
        logger.debug("Food placed at %s", self.food)

    def restart(self):
        self.snake = Snake(START_X, START_Y)
        self.waiting_time = 0.0
        self.food_exists = True
        self.food = DEFAULT_FOOD
        self.game_over = False
        logger.info("Game restarted")

    def draw(self, renderer: Renderer):
        renderer.draw(self.snake.cells(), self.food if self.food_exists else None,
                      self.width, self.height, self.game_over)

    def get_state(self) -> np.ndarray:
        state = np.full((self.height, self.width), WALL, dtype=np.int8)
        state[1:-1, 1:-1] = EMPTY
        for x, y in self.snake.body:
            if 0 <= x < self.width and 0 <= y < self.height:
                state[y, x] = SNAKE
        if self.food_exists:
            fx, fy = self.food
            state[fy, fx] = FOOD
        return state

    def __repr__(self):
        return (f"<Game {self.width}x{self.height} snake={self.snake!r} "
                f"food={self.food if self.food_exists else None} game_over={self.game_over}>")
