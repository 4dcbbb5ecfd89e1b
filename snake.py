from collections import deque
from enum import Enum
from typing import NamedTuple, Optional


class SnakeGameError(Exception):
    pass


class PreconditionViolation(SnakeGameError):
    """Raised when a caller breaks an ordering contract of the snake."""


class Cell(NamedTuple):
    x: int
    y: int


class Direction(Enum):
    # (dx, dy), y grows downward
    UP = (0, -1)
    DOWN = (0, 1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)

    def opposite(self):
        dx, dy = self.value
        return Direction((-dx, -dy))


class Snake:
    """
    A snake on the grid.

    body: deque of cells, head at index 0 and tail at the end
    direction: current heading, changed only by move_forward
    last_removed_tail: cell popped by the latest move, re-appended on growth
    """

    def __init__(self, x: int, y: int):
        self.direction = Direction.RIGHT
        self.body = deque([Cell(x + 2, y), Cell(x + 1, y), Cell(x, y)])
        self.last_removed_tail: Optional[Cell] = None

    def __len__(self):
        return len(self.body)

    def cells(self):
        return list(self.body)

    def head_position(self) -> Cell:
        if not self.body:
            raise PreconditionViolation("snake body is empty")
        return self.body[0]

    def head_direction(self) -> Direction:
        return self.direction

    def next_head(self, dir: Optional[Direction] = None) -> Cell:
        """Cell the head would occupy after one step, without moving."""
        head_x, head_y = self.head_position()
        dx, dy = (dir or self.direction).value
        return Cell(head_x + dx, head_y + dy)

    def move_forward(self, dir: Optional[Direction] = None):
        # no bounds or collision checks here, the game does those first
        if dir is not None:
            self.direction = dir
        self.body.appendleft(self.next_head())
        self.last_removed_tail = self.body.pop()

    def restore_tail(self):
        if self.last_removed_tail is None:
            raise PreconditionViolation("restore_tail called before any move")
        self.body.append(self.last_removed_tail)

    def overlap_tail(self, x: int, y: int) -> bool:
        """True if (x, y) hits any body cell except the tail, which is about to move."""
        cell = (x, y)
        for i, part in enumerate(self.body):
            if i == len(self.body) - 1:
                return False
            if part == cell:
                return True
        return False

    def __repr__(self):
        return f"<Snake head={self.body[0] if self.body else None} len={len(self.body)} dir={self.direction.name}>"
