"""Game state and rules for the snake game."""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from enum import Enum

from sanselgames.timer import Timer, TimerMode

ARENA_WIDTH = 15
ARENA_HEIGHT = 15

SNAKE_HEAD_COLOR = (0.80, 0.49, 0.12)
SNAKE_SEGMENT_COLOR = (0.43, 0.30, 0.15)
APPLE_COLOR = (1.0, 0.0, 0.0)
WALL_COLOR = (1.0, 1.0, 1.0)
BACKGROUND_COLOR = (0.04, 0.04, 0.04)

HEAD_SIZE = 0.8
SEGMENT_SIZE = 0.65
OBJECT_SIZE = 0.8

MOVE_COOLDOWN = 0.3
MAX_OBSTRUCTIONS = 85
MAX_APPLES = 15


@dataclass(frozen=True)
class Position:
    """A tile in the arena."""

    x: int
    y: int

    def step(self, direction: Direction) -> Position:
        """Return the neighbouring tile in ``direction``."""
        dx, dy = direction.offset
        return Position(self.x + dx, self.y + dy)


class Direction(Enum):
    """A heading on the grid; up increases y."""

    LEFT = (-1, 0)
    UP = (0, 1)
    RIGHT = (1, 0)
    DOWN = (0, -1)

    @property
    def offset(self) -> tuple[int, int]:
        return self.value

    def opposite(self) -> Direction:
        dx, dy = self.value
        return Direction((-dx, -dy))


START_HEAD = Position(2, 2)
START_TAIL = Position(2, 1)
START_DIRECTION = Direction.UP


class GameOver(Exception):
    """Raised when the snake dies."""


@dataclass
class Rules:
    """Tunable settings of a running game."""

    pause: bool = True
    next: Position | None = None
    spawn_obstruction_timer: Timer = field(
        default_factory=lambda: Timer(15.0, TimerMode.REPEATING)
    )
    spawn_food_timer: Timer = field(
        default_factory=lambda: Timer(3.0, TimerMode.REPEATING)
    )
    obstruction_at_once: int = 25
    apples_at_once: int = 1

    def __post_init__(self) -> None:
        if not 0 <= self.obstruction_at_once <= MAX_OBSTRUCTIONS:
            raise ValueError(
                f"obstruction_at_once must be within 0..{MAX_OBSTRUCTIONS}"
            )
        if not 0 <= self.apples_at_once <= MAX_APPLES:
            raise ValueError(f"apples_at_once must be within 0..{MAX_APPLES}")


class SnakeGame:
    """The whole snake game: the snake, apples, walls and rules."""

    def __init__(self, rules: Rules | None = None, rng: random.Random | None = None):
        self.rules = rules if rules is not None else Rules()
        self.rng = rng if rng is not None else random.Random()
        self.body: list[Position] = [START_HEAD, START_TAIL]
        self.direction = START_DIRECTION
        self.cooldown = Timer(MOVE_COOLDOWN, TimerMode.REPEATING)
        self.foods: list[Position] = []
        self.walls: list[Position] = []
        self.last_tail_position: Position | None = None

    @property
    def head(self) -> Position:
        return self.body[0]

    @property
    def segments(self) -> list[Position]:
        """The body tiles behind the head."""
        return self.body[1:]

    @property
    def obstructions(self) -> list[Position]:
        """Tiles that kill the snake's head: walls and its own segments."""
        return self.walls + self.segments

    def toggle_pause(self) -> bool:
        """Flip the pause flag and return the new value."""
        self.rules.pause = not self.rules.pause
        return self.rules.pause

    def steer(self, direction: Direction) -> None:
        """Turn the head, unless that would reverse it onto itself."""
        if direction != self.direction.opposite():
            self.direction = direction

    def occupied(self) -> set[Position]:
        """Every tile holding the snake, an apple or a wall."""
        return set(self.body) | set(self.foods) | set(self.walls)

    def choose_next_position(self) -> Position:
        """Pick the tile where the next apple or wall will appear."""
        taken = self.occupied()
        current = self.rules.next
        if current is not None and current not in taken:
            return current
        free = [
            Position(x, y)
            for x in range(ARENA_WIDTH)
            for y in range(ARENA_HEIGHT)
            if Position(x, y) not in taken
        ]
        if not free:
            raise GameOver("the arena is full")
        self.rules.next = self.rng.choice(free)
        return self.rules.next

    def spawn_objects(self, delta: float) -> None:
        """Place an apple and a wall at the chosen tile when their timers allow."""
        rules = self.rules
        if (
            not rules.pause
            and rules.apples_at_once > len(self.foods)
            and rules.spawn_food_timer.tick(delta).finished()
            and rules.next is not None
        ):
            self.foods.append(rules.next)
        if (
            not rules.pause
            and rules.obstruction_at_once > len(self.walls)
            and rules.spawn_obstruction_timer.tick(delta).finished()
            and rules.next is not None
        ):
            self.walls.append(rules.next)

    def eat(self) -> int:
        """Remove apples under the head and return how many were eaten."""
        head = self.head
        eaten = sum(1 for food in self.foods if food == head)
        self.foods = [food for food in self.foods if food != head]
        return eaten

    def grow(self, count: int = 1) -> None:
        """Add ``count`` segments where the tail was before the last move."""
        if count <= 0:
            return
        if self.last_tail_position is None:
            raise RuntimeError("the snake has not moved yet, so it has no tail to grow")
        self.body.extend([self.last_tail_position] * count)

    def check_collisions(self) -> None:
        """Raise GameOver if the head touches a wall or the snake's body."""
        if not self.rules.pause and self.head in self.obstructions:
            raise GameOver(f"the snake hit an obstruction at {self.head}")

    def move(self, delta: float) -> bool:
        """Advance the move cooldown; step the snake when it expires.

        Returns True if the snake stepped.
        """
        if not self.cooldown.tick(delta).finished():
            return False

        previous = list(self.body)
        self.last_tail_position = previous[-1]

        head = self.head
        if (
            head.x in (ARENA_WIDTH + 1, -1)
            or head.y in (ARENA_HEIGHT + 1, -1)
        ):
            raise GameOver(f"the snake left the arena at {head}")

        if self.rules.pause:
            return False

        self.body = [head.step(self.direction)] + previous[:-1]
        return True

    def update(self, delta: float) -> None:
        """Run one frame of the game."""
        self.choose_next_position()
        self.move(delta)
        self.grow(self.eat())
        self.check_collisions()
        self.spawn_objects(delta)