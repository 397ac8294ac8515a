"""Game state for the dino game: the dino, its animation and its jump."""

from __future__ import annotations

from dataclasses import dataclass, field

from sanselgames.snake import Position
from sanselgames.timer import Timer, TimerMode

ARENA_WIDTH = 255
ARENA_HEIGHT = 255

START_POSITION = Position(35, 75)
JUMP_HEIGHT = 100


@dataclass
class Dino:
    """The player character's running state."""

    speed: float
    passed: float


@dataclass
class AnimationConfig:
    """A looping run through a range of sprite-sheet frames."""

    first_sprite_index: int
    last_sprite_index: int
    fps: int
    frame_timer: Timer = field(init=False, repr=False)

    def __post_init__(self) -> None:
        if self.fps <= 0:
            raise ValueError(f"fps must be positive, got {self.fps}")
        self.frame_timer = self._new_timer()

    def _new_timer(self) -> Timer:
        return Timer(1.0 / self.fps, TimerMode.ONCE)

    def advance(self, delta: float, index: int) -> int:
        """Let ``delta`` seconds pass and return the frame to show next."""
        if not self.frame_timer.tick(delta).just_finished():
            return index
        self.frame_timer = self._new_timer()
        if index == self.last_sprite_index:
            return self.first_sprite_index
        return index + 1


@dataclass
class Size:
    """An object's extent in arena tiles."""

    width: float
    height: float

    @classmethod
    def square(cls, side: float) -> Size:
        return cls(side, side)


class DinoGame:
    """The dino on its field, animated and able to jump."""

    def __init__(self) -> None:
        self.dino = Dino(1.0, 0.0)
        self.animation = AnimationConfig(0, 5, 10)
        self.frame = self.animation.first_sprite_index
        self.size = Size(2.0, 3.0)
        self.position = START_POSITION

    def jump(self) -> None:
        """Lift the dino to jump height."""
        self.position = Position(self.position.x, JUMP_HEIGHT)

    def dash(self) -> Position:
        """The dash move does not displace the dino; return where it stands."""
        return self.position

    def update(self, delta: float, jump_pressed: bool = False) -> None:
        """Run one frame: handle the jump key and step the animation."""
        if jump_pressed:
            self.jump()
        self.frame = self.animation.advance(delta, self.frame)