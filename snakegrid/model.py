"""Immutable game state shared by the single- and multi-player snake games."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional


class Direction(Enum):
    """A heading on the grid; the value is its text form."""

    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"


class GameStatus(Enum):
    """State of a single-player game."""

    PLAYING = "playing"
    GAME_OVER = "game_over"


class PlayerStatus(Enum):
    """State of one snake in a multi-player game."""

    ALIVE = "alive"
    DEAD = "dead"


@dataclass(frozen=True)
class Point:
    """A cell on the grid, or an offset between cells."""

    x: int
    y: int

    def __add__(self, other: Point) -> Point:
        return Point(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Point) -> Point:
        return Point(self.x - other.x, self.y - other.y)


@dataclass(frozen=True)
class RandomResult:
    """A drawn value together with the seed for the next draw."""

    value: int
    next_seed: int


@dataclass(frozen=True)
class FoodPlacement:
    """Where food was placed and the seed left after placing it."""

    point: Point
    seed: int


@dataclass(frozen=True)
class SnakeGame:
    """State of a single-player game; the snake's head is its first segment."""

    width: int
    height: int
    snake: tuple[Point, ...]
    direction: Direction
    food: Point
    score: int
    status: GameStatus
    rng_seed: int

    def __post_init__(self) -> None:
        object.__setattr__(self, "snake", tuple(self.snake))


@dataclass(frozen=True)
class PlayerSnake:
    """One player's snake in a multi-player game; the head comes first."""

    id: int
    segments: tuple[Point, ...]
    direction: Direction
    score: int
    status: PlayerStatus

    def __post_init__(self) -> None:
        object.__setattr__(self, "segments", tuple(self.segments))

    @property
    def head(self) -> Optional[Point]:
        """The first segment, or None for a snake with no segments."""
        return self.segments[0] if self.segments else None


@dataclass(frozen=True)
class MultiSnakeGame:
    """State of a game shared by several snakes."""

    width: int
    height: int
    snakes: tuple[PlayerSnake, ...]
    food: Point
    rng_seed: int
    tick_count: int = field(default=0)

    def __post_init__(self) -> None:
        object.__setattr__(self, "snakes", tuple(self.snakes))


_OPPOSITES = {
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
}

_DELTAS = {
    Direction.UP: Point(0, -1),
    Direction.DOWN: Point(0, 1),
    Direction.LEFT: Point(-1, 0),
    Direction.RIGHT: Point(1, 0),
}


def point_equals(a: Point, b: Point) -> bool:
    """Return True when both points name the same cell."""
    return a.x == b.x and a.y == b.y


def is_opposite(a: Direction, b: Direction) -> bool:
    """Return True when the two directions point opposite ways."""
    return _OPPOSITES.get(a) is b


def direction_delta(direction: Direction) -> Point:
    """Return the one-cell offset for moving in ``direction``."""
    return _DELTAS.get(direction, Point(0, 0))


def direction_to_string(direction: Direction) -> str:
    """Return the lower-case name of a direction."""
    return direction.value if isinstance(direction, Direction) else "right"


def string_to_direction(text: str) -> Optional[Direction]:
    """Parse a lower-case direction name; return None if it is not one."""
    try:
        return Direction(text)
    except ValueError:
        return None