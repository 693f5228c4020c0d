"""Single-player snake: random numbers, food placement and the game step."""

from __future__ import annotations

from dataclasses import replace
from typing import Iterable, Sequence

from snakegrid.model import (
    Direction,
    FoodPlacement,
    GameStatus,
    Point,
    RandomResult,
    SnakeGame,
    direction_delta,
    is_opposite,
)

_MULTIPLIER = 1664525
_INCREMENT = 1013904223
_MASK = 0x7FFFFFFF


def _wrap32(value: int) -> int:
    """Wrap an integer to the signed 32-bit range."""
    value &= 0xFFFFFFFF
    return value - 0x100000000 if value >= 0x80000000 else value


def next_random(seed: int, maximum: int) -> RandomResult:
    """Advance a linear congruential generator and draw a value in [0, maximum).

    When ``maximum`` is not positive the drawn value is 0.
    """
    masked = (seed * _MULTIPLIER + _INCREMENT) & _MASK
    value = masked % maximum if maximum > 0 else 0
    return RandomResult(value=value, next_seed=masked)


def place_food(
    snake: Iterable[Point], width: int, height: int, seed: int
) -> FoodPlacement:
    """Pick a free cell for food.

    Tries random cells first, as many times as the board has cells, then
    scans the board row by row. A full board yields the origin.
    """
    occupied = set(snake)
    total_cells = _wrap32(width * height)
    current_seed = seed

    for _ in range(max(0, total_cells)):
        result = next_random(current_seed, total_cells)
        current_seed = result.next_seed
        if width > 0:
            candidate = Point(result.value % width, result.value // width)
        else:
            candidate = Point(0, 0)
        if candidate not in occupied:
            return FoodPlacement(point=candidate, seed=current_seed)

    for y in range(height):
        for x in range(width):
            candidate = Point(x, y)
            if candidate not in occupied:
                return FoodPlacement(point=candidate, seed=current_seed)

    return FoodPlacement(point=Point(0, 0), seed=current_seed)


def move(
    head: Point, body: Sequence[Point], food: Point, width: int, height: int
) -> Direction:
    """Choose a direction for an automatic player; this one always goes right."""
    return Direction.RIGHT


def new_game(width: int, height: int, seed: int) -> SnakeGame:
    """Start a game with a three-segment snake in the centre heading right."""
    center_x = width // 2 if width > 0 else 0
    center_y = height // 2 if height > 0 else 0
    snake = (
        Point(center_x, center_y),
        Point(center_x - 1, center_y),
        Point(center_x - 2, center_y),
    )
    food = place_food(snake, width, height, seed)
    return SnakeGame(
        width=width,
        height=height,
        snake=snake,
        direction=Direction.RIGHT,
        food=food.point,
        score=0,
        status=GameStatus.PLAYING,
        rng_seed=food.seed,
    )


def change_direction(game: SnakeGame, direction: Direction) -> SnakeGame:
    """Turn the snake, unless the new direction would reverse it."""
    if is_opposite(game.direction, direction):
        return game
    return replace(game, direction=direction)


def _out_of_bounds(point: Point, width: int, height: int) -> bool:
    return point.x < 0 or point.x >= width or point.y < 0 or point.y >= height


def tick(game: SnakeGame) -> SnakeGame:
    """Advance the game by one step."""
    if game.status is GameStatus.GAME_OVER:
        return game

    head = game.snake[0] if game.snake else Point(0, 0)
    new_head = head + direction_delta(game.direction)

    if _out_of_bounds(new_head, game.width, game.height):
        return replace(game, status=GameStatus.GAME_OVER)

    eating = new_head == game.food
    keep_length = max(0, len(game.snake) if eating else len(game.snake) - 1)
    kept = game.snake[:keep_length]

    if new_head in kept:
        return replace(game, status=GameStatus.GAME_OVER)

    new_snake = (new_head, *kept)

    if eating:
        food = place_food(new_snake, game.width, game.height, game.rng_seed)
        return replace(
            game,
            snake=new_snake,
            food=food.point,
            score=game.score + 1,
            status=GameStatus.PLAYING,
            rng_seed=food.seed,
        )
    return replace(game, snake=new_snake)