"""Multi-player snake: spawning, the shared game step and player management."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Iterable, Sequence

from snakegrid.model import (
    Direction,
    MultiSnakeGame,
    Point,
    PlayerSnake,
    PlayerStatus,
    direction_delta,
    is_opposite,
)
from snakegrid.single import next_random, place_food

_SPAWN_BORDER = 5
_SPAWN_DIRECTIONS = (Direction.RIGHT, Direction.LEFT, Direction.DOWN, Direction.UP)


@dataclass(frozen=True)
class _Spawn:
    point: Point
    direction: Direction


def _half(value: int) -> int:
    """Halve an integer, rounding toward zero."""
    return int(value / 2)


def _spawn_position(width: int, height: int, index: int, seed: int) -> _Spawn:
    """Choose a start cell and heading for the player at ``index``.

    Starts are kept away from the walls; on a board too small for that the
    snake starts in the centre heading right.
    """
    safe_width = width - 2 * _SPAWN_BORDER
    safe_height = height - 2 * _SPAWN_BORDER
    if safe_width < 1 or safe_height < 1:
        return _Spawn(Point(_half(width), _half(height)), Direction.RIGHT)

    r1 = next_random(seed * 7 + index * 131 + 37, safe_width)
    r2 = next_random(r1.next_seed, safe_height)
    r3 = next_random(r2.next_seed, len(_SPAWN_DIRECTIONS))
    point = Point(_SPAWN_BORDER + r1.value, _SPAWN_BORDER + r2.value)
    return _Spawn(point, _SPAWN_DIRECTIONS[r3.value])


def _spawn_snake(player_id: int, spawn: _Spawn) -> PlayerSnake:
    """Build a live three-segment snake trailing behind its spawn point."""
    delta = direction_delta(spawn.direction)
    head = spawn.point
    segments = (head, head - delta, Point(head.x - 2 * delta.x, head.y - 2 * delta.y))
    return PlayerSnake(
        id=player_id,
        segments=segments,
        direction=spawn.direction,
        score=0,
        status=PlayerStatus.ALIVE,
    )


def _all_segments(snakes: Iterable[PlayerSnake]) -> list[Point]:
    return [segment for snake in snakes for segment in snake.segments]


def _body_without_tail(snake: PlayerSnake) -> tuple[Point, ...]:
    return snake.segments[: max(0, len(snake.segments) - 1)]


def _out_of_bounds(point: Point, width: int, height: int) -> bool:
    return point.x < 0 or point.x >= width or point.y < 0 or point.y >= height


def new_multi_game(width: int, height: int, num_players: int, seed: int) -> MultiSnakeGame:
    """Start a game with ``num_players`` live snakes and one piece of food."""
    snakes = tuple(
        _spawn_snake(index, _spawn_position(width, height, index, seed))
        for index in range(max(0, num_players))
    )
    food = place_food(_all_segments(snakes), width, height, seed)
    return MultiSnakeGame(
        width=width,
        height=height,
        snakes=snakes,
        food=food.point,
        rng_seed=food.seed,
        tick_count=0,
    )


def _chosen_directions(
    snakes: Sequence[PlayerSnake], directions: Sequence[Direction]
) -> list[Direction]:
    """Apply each player's input, ignoring missing inputs and reversals."""
    chosen = []
    for index, snake in enumerate(snakes):
        wanted = directions[index] if index < len(directions) else snake.direction
        chosen.append(snake.direction if is_opposite(snake.direction, wanted) else wanted)
    return chosen


def _survives(
    game: MultiSnakeGame, index: int, new_heads: Sequence[Point]
) -> bool:
    snake = game.snakes[index]
    head = new_heads[index]
    if _out_of_bounds(head, game.width, game.height):
        return False
    if head in _body_without_tail(snake):
        return False
    others = [
        (other_index, other)
        for other_index, other in enumerate(game.snakes)
        if other_index != index and other.status is PlayerStatus.ALIVE
    ]
    if any(head in _body_without_tail(other) for _, other in others):
        return False
    return not any(head == new_heads[other_index] for other_index, _ in others)


def multi_tick(game: MultiSnakeGame, directions: Sequence[Direction]) -> MultiSnakeGame:
    """Advance every live snake one step at the same time.

    ``directions`` holds each player's input by position; a missing input
    keeps the snake's heading. Snakes that hit a wall, a body or another
    snake's new head die. If several snakes reach the food, the last one
    in order eats it.
    """
    directions = list(directions)
    snakes = game.snakes
    new_dirs = _chosen_directions(snakes, directions)

    new_heads = [
        (snake.head or Point(0, 0)) + direction_delta(new_dirs[index])
        if snake.status is PlayerStatus.ALIVE
        else Point(-1, -1)
        for index, snake in enumerate(snakes)
    ]

    survivors = [
        snake.status is PlayerStatus.ALIVE and _survives(game, index, new_heads)
        for index, snake in enumerate(snakes)
    ]

    eater = -1
    for index, alive in enumerate(survivors):
        if alive and new_heads[index] == game.food:
            eater = index

    result: list[PlayerSnake] = []
    for index, snake in enumerate(snakes):
        if snake.status is not PlayerStatus.ALIVE:
            result.append(snake)
        elif not survivors[index]:
            result.append(replace(snake, status=PlayerStatus.DEAD))
        else:
            eating = index == eater
            keep = len(snake.segments) if eating else len(snake.segments) - 1
            result.append(
                PlayerSnake(
                    id=snake.id,
                    segments=(new_heads[index], *snake.segments[: max(0, keep)]),
                    direction=new_dirs[index],
                    score=snake.score + 1 if eating else snake.score,
                    status=PlayerStatus.ALIVE,
                )
            )

    food, seed = game.food, game.rng_seed
    if eater >= 0:
        placement = place_food(_all_segments(result), game.width, game.height, game.rng_seed)
        food, seed = placement.point, placement.seed

    return MultiSnakeGame(
        width=game.width,
        height=game.height,
        snakes=tuple(result),
        food=food,
        rng_seed=seed,
        tick_count=game.tick_count + 1,
    )


def change_player_direction(
    game: MultiSnakeGame, player_id: int, direction: Direction
) -> MultiSnakeGame:
    """Turn a live player's snake, unless that would reverse it."""
    snakes = tuple(
        replace(snake, direction=direction)
        if snake.id == player_id
        and snake.status is PlayerStatus.ALIVE
        and not is_opposite(snake.direction, direction)
        else snake
        for snake in game.snakes
    )
    return replace(game, snakes=snakes)


def is_multi_game_over(game: MultiSnakeGame) -> bool:
    """Return True once at most one snake is left alive.

    A game with no players is never over; a solo game ends when its only
    snake dies.
    """
    alive = sum(1 for snake in game.snakes if snake.status is PlayerStatus.ALIVE)
    if not game.snakes:
        return False
    if len(game.snakes) == 1:
        return alive == 0
    return alive <= 1


def add_player(game: MultiSnakeGame, seed: int) -> MultiSnakeGame:
    """Add a new live snake and re-place the food."""
    new_id = len(game.snakes)
    spawn = _spawn_position(game.width, game.height, new_id, seed)
    snakes = (*game.snakes, _spawn_snake(new_id, spawn))
    food = place_food(_all_segments(snakes), game.width, game.height, seed)
    return replace(game, snakes=snakes, food=food.point, rng_seed=food.seed)


def remove_player(game: MultiSnakeGame, player_id: int) -> MultiSnakeGame:
    """Drop every snake with the given player id."""
    return replace(
        game, snakes=tuple(snake for snake in game.snakes if snake.id != player_id)
    )