import pytest

from snakegrid.model import Direction, GameStatus, Point, SnakeGame
from snakegrid.single import (
    change_direction,
    move,
    new_game,
    next_random,
    place_food,
    tick,
)


def _run(game, ticks):
    for _ in range(ticks):
        game = tick(game)
    return game


def test_initial_state_has_snake_near_center():
    game = new_game(10, 10, 42)
    head = game.snake[0]
    assert head.x == 5
    assert head.y == 5
    assert len(game.snake) == 3


def test_initial_snake_extends_left_of_head():
    game = new_game(10, 10, 42)
    assert game.snake == (Point(5, 5), Point(4, 5), Point(3, 5))


def test_initial_status_is_playing():
    assert new_game(10, 10, 42).status is GameStatus.PLAYING


def test_initial_direction_is_right():
    assert new_game(10, 10, 42).direction is Direction.RIGHT


def test_initial_score_is_zero():
    assert new_game(10, 10, 42).score == 0


def test_initial_food_is_inside_board_and_off_snake():
    game = new_game(10, 10, 42)
    assert 0 <= game.food.x < 10
    assert 0 <= game.food.y < 10
    assert game.food not in game.snake


def test_snake_moves_right():
    head = tick(new_game(10, 10, 42)).snake[0]
    assert head.x == 6
    assert head.y == 5


def test_snake_moves_down():
    game = change_direction(new_game(10, 10, 42), Direction.DOWN)
    head = tick(game).snake[0]
    assert head.x == 5
    assert head.y == 6


def test_snake_moves_up():
    game = change_direction(new_game(10, 10, 42), Direction.UP)
    head = tick(game).snake[0]
    assert head.y == 4


def test_opposite_direction_is_rejected():
    game = new_game(10, 10, 42)
    assert change_direction(game, Direction.LEFT).direction is Direction.RIGHT


def test_non_opposite_direction_is_accepted():
    game = new_game(10, 10, 42)
    assert change_direction(game, Direction.UP).direction is Direction.UP


def test_wall_collision_causes_game_over():
    game = _run(new_game(10, 10, 42), 10)
    assert game.status is GameStatus.GAME_OVER


def test_self_collision_causes_game_over():
    snake = [
        Point(5, 5),
        Point(6, 5),
        Point(6, 4),
        Point(5, 4),
        Point(4, 4),
        Point(4, 5),
        Point(4, 6),
    ]
    game = SnakeGame(
        10, 10, snake, Direction.LEFT, Point(0, 0), 0, GameStatus.PLAYING, 42
    )
    assert tick(game).status is GameStatus.GAME_OVER


def test_moving_into_tail_cell_is_allowed():
    snake = [Point(5, 5), Point(6, 5), Point(6, 6), Point(5, 6)]
    game = SnakeGame(
        10, 10, snake, Direction.DOWN, Point(0, 0), 0, GameStatus.PLAYING, 1
    )
    moved = tick(game)
    assert moved.status is GameStatus.PLAYING
    assert moved.snake == (Point(5, 6), Point(5, 5), Point(6, 5), Point(6, 6))


def test_prng_is_deterministic():
    r1 = next_random(42, 100)
    r2 = next_random(42, 100)
    assert r1.value == r2.value
    assert r1.next_seed == r2.next_seed


def test_prng_produces_values_in_range():
    r = next_random(42, 10)
    assert 0 <= r.value < 10


def test_prng_with_nonpositive_maximum_yields_zero():
    r = next_random(0, 0)
    assert r.value == 0
    assert r.next_seed == 1013904223


@pytest.mark.parametrize("seed", [2**31 - 1, -(2**31), -1, 123456789])
def test_prng_seed_stays_nonnegative_31_bit(seed):
    r = next_random(seed, 7)
    assert 0 <= r.next_seed < 2**31
    assert 0 <= r.value < 7


def test_tick_does_nothing_when_game_is_over():
    game = _run(new_game(10, 10, 42), 10)
    assert game.status is GameStatus.GAME_OVER
    head1 = game.snake[0]
    after = tick(game)
    assert after.snake[0] == head1
    assert after == game


def test_eating_grows_snake_and_scores():
    snake = [Point(5, 5), Point(4, 5), Point(3, 5)]
    game = SnakeGame(
        10, 10, snake, Direction.RIGHT, Point(6, 5), 0, GameStatus.PLAYING, 7
    )
    after = tick(game)
    assert after.score == 1
    assert after.snake == (Point(6, 5), Point(5, 5), Point(4, 5), Point(3, 5))
    assert after.food not in after.snake
    assert after.status is GameStatus.PLAYING


def test_place_food_avoids_snake():
    snake = [Point(x, 0) for x in range(4)] + [Point(x, 1) for x in range(3)]
    placement = place_food(snake, 4, 2, 99)
    assert placement.point == Point(3, 1)


def test_place_food_on_full_board_returns_origin():
    snake = [Point(x, y) for y in range(2) for x in range(2)]
    placement = place_food(snake, 2, 2, 5)
    assert placement.point == Point(0, 0)


def test_place_food_is_deterministic():
    first = place_food([Point(1, 1)], 5, 5, 11)
    second = place_food([Point(1, 1)], 5, 5, 11)
    assert first.point == second.point
    assert first.seed == second.seed
    assert 0 <= first.point.x < 5
    assert 0 <= first.point.y < 5
    assert first.point != Point(1, 1)


def test_move_always_goes_right():
    assert move(Point(0, 0), [Point(1, 0)], Point(3, 3), 10, 10) is Direction.RIGHT