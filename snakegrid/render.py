"""Text rendering of single- and multi-player boards for an ANSI terminal."""

from __future__ import annotations

from typing import Callable, Iterator

from snakegrid.model import (
    GameStatus,
    MultiSnakeGame,
    PlayerStatus,
    Point,
    SnakeGame,
)

_CLEAR_SCREEN = "\x1b[2J\x1b[H"
_WALL = "#"
_NEWLINE = "\r\n"
_FOOD = "*"
_EMPTY = " "

_HEAD_CHARS = ("@", "#", "$", "%")
_BODY_CHARS = ("o", "+", "~", "=")
_OTHER_HEAD = "&"
_OTHER_BODY = "."

_GAME_STATUS_TEXT = {
    GameStatus.PLAYING: "Playing",
    GameStatus.GAME_OVER: "GAME OVER",
}

_PLAYER_STATUS_TEXT = {
    PlayerStatus.ALIVE: "Playing",
    PlayerStatus.DEAD: "DEAD",
}


def player_head_char(player_id: int) -> str:
    """Return the character drawn for the head of the given player's snake."""
    if 0 <= player_id < len(_HEAD_CHARS):
        return _HEAD_CHARS[player_id]
    return _OTHER_HEAD


def player_body_char(player_id: int) -> str:
    """Return the character drawn for the body of the given player's snake."""
    if 0 <= player_id < len(_BODY_CHARS):
        return _BODY_CHARS[player_id]
    return _OTHER_BODY


def _board_lines(
    width: int, height: int, cell: Callable[[Point], str]
) -> Iterator[str]:
    """Yield the walled board, one line at a time, each ending in CRLF."""
    border = _WALL * (max(0, width) + 2) + _NEWLINE
    yield border
    for y in range(height):
        cells = "".join(cell(Point(x, y)) for x in range(width))
        yield f"{_WALL}{cells}{_WALL}{_NEWLINE}"
    yield border


def _cell_char(game: SnakeGame, point: Point) -> str:
    head = game.snake[0] if game.snake else Point(-1, -1)
    if point == head:
        return "@"
    if point in game.snake[1:]:
        return "o"
    if point == game.food:
        return _FOOD
    return _EMPTY


def render(game: SnakeGame) -> str:
    """Draw a single-player game, followed by its score and status."""
    status = _GAME_STATUS_TEXT.get(game.status, "")
    parts = [_CLEAR_SCREEN]
    parts.extend(
        _board_lines(game.width, game.height, lambda p: _cell_char(game, p))
    )
    parts.append(f"Score: {game.score}  {status}{_NEWLINE}")
    return "".join(parts)


def _multi_cell_char(game: MultiSnakeGame, point: Point) -> str:
    for snake in game.snakes:
        if snake.segments and point == snake.segments[0]:
            return player_head_char(snake.id)
    for snake in game.snakes:
        if point in snake.segments[1:]:
            return player_body_char(snake.id)
    if point == game.food:
        return _FOOD
    return _EMPTY


def multi_render(game: MultiSnakeGame) -> str:
    """Draw a multi-player game, followed by one status line per player."""
    parts = [_CLEAR_SCREEN]
    parts.extend(
        _board_lines(game.width, game.height, lambda p: _multi_cell_char(game, p))
    )
    for snake in game.snakes:
        status = _PLAYER_STATUS_TEXT.get(snake.status, "")
        symbol = player_head_char(snake.id)
        parts.append(f"P{snake.id} {symbol}: {snake.score}  {status}{_NEWLINE}")
    return "".join(parts)