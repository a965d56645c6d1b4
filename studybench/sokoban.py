"""A box-pushing puzzle played on a grid of tiles."""

from __future__ import annotations

import argparse
from collections.abc import Iterable, Sequence
from enum import IntEnum

__all__ = ["Tile", "Sokoban", "level_one", "level_two", "main"]

_CLEAR_SCREEN = "\033[2J\033[H"


class Tile(IntEnum):
    """Contents of one square of the board."""

    FLOOR = 0
    WALL = 1
    BOX = 2
    TARGET = 3
    PLAYER_ON_TARGET = 4
    BOX_ON_TARGET = 5
    PLAYER = 6

    @property
    def symbol(self) -> str:
        return _SYMBOLS[self]


_SYMBOLS = {
    Tile.FLOOR: "  ",
    Tile.WALL: "■",
    Tile.BOX: "□",
    Tile.TARGET: "☆",
    Tile.PLAYER_ON_TARGET: "♂",
    Tile.BOX_ON_TARGET: "★",
    Tile.PLAYER: "♀",
}

_DIRECTIONS = {"w": (-1, 0), "s": (1, 0), "a": (0, -1), "d": (0, 1)}
_BOXES = (Tile.BOX, Tile.BOX_ON_TARGET)
_OPEN = (Tile.FLOOR, Tile.TARGET)


class Sokoban:
    """A board with one player who walks and pushes boxes onto targets."""

    def __init__(self, board: Iterable[Iterable[int]]) -> None:
        self._board = [[Tile(cell) for cell in row] for row in board]
        if not self._board or any(len(row) != len(self._board[0]) for row in self._board):
            raise ValueError("the board must be a non-empty rectangle")
        players = [
            (r, c)
            for r, row in enumerate(self._board)
            for c, tile in enumerate(row)
            if tile in (Tile.PLAYER, Tile.PLAYER_ON_TARGET)
        ]
        if not players:
            raise ValueError("the board has no player")
        self._player = players[-1]

    @property
    def board(self) -> tuple[tuple[Tile, ...], ...]:
        """A snapshot of the board, row by row."""
        return tuple(tuple(row) for row in self._board)

    @property
    def player(self) -> tuple[int, int]:
        """The player's (row, column)."""
        return self._player

    def _at(self, r: int, c: int) -> Tile:
        if 0 <= r < len(self._board) and 0 <= c < len(self._board[r]):
            return self._board[r][c]
        return Tile.WALL

    def _leave(self, r: int, c: int) -> None:
        on_target = self._board[r][c] is Tile.PLAYER_ON_TARGET
        self._board[r][c] = Tile.TARGET if on_target else Tile.FLOOR

    def _enter(self, r: int, c: int) -> None:
        on_target = self._board[r][c] in (Tile.TARGET, Tile.BOX_ON_TARGET)
        self._board[r][c] = Tile.PLAYER_ON_TARGET if on_target else Tile.PLAYER

    def move(self, direction: str) -> bool:
        """Step the player one square with w/a/s/d, pushing a box if needed.

        Returns True if the board changed. An unknown direction raises
        ValueError.
        """
        try:
            dr, dc = _DIRECTIONS[direction.lower()]
        except (KeyError, AttributeError):
            raise ValueError(f"unknown direction {direction!r}") from None
        r, c = self._player
        one = self._at(r + dr, c + dc)
        two = self._at(r + 2 * dr, c + 2 * dc)
        if one in _BOXES and two in _OPEN:
            self._board[r + 2 * dr][c + 2 * dc] = (
                Tile.BOX_ON_TARGET if two is Tile.TARGET else Tile.BOX
            )
        elif one not in _OPEN:
            return False
        self._leave(r, c)
        self._enter(r + dr, c + dc)
        self._player = (r + dr, c + dc)
        return True

    def is_won(self) -> bool:
        """True when every box stands on a target."""
        tiles = [tile for row in self._board for tile in row]
        return Tile.BOX not in tiles and Tile.BOX_ON_TARGET in tiles

    def render(self) -> str:
        """Draw the board with one symbol per tile."""
        return "".join("".join(t.symbol for t in row) + "\n" for row in self._board)


_LEVEL_ONE: Sequence[Sequence[int]] = (
    (1, 1, 1, 1, 1, 1, 1, 1, 1, 1),
    (1, 0, 0, 0, 0, 0, 0, 0, 0, 1),
    (1, 0, 0, 0, 0, 0, 0, 0, 0, 1),
    (1, 0, 0, 2, 0, 0, 0, 0, 0, 1),
    (1, 0, 0, 2, 0, 0, 0, 0, 0, 1),
    (1, 0, 0, 2, 0, 0, 0, 0, 0, 1),
    (1, 0, 0, 2, 0, 0, 0, 3, 3, 1),
    (1, 0, 0, 6, 0, 0, 0, 3, 3, 1),
    (1, 0, 0, 0, 0, 0, 0, 0, 0, 1),
    (1, 1, 1, 1, 1, 1, 1, 1, 1, 1),
)

_LEVEL_TWO: Sequence[Sequence[int]] = (
    (1, 1, 1, 1, 1, 1, 1, 1, 1, 1),
    (1, 0, 0, 0, 0, 1, 0, 0, 0, 1),
    (1, 0, 2, 0, 0, 1, 0, 2, 0, 1),
    (1, 0, 0, 2, 0, 1, 0, 0, 0, 1),
    (1, 1, 1, 0, 0, 0, 0, 0, 0, 1),
    (1, 0, 0, 0, 0, 0, 0, 0, 0, 1),
    (1, 0, 0, 0, 1, 0, 0, 1, 1, 1),
    (1, 0, 2, 6, 1, 0, 0, 3, 3, 1),
    (1, 0, 0, 0, 1, 0, 0, 3, 3, 1),
    (1, 1, 1, 1, 1, 1, 1, 1, 1, 1),
)


def level_one() -> Sokoban:
    """The open-room level."""
    return Sokoban(_LEVEL_ONE)


def level_two() -> Sokoban:
    """The walled-room level."""
    return Sokoban(_LEVEL_TWO)


_HELP = """==============================
\t移动操作
向上移动：\tw
向下移动：\ts
向左移动：\ta
向右移动：\td
------------------------------
\t功能性操作
游戏内回到主菜单：\tz
=============================="""


def _play(game: Sokoban) -> None:
    while True:
        print(_CLEAR_SCREEN, end="")
        print(game.render(), end="")
        try:
            line = input()
        except EOFError:
            return
        for key in line:
            if key == "z":
                return
            if key.lower() in _DIRECTIONS:
                game.move(key)
            if game.is_won():
                print(_CLEAR_SCREEN, end="")
                print(game.render(), end="")
                print("恭喜通关！")
                return


def main(argv: list[str] | None = None) -> int:
    """Run the interactive game menu."""
    parser = argparse.ArgumentParser(description="Push the boxes onto the targets.")
    parser.add_argument("--level", type=int, choices=(1, 2), default=2)
    args = parser.parse_args(argv)
    make_level = level_one if args.level == 1 else level_two

    while True:
        print("************************")
        print("**** 1. 开始游戏   *****")
        print("**** 2. 帮助手册   *****")
        print("**** 0. 退出游戏   *****")
        print("************************")
        try:
            line = input("请输入>:")
        except EOFError:
            return 0
        try:
            choice = int(line.strip())
        except ValueError:
            choice = -1
        if choice == 1:
            _play(make_level())
        elif choice == 2:
            print(_HELP)
        elif choice == 0:
            print("游戏已退出")
            return 0
        else:
            print("请输入有效数字！")


if __name__ == "__main__":
    raise SystemExit(main())