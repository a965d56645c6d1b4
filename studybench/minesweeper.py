"""A console minesweeper: hidden mines, neighbour counts, reveal until done."""

from __future__ import annotations

import argparse
import random
from enum import Enum

__all__ = ["RevealResult", "Minesweeper", "main"]

_HIDDEN = "*"
_CLEAR_SCREEN = "\033[2J\033[H"
_TITLE = "            扫雷游戏"
_RULE = "---------------------------------"


class RevealResult(Enum):
    """Outcome of revealing one cell."""

    SAFE = "safe"
    EXPLODED = "exploded"
    WON = "won"


class Minesweeper:
    """A board of ``rows`` x ``cols`` cells with ``mines`` hidden mines.

    Cells are addressed with 1-based coordinates: ``x`` is the row and
    ``y`` the column.
    """

    def __init__(
        self,
        rows: int = 9,
        cols: int = 9,
        mines: int = 10,
        rng: random.Random | None = None,
    ) -> None:
        if rows < 1 or cols < 1:
            raise ValueError("the board needs at least one row and one column")
        if not 0 <= mines <= rows * cols:
            raise ValueError(f"cannot place {mines} mines on {rows * cols} cells")
        self.rows = rows
        self.cols = cols
        self.mines = mines
        rng = rng or random.Random()
        cells = [(x, y) for x in range(1, rows + 1) for y in range(1, cols + 1)]
        self._mines = frozenset(rng.sample(cells, mines))
        self._revealed: dict[tuple[int, int], int] = {}
        self._exploded = False

    @property
    def mine_positions(self) -> frozenset[tuple[int, int]]:
        """The (x, y) cells that hold a mine."""
        return self._mines

    @property
    def is_won(self) -> bool:
        """True once every cell without a mine has been revealed."""
        return not self._exploded and len(self._revealed) == self.rows * self.cols - self.mines

    @property
    def finished(self) -> bool:
        """True when the game is won or a mine has gone off."""
        return self._exploded or self.is_won

    def _check(self, x: int, y: int) -> None:
        if not (1 <= x <= self.rows and 1 <= y <= self.cols):
            raise ValueError(f"({x}, {y}) is not on the board")

    def adjacent_mines(self, x: int, y: int) -> int:
        """Return how many of the eight neighbours of (x, y) hold a mine."""
        self._check(x, y)
        return sum(
            (x + dx, y + dy) in self._mines
            for dx in (-1, 0, 1)
            for dy in (-1, 0, 1)
            if dx or dy
        )

    def reveal(self, x: int, y: int) -> RevealResult:
        """Uncover cell (x, y) and report what happened.

        Raises ValueError for a cell off the board and RuntimeError once the
        game is over.
        """
        if self.finished:
            raise RuntimeError("the game is already over")
        self._check(x, y)
        if (x, y) in self._mines:
            self._exploded = True
            return RevealResult.EXPLODED
        self._revealed[(x, y)] = self.adjacent_mines(x, y)
        return RevealResult.WON if self.is_won else RevealResult.SAFE

    def _cell(self, x: int, y: int, reveal_mines: bool) -> str:
        if reveal_mines:
            return "1" if (x, y) in self._mines else "0"
        count = self._revealed.get((x, y))
        return _HIDDEN if count is None else str(count)

    def render(self, reveal_mines: bool = False) -> str:
        """Draw the board; with ``reveal_mines`` show the mine map instead."""
        lines = [_TITLE, _RULE, "".join(f"{j} " for j in range(self.cols + 1))]
        for x in range(1, self.rows + 1):
            cells = "".join(f"{self._cell(x, y, reveal_mines)} " for y in range(1, self.cols + 1))
            lines.append(f"{x} {cells}")
        return "\n".join(lines) + "\n"


def _read_coordinates(line: str) -> tuple[int, int]:
    parts = line.split()
    if len(parts) < 2:
        raise ValueError("two numbers are needed")
    return int(parts[0]), int(parts[1])


def _play(game: Minesweeper) -> None:
    while not game.finished:
        print(_CLEAR_SCREEN, end="")
        print(game.render(), end="")
        try:
            line = input("请输入坐标:>")
        except EOFError:
            return
        try:
            x, y = _read_coordinates(line)
            result = game.reveal(x, y)
        except ValueError:
            print("请输入有效数字!")
            continue
        if result is RevealResult.EXPLODED:
            print("很遗憾你被炸死了")
            print(game.render(reveal_mines=True), end="")
        elif result is RevealResult.WON:
            print("恭喜你扫雷成功!")
            print(game.render(reveal_mines=True), end="")


def _menu() -> None:
    print("**************************")
    print("***  1. play  0. exit  ***")
    print("***      2. clear      ***")
    print("**************************")


def main(argv: list[str] | None = None) -> int:
    """Run the interactive game menu."""
    parser = argparse.ArgumentParser(description="Play minesweeper in the terminal.")
    parser.add_argument("--rows", type=int, default=9)
    parser.add_argument("--cols", type=int, default=9)
    parser.add_argument("--mines", type=int, default=10)
    parser.add_argument("--seed", type=int, default=None)
    args = parser.parse_args(argv)
    rng = random.Random(args.seed)

    while True:
        _menu()
        try:
            line = input("请选择:>")
        except EOFError:
            return 0
        try:
            choice = int(line.strip())
        except ValueError:
            choice = -1
        if choice == 1:
            _play(Minesweeper(args.rows, args.cols, args.mines, rng))
        elif choice == 2:
            print(_CLEAR_SCREEN, end="")
        elif choice == 0:
            print("退出程序!")
            return 0
        else:
            print("输入错误，请重新输入!")


if __name__ == "__main__":
    raise SystemExit(main())