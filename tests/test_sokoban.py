import pytest

from studybench.sokoban import Sokoban, Tile, level_one, level_two, main


def _row(game, r):
    return [int(t) for t in game.board[r]]


def test_level_one_player_start():
    game = level_one()
    assert game.player == (7, 3)
    assert game.board[7][3] is Tile.PLAYER


def test_pushing_two_boxes_in_a_row_is_blocked():
    game = level_one()
    before = game.board
    assert game.move("w") is False
    assert game.board == before
    assert game.player == (7, 3)


def test_walk_onto_floor_leaves_floor_behind():
    game = level_one()
    assert game.move("d") is True
    assert game.player == (7, 4)
    assert game.board[7][3] is Tile.FLOOR
    assert game.board[7][4] is Tile.PLAYER


def test_uppercase_direction_accepted():
    game = level_one()
    assert game.move("D") is True
    assert game.player == (7, 4)


def test_walk_into_wall_is_blocked():
    game = Sokoban([[1, 1, 1], [1, 6, 1], [1, 1, 1]])
    assert game.move("a") is False
    assert game.player == (1, 1)


def test_push_box_onto_target_wins():
    game = Sokoban([[1, 1, 1, 1, 1], [1, 6, 2, 3, 1], [1, 1, 1, 1, 1]])
    assert not game.is_won()
    assert game.move("d") is True
    assert _row(game, 1) == [1, 0, 6, 5, 1]
    assert game.is_won()


def test_leaving_target_restores_it():
    game = Sokoban([[1, 1, 1, 1], [1, 4, 0, 1], [1, 1, 1, 1]])
    game.move("d")
    assert _row(game, 1) == [1, 3, 6, 1]


def test_push_box_off_target_onto_floor():
    game = Sokoban([[1, 1, 1, 1, 1], [1, 6, 5, 0, 1], [1, 1, 1, 1, 1]])
    game.move("d")
    assert _row(game, 1) == [1, 0, 4, 2, 1]
    assert not game.is_won()


def test_box_against_wall_does_not_move():
    game = Sokoban([[1, 1, 1, 1], [1, 6, 2, 1], [1, 1, 1, 1]])
    assert game.move("d") is False
    assert _row(game, 1) == [1, 6, 2, 1]


def test_unknown_direction_raises():
    with pytest.raises(ValueError):
        level_one().move("x")


def test_board_without_player_raises():
    with pytest.raises(ValueError):
        Sokoban([[1, 1], [1, 0]])


def test_render_uses_tile_symbols():
    lines = level_two().render().splitlines()
    assert len(lines) == 10
    assert lines[0] == "■" * 10
    assert "♀" in lines[7]
    assert lines[7].count("☆") == 2


def test_main_exits_on_zero(monkeypatch, capsys):
    answers = iter(["9", "1", "z", "0"])
    monkeypatch.setattr("builtins.input", lambda prompt="": next(answers))
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "请输入有效数字！" in out
    assert "♀" in out
    assert "游戏已退出" in out