import random

import pytest

pygame = pytest.importorskip("pygame")

import main  # noqa: E402
from game_state import MazeGame  # noqa: E402
from maze_data import CELL_SIZE  # noqa: E402


@pytest.fixture
def game():
    game = MazeGame("medium", width=3, height=3, rng=random.Random(0))
    game.maze = ["000", "010", "000"]
    return game


def _center(x, y):
    return x * CELL_SIZE + CELL_SIZE // 2, y * CELL_SIZE + CELL_SIZE // 2


def test_draw_maze_colors(game):
    surface = pygame.Surface((3 * CELL_SIZE, 3 * CELL_SIZE))
    main.draw_maze(surface, game)

    assert tuple(surface.get_at(_center(0, 0)))[:3] == main.RED
    assert tuple(surface.get_at(_center(2, 2)))[:3] == main.GREEN
    assert tuple(surface.get_at(_center(1, 1)))[:3] == main.BLACK
    assert tuple(surface.get_at(_center(1, 0)))[:3] == main.WHITE


def test_arrow_keys_move(game):
    assert main.handle_key(game, pygame.K_RIGHT) == "move"
    assert game.player == (1, 0)

    assert main.handle_key(game, pygame.K_DOWN) == "move"
    assert game.player == (1, 0)  # wall below


def test_arrow_key_win(game):
    game.player = (2, 1)
    assert main.handle_key(game, pygame.K_DOWN) == "win"
    assert game.won


def test_difficulty_keys_regenerate(game):
    assert main.handle_key(game, pygame.K_3) == "difficulty"
    assert game.difficulty == "hard"
    assert game.player == (0, 0)


def test_restart_key(game):
    game.player = (1, 0)
    assert main.handle_key(game, pygame.K_n) == "restart"
    assert game.player == (0, 0)


def test_after_win_only_confirm_restarts(game):
    game.player = (2, 1)
    main.handle_key(game, pygame.K_DOWN)

    assert main.handle_key(game, pygame.K_LEFT) is None
    assert game.won

    assert main.handle_key(game, pygame.K_RETURN) == "restart"
    assert not game.won
    assert game.player == (0, 0)


def test_unbound_key_ignored(game):
    assert main.handle_key(game, pygame.K_q) is None
    assert game.player == (0, 0)
