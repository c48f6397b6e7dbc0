import pygame
import pytest

from snake_game.controller import GAME_OVER, IDLE, RUNNING


@pytest.fixture
def app(tmp_path, monkeypatch):
    monkeypatch.setenv("SDL_VIDEODRIVER", "dummy")
    monkeypatch.setenv("SDL_AUDIODRIVER", "dummy")
    from snake_game.app import SnakeApp

    app = SnakeApp(width=300, cell_size=30, highscore_file=str(tmp_path / "hs.json"), muted=True)
    yield app
    app.cleanup()


def test_square_board_from_one_side(app):
    assert (app.grid.width, app.grid.height) == (300, 300)
    assert app.game.state == IDLE


def test_arrow_key_starts_round(app):
    app.game.food.position = (0, 0)
    app.handle_key(pygame.K_RIGHT)
    assert app.game.state == RUNNING
    assert app.game.snake.heading == "right"


def test_pause_and_mute_keys(app):
    app.game.food.position = (0, 0)
    app.handle_key(pygame.K_UP)
    app.handle_key(pygame.K_p)
    assert app.game.paused
    app.handle_key(pygame.K_m)
    assert not app.muted


def test_quit_needs_confirmation(app):
    app.handle_key(pygame.K_q)
    assert app.exit_confirmation and app.running
    app.handle_key(pygame.K_n)
    assert not app.exit_confirmation
    app.handle_key(pygame.K_ESCAPE)
    app.handle_key(pygame.K_y)
    assert not app.running


def test_enter_restarts_after_game_over(app):
    app.game.food.position = (0, 0)
    app.handle_key(pygame.K_RIGHT)
    app.game.game_over()
    assert app.game.state == GAME_OVER

    app.draw()
    assert app.play_button is not None
    app.handle_key(pygame.K_RETURN)
    assert app.game.state == IDLE
