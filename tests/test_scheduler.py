import pygame
import pytest

from snake_game.scheduler import TICK_EVENT, TickTimer


@pytest.fixture
def timer(monkeypatch):
    monkeypatch.setenv("SDL_VIDEODRIVER", "dummy")
    monkeypatch.setenv("SDL_AUDIODRIVER", "dummy")
    pygame.init()
    pygame.display.set_mode((10, 10))
    pygame.event.clear()
    timer = TickTimer(10)
    yield timer
    timer.stop()
    pygame.quit()


def ticks_after(ms):
    pygame.time.wait(ms)
    return len(pygame.event.get(TICK_EVENT))


def test_start_posts_ticks(timer):
    timer.start()
    assert timer.active
    assert ticks_after(120) > 0


def test_stop_cancels_ticks(timer):
    timer.start()
    ticks_after(60)
    timer.stop()
    assert not timer.active

    pygame.event.clear(TICK_EVENT)
    assert ticks_after(120) == 0


def test_restart_after_stop(timer):
    timer.start()
    timer.stop()
    pygame.event.clear(TICK_EVENT)

    timer.start()
    assert ticks_after(120) > 0


def test_second_stop_is_a_no_op(timer, monkeypatch):
    timer.start()
    timer.stop()

    calls = []
    monkeypatch.setattr(pygame.time, "set_timer", lambda *args: calls.append(args))
    timer.stop()
    assert calls == []
    assert not timer.active


@pytest.mark.parametrize("delay", [0, -5])
def test_rejects_non_positive_delay(delay):
    with pytest.raises(ValueError):
        TickTimer(delay)
