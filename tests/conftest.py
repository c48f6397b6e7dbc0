import random

import pytest

from snake_game.grid import Grid


class FakeScheduler:
    def __init__(self):
        self.active = False
        self.starts = 0
        self.stops = 0

    def start(self):
        self.active = True
        self.starts += 1

    def stop(self):
        self.active = False
        self.stops += 1


class RecordingRenderer:
    def __init__(self):
        self.calls = []

    def clear(self):
        self.calls.append("clear")

    def draw_grid(self):
        self.calls.append("grid")

    def draw_snake(self, snake):
        self.calls.append(("snake", list(snake.body)))

    def draw_food(self, food):
        self.calls.append(("food", food.position))


class MemoryStore:
    def __init__(self, value=0):
        self.value = value
        self.saved = []

    def load(self):
        return self.value

    def save(self, score):
        self.value = score
        self.saved.append(score)
        return True


@pytest.fixture
def grid():
    return Grid(300, 300, 30)


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def scheduler():
    return FakeScheduler()


@pytest.fixture
def renderer():
    return RecordingRenderer()
