"""Grid snake game.

The rule engine (``grid``, ``snake``, ``food``, ``controller``) has no pygame
dependency. The window is exported lazily so external code can do::

	from snake_game import SnakeApp

without pulling in pygame when only the rules are needed.
"""

__version__ = "0.1"

__all__ = ["Game", "SnakeApp"]

def __getattr__(name: str):
	if name == "SnakeApp":
		from .app import SnakeApp

		return SnakeApp
	if name == "Game":
		from .controller import Game

		return Game
	raise AttributeError(f"module {__name__!r} has no attribute {name!r}")

def __dir__():
	return sorted(__all__)
