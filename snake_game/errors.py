class SnakeGameError(Exception):
    """Base class for errors raised by the snake game."""


class BoardFullError(SnakeGameError):
    """Raised when food cannot be placed because every cell is occupied."""
