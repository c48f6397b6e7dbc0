import pygame

from snake_game.config import (
    BACKGROUND_COLOR,
    GRID_LINE_COLOR,
    SNAKE_BODY_COLOR,
    SNAKE_HEAD_COLOR,
)


class BoardRenderer:
    """Draws the board onto a pygame surface sized to the grid."""

    def __init__(self, grid, surface=None):
        self.grid = grid
        self.surface = surface if surface is not None else pygame.Surface((grid.width, grid.height))

    def clear(self):
        self.surface.fill(BACKGROUND_COLOR)

    def _fill_cell(self, cell, color):
        size = self.grid.cell_size
        pygame.draw.rect(self.surface, color, pygame.Rect(cell[0], cell[1], size, size))

    def draw_snake(self, snake):
        """Draw body cells, then the head in its own colour."""
        for cell in snake.body[:-1]:
            self._fill_cell(cell, SNAKE_BODY_COLOR)
        self._fill_cell(snake.head, SNAKE_HEAD_COLOR)

    def draw_food(self, food):
        if food.position is None:
            return
        self._fill_cell(food.position, food.color)

    def draw_grid(self):
        """Overlay grid lines every cell."""
        size = self.grid.cell_size
        width, height = self.grid.width, self.grid.height

        for x in range(size, width, size):
            pygame.draw.line(self.surface, GRID_LINE_COLOR, (x, 0), (x, height))
        for y in range(size, height, size):
            pygame.draw.line(self.surface, GRID_LINE_COLOR, (0, y), (width, y))
