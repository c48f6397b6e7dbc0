import logging
import random

from snake_game.errors import BoardFullError

logger = logging.getLogger(__name__)

MAX_SPAWN_ATTEMPTS = 100


def random_color(rng):
    return (rng.randint(0, 255), rng.randint(0, 255), rng.randint(0, 255))


class Food:
    """A single food cell that never lands on the snake."""

    def __init__(self, grid, rng=None):
        self.grid = grid
        self.rng = rng or random.Random()
        self.position = None
        self.color = None

    def spawn(self):
        """Pick a uniformly random cell on the board."""
        size = self.grid.cell_size
        x = self.rng.randrange(self.grid.columns) * size
        y = self.rng.randrange(self.grid.rows) * size
        return (x, y)

    def place(self, occupied):
        """Move the food to a random cell not in ``occupied`` and recolour it."""
        occupied = set(occupied)
        self.color = random_color(self.rng)

        free = self.grid.total_cells - sum(1 for cell in occupied if self.grid.contains(cell))
        if free <= 0:
            raise BoardFullError(f"no free cell left on {self.grid!r}")

        attempts = 0
        while attempts < MAX_SPAWN_ATTEMPTS:
            new_pos = self.spawn()
            if new_pos not in occupied:
                self.position = new_pos
                return new_pos
            attempts += 1

        # Crowded board: choose directly among the free cells
        logger.debug("Food placement fell back to free-cell scan after %d attempts", attempts)
        candidates = [cell for cell in self.grid.cells() if cell not in occupied]
        self.position = self.rng.choice(candidates)
        return self.position

    def is_at(self, cell):
        return self.position == cell
