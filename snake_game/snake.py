from snake_game.config import INITIAL_LENGTH

UP = "up"
DOWN = "down"
LEFT = "left"
RIGHT = "right"

DIRECTIONS = (UP, DOWN, LEFT, RIGHT)

OPPOSITE = {
    UP: DOWN,
    DOWN: UP,
    LEFT: RIGHT,
    RIGHT: LEFT,
}

# Unit step per direction, scaled by the cell size on each move
STEPS = {
    UP: (0, -1),
    DOWN: (0, 1),
    LEFT: (-1, 0),
    RIGHT: (1, 0),
}


class Snake:
    """Snake body on a cell lattice.

    ``body`` is ordered tail first, head last.
    """

    def __init__(self, grid, body=None):
        self.grid = grid
        self.cell_size = grid.cell_size
        self.reset(body)

    def reset(self, body=None):
        """Reset snake to its starting body with no heading."""
        if body is None:
            size = self.cell_size
            row = (self.grid.rows // 2) * size
            body = [(size * i, row) for i in range(1, INITIAL_LENGTH + 1)]
        if not body:
            raise ValueError("snake body needs at least one cell")

        self.body = [tuple(cell) for cell in body]
        self.heading = None
        self.previous_heading = None

    @property
    def head(self):
        return self.body[-1]

    def __len__(self):
        return len(self.body)

    def __contains__(self, cell):
        return cell in self.body

    def can_turn(self, direction):
        """Return True if the snake may take ``direction`` on its next move."""
        if direction not in OPPOSITE:
            raise ValueError(f"unknown direction {direction!r}")
        if len(self.body) == 1:
            return True
        return OPPOSITE[direction] != self.previous_heading

    def request_heading(self, direction):
        """Set the heading unless it would reverse into the neck."""
        if not self.can_turn(direction):
            return False
        self.heading = direction
        return True

    def move(self):
        """Advance one cell along the heading. Does nothing without a heading."""
        if self.heading is None:
            return

        head_x, head_y = self.head
        step_x, step_y = STEPS[self.heading]

        self.body.pop(0)
        self.body.append((head_x + step_x * self.cell_size, head_y + step_y * self.cell_size))

        self.previous_heading = self.heading

    def grow(self):
        """Duplicate the head so the next move leaves the tail in place."""
        self.body.append(self.head)

    def hits_itself(self):
        """Check the head against every segment except the two most recent."""
        head = self.head
        return head in self.body[:-2]

    def wrap_head(self):
        """Bring the head back onto the board from the opposite edge."""
        self.body[-1] = self.grid.wrap(self.head)
