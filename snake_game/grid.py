from snake_game.config import (
    BOARD_HEIGHT_RATIO,
    MAX_BOARD_CELLS,
    MIN_BOARD_CELLS,
)


def clamp(low, value, high):
    return max(low, min(value, high))


def fit_board(display_width, display_height, cell_size):
    """Pick a square board side (in pixels) that fits the given display.

    The side is a whole number of cells, between MIN_BOARD_CELLS and
    MAX_BOARD_CELLS, limited by the display width (one cell of margin) and by
    BOARD_HEIGHT_RATIO of the display height.
    """
    by_width = clamp(MIN_BOARD_CELLS, round(display_width / cell_size) - 1, MAX_BOARD_CELLS)
    by_height = clamp(MIN_BOARD_CELLS, round(BOARD_HEIGHT_RATIO * display_height / cell_size), MAX_BOARD_CELLS)
    return cell_size * min(by_width, by_height)


class Grid:
    """Discrete board of square cells.

    Cells are ``(x, y)`` pixel tuples whose coordinates are multiples of
    ``cell_size`` inside ``[0, width) x [0, height)``.
    """

    def __init__(self, width, height, cell_size):
        if cell_size <= 0:
            raise ValueError(f"cell_size must be positive, got {cell_size}")
        if width <= 0 or height <= 0:
            raise ValueError(f"board must have a positive size, got {width}x{height}")
        if width % cell_size or height % cell_size:
            raise ValueError(
                f"board size {width}x{height} is not a multiple of cell size {cell_size}"
            )
        self.width = width
        self.height = height
        self.cell_size = cell_size

    @property
    def columns(self):
        return self.width // self.cell_size

    @property
    def rows(self):
        return self.height // self.cell_size

    @property
    def total_cells(self):
        return self.columns * self.rows

    def contains(self, cell):
        x, y = cell
        return 0 <= x < self.width and 0 <= y < self.height

    def cells(self):
        """Yield every cell of the board, row by row."""
        for row in range(self.rows):
            for column in range(self.columns):
                yield (column * self.cell_size, row * self.cell_size)

    def wrap(self, cell):
        """Move a cell that stepped off one edge onto the opposite edge."""
        x, y = cell
        max_x = self.width - self.cell_size
        max_y = self.height - self.cell_size

        if x < 0:
            x = max_x
        if y < 0:
            y = max_y
        if x > max_x:
            x = 0
        if y > max_y:
            y = 0
        return (x, y)

    def __repr__(self):
        return f"Grid({self.width}, {self.height}, {self.cell_size})"
