import logging
import random

from snake_game.errors import BoardFullError
from snake_game.food import Food
from snake_game.snake import Snake

logger = logging.getLogger(__name__)

IDLE = "IDLE"
RUNNING = "RUNNING"
GAME_OVER = "GAME_OVER"


class Game:
    """Rule engine for one snake session.

    The game owns a Snake and a Food for the current round and advances them
    one cell per tick. Presentation, timing and persistence are injected:

    * ``renderer`` needs ``clear()``, ``draw_grid()``, ``draw_snake(snake)``
      and ``draw_food(food)``.
    * ``scheduler`` needs ``start()`` and ``stop()``; whoever owns it calls
      ``tick()`` each time it fires.
    * ``store`` needs ``load()`` and ``save(score)``; it may be None.

    ``on_start``, ``on_eat`` and ``on_game_over`` are optional callbacks that
    receive the game instance.
    """

    def __init__(self, grid, renderer=None, scheduler=None, store=None, rng=None,
                 on_start=None, on_eat=None, on_game_over=None):
        self.grid = grid
        self.renderer = renderer
        self.scheduler = scheduler
        self.store = store
        self.rng = rng or random.Random()
        self.on_start = on_start
        self.on_eat = on_eat
        self.on_game_over = on_game_over

        self.high_score = store.load() if store is not None else 0
        self.final_score = 0
        self.new_round()

    def new_round(self):
        """Fresh snake and food, score back to zero, waiting for input."""
        self.snake = Snake(self.grid)
        self.food = Food(self.grid, self.rng)
        self.food.place(self.snake.body)
        self.score = 0
        self.state = IDLE
        self.paused = False

    @property
    def running(self):
        return self.state == RUNNING

    @property
    def score_text(self):
        return str(self.score)

    @property
    def high_score_text(self):
        return str(self.high_score)

    def request_direction(self, direction):
        """Apply a directional input; the first accepted one starts the round."""
        if self.state == GAME_OVER:
            return False

        accepted = self.snake.request_heading(direction)
        if accepted and self.state == IDLE:
            self.start()
        return accepted

    def start(self):
        self.state = RUNNING
        logger.info("Round started")
        if self.on_start:
            self.on_start(self)
        if self.scheduler is not None:
            self.scheduler.start()
        self.tick()

    def tick(self):
        """Advance the round by one step."""
        if self.state != RUNNING or self.paused:
            return

        self.snake.move()

        if self.snake.hits_itself():
            self.game_over()
            return

        self.snake.wrap_head()
        self.check_eat()
        if self.state != RUNNING:
            return

        self.redraw()

    def check_eat(self):
        """Grow, score and move the food if the head reached it."""
        if not self.food.is_at(self.snake.head):
            return False

        self.snake.grow()
        self.score += 1
        if self.on_eat:
            self.on_eat(self)

        try:
            self.food.place(self.snake.body)
        except BoardFullError as exc:
            logger.info("Board is full, ending round: %s", exc)
            self.game_over()
        return True

    def game_over(self):
        """Stop ticking, settle the final and high scores."""
        if self.scheduler is not None:
            self.scheduler.stop()
        self.state = GAME_OVER
        self.paused = False
        self.final_score = self.score

        if self.score > self.high_score:
            self.high_score = self.score
            if self.store is not None:
                self.store.save(self.high_score)
        logger.info("Game over: score %d, high score %d", self.final_score, self.high_score)

        if self.on_game_over:
            self.on_game_over(self)

    def toggle_pause(self):
        """Pause or resume a running round. Returns the new paused flag."""
        if self.state != RUNNING:
            return False

        self.paused = not self.paused
        if self.scheduler is not None:
            if self.paused:
                self.scheduler.stop()
            else:
                self.scheduler.start()
        return self.paused

    def reset(self):
        """Throw away the finished round and get ready for the next one."""
        if self.scheduler is not None:
            self.scheduler.stop()
        self.new_round()
        self.final_score = 0
        self.redraw()

    def redraw(self):
        if self.renderer is None:
            return
        self.renderer.clear()
        self.renderer.draw_food(self.food)
        self.renderer.draw_snake(self.snake)
        self.renderer.draw_grid()
