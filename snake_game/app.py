import logging

import pygame

from snake_game.audio import make_sine_sound
from snake_game.config import (
    BLACK,
    CELL_SIZE,
    DARK_GREY,
    EAT_VOLUME,
    FPS,
    GREEN,
    HEADER_COLOR,
    HEADER_HEIGHT,
    HIGHSCORE_FILE,
    OVERLAY_COLOR,
    RED,
    TICK_DELAY_MS,
    WHITE,
    WINDOW_CAPTION,
    YELLOW,
)
from snake_game.controller import GAME_OVER, Game
from snake_game.grid import Grid, fit_board
from snake_game.render import BoardRenderer
from snake_game.scheduler import TICK_EVENT, TickTimer
from snake_game.snake import DOWN, LEFT, RIGHT, UP
from snake_game.storage import HighScoreStore

logger = logging.getLogger(__name__)

KEY_DIRECTIONS = {
    pygame.K_RIGHT: RIGHT,
    pygame.K_LEFT: LEFT,
    pygame.K_UP: UP,
    pygame.K_DOWN: DOWN,
    pygame.K_d: RIGHT,
    pygame.K_a: LEFT,
    pygame.K_w: UP,
    pygame.K_s: DOWN,
}


class SnakeApp:
    """pygame window around a Game: input, HUD, menus and sound."""

    def __init__(self, width=None, height=None, cell_size=CELL_SIZE, delay=TICK_DELAY_MS,
                 highscore_file=HIGHSCORE_FILE, muted=False):
        pygame.init()

        if width and not height:
            height = width
        elif height and not width:
            width = height
        elif not width and not height:
            info = pygame.display.Info()
            width = height = fit_board(info.current_w, info.current_h, cell_size)

        self.grid = Grid(width, height, cell_size)
        # Board sits below a header strip holding the score
        self.screen = pygame.display.set_mode((width, height + HEADER_HEIGHT))
        pygame.display.set_caption(WINDOW_CAPTION)
        self.clock = pygame.time.Clock()
        self.font = pygame.font.Font(None, 36)
        self.small_font = pygame.font.Font(None, 24)

        self.board = BoardRenderer(self.grid)
        self.muted = muted
        self.sounds = self._load_sounds()

        self.game = Game(
            self.grid,
            renderer=self.board,
            scheduler=TickTimer(delay),
            store=HighScoreStore(highscore_file),
            on_start=lambda game: self.play_sound('start'),
            on_eat=lambda game: self.play_sound('eat'),
            on_game_over=lambda game: self.play_sound('die'),
        )
        self.game.redraw()

        self.running = True
        # Exit confirmation flag: when True, user must confirm quit with Y
        self.exit_confirmation = False
        self.play_button = None
        logger.info("Board %dx%d, cell %d, tick %d ms", width, height, cell_size, delay)

    def _load_sounds(self):
        """Generate the sound effects; an empty dict means play silently."""
        try:
            if not pygame.mixer.get_init():
                pygame.mixer.init()
            sounds = {
                'start': make_sine_sound(freq=880, duration=0.12, volume=0.25),
                'eat': make_sine_sound(freq=660, duration=0.10, volume=0.22),
                'die': make_sine_sound(freq=220, duration=0.28, volume=0.35),
            }
        except (pygame.error, ValueError) as exc:
            logger.warning("Sound disabled: %s", exc)
            return {}
        sounds['eat'].set_volume(EAT_VOLUME)
        return sounds

    def play_sound(self, name):
        """Fire-and-forget sound cue."""
        if self.muted or name not in self.sounds:
            return
        try:
            self.sounds[name].play()
        except pygame.error as exc:
            logger.debug("Could not play %s sound: %s", name, exc)

    def draw_text(self, text, pos, color=WHITE, font=None):
        """Draw text centred on ``pos``."""
        if font is None:
            font = self.font
        text_surface = font.render(text, True, color)
        text_rect = text_surface.get_rect(center=pos)
        self.screen.blit(text_surface, text_rect)
        return text_rect

    def draw_hud(self):
        """Draw the header strip with the current and best score."""
        width = self.grid.width
        self.screen.fill(HEADER_COLOR, pygame.Rect(0, 0, width, HEADER_HEIGHT))
        score_text = self.font.render(self.game.score_text, True, WHITE)
        self.screen.blit(score_text, score_text.get_rect(midleft=(12, HEADER_HEIGHT // 2)))

        hs_text = self.small_font.render(f"High: {self.game.high_score_text}", True, WHITE)
        self.screen.blit(hs_text, hs_text.get_rect(midright=(width - 12, HEADER_HEIGHT // 2)))

        if self.muted:
            mute_text = self.small_font.render("MUTED", True, RED)
            self.screen.blit(mute_text, mute_text.get_rect(center=(width // 2, HEADER_HEIGHT // 2)))

    def draw_overlay(self):
        overlay = pygame.Surface((self.grid.width, self.grid.height), pygame.SRCALPHA)
        overlay.fill(OVERLAY_COLOR)
        self.screen.blit(overlay, (0, HEADER_HEIGHT))

    def draw_game_over(self):
        """Draw the game over menu with final and highest score."""
        self.draw_overlay()
        center_x = self.grid.width // 2
        center_y = HEADER_HEIGHT + self.grid.height // 2
        self.draw_text("GAME OVER!", (center_x, center_y - 70), RED)
        self.draw_text(f"Score: {self.game.final_score}", (center_x, center_y - 25), WHITE, self.small_font)
        self.draw_text(f"Highest: {self.game.high_score_text}", (center_x, center_y + 5), YELLOW, self.small_font)

        label = self.font.render("Play again", True, BLACK)
        pad = 10
        label_rect = label.get_rect(center=(center_x, center_y + 55))
        self.play_button = label_rect.inflate(pad * 2, pad * 2)
        pygame.draw.rect(self.screen, GREEN, self.play_button, border_radius=6)
        self.screen.blit(label, label_rect)

    def draw_exit_confirmation(self):
        self.draw_overlay()
        msg = "Quit? Press Y to confirm, N or Esc to cancel"
        text_surf = self.small_font.render(msg, True, WHITE)
        text_rect = text_surf.get_rect(center=(self.grid.width // 2, HEADER_HEIGHT + self.grid.height // 2))
        pad = 12
        box_rect = text_rect.inflate(pad * 2, pad * 2)
        pygame.draw.rect(self.screen, DARK_GREY, box_rect, border_radius=6)
        self.screen.blit(text_surf, text_rect)

    def draw(self):
        self.draw_hud()
        self.screen.blit(self.board.surface, (0, HEADER_HEIGHT))

        if self.game.state == GAME_OVER:
            self.draw_game_over()
        else:
            self.play_button = None
            if self.game.paused:
                self.draw_text("PAUSED", (self.grid.width // 2, HEADER_HEIGHT + self.grid.height // 2), YELLOW)

        if self.exit_confirmation:
            self.draw_exit_confirmation()

    def handle_key(self, key):
        # While confirming, only Y/N/Esc matter
        if self.exit_confirmation:
            if key == pygame.K_y:
                logger.info("Exit confirmed by user")
                self.running = False
            elif key in (pygame.K_n, pygame.K_ESCAPE):
                self.exit_confirmation = False
            return

        if key in (pygame.K_ESCAPE, pygame.K_q):
            self.exit_confirmation = True
        elif key == pygame.K_m:
            self.muted = not self.muted
        elif self.game.state == GAME_OVER:
            if key in (pygame.K_RETURN, pygame.K_SPACE):
                self.game.reset()
        elif key in (pygame.K_p, pygame.K_SPACE):
            self.game.toggle_pause()
        elif key in KEY_DIRECTIONS:
            self.game.request_direction(KEY_DIRECTIONS[key])

    def handle_click(self, pos):
        if self.play_button is None or self.exit_confirmation:
            return
        if self.play_button.collidepoint(pos):
            self.game.reset()

    def run(self):
        """Main loop: dispatch events, then redraw the window."""
        try:
            while self.running:
                for event in pygame.event.get():
                    if event.type == pygame.QUIT:
                        self.running = False
                    elif event.type == TICK_EVENT:
                        if not self.exit_confirmation:
                            self.game.tick()
                    elif event.type == pygame.KEYDOWN:
                        self.handle_key(event.key)
                    elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                        self.handle_click(event.pos)

                self.draw()
                pygame.display.flip()
                self.clock.tick(FPS)
        finally:
            self.cleanup()

    def cleanup(self):
        """Clean up resources."""
        self.running = False
        self.game.scheduler.stop()
        pygame.quit()
