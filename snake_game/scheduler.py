import logging

import pygame

logger = logging.getLogger(__name__)

TICK_EVENT = pygame.USEREVENT + 1


class TickTimer:
    """Repeating game tick backed by ``pygame.time.set_timer``.

    The timer only posts TICK_EVENT; the event loop decides what a tick does.
    """

    def __init__(self, delay, event_type=TICK_EVENT):
        if delay <= 0:
            raise ValueError(f"tick delay must be positive, got {delay}")
        self.delay = int(delay)
        self.event_type = event_type
        self.active = False

    def start(self):
        """(Re)start ticking every ``delay`` milliseconds."""
        pygame.time.set_timer(self.event_type, self.delay)
        self.active = True
        logger.debug("Tick timer started (%d ms)", self.delay)

    def stop(self):
        """Cancel pending ticks. Safe to call when already stopped."""
        if not self.active:
            return
        pygame.time.set_timer(self.event_type, 0)
        self.active = False
        logger.debug("Tick timer stopped")
