import json
import logging
import os

logger = logging.getLogger(__name__)


class HighScoreStore:
    """Keeps the best score in a small JSON file."""

    def __init__(self, path):
        self.path = path

    def load(self):
        """Load the high score, returning 0 if missing or unreadable."""
        if not os.path.exists(self.path):
            return 0
        try:
            with open(self.path, "r") as f:
                data = json.load(f)
            return max(0, int(data.get("highscore", 0)))
        except (OSError, ValueError, TypeError, AttributeError, OverflowError) as exc:
            logger.warning("Could not read high score from %s: %s", self.path, exc)
            return 0

    def save(self, score):
        """Save the high score (best-effort). Returns True on success.

        The new value goes to a temporary file first and then replaces the
        old one, so a failed write leaves the previous score in place.
        """
        tmp_path = self.path + ".tmp"
        try:
            with open(tmp_path, "w") as f:
                json.dump({"highscore": int(score)}, f)
            os.replace(tmp_path, self.path)
        except OSError as exc:
            logger.warning("Could not write high score to %s: %s", self.path, exc)
            if os.path.exists(tmp_path):
                os.remove(tmp_path)
            return False
        return True
