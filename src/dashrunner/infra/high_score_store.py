from __future__ import annotations

import json
import logging
import os
from pathlib import Path

from dashrunner.infra.exceptions import HighScoreDecodeError, HighScoreSaveError
from dashrunner.infra.high_score_codec import decode_high_score, encode_high_score

logger = logging.getLogger(__name__)


class HighScoreStore:
    """
    Keeps the best score in a small JSON file under a base directory
    (the current working directory by default).
    """

    FILENAME = "high_score.json"

    def __init__(self, *, base_dir: Path | None = None) -> None:
        self._base_dir = base_dir or Path.cwd()
        self.path = self._base_dir / self.FILENAME

    def load_high_score(self) -> int:
        """Return the stored high score, or 0 when nothing has been saved yet."""
        if not self.path.exists():
            return 0
        try:
            data = self.path.read_text(encoding="utf-8")
            score = decode_high_score(json.loads(data))
        except HighScoreDecodeError:
            raise
        except Exception as e:
            raise HighScoreDecodeError(f"Failed to load high score from {self.path}: {e}") from e
        logger.debug("Loaded high score %d from %s", score, self.path)
        return score

    def save_high_score(self, score: int) -> None:
        tmp = self.path.with_suffix(self.path.suffix + ".tmp")
        try:
            payload = encode_high_score(score)
            text = json.dumps(payload, indent=2, sort_keys=True)

            # Atomic-ish write: write temp then replace.
            self._base_dir.mkdir(parents=True, exist_ok=True)
            tmp.write_text(text, encoding="utf-8")
            os.replace(tmp, self.path)
        except Exception as e:
            try:
                if tmp.exists():
                    tmp.unlink()
            except OSError:
                logger.warning("Could not remove temporary file %s", tmp)
            raise HighScoreSaveError(f"Failed to save high score to {self.path}: {e}") from e
        logger.debug("Saved high score %d to %s", score, self.path)
