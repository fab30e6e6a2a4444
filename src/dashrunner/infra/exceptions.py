class HighScoreDecodeError(Exception):
    """Raised when a stored high score cannot be read or is malformed."""


class HighScoreSaveError(Exception):
    """Raised when the high score cannot be written."""
