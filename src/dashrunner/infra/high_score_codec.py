from __future__ import annotations

from dashrunner.infra.exceptions import HighScoreDecodeError


_FORMAT = "dashrunner.highscore"
_VERSION_LATEST = 1


def encode_high_score(score: int) -> dict:
    if isinstance(score, bool) or not isinstance(score, int) or score < 0:
        raise ValueError("high score must be a non-negative integer")
    return {
        "format": _FORMAT,
        "version": _VERSION_LATEST,
        "high_score": score,
    }


def decode_high_score(obj: object) -> int:
    try:
        if not isinstance(obj, dict):
            raise HighScoreDecodeError("High score payload must be an object.")
        if obj.get("format") != _FORMAT:
            raise HighScoreDecodeError("Invalid high score format marker.")

        ver = obj.get("version")
        if ver == 1:
            return _decode_v1(obj)

        raise HighScoreDecodeError("Unsupported high score version.")
    except HighScoreDecodeError:
        raise
    except Exception as e:
        raise HighScoreDecodeError(f"Failed to decode high score: {e}") from e


def _decode_v1(obj: dict) -> int:
    score = obj.get("high_score")
    if isinstance(score, bool) or not isinstance(score, int):
        raise HighScoreDecodeError("high_score must be an integer.")
    if score < 0:
        raise HighScoreDecodeError("high_score must be non-negative.")
    return score
