"""
Error taxonomy.

The scoring engine never raises for text input: short or empty text
degrades to a renderable result instead. Errors only come from the
challenge repository, the board rules and the audio analyzer factory.
"""

from __future__ import annotations


class TruthShieldError(Exception):
    """Base class for all TruthShield errors."""


class EmptyPoolError(TruthShieldError):
    """A random challenge was requested from a pool with no records."""

    def __init__(self, difficulty: str | None = None):
        self.difficulty = difficulty
        if difficulty is not None:
            message = f"No challenges available for difficulty '{difficulty}'"
        else:
            message = "Challenge catalog is empty"
        super().__init__(message)


class ChallengeNotFoundError(TruthShieldError, LookupError):
    """No challenge matches the requested id."""

    def __init__(self, challenge_id: str):
        self.challenge_id = challenge_id
        super().__init__(f"Challenge not found: {challenge_id}")


class InvalidAnswerError(TruthShieldError, ValueError):
    """The selected option index does not exist on the challenge."""


class AudioAnalysisUnavailableError(TruthShieldError):
    """Audio analysis is switched off in this deployment."""
