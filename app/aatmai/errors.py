"""
Error taxonomy shared by flows, adapters and the action boundary.

Adapters raise these; actions catch them and turn them into user-facing
messages. Nothing here is retried automatically.
"""

from __future__ import annotations
from typing import Optional


NOT_CONFIGURED_MESSAGE = (
    "AatmAI is not configured yet. Please add an API key and try again."
)


class AatmaiError(Exception):
    """Base class for every error raised inside the package."""


class ValidationError(AatmaiError):
    """Input failed a contract. `fields` maps form field names to messages."""

    def __init__(self, message: str, fields: Optional[dict[str, str]] = None):
        super().__init__(message)
        self.fields: dict[str, str] = dict(fields or {})


class InterviewFinishedError(ValidationError):
    """A turn was requested after the interview reached its last question."""

    def __init__(self, questions_asked: int):
        super().__init__(
            "The interview is already finished.",
            {"questionsAsked": "The interview is already finished. Start a new one."},
        )
        self.questions_asked = questions_asked


class GenerationError(AatmaiError):
    """The upstream model produced no structurally valid output."""


class ServiceUnavailableError(AatmaiError):
    """Credentials or configuration for an external service are missing."""


class NetworkError(AatmaiError):
    """The external call failed; the message carries the provider's reason."""


class AudioProcessingError(AatmaiError):
    """The speech job was accepted but was not ready after the single poll."""
