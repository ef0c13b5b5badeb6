"""Domain models for portfolioterm.

This package contains the value objects shared by the interpreter, the
HTTP endpoint and the client. All models use Pydantic v2 for validation
and serialization.
"""

from portfolioterm.domain.models import (
    CommandHandler,
    CommandResult,
    Project,
    ResetTranscript,
    TextOutput,
    TranscriptEntry,
)

__all__ = [
    "CommandHandler",
    "CommandResult",
    "Project",
    "ResetTranscript",
    "TextOutput",
    "TranscriptEntry",
]
