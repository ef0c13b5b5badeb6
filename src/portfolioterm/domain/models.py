"""Core domain models for the portfolioterm system.

These models represent the data flowing through the interpreter: what a
command handler returns, the transcript entries the host renders, and the
portfolio projects the terminal can describe.
"""

from __future__ import annotations

from typing import Annotated, Callable, Literal, Sequence, Union

from pydantic import BaseModel, ConfigDict, Field


# ---------------------------------------------------------------------------
# Handler Results (discriminated union)
# ---------------------------------------------------------------------------


class TextOutput(BaseModel):
    """Text to append to the transcript as the command's output."""

    model_config = ConfigDict(frozen=True)

    result_type: Literal["text"] = "text"
    text: str = Field(default="", description="Output text shown under the command")


class ResetTranscript(BaseModel):
    """Wipe the transcript instead of appending an entry for this turn."""

    model_config = ConfigDict(frozen=True)

    result_type: Literal["reset"] = "reset"


CommandResult = Annotated[
    Union[TextOutput, ResetTranscript],
    Field(discriminator="result_type"),
]

# Handlers may return a bare string; the interpreter treats it as TextOutput.
CommandHandler = Callable[[Sequence[str]], Union[str, TextOutput, ResetTranscript]]


# ---------------------------------------------------------------------------
# Transcript
# ---------------------------------------------------------------------------


class TranscriptEntry(BaseModel):
    """One submitted line and the output it produced.

    The seed entry has an empty command and carries the welcome message.
    """

    model_config = ConfigDict(frozen=True)

    command: str = Field(default="", description="The line exactly as typed")
    output: str = Field(default="", description="Text produced by the command")


# ---------------------------------------------------------------------------
# Portfolio Content
# ---------------------------------------------------------------------------


class Project(BaseModel):
    """A portfolio project the terminal can list and describe."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(min_length=1, description="Short identifier typed by visitors")
    title: str
    description: str = ""
    technologies: list[str] = Field(default_factory=list)
    full_description: str = ""
    demo_url: str | None = None
    repo_url: str | None = None
