"""The interpreter: input buffer, dispatch and transcript.

One ``Interpreter`` is one embedded terminal. It owns its registry and
transcript outright; separate instances share nothing.
"""

from __future__ import annotations

import logging
from typing import Mapping, Sequence

from portfolioterm.domain.models import (
    CommandHandler,
    ResetTranscript,
    TextOutput,
    TranscriptEntry,
)
from portfolioterm.interpreter.registry import CommandRegistry, build_registry

logger = logging.getLogger(__name__)

DEFAULT_INITIAL_MESSAGE = "Welcome to my portfolio! Type 'help' to see available commands."
DEFAULT_USERNAME = "visitor"
DEFAULT_HOSTNAME = "portfolio"


class Interpreter:
    """A simulated shell that answers typed commands with canned text.

    Example usage::

        term = Interpreter(commands={"ping": lambda args: "pong"})
        term.submit_line("ping")
        term.transcript[-1].output  # "pong"
    """

    def __init__(
        self,
        commands: Mapping[str, CommandHandler] | None = None,
        initial_message: str = DEFAULT_INITIAL_MESSAGE,
        username: str = DEFAULT_USERNAME,
        hostname: str = DEFAULT_HOSTNAME,
        descriptions: Mapping[str, str] | None = None,
    ) -> None:
        self._registry = build_registry(commands, descriptions)
        self._username = username
        self._hostname = hostname
        self._initial_message = initial_message
        self._input = ""
        self._transcript: list[TranscriptEntry] = []
        if initial_message:
            self._transcript.append(TranscriptEntry(command="", output=initial_message))

    @property
    def registry(self) -> CommandRegistry:
        return self._registry

    @property
    def command_names(self) -> list[str]:
        return self._registry.names()

    @property
    def transcript(self) -> tuple[TranscriptEntry, ...]:
        """Read-only view of the session history, oldest first."""
        return tuple(self._transcript)

    @property
    def input_buffer(self) -> str:
        return self._input

    @property
    def prompt(self) -> str:
        return f"{self._username}@{self._hostname}:~$"

    # -- composing -------------------------------------------------------

    def set_input(self, text: str) -> None:
        """Replace the in-progress line."""
        self._input = text

    def type_text(self, text: str) -> None:
        """Append typed characters to the in-progress line."""
        self._input += text

    def backspace(self) -> None:
        self._input = self._input[:-1]

    # -- dispatch --------------------------------------------------------

    def submit(self) -> TranscriptEntry | None:
        """Dispatch the input buffer.

        Returns the appended entry, or None when nothing was appended
        (blank input, or a command that reset the transcript).
        """
        line = self._input
        if not line.strip():
            return None

        tokens = line.split()
        name, args = tokens[0], tokens[1:]
        result = self._dispatch(name, args)

        self._input = ""
        if isinstance(result, ResetTranscript):
            logger.debug("Transcript reset by %r", name)
            self._transcript.clear()
            return None

        entry = TranscriptEntry(command=line, output=result.text)
        self._transcript.append(entry)
        return entry

    def submit_line(self, line: str) -> TranscriptEntry | None:
        """Put ``line`` in the input buffer and submit it."""
        self.set_input(line)
        return self.submit()

    def clear(self) -> None:
        """Empty the transcript, same as typing ``clear``."""
        self._transcript.clear()

    def _dispatch(self, name: str, args: Sequence[str]) -> TextOutput | ResetTranscript:
        handler = self._registry.lookup(name)
        if handler is None:
            logger.debug("Unknown command %r", name)
            return TextOutput(
                text=f"Command not found: {name}. Type 'help' to see available commands."
            )

        logger.debug("Dispatching %r with %d args", name.lower(), len(args))
        try:
            return _coerce_result(handler(list(args)))
        except Exception as e:
            logger.exception("Command %r failed", name.lower())
            return TextOutput(text=f"An error occurred while running '{name}': {e}")


def _coerce_result(value: object) -> TextOutput | ResetTranscript:
    """Normalize what a handler returned into a result variant."""
    if isinstance(value, (TextOutput, ResetTranscript)):
        return value
    if isinstance(value, str):
        return TextOutput(text=value)
    raise CommandError(
        f"handler returned {type(value).__name__}, expected str or CommandResult"
    )


class CommandError(Exception):
    """Raised when a command handler produces an unusable result."""
