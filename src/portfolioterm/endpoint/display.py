"""Plain-text rendering of an interpreter transcript.

Produces what the embedded terminal shows: each entry as a prompt line
followed by its output, then the live prompt with the input buffer and an
optional block cursor. The seed entry has no command, so only its output
is drawn.
"""

from __future__ import annotations

import logging
from typing import Sequence

from portfolioterm.domain.models import TranscriptEntry

logger = logging.getLogger(__name__)

CURSOR = "█"


def render_entry(entry: TranscriptEntry, prompt: str) -> list[str]:
    lines = []
    if entry.command:
        lines.append(f"{prompt} {entry.command}")
    if entry.output:
        lines.extend(entry.output.split("\n"))
    return lines


def render_screen(
    entries: Sequence[TranscriptEntry],
    prompt: str,
    input_buffer: str = "",
    cursor_visible: bool = True,
    max_lines: int | None = None,
) -> str:
    """Render the transcript and live prompt as one block of text.

    Args:
        entries: Transcript entries, oldest first.
        prompt: Prompt decoration, e.g. ``visitor@portfolio:~$``.
        input_buffer: The line currently being typed.
        cursor_visible: Whether to draw the cursor after the input.
        max_lines: Keep only the last N lines, like a scrolled-to-bottom
                   terminal window. None keeps everything.

    Raises:
        ValueError: If max_lines is less than 1.
    """
    if max_lines is not None and max_lines < 1:
        raise ValueError(f"max_lines must be at least 1, got {max_lines}")

    lines: list[str] = []
    for entry in entries:
        lines.extend(render_entry(entry, prompt))

    live = f"{prompt} {input_buffer}"
    if cursor_visible:
        live += CURSOR
    lines.append(live)

    if max_lines is not None and len(lines) > max_lines:
        lines = lines[-max_lines:]
    return "\n".join(lines)
