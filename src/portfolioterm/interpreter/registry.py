"""Command registry for the interpreter.

The effective registry is computed once, when the registry is built: the
built-in table is laid down first and caller overrides are written on top
of it. A caller handler under a built-in name replaces the built-in
outright; any other caller name is appended after the built-ins.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Iterator

from portfolioterm.domain.models import CommandHandler
from portfolioterm.interpreter.builtins import (
    DEFAULT_DESCRIPTIONS,
    FALLBACK_DESCRIPTION,
    default_commands,
)

logger = logging.getLogger(__name__)


class CommandRegistry(Mapping[str, CommandHandler]):
    """Read-only mapping of lower-cased command name to handler.

    Iteration order is insertion order of the merge: built-ins first (in
    their declared order), then override-only additions in the order the
    caller supplied them.
    """

    def __init__(
        self,
        overrides: Mapping[str, CommandHandler] | None = None,
        descriptions: Mapping[str, str] | None = None,
    ) -> None:
        handlers: dict[str, CommandHandler] = dict(default_commands(self))
        for name, handler in (overrides or {}).items():
            # Dispatch only ever looks up the first whitespace-separated token.
            if name.split() != [name]:
                raise ValueError(
                    f"Invalid command name {name!r}: must be a single non-empty word"
                )
            key = name.lower()
            if key in handlers:
                logger.debug("Override replaces built-in command %r", key)
            handlers[key] = handler
        self._handlers = handlers

        self._descriptions = dict(DEFAULT_DESCRIPTIONS)
        for name, text in (descriptions or {}).items():
            self._descriptions[name.lower()] = text

        logger.debug("Registry built with %d commands", len(self._handlers))

    def __getitem__(self, name: str) -> CommandHandler:
        return self._handlers[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._handlers)

    def __len__(self) -> int:
        return len(self._handlers)

    def names(self) -> list[str]:
        """Command names in registry order."""
        return list(self._handlers)

    def lookup(self, name: str) -> CommandHandler | None:
        """Resolve a typed command name, ignoring case."""
        return self._handlers.get(name.lower())

    def describe(self, name: str) -> str:
        """Help text for ``name``, or the generic fallback."""
        return self._descriptions.get(name.lower(), FALLBACK_DESCRIPTION)


def build_registry(
    overrides: Mapping[str, CommandHandler] | None = None,
    descriptions: Mapping[str, str] | None = None,
) -> CommandRegistry:
    """Merge ``overrides`` onto the built-in commands."""
    return CommandRegistry(overrides=overrides, descriptions=descriptions)
