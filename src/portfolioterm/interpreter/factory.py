"""Build interpreters from loaded configuration."""

from __future__ import annotations

import logging

from portfolioterm.config.settings import Settings
from portfolioterm.domain.models import CommandHandler
from portfolioterm.interpreter.builtins import (
    PROJECTS_DESCRIPTION,
    make_projects_command,
    make_static_command,
)
from portfolioterm.interpreter.session import Interpreter

logger = logging.getLogger(__name__)


def build_interpreter(settings: Settings) -> Interpreter:
    """Create a fresh interpreter session for ``settings``.

    Configured projects become a ``projects`` command, and text commands
    from the ``terminal`` section are layered on top, so a YAML-defined
    ``projects`` command wins over the generated one.
    """
    term = settings.terminal
    commands: dict[str, CommandHandler] = {}
    descriptions: dict[str, str] = {}

    if settings.projects:
        commands["projects"] = make_projects_command(settings.projects)
        descriptions["projects"] = PROJECTS_DESCRIPTION

    for name, text in term.commands.items():
        commands[name] = make_static_command(text)
    descriptions.update(term.descriptions)

    logger.debug(
        "Building interpreter with %d configured commands for %s@%s",
        len(commands), term.username, term.hostname,
    )
    return Interpreter(
        commands=commands,
        initial_message=term.initial_message,
        username=term.username,
        hostname=term.hostname,
        descriptions=descriptions,
    )
