"""Shared test fixtures for the portfolioterm test suite.

Provides common fixtures used across the unit tests: interpreters with
and without overrides, sample projects and settings.
"""

from __future__ import annotations

from typing import Sequence

import pytest

from portfolioterm.config.settings import Settings, TerminalConfig
from portfolioterm.domain.models import Project
from portfolioterm.interpreter.session import Interpreter


# ---------------------------------------------------------------------------
# Interpreter Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def interpreter() -> Interpreter:
    """An interpreter with only the built-in commands."""
    return Interpreter(initial_message="hi")


@pytest.fixture
def echo_handler():
    """A handler that echoes its arguments back."""

    def echo(args: Sequence[str]) -> str:
        return " ".join(args)

    return echo


@pytest.fixture
def custom_interpreter(echo_handler) -> Interpreter:
    """An interpreter with one override and one added command."""
    return Interpreter(
        commands={
            "about": lambda args: "custom about",
            "echo": echo_handler,
        },
        initial_message="hi",
    )


# ---------------------------------------------------------------------------
# Content / Config Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def sample_projects() -> list[Project]:
    return [
        Project(
            id="weather",
            title="Weather Dashboard",
            description="Forecasts for any city",
            technologies=["React", "Tailwind CSS"],
            full_description="A responsive weather dashboard.",
            demo_url="https://example.com/weather",
        ),
        Project(
            id="notes",
            title="Notes App",
            description="Markdown notes in the browser",
        ),
    ]


@pytest.fixture
def sample_settings(sample_projects: list[Project]) -> Settings:
    """Settings with a YAML-style text command and projects."""
    return Settings(
        terminal=TerminalConfig(
            username="guest",
            hostname="site",
            initial_message="hello there",
            commands={"contact": "mail me"},
            descriptions={"contact": "How to get in touch"},
        ),
        projects=sample_projects,
    )
