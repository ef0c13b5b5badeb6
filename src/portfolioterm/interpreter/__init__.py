"""Command interpreter module for portfolioterm.

Resolves submitted lines against a registry of built-in and caller-supplied
command handlers and records the results in a session transcript.

Public API:
    Interpreter -- one terminal session
    CommandRegistry -- effective name -> handler mapping
    build_registry -- merge overrides onto the built-ins
    build_interpreter -- interpreter from loaded Settings
"""

from portfolioterm.interpreter.registry import CommandRegistry, build_registry
from portfolioterm.interpreter.session import CommandError, Interpreter

__all__ = [
    "CommandError",
    "CommandRegistry",
    "Interpreter",
    "build_interpreter",
    "build_registry",
]


def __getattr__(name: str) -> object:
    """Lazy import for the settings-aware factory."""
    if name == "build_interpreter":
        from portfolioterm.interpreter.factory import build_interpreter
        return build_interpreter
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
