"""HTTP client module for portfolioterm.

Public API:
    TerminalClient -- drives one remote interpreter session
    TerminalClientError -- raised on transport or HTTP failures
"""

from portfolioterm.client.http_client import TerminalClient, TerminalClientError

__all__ = ["TerminalClient", "TerminalClientError"]
