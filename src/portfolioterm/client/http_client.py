"""HTTP client for the portfolioterm endpoint.

Drives a remote interpreter session: opens it on connect, submits lines,
and discards it on disconnect.
"""

from __future__ import annotations

import logging

import httpx

from portfolioterm.domain.models import TranscriptEntry

logger = logging.getLogger(__name__)


class TerminalClient:
    """Talks to one session on a running endpoint.

    Example usage::

        async with TerminalClient(base_url="http://localhost:8080") as term:
            entry = await term.submit("help")
            print(await term.screen())
    """

    def __init__(
        self,
        base_url: str = "http://localhost:8080",
        timeout: float = 10.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout
        self._transport = transport
        self._client: httpx.AsyncClient | None = None
        self._session_id: str | None = None
        self._prompt = ""

    @property
    def session_id(self) -> str | None:
        return self._session_id

    @property
    def prompt(self) -> str:
        return self._prompt

    async def connect(self) -> list[TranscriptEntry]:
        """Create the HTTP client and open a session.

        Returns:
            The session's seeded transcript.

        Raises:
            TerminalClientError: If the endpoint cannot be reached.
        """
        self._client = httpx.AsyncClient(
            base_url=self._base_url,
            timeout=self._timeout,
            transport=self._transport,
        )
        try:
            resp = await self._client.post("/sessions")
            resp.raise_for_status()
        except httpx.HTTPError as e:
            await self._client.aclose()
            self._client = None
            raise TerminalClientError(
                f"Failed to open session at {self._base_url}: {e}", path="/sessions"
            ) from e

        data = resp.json()
        self._session_id = data["session_id"]
        self._prompt = data["prompt"]
        logger.info("Opened session %s at %s", self._session_id, self._base_url)
        return [TranscriptEntry(**e) for e in data["transcript"]]

    async def disconnect(self) -> None:
        """Discard the remote session and close the HTTP client.

        Safe to call more than once.
        """
        if self._client is None:
            return
        try:
            if self._session_id is not None:
                await self._client.delete(f"/sessions/{self._session_id}")
        except httpx.HTTPError as e:
            logger.warning("Failed to delete session %s: %s", self._session_id, e)
        finally:
            await self._client.aclose()
            self._client = None
            self._session_id = None
            logger.info("Disconnected from endpoint")

    async def submit(self, line: str) -> TranscriptEntry | None:
        """Submit one line; returns the entry it appended, if any."""
        data = await self._request("POST", "submit", {"line": line})
        logger.debug("Submitted line: %s", line[:50])
        appended = data.get("appended")
        return TranscriptEntry(**appended) if appended else None

    async def transcript(self) -> list[TranscriptEntry]:
        data = await self._request("GET", "")
        return [TranscriptEntry(**e) for e in data["transcript"]]

    async def screen(self, max_lines: int | None = None) -> str:
        params = {"max_lines": max_lines} if max_lines is not None else None
        data = await self._request("GET", "screen", params=params)
        return data["content"]

    async def _request(
        self,
        method: str,
        action: str,
        payload: dict | None = None,
        params: dict | None = None,
    ) -> dict:
        """Send a request against the current session."""
        if self._client is None or self._session_id is None:
            raise TerminalClientError("Not connected to endpoint")
        path = f"/sessions/{self._session_id}"
        if action:
            path = f"{path}/{action}"
        try:
            resp = await self._client.request(method, path, json=payload, params=params)
            resp.raise_for_status()
            return resp.json()
        except httpx.HTTPError as e:
            raise TerminalClientError(
                f"HTTP request to {path} failed: {e}", path=path
            ) from e

    async def __aenter__(self) -> TerminalClient:
        await self.connect()
        return self

    async def __aexit__(self, exc_type: type | None, exc_val: Exception | None, exc_tb: object) -> None:
        await self.disconnect()


class TerminalClientError(Exception):
    """Raised when talking to the endpoint fails."""

    def __init__(self, message: str, path: str = "") -> None:
        super().__init__(message)
        self.path = path
