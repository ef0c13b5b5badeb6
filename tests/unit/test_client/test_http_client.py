"""Tests for the TerminalClient HTTP client."""

from __future__ import annotations

import asyncio

import httpx
import pytest

from portfolioterm.client.http_client import TerminalClient, TerminalClientError
from portfolioterm.config.settings import Settings
from portfolioterm.endpoint.server import create_app


def _asgi_transport(settings: Settings) -> httpx.ASGITransport:
    return httpx.ASGITransport(app=create_app(settings))


class TestTerminalClient:
    """Drive a real app in-process through the ASGI transport."""

    def test_init_defaults(self) -> None:
        client = TerminalClient()
        assert client._base_url == "http://localhost:8080"
        assert client._timeout == 10.0
        assert client.session_id is None

    def test_init_strips_trailing_slash(self) -> None:
        client = TerminalClient(base_url="http://192.168.1.100:9090/")
        assert client._base_url == "http://192.168.1.100:9090"

    def test_round_trip(self, sample_settings: Settings) -> None:
        async def scenario() -> None:
            client = TerminalClient(base_url="http://test", transport=_asgi_transport(sample_settings))
            seed = await client.connect()
            assert [e.output for e in seed] == ["hello there"]
            assert client.prompt == "guest@site:~$"
            assert client.session_id

            entry = await client.submit("contact")
            assert entry is not None
            assert entry.output == "mail me"

            assert await client.submit("clear") is None
            assert await client.transcript() == []

            await client.submit("nope")
            screen = await client.screen()
            assert "Command not found: nope" in screen

            await client.disconnect()
            assert client.session_id is None
            await client.disconnect()

        asyncio.run(scenario())

    def test_context_manager_deletes_session(self, sample_settings: Settings) -> None:
        app = create_app(sample_settings)

        async def scenario() -> None:
            transport = httpx.ASGITransport(app=app)
            async with TerminalClient(base_url="http://test", transport=transport) as client:
                assert len(app.state.sessions) == 1
                assert await client.screen(max_lines=1) == "guest@site:~$ "
            assert len(app.state.sessions) == 0

        asyncio.run(scenario())

    def test_request_before_connect(self) -> None:
        with pytest.raises(TerminalClientError):
            asyncio.run(TerminalClient().submit("help"))

    def test_connect_failure_is_wrapped(self) -> None:
        def refuse(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("refused", request=request)

        client = TerminalClient(base_url="http://test", transport=httpx.MockTransport(refuse))
        with pytest.raises(TerminalClientError) as exc_info:
            asyncio.run(client.connect())
        assert exc_info.value.path == "/sessions"
        assert isinstance(exc_info.value.__cause__, httpx.ConnectError)

    def test_http_error_is_wrapped(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            if request.method == "POST" and request.url.path == "/sessions":
                return httpx.Response(
                    201, json={"session_id": "abc", "prompt": "p$", "transcript": []}
                )
            return httpx.Response(404, json={"detail": "Unknown session: abc"})

        async def scenario() -> None:
            client = TerminalClient(base_url="http://test", transport=httpx.MockTransport(handler))
            await client.connect()
            with pytest.raises(TerminalClientError) as exc_info:
                await client.submit("help")
            assert exc_info.value.path == "/sessions/abc/submit"
            await client.disconnect()

        asyncio.run(scenario())
