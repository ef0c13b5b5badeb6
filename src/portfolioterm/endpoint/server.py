"""FastAPI HTTP server hosting interpreter sessions.

Each session is an independent embedded terminal. Clients create a
session, submit lines to it, and read back the transcript or a rendered
screen. Route handlers run on the event loop and never await while
dispatching, so a submitted line is fully processed before the next
request touches the session.
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator, Callable

import uvicorn
from fastapi import FastAPI, HTTPException, Query
from pydantic import BaseModel, Field

from portfolioterm.config.settings import Settings, load_settings
from portfolioterm.domain.models import TranscriptEntry
from portfolioterm.endpoint.display import render_screen
from portfolioterm.endpoint.sessions import SessionNotFoundError, SessionStore
from portfolioterm.interpreter.factory import build_interpreter
from portfolioterm.interpreter.session import Interpreter

logger = logging.getLogger(__name__)


class SubmitRequest(BaseModel):
    line: str = Field(description="The command line exactly as typed")


class SessionView(BaseModel):
    session_id: str
    prompt: str
    input_buffer: str = ""
    transcript: list[TranscriptEntry] = Field(default_factory=list)


class SubmitResponse(BaseModel):
    session_id: str
    appended: TranscriptEntry | None = Field(
        default=None, description="Entry added this turn, if any"
    )
    transcript: list[TranscriptEntry]


class ScreenResponse(BaseModel):
    content: str


class EndpointStatus(BaseModel):
    status: str = "ok"
    sessions: int = 0


def _view(session_id: str, interpreter: Interpreter) -> SessionView:
    return SessionView(
        session_id=session_id,
        prompt=interpreter.prompt,
        input_buffer=interpreter.input_buffer,
        transcript=list(interpreter.transcript),
    )


def create_app(
    settings: Settings | None = None,
    factory: Callable[[], Interpreter] | None = None,
) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        settings: Configuration used to build each session's interpreter.
        factory: Overrides how interpreters are built; mainly for tests.
    """
    settings = settings or Settings()
    if factory is None:
        def factory() -> Interpreter:
            return build_interpreter(settings)

    store = SessionStore(factory, max_sessions=settings.endpoint.max_sessions)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        logger.info("Endpoint started")
        yield
        logger.info("Endpoint stopped (%d sessions discarded)", len(app.state.sessions))

    app = FastAPI(
        title="portfolioterm Endpoint",
        description="HTTP host for embedded portfolio terminal sessions",
        version="0.1.0",
        lifespan=lifespan,
    )
    app.state.sessions = store

    def _get(session_id: str) -> Interpreter:
        try:
            return store.get(session_id)
        except SessionNotFoundError:
            raise HTTPException(status_code=404, detail=f"Unknown session: {session_id}")

    @app.get("/health")
    async def health_check() -> EndpointStatus:
        return EndpointStatus(status="ok", sessions=len(store))

    @app.post("/sessions", status_code=201)
    async def create_session() -> SessionView:
        session_id, interpreter = store.create()
        return _view(session_id, interpreter)

    @app.get("/sessions/{session_id}")
    async def get_session(session_id: str) -> SessionView:
        return _view(session_id, _get(session_id))

    @app.post("/sessions/{session_id}/submit")
    async def submit_line(session_id: str, request: SubmitRequest) -> SubmitResponse:
        interpreter = _get(session_id)
        entry = interpreter.submit_line(request.line)
        return SubmitResponse(
            session_id=session_id,
            appended=entry,
            transcript=list(interpreter.transcript),
        )

    @app.get("/sessions/{session_id}/screen")
    async def get_screen(
        session_id: str,
        max_lines: int | None = Query(default=None, ge=1),
    ) -> ScreenResponse:
        interpreter = _get(session_id)
        content = render_screen(
            interpreter.transcript,
            interpreter.prompt,
            interpreter.input_buffer,
            cursor_visible=False,
            max_lines=max_lines,
        )
        return ScreenResponse(content=content)

    @app.delete("/sessions/{session_id}", status_code=204)
    async def delete_session(session_id: str) -> None:
        try:
            store.delete(session_id)
        except SessionNotFoundError:
            raise HTTPException(status_code=404, detail=f"Unknown session: {session_id}")

    return app


def main() -> None:
    """Entry point for running the endpoint server standalone.

    Reads ``config/portfolioterm.yaml`` (plus env overrides) the same way
    ``portfolioterm serve`` does.
    """
    from portfolioterm.utils.logging import setup_logging

    settings = load_settings()
    setup_logging(settings.logging)
    app = create_app(settings)
    uvicorn.run(app, host=settings.endpoint.host, port=settings.endpoint.port)


if __name__ == "__main__":
    main()
