"""Command-line interface for portfolioterm.

Provides the main entry point for chatting with the terminal locally,
running one-off commands, or serving sessions over HTTP.
"""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from pathlib import Path
from typing import TYPE_CHECKING, TextIO

if TYPE_CHECKING:
    import httpx

logger = logging.getLogger(__name__)

EXIT_WORDS = ("exit", "quit", "logout")
CLEAR_SCREEN = "\x1b[2J\x1b[H"


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        prog="portfolioterm",
        description="Embedded portfolio terminal",
    )
    parser.add_argument(
        "-c", "--config",
        type=Path,
        default=None,
        help="Path to YAML configuration file (default: config/portfolioterm.yaml)",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable debug logging",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    repl_parser = subparsers.add_parser("repl", help="Type commands interactively")
    repl_parser.add_argument(
        "--remote", type=str, default=None, metavar="URL",
        help="Use a session on a running endpoint instead of a local interpreter",
    )

    exec_parser = subparsers.add_parser("exec", help="Submit lines and print the screen")
    exec_parser.add_argument("lines", nargs="+", help="Command lines, one per argument")

    serve_parser = subparsers.add_parser("serve", help="Start the HTTP endpoint server")
    serve_parser.add_argument("--host", type=str, default=None)
    serve_parser.add_argument("--port", type=int, default=None)

    return parser.parse_args(argv)


def _run_repl(settings, stdin: TextIO, stdout: TextIO) -> None:
    """Read lines from ``stdin`` and answer them with a local interpreter."""
    from portfolioterm.endpoint.display import render_entry
    from portfolioterm.interpreter.factory import build_interpreter

    interpreter = build_interpreter(settings)
    for entry in interpreter.transcript:
        _write_lines(stdout, render_entry(entry, interpreter.prompt))

    while True:
        stdout.write(f"{interpreter.prompt} ")
        stdout.flush()
        line = stdin.readline()
        if not line or line.strip().lower() in EXIT_WORDS:
            stdout.write("\n")
            break
        before = len(interpreter.transcript)
        entry = interpreter.submit_line(line.rstrip("\n"))
        if entry is not None and entry.output:
            _write_lines(stdout, entry.output.split("\n"))
        elif entry is None and before and not interpreter.transcript:
            # Transcript was reset; wipe the real screen too.
            stdout.write(CLEAR_SCREEN)


async def _run_remote_repl(
    settings,
    url: str,
    stdin: TextIO,
    stdout: TextIO,
    transport: httpx.AsyncBaseTransport | None = None,
) -> None:
    """Same as the local REPL, but every line goes to an endpoint session."""
    from portfolioterm.client.http_client import TerminalClient
    from portfolioterm.endpoint.display import render_entry

    client = TerminalClient(base_url=url, timeout=settings.client.timeout, transport=transport)
    async with client:
        shown = await client.transcript()
        for entry in shown:
            _write_lines(stdout, render_entry(entry, client.prompt))
        length = len(shown)
        while True:
            stdout.write(f"{client.prompt} ")
            stdout.flush()
            line = stdin.readline()
            if not line or line.strip().lower() in EXIT_WORDS:
                stdout.write("\n")
                break
            entry = await client.submit(line.rstrip("\n"))
            if entry is not None:
                length += 1
                if entry.output:
                    _write_lines(stdout, entry.output.split("\n"))
                continue
            # Nothing appended: either blank input or the transcript was reset.
            remaining = len(await client.transcript())
            if length and not remaining:
                stdout.write(CLEAR_SCREEN)
            length = remaining


def _run_exec(settings, lines: list[str], stdout: TextIO) -> None:
    from portfolioterm.endpoint.display import render_screen
    from portfolioterm.interpreter.factory import build_interpreter

    interpreter = build_interpreter(settings)
    for line in lines:
        interpreter.submit_line(line)
    stdout.write(
        render_screen(interpreter.transcript, interpreter.prompt, cursor_visible=False) + "\n"
    )


def _write_lines(stdout: TextIO, lines: list[str]) -> None:
    for line in lines:
        stdout.write(line + "\n")


def main(argv: list[str] | None = None) -> None:
    """Main entry point for the portfolioterm CLI."""
    args = parse_args(argv)

    if args.command is None:
        parse_args(["--help"])
        return

    from portfolioterm.config.settings import load_settings
    from portfolioterm.utils.logging import setup_logging

    settings = load_settings(args.config)

    if args.verbose:
        settings.logging.level = "DEBUG"

    setup_logging(settings.logging)

    if args.command == "repl":
        if args.remote:
            logger.info("Starting remote REPL against %s", args.remote)
            asyncio.run(_run_remote_repl(settings, args.remote, sys.stdin, sys.stdout))
        else:
            _run_repl(settings, sys.stdin, sys.stdout)

    elif args.command == "exec":
        _run_exec(settings, args.lines, sys.stdout)

    elif args.command == "serve":
        logger.info("Starting endpoint server")
        from portfolioterm.endpoint.server import create_app
        import uvicorn
        ep = settings.endpoint
        uvicorn.run(
            create_app(settings),
            host=args.host or ep.host,
            port=args.port or ep.port,
        )


if __name__ == "__main__":
    main()
