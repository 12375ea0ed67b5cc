"""
Console Logger - Leveled, colored log lines for the mint bot.

One ConsoleLogger is built per process (see cli.py) and handed to every
operation that needs to report progress. Colors come from click.style so
they degrade cleanly when output is not a terminal.
"""

from __future__ import annotations

import json
from datetime import datetime
from typing import IO, Any, Callable, Optional

import click
import httpx


HEADER = "◆ LayerEdge Auto Bot"

# level -> style kwargs for click.style
LEVEL_STYLES: dict[str, dict[str, Any]] = {
    "info": {"fg": "bright_blue", "bold": True},
    "warn": {"fg": "bright_yellow", "bold": True},
    "error": {"fg": "bright_red", "bold": True},
    "success": {"fg": "bright_green", "bold": True},
    "debug": {"fg": "bright_magenta", "bold": True},
    "verbose": {"fg": "cyan", "bold": True},
}
DEFAULT_STYLE: dict[str, Any] = {"fg": "white"}

PROGRESS_MARKERS: dict[str, tuple[str, str]] = {
    "success": ("✔", "green"),
    "failed": ("✘", "red"),
}
PENDING_MARKER = ("➤", "yellow")


def level_style(level: str) -> dict[str, Any]:
    """Return click.style kwargs for a level (white for unknown levels)."""
    return LEVEL_STYLES.get(level, DEFAULT_STYLE)


def format_error(error: Optional[BaseException]) -> str:
    """Render an exception with HTTP diagnostics when it carries any."""
    if error is None:
        return ""

    # Imported lazily: request.py depends on this module for logging.
    from .request import RequestError

    details: Optional[dict[str, Any]] = None
    if isinstance(error, RequestError):
        details = {
            "status": error.status,
            "reason": error.reason,
            "url": error.url,
            "method": error.method,
            "data": error.response_data,
            "headers": error.headers,
        }
    elif isinstance(error, httpx.HTTPStatusError):
        details = {
            "status": error.response.status_code,
            "reason": error.response.reason_phrase,
            "url": str(error.request.url),
            "method": error.request.method,
            "data": _response_data(error.response),
            "headers": dict(error.request.headers),
        }

    text = str(error)
    if details is None:
        return text

    return (
        f"{text}\n"
        f"    Status: {details['status'] or 'N/A'}\n"
        f"    Status Text: {details['reason'] or 'N/A'}\n"
        f"    URL: {details['url'] or 'N/A'}\n"
        f"    Method: {(details['method'] or 'N/A').upper()}\n"
        f"    Response Data: {json.dumps(details['data'] or {}, indent=2, default=str)}\n"
        f"    Headers: {json.dumps(details['headers'] or {}, indent=2, default=str)}"
    )


def _response_data(response: httpx.Response) -> Any:
    try:
        return response.json()
    except ValueError:
        return response.text


class ConsoleLogger:
    """Colored console logger with one method per level.

    Args:
        verbose: Emit ``verbose`` lines and error diagnostics.
        file: Stream to write to (default: stdout).
        clock: Returns the current time; injectable for tests.
    """

    def __init__(
        self,
        verbose: bool = True,
        file: Optional[IO[str]] = None,
        clock: Callable[[], datetime] = datetime.now,
    ) -> None:
        self.verbose_enabled = verbose
        self.file = file
        self.clock = clock

    def _timestamp(self) -> str:
        return click.style(f"[{self.clock().strftime('%X')}]", fg="bright_black")

    def _emit(self, line: str) -> None:
        click.echo(line, file=self.file)

    def log(
        self,
        level: str,
        message: str,
        value: Any = "",
        error: Optional[BaseException] = None,
    ) -> None:
        tag = click.style(f"[{level.upper()}]", **level_style(level))
        line = f"{click.style(HEADER, fg='cyan')} {self._timestamp()} {tag} {message}"

        if value:
            if isinstance(value, (dict, list)):
                value = json.dumps(value, default=str)
            color = {"error": "red", "warn": "yellow"}.get(level, "green")
            line += " " + click.style(str(value), fg=color)

        if error is not None and self.verbose_enabled:
            line += "\n" + click.style(format_error(error), fg="red")

        self._emit(line)

    def info(self, message: str, value: Any = "") -> None:
        self.log("info", message, value)

    def warn(self, message: str, value: Any = "") -> None:
        self.log("warn", message, value)

    def error(self, message: str, value: Any = "", error: Optional[BaseException] = None) -> None:
        self.log("error", message, value, error)

    def success(self, message: str, value: Any = "") -> None:
        self.log("success", message, value)

    def debug(self, message: str, value: Any = "") -> None:
        self.log("debug", message, value)

    def verbose(self, message: str, value: Any = "") -> None:
        if self.verbose_enabled:
            self.log("verbose", message, value)

    def progress(self, wallet: str, step: str, status: str) -> None:
        """Print a one-line progress marker for a wallet step."""
        marker, color = PROGRESS_MARKERS.get(status, PENDING_MARKER)
        self._emit(
            f"{click.style(HEADER, fg='cyan')} {self._timestamp()} "
            f"{click.style('[PROGRESS]', fg='bright_blue')} "
            f"{click.style(marker, fg=color)} {wallet} - {step}"
        )
