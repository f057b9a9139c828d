"""Interactive command loop over an availability engine."""
from __future__ import annotations

import logging
import sys
from typing import Callable, Iterable, Optional, TextIO

from hotel_availability.availability import AvailabilityEngine, AvailabilityWindow, HotelNotFoundError
from hotel_availability.availability.dates import format_compact

from .commands import AvailabilityCommand, Command, CommandError, SearchCommand, parse_command

logger = logging.getLogger(__name__)

BANNER = "Hotel availability application. Enter commands. Blank line to exit."
FAREWELL = "Exiting."


def format_windows(windows: Iterable[AvailabilityWindow]) -> str:
    """Render windows as ``(YYYYMMDD-YYYYMMDD, n)`` tuples; empty string when none."""
    return ", ".join(
        f"({format_compact(window.start)}-{format_compact(window.end)}, {window.min_available})"
        for window in windows
    )


class AvailabilityShell:
    """Reads commands line by line and writes one answer line per command."""

    def __init__(
        self,
        engine: AvailabilityEngine,
        *,
        stdin: Optional[TextIO] = None,
        stdout: Optional[TextIO] = None,
        prompt: str = "> ",
    ) -> None:
        self._engine = engine
        self._stdin = stdin or sys.stdin
        self._stdout = stdout or sys.stdout
        self._prompt = prompt
        self._handlers: dict[type, Callable[..., str]] = {
            AvailabilityCommand: self._run_availability,
            SearchCommand: self._run_search,
        }

    def _run_availability(self, command: AvailabilityCommand) -> str:
        available = self._engine.availability_between(
            command.hotel_id, command.room_type, command.first_night, command.last_night
        )
        return str(available)

    def _run_search(self, command: SearchCommand) -> str:
        windows = self._engine.search(command.hotel_id, command.room_type, command.horizon_nights)
        return format_windows(windows)

    def dispatch(self, command: Command) -> str:
        handler = self._handlers[type(command)]
        return handler(command)

    def execute(self, line: str) -> str:
        """Answer a single command line; errors become the answer text."""
        try:
            command = parse_command(line)
        except CommandError as exc:
            if exc.hotel_id is not None and not self._engine.knows_hotel(exc.hotel_id):
                return str(HotelNotFoundError(exc.hotel_id))
            return str(exc)
        try:
            return self.dispatch(command)
        except HotelNotFoundError as exc:
            return str(exc)
        except Exception as exc:  # noqa: BLE001
            logger.exception("Command failed: %s", line.strip())
            return f"Error processing command: {exc}"

    def _write(self, text: str) -> None:
        self._stdout.write(text)
        self._stdout.flush()

    def run(self) -> int:
        """Run until a blank line or end of input; returns the number of commands answered."""
        self._write(BANNER + "\n")
        answered = 0
        while True:
            self._write(self._prompt)
            line = self._stdin.readline()
            if not line.strip():
                break
            self._write(self.execute(line) + "\n")
            answered += 1
        self._write(FAREWELL + "\n")
        logger.info("Session ended after %d commands", answered)
        return answered
