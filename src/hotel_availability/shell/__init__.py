"""Line-oriented command shell for availability queries."""

from .commands import (
    AvailabilityCommand,
    Command,
    CommandError,
    SearchCommand,
    extract_args,
    parse_command,
    parse_night_range,
)
from .repl import AvailabilityShell, format_windows

__all__ = [
    "AvailabilityCommand",
    "AvailabilityShell",
    "Command",
    "CommandError",
    "SearchCommand",
    "extract_args",
    "format_windows",
    "parse_command",
    "parse_night_range",
]
