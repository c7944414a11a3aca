"""Settings for the reversal application."""

from __future__ import annotations

import dataclasses
import os

USAGE_MESSAGE = "Usage: run <text>"
ERROR_TOO_MANY_ARGUMENTS = "too many arguments"


@dataclasses.dataclass(frozen=True)
class AppSettings:
    """Messages and line terminator used when writing results."""

    usage_message: str = USAGE_MESSAGE
    too_many_arguments_message: str = ERROR_TOO_MANY_ARGUMENTS
    line_terminator: str = os.linesep

    def line(self, text: str) -> str:
        """Terminate ``text`` with the configured line terminator."""
        return f"{text}{self.line_terminator}"
