"""Application logic: validate the arguments and write one result line."""

from __future__ import annotations

import logging
import typing as typ

from .config import AppSettings
from .reverse import reverse

if typ.TYPE_CHECKING:
    from .command_line import CommandLine

_logger = logging.getLogger(__name__)


class Application:
    """Reverse the single argument supplied on a command line."""

    def __init__(
        self,
        command_line: CommandLine,
        settings: AppSettings | None = None,
    ) -> None:
        """Bind the command line and the output settings."""
        self._command_line = command_line
        self._settings = settings or AppSettings()

    def run(self) -> int:
        """Write the usage hint, an error, or the reversed argument.

        Every outcome is reported on the output line; the exit status is
        always 0.
        """
        args = self._command_line.args
        if not args:
            _logger.debug("no arguments supplied")
            self._write(self._settings.usage_message)
        elif len(args) > 1:
            _logger.debug("rejecting %d arguments", len(args))
            self._write(self._settings.too_many_arguments_message)
        else:
            self._write(reverse(args[0]))
        return 0

    def _write(self, text: str) -> None:
        self._command_line.write_output(self._settings.line(text))
