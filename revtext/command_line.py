"""Command-line boundary: invocation arguments in, output text out."""

from __future__ import annotations

import dataclasses
import logging
import sys
import typing as typ

from .errors import OutputWriteError
from .output import NullSink, OutputListener, OutputSink, OutputTracker, StreamSink

if typ.TYPE_CHECKING:
    import collections.abc as cabc

_logger = logging.getLogger(__name__)

ERROR_WRITE_FAILED = "Unable to write output: {error}"


@dataclasses.dataclass(frozen=True)
class RunOptions:
    """Canned invocation used to build a null command line."""

    args: tuple[str, ...] = ()


class CommandLine:
    """Expose invocation arguments and write output text.

    Use `create` at the program entry point and `create_null` in tests. Both
    variants broadcast every write to trackers from `track_output`; only the
    real variant writes to a stream.
    """

    def __init__(self, args: cabc.Iterable[str], sink: OutputSink) -> None:
        """Bind ``args`` and the ``sink`` receiving output."""
        self._args = tuple(args)
        self._sink = sink
        self._listener: OutputListener[str] = OutputListener.create()

    @classmethod
    def create(
        cls,
        args: cabc.Iterable[str],
        *,
        stdout: typ.IO[str] | None = None,
    ) -> CommandLine:
        """Bind the process arguments (without the program name) and stdout."""
        return cls(args, StreamSink(stdout or sys.stdout))

    @classmethod
    def create_null(
        cls,
        options: RunOptions | None = None,
        *,
        args: cabc.Iterable[str] | None = None,
    ) -> CommandLine:
        """Return a command line with fixed arguments that writes nowhere."""
        if args is None:
            args = (options or RunOptions()).args
        return cls(args, NullSink())

    @property
    def args(self) -> tuple[str, ...]:
        """Invocation arguments, excluding the program name."""
        return self._args

    def write_output(self, text: str) -> None:
        """Write ``text`` to the output destination and notify trackers."""
        _logger.debug("writing %d characters of output", len(text))
        try:
            self._sink.write(text)
        except OSError as error:
            raise OutputWriteError(ERROR_WRITE_FAILED.format(error=error)) from error
        self._listener.emit(text)

    def track_output(self) -> OutputTracker[str]:
        """Return a tracker recording every future `write_output` text."""
        return self._listener.track_output()
