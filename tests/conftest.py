"""Shared pytest fixtures for revtext tests."""

from __future__ import annotations

import dataclasses
import typing as typ

import pytest

from revtext.app import Application
from revtext.command_line import CommandLine, RunOptions
from revtext.config import AppSettings

if typ.TYPE_CHECKING:
    from revtext.output import OutputTracker


@dataclasses.dataclass
class AppRun:
    """Outcome of running the application against a null command line."""

    output: OutputTracker[str]
    exit_code: int


class AppRunner(typ.Protocol):
    """Callable running the application with canned arguments."""

    def __call__(
        self,
        *args: str,
        settings: AppSettings | None = None,
    ) -> AppRun:
        """Run the application with ``args``."""
        ...


@pytest.fixture
def run_app() -> AppRunner:
    """Run the application with canned arguments and track its output."""

    def _run(*args: str, settings: AppSettings | None = None) -> AppRun:
        command_line = CommandLine.create_null(RunOptions(args=args))
        output = command_line.track_output()
        exit_code = Application(command_line, settings).run()
        return AppRun(output=output, exit_code=exit_code)

    return _run
