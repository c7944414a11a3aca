"""Reverse a single command-line argument."""

from __future__ import annotations

from .app import Application
from .command_line import CommandLine, RunOptions
from .output import OutputListener, OutputTracker
from .reverse import reverse

__all__ = [
    "Application",
    "CommandLine",
    "OutputListener",
    "OutputTracker",
    "RunOptions",
    "reverse",
]
