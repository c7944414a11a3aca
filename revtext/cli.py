"""Command line entry point for revtext."""

from __future__ import annotations

import sys
import typing as typ

from cyclopts import App, Parameter

from .app import Application
from .command_line import CommandLine
from .config import AppSettings
from .errors import RevtextError

# Every token is text to reverse, so the built-in flags and the `--`
# delimiter are disabled.
app = App(
    name="revtext",
    help_flags=(),
    version_flags=(),
    end_of_options_delimiter="",
)


@app.default
def run(*text: typ.Annotated[str, Parameter(allow_leading_hyphen=True)]) -> int:
    """Print the reversed form of the single TEXT argument."""
    command_line = CommandLine.create(text)
    return Application(command_line, AppSettings()).run()


def main(argv: list[str] | tuple[str, ...] | None = None) -> int:
    """Entry point for the revtext CLI."""
    try:
        result = app(argv)
    except RevtextError as error:
        print(f"revtext: {error}", file=sys.stderr)
        return 1
    return int(result or 0)


if __name__ == "__main__":
    raise SystemExit(main())
