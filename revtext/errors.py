"""Exceptions raised when revtext cannot deliver its output."""

from __future__ import annotations


class RevtextError(RuntimeError):
    """Base error reported by `revtext.cli.main` with exit status 1."""


class OutputWriteError(RevtextError):
    """Raised when the output stream rejects a write."""
