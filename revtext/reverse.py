"""Text reversal."""

from __future__ import annotations


def reverse(text: str) -> str:
    """Return ``text`` with its characters in the opposite order."""
    return text[::-1]
