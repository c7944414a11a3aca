"""Output sinks and in-process tracking of emitted output.

`OutputListener` is an explicit publish/subscribe point: it keeps its own
list of trackers and hands every emitted payload to each of them in turn.
Tests create a tracker before exercising the code under test and inspect
`OutputTracker.data` afterwards.

Sinks are the destinations that text is written to. `StreamSink` wraps a
real text stream; `NullSink` accepts writes and discards them.
"""

from __future__ import annotations

import typing as typ

T = typ.TypeVar("T")


class OutputSink(typ.Protocol):
    """Destination accepting text writes."""

    def write(self, text: str) -> None:
        """Write ``text`` to the destination."""
        ...


class StreamSink:
    """Sink writing to a text stream and flushing after each write."""

    def __init__(self, stream: typ.IO[str]) -> None:
        """Wrap ``stream``."""
        self._stream = stream

    def write(self, text: str) -> None:
        """Write ``text`` to the wrapped stream."""
        self._stream.write(text)
        self._stream.flush()


class NullSink:
    """Sink that discards everything written to it."""

    def write(self, text: str) -> None:
        """Discard ``text``."""


class OutputTracker(typ.Generic[T]):
    """Record payloads emitted by an `OutputListener`, in emission order."""

    def __init__(self, listener: OutputListener[T]) -> None:
        """Subscribe to ``listener``."""
        self._listener = listener
        self._data: list[T] = []
        listener.subscribe(self)

    @property
    def data(self) -> tuple[T, ...]:
        """Payloads recorded so far."""
        return tuple(self._data)

    def record(self, payload: T) -> None:
        """Append ``payload`` to the recorded data."""
        self._data.append(payload)

    def clear(self) -> tuple[T, ...]:
        """Return the recorded payloads and start over with an empty record."""
        recorded = self.data
        self._data.clear()
        return recorded

    def stop(self) -> None:
        """Stop recording; payloads already recorded are kept."""
        self._listener.unsubscribe(self)


class OutputListener(typ.Generic[T]):
    """Broadcast emitted payloads to every registered tracker."""

    def __init__(self) -> None:
        """Start with no trackers."""
        self._trackers: list[OutputTracker[T]] = []

    @classmethod
    def create(cls) -> OutputListener[T]:
        """Return a listener with no trackers."""
        return cls()

    def track_output(self) -> OutputTracker[T]:
        """Return a tracker recording every payload emitted from now on."""
        return OutputTracker(self)

    def subscribe(self, tracker: OutputTracker[T]) -> None:
        """Register ``tracker`` for future payloads."""
        self._trackers.append(tracker)

    def unsubscribe(self, tracker: OutputTracker[T]) -> None:
        """Remove ``tracker``; unknown trackers are ignored."""
        if tracker in self._trackers:
            self._trackers.remove(tracker)

    def emit(self, payload: T) -> None:
        """Hand ``payload`` to each registered tracker."""
        for tracker in tuple(self._trackers):
            tracker.record(payload)
