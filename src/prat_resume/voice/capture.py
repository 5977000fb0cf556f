"""Speech capture boundary.

A :class:`SpeechCapture` wraps whatever speech-recognition facility the
platform offers.  The voice assistant binds its callbacks, starts and stops
sessions, and aborts the session on teardown.  When no capture is available
the voice feature is hidden altogether.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable

__all__ = ["SpeechCapture", "SpeechCaptureError"]


class SpeechCaptureError(RuntimeError):
    """Raised when a capture session cannot be started."""


def _ignore_text(_: str) -> None:
    pass


def _ignore() -> None:
    pass


class SpeechCapture(ABC):
    """One platform speech-recognition session at a time.

    Implementations report results through the bound callbacks:

    * ``on_partial(text)`` with the whole transcript accumulated so far,
    * ``on_end()`` once capture has finished after ``start`` or ``stop``,
    * ``on_error(message)`` when recognition fails.
    """

    def __init__(self) -> None:
        self.on_partial: Callable[[str], None] = _ignore_text
        self.on_end: Callable[[], None] = _ignore
        self.on_error: Callable[[str], None] = _ignore_text

    def bind(
        self,
        *,
        on_partial: Callable[[str], None],
        on_end: Callable[[], None],
        on_error: Callable[[str], None],
    ) -> None:
        self.on_partial = on_partial
        self.on_end = on_end
        self.on_error = on_error

    @abstractmethod
    def start(self) -> None:
        """Begin capturing.

        Raises:
            SpeechCaptureError: If the platform refuses to start a session.
        """

    @abstractmethod
    def stop(self) -> None:
        """Finish capturing; ``on_end`` follows."""

    @abstractmethod
    def abort(self) -> None:
        """Drop the session immediately without delivering further results."""
