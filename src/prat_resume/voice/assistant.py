"""Voice assistant state machine.

States::

    IDLE --start--> LISTENING --capture end--> PROCESSING --done--> IDLE
                        |                          ^
                        +--(empty transcript)------+--> IDLE

    UNAVAILABLE  (no speech capture on this platform; terminal)

While listening, every partial result replaces the live transcript and
re-arms a silence timer; when the timer fires the capture is stopped.  Only
one session runs at a time: ``start`` is a no-op unless the assistant is
idle.  Processing failures leave the document untouched.
"""

from __future__ import annotations

import asyncio
import logging
from enum import StrEnum
from typing import TYPE_CHECKING

from prat_resume.services.editor import DocumentEditError
from prat_resume.voice.capture import SpeechCapture, SpeechCaptureError
from prat_resume.voice.commands import process_transcript

if TYPE_CHECKING:
    from prat_resume.services.ai_assist import AIAssistant
    from prat_resume.store import ResumeStore

logger = logging.getLogger(__name__)

__all__ = ["SILENCE_TIMEOUT_SECONDS", "VoiceAssistant", "VoiceState"]

SILENCE_TIMEOUT_SECONDS = 2.0


class VoiceState(StrEnum):
    IDLE = "idle"
    LISTENING = "listening"
    PROCESSING = "processing"
    UNAVAILABLE = "unavailable"


class VoiceAssistant:
    """Drives one :class:`SpeechCapture` and applies recognized commands.

    All methods must be called from the event loop thread; capture
    implementations deliver their callbacks there too.
    """

    def __init__(
        self,
        store: ResumeStore,
        assistant: AIAssistant,
        capture: SpeechCapture | None,
        *,
        silence_timeout: float = SILENCE_TIMEOUT_SECONDS,
    ) -> None:
        self._store = store
        self._assistant = assistant
        self._capture = capture
        self._silence_timeout = silence_timeout
        self._silence_timer: asyncio.TimerHandle | None = None
        self._processing: asyncio.Task | None = None

        self.transcript = ""
        self.state = VoiceState.UNAVAILABLE if capture is None else VoiceState.IDLE
        if capture is not None:
            capture.bind(on_partial=self.on_partial, on_end=self.on_end, on_error=self.on_error)

    @property
    def available(self) -> bool:
        return self.state is not VoiceState.UNAVAILABLE

    # ------------------------------------------------------------------
    # User actions

    def start(self) -> bool:
        """Start listening.  Returns False when not idle or the capture refuses."""
        if self.state is not VoiceState.IDLE or self._capture is None:
            return False

        self.transcript = ""
        self.state = VoiceState.LISTENING
        try:
            self._capture.start()
        except SpeechCaptureError:
            logger.exception("Failed to start speech capture")
            self.state = VoiceState.IDLE
            return False
        return True

    def stop(self) -> None:
        """End the capture early; the transcript is processed as on silence."""
        if self.state is VoiceState.LISTENING and self._capture is not None:
            self._cancel_silence_timer()
            self._capture.stop()

    def close(self) -> None:
        """Tear down: abort capture, drop the silence timer and pending processing."""
        self._cancel_silence_timer()
        if self.state is VoiceState.LISTENING and self._capture is not None:
            self._capture.abort()
        if self._processing is not None and not self._processing.done():
            self._processing.cancel()
        self._processing = None
        self.transcript = ""
        if self.available:
            self.state = VoiceState.IDLE

    async def wait_until_idle(self) -> None:
        """Wait for an in-flight command to finish processing."""
        if self._processing is not None:
            await asyncio.gather(self._processing, return_exceptions=True)

    # ------------------------------------------------------------------
    # Capture callbacks

    def on_partial(self, text: str) -> None:
        if self.state is not VoiceState.LISTENING:
            return
        self.transcript = text
        self._cancel_silence_timer()
        loop = asyncio.get_running_loop()
        self._silence_timer = loop.call_later(self._silence_timeout, self._on_silence)

    def on_end(self) -> None:
        if self.state is not VoiceState.LISTENING:
            return
        self._cancel_silence_timer()

        transcript = self.transcript.strip()
        if not transcript:
            self.state = VoiceState.IDLE
            return

        self.state = VoiceState.PROCESSING
        self._processing = asyncio.get_running_loop().create_task(self._process(transcript))

    def on_error(self, message: str) -> None:
        logger.error("Speech recognition error: %s", message)
        if self.state is not VoiceState.LISTENING:
            return
        self._cancel_silence_timer()
        self.transcript = ""
        self.state = VoiceState.IDLE

    # ------------------------------------------------------------------

    def _on_silence(self) -> None:
        self._silence_timer = None
        if self.state is VoiceState.LISTENING and self._capture is not None:
            self._capture.stop()

    def _cancel_silence_timer(self) -> None:
        if self._silence_timer is not None:
            self._silence_timer.cancel()
            self._silence_timer = None

    async def _process(self, transcript: str) -> None:
        try:
            await process_transcript(self._store, self._assistant, transcript)
        except DocumentEditError:
            logger.exception("Failed to apply voice command %r", transcript)
        finally:
            self.transcript = ""
            self._processing = None
            if self.state is VoiceState.PROCESSING:
                self.state = VoiceState.IDLE
