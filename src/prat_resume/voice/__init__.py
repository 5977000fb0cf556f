"""Voice commands: capture state machine, intents and their application."""

from prat_resume.voice.assistant import VoiceAssistant, VoiceState
from prat_resume.voice.capture import SpeechCapture, SpeechCaptureError
from prat_resume.voice.commands import apply_intent, process_transcript
from prat_resume.voice.intents import VoiceIntent, parse_intent

__all__ = [
    "SpeechCapture",
    "SpeechCaptureError",
    "VoiceAssistant",
    "VoiceIntent",
    "VoiceState",
    "apply_intent",
    "parse_intent",
    "process_transcript",
]
