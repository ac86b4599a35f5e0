import logging
from typing import Optional

logger = logging.getLogger(__name__)


class CaptureError(Exception):
    """Speech capture can't run (unsupported client, no microphone...)."""


class VoiceCapture:
    """
    Listening state around an external speech-to-text capture.
    Every way out of `listening` (result, error, end without result) clears it,
    so the UI can never get stuck waiting for audio.
    """

    def __init__(self, supported: bool = True):
        self.supported = supported
        self.listening = False

    def start(self) -> bool:
        if not self.supported:
            raise CaptureError("Speech recognition is not supported in this client.")
        if self.listening:
            return False
        self.listening = True
        return True

    def result(self, text: Optional[str]) -> Optional[str]:
        self.listening = False
        text = (text or "").strip()
        return text or None

    def end(self, error: Optional[str] = None) -> None:
        if error:
            logger.warning("Speech capture error: %s", error)
        self.listening = False
