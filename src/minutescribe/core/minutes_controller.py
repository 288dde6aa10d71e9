"""Minutes controller - turns finished recordings into saved minutes.

The capture/recognition side calls one of the ``handle_*`` methods once per
recording; the controller builds the minutes, stores them and hands the record
to the registered callback.
"""

from datetime import datetime
from typing import Callable, Optional

from loguru import logger

from .minutes_builder import MinutesBuilder
from .minutes_store import MinutesStore
from .models import MeetingMinutes, utc_now


class MinutesController:
    """Coordinates the builder and the store for recording sessions."""

    RECOGNIZER_UNAVAILABLE_TEXT = "Test recording - speech recognition not available"
    TRANSCRIPTION_FAILED_TEXT = "Recording completed but transcription failed: {error}"

    def __init__(
        self,
        builder: MinutesBuilder,
        store: MinutesStore,
        clock: Optional[Callable[[], datetime]] = None,
    ):
        self._builder = builder
        self._store = store
        self._clock = clock or utc_now

        self._on_minutes_callback: Optional[Callable[[MeetingMinutes], None]] = None

    @property
    def store(self) -> MinutesStore:
        return self._store

    def set_on_minutes_callback(self, callback: Callable[[MeetingMinutes], None]):
        """Set callback for when new minutes have been saved"""
        self._on_minutes_callback = callback

    def warm_up(self) -> bool:
        """Get the entity tagger ready before the first transcript arrives"""
        ready = self._builder.warm_up()
        if not ready:
            logger.warning("Entity tagger not ready, key topics will be empty")
        return ready

    def handle_transcript(self, transcript: str, duration_seconds: float) -> MeetingMinutes:
        """Handle a finished transcript from the recognizer"""
        minutes = self._builder.build(transcript, duration_seconds, self._clock())

        if not self._store.add(minutes):
            logger.warning(f"Minutes {minutes.id} kept in memory only")

        if self._on_minutes_callback:
            self._on_minutes_callback(minutes)

        return minutes

    def handle_transcription_failed(self, error_message: str, duration_seconds: float) -> MeetingMinutes:
        """Handle a recognition error; the minutes record the failure"""
        logger.error(f"Transcription failed: {error_message}")
        text = self.TRANSCRIPTION_FAILED_TEXT.format(error=error_message)
        return self.handle_transcript(text, duration_seconds)

    def handle_recognizer_unavailable(self, duration_seconds: float) -> MeetingMinutes:
        """Handle a recording made while no recognizer was available"""
        logger.warning("Speech recognizer not available")
        return self.handle_transcript(self.RECOGNIZER_UNAVAILABLE_TEXT, duration_seconds)
