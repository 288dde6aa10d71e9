"""Title and summary synthesis from transcript text"""

from datetime import datetime

from .models import format_timestamp


class TitleSynthesizer:
    """Derives a short title from the opening words of a transcript."""

    EMPTY_PREFIX = "Untitled Recording - "
    BLANK_PREFIX = "Recording - "
    ELLIPSIS = "..."

    def __init__(self, max_words: int = 10):
        self.max_words = max_words

    def synthesize(self, transcript: str, now: datetime) -> str:
        """Build a title for the transcript.

        Args:
            transcript: Full transcript text (may be empty)
            now: Creation time, used for the timestamp fallbacks

        Returns:
            First ``max_words`` words followed by ``...``, or a timestamped
            fallback when the transcript has no words
        """
        if not transcript:
            return self.EMPTY_PREFIX + format_timestamp(now)

        words = transcript.split()[: self.max_words]
        if not words:
            return self.BLANK_PREFIX + format_timestamp(now)

        return " ".join(words) + self.ELLIPSIS


class SummarySynthesizer:
    """Derives a summary from the transcript's leading characters."""

    NO_TRANSCRIPT = "No transcription available"
    NO_CONTENT = "No content"
    ELLIPSIS = "..."

    def __init__(self, max_chars: int = 100):
        self.max_chars = max_chars

    def synthesize(self, transcript: str) -> str:
        if not transcript:
            return self.NO_TRANSCRIPT

        prefix = transcript[: self.max_chars]
        if not prefix.strip():
            return self.NO_CONTENT

        return prefix + self.ELLIPSIS
