"""Action item extraction - flags sentences with commitment language"""

import re
from typing import Iterable, List, Optional

# Phrases signalling an obligation or commitment, checked in order
DEFAULT_ACTION_PHRASES = (
    "need to",
    "will",
    "should",
    "must",
    "have to",
    "going to",
)

SENTENCE_DELIMITERS = re.compile(r"[.!?]")


class ActionItemExtractor:
    """Splits a transcript into sentences and keeps the ones with action phrases."""

    def __init__(self, phrases: Optional[Iterable[str]] = None):
        if phrases is None:
            phrases = DEFAULT_ACTION_PHRASES
        self.phrases = tuple(p.lower() for p in phrases)

    def split_sentences(self, transcript: str) -> List[str]:
        """Split on ``.``, ``!`` and ``?``; delimiters are dropped."""
        return SENTENCE_DELIMITERS.split(transcript)

    def is_action(self, sentence: str) -> bool:
        lowered = sentence.lower()
        return any(phrase in lowered for phrase in self.phrases)

    def extract(self, transcript: str) -> List[str]:
        """Return trimmed action sentences in order of occurrence.

        Duplicated sentences are kept.
        """
        if not transcript:
            return []

        return [
            sentence.strip()
            for sentence in self.split_sentences(transcript)
            if self.is_action(sentence)
        ]
