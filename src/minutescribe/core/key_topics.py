"""Key topic extraction - named people, places and organizations.

Tagging is delegated to an ``EntityTagger``; the default one runs a spaCy
pipeline (``en_core_web_sm``). The extractor keeps person/place/organization
spans and deduplicates them in order of first appearance.
"""

from __future__ import annotations

import threading
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Iterator, List, Optional, Protocol, Tuple

import spacy
from loguru import logger


class EntityType(str, Enum):
    """Coarse entity categories used for key topics."""
    PERSON = "person"
    PLACE = "place"
    ORGANIZATION = "organization"
    OTHER = "other"


@dataclass(frozen=True)
class EntitySpan:
    """A tagged span of transcript text."""
    text: str  # Exact surface text
    label: EntityType
    start: int = 0  # Character offset in the tagged text


class EntityTagger(Protocol):
    """Anything that can tag free text into entity spans."""

    def tag(self, text: str) -> Iterable[EntitySpan]:
        ...


# spaCy (OntoNotes) labels -> entity categories
SPACY_LABELS = {
    "PERSON": EntityType.PERSON,
    "GPE": EntityType.PLACE,
    "LOC": EntityType.PLACE,
    "FAC": EntityType.PLACE,
    "ORG": EntityType.ORGANIZATION,
}


class SpacyEntityTagger:
    """Entity tagger backed by a spaCy pipeline, loaded on first use."""

    # Text is tagged in pieces below spaCy's default max_length (1,000,000)
    DEFAULT_CHUNK_SIZE = 100_000

    def __init__(self, model_name: str = "en_core_web_sm", chunk_size: int = DEFAULT_CHUNK_SIZE):
        self.model_name = model_name
        self.chunk_size = chunk_size
        self._nlp: Optional[spacy.language.Language] = None
        self._load_failed = False
        self._lock = threading.Lock()

    def is_loaded(self) -> bool:
        return self._nlp is not None

    def load(self) -> bool:
        """Load the spaCy pipeline.

        Returns:
            True if the pipeline is ready
        """
        with self._lock:
            if self._nlp is not None:
                return True
            if self._load_failed:
                return False

            try:
                self._nlp = spacy.load(self.model_name)
                logger.info(f"Loaded spaCy pipeline: {self.model_name}")
                return True
            except OSError as e:
                self._load_failed = True
                logger.warning(f"spaCy pipeline {self.model_name} unavailable: {e}")
                logger.info(f"  Install it with: python -m spacy download {self.model_name}")
                return False

    def _chunks(self, text: str) -> Iterator[Tuple[int, str]]:
        """Split text into (offset, chunk) pieces no longer than chunk_size.

        Chunks end after the last whitespace inside the limit when there is one.
        """
        offset = 0
        while offset < len(text):
            end = offset + self.chunk_size
            if end < len(text):
                cut = max(text.rfind(ch, offset, end) for ch in " \n\t")
                if cut > offset:
                    end = cut + 1
            yield offset, text[offset:end]
            offset = end

    def tag(self, text: str) -> List[EntitySpan]:
        if not self.load():
            return []

        chunks = list(self._chunks(text))
        if len(chunks) > 1:
            logger.info(f"Tagging {len(text)} characters in {len(chunks)} chunks")

        spans: List[EntitySpan] = []
        for offset, chunk in chunks:
            doc = self._nlp(chunk)
            spans.extend(
                EntitySpan(
                    text=ent.text,
                    label=SPACY_LABELS.get(ent.label_, EntityType.OTHER),
                    start=offset + ent.start_char,
                )
                for ent in doc.ents
            )
        return spans


class KeyTopicExtractor:
    """Collects distinct entity names in order of first appearance."""

    TOPIC_TYPES = frozenset({EntityType.PERSON, EntityType.PLACE, EntityType.ORGANIZATION})

    def __init__(self, tagger: Optional[EntityTagger] = None):
        self.tagger = tagger if tagger is not None else SpacyEntityTagger()

    @staticmethod
    def _has_content(text: str) -> bool:
        # Skip punctuation or whitespace-only spans
        return any(ch.isalnum() for ch in text)

    def extract(self, transcript: str) -> List[str]:
        if not transcript.strip():
            return []

        try:
            spans = sorted(self.tagger.tag(transcript), key=lambda span: span.start)
        except Exception as e:
            logger.warning(f"Entity tagging failed, no key topics extracted: {e}")
            return []

        topics: List[str] = []
        seen = set()
        for span in spans:
            if span.label not in self.TOPIC_TYPES or not self._has_content(span.text):
                continue
            if span.text not in seen:
                seen.add(span.text)
                topics.append(span.text)

        logger.debug(f"Extracted {len(topics)} key topics from {len(spans)} spans")
        return topics
