"""Minutes builder - assembles a MeetingMinutes record from a transcript"""

import math
from datetime import datetime
from typing import Optional

from loguru import logger

from .action_items import ActionItemExtractor
from .config import AppConfig
from .key_topics import EntityTagger, KeyTopicExtractor, SpacyEntityTagger
from .models import MeetingMinutes, utc_now
from .synthesizers import SummarySynthesizer, TitleSynthesizer


def duration_to_minutes(duration_seconds: float) -> int:
    """Whole minutes in a duration; negative or non-finite input gives 0."""
    if not math.isfinite(duration_seconds) or duration_seconds <= 0:
        return 0
    return int(duration_seconds // 60)


class MinutesBuilder:
    """
    Runs the title, summary, action item and key topic extractors
    over one transcript and packs the results into a MeetingMinutes.
    """

    def __init__(
        self,
        title_synthesizer: Optional[TitleSynthesizer] = None,
        summary_synthesizer: Optional[SummarySynthesizer] = None,
        action_item_extractor: Optional[ActionItemExtractor] = None,
        key_topic_extractor: Optional[KeyTopicExtractor] = None,
    ):
        self.title_synthesizer = title_synthesizer or TitleSynthesizer()
        self.summary_synthesizer = summary_synthesizer or SummarySynthesizer()
        self.action_item_extractor = action_item_extractor or ActionItemExtractor()
        self.key_topic_extractor = key_topic_extractor or KeyTopicExtractor()

    def warm_up(self) -> bool:
        """Load the entity tagger ahead of the first build, if it supports it."""
        load = getattr(self.key_topic_extractor.tagger, "load", None)
        if load is None:
            return True
        return load()

    def build(
        self,
        transcript: str,
        duration_seconds: float,
        now: Optional[datetime] = None,
    ) -> MeetingMinutes:
        """Build minutes for a finished transcript.

        Args:
            transcript: Recognized text (may be empty)
            duration_seconds: Elapsed recording time
            now: Creation time (defaults to the current UTC time)

        Returns:
            A new MeetingMinutes with a fresh id
        """
        if now is None:
            now = utc_now()

        minutes = MeetingMinutes(
            title=self.title_synthesizer.synthesize(transcript, now),
            created_at=now,
            duration_minutes=duration_to_minutes(duration_seconds),
            transcript=transcript,
            summary=self.summary_synthesizer.synthesize(transcript),
            action_items=self.action_item_extractor.extract(transcript),
            key_topics=self.key_topic_extractor.extract(transcript),
        )

        logger.info(
            f"Built minutes '{minutes.title}': {len(minutes.action_items)} action items, "
            f"{len(minutes.key_topics)} key topics, {minutes.duration_minutes} min"
        )
        return minutes


def create_minutes_builder(
    config: Optional[AppConfig] = None,
    tagger: Optional[EntityTagger] = None,
) -> MinutesBuilder:
    """Create a builder configured from AppConfig."""
    config = config or AppConfig()
    return MinutesBuilder(
        title_synthesizer=TitleSynthesizer(max_words=config.title_max_words),
        summary_synthesizer=SummarySynthesizer(max_chars=config.summary_max_chars),
        action_item_extractor=ActionItemExtractor(config.action_phrases),
        key_topic_extractor=KeyTopicExtractor(
            tagger if tagger is not None else SpacyEntityTagger(config.entity_model)
        ),
    )
