"""Shared fixtures."""

from datetime import datetime, timezone

import pytest

from minutescribe.core.key_topics import EntitySpan, EntityType, KeyTopicExtractor
from minutescribe.core.minutes_builder import MinutesBuilder
from minutescribe.core.minutes_store import MinutesStore, SlotStorage


class FakeTagger:
    """Tags every occurrence of a fixed set of names."""

    def __init__(self, names=None):
        self.names = names or {}
        self.calls = 0
        self.loaded = False

    def load(self):
        self.loaded = True
        return True

    def tag(self, text):
        self.calls += 1
        spans = []
        for name, label in self.names.items():
            start = text.find(name)
            while start != -1:
                spans.append(EntitySpan(text=name, label=label, start=start))
                start = text.find(name, start + 1)
        return spans


@pytest.fixture
def now():
    return datetime(2026, 10, 19, 15, 4, 5, 123456, tzinfo=timezone.utc)


@pytest.fixture
def fake_tagger():
    return FakeTagger(
        {
            "John Smith": EntityType.PERSON,
            "New York": EntityType.PLACE,
            "Acme Corp": EntityType.ORGANIZATION,
            "Tuesday": EntityType.OTHER,
        }
    )


@pytest.fixture
def builder(fake_tagger):
    return MinutesBuilder(key_topic_extractor=KeyTopicExtractor(fake_tagger))


@pytest.fixture
def storage(tmp_path):
    return SlotStorage(tmp_path / "data")


@pytest.fixture
def store(storage):
    return MinutesStore(storage)
