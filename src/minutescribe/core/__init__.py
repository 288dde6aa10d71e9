"""Core business logic"""

from .config import AppConfig, ConfigManager, get_config_dir, get_data_dir
from .models import MeetingMinutes, format_timestamp

# Text analysis
from .synthesizers import TitleSynthesizer, SummarySynthesizer
from .action_items import ActionItemExtractor, DEFAULT_ACTION_PHRASES
from .key_topics import KeyTopicExtractor, EntityTagger, EntitySpan, EntityType, SpacyEntityTagger
from .minutes_builder import MinutesBuilder, create_minutes_builder

# Persistence and export
from .minutes_store import MinutesStore, SlotStorage, STORE_SCHEMA_VERSION
from .exporter import Exporter, ExportFormat, ExportError
from .minutes_controller import MinutesController

__all__ = [
    "AppConfig",
    "ConfigManager",
    "get_config_dir",
    "get_data_dir",
    "MeetingMinutes",
    "format_timestamp",
    # Text analysis
    "TitleSynthesizer",
    "SummarySynthesizer",
    "ActionItemExtractor",
    "DEFAULT_ACTION_PHRASES",
    "KeyTopicExtractor",
    "EntityTagger",
    "EntitySpan",
    "EntityType",
    "SpacyEntityTagger",
    "MinutesBuilder",
    "create_minutes_builder",
    # Persistence and export
    "MinutesStore",
    "SlotStorage",
    "STORE_SCHEMA_VERSION",
    "Exporter",
    "ExportFormat",
    "ExportError",
    "MinutesController",
]
