"""Application setup - logging and service wiring"""

import sys
from pathlib import Path
from typing import Optional

from loguru import logger

from .core.config import AppConfig, ConfigManager
from .core.exporter import Exporter
from .core.key_topics import EntityTagger
from .core.minutes_builder import create_minutes_builder
from .core.minutes_controller import MinutesController
from .core.minutes_store import MinutesStore, SlotStorage


def setup_logging(level: str = "INFO") -> None:
    """Configure loguru logging"""
    logger.remove()  # Remove default handler
    logger.add(
        sys.stderr,
        format="<green>{time:HH:mm:ss}</green> | <level>{level: <8}</level> | <cyan>{name}</cyan>:<cyan>{function}</cyan> - <level>{message}</level>",
        level=level,
    )


class MinutesApp:
    """
    Owns the services for one process: config, store, controller and exporter.
    The store is loaded once at construction.
    """

    def __init__(
        self,
        config_manager: Optional[ConfigManager] = None,
        data_directory: Optional[Path] = None,
        tagger: Optional[EntityTagger] = None,
    ):
        self.config_manager = config_manager or ConfigManager()
        config: AppConfig = self.config_manager.config

        directory = data_directory or self.config_manager.get_data_directory()
        self.store = MinutesStore(SlotStorage(directory), key=config.store_key)
        self.store.load()

        self.controller = MinutesController(create_minutes_builder(config, tagger), self.store)
        self.exporter = Exporter()

        logger.info(f"Minutes app ready ({len(self.store)} saved minutes in {directory})")
