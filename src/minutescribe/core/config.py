"""Application configuration management"""

import json
import sys
from pathlib import Path
from typing import List, Optional
from pydantic import BaseModel, Field
from loguru import logger

from .action_items import DEFAULT_ACTION_PHRASES


class AppConfig(BaseModel):
    """Application configuration"""

    # Directory holding the persisted minutes slot (None = platform default)
    data_directory: Optional[str] = None

    # Key of the slot holding all saved minutes
    store_key: str = "SavedMinutes"

    # Text analysis settings
    title_max_words: int = Field(default=10, ge=1)
    summary_max_chars: int = Field(default=100, ge=1)
    action_phrases: List[str] = Field(default_factory=lambda: list(DEFAULT_ACTION_PHRASES))

    # spaCy pipeline used for key topic tagging
    entity_model: str = "en_core_web_sm"

    # Logging
    log_level: str = "INFO"


def get_config_dir() -> Path:
    """Get the application config directory"""
    if sys.platform == "win32":
        config_dir = Path.home() / "AppData" / "Local" / "MinuteScribe"
    elif sys.platform == "darwin":
        config_dir = Path.home() / "Library" / "Application Support" / "MinuteScribe"
    else:
        config_dir = Path.home() / ".config" / "MinuteScribe"

    config_dir.mkdir(parents=True, exist_ok=True)
    return config_dir


def get_data_dir() -> Path:
    """Get the directory where saved minutes live"""
    if sys.platform in ("win32", "darwin"):
        return get_config_dir()

    data_dir = Path.home() / ".local" / "share" / "MinuteScribe"
    data_dir.mkdir(parents=True, exist_ok=True)
    return data_dir


def get_config_path() -> Path:
    """Get the config file path"""
    return get_config_dir() / "config.json"


class ConfigManager:
    """Loads and saves the application config"""

    def __init__(self, config_path: Optional[Path] = None):
        self._config_path = config_path or get_config_path()
        self._config = self._load_config()

    def _load_config(self) -> AppConfig:
        """Load config from file or create default"""
        config_path = self._config_path

        if config_path.exists():
            try:
                with open(config_path, "r", encoding="utf-8") as f:
                    data = json.load(f)
                logger.info(f"Loaded config from {config_path}")
                return AppConfig(**data)
            except Exception as e:
                logger.warning(f"Failed to load config: {e}, using defaults")
                return AppConfig()
        else:
            logger.info("No config file found, using defaults")
            return AppConfig()

    def save(self):
        """Save config to file"""
        config_path = self._config_path

        try:
            config_path.parent.mkdir(parents=True, exist_ok=True)
            with open(config_path, "w", encoding="utf-8") as f:
                json.dump(self._config.model_dump(), f, indent=2)
            logger.info(f"Saved config to {config_path}")
        except Exception as e:
            logger.error(f"Failed to save config: {e}")

    @property
    def config(self) -> AppConfig:
        """Get the current config"""
        return self._config

    @property
    def config_path(self) -> Path:
        return self._config_path

    def set_data_directory(self, path: str):
        """Set the directory for saved minutes"""
        self._config.data_directory = path
        self.save()

    def get_data_directory(self) -> Path:
        """Get the configured data directory, falling back to the platform default"""
        if self._config.data_directory:
            return Path(self._config.data_directory)
        return get_data_dir()
