"""Persisted, newest-first collection of meeting minutes"""

import json
import os
import tempfile
from pathlib import Path
from typing import Iterator, List, Optional, Tuple, Union
from uuid import UUID

from loguru import logger

from .models import MeetingMinutes

# Version of the envelope written to the minutes slot.
# Version 0 is the legacy layout: a bare JSON array of records.
STORE_SCHEMA_VERSION = 1


class SlotStorage:
    """
    Local key-value persistence: one file per key inside a directory.
    Values are raw bytes.
    """

    def __init__(self, directory: Path):
        self.directory = Path(directory)

    def path_for(self, key: str) -> Path:
        return self.directory / f"{key}.json"

    def read(self, key: str) -> Optional[bytes]:
        """Read a slot; None if it was never written."""
        path = self.path_for(key)
        if not path.exists():
            return None
        return path.read_bytes()

    def write(self, key: str, data: bytes):
        """Replace a slot's contents atomically."""
        self.directory.mkdir(parents=True, exist_ok=True)
        path = self.path_for(key)

        fd, tmp_name = tempfile.mkstemp(dir=self.directory, prefix=f".{key}.", suffix=".tmp")
        try:
            with os.fdopen(fd, "wb") as f:
                f.write(data)
            os.replace(tmp_name, path)
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise


def encode_minutes(minutes: List[MeetingMinutes]) -> bytes:
    """Serialize records into the versioned slot envelope."""
    document = {
        "schema_version": STORE_SCHEMA_VERSION,
        "minutes": [m.to_wire() for m in minutes],
    }
    return json.dumps(document, indent=2, ensure_ascii=False).encode("utf-8")


def decode_minutes(data: bytes) -> List[MeetingMinutes]:
    """Parse a slot's bytes; raises ValueError on unreadable content."""
    document = json.loads(data)

    if isinstance(document, list):
        records = document
    elif isinstance(document, dict):
        version = document.get("schema_version")
        if version != STORE_SCHEMA_VERSION:
            raise ValueError(f"Unsupported minutes schema version: {version!r}")
        records = document.get("minutes")
        if not isinstance(records, list):
            raise ValueError("Minutes envelope has no record list")
    else:
        raise ValueError(f"Unexpected minutes document type: {type(document).__name__}")

    return [MeetingMinutes.from_wire(record) for record in records]


class MinutesStore:
    """
    Ordered collection of saved minutes, newest first.

    Persistence is best effort: read and write failures are logged and the
    in-memory list stays authoritative. Not safe for concurrent writers.
    """

    DEFAULT_KEY = "SavedMinutes"

    def __init__(self, storage: SlotStorage, key: str = DEFAULT_KEY):
        self._storage = storage
        self._key = key
        self._minutes: List[MeetingMinutes] = []

    @property
    def key(self) -> str:
        return self._key

    @property
    def minutes(self) -> Tuple[MeetingMinutes, ...]:
        """Snapshot of the current records, newest first"""
        return tuple(self._minutes)

    def __len__(self) -> int:
        return len(self._minutes)

    def __iter__(self) -> Iterator[MeetingMinutes]:
        return iter(self.minutes)

    def load(self) -> List[MeetingMinutes]:
        """Load the persisted records, replacing the in-memory list.

        Missing or unreadable data yields an empty list.
        """
        try:
            data = self._storage.read(self._key)
        except Exception as e:
            logger.warning(f"Failed to read saved minutes: {e}")
            data = None

        if data is None:
            logger.info("No saved minutes found")
            self._minutes = []
            return []

        try:
            self._minutes = decode_minutes(data)
            logger.info(f"Loaded {len(self._minutes)} saved minutes")
        except Exception as e:
            logger.warning(f"Discarding unreadable saved minutes: {e}")
            self._minutes = []

        return list(self._minutes)

    def add(self, record: MeetingMinutes) -> bool:
        """Prepend a record and persist the full list.

        Returns:
            True if the list was written to storage
        """
        self._minutes.insert(0, record)
        return self._save()

    def get(self, minutes_id: Union[UUID, str]) -> Optional[MeetingMinutes]:
        """Find a record by id"""
        if isinstance(minutes_id, str):
            try:
                minutes_id = UUID(minutes_id)
            except ValueError:
                return None

        for record in self._minutes:
            if record.id == minutes_id:
                return record
        return None

    def _save(self) -> bool:
        try:
            self._storage.write(self._key, encode_minutes(self._minutes))
            logger.debug(f"Saved {len(self._minutes)} minutes to slot {self._key}")
            return True
        except Exception as e:
            logger.error(f"Failed to save minutes: {e}")
            return False
