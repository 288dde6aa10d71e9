"""Minutes export - Markdown and JSON renderings"""

import json
import re
from enum import Enum
from pathlib import Path

from loguru import logger

from .models import MeetingMinutes


class ExportFormat(str, Enum):
    """Supported export formats."""
    MARKDOWN = "markdown"
    JSON = "json"


class ExportError(Exception):
    """Raised when a record cannot be rendered or written."""


# File extension per format
EXTENSIONS = {
    ExportFormat.MARKDOWN: ".md",
    ExportFormat.JSON: ".json",
}


class Exporter:
    """Renders MeetingMinutes for sharing."""

    @staticmethod
    def _format(fmt) -> ExportFormat:
        try:
            return ExportFormat(fmt)
        except ValueError as e:
            raise ExportError(f"Unsupported export format: {fmt!r}") from e

    def to_markdown(self, record: MeetingMinutes) -> str:
        """Render minutes with the fixed Markdown template.

        User content is inserted verbatim, without escaping.
        """
        lines = [
            f"# {record.title}",
            "",
            f"**Date:** {record.formatted_date}",
            f"**Duration:** {record.duration_minutes} minutes",
            "",
            "## Summary",
            record.summary,
            "",
            "## Key Topics",
        ]
        lines.extend(f"- {topic}" for topic in record.key_topics)

        lines.extend(["", "## Action Items"])
        lines.extend(f"{index}. {item}" for index, item in enumerate(record.action_items, start=1))

        lines.extend(["", "## Full Transcription", record.transcript])
        return "\n".join(lines)

    def to_json(self, record: MeetingMinutes) -> bytes:
        """Render minutes as a pretty-printed JSON document (UTF-8).

        Raises:
            ExportError: if the record cannot be serialized
        """
        try:
            document = record.to_wire()
            document["date"] = record.created_at.strftime("%Y-%m-%dT%H:%M:%SZ")
            return json.dumps(document, indent=2, ensure_ascii=False).encode("utf-8")
        except (TypeError, ValueError) as e:
            raise ExportError(f"Cannot serialize minutes {record.id}: {e}") from e

    def render(self, record: MeetingMinutes, fmt: ExportFormat) -> bytes:
        """Render in the requested format as bytes."""
        fmt = self._format(fmt)
        if fmt is ExportFormat.MARKDOWN:
            return self.to_markdown(record).encode("utf-8")
        return self.to_json(record)

    def suggested_filename(self, record: MeetingMinutes, fmt: ExportFormat) -> str:
        """Filesystem-safe file name derived from the title"""
        stem = re.sub(r"[^\w\-]+", "_", record.title).strip("_")[:60] or "minutes"
        return stem + EXTENSIONS[self._format(fmt)]

    def export_to_file(self, record: MeetingMinutes, path: Path, fmt: ExportFormat) -> Path:
        """Render and write minutes to a file.

        Nothing is written unless rendering succeeds.

        Raises:
            ExportError: if rendering or writing fails
        """
        data = self.render(record, fmt)
        path = Path(path)

        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_bytes(data)
        except OSError as e:
            raise ExportError(f"Failed to write {path}: {e}") from e

        logger.info(f"Exported minutes to {path}")
        return path
