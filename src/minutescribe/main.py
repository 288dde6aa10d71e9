"""Application entry point"""

import sys
from pathlib import Path
from typing import List, Optional

from loguru import logger

from .app import MinutesApp, setup_logging
from .core.config import ConfigManager

USAGE = "usage: minutescribe TRANSCRIPT_FILE [DURATION_SECONDS]"


def main(argv: Optional[List[str]] = None) -> int:
    """Build minutes for a transcript file and print them as Markdown"""
    if argv is None:
        argv = sys.argv[1:]

    if not 1 <= len(argv) <= 2:
        print(USAGE, file=sys.stderr)
        return 1

    config_manager = ConfigManager()
    setup_logging(config_manager.config.log_level)

    try:
        transcript = Path(argv[0]).read_text(encoding="utf-8")
        duration = float(argv[1]) if len(argv) == 2 else 0.0
    except (OSError, ValueError) as e:
        logger.error(f"Cannot read input: {e}")
        return 1

    try:
        app = MinutesApp(config_manager)
        minutes = app.controller.handle_transcript(transcript, duration)
        print(app.exporter.to_markdown(minutes))
        return 0

    except Exception as e:
        logger.exception(f"Application error: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
