"""Calendar pipeline: convert raw Taiwan holiday files to the app format."""

import logging
from pathlib import Path

from collector.config.schema import CollectorConfig
from collector.models.calendar import (
    HOLIDAY_FLAG,
    RAW_DATE,
    RAW_DESCRIPTION,
    RAW_IS_HOLIDAY,
    RAW_WEEKDAY,
    ProcessedHoliday,
)
from collector.storage.json_store import ensure_directory, read_json_file, write_json_file

logger = logging.getLogger(__name__)


def convert_holiday(raw: dict) -> ProcessedHoliday:
    return ProcessedHoliday(
        date=str(raw[RAW_DATE]),
        week=str(raw[RAW_WEEKDAY]),
        is_holiday=str(raw[RAW_IS_HOLIDAY]) == HOLIDAY_FLAG,
        description=str(raw.get(RAW_DESCRIPTION) or ""),
    )


class CalendarPipeline:
    def __init__(self, config: CollectorConfig):
        self.raw_dir = Path(config.calendar.raw_dir)
        self.processed_dir = Path(config.calendar.processed_dir)

    def process_file(self, filename: str) -> bool:
        try:
            rows = read_json_file(filename, self.raw_dir)
            if not isinstance(rows, list):
                raise ValueError("expected a list of holiday rows")
            processed = [convert_holiday(r).to_dict() for r in rows]
            write_json_file(filename, processed, self.processed_dir)
        except (OSError, ValueError, KeyError, TypeError, AttributeError) as e:
            logger.error("Failed to convert %s: %s", filename, e)
            return False
        logger.info("Converted %s (%d rows)", filename, len(processed))
        return True

    def run(self) -> list[str]:
        """Convert every raw JSON file. Returns the names that succeeded."""
        if not self.raw_dir.is_dir():
            logger.error("Raw calendar directory %s does not exist", self.raw_dir)
            return []
        files = sorted(p.name for p in self.raw_dir.glob("*.json"))
        if not files:
            logger.error("No JSON files found in %s", self.raw_dir)
            return []

        ensure_directory(self.processed_dir)
        converted = [f for f in files if self.process_file(f)]
        logger.info("Converted %d/%d calendar files", len(converted), len(files))
        return converted
