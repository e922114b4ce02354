"""Tests for the Taiwan calendar conversion pipeline."""

import json
import shutil
from pathlib import Path

import pytest

from collector.config.schema import CalendarConfig, CollectorConfig
from collector.pipeline.calendar_pipeline import CalendarPipeline, convert_holiday


@pytest.fixture
def calendar_config(tmp_path: Path, fast_config: CollectorConfig) -> CollectorConfig:
    raw_dir = tmp_path / "raw"
    raw_dir.mkdir()
    return fast_config.model_copy(
        update={
            "calendar": CalendarConfig(
                raw_dir=str(raw_dir), processed_dir=str(tmp_path / "processed")
            )
        }
    )


class TestConvertHoliday:
    def test_holiday(self):
        row = {"西元日期": "20250101", "星期": "三", "是否放假": "2", "備註": "開國紀念日"}
        assert convert_holiday(row).to_dict() == {
            "date": "20250101",
            "week": "三",
            "isHoliday": True,
            "description": "開國紀念日",
        }

    def test_workday(self):
        row = {"西元日期": "20250102", "星期": "四", "是否放假": "0", "備註": ""}
        holiday = convert_holiday(row)
        assert holiday.is_holiday is False
        assert holiday.description == ""


class TestCalendarPipeline:
    def test_converts_files(self, calendar_config: CollectorConfig, fixtures_dir: Path):
        raw_dir = Path(calendar_config.calendar.raw_dir)
        shutil.copy(fixtures_dir / "calendar_raw_2025.json", raw_dir / "2025.json")

        converted = CalendarPipeline(calendar_config).run()

        assert converted == ["2025.json"]
        out = Path(calendar_config.calendar.processed_dir) / "2025.json"
        rows = json.loads(out.read_text(encoding="utf-8"))
        assert len(rows) == 3
        assert [r["isHoliday"] for r in rows] == [True, False, True]

    def test_bad_file_skipped(self, calendar_config: CollectorConfig, fixtures_dir: Path):
        raw_dir = Path(calendar_config.calendar.raw_dir)
        shutil.copy(fixtures_dir / "calendar_raw_2025.json", raw_dir / "2025.json")
        (raw_dir / "2024.json").write_text("{not json", encoding="utf-8")
        (raw_dir / "2023.json").write_text('[{"星期": "一"}]', encoding="utf-8")

        converted = CalendarPipeline(calendar_config).run()

        assert converted == ["2025.json"]
        assert not (Path(calendar_config.calendar.processed_dir) / "2024.json").exists()

    def test_no_files(self, calendar_config: CollectorConfig):
        assert CalendarPipeline(calendar_config).run() == []

    def test_missing_raw_dir(self, calendar_config: CollectorConfig, tmp_path: Path):
        config = calendar_config.model_copy(
            update={
                "calendar": CalendarConfig(
                    raw_dir=str(tmp_path / "nope"),
                    processed_dir=str(tmp_path / "processed"),
                )
            }
        )
        assert CalendarPipeline(config).run() == []
