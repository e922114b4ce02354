"""Taiwan government holiday calendar models."""

from dataclasses import dataclass

# Column names used by the open-data calendar files.
RAW_DATE = "西元日期"
RAW_WEEKDAY = "星期"
RAW_IS_HOLIDAY = "是否放假"
RAW_DESCRIPTION = "備註"

HOLIDAY_FLAG = "2"


@dataclass(frozen=True)
class ProcessedHoliday:
    date: str
    week: str
    is_holiday: bool
    description: str

    def to_dict(self) -> dict:
        return {
            "date": self.date,
            "week": self.week,
            "isHoliday": self.is_holiday,
            "description": self.description,
        }
