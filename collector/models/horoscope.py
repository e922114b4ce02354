"""Horoscope API shapes and result models."""

from dataclasses import dataclass, field
from enum import StrEnum

from collector.models.common import JsonObject


class DayPreference(StrEnum):
    TODAY = "today"
    NEXTDAY = "nextday"


@dataclass(frozen=True)
class LegacyShape:
    """`data` holds the single-day fields directly."""

    code: str
    message: str
    data: JsonObject


@dataclass(frozen=True)
class NewShape:
    """`data` holds nested `day` and/or `tomorrow` blocks."""

    code: str
    message: str
    day: JsonObject | None
    tomorrow: JsonObject | None


RawShape = LegacyShape | NewShape


@dataclass(frozen=True)
class NormalizedResponse:
    ok: bool
    code: str
    message: str
    payload: JsonObject | None
    date: str | None


@dataclass(frozen=True)
class FetchResult:
    sign: str
    display_name: str
    success: bool
    data: JsonObject | None
    code: str | None = None
    message: str | None = None
    error: str | None = None

    def to_dict(self) -> dict:
        out: dict = {
            "sign": self.sign,
            "displayName": self.display_name,
            "success": self.success,
        }
        if self.success:
            out["code"] = self.code
            out["message"] = self.message
            out["data"] = self.data
        else:
            out["data"] = None
            out["error"] = self.error
        return out


@dataclass
class HoroscopeOutput:
    updated: str
    update_time: str
    total_signs: int
    processing_time_ms: int
    converted_to_traditional: bool
    errors: list[str] = field(default_factory=list)
    horoscopes: dict[str, FetchResult] = field(default_factory=dict)

    @property
    def success_count(self) -> int:
        return sum(1 for r in self.horoscopes.values() if r.success)

    @property
    def failure_count(self) -> int:
        return self.total_signs - self.success_count

    def to_dict(self) -> dict:
        return {
            "updated": self.updated,
            "updateTime": self.update_time,
            "totalSigns": self.total_signs,
            "successCount": self.success_count,
            "failureCount": self.failure_count,
            "processingTimeMs": self.processing_time_ms,
            "convertedToTraditional": self.converted_to_traditional,
            "errors": self.errors,
            "horoscopes": {k: v.to_dict() for k, v in self.horoscopes.items()},
        }
