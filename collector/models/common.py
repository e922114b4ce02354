"""Common types and helpers shared across models."""

from datetime import UTC, datetime
from typing import TypeAlias
from zoneinfo import ZoneInfo

JsonValue: TypeAlias = (
    str | int | float | bool | None | list["JsonValue"] | dict[str, "JsonValue"]
)
JsonObject: TypeAlias = dict[str, JsonValue]


def utc_now() -> datetime:
    return datetime.now(UTC)


def utc_now_iso() -> str:
    return utc_now().isoformat()


def local_date_iso(timezone: str, now: datetime | None = None) -> str:
    """Current date (YYYY-MM-DD) in the given IANA time zone."""
    if now is None:
        now = utc_now()
    return now.astimezone(ZoneInfo(timezone)).date().isoformat()


def local_time_display(timezone: str, now: datetime | None = None) -> str:
    """Human-readable local timestamp used in output metadata."""
    if now is None:
        now = utc_now()
    return now.astimezone(ZoneInfo(timezone)).strftime("%Y/%m/%d %H:%M:%S")
