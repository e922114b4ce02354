"""Normalization of the two observed horoscope API response shapes.

Legacy:  {"code": "200", "msg": "...", "data": {<day fields>}}
New:     {"success": true, "code": 200, "message": "...",
          "data": {"day": {<day fields>}, "tomorrow": {<day fields>}}}

Both functions here are pure and never raise.
"""

from typing import Any

from collector.models.common import JsonObject
from collector.models.horoscope import (
    DayPreference,
    LegacyShape,
    NewShape,
    NormalizedResponse,
    RawShape,
)

SUCCESS_CODES = ("200", 200)
BLOCK_KEYS = ("day", "tomorrow")


def parse_shape(raw: Any) -> RawShape | None:
    """Classify a raw payload as LegacyShape, NewShape, or None if it is neither."""
    if not isinstance(raw, dict):
        return None
    code = raw.get("code")
    if isinstance(code, bool) or code not in SUCCESS_CODES:
        return None
    if not (raw.get("msg") or raw.get("message")):
        return None
    message = raw["msg"] if raw.get("msg") is not None else raw.get("message")

    data = raw.get("data")
    if not isinstance(data, dict):
        return None

    if not any(k in data for k in BLOCK_KEYS):
        return LegacyShape(code=str(code), message=str(message), data=data)

    if raw.get("success") is not True:
        return None
    day = _block(data, "day")
    tomorrow = _block(data, "tomorrow")
    if day is None and tomorrow is None:
        return None
    return NewShape(code=str(code), message=str(message), day=day, tomorrow=tomorrow)


def normalize_response(raw: Any, prefer: DayPreference) -> NormalizedResponse:
    """Reduce a raw payload to a single-day record.

    For the new shape the preferred block is used when present, otherwise
    whichever block exists.
    """
    shape = parse_shape(raw)

    if isinstance(shape, LegacyShape):
        return NormalizedResponse(
            ok=True,
            code=shape.code,
            message=shape.message,
            payload=shape.data,
            date=_date_of(shape.data),
        )

    if isinstance(shape, NewShape):
        preferred = shape.tomorrow if prefer == DayPreference.NEXTDAY else shape.day
        if preferred is not None:
            chosen = preferred
        elif shape.day is not None:
            chosen = shape.day
        else:
            chosen = shape.tomorrow
        return NormalizedResponse(
            ok=True,
            code=shape.code,
            message=shape.message,
            payload=chosen,
            date=_date_of(chosen),
        )

    return _failure(raw)


def _block(data: dict, key: str) -> JsonObject | None:
    value = data.get(key)
    return value if isinstance(value, dict) else None


def _date_of(payload: JsonObject | None) -> str | None:
    if not payload:
        return None
    value = payload.get("date")
    if value is None or value == "":
        return None
    return str(value)


def _failure(raw: Any) -> NormalizedResponse:
    code: Any = None
    message: Any = None
    if isinstance(raw, dict):
        code = raw.get("code")
        message = raw.get("msg")
        if message is None:
            message = raw.get("message")
    return NormalizedResponse(
        ok=False,
        code="" if code is None else str(code),
        message="" if message is None else str(message),
        payload=None,
        date=None,
    )
