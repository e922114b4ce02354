"""Per-sign horoscope fetch with date-mismatch fallback and bounded retries."""

import logging
import time

from collector.config.schema import SignConfig
from collector.ingest.horoscope_client import HoroscopeClient
from collector.ingest.horoscope_normalizer import normalize_response
from collector.models.common import local_date_iso
from collector.models.horoscope import DayPreference, FetchResult, NormalizedResponse
from collector.text.converter import ChineseConverter

logger = logging.getLogger(__name__)


class HoroscopeShapeError(Exception):
    """Raised when a response matches neither known shape or reports failure."""


class HoroscopeFetcher:
    def __init__(
        self,
        client: HoroscopeClient,
        converter: ChineseConverter,
        timezone: str = "Asia/Taipei",
        max_retries: int = 3,
        retry_delay_ms: int = 2000,
    ):
        self.client = client
        self.converter = converter
        self.timezone = timezone
        self.max_retries = max_retries
        self.retry_delay_ms = retry_delay_ms

    def fetch(self, sign: SignConfig, reference_date: str | None = None) -> FetchResult:
        """Fetch one sign. Never raises; exhausted retries give success=False.

        reference_date overrides "today" in the configured time zone.
        """
        last_error = ""
        for attempt in range(self.max_retries + 1):
            try:
                chosen = self._attempt(sign.key, reference_date)
                return FetchResult(
                    sign=sign.key,
                    display_name=sign.display_name,
                    success=True,
                    code=chosen.code,
                    message=self.converter.convert(chosen.message),
                    data=self.converter.convert_value(chosen.payload),
                )
            except Exception as e:
                last_error = str(e) or type(e).__name__
                if attempt < self.max_retries:
                    logger.warning(
                        "Horoscope %s failed, retrying in %dms (retry %d/%d): %s",
                        sign.key, self.retry_delay_ms, attempt + 1,
                        self.max_retries, last_error,
                    )
                    delay_s = self.retry_delay_ms / 1000.0
                    if delay_s > 0:
                        time.sleep(delay_s)

        logger.error(
            "Horoscope %s failed after %d attempts: %s",
            sign.key, self.max_retries + 1, last_error,
        )
        return FetchResult(
            sign=sign.key,
            display_name=sign.display_name,
            success=False,
            data=None,
            error=last_error,
        )

    def _attempt(self, sign_key: str, reference_date: str | None) -> NormalizedResponse:
        raw = self.client.get_horoscope(sign_key, DayPreference.TODAY)
        today = normalize_response(raw, DayPreference.TODAY)
        if not today.ok or today.payload is None:
            raise HoroscopeShapeError(
                f"API returned failure status (code={today.code!r})"
            )

        expected = reference_date or local_date_iso(self.timezone)
        if today.date is None or today.date == expected:
            return today

        logger.info(
            "Horoscope %s dated %s but today is %s, looking for next-day data",
            sign_key, today.date, expected,
        )

        # The new shape embeds both days; avoid a second request when it does.
        embedded = normalize_response(raw, DayPreference.NEXTDAY)
        if embedded.ok and embedded.payload is not None and embedded.date != today.date:
            return embedded

        next_raw = self.client.get_horoscope(sign_key, DayPreference.NEXTDAY)
        nextday = normalize_response(next_raw, DayPreference.NEXTDAY)
        if not nextday.ok or nextday.payload is None:
            raise HoroscopeShapeError(
                f"API nextday request failed (code={nextday.code!r})"
            )
        return nextday
