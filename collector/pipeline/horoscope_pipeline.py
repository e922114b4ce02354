"""Horoscope pipeline: fetch all signs sequentially and write one snapshot."""

import logging
import time
from pathlib import Path

from collector.config.schema import CollectorConfig
from collector.ingest.horoscope_client import HoroscopeClient
from collector.ingest.horoscope_fetcher import HoroscopeFetcher
from collector.models.common import local_time_display, utc_now, utc_now_iso
from collector.models.horoscope import FetchResult, HoroscopeOutput
from collector.storage.json_store import write_json_file
from collector.text.converter import ChineseConverter

logger = logging.getLogger(__name__)


class HoroscopePipeline:
    def __init__(
        self,
        config: CollectorConfig,
        client: HoroscopeClient | None = None,
        converter: ChineseConverter | None = None,
    ):
        self.config = config
        self.client = client or HoroscopeClient(
            base_url=config.horoscope.base_url,
            user_agent=config.http.user_agent,
            timeout=config.http.timeout_seconds,
        )
        self.converter = converter or ChineseConverter(enabled=config.transliterate)
        self.fetcher = HoroscopeFetcher(
            self.client,
            self.converter,
            timezone=config.timezone,
            max_retries=config.http.max_retries,
            retry_delay_ms=config.http.retry_delay_ms,
        )
        self.output_path: Path | None = None

    def run(self, reference_date: str | None = None) -> HoroscopeOutput:
        """Fetch every configured sign, then persist the aggregate snapshot."""
        logger.info("Fetching horoscopes for %d signs", len(self.config.horoscope.signs))
        start_time = time.monotonic()
        signs = self.config.horoscope.signs
        results: dict[str, FetchResult] = {}
        errors: list[str] = []

        for i, sign in enumerate(signs):
            try:
                result = self.fetcher.fetch(sign, reference_date=reference_date)
            except Exception as e:
                logger.exception("Unexpected error fetching %s", sign.key)
                result = FetchResult(
                    sign=sign.key,
                    display_name=sign.display_name,
                    success=False,
                    data=None,
                    error=str(e) or type(e).__name__,
                )
            results[sign.key] = result
            if not result.success:
                errors.append(f"{sign.display_name}: {result.error}")

            # Rate limiting
            delay_s = self.config.http.request_delay_ms / 1000.0
            if delay_s > 0 and i < len(signs) - 1:
                time.sleep(delay_s)

        now = utc_now()
        output = HoroscopeOutput(
            updated=utc_now_iso(),
            update_time=local_time_display(self.config.timezone, now),
            total_signs=len(signs),
            processing_time_ms=int((time.monotonic() - start_time) * 1000),
            converted_to_traditional=self.converter.available,
            errors=errors,
            horoscopes=results,
        )

        self.output_path = write_json_file(
            self.config.horoscope.output_filename,
            output.to_dict(),
            self.config.output_dir,
        )
        logger.info(
            "Horoscopes done: %d/%d succeeded, saved to %s",
            output.success_count, output.total_signs, self.output_path,
        )
        if output.success_count == 0:
            logger.error("All horoscope fetches failed")
        return output
