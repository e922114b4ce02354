"""Copywriting pipeline: collect unique snippets per source and save each."""

import logging
import time

from collector.config.schema import CollectorConfig, CopywritingSource
from collector.ingest.copywriting_client import CopywritingClient
from collector.models.common import local_time_display, utc_now
from collector.models.copywriting import CopywritingItem, CopywritingOutput, SourceResult
from collector.storage.json_store import read_json_file, write_json_file
from collector.text.converter import ChineseConverter

logger = logging.getLogger(__name__)


class CopywritingPipeline:
    def __init__(
        self,
        config: CollectorConfig,
        client: CopywritingClient | None = None,
        converter: ChineseConverter | None = None,
    ):
        self.config = config
        self.converter = converter or ChineseConverter(enabled=config.transliterate)
        self.client = client or CopywritingClient(
            self.converter,
            user_agent=config.http.user_agent,
            timeout=config.http.timeout_seconds,
            max_retries=config.http.max_retries,
            retry_delay_ms=config.http.retry_delay_ms,
        )

    def collect_unique(self, source: CopywritingSource) -> list[str]:
        """Request snippets until target_count unique ones or the request cap."""
        cfg = self.config.copywriting
        logger.info("Collecting %s", source.name)
        unique: dict[str, None] = {}
        max_requests = cfg.target_count * cfg.max_request_multiplier
        total_requests = 0

        while len(unique) < cfg.target_count and total_requests < max_requests:
            total_requests += 1
            text = self.client.fetch_text(source)
            if text:
                unique.setdefault(text, None)

            delay_s = cfg.request_delay_ms / 1000.0
            if delay_s > 0:
                time.sleep(delay_s)

            if total_requests % cfg.progress_every == 0:
                logger.info(
                    "%s progress: %d/%d after %d requests",
                    source.name, len(unique), cfg.target_count, total_requests,
                )

        logger.info("%s: %d/%d", source.name, len(unique), cfg.target_count)
        return list(unique)

    def save(self, source: CopywritingSource, texts: list[str]) -> CopywritingOutput:
        now = utc_now()
        added_at = now.isoformat()
        output = CopywritingOutput(
            type=source.name,
            updated=added_at,
            update_time=local_time_display(self.config.timezone, now),
            target_count=self.config.copywriting.target_count,
            converted_to_traditional=self.converter.available,
            copywritings=[
                CopywritingItem(id=i + 1, content=t, length=len(t), added_at=added_at)
                for i, t in enumerate(texts)
            ],
        )
        write_json_file(source.filename, output.to_dict(), self.config.output_dir)
        return output

    def run(self) -> dict[str, SourceResult]:
        start_time = time.monotonic()
        results: dict[str, SourceResult] = {}

        for source in self.config.copywriting.sources:
            try:
                texts = self.collect_unique(source)
                self.save(source, texts)
                results[source.key] = SourceResult(success=True, count=len(texts))
            except Exception:
                logger.exception("%s failed", source.name)
                results[source.key] = SourceResult(success=False, count=0)

        total = sum(r.count for r in results.values() if r.success)
        target = len(self.config.copywriting.sources) * self.config.copywriting.target_count
        logger.info(
            "Copywriting total: %d/%d in %.1fs",
            total, target, time.monotonic() - start_time,
        )
        if total > 0:
            self._log_samples()
        return results

    def _log_samples(self) -> None:
        for source in self.config.copywriting.sources:
            try:
                data = read_json_file(source.filename, self.config.output_dir)
            except (OSError, ValueError):
                continue
            items = data.get("copywritings", [])
            if items:
                logger.info("Sample %s: %s", source.name, items[0]["content"])
