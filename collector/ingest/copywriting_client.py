"""Copywriting snippet API client with retry."""

import logging
import time

import httpx

from collector.config.schema import BROWSER_USER_AGENT, CopywritingSource
from collector.text.converter import ChineseConverter

logger = logging.getLogger(__name__)


class CopywritingFormatError(Exception):
    """Raised when a snippet response lacks the configured text field."""


class CopywritingClient:
    def __init__(
        self,
        converter: ChineseConverter,
        user_agent: str = BROWSER_USER_AGENT,
        timeout: float = 10.0,
        max_retries: int = 3,
        retry_delay_ms: int = 2000,
    ):
        self.converter = converter
        self.user_agent = user_agent
        self.timeout = timeout
        self.max_retries = max_retries
        self.retry_delay_ms = retry_delay_ms

    def fetch_text(self, source: CopywritingSource) -> str | None:
        """Fetch one snippet, converted to traditional Chinese.

        Returns None once retries are exhausted.
        """
        headers = {"User-Agent": self.user_agent, "Accept": "application/json"}
        for attempt in range(self.max_retries + 1):
            try:
                resp = httpx.get(source.url, headers=headers, timeout=self.timeout)
                resp.raise_for_status()
                body = resp.json()
                text = body.get(source.response_key) if isinstance(body, dict) else None
                if not text:
                    raise CopywritingFormatError(
                        f"missing '{source.response_key}' in response"
                    )
                return self.converter.convert(str(text))
            except (httpx.HTTPError, ValueError, CopywritingFormatError) as e:
                if attempt < self.max_retries:
                    logger.debug(
                        "%s request failed, retrying (retry %d/%d): %s",
                        source.key, attempt + 1, self.max_retries, e,
                    )
                    delay_s = self.retry_delay_ms / 1000.0
                    if delay_s > 0:
                        time.sleep(delay_s)
                    continue
                logger.warning("%s request failed after retries: %s", source.key, e)
        return None
