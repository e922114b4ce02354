"""Horoscope API client. One GET per call; retries live in the fetcher."""

import logging
from typing import Any

import httpx

from collector.config.schema import BROWSER_USER_AGENT, HOROSCOPE_BASE_URL
from collector.models.horoscope import DayPreference

logger = logging.getLogger(__name__)


class HoroscopeClient:
    def __init__(
        self,
        base_url: str = HOROSCOPE_BASE_URL,
        user_agent: str = BROWSER_USER_AGENT,
        timeout: float = 10.0,
    ):
        self.base_url = base_url
        self.user_agent = user_agent
        self.timeout = timeout

    def get_horoscope(self, sign: str, when: DayPreference = DayPreference.TODAY) -> Any:
        """Fetch the raw forecast payload for a sign.

        Raises httpx.HTTPStatusError on non-2xx, httpx.RequestError on
        network failure or timeout, ValueError on a non-JSON body.
        """
        params = {"type": sign, "time": when.value}
        headers = {"User-Agent": self.user_agent, "Accept": "application/json"}
        resp = httpx.get(
            self.base_url, params=params, headers=headers, timeout=self.timeout
        )
        resp.raise_for_status()
        logger.debug("Horoscope %s/%s -> %d", sign, when.value, resp.status_code)
        return resp.json()
