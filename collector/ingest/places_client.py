"""Google Places API (New) Text Search client."""

import logging

import httpx

from collector.config.schema import PLACES_BASE_URL

logger = logging.getLogger(__name__)

FIELD_MASK = ",".join([
    "places.id",
    "places.displayName",
    "places.rating",
    "places.userRatingCount",
    "places.formattedAddress",
    "places.location",
])


class PlacesClientError(Exception):
    """Raised when the Places API returns an error."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


class PlacesClient:
    def __init__(
        self,
        api_key: str,
        base_url: str = PLACES_BASE_URL,
        timeout: float = 10.0,
        max_result_count: int = 20,
        language_code: str = "zh-TW",
    ):
        if not api_key:
            raise PlacesClientError("Places API key not set")
        self.api_key = api_key
        self.base_url = base_url
        self.timeout = timeout
        self.max_result_count = max_result_count
        self.language_code = language_code

    def _headers(self) -> dict[str, str]:
        return {
            "Content-Type": "application/json",
            "X-Goog-Api-Key": self.api_key,
            "X-Goog-FieldMask": FIELD_MASK,
        }

    def search_text(
        self, keyword: str, lat: float, lng: float, radius_m: float
    ) -> list[dict]:
        """Text search biased to a circle. Single page, no pagination."""
        url = f"{self.base_url}/places:searchText"
        body = {
            "textQuery": keyword,
            "locationBias": {
                "circle": {
                    "center": {"latitude": lat, "longitude": lng},
                    "radius": radius_m,
                },
            },
            "maxResultCount": self.max_result_count,
            "languageCode": self.language_code,
        }
        try:
            resp = httpx.post(url, headers=self._headers(), json=body, timeout=self.timeout)
        except httpx.RequestError as e:
            logger.error("Places request failed at (%.4f, %.4f): %s", lat, lng, e)
            raise PlacesClientError(f"Request failed: {e}") from e
        if resp.status_code >= 400:
            raise PlacesClientError(
                f"Places API search failed: HTTP {resp.status_code}: {resp.text}",
                resp.status_code,
            )
        data = resp.json()
        places = data.get("places") if isinstance(data, dict) else None
        return places or []
