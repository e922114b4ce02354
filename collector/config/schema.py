"""Pydantic v2 configuration schema with strict validation."""

from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from pydantic import BaseModel, Field, field_validator, model_validator

HOROSCOPE_BASE_URL = "http://api.suxun.site/api/constellation"
PLACES_BASE_URL = "https://places.googleapis.com/v1"
BROWSER_USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36"
)


def _reject_duplicate_keys(field: str, keys: list[str]) -> None:
    seen: set[str] = set()
    for key in keys:
        if key in seen:
            raise ValueError(f"duplicate key in {field}: {key!r}")
        seen.add(key)


class HttpConfig(BaseModel):
    model_config = {"extra": "forbid"}

    timeout_seconds: float = Field(default=10.0, gt=0.0)
    max_retries: int = Field(default=3, ge=0)
    retry_delay_ms: int = Field(default=2000, ge=0)
    request_delay_ms: int = Field(default=500, ge=0)
    user_agent: str = BROWSER_USER_AGENT


class SignConfig(BaseModel):
    model_config = {"extra": "forbid"}

    key: str
    display_name: str


class HoroscopeConfig(BaseModel):
    model_config = {"extra": "forbid"}

    base_url: str = HOROSCOPE_BASE_URL
    output_filename: str = "horoscope.json"
    signs: list[SignConfig] = []

    @model_validator(mode="after")
    def _unique_sign_keys(self) -> "HoroscopeConfig":
        _reject_duplicate_keys("signs", [s.key for s in self.signs])
        return self


class CopywritingSource(BaseModel):
    model_config = {"extra": "forbid"}

    key: str
    name: str
    url: str
    response_key: str
    filename: str


class CopywritingConfig(BaseModel):
    model_config = {"extra": "forbid"}

    target_count: int = Field(default=50, ge=1)
    max_request_multiplier: int = Field(default=3, ge=1)
    request_delay_ms: int = Field(default=1000, ge=0)
    progress_every: int = Field(default=25, ge=1)
    sources: list[CopywritingSource] = []

    @model_validator(mode="after")
    def _unique_source_keys(self) -> "CopywritingConfig":
        _reject_duplicate_keys("sources", [s.key for s in self.sources])
        return self


class CalendarConfig(BaseModel):
    model_config = {"extra": "forbid"}

    raw_dir: str = "data/tw-calendar/raw"
    processed_dir: str = "data/tw-calendar/processed"


class Coordinates(BaseModel):
    model_config = {"extra": "forbid"}

    lat: float = Field(ge=-90.0, le=90.0)
    lng: float = Field(ge=-180.0, le=180.0)


class PlacesConfig(BaseModel):
    model_config = {"extra": "forbid"}

    base_url: str = PLACES_BASE_URL
    api_key_env: str = "GOOGLE_MAPS_API_KEY"
    keyword: str = "牛肉麵"
    grid_size_km: float = Field(default=1.2, gt=0.0)
    max_result_count: int = Field(default=20, ge=1, le=20)
    language_code: str = "zh-TW"
    progress_every: int = Field(default=10, ge=1)
    northwest: Coordinates = Coordinates(lat=25.0955, lng=121.4436)
    southeast: Coordinates = Coordinates(lat=24.95, lng=121.6126)
    districts: list[str] = []
    output_filename: str = "taipei-beef-noodles.json"


class CollectorConfig(BaseModel):
    model_config = {"extra": "forbid"}

    output_dir: str = "data"
    timezone: str = "Asia/Taipei"
    transliterate: bool = True
    log_level: str = "INFO"
    http: HttpConfig = HttpConfig()
    horoscope: HoroscopeConfig = HoroscopeConfig()
    copywriting: CopywritingConfig = CopywritingConfig()
    calendar: CalendarConfig = CalendarConfig()
    places: PlacesConfig = PlacesConfig()

    @field_validator("timezone")
    @classmethod
    def _known_timezone(cls, value: str) -> str:
        try:
            ZoneInfo(value)
        except (ZoneInfoNotFoundError, ValueError) as e:
            raise ValueError(f"unknown time zone: {value!r}") from e
        return value
