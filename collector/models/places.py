"""Google Places models for the beef noodle shop collector."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class PlaceLocation:
    latitude: float
    longitude: float


@dataclass(frozen=True)
class BeefNoodleShop:
    id: str
    name: str
    formatted_address: str
    location: PlaceLocation
    rating: float | None = None
    user_rating_count: int | None = None
    district: str | None = None

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "rating": self.rating,
            "userRatingCount": self.user_rating_count,
            "formattedAddress": self.formatted_address,
            "location": {
                "latitude": self.location.latitude,
                "longitude": self.location.longitude,
            },
            "district": self.district,
        }


@dataclass
class BeefNoodleOutput:
    updated: str
    update_time: str
    processing_time_ms: int
    search_area: dict
    district_stats: dict[str, int] = field(default_factory=dict)
    errors: list[str] = field(default_factory=list)
    shops: list[BeefNoodleShop] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "updated": self.updated,
            "updateTime": self.update_time,
            "totalShops": len(self.shops),
            "processingTimeMs": self.processing_time_ms,
            "searchArea": self.search_area,
            "districtStats": self.district_stats,
            "errors": self.errors,
            "shops": [s.to_dict() for s in self.shops],
        }
