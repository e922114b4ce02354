"""Beef noodle pipeline: grid search Taipei City via Google Places."""

import logging
import math
import time

from collector.config.schema import CollectorConfig, Coordinates
from collector.ingest.places_client import PlacesClient, PlacesClientError
from collector.models.common import local_time_display, utc_now
from collector.models.places import BeefNoodleOutput, BeefNoodleShop, PlaceLocation
from collector.storage.json_store import write_json_file

logger = logging.getLogger(__name__)

KM_PER_DEGREE_LAT = 111.0
# Search radius in metres per km of grid cell; overlaps neighbouring cells.
RADIUS_M_PER_GRID_KM = 600


def grid_points(
    nw: Coordinates, se: Coordinates, grid_size_km: float
) -> list[Coordinates]:
    """Grid covering the box from the north-west corner to the south-east."""
    lat_step = grid_size_km / KM_PER_DEGREE_LAT
    mid_lat = math.radians((nw.lat + se.lat) / 2)
    lng_step = grid_size_km / (KM_PER_DEGREE_LAT * math.cos(mid_lat))

    points: list[Coordinates] = []
    lat = nw.lat
    while lat >= se.lat:
        lng = nw.lng
        while lng <= se.lng:
            points.append(Coordinates(lat=lat, lng=lng))
            lng += lng_step
        lat -= lat_step
    return points


def in_bounds(place: dict, nw: Coordinates, se: Coordinates) -> bool:
    loc = place.get("location") or {}
    lat = loc.get("latitude")
    lng = loc.get("longitude")
    if lat is None or lng is None:
        return False
    return se.lat <= lat <= nw.lat and nw.lng <= lng <= se.lng


def extract_district(address: str, districts: list[str]) -> str | None:
    for district in districts:
        if district in address:
            return district
    return None


def to_shop(place: dict, districts: list[str]) -> BeefNoodleShop:
    display = place.get("displayName") or {}
    address = place.get("formattedAddress", "")
    loc = place["location"]
    return BeefNoodleShop(
        id=place["id"],
        name=display.get("text", ""),
        formatted_address=address,
        location=PlaceLocation(latitude=loc["latitude"], longitude=loc["longitude"]),
        rating=place.get("rating"),
        user_rating_count=place.get("userRatingCount"),
        district=extract_district(address, districts),
    )


class BeefNoodlePipeline:
    def __init__(self, config: CollectorConfig, client: PlacesClient):
        self.config = config
        self.client = client

    def search(self, errors: list[str]) -> list[BeefNoodleShop]:
        cfg = self.config.places
        points = grid_points(cfg.northwest, cfg.southeast, cfg.grid_size_km)
        radius_m = cfg.grid_size_km * RADIUS_M_PER_GRID_KM
        found: dict[str, BeefNoodleShop] = {}
        logger.info("Searching %d grid points for %s", len(points), cfg.keyword)

        for i, point in enumerate(points):
            try:
                places = self.client.search_text(cfg.keyword, point.lat, point.lng, radius_m)
                for place in places:
                    if "id" not in place or not in_bounds(place, cfg.northwest, cfg.southeast):
                        continue
                    found[place["id"]] = to_shop(place, cfg.districts)
            except (PlacesClientError, ValueError, KeyError, TypeError) as e:
                logger.error("Grid point %d (%.4f, %.4f) failed: %s", i + 1, point.lat, point.lng, e)
                errors.append(f"grid point {i + 1}: {e}")

            if (i + 1) % cfg.progress_every == 0:
                logger.info(
                    "Completed %d/%d grid points, %d shops so far",
                    i + 1, len(points), len(found),
                )

        logger.info("Search complete, %d shops inside the box", len(found))
        return [s for s in found.values() if s.district is not None]

    def run(self) -> BeefNoodleOutput:
        cfg = self.config.places
        start_time = time.monotonic()
        errors: list[str] = []
        shops = self.search(errors)

        stats: dict[str, int] = {}
        for shop in shops:
            stats[shop.district] = stats.get(shop.district, 0) + 1

        now = utc_now()
        output = BeefNoodleOutput(
            updated=now.isoformat(),
            update_time=local_time_display(self.config.timezone, now),
            processing_time_ms=int((time.monotonic() - start_time) * 1000),
            search_area={
                "northwest": cfg.northwest.model_dump(),
                "southeast": cfg.southeast.model_dump(),
                "gridSizeKm": cfg.grid_size_km,
            },
            district_stats=stats,
            errors=errors,
            shops=shops,
        )
        path = write_json_file(cfg.output_filename, output.to_dict(), self.config.output_dir)
        logger.info("Saved %d shops to %s", len(shops), path)
        for district, count in sorted(stats.items(), key=lambda kv: -kv[1]):
            logger.info("  %s: %d", district, count)
        return output
