"""Tests for the Taipei beef noodle grid search pipeline."""

import json
from pathlib import Path
from unittest.mock import MagicMock

import pytest

from collector.config.defaults import TAIPEI_DISTRICTS
from collector.config.schema import CollectorConfig, Coordinates
from collector.ingest.places_client import PlacesClient, PlacesClientError
from collector.pipeline.beef_noodle_pipeline import (
    BeefNoodlePipeline,
    extract_district,
    grid_points,
    in_bounds,
)

FIXTURE_DIR = Path(__file__).parent.parent / "fixtures"


@pytest.fixture
def search_fixture() -> dict:
    with open(FIXTURE_DIR / "places_search.json", encoding="utf-8") as f:
        return json.load(f)


@pytest.fixture
def single_cell_config(fast_config: CollectorConfig) -> CollectorConfig:
    """A box wide enough for the fixture but covered by one grid point."""
    return fast_config.model_copy(
        update={
            "places": fast_config.places.model_copy(
                update={
                    "northwest": Coordinates(lat=25.1, lng=121.4),
                    "southeast": Coordinates(lat=24.9, lng=121.7),
                    "grid_size_km": 50.0,
                }
            )
        }
    )


class TestGridPoints:
    def test_starts_at_northwest(self):
        nw = Coordinates(lat=25.0955, lng=121.4436)
        se = Coordinates(lat=24.95, lng=121.6126)
        points = grid_points(nw, se, 1.2)
        assert points[0] == nw
        assert len(points) > 100
        assert all(se.lat <= p.lat <= nw.lat for p in points)
        assert all(nw.lng <= p.lng <= se.lng for p in points)

    def test_single_point(self):
        nw = Coordinates(lat=25.0, lng=121.0)
        se = Coordinates(lat=24.99, lng=121.01)
        assert grid_points(nw, se, 1.2) == [nw]


class TestHelpers:
    def test_in_bounds(self):
        nw = Coordinates(lat=25.1, lng=121.4)
        se = Coordinates(lat=24.9, lng=121.7)
        assert in_bounds({"location": {"latitude": 25.0, "longitude": 121.5}}, nw, se)
        assert not in_bounds({"location": {"latitude": 25.2, "longitude": 121.5}}, nw, se)
        assert not in_bounds({}, nw, se)

    def test_extract_district(self):
        assert extract_district("台北市信義區市府路1號", TAIPEI_DISTRICTS) == "信義區"
        assert extract_district("新北市板橋區", TAIPEI_DISTRICTS) is None


class TestBeefNoodlePipeline:
    def test_filters_and_writes(self, single_cell_config: CollectorConfig, search_fixture: dict):
        client = MagicMock(spec=PlacesClient)
        client.search_text.return_value = search_fixture["places"]

        output = BeefNoodlePipeline(single_cell_config, client).run()

        assert client.search_text.call_count == 1
        args = client.search_text.call_args.args
        assert args[0] == "牛肉麵"
        assert args[3] == 50.0 * 600
        # Banqiao has no Taipei district; Keelung is outside the box
        assert [s.id for s in output.shops] == ["place-daan", "place-zhongzheng"]
        assert output.district_stats == {"大安區": 1, "中正區": 1}
        assert output.shops[0].name == "永康牛肉麵"
        assert output.shops[1].rating is None

        path = Path(single_cell_config.output_dir) / "taipei-beef-noodles.json"
        data = json.loads(path.read_text(encoding="utf-8"))
        assert data["totalShops"] == 2
        assert data["searchArea"]["gridSizeKm"] == 50.0
        assert data["searchArea"]["northwest"] == {"lat": 25.1, "lng": 121.4}
        assert data["shops"][0]["userRatingCount"] == 15000
        assert data["shops"][0]["location"] == {"latitude": 25.033, "longitude": 121.529}

    def test_dedupes_across_points(self, fast_config: CollectorConfig, search_fixture: dict):
        config = fast_config.model_copy(
            update={
                "places": fast_config.places.model_copy(
                    update={
                        "northwest": Coordinates(lat=25.1, lng=121.4),
                        "southeast": Coordinates(lat=24.9, lng=121.7),
                        "grid_size_km": 10.0,
                    }
                )
            }
        )
        client = MagicMock(spec=PlacesClient)
        client.search_text.return_value = search_fixture["places"]

        output = BeefNoodlePipeline(config, client).run()

        assert client.search_text.call_count > 1
        assert len(output.shops) == 2

    def test_point_errors_recorded(self, single_cell_config: CollectorConfig):
        client = MagicMock(spec=PlacesClient)
        client.search_text.side_effect = PlacesClientError("quota", 429)

        output = BeefNoodlePipeline(single_cell_config, client).run()

        assert output.shops == []
        assert len(output.errors) == 1
        assert "quota" in output.errors[0]
