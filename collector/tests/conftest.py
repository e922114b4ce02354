"""Shared test fixtures."""

from pathlib import Path

import pytest
import yaml

from collector.config.loader import load_config
from collector.config.schema import CollectorConfig
from collector.text.converter import ChineseConverter

FIXTURE_DIR = Path(__file__).parent / "fixtures"


@pytest.fixture
def fixtures_dir() -> Path:
    """Return the path to the test fixtures directory."""
    return FIXTURE_DIR


@pytest.fixture
def fast_config(tmp_path: Path) -> CollectorConfig:
    """Default config with no delays, no conversion, output under tmp_path."""
    config = load_config(None)
    return config.model_copy(
        update={
            "output_dir": str(tmp_path / "data"),
            "transliterate": False,
            "http": config.http.model_copy(
                update={"retry_delay_ms": 0, "request_delay_ms": 0}
            ),
            "copywriting": config.copywriting.model_copy(
                update={"request_delay_ms": 0}
            ),
        }
    )


@pytest.fixture
def passthrough() -> ChineseConverter:
    return ChineseConverter(enabled=False)


@pytest.fixture
def config_yaml_path(tmp_path: Path) -> Path:
    """Write a minimal valid config YAML and return its path."""
    data = {
        "output_dir": str(tmp_path / "out"),
        "http": {"max_retries": 1, "retry_delay_ms": 0, "request_delay_ms": 0},
        "horoscope": {"output_filename": "h.json"},
    }
    path = tmp_path / "test_config.yaml"
    with open(path, "w", encoding="utf-8") as f:
        yaml.dump(data, f, allow_unicode=True)
    return path
