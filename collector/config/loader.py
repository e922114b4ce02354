"""YAML config loader with default injection and dotted-key get/set."""

import json
import logging
from pathlib import Path
from typing import Any

import yaml

from collector.config.defaults import (
    DEFAULT_COPYWRITING_SOURCES,
    DEFAULT_SIGNS,
    TAIPEI_DISTRICTS,
)
from collector.config.schema import CollectorConfig

logger = logging.getLogger(__name__)


def load_config(path: str | Path | None = None) -> CollectorConfig:
    """Load and validate config from a YAML file.

    A missing file or an empty one yields the defaults. Empty sign, source
    and district lists are filled from the defaults module.
    """
    raw: dict[str, Any] = {}
    if path is not None:
        path = Path(path)
        if path.exists():
            with open(path, encoding="utf-8") as f:
                raw = yaml.safe_load(f) or {}
        else:
            logger.warning("Config file %s not found, using defaults", path)
    return _inject_defaults(raw)


def _inject_defaults(raw: dict[str, Any]) -> CollectorConfig:
    horoscope = raw.setdefault("horoscope", {}) or {}
    raw["horoscope"] = horoscope
    if not horoscope.get("signs"):
        horoscope["signs"] = [s.model_dump() for s in DEFAULT_SIGNS]

    copywriting = raw.setdefault("copywriting", {}) or {}
    raw["copywriting"] = copywriting
    if not copywriting.get("sources"):
        copywriting["sources"] = [s.model_dump() for s in DEFAULT_COPYWRITING_SOURCES]

    places = raw.setdefault("places", {}) or {}
    raw["places"] = places
    if not places.get("districts"):
        places["districts"] = list(TAIPEI_DISTRICTS)

    return CollectorConfig(**raw)


def get_config_value(config: CollectorConfig, dotted_key: str) -> Any:
    """Get a config value by dotted key path. E.g. 'http.max_retries'."""
    parts = dotted_key.split(".")
    obj: Any = config
    for part in parts:
        if isinstance(obj, list):
            obj = obj[int(part)]
        elif isinstance(obj, dict):
            obj = obj[part]
        elif hasattr(obj, part):
            obj = getattr(obj, part)
        else:
            raise KeyError(f"Config key not found: {dotted_key}")
    return obj


def set_config_value(config: CollectorConfig, dotted_key: str, value: Any) -> CollectorConfig:
    """Set a config value by dotted key path and re-validate.

    Returns a new CollectorConfig instance.
    """
    data = json.loads(config.model_dump_json())
    parts = dotted_key.split(".")
    target = data
    for part in parts[:-1]:
        target = target[int(part)] if isinstance(target, list) else target[part]
    if parts[-1] not in target:
        raise KeyError(f"Config key not found: {dotted_key}")
    # Coerce CLI strings to the type of the current value
    old_value = target.get(parts[-1])
    if isinstance(value, str):
        if isinstance(old_value, bool):
            value = value.lower() in ("1", "true", "yes", "on")
        elif isinstance(old_value, int):
            value = int(value)
        elif isinstance(old_value, float):
            value = float(value)
    target[parts[-1]] = value
    return CollectorConfig(**data)
