"""JSON snapshot files: directory creation, write and read."""

import json
import logging
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)

DEFAULT_DATA_DIR = "data"


def ensure_directory(directory: str | Path = DEFAULT_DATA_DIR) -> Path:
    """Create the directory (and parents) if it does not exist."""
    path = Path(directory)
    path.mkdir(parents=True, exist_ok=True)
    return path


def write_json_file(
    filename: str, data: Any, directory: str | Path = DEFAULT_DATA_DIR
) -> Path:
    """Write data as pretty-printed UTF-8 JSON. Returns the file path."""
    path = ensure_directory(directory) / filename
    with open(path, "w", encoding="utf-8") as f:
        json.dump(data, f, ensure_ascii=False, indent=2)
    logger.debug("Wrote %s", path)
    return path


def read_json_file(filename: str, directory: str | Path = DEFAULT_DATA_DIR) -> Any:
    """Read and parse a JSON file.

    Raises FileNotFoundError or json.JSONDecodeError as-is.
    """
    path = Path(directory) / filename
    with open(path, encoding="utf-8") as f:
        return json.load(f)
