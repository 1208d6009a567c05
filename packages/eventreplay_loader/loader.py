"""
Recording loader.

Loads recordings from YAML or JSON files, or from already-deserialized
storage blobs, into Recording envelopes.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml

from .recording_models import Recording

logger = logging.getLogger(__name__)

START_TIME_KEY = "startTime"
ITEMS_KEY = "items"


def normalize_recording(data: Any) -> dict[str, Any]:
    """
    Coerce a stored blob into the recording envelope.

    Args:
        data: Whatever the storage backend returned

    Returns:
        Dictionary with a numeric "startTime" and an "items" list

    Rules:
        - Not a mapping: empty envelope
        - "startTime" not a positive number: 0
        - "items" not a list: empty list
    """
    if not isinstance(data, Mapping):
        return {START_TIME_KEY: 0, ITEMS_KEY: []}

    normalized = dict(data)

    start_time = normalized.get(START_TIME_KEY)
    if isinstance(start_time, bool) or not isinstance(start_time, (int, float)) or not start_time > 0:
        normalized[START_TIME_KEY] = 0

    if not isinstance(normalized.get(ITEMS_KEY), list):
        normalized[ITEMS_KEY] = []

    return normalized


def load_recording(data: Any) -> Recording:
    """
    Load a recording from deserialized data.

    Args:
        data: Either a bare list of items or a recording envelope

    Returns:
        Recording envelope

    Example:
        >>> recording = load_recording([{"t": 10, "n": "a", "d": 1}])
        >>> len(recording.items)
        1
    """
    if isinstance(data, list):
        return Recording(items=data)
    return Recording.model_validate(normalize_recording(data))


def load_recording_from_file(file_path: Path | str) -> Recording:
    """
    Load a recording from a YAML or JSON file.

    Args:
        file_path: Path to a .json, .yaml or .yml file

    Returns:
        Recording envelope

    Raises:
        FileNotFoundError: If file doesn't exist
        ValueError: If the file format or content is invalid
    """
    path = Path(file_path)

    if not path.exists():
        raise FileNotFoundError(f"Recording file not found: {path}")

    content = path.read_text(encoding="utf-8")

    suffix = path.suffix.lower()
    if suffix in (".yaml", ".yml"):
        try:
            data = yaml.safe_load(content)
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid YAML in {path}: {e}") from e
    elif suffix == ".json":
        try:
            data = json.loads(content)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON in {path}: {e}") from e
    else:
        raise ValueError(
            f"Unsupported file format: {suffix}. Use .yaml, .yml, or .json"
        )

    if not isinstance(data, (dict, list)):
        raise ValueError(
            f"Recording must be a list of items or a dictionary, got {type(data).__name__}"
        )

    recording = load_recording(data)
    logger.info(f"Loaded {len(recording.items)} item(s) from {path}")
    return recording
