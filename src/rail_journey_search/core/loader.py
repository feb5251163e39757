"""Network file loading."""

import json
import logging
from pathlib import Path

import pydantic

from .exceptions import DataFormatError, NetworkFileError
from .models import RailwayData

logger = logging.getLogger(__name__)


def load_network_data(file_path: str | Path) -> RailwayData:
    """Read a railway network description from a JSON file.

    Args:
        file_path: Path to the JSON network file

    Returns:
        Validated railway data

    Raises:
        NetworkFileError: If the file cannot be read
        DataFormatError: If the file is not a valid network description
    """
    path = Path(file_path)
    try:
        content = path.read_text(encoding="utf-8")
    except OSError as e:
        raise NetworkFileError(f"Error loading {path}: {e}") from e

    try:
        raw = json.loads(content)
    except json.JSONDecodeError as e:
        raise DataFormatError(f"Error parsing JSON from {path}: {e}") from e

    data = parse_network_data(raw)
    logger.info(f"Loaded {len(data.routes)} routes from {path}")
    return data


def parse_network_data(raw: object) -> RailwayData:
    """Validate an already decoded network description."""
    if not isinstance(raw, dict):
        raise DataFormatError("Network description must be a JSON object")
    if "routes" not in raw:
        raise DataFormatError("Network description has no routes")
    try:
        return RailwayData.model_validate(raw)
    except pydantic.ValidationError as e:
        raise DataFormatError(f"Invalid network description: {e}") from e
