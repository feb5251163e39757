"""Settings for the command line and MCP server.

Values can be overridden with environment variables:
- RAIL_JOURNEY_NETWORK_FILE=/path/to/network.json
- RAIL_JOURNEY_MAX_RESULTS=10
- RAIL_JOURNEY_MAX_TRANSFERS=2
- RAIL_JOURNEY_OUTPUT_FORMAT=json
"""

from pathlib import Path
from typing import Literal

import pydantic
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from .exceptions import ValidationError


class Settings(BaseSettings):
    """Default values used when a caller does not supply its own."""

    model_config = SettingsConfigDict(env_prefix="RAIL_JOURNEY_")

    network_file: Path = Field(
        Path("data/network.json"), description="Railway network JSON file"
    )
    max_results: int = Field(5, ge=0, description="Journeys returned per search")
    max_transfers: int | None = Field(
        None, ge=0, description="Abandon journeys with more changes than this"
    )
    output_format: Literal["text", "table", "detailed", "json"] = Field(
        "text", description="CLI output format"
    )

    @classmethod
    def from_env(cls) -> "Settings":
        """Build settings from the environment.

        Raises:
            ValidationError: If a variable holds an invalid value
        """
        try:
            return cls()
        except pydantic.ValidationError as e:
            raise ValidationError(f"Invalid configuration: {e}") from e
