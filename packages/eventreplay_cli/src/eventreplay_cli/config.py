"""CLI configuration using Pydantic Settings

Environment variables use the EVENTREPLAY_ prefix, e.g.
EVENTREPLAY_MAX_DELAY_MS=250. Command-line options take precedence.
"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Settings loaded from environment variables and .env"""

    model_config = SettingsConfigDict(
        env_prefix="EVENTREPLAY_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Playback
    max_delay_ms: float | None = None

    # Output
    debug: bool = False
    json_output: bool = False
