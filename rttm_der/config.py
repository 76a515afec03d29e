"""Application configuration. Loads from env vars."""
from pydantic_settings import BaseSettings
from typing import Literal


class Settings(BaseSettings):
    """App settings. Override via environment variables."""

    # Scoring: collar (sec) padded on both sides of every segment before scoring
    DER_DEFAULT_COLLAR: float = 0.0
    DER_MAX_COLLAR: float = 5.0  # requests above this are rejected (400)
    # Greedy mapping tie-break: "input" = insertion order, "speaker_id" = secondary sort by ids
    DER_TIE_BREAK: Literal["input", "speaker_id"] = "input"

    # RTTM export: SPEAKER <file> <chnl> <tbeg> <tdur> <NA> <NA> <name> <NA>
    RTTM_DEFAULT_FILE_ID: str = "unknown"
    RTTM_CHANNEL: int = 1
    RTTM_MIN_DURATION: float = 0.01  # avoid zero-length rows on export

    # Request guard: max segments accepted per timeline (413 above it)
    MAX_SEGMENTS_PER_TIMELINE: int = 100000

    # Logging: level (DEBUG, INFO, WARNING, ERROR); file path = also log to file (empty = console only).
    LOG_LEVEL: str = "INFO"
    LOG_FILE: str = ""  # e.g. "logs/app.log"

    class Config:
        env_file = ".env"
        extra = "ignore"


def get_settings() -> Settings:
    return Settings()
