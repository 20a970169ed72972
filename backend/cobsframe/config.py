"""Command-line configuration via pydantic-settings."""

import logging

from pydantic import field_validator
from pydantic_settings import BaseSettings

_IO_FORMATS = ("raw", "hex")


class Settings(BaseSettings):
    model_config = {
        "env_prefix": "COBS_",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }

    # Logging
    LOG_LEVEL: str = "INFO"
    SERVICE_NAME: str = "cobsframe"

    # Codec
    STRICT_DECODE: bool = False
    IO_FORMAT: str = "raw"

    @field_validator("LOG_LEVEL")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        level = v.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"LOG_LEVEL must name a logging level, got '{v}'")
        return level

    @field_validator("IO_FORMAT")
    @classmethod
    def validate_io_format(cls, v: str) -> str:
        fmt = v.lower()
        if fmt not in _IO_FORMATS:
            raise ValueError(f"IO_FORMAT must be one of 'raw', 'hex', got '{v}'")
        return fmt
