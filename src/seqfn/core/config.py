"""Runtime settings for seqfn, read from the environment."""

import os
from typing import Literal

from pydantic import BaseModel, Field, field_validator

__all__ = ["Settings", "settings"]

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class Settings(BaseModel):
    LOG_LEVEL: LogLevel = Field(default="INFO", description="Project log level.")
    LOGGER_NAME: str = Field(default="seqfn", description="Name of the project logger.")

    @field_validator("LOG_LEVEL", mode="before")
    @classmethod
    def _upper_level(cls, value):
        if isinstance(value, str):
            return value.strip().upper()
        return value

    @classmethod
    def load(cls) -> "Settings":
        """Build settings from ``SEQFN_*`` environment variables.

        Unset variables fall back to the field defaults.

        Raises:
            pydantic.ValidationError: If ``SEQFN_LOG_LEVEL`` is not a known level.
        """
        values = {}
        level = os.getenv("SEQFN_LOG_LEVEL")
        if level:
            values["LOG_LEVEL"] = level
        name = os.getenv("SEQFN_LOGGER_NAME")
        if name:
            values["LOGGER_NAME"] = name
        return cls(**values)


settings = Settings.load()
