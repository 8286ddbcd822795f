"""
Pydantic Models

Validated argument and configuration models used across the package.
"""

import logging
from pydantic import BaseModel, Field, field_validator, ConfigDict


class CountArgument(BaseModel):
    """A non-negative element count, as accepted by drop() and take()"""
    model_config = ConfigDict(frozen=True)

    n: int = Field(
        ...,
        ge=0,
        strict=True,
        description="Number of elements to skip or keep"
    )


class Settings(BaseModel):
    """Logging configuration for applications built on the package"""
    model_config = ConfigDict(frozen=True)

    log_level: str = Field(
        "WARNING",
        description="Standard logging level name"
    )
    log_format: str = Field(
        "%(asctime)s %(levelname)s %(name)s: %(message)s",
        description="Format string handed to logging.basicConfig"
    )

    @field_validator('log_level')
    @classmethod
    def validate_log_level(cls, v):
        """Normalise the level name and reject unknown levels"""
        level = v.strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {v}")
        return level

    @field_validator('log_format')
    @classmethod
    def validate_log_format(cls, v):
        """Validate format is not empty"""
        if not v or not v.strip():
            raise ValueError("Log format cannot be empty")
        return v
