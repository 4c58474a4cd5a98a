"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, dclock.toml only contains
overrides.  An empty file (or no file at all) is a valid configuration.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from dclock.domain.types import MAX_OFFSET_HOURS, MIN_OFFSET_HOURS


class ClockConfig(BaseModel):
    """[clock] section."""

    model_config = {"frozen": True}

    utc_offset: int | None = Field(default=None, ge=MIN_OFFSET_HOURS, le=MAX_OFFSET_HOURS)
    offset_file: str = "~/.dclock"
    default_offset: int = Field(default=-6, ge=MIN_OFFSET_HOURS, le=MAX_OFFSET_HOURS)


class DisplayConfig(BaseModel):
    """[display] section."""

    model_config = {"frozen": True}

    show_date: bool = False


class CliConfig(BaseModel):
    """[cli] section.

    ``usage_error_exit_code`` defaults to 0: a bad option prints usage to
    stdout and the process still exits successfully.
    """

    model_config = {"frozen": True}

    usage_error_exit_code: int = Field(default=0, ge=0, le=255)


class DclockConfig(BaseModel):
    """Root configuration — all dclock.toml sections."""

    model_config = {"frozen": True}

    clock: ClockConfig = Field(default_factory=ClockConfig)
    display: DisplayConfig = Field(default_factory=DisplayConfig)
    cli: CliConfig = Field(default_factory=CliConfig)
