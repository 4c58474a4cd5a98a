"""Unified settings — CLI flags, env vars, and TOML config in one object.

Priority chain (highest to lowest):
  1. Init kwargs  — CLI flags passed by Click
  2. Env vars     — ``DCLOCK_*`` prefix (``DCLOCK_CLOCK__UTC_OFFSET`` for sections)
  3. TOML file    — ``dclock.toml`` found by :func:`~dclock.config.discovery.find_config`
  4. Code defaults — baked into the section models
"""

from __future__ import annotations

import threading
import tomllib
from pathlib import Path
from typing import Any

import click
from pydantic import Field, ValidationError
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource

from dclock.config.discovery import find_config
from dclock.config.models import CliConfig, ClockConfig, DisplayConfig
from dclock.domain.types import MAX_OFFSET_HOURS, MIN_OFFSET_HOURS


class TomlSettingsSource(PydanticBaseSettingsSource):
    """Read settings from a discovered or explicit ``dclock.toml``."""

    def __init__(self, settings_cls: type[BaseSettings], toml_path: Path | None) -> None:
        super().__init__(settings_cls)
        self._data: dict[str, Any] = {}
        if toml_path and toml_path.is_file():
            raw = toml_path.read_text(encoding="utf-8")
            try:
                self._data = tomllib.loads(raw)
            except tomllib.TOMLDecodeError as exc:
                msg = f"Invalid TOML in {toml_path}: {exc}"
                raise click.ClickException(msg) from exc

    def get_field_value(self, field: Any, field_name: str) -> tuple[Any, str, bool]:
        """Return ``(value, field_name, value_is_complex)``."""
        val = self._data.get(field_name)
        return val, field_name, field_name in self._data

    def __call__(self) -> dict[str, Any]:
        return self._data


# The TOML path is only known inside from_cli(); sources are built by pydantic.
_tls = threading.local()


class DclockSettings(BaseSettings):
    """Settings for one dclock invocation.

    Attributes:
        config_path: The TOML file that was loaded, if any.
        offset: Per-run UTC offset override (``--offset`` / ``DCLOCK_OFFSET``).
        show_date: ``--date`` flag; OR-ed with ``[display] show_date``.
    """

    model_config = {
        "frozen": True,
        "env_prefix": "DCLOCK_",
        "env_nested_delimiter": "__",
    }

    config_path: Path | None = None

    # --- CLI flags ---
    offset: int | None = Field(default=None, ge=MIN_OFFSET_HOURS, le=MAX_OFFSET_HOURS)
    show_date: bool = False
    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    log_json: bool = False

    # --- TOML sections ---
    clock: ClockConfig = Field(default_factory=ClockConfig)
    display: DisplayConfig = Field(default_factory=DisplayConfig)
    cli: CliConfig = Field(default_factory=CliConfig)

    @property
    def expanded(self) -> bool:
        """Whether the date line is printed above the decimal time."""
        return self.show_date or self.display.show_date

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Insert TOML source between env vars and defaults."""
        toml_path = getattr(_tls, "toml_path", None)
        return (
            init_settings,
            env_settings,
            TomlSettingsSource(settings_cls, toml_path),
        )

    @classmethod
    def from_cli(
        cls,
        *,
        config_path: str | None = None,
        start: Path | None = None,
        **cli_flags: Any,
    ) -> DclockSettings:
        """Construct settings from a CLI invocation.

        An explicit *config_path* that does not exist is ignored rather
        than treated as an error, matching the silent fallback of the
        offset file.  Flags left at ``None`` do not mask lower sources.

        Raises:
            click.ClickException: On unparseable TOML or out-of-range values.
        """
        toml_path: Path | None
        if config_path:
            p = Path(config_path).expanduser()
            toml_path = p if p.is_file() else None
        else:
            toml_path = find_config(start)

        flags = {k: v for k, v in cli_flags.items() if v is not None}
        _tls.toml_path = toml_path
        try:
            return cls(config_path=toml_path, **flags)
        except ValidationError as exc:
            msg = f"Invalid dclock configuration: {exc}"
            raise click.ClickException(msg) from exc
        finally:
            _tls.toml_path = None
