"""Tests for DclockSettings — unified settings with TOML source."""

from pathlib import Path

import click
import pytest

from dclock.config.settings import DclockSettings


class TestDefaults:
    def test_all_defaults(self) -> None:
        settings = DclockSettings.from_cli()
        assert settings.config_path is None
        assert settings.offset is None
        assert settings.show_date is False
        assert settings.json_output is False
        assert settings.quiet is False
        assert settings.clock.utc_offset is None
        assert settings.clock.offset_file == "~/.dclock"
        assert settings.clock.default_offset == -6
        assert settings.display.show_date is False
        assert settings.cli.usage_error_exit_code == 0
        assert settings.expanded is False

    def test_frozen(self) -> None:
        settings = DclockSettings.from_cli()
        with pytest.raises(Exception):
            settings.quiet = True  # type: ignore[misc]

    def test_none_flags_are_ignored(self) -> None:
        settings = DclockSettings.from_cli(offset=None, quiet=None)
        assert settings.offset is None
        assert settings.quiet is False


class TestTomlSource:
    def test_discovered_in_cwd(self) -> None:
        Path("dclock.toml").write_text("[display]\nshow_date = true\n[clock]\nutc_offset = -7\n")
        settings = DclockSettings.from_cli()
        assert settings.config_path == Path("dclock.toml").resolve()
        assert settings.display.show_date is True
        assert settings.expanded is True
        assert settings.clock.utc_offset == -7
        assert settings.clock.default_offset == -6  # default preserved

    def test_explicit_config_path(self, tmp_path: Path) -> None:
        custom = tmp_path / "custom" / "my.toml"
        custom.parent.mkdir()
        custom.write_text("[cli]\nusage_error_exit_code = 2\n")
        settings = DclockSettings.from_cli(config_path=str(custom))
        assert settings.cli.usage_error_exit_code == 2
        assert settings.config_path == custom

    def test_missing_explicit_path_is_ignored(self, tmp_path: Path) -> None:
        settings = DclockSettings.from_cli(config_path=str(tmp_path / "absent.toml"))
        assert settings.config_path is None

    def test_invalid_toml(self) -> None:
        Path("dclock.toml").write_text("[clock\n")
        with pytest.raises(click.ClickException, match="Invalid TOML"):
            DclockSettings.from_cli()

    def test_out_of_range_offset(self) -> None:
        Path("dclock.toml").write_text("[clock]\nutc_offset = 20\n")
        with pytest.raises(click.ClickException, match="Invalid dclock configuration"):
            DclockSettings.from_cli()


class TestPriority:
    def test_cli_flag_beats_toml(self) -> None:
        Path("dclock.toml").write_text("offset = 3\n")
        assert DclockSettings.from_cli(offset=4).offset == 4

    def test_env_beats_toml(self, monkeypatch: pytest.MonkeyPatch) -> None:
        Path("dclock.toml").write_text("[clock]\nutc_offset = 3\n")
        monkeypatch.setenv("DCLOCK_CLOCK__UTC_OFFSET", "-2")
        assert DclockSettings.from_cli().clock.utc_offset == -2

    def test_env_flag(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("DCLOCK_QUIET", "true")
        assert DclockSettings.from_cli().quiet is True

    def test_show_date_flag_expands(self) -> None:
        assert DclockSettings.from_cli(show_date=True).expanded is True
