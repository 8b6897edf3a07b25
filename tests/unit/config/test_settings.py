"""Unit tests for config settings and loaders."""

from dataclasses import dataclass, field
from typing import ClassVar

import pytest

from routine.config import (
    ConfigError,
    DotenvSettingsLoader,
    EnvSettingsLoader,
    InvalidSettingValueError,
    MissingRequiredSettingError,
    PagingSettings,
    Settings,
)


@dataclass
class AppSettings(Settings):
    _prefix: ClassVar[str] = "APP"

    host: str = "localhost"
    port: int = 8080
    debug: bool = False
    allowed_origins: list[str] = field(default_factory=list)


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for key in (
        "APP_HOST",
        "APP_PORT",
        "APP_DEBUG",
        "APP_ALLOWED_ORIGINS",
        "ROUTINE_PAGING_DEFAULT_PAGE_SIZE",
        "ROUTINE_PAGING_MAX_PAGE_SIZE",
    ):
        monkeypatch.delenv(key, raising=False)


# ---------------------------------------------------------------------------
# EnvSettingsLoader
# ---------------------------------------------------------------------------


class TestEnvSettingsLoader:
    def test_defaults_preserved_when_env_absent(self) -> None:
        settings = EnvSettingsLoader().load(AppSettings)
        assert settings.host == "localhost"
        assert settings.port == 8080
        assert settings.debug is False
        assert settings.allowed_origins == []

    def test_coerces_types(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("APP_PORT", "9000")
        monkeypatch.setenv("APP_DEBUG", "yes")
        monkeypatch.setenv("APP_ALLOWED_ORIGINS", "http://a.com, http://b.com")
        settings = EnvSettingsLoader().load(AppSettings)
        assert settings.port == 9000
        assert settings.debug is True
        assert settings.allowed_origins == ["http://a.com", "http://b.com"]

    def test_bad_int_raises_config_error(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("APP_PORT", "eighty")
        with pytest.raises(ConfigError):
            EnvSettingsLoader().load(AppSettings)

    def test_missing_required_raises(self, monkeypatch: pytest.MonkeyPatch) -> None:
        @dataclass
        class StrictSettings(Settings):
            _prefix: ClassVar[str] = "STRICT"
            required_field: str

        monkeypatch.delenv("STRICT_REQUIRED_FIELD", raising=False)
        with pytest.raises(MissingRequiredSettingError) as exc_info:
            EnvSettingsLoader().load(StrictSettings)
        assert exc_info.value.setting_name == "STRICT_REQUIRED_FIELD"


class TestDotenvSettingsLoader:
    def test_reads_env_file(self, tmp_path, monkeypatch: pytest.MonkeyPatch) -> None:
        # set first so monkeypatch removes whatever the .env file writes
        monkeypatch.setenv("ROUTINE_PAGING_MAX_PAGE_SIZE", "20")
        monkeypatch.setenv("ROUTINE_PAGING_DEFAULT_PAGE_SIZE", "5")
        env_file = tmp_path / ".env"
        env_file.write_text("ROUTINE_PAGING_MAX_PAGE_SIZE=50\nROUTINE_PAGING_DEFAULT_PAGE_SIZE=10\n")
        settings = DotenvSettingsLoader(str(env_file), override=True).load(PagingSettings)
        assert settings.max_page_size == 50
        assert settings.default_page_size == 10


# ---------------------------------------------------------------------------
# PagingSettings
# ---------------------------------------------------------------------------


class TestPagingSettings:
    def test_defaults(self) -> None:
        settings = PagingSettings()
        assert settings.default_page_size == 5
        assert settings.max_page_size == 20

    def test_loaded_from_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("ROUTINE_PAGING_MAX_PAGE_SIZE", "100")
        settings = EnvSettingsLoader().load(PagingSettings)
        assert settings.max_page_size == 100
        assert settings.default_page_size == 5

    def test_default_above_max_rejected(self) -> None:
        with pytest.raises(InvalidSettingValueError) as exc_info:
            PagingSettings(default_page_size=30, max_page_size=20)
        assert exc_info.value.setting_name == "default_page_size"

    def test_zero_max_rejected(self) -> None:
        with pytest.raises(InvalidSettingValueError):
            PagingSettings(default_page_size=1, max_page_size=0)

    def test_invalid_env_value_surfaces_as_config_error(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("ROUTINE_PAGING_DEFAULT_PAGE_SIZE", "0")
        with pytest.raises(InvalidSettingValueError):
            EnvSettingsLoader().load(PagingSettings)

    @pytest.mark.parametrize(
        ("requested", "expected"),
        [(None, 5), (0, 5), (-3, 5), (1, 1), (12, 12), (20, 20), (21, 20), (1000, 20)],
    )
    def test_clamp_page_size(self, requested: int | None, expected: int) -> None:
        assert PagingSettings().clamp_page_size(requested) == expected

    @pytest.mark.parametrize(("requested", "expected"), [(None, 1), (-1, 1), (0, 1), (1, 1), (7, 7)])
    def test_clamp_page_number(self, requested: int | None, expected: int) -> None:
        assert PagingSettings.clamp_page_number(requested) == expected
