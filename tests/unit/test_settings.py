"""Unit tests for environment-backed settings."""

import logging

import pytest
from cel_builder.config.settings import Settings, configure_logging, get_settings
from pydantic import ValidationError


class TestSettingsDefaults:
    """Defaults when no environment overrides are present."""

    def test_defaults(self, monkeypatch: pytest.MonkeyPatch) -> None:
        for name in ("LOG_LEVEL", "ESCAPE_STRINGS", "WARN_ON_RAW"):
            monkeypatch.delenv(f"CEL_BUILDER_{name}", raising=False)
        settings = Settings(_env_file=None)
        assert settings.log_level is None
        assert settings.escape_strings is False
        assert settings.warn_on_raw is True

    def test_get_settings_is_shared(self) -> None:
        assert get_settings() is get_settings()


class TestSettingsEnvironment:
    """Environment variables with the CEL_BUILDER_ prefix."""

    def test_env_overrides(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("CEL_BUILDER_ESCAPE_STRINGS", "true")
        monkeypatch.setenv("CEL_BUILDER_WARN_ON_RAW", "0")
        monkeypatch.setenv("CEL_BUILDER_LOG_LEVEL", "debug")
        settings = Settings(_env_file=None)
        assert settings.escape_strings is True
        assert settings.warn_on_raw is False
        assert settings.log_level == "DEBUG"

    def test_unprefixed_env_ignored(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("CEL_BUILDER_ESCAPE_STRINGS", raising=False)
        monkeypatch.setenv("ESCAPE_STRINGS", "true")
        assert Settings(_env_file=None).escape_strings is False


class TestLogLevelValidation:
    """log_level is normalized and validated."""

    @pytest.mark.parametrize("value", ["info", " Error ", "DEBUG"])
    def test_normalized(self, value: str) -> None:
        assert Settings(log_level=value).log_level == value.strip().upper()

    def test_unknown_level(self) -> None:
        with pytest.raises(ValidationError):
            Settings(log_level="chatty")


class TestConfigureLogging:
    """The package logger follows the host app unless a level is set."""

    @pytest.fixture
    def package_logger(self):
        logger = logging.getLogger("cel_builder")
        original = logger.level
        yield logger
        logger.setLevel(original)

    def test_no_level_leaves_logger_alone(self, package_logger: logging.Logger) -> None:
        package_logger.setLevel(logging.NOTSET)
        configure_logging(Settings(log_level=None))
        assert package_logger.level == logging.NOTSET

    def test_explicit_level_applied(self, package_logger: logging.Logger) -> None:
        configure_logging(Settings(log_level="info"))
        assert package_logger.level == logging.INFO

    def test_import_does_not_force_a_level(self) -> None:
        if get_settings().log_level is not None:
            pytest.skip("CEL_BUILDER_LOG_LEVEL is set in this environment")
        assert logging.getLogger("cel_builder").level == logging.NOTSET
