"""Tests for runtime configuration."""

import pytest

from offshore_activity.config import Settings, get_settings, reload_settings
from offshore_activity.services import DuplicateDetector, RecordLinker
from offshore_activity.utils.time_utils import days_to_ms


@pytest.fixture
def clean_env(monkeypatch):
    """Remove OFFSHORE_* overrides and restore global settings afterwards."""
    for var in (
        "OFFSHORE_MANIFEST_WINDOW_DAYS",
        "OFFSHORE_EVENT_WINDOW_DAYS",
        "OFFSHORE_BULK_WINDOW_DAYS",
        "OFFSHORE_NO_VOYAGE_SAMPLE_LIMIT",
        "OFFSHORE_LOG_LEVEL",
    ):
        monkeypatch.delenv(var, raising=False)
    yield monkeypatch
    monkeypatch.undo()
    reload_settings()


class TestSettings:
    """Tests for Settings defaults and environment overrides."""

    def test_defaults(self, clean_env):
        """Default windows are 2/7/3 days and 10 samples."""
        settings = Settings(_env_file=None)
        assert settings.manifest_window_days == 2
        assert settings.voyage_event_window_days == 7
        assert settings.bulk_action_window_days == 3
        assert settings.no_voyage_sample_limit == 10
        assert settings.log_level == "INFO"

    def test_environment_override(self, clean_env):
        """Environment variables override defaults."""
        clean_env.setenv("OFFSHORE_MANIFEST_WINDOW_DAYS", "1")
        clean_env.setenv("OFFSHORE_NO_VOYAGE_SAMPLE_LIMIT", "3")
        settings = Settings(_env_file=None)
        assert settings.manifest_window_days == 1
        assert settings.no_voyage_sample_limit == 3

    def test_get_settings_is_cached(self, clean_env):
        """get_settings() returns the same instance until reloaded."""
        first = get_settings()
        assert get_settings() is first
        assert reload_settings() is not first

    def test_services_read_settings(self, clean_env):
        """Services pick up windows and limits from settings."""
        settings = Settings(
            _env_file=None,
            OFFSHORE_EVENT_WINDOW_DAYS=5,
            OFFSHORE_NO_VOYAGE_SAMPLE_LIMIT=2,
        )
        linker = RecordLinker(settings)
        assert linker.voyage_event_tolerance_ms == days_to_ms(5)
        assert linker.manifest_tolerance_ms == days_to_ms(2)
        assert DuplicateDetector(settings=settings).sample_limit == 2


class TestLogging:
    """Tests for the structlog logger factory."""

    def test_get_logger_returns_structured_logger(self):
        from offshore_activity.utils.log import get_logger

        log = get_logger("offshore_activity.tests")
        for method in ("debug", "info", "warning"):
            assert callable(getattr(log, method))

    def test_services_default_to_module_logger(self, clean_env):
        """Services build their own logger when none is injected."""
        detector = DuplicateDetector(settings=Settings(_env_file=None))
        assert detector.log is not None
        detector.detect_duplicates([])

    def test_log_level_applied_when_already_configured(self, clean_env):
        """The configured level takes effect even after structlog is set up."""
        import logging

        from offshore_activity.utils.log import PACKAGE_LOGGER, configure_logging, get_logger

        package_logger = logging.getLogger(PACKAGE_LOGGER)
        previous = package_logger.level
        get_logger("offshore_activity.tests")
        try:
            clean_env.setenv("OFFSHORE_LOG_LEVEL", "WARNING")
            reload_settings()
            configure_logging()
            assert package_logger.level == logging.WARNING

            configure_logging("debug")
            assert package_logger.level == logging.DEBUG
        finally:
            package_logger.setLevel(previous)
