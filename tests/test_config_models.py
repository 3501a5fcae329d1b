"""
Tests for configuration models.
"""

import pytest

from busline.infrastructure.config.models import (
    ApplicationConfig, EventBusConfig, LoggingConfig
)


class TestEventBusConfig:
    """Test cases for EventBusConfig."""

    def test_defaults(self) -> None:
        config = EventBusConfig()

        assert config.wildcard == "*"
        assert config.default_timeout_ms == 5000


class TestLoggingConfig:
    """Test cases for LoggingConfig."""

    def test_defaults(self) -> None:
        config = LoggingConfig()

        assert config.level == "INFO"
        assert config.log_directory == "logs"
        assert config.console_enabled is True
        assert config.file_enabled is False


class TestApplicationConfig:
    """Test cases for ApplicationConfig."""

    def test_defaults(self) -> None:
        config = ApplicationConfig()

        assert config.name == "busline"
        assert config.debug is False
        assert config.environment == "production"
        assert isinstance(config.event_bus, EventBusConfig)
        assert isinstance(config.logging, LoggingConfig)

    def test_from_dict(self) -> None:
        config = ApplicationConfig.from_dict({
            "debug": True,
            "environment": "development",
            "event_bus": {"wildcard": "#", "default_timeout_ms": 250},
            "logging": {"level": "DEBUG"},
        })

        assert config.debug is True
        assert config.environment == "development"
        assert config.event_bus.wildcard == "#"
        assert config.event_bus.default_timeout_ms == 250
        assert config.logging.level == "DEBUG"
        assert config.logging.log_directory == "logs"

    def test_to_dict_round_trip(self) -> None:
        config = ApplicationConfig(event_bus=EventBusConfig(default_timeout_ms=100))

        data = config.to_dict()

        assert data["event_bus"] == {"wildcard": "*", "default_timeout_ms": 100}
        assert ApplicationConfig.from_dict(data) == config

    def test_rejects_non_positive_timeout(self) -> None:
        with pytest.raises(ValueError, match="timeout"):
            ApplicationConfig(event_bus=EventBusConfig(default_timeout_ms=0))

    def test_rejects_empty_wildcard(self) -> None:
        with pytest.raises(ValueError, match="wildcard"):
            ApplicationConfig(event_bus=EventBusConfig(wildcard=""))

    def test_rejects_unknown_log_level(self) -> None:
        with pytest.raises(ValueError, match="log level"):
            ApplicationConfig(logging=LoggingConfig(level="LOUD"))

    def test_accepts_loguru_only_levels(self) -> None:
        config = ApplicationConfig(logging=LoggingConfig(level="trace"))

        assert config.logging.level == "trace"

    def test_rejects_negative_backup_count(self) -> None:
        with pytest.raises(ValueError):
            ApplicationConfig(logging=LoggingConfig(backup_count=-1))

    def test_unknown_nested_key_rejected(self) -> None:
        with pytest.raises(TypeError):
            ApplicationConfig.from_dict({"event_bus": {"workers": 4}})
