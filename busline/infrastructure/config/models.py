"""
Configuration models and data structures.

This module defines the configuration models used by the event bus and
its logging setup.
"""

from dataclasses import asdict, dataclass, field
from typing import Any, Dict, Optional

from ...core.domain.subscriptions import WILDCARD


@dataclass
class EventBusConfig:
    """Event bus configuration."""
    wildcard: str = WILDCARD
    default_timeout_ms: float = 5000


@dataclass
class LoggingConfig:
    """Logging configuration."""
    level: str = "INFO"
    log_directory: str = "logs"
    max_file_size: str = "10MB"
    backup_count: int = 5
    console_enabled: bool = True
    file_enabled: bool = False


@dataclass
class ApplicationConfig:
    """Main application configuration."""

    name: str = "busline"
    debug: bool = False
    environment: str = "production"

    event_bus: EventBusConfig = field(default_factory=EventBusConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    config_file_path: Optional[str] = None

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        self._validate_event_bus()
        self._validate_logging()

    def _validate_event_bus(self) -> None:
        if not self.event_bus.wildcard:
            raise ValueError("Event bus wildcard marker cannot be empty")
        if self.event_bus.default_timeout_ms <= 0:
            raise ValueError(
                f"Event bus default timeout must be positive, got {self.event_bus.default_timeout_ms}")

    def _validate_logging(self) -> None:
        valid_levels = ("TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL")
        if self.logging.level.upper() not in valid_levels:
            raise ValueError(f"Invalid log level: {self.logging.level}")
        if self.logging.backup_count < 0:
            raise ValueError(
                f"Log backup count cannot be negative, got {self.logging.backup_count}")

    def to_dict(self) -> Dict[str, Any]:
        """Convert configuration to dictionary."""
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'ApplicationConfig':
        """Create configuration from dictionary."""
        return cls(
            name=data.get('name', 'busline'),
            debug=data.get('debug', False),
            environment=data.get('environment', 'production'),
            event_bus=EventBusConfig(**data.get('event_bus', {})),
            logging=LoggingConfig(**data.get('logging', {})),
            config_file_path=data.get('config_file_path'),
        )
