"""
Application startup logic.

Builds the logging manager and the event bus from an ApplicationConfig and
starts/stops them in order.
"""

import logging
from dataclasses import asdict
from typing import List, Optional

from ..core.interfaces.lifecycle import IComponent
from ..core.services.event_bus import EventBus
from ..infrastructure.config.loader import ConfigLoader
from ..infrastructure.config.models import ApplicationConfig
from ..infrastructure.logging.setup import LoggingManager

logger = logging.getLogger(__name__)


class ApplicationStartup:
    """Manages the startup sequence of the bus components."""

    def __init__(self, config: ApplicationConfig) -> None:
        self._config = config
        self._logging_manager = LoggingManager(asdict(config.logging))
        self._event_bus = EventBus.from_config(config.event_bus)
        self._started_components: List[IComponent] = []

    @classmethod
    def from_file(cls, config_file: Optional[str] = None) -> 'ApplicationStartup':
        """Load configuration with ConfigLoader and build the application."""
        return cls(ConfigLoader().load_config(config_file))

    @property
    def config(self) -> ApplicationConfig:
        return self._config

    @property
    def event_bus(self) -> EventBus:
        return self._event_bus

    @property
    def logging_manager(self) -> LoggingManager:
        return self._logging_manager

    async def start_application(self) -> None:
        """Start logging first, then the event bus."""
        for component in (self._logging_manager, self._event_bus):
            try:
                await component.start()
                self._started_components.append(component)
                logger.info(f"Started component: {component.name}")
            except Exception as e:
                logger.error(f"Failed to start component {component.name}: {e}")
                await self.stop_application()
                raise

        logger.info(f"{self._config.name} started ({self._config.environment})")

    async def stop_application(self) -> None:
        """Stop started components in reverse order."""
        for component in reversed(self._started_components):
            try:
                await component.stop()
            except Exception as e:
                logger.error(f"Error stopping component {component.name}: {e}")
                # Continue stopping other components

        self._started_components.clear()
