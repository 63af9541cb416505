"""Service container for dependency injection."""

import logging
from typing import Dict, Any
from flask import current_app

logger = logging.getLogger(__name__)

class ServiceContainer:
    """Container for application services."""

    def __init__(self, config=None):
        """Initialize the service container.

        Args:
            config: Mapping the services read their settings from
        """
        self.config = config or {}
        self._services: Dict[str, Any] = {}

    def register(self, name: str, service: Any) -> None:
        """Register a service in the container.

        Args:
            name: Name of the service
            service: The service instance
        """
        self._services[name] = service

    def get(self, name: str) -> Any:
        """Get a service from the container by name.

        Args:
            name: Name of the service

        Returns:
            The service instance, or None if not found
        """
        # Try to find in already initialized services
        if name in self._services:
            return self._services[name]

        # Try to initialize lazily
        init_method = getattr(self, f"_init_{name}", None)
        if init_method:
            try:
                service = init_method()
                self._services[name] = service
                return service
            except Exception as e:
                logger.error(f"Error creating service {name}: {str(e)}")

        return None

    def _init_notification_repository(self):
        """Initialize the notification repository."""
        from app.models.notification_repository import SqlAlchemyNotificationRepository
        from app.extensions import db
        return SqlAlchemyNotificationRepository(db)

    def _init_notification_service(self):
        """Initialize the notification service."""
        from app.services.notification_service import NotificationService
        return NotificationService(
            self.get('notification_repository'),
            dedup_window=self.config['NOTIFICATION_DEDUP_WINDOW'],
            list_limit=self.config['NOTIFICATION_LIST_LIMIT'],
            caption_length=self.config['NOTIFICATION_CAPTION_PREVIEW']
        )

def init_container(app):
    """Attach a service container to the application."""
    app.extensions['service_container'] = ServiceContainer(app.config)

def container():
    """Get the service container of the current application.

    Returns:
        ServiceContainer: The service container instance
    """
    return current_app.extensions['service_container']
