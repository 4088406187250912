from typing import Dict, Any, Optional
import logging
from creational.core.patterns.singleton import Singleton
from creational.core.config_manager import config_manager
from creational.core.connection_manager import ConnectionManager
from creational.domain.registry import build_default_registry


class ServiceManager(Singleton):
    """
    Synchronized Singleton Service Manager.

    This class provides centralized access to all application services and managers.
    It acts as a service locator. Core services are registered during the explicit
    ``initialize()`` step run at application startup, not as a side effect of import.
    """

    def _setup(self):
        """Initialize the service manager."""
        self._services: Dict[str, Any] = {}
        self._initialized_services = False
        self._logger = logging.getLogger(__name__)

    def initialize(self):
        """
        Register core application services. Calling it again is a no-op.
        """
        if self._initialized_services:
            return
        self.register_service("config", config_manager)
        self.register_service("connection", ConnectionManager.get_instance())
        self.register_service(
            "prototypes",
            build_default_registry(seed=config_manager.settings.seed_prototypes)
        )
        self._initialized_services = True
        self._logger.info("Core services registered successfully")

    @property
    def is_initialized(self) -> bool:
        return self._initialized_services

    def register_service(self, name: str, service: Any):
        """
        Register a service with the service manager.

        Args:
            name: The name to register the service under
            service: The service instance to register
        """
        self._services[name] = service
        self._logger.debug(f"Service '{name}' registered")

    def get_service(self, name: str) -> Optional[Any]:
        """
        Get a registered service by name.

        Args:
            name: The name of the service to retrieve

        Returns:
            The service instance, or None if not found
        """
        return self._services.get(name)

    def has_service(self, name: str) -> bool:
        """
        Check if a service is registered.

        Args:
            name: The name of the service to check

        Returns:
            True if the service is registered, False otherwise
        """
        return name in self._services

    def unregister_service(self, name: str) -> bool:
        """
        Unregister a service.

        Args:
            name: The name of the service to unregister

        Returns:
            True if the service was unregistered, False if it wasn't found
        """
        if name in self._services:
            del self._services[name]
            self._logger.debug(f"Service '{name}' unregistered")
            return True
        return False

    def list_services(self) -> list:
        """
        Get a list of all registered service names.

        Returns:
            List of service names
        """
        return list(self._services.keys())

    def get_config_manager(self):
        """Get the configuration manager."""
        return self.get_service("config")

    def get_connection_manager(self):
        """Get the connection manager."""
        return self.get_service("connection")

    def get_prototype_registry(self):
        """Get the user prototype registry."""
        return self.get_service("prototypes")

    def get_application_status(self) -> dict:
        """
        Get the overall application status.

        Returns:
            Dictionary containing status information for all services
        """
        config_mgr = self.get_config_manager()
        connection_mgr = self.get_connection_manager()
        registry = self.get_prototype_registry()

        return {
            "initialized": self._initialized_services,
            "services_registered": len(self._services),
            "service_names": self.list_services(),
            "config_status": {
                "debug_mode": config_mgr.is_debug_mode() if config_mgr else None
            },
            "connection_status": connection_mgr.get_connection_info() if connection_mgr else {"status": "not_registered"},
            "prototypes_registered": len(registry) if registry is not None else 0,
            "application_healthy": bool(connection_mgr and connection_mgr.check_connection())
        }

    def shutdown(self):
        """Shutdown all services gracefully."""
        self._logger.info("Shutting down all services...")

        connection_mgr = self.get_connection_manager()
        if connection_mgr:
            connection_mgr.close_connections()

        # Clear services
        self._services.clear()
        self._initialized_services = False
        self._logger.info("All services shut down successfully")


# Create the global service manager instance
service_manager = ServiceManager.get_instance()
