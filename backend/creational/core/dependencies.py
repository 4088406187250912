"""
FastAPI Dependencies with Singleton Pattern Integration

This module provides FastAPI dependency functions that integrate with our singleton pattern.
These dependencies can be used in FastAPI route handlers to inject the required services.
"""

from fastapi import HTTPException, status

from creational.core.patterns.prototype import PrototypeRegistry
from creational.core.service_manager import ServiceManager, service_manager
from creational.core.config_manager import ConfigManager, Settings, config_manager
from creational.core.connection_manager import ConnectionManager


def get_service_manager() -> ServiceManager:
    """
    FastAPI dependency to get the service manager.

    Returns:
        The singleton service manager instance
    """
    return service_manager


def get_config_manager() -> ConfigManager:
    """
    FastAPI dependency to get the configuration manager.

    Returns:
        The singleton configuration manager instance
    """
    return config_manager


def get_connection_manager() -> ConnectionManager:
    """
    FastAPI dependency to get the connection manager.

    Returns:
        The singleton connection manager instance
    """
    return ConnectionManager.get_instance()


def get_settings() -> Settings:
    """
    FastAPI dependency to get application settings.

    Returns:
        The application settings object
    """
    return config_manager.settings


def get_prototype_registry() -> PrototypeRegistry:
    """
    FastAPI dependency to get the user prototype registry.

    Raises:
        HTTPException: 503 if the services have not been initialized yet
    """
    registry = service_manager.get_prototype_registry()
    if registry is None:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Services are not initialized"
        )
    return registry
