import logging
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict

from creational.core.patterns.singleton import EagerSingleton


class Settings(BaseSettings):
    """Application settings using Pydantic BaseSettings."""

    # Application
    app_name: str = "Creational Patterns Catalog"
    docs_title: str = "Creational Design Patterns"

    # Connection holder used by the Singleton demonstration
    database_url: str = "sqlite://"

    # Prototype registry
    seed_prototypes: bool = True

    # Development Settings
    debug: bool = False
    log_level: str = "INFO"

    model_config = SettingsConfigDict(env_file=".env", extra="forbid")


class ConfigManager(EagerSingleton):
    """
    Eager Singleton Configuration Manager.

    The instance, and with it the settings, is created as soon as this class
    is defined, i.e. on first import of this module.
    """

    def _setup(self):
        """Initialize the configuration manager."""
        self._settings: Optional[Settings] = None
        self._logger = logging.getLogger(__name__)
        self._load_settings()

    def _load_settings(self):
        """Load settings from environment variables and .env file."""
        try:
            self._settings = Settings()
            self._logger.info(f"Configuration loaded successfully. Debug mode: {self._settings.debug}")
        except Exception as e:
            self._logger.error(f"Failed to load configuration: {e}")
            raise

    @property
    def settings(self) -> Settings:
        """Get the application settings."""
        if self._settings is None:
            self._load_settings()
        return self._settings

    def reload_settings(self):
        """Reload settings from environment variables and .env file."""
        self._logger.info("Reloading configuration settings...")
        self._load_settings()

    def get_database_url(self) -> str:
        """Get the database URL."""
        return self.settings.database_url

    def is_debug_mode(self) -> bool:
        """Check if the application is in debug mode."""
        return self.settings.debug

    def get_catalog_settings(self) -> dict:
        """Get documentation catalog settings."""
        return {
            "app_name": self.settings.app_name,
            "docs_title": self.settings.docs_title,
            "seed_prototypes": self.settings.seed_prototypes
        }


# The instance already exists; this only binds the global name
config_manager = ConfigManager.get_instance()
