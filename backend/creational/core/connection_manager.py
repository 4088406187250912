from sqlalchemy import Engine, create_engine, text
from sqlalchemy.engine import make_url
from sqlalchemy.pool import StaticPool
from typing import Optional
import logging
from creational.core.patterns.singleton import DoubleCheckedSingleton
from creational.core.config_manager import config_manager


class ConnectionManager(DoubleCheckedSingleton):
    """
    Double-checked Singleton Connection Manager.

    Holds the one SQLAlchemy engine (and so the one connection pool) of the
    process. Nothing is created until the first call to ``get_instance()``;
    after that the accessor never takes a lock.
    """

    def _setup(self):
        """Initialize the connection manager."""
        self._engine: Optional[Engine] = None
        self._logger = logging.getLogger(__name__)
        self._initialize_engine()

    def _initialize_engine(self):
        """Create the engine from the configured database URL."""
        try:
            database_url = config_manager.get_database_url()
            url = make_url(database_url)
            self._logger.info(f"Initializing connection to: {url.render_as_string(hide_password=True)}")

            if url.get_backend_name() == "sqlite" and url.database in (None, "", ":memory:"):
                # One shared connection, otherwise every checkout sees a new empty database
                self._engine = create_engine(
                    database_url,
                    poolclass=StaticPool,
                    connect_args={"check_same_thread": False}
                )
            else:
                self._engine = create_engine(
                    database_url,
                    pool_pre_ping=True,      # Verify connections before use
                    pool_recycle=300         # Recycle connections every 5 minutes
                )

            self._logger.info("Connection initialized successfully")

        except Exception as e:
            self._logger.error(f"Failed to initialize connection: {e}")
            raise

    @property
    def engine(self) -> Engine:
        """Get the database engine."""
        if self._engine is None:
            self._initialize_engine()
        return self._engine

    def check_connection(self) -> bool:
        """
        Check if the connection is healthy.

        Returns:
            True if connection is healthy, False otherwise.
        """
        try:
            with self.engine.connect() as connection:
                connection.execute(text("SELECT 1"))
            return True
        except Exception as e:
            self._logger.error(f"Connection check failed: {e}")
            return False

    def get_connection_info(self) -> dict:
        """
        Get connection information.

        Returns:
            Dictionary containing connection details.
        """
        if self._engine is None:
            return {"status": "not_initialized"}

        return {
            "status": "initialized",
            "backend": self._engine.url.get_backend_name(),
            "pool_class": type(self._engine.pool).__name__,
            "is_healthy": self.check_connection()
        }

    def close_connections(self):
        """Close all pooled connections."""
        if self._engine:
            self._engine.dispose()
            self._logger.info("Connections closed")

    def reset_connection(self):
        """Reset the connection."""
        self.close_connections()
        self._engine = None
        self._initialize_engine()
        self._logger.info("Connection reset")


def get_connection_manager() -> ConnectionManager:
    """Global accessor; builds the manager on first use."""
    return ConnectionManager.get_instance()
