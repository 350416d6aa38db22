"""
Simplified dependency injection container for the service.
"""

import logging
from typing import Optional

from customer_manager.application.services.customer_service import (
    CustomerService,
    DefaultCustomerService,
)
from customer_manager.domain.repositories.customer_repository import CustomerRepository
from customer_manager.infrastructure.cache.cache_manager import CacheMaintenance, CacheManager
from customer_manager.infrastructure.configuration.config import Settings, get_config
from customer_manager.infrastructure.database.operations import (
    DatabaseManager,
    set_db_manager,
)
from customer_manager.infrastructure.events.application_events import (
    ApplicationEventPublisher,
)
from customer_manager.infrastructure.events.startup_listener import StartupListener
from customer_manager.infrastructure.repositories.sqlalchemy_customer_repository import (
    SQLAlchemyCustomerRepository,
)

logger = logging.getLogger(__name__)


class Container:
    """Builds and holds the application's shared components"""

    def __init__(self, config: Optional[Settings] = None):
        self.config = config or get_config()
        self._services = {}

    def _get_or_create(self, key: str, factory):
        if key not in self._services:
            self._services[key] = factory()
            logger.debug("Created component %s", key)
        return self._services[key]

    def get_config(self) -> Settings:
        """Get configuration"""
        return self.config

    def get_db_manager(self) -> DatabaseManager:
        """Database manager bound to this container's settings; also installed globally"""

        def factory() -> DatabaseManager:
            manager = DatabaseManager(self.config)
            set_db_manager(manager)
            return manager

        return self._get_or_create("db_manager", factory)

    def get_cache_manager(self) -> CacheManager:
        """Cache manager with the configured caches"""
        return self._get_or_create(
            "cache_manager",
            lambda: CacheManager(self.config.cache_names, self.config.cache_ttl_seconds),
        )

    def get_cache_maintenance(self) -> CacheMaintenance:
        """Background sweeper for expired cache entries"""
        return self._get_or_create(
            "cache_maintenance",
            lambda: CacheMaintenance(
                self.get_cache_manager(), self.config.cache_maintenance_interval
            ),
        )

    def get_customer_repository(self) -> CustomerRepository:
        """Customer repository"""
        self.get_db_manager()
        return self._get_or_create("customer_repository", SQLAlchemyCustomerRepository)

    def get_customer_service(self) -> CustomerService:
        """Customer service"""
        return self._get_or_create(
            "customer_service",
            lambda: DefaultCustomerService(
                self.get_customer_repository(), self.get_cache_manager()
            ),
        )

    def get_event_publisher(self) -> ApplicationEventPublisher:
        """Event publisher with the startup listener registered"""

        def factory() -> ApplicationEventPublisher:
            publisher = ApplicationEventPublisher()
            self.get_startup_listener().register(publisher)
            return publisher

        return self._get_or_create("event_publisher", factory)

    def get_startup_listener(self) -> StartupListener:
        """Listener reporting caches when the context is refreshed"""
        return self._get_or_create(
            "startup_listener",
            lambda: StartupListener(
                self.get_cache_manager(),
                clear_caches=self.config.clear_caches_on_startup,
                max_workers=self.config.startup_workers,
            ),
        )

    def shutdown(self) -> None:
        """Stop background work and release connections"""
        maintenance = self._services.get("cache_maintenance")
        if maintenance is not None and maintenance.is_running:
            maintenance.stop_maintenance()
        db_manager = self._services.get("db_manager")
        if db_manager is not None:
            db_manager.close()


_container: Optional[Container] = None


def get_container() -> Container:
    """Get the global container instance"""
    global _container
    if _container is None:
        _container = Container()
    return _container


def set_container(container: Optional[Container]) -> None:
    """Replace the global container"""
    global _container
    _container = container
