"""
Listener that walks the cache manager once the application context is ready
"""

import logging
from concurrent.futures import ThreadPoolExecutor, as_completed
from typing import List

from customer_manager.infrastructure.cache.cache_manager import CacheManager
from customer_manager.infrastructure.events.application_events import (
    ApplicationEventPublisher,
    ContextRefreshedEvent,
)
from customer_manager.infrastructure.logging.logging_config import get_structured_logger

logger = logging.getLogger(__name__)


class StartupListener:
    """
    Reports every cache name when a ContextRefreshedEvent is published

    Cache names are walked on a thread pool, so the report order is not
    guaranteed. With ``clear_caches`` enabled each cache is emptied as it
    is visited.
    """

    def __init__(
        self,
        cache_manager: CacheManager,
        clear_caches: bool = False,
        max_workers: int = 4,
    ):
        self._cache_manager = cache_manager
        self._clear_caches = clear_caches
        self._max_workers = max_workers
        self._logger = logging.getLogger(self.__class__.__name__)
        self._events = get_structured_logger(__name__)

    def register(self, publisher: ApplicationEventPublisher) -> None:
        """Subscribe to context refreshed events"""
        publisher.subscribe(ContextRefreshedEvent, self.on_application_event)

    def on_application_event(self, event: ContextRefreshedEvent) -> List[str]:
        """
        Handle the context refreshed event

        Returns:
            The cache names that were reported, in completion order
        """
        self._logger.info("Application context refreshed at %s", event.timestamp.isoformat())

        names = self._cache_manager.get_cache_names()
        if not names:
            self._logger.info("No caches registered")
            return []

        reported: List[str] = []
        workers = min(self._max_workers, len(names))
        with ThreadPoolExecutor(max_workers=workers, thread_name_prefix="startup-cache") as pool:
            futures = {pool.submit(self._visit_cache, name): name for name in names}
            for future in as_completed(futures):
                name = futures[future]
                try:
                    result = future.result()
                except Exception as e:  # pylint: disable=broad-except
                    self._logger.error("Failed to process cache %s: %s", name, e)
                    continue
                reported.append(result)

        self._events.info(
            "startup_cache_report",
            reported=len(reported),
            total=len(names),
            caches=sorted(reported),
        )
        return reported

    def _visit_cache(self, name: str) -> str:
        if self._clear_caches:
            self._cache_manager.get_cache(name).clear()
            self._logger.info("Cache cleared: %s", name)
        self._logger.info("Cache: %s", name)
        return name
