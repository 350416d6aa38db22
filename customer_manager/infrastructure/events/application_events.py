"""Application lifecycle events and the publisher that dispatches them."""

import logging
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Callable, Dict, List, Type

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ApplicationEvent:
    """Base class for application events"""

    source: Any = None
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))


@dataclass(frozen=True)
class ContextRefreshedEvent(ApplicationEvent):
    """Published once the application is fully initialized"""


@dataclass(frozen=True)
class ContextClosedEvent(ApplicationEvent):
    """Published when the application shuts down"""


EventListener = Callable[[ApplicationEvent], Any]


class ApplicationEventPublisher:
    """Dispatches events to listeners registered for their exact type."""

    def __init__(self):
        self._listeners: Dict[Type[ApplicationEvent], List[EventListener]] = {}

    def subscribe(self, event_type: Type[ApplicationEvent], listener: EventListener) -> None:
        """Register a listener for an event type.

        Args:
            event_type: The event class to listen for
            listener: Callable invoked with the event
        """
        listeners = self._listeners.setdefault(event_type, [])
        if listener not in listeners:
            listeners.append(listener)
            logger.debug("Added listener for %s", event_type.__name__)

    def unsubscribe(self, event_type: Type[ApplicationEvent], listener: EventListener) -> None:
        """Remove a listener; unknown listeners are ignored."""
        listeners = self._listeners.get(event_type)
        if not listeners:
            return
        if listener in listeners:
            listeners.remove(listener)
            logger.debug("Removed listener for %s", event_type.__name__)
        if not listeners:
            del self._listeners[event_type]

    def listener_count(self, event_type: Type[ApplicationEvent]) -> int:
        """Number of listeners registered for an event type"""
        return len(self._listeners.get(event_type, ()))

    def publish(self, event: ApplicationEvent) -> int:
        """Publish an event to its listeners.

        A failing listener is logged and skipped.

        Returns:
            Number of listeners that handled the event without raising
        """
        listeners = list(self._listeners.get(type(event), ()))
        logger.debug("Publishing %s to %d listener(s)", type(event).__name__, len(listeners))

        handled = 0
        for listener in listeners:
            try:
                listener(event)
                handled += 1
            except Exception as e:  # pylint: disable=broad-except
                logger.error(
                    "Error in listener for %s: %s", type(event).__name__, e, exc_info=True
                )
        return handled
