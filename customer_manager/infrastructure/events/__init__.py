"""
Application lifecycle events
"""

from .application_events import (
    ApplicationEvent,
    ApplicationEventPublisher,
    ContextClosedEvent,
    ContextRefreshedEvent,
)
from .startup_listener import StartupListener

__all__ = [
    "ApplicationEvent",
    "ApplicationEventPublisher",
    "ContextClosedEvent",
    "ContextRefreshedEvent",
    "StartupListener",
]
