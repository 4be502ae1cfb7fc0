"""Event infrastructure: the event manager and concrete listeners."""

from .event_manager import EventManager, create_event_manager
from .listeners import CallbackListener, EmailNotificationListener, LogOpenListener

__all__ = [
    "EventManager",
    "create_event_manager",
    "CallbackListener",
    "EmailNotificationListener",
    "LogOpenListener",
]
