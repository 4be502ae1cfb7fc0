"""Editor Events - Root Package.

An editor publishes file operations ("open", "save") through an event
manager to any number of listeners, synchronously and in subscription order.

Key Components:
    - application: the Editor publisher
    - domain: event vocabulary, listener contract and exceptions
    - infrastructure: the EventManager registry and concrete listeners
    - config: pydantic schemas and the configuration manager
    - helpers: structlog logging setup

Usage:
    >>> from editor_events import Editor, EmailNotificationListener
    >>> editor = Editor()
    >>> editor.events.subscribe("open", EmailNotificationListener("test@test.com"))
    >>> editor.open_file("test.txt")
"""

from ._package import PACKAGE_NAME, __version__
from .application.editor import Editor
from .domain.core.events import EditorEventType, EventListener
from .infrastructure.event.event_manager import EventManager, create_event_manager
from .infrastructure.event.listeners import (
    CallbackListener,
    EmailNotificationListener,
    LogOpenListener,
)

__package_name__ = PACKAGE_NAME

__all__ = [
    "__version__",
    "Editor",
    "EditorEventType",
    "EventListener",
    "EventManager",
    "create_event_manager",
    "CallbackListener",
    "EmailNotificationListener",
    "LogOpenListener",
]
