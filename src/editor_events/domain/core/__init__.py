"""Core domain types: listener contract, event vocabulary and exceptions."""

from .events import EditorEventType, EventListener
from .exceptions import (
    ConfigurationError,
    DomainException,
    UnknownEventTypeError,
    ValidationError,
)

__all__: list[str] = [
    "EditorEventType",
    "EventListener",
    "DomainException",
    "ValidationError",
    "ConfigurationError",
    "UnknownEventTypeError",
]
