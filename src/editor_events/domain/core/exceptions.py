# src/editor_events/domain/core/exceptions.py
from typing import Any, Iterable, List, Optional

class DomainException(Exception):
    """Base exception for all domain-specific errors."""
    pass

class ValidationError(DomainException):
    """Raised when domain validation fails."""
    def __init__(self, message: str, details: Any = None):
        super().__init__(message)
        self.details = details

class ConfigurationError(DomainException):
    """Raised when there's an issue with configuration."""
    def __init__(self, message: str, missing_fields: Optional[List[str]] = None):
        super().__init__(message)
        self.missing_fields = missing_fields or []

class UnknownEventTypeError(DomainException):
    """Raised by a strict event manager when an undeclared event type is used."""
    def __init__(self, event_type: str, known_types: Iterable[str]):
        self.event_type = event_type
        self.known_types = tuple(known_types)
        super().__init__(
            f"Unknown event type '{event_type}'. "
            f"Declared types: {', '.join(self.known_types) or '<none>'}"
        )
