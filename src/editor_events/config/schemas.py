"""Application configuration schemas."""

from enum import Enum
from typing import List

from pydantic import BaseModel, ConfigDict, Field, field_validator


class LogLevel(str, Enum):
    """Log level enumeration."""
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class LogDestination(str, Enum):
    """Log destination enumeration."""
    FILE = "file"
    STDOUT = "stdout"
    BOTH = "both"


class FailurePolicy(str, Enum):
    """What the event manager does when a listener raises."""
    PROPAGATE = "propagate"
    ISOLATE = "isolate"


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = Field("INFO", description="Root log level")
    destination: str = Field("stdout", description="file, stdout or both")
    file_path: str = Field("logs/editor_events.log", description="Log file path")
    max_size_mb: int = Field(10, ge=1, description="Rotate after this many megabytes")
    backup_count: int = Field(5, ge=0, description="Rotated files to keep")
    format: str = Field(
        "%(asctime)s - %(levelname)s - %(name)s [%(caller_info)s] - %(message)s",
        description="stdlib logging format string",
    )

    @field_validator("level")
    @classmethod
    def validate_level(cls, v: str) -> str:
        level = v.upper()
        if level not in LogLevel.__members__:
            raise ValueError(
                f"Invalid log level: {v}. Must be one of: {', '.join(LogLevel.__members__)}"
            )
        return level

    @field_validator("destination")
    @classmethod
    def validate_destination(cls, v: str) -> str:
        destination = v.lower()
        try:
            LogDestination(destination)
        except ValueError:
            raise ValueError(
                f"Invalid log destination: {v}. "
                f"Must be one of: {', '.join(d.value for d in LogDestination)}"
            )
        return destination


class EventsConfig(BaseModel):
    """Event manager configuration."""

    event_types: List[str] = Field(
        default_factory=lambda: ["open", "save"],
        description="Event types declared on the editor's event manager",
    )
    strict: bool = Field(False, description="Raise on undeclared event types")
    failure_policy: FailurePolicy = Field(
        FailurePolicy.PROPAGATE, description="Listener failure handling"
    )

    @field_validator("event_types")
    @classmethod
    def validate_event_types(cls, v: List[str]) -> List[str]:
        for event_type in v:
            if not isinstance(event_type, str) or not event_type.strip():
                raise ValueError("event_types must contain non-empty strings")
        return v


class AppConfig(BaseModel):
    """Application configuration."""

    model_config = ConfigDict(extra="ignore")

    version: str = Field("1.0.0", description="Configuration version")
    logging: LoggingConfig = Field(default_factory=lambda: LoggingConfig())
    events: EventsConfig = Field(default_factory=lambda: EventsConfig())
