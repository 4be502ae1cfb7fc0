# src/editor_events/infrastructure/event/listeners.py
import os
from pathlib import Path
from typing import Any, Callable, List, Optional

from editor_events.domain.core.events import EventListener
from editor_events.helpers.logger import get_logger


def _file_name(payload: Any) -> Optional[str]:
    """Name of the file carried by payload, None when there is none."""
    if payload is None:
        return None
    if isinstance(payload, (str, os.PathLike)):
        return Path(payload).name
    return getattr(payload, "name", str(payload))


class EmailNotificationListener(EventListener):
    """
    Notifies a mailbox about file operations.

    Messages are composed and kept in ``outbox``; delivery is logged only.
    """

    def __init__(self, email: str):
        self.email = email
        self.outbox: List[str] = []
        self._logger = get_logger(__name__)

    def update(self, event_type: Optional[str], payload: Any) -> None:
        message = (
            f"Email to {self.email}: Someone has performed {event_type} "
            f"operation with the file {_file_name(payload)}"
        )
        self.outbox.append(message)
        self._logger.info(message, event_type=str(event_type), recipient=self.email)


class LogOpenListener(EventListener):
    """Appends a line per file operation to a log file."""

    def __init__(self, log_path: str):
        self.log_path = log_path
        self._logger = get_logger(__name__)

    def update(self, event_type: Optional[str], payload: Any) -> None:
        line = (
            f"Save to log {self.log_path}: Someone has performed {event_type} "
            f"operation with the file {_file_name(payload)}"
        )
        log_dir = os.path.dirname(self.log_path)
        if log_dir:
            os.makedirs(log_dir, exist_ok=True)
        with open(self.log_path, "a") as f:
            f.write(line + "\n")
        self._logger.info(line, event_type=str(event_type), log_path=self.log_path)


class CallbackListener(EventListener):
    """Adapts a plain ``callback(event_type, payload)`` to the listener contract."""

    def __init__(self, callback: Callable[[Optional[str], Any], None]):
        self.callback = callback

    def update(self, event_type: Optional[str], payload: Any) -> None:
        self.callback(event_type, payload)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, CallbackListener):
            return self.callback == other.callback
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self.callback)

    def __repr__(self) -> str:
        return f"CallbackListener({self.callback!r})"
