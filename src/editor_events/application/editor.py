"""Editor application service - publishes file operations to its event manager."""
from pathlib import Path
from typing import Optional, Union

from editor_events.domain.core.events import EditorEventType
from editor_events.domain.core.exceptions import ValidationError
from editor_events.helpers.logger import get_logger
from editor_events.infrastructure.event.event_manager import EventManager


class Editor:
    """
    Tracks the currently open file and notifies listeners about it.

    The event manager is created with the "open" and "save" types unless one
    is injected.
    """

    def __init__(self, events: Optional[EventManager] = None):
        self.events = events if events is not None else EventManager(
            EditorEventType.OPEN.value, EditorEventType.SAVE.value
        )
        self._file: Optional[Path] = None
        self._logger = get_logger(__name__)

    @property
    def file(self) -> Optional[Path]:
        return self._file

    def open_file(self, file_path: Union[str, Path]) -> None:
        """Make file_path the current file and publish an "open" event."""
        if str(file_path) == "":
            raise ValidationError("file_path must be a non-empty path", details=file_path)
        self._file = Path(file_path)
        self._logger.debug("File opened", file=str(self._file))
        self.events.notify(EditorEventType.OPEN.value, self._file)

    def save_file(self) -> None:
        """Publish a "save" event for the current file; no-op when none is open."""
        if self._file is None:
            self._logger.debug("Save requested with no open file")
            return
        self.events.notify(EditorEventType.SAVE.value, self._file)
