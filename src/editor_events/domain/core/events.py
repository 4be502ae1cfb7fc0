from __future__ import annotations
from abc import ABC, abstractmethod
from enum import Enum
from typing import Any, Optional


class EditorEventType(str, Enum):
    """Event types published by the editor."""
    OPEN = "open"
    SAVE = "save"

    def __str__(self) -> str:
        return self.value


class EventListener(ABC):
    """Base class for event listeners."""
    @abstractmethod
    def update(self, event_type: Optional[str], payload: Any) -> None:
        """React to an event of ``event_type`` carrying ``payload``."""
        pass
