import logging

import pytest
import structlog

from editor_events.domain.core.events import EventListener
from editor_events.helpers.logger import DetailedFormatter
from editor_events.infrastructure.event.event_manager import EventManager


class RecordingListener(EventListener):
    """Listener that appends (name, event_type, payload) to a shared journal."""

    def __init__(self, name, journal=None):
        self.name = name
        self.journal = journal if journal is not None else []

    def update(self, event_type, payload):
        self.journal.append((self.name, event_type, payload))


class FailingListener(EventListener):
    def __init__(self, message="listener failed"):
        self.message = message

    def update(self, event_type, payload):
        raise RuntimeError(self.message)


@pytest.fixture(autouse=True)
def reset_logging():
    """Undo any structlog/root logger configuration made by a test."""
    root_logger = logging.getLogger()
    level = root_logger.level
    yield
    structlog.reset_defaults()
    for handler in root_logger.handlers[:]:
        if isinstance(handler.formatter, DetailedFormatter):
            root_logger.removeHandler(handler)
            handler.close()
    root_logger.setLevel(level)


@pytest.fixture
def journal():
    return []


@pytest.fixture
def event_manager():
    return EventManager("open", "save")


@pytest.fixture
def recording_listener_factory(journal):
    def factory(name):
        return RecordingListener(name, journal)
    return factory


@pytest.fixture
def failing_listener():
    return FailingListener()
