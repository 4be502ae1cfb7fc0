"""Tests for configuration schemas."""

import pytest
from pydantic import ValidationError

from editor_events.config.schemas import AppConfig, EventsConfig, FailurePolicy, LoggingConfig


class TestLoggingConfig:
    def test_level_is_normalised(self):
        assert LoggingConfig(level="debug").level == "DEBUG"

    def test_invalid_level_rejected(self):
        with pytest.raises(ValidationError):
            LoggingConfig(level="verbose")

    def test_destination_is_normalised(self):
        assert LoggingConfig(destination="BOTH").destination == "both"

    def test_invalid_destination_rejected(self):
        with pytest.raises(ValidationError):
            LoggingConfig(destination="syslog")


class TestEventsConfig:
    def test_defaults(self):
        config = EventsConfig()
        assert config.event_types == ["open", "save"]
        assert config.failure_policy is FailurePolicy.PROPAGATE

    def test_blank_event_type_rejected(self):
        with pytest.raises(ValidationError):
            EventsConfig(event_types=["open", " "])


class TestAppConfig:
    def test_unknown_sections_ignored(self):
        config = AppConfig.model_validate({"events": {"strict": True}, "server": {"port": 80}})
        assert config.events.strict is True
        assert config.logging.level == "INFO"
