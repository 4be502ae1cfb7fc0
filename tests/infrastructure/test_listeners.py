from pathlib import Path

from structlog.testing import capture_logs

from editor_events.infrastructure.event.listeners import (
    CallbackListener,
    EmailNotificationListener,
    LogOpenListener,
)


class TestEmailNotificationListener:
    def test_message_names_recipient_operation_and_file(self):
        listener = EmailNotificationListener("test@test.com")

        listener.update("open", Path("docs/test.txt"))

        assert listener.outbox == [
            "Email to test@test.com: Someone has performed open operation with the file test.txt"
        ]

    def test_missing_payload_is_reported_as_none(self):
        listener = EmailNotificationListener("test@test.com")
        listener.update("save", None)
        assert listener.outbox[0].endswith("with the file None")

    def test_message_is_logged(self):
        with capture_logs() as logs:
            listener = EmailNotificationListener("test@test.com")
            listener.update("open", "test.txt")

        assert logs[0]["log_level"] == "info"
        assert logs[0]["recipient"] == "test@test.com"
        assert logs[0]["event"].startswith("Email to test@test.com")


class TestLogOpenListener:
    def test_appends_one_line_per_update(self, tmp_path):
        log_path = tmp_path / "logs" / "file.txt"
        listener = LogOpenListener(str(log_path))

        listener.update("open", Path("test.txt"))
        listener.update("save", Path("test.txt"))

        lines = log_path.read_text().splitlines()
        assert lines == [
            f"Save to log {log_path}: Someone has performed open operation with the file test.txt",
            f"Save to log {log_path}: Someone has performed save operation with the file test.txt",
        ]


class TestCallbackListener:
    def test_forwards_event_type_and_payload(self):
        received = []
        listener = CallbackListener(lambda event_type, payload: received.append((event_type, payload)))

        listener.update("open", "test.txt")

        assert received == [("open", "test.txt")]

    def test_adapters_of_same_callback_are_equal(self, event_manager):
        def callback(event_type, payload):
            pass

        event_manager.subscribe("open", CallbackListener(callback))
        event_manager.unsubscribe("open", CallbackListener(callback))

        assert not event_manager.has_listeners("open")
        assert hash(CallbackListener(callback)) == hash(callback)
