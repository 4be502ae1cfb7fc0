"""Event Manager - declared event types, ordered listeners, synchronous notify."""
from typing import Any, Dict, List, Optional, Tuple, Union

from editor_events.config.schemas import EventsConfig, FailurePolicy
from editor_events.domain.core.events import EventListener
from editor_events.domain.core.exceptions import UnknownEventTypeError
from editor_events.helpers.logger import get_logger


class EventManager:
    """
    Registry mapping each declared event type to an ordered list of listeners.

    Event types are fixed at construction. Using an undeclared type is a
    silent no-op, or raises UnknownEventTypeError when ``strict`` is set.

    Failure policies:
    - "propagate": the first listener error reaches the caller and the
      remaining listeners are skipped
    - "isolate": listener errors are logged and notification continues

    Not thread-safe; callers sharing a manager across threads must lock.
    """

    def __init__(
        self,
        *event_types: str,
        strict: bool = False,
        failure_policy: Union[str, FailurePolicy] = FailurePolicy.PROPAGATE,
    ):
        """Declare the event types this manager can publish."""
        try:
            self.failure_policy = FailurePolicy(failure_policy)
        except ValueError:
            valid_policies = [p.value for p in FailurePolicy]
            raise ValueError(
                f"Invalid failure policy '{failure_policy}'. Must be one of: {valid_policies}"
            )

        self.strict = strict
        self._listeners: Dict[str, List[EventListener]] = {}
        self._logger = get_logger(__name__)

        for event_type in event_types:
            self._listeners.setdefault(str(event_type), [])

    @property
    def event_types(self) -> Tuple[str, ...]:
        """Declared event types, in declaration order."""
        return tuple(self._listeners)

    def is_registered(self, event_type: Optional[str]) -> bool:
        return event_type is not None and str(event_type) in self._listeners

    def has_listeners(self, event_type: Optional[str]) -> bool:
        return bool(self._lookup(event_type))

    def subscribe(self, event_type: Optional[str], listener: EventListener) -> None:
        """Append listener to the list for event_type. Duplicates are kept."""
        listeners = self._resolve(event_type)
        if listeners is None:
            return
        listeners.append(listener)
        self._logger.debug(
            "Subscribed listener",
            event_type=str(event_type),
            listener=type(listener).__name__,
            listener_count=len(listeners),
        )

    def unsubscribe(self, event_type: Optional[str], listener: EventListener) -> None:
        """Remove the first matching listener for event_type, if present."""
        listeners = self._resolve(event_type)
        if listeners is None:
            return
        try:
            listeners.remove(listener)
        except ValueError:
            self._logger.debug(
                "Listener not subscribed",
                event_type=str(event_type),
                listener=type(listener).__name__,
            )
            return
        self._logger.debug(
            "Unsubscribed listener",
            event_type=str(event_type),
            listener=type(listener).__name__,
            listener_count=len(listeners),
        )

    def notify(self, event_type: Optional[str], payload: Any = None) -> int:
        """
        Call update(event_type, payload) on every listener of event_type.

        Listeners run in subscription order against a snapshot taken when the
        call starts. Returns the number of listeners invoked.
        """
        listeners = self._resolve(event_type)
        if listeners is None:
            return 0

        snapshot = list(listeners)
        self._logger.debug(
            "Notifying listeners", event_type=str(event_type), listener_count=len(snapshot)
        )

        invoked = 0
        for listener in snapshot:
            invoked += 1
            if self.failure_policy is FailurePolicy.PROPAGATE:
                listener.update(event_type, payload)
                continue
            try:
                listener.update(event_type, payload)
            except Exception:
                self._logger.error(
                    "Event listener failed",
                    event_type=str(event_type),
                    listener=type(listener).__name__,
                    exc_info=True,
                )
                # Continue with other listeners
        return invoked

    def get_listeners(self, event_type: Optional[str]) -> List[EventListener]:
        """Copy of the listeners subscribed to event_type (empty if unknown)."""
        return list(self._lookup(event_type))

    def get_registered_listeners(self) -> Dict[str, int]:
        """Get count of subscribed listeners by event type (for debugging)."""
        return {event_type: len(listeners) for event_type, listeners in self._listeners.items()}

    def _lookup(self, event_type: Optional[str]) -> List[EventListener]:
        if event_type is None:
            return []
        return self._listeners.get(str(event_type), [])

    def _resolve(self, event_type: Optional[str]) -> Optional[List[EventListener]]:
        """Listener list for event_type, None on a lookup miss in lenient mode."""
        if self.is_registered(event_type):
            return self._listeners[str(event_type)]
        if self.strict:
            raise UnknownEventTypeError(str(event_type), self.event_types)
        self._logger.debug("Ignoring undeclared event type", event_type=str(event_type))
        return None


# Factory function for wiring from configuration
def create_event_manager(
    *event_types: str, config: Optional[EventsConfig] = None
) -> EventManager:
    """Create an event manager, taking types and policies from config when given."""
    if config is None:
        return EventManager(*event_types)
    return EventManager(
        *(event_types or config.event_types),
        strict=config.strict,
        failure_policy=config.failure_policy,
    )
