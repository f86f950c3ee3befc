"""
Events

A publisher exposes an EventHook; subscribers attach handlers with ``+=``
and detach with ``-=``. Only the publisher fires it, and firing a hook with
no subscribers does nothing.
"""

from __future__ import annotations

from typing import Any, Callable, List

from primer.core.constants import DemoCategory
from primer.core.logging_config import get_logger
from primer.demos.registry import register_demo

logger = get_logger("demos.events")

EventHandler = Callable[..., None]


class EventHook:
    """Subscriber list for one event."""

    def __init__(self, name: str = "event"):
        self.name = name
        self._handlers: List[EventHandler] = []

    def __iadd__(self, handler: EventHandler) -> EventHook:
        if not callable(handler):
            raise TypeError(f"Event handler must be callable, got {type(handler).__name__}")
        self._handlers.append(handler)
        logger.debug(f"Subscribed {getattr(handler, '__name__', handler)!s} to '{self.name}'")
        return self

    def __isub__(self, handler: EventHandler) -> EventHook:
        # Detaching a handler that was never attached is a no-op
        for index in range(len(self._handlers) - 1, -1, -1):
            if self._handlers[index] == handler:
                del self._handlers[index]
                break
        return self

    def __len__(self) -> int:
        return len(self._handlers)

    @property
    def subscribers(self) -> List[EventHandler]:
        return list(self._handlers)

    def fire(self, *args: Any, **kwargs: Any) -> int:
        """Call every subscriber in order. Returns how many were called."""
        handlers = list(self._handlers)
        for handler in handlers:
            handler(*args, **kwargs)
        return len(handlers)


class Notifier:
    """Publisher owning the on_notify event."""

    def __init__(self):
        self.on_notify = EventHook("on_notify")

    def trigger_event(self) -> None:
        print("Triggering Event...\n")
        self.on_notify.fire("Event has been triggered.")


class Listener:
    @staticmethod
    def external_handler(message: str) -> None:
        print("Listener received: " + message)


def subscriber_a(message: str) -> None:
    print("Event received: " + message)


@register_demo("events", "Events", DemoCategory.FUNCTIONAL)
def run() -> None:
    """Publishing to subscribers with an EventHook."""
    notifier = Notifier()

    notifier.on_notify += subscriber_a
    notifier.on_notify += Listener.external_handler

    notifier.trigger_event()

    print(f"\nNumber of subscribers: {len(notifier.on_notify)}")

    notifier.on_notify -= subscriber_a
    notifier.on_notify -= subscriber_a
    print(f"After unsubscribing: {len(notifier.on_notify)}")

    # Closures capture state for a subscriber
    received = []
    notifier.on_notify += received.append
    notifier.trigger_event()
    print(f"Captured messages: {received}")
