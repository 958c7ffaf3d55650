"""Event registration and dispatch to callbacks."""

from __future__ import annotations

from enum import IntEnum
from typing import Any, Callable

EVENT_MAX = (1 << 12) - 1
CALLBACK_MAX = 1 << 5
EVENT_CODE_MAX = (1 << 8) - 1

EventCallback = Callable[[Any, int], Any]


class EventCode(IntEnum):
    """Event codes registered by default on every bus."""

    APP_QUIT = 0
    KEY_PRESSED = 1
    KEY_RELEASED = 2
    BUTTON_PRESSED = 3
    BUTTON_RELEASED = 4
    MOUSE_MOVE = 5
    MOUSE_WHEEL = 6
    RESIZE = 7


class EventBus:
    """Registered event codes, each with an ordered list of callbacks.

    A callback receives ``(data, event_code)``; a truthy return value marks
    the event as handled and stops dispatch to later callbacks.
    """

    def __init__(self) -> None:
        self._callbacks: dict[int, list[EventCallback]] = {}
        for code in EventCode:
            self.register_event(code)

    @property
    def event_count(self) -> int:
        """Number of registered event codes."""
        return len(self._callbacks)

    def __contains__(self, event_code: object) -> bool:
        return isinstance(event_code, int) and int(event_code) in self._callbacks

    def is_registered(self, event_code: int) -> bool:
        """Return whether ``event_code`` is currently registered."""
        return event_code in self

    def callbacks(self, event_code: int) -> list[EventCallback]:
        """Return a copy of the callbacks registered for ``event_code``."""
        return list(self._registered(event_code))

    @staticmethod
    def _check_code(event_code: int) -> int:
        code = int(event_code)
        if not 0 <= code < EVENT_CODE_MAX:
            raise ValueError(f"event code {code} is out of range")
        return code

    def _registered(self, event_code: int) -> list[EventCallback]:
        code = self._check_code(event_code)
        try:
            return self._callbacks[code]
        except KeyError:
            raise KeyError(f"event code {code} is not registered") from None

    def register_event(self, event_code: int) -> None:
        """Register an event code; raise ValueError if it is already taken."""
        code = self._check_code(event_code)
        if code in self._callbacks:
            raise ValueError(f"event code {code} is already registered")
        self._callbacks[code] = []

    def unregister_event(self, event_code: int) -> None:
        """Unregister an event code and drop its callbacks."""
        self._registered(event_code)
        del self._callbacks[int(event_code)]

    def push_event(self, data: Any, event_code: int) -> bool:
        """Dispatch ``data`` to the callbacks; return True once one handles it."""
        for callback in list(self._registered(event_code)):
            if callback(data, event_code):
                return True
        return False

    def register_callback(self, event_code: int, callback: EventCallback) -> None:
        """Append ``callback`` to the callbacks of a registered event code."""
        self._registered(event_code).append(callback)

    def unregister_callback(self, event_code: int, callback: EventCallback) -> None:
        """Remove the first occurrence of ``callback``; raise ValueError if absent."""
        callbacks = self._registered(event_code)
        try:
            callbacks.remove(callback)
        except ValueError:
            raise ValueError("callback is not registered for this event") from None

    def shutdown(self) -> None:
        """Unregister every event code."""
        self._callbacks.clear()