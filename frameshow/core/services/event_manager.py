"""
event_manager.py
----------------
Pub-sub event bus decoupling the pygame host, the navigation controller
and the main loop.
"""

from dataclasses import dataclass
from typing import Callable, Dict, List, Type
from frameshow.core.debug.debug_logger import DebugLogger


# ===========================================================
# Event Definitions
# ===========================================================

@dataclass(frozen=True)
class BaseEvent:
    """Base class for all events."""
    pass


@dataclass(frozen=True)
class ViewportResizedEvent(BaseEvent):
    """Dispatched when the rendering surface changes size."""
    width: float
    height: float


@dataclass(frozen=True)
class NavigationKeyEvent(BaseEvent):
    """Dispatched for a key press mapped to a navigation action."""
    action: str


@dataclass(frozen=True)
class FrameChangedEvent(BaseEvent):
    """Dispatched when the controller moves to another frame."""
    index: int
    total: int


@dataclass(frozen=True)
class TransitionFinishedEvent(BaseEvent):
    """Dispatched when a transition reaches progress 1."""
    token_id: int


# ===========================================================
# Event Manager
# ===========================================================

class EventManager:
    """Central event dispatcher using pub-sub pattern."""

    def __init__(self):
        self._subscribers: Dict[Type[BaseEvent], List[Callable]] = {}
        DebugLogger.init("EventManager initialized", category="event_manager")

    # ===========================================================
    # Subscription
    # ===========================================================

    def subscribe(self, event_type: Type[BaseEvent], callback: Callable) -> Callable[[], None]:
        """
        Register a callback for an event type.

        Args:
            event_type: Event class to listen for
            callback: Function to call when event fires

        Returns:
            Zero-argument function removing the subscription
        """
        subscribers = self._subscribers.setdefault(event_type, [])
        if callback not in subscribers:
            subscribers.append(callback)
            callback_name = getattr(callback, '__name__', repr(callback))
            DebugLogger.system(
                f"Subscribed '{callback_name}' to '{event_type.__name__}'",
                category="event_manager"
            )

        def unsubscribe():
            self.unsubscribe(event_type, callback)

        return unsubscribe

    def unsubscribe(self, event_type: Type[BaseEvent], callback: Callable) -> None:
        """Remove a callback from an event type."""
        if event_type in self._subscribers:
            try:
                self._subscribers[event_type].remove(callback)
            except ValueError:
                pass

    # ===========================================================
    # Dispatch
    # ===========================================================

    def dispatch(self, event: BaseEvent) -> None:
        """
        Send event to all registered callbacks.

        A failing callback is logged and does not stop delivery to the rest.
        """
        for callback in list(self._subscribers.get(type(event), ())):
            try:
                callback(event)
            except Exception as e:
                callback_name = getattr(callback, '__name__', repr(callback))
                DebugLogger.warn(f"Error in event callback {callback_name}: {e}")

    # ===========================================================
    # Lifecycle
    # ===========================================================

    def clear_all(self) -> None:
        """Remove all subscribers."""
        self._subscribers.clear()

    def get_subscriber_count(self, event_type: Type[BaseEvent] = None) -> int:
        """Number of subscribers for one event type, or in total."""
        if event_type:
            return len(self._subscribers.get(event_type, []))
        return sum(len(subs) for subs in self._subscribers.values())


# ===========================================================
# Singleton Access
# ===========================================================

_EVENTS = None


def get_events() -> EventManager:
    """Get or create the event manager singleton."""
    global _EVENTS
    if _EVENTS is None:
        _EVENTS = EventManager()
    return _EVENTS


def reset_events() -> None:
    """Reset the singleton."""
    global _EVENTS
    _EVENTS = None
