"""
Event Manager
Named publish/subscribe registry with priorities and stoppable dispatch
"""
import itertools
from typing import Callable, Dict, List, Optional, Tuple

from tinyview.defaults import DEFAULT_EVENT_PRIORITY
from tinyview.events.event import Event
from tinyview.logging import getLogger

logger = getLogger(__name__)

# (priority, registration order, callback)
_Subscriber = Tuple[int, int, Callable[[Event], None]]


class EventManager:
    """
    Synchronous event dispatcher

    Subscribers are called with the event as their only argument, the
    highest priority first; equal priorities run in registration order.
    Dispatch ends after a subscriber returns while the event is stopped,
    so the first subscriber always runs even when the event was stopped
    before it was triggered.

    Example:
        manager = EventManager()
        manager.subscribe('user.created', send_welcome_mail)
        manager.trigger('user.created', Event(None, {'user': user}))
    """

    def __init__(self):
        self._subscribers: Dict[str, List[_Subscriber]] = {}
        self._counter = itertools.count()

    def subscribe(
        self,
        event_name: str,
        callback: Callable[[Event], None],
        priority: int = DEFAULT_EVENT_PRIORITY
    ) -> 'EventManager':
        subscribers = self._subscribers.setdefault(event_name, [])
        subscribers.append((priority, next(self._counter), callback))
        subscribers.sort(key=lambda item: (-item[0], item[1]))
        return self

    def unsubscribe(self, event_name: str, callback: Callable[[Event], None]) -> bool:
        """
        Remove a callback from an event

        Returns:
            True if the callback was subscribed
        """
        subscribers = self._subscribers.get(event_name, [])
        remaining = [item for item in subscribers if item[2] != callback]

        if len(remaining) == len(subscribers):
            return False

        if remaining:
            self._subscribers[event_name] = remaining
        else:
            del self._subscribers[event_name]

        return True

    def has_subscribers(self, event_name: str) -> bool:
        return bool(self._subscribers.get(event_name))

    def get_subscribers(self, event_name: str) -> List[Callable[[Event], None]]:
        """Callbacks of an event in dispatch order"""
        return [item[2] for item in self._subscribers.get(event_name, [])]

    def trigger(self, event_name: str, event: Optional[Event] = None) -> Event:
        """
        Dispatch an event to its subscribers

        Args:
            event_name: Name subscribers were registered under
            event: Event to pass along (a fresh one is created if omitted)

        Returns:
            The dispatched event
        """
        if event is None:
            event = Event(event_name)
        elif event.get_name() is None:
            event.set_name(event_name)

        # Snapshot so subscribers may (un)subscribe while dispatching
        subscribers = list(self._subscribers.get(event_name, []))
        logger.debug("Triggering %s (%d subscribers)", event_name, len(subscribers))

        for _priority, _order, callback in subscribers:
            callback(event)
            if event.is_stopped():
                break

        return event

    def clear(self, event_name: Optional[str] = None):
        """Remove the subscribers of one event, or of all events"""
        if event_name is None:
            self._subscribers.clear()
        else:
            self._subscribers.pop(event_name, None)
