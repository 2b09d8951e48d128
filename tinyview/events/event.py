"""
Event
Value object passed to every subscriber of a triggered event
"""
from typing import Any, Optional


class Event:
    """
    Event carrying a data payload and a stop flag

    Subscribers may replace the data and stop the event; once an event is
    stopped the manager does not call any further subscriber.

    Example:
        event = Event(None, {'arguments': [1, 2]})
        event.set_stopped(True)
        manager.trigger('view.call.helper.sum', event)
        event.get_data()
    """

    def __init__(self, name: Optional[str] = None, data: Any = None):
        self._name = name
        self._data = {} if data is None else data
        self._stopped = False

    def get_name(self) -> Optional[str]:
        return self._name

    def set_name(self, name: str) -> 'Event':
        self._name = name
        return self

    def get_data(self) -> Any:
        return self._data

    def set_data(self, data: Any) -> 'Event':
        self._data = data
        return self

    def is_stopped(self) -> bool:
        return self._stopped

    def set_stopped(self, stopped: bool) -> 'Event':
        self._stopped = bool(stopped)
        return self

    def __repr__(self):
        return f'Event(name={self._name!r}, stopped={self._stopped})'
