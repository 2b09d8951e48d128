"""
Events Package
Publish/subscribe dispatch used by views to reach their helpers
"""
from tinyview.events.event import Event
from tinyview.events.event_manager import EventManager

__all__ = [
    'Event',
    'EventManager',
]
