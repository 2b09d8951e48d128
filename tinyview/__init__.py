"""
tinyview
Template views with event-dispatched helpers
"""

from tinyview.events import Event, EventManager
from tinyview.exceptions import InvalidArgumentException
from tinyview.view import View, ViewFactory

__all__ = [
    'Event',
    'EventManager',
    'InvalidArgumentException',
    'View',
    'ViewFactory',
]
