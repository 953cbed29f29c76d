"""
Ride Vehicle Editor - Events

Lightweight named callbacks used to tell observers (windows, renderers)
that game state they show has changed.
"""

from collections import defaultdict
from typing import Callable

REFRESH_VEHICLE = "refresh-vehicle"


class EventBus:
    """Maps event names to subscribed callbacks."""

    def __init__(self):
        self.subscribers: dict[str, list[Callable]] = defaultdict(list)

    def subscribe(self, name: str, callback: Callable):
        self.subscribers[name].append(callback)

    def unsubscribe(self, name: str, callback: Callable):
        if callback in self.subscribers[name]:
            self.subscribers[name].remove(callback)

    def invoke(self, name: str, *args):
        """Call every subscriber of an event, in subscription order."""
        for callback in list(self.subscribers[name]):
            callback(*args)
