"""
Ride Vehicle Editor - Game Clock

Counts simulation ticks.
"""


class GameClock:
    """Tick counter advanced once per simulation update."""

    def __init__(self, ticks_elapsed: int = 0):
        self.ticks_elapsed = ticks_elapsed

    def tick(self, count: int = 1):
        self.ticks_elapsed += count
