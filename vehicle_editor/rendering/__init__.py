"""
Ride Vehicle Editor - Rendering

Pygame renderers for the park view and its overlays.
"""

from .park_renderer import ParkRenderer

__all__ = ["ParkRenderer"]
