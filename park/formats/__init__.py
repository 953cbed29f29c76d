"""
Park file formats.
"""

from .park_data import ParkData

__all__ = ["ParkData"]
