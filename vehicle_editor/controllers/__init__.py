"""
Ride Vehicle Editor - Controllers Module

Drag state, position resolution, action replication and game-state
callbacks for editor tools.
"""
