"""
Ride Vehicle Editor - Park Package

Simulation-side park model: coordinates, tile elements, ride vehicles,
the game clock, and the park file format.
"""
