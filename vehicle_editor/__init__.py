"""
Ride Vehicle Editor - Editor Package

Interactive ride-vehicle editing tools, starting with the vehicle dragger.
"""
