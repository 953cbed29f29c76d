"""
Ride Vehicle Editor - Editor Core

Constants and capability protocols shared by tools and controllers.
"""
