"""
cockpitlink - Coordinate transfer link for DCS World cockpits

Compiles navigation points into cockpit button presses and talks to the
DCS export script that plays them back.
"""

__version__ = "0.3.0"
