"""
Gesture Configuration

Loads the XML gesture-to-action configuration of a gesture daemon,
bootstraps it on first run and hot-reloads it on change.
"""

__version__ = "1.0.0"
