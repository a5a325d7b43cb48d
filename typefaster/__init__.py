"""Keyboard layouts, key outline geometry and typing statistics for a typing tutor."""

__version__ = "0.1.0"