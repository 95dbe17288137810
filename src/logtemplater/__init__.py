"""Frequency-based log template discovery."""

__version__ = "0.1.0"
