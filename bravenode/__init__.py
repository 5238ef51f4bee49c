"""Brave Search workflow node."""

__version__ = "0.1.0"
