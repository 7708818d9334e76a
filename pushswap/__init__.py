"""Checking and ranking integer arguments, with text, buffer, list and output helpers."""

__version__ = "0.1.0"