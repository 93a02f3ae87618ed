"""Helpers for characters, numbers, bits, text, formatting, containers and streams."""

__version__ = "0.1.0"