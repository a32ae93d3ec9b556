"""Helpers for a grid raycaster: text, memory, list and formatting utilities, colours and images."""

__version__ = "0.1.0"