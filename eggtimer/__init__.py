"""Egg Timer — a preset countdown with a progress ring and an alarm."""

__version__ = "0.1.0"
