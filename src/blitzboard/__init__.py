"""Blitzboard — timed chess match orchestration."""

__version__ = "0.1.0"
