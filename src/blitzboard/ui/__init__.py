"""Qt integration for the match layer."""

from blitzboard.ui.qt_scheduler import QtScheduler, QtTask

__all__ = ["QtScheduler", "QtTask"]
