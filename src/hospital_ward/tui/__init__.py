"""Textual dashboard for the hospital ward."""

from .app import WardApp

__all__ = ["WardApp"]
