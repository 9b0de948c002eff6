"""Helpers for the parallel bootstrap workshop."""

__version__ = "0.1.0"
