"""Ejectd - safe removal tool for external drives."""

__version__ = "1.0.0"
