"""Utility functions for Vortex."""

from vortex.utils.logging import configure_logging, get_logger

__all__ = [
    "configure_logging",
    "get_logger",
]
