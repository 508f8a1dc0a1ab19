"""Vortex - repository deployment form service."""

__version__ = "0.1.0"
