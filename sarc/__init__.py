"""Scheduling service for rooms, lectures and resource reservations, backed by SQLite."""

__version__ = "0.1.0"

__all__ = ["__version__"]