"""Seat direction guide for regional railway coaches."""

__version__ = "1.0.0"
