"""Harvest planning for planetary resources using linear programming."""

__version__ = "0.1.0"