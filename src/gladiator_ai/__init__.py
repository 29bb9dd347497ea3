"""Perception, reactive and utility-planning brains for arena combat agents."""

__version__ = "0.1.0"
