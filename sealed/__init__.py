"""Sealed hierarchies versus enumerations, with a tiny message printer."""

__version__ = "0.1.0"
