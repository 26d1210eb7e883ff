"""Parsers for grbl and grblHAL controller responses and status report fields."""

__version__ = "0.1.0"