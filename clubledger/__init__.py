"""Replay a computer club's daily event log and report table revenue."""

__version__ = "0.1.0"