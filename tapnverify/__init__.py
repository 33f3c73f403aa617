"""Timed-arc Petri net models, queries, verification options and waiting lists."""

__version__ = "0.1.0"