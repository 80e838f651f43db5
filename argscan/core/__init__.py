"""Core utilities for the argument scanner."""

__all__ = [
    "config",
    "messages",
    "optspec",
    "outcome",
    "reporter",
    "scanner",
    "sources",
    "text",
]
