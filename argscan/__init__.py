"""Unix getopt-style short option scanning with ``@file`` argument indirection."""

from .core.outcome import OutcomeKind, ScanError, ScanOutcome
from .core.scanner import ArgumentScanner, ScannerConfig
from .core.sources import UnreadableArgumentFile

__all__ = [
    "ArgumentScanner",
    "OutcomeKind",
    "ScanError",
    "ScanOutcome",
    "ScannerConfig",
    "UnreadableArgumentFile",
]

__version__ = "0.1.0"
