"""Minimal raw-mode terminal text editor."""

__all__ = [
    "actions",
    "app",
    "buffer",
    "errors",
    "input",
    "render",
    "runtime",
    "session",
    "terminal",
]

__version__ = "0.1.0"
