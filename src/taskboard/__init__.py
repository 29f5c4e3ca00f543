"""Task manager API, task stores and terminal client."""

__version__ = "0.1.0"
