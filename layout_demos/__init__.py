"""Custom layout containers and an interactive chart built on PySide6."""

__version__ = '0.1.0'
