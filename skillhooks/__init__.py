"""Project analysis and session tracking hooks for coding assistants."""

__version__ = "0.3.0"
