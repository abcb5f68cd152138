"""Convert legacy documents of unknown encoding into clean UTF-8 text."""

__version__ = "0.1.0"
