"""Video production tracking and YouTube publishing helpers."""

__version__ = "0.1.0"
