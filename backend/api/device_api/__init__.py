"""Smart home device API."""

__version__ = "1.0.0"
