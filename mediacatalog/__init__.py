"""Personal media catalog: REST backend and Python client."""

__version__ = "1.0.0"
