"""A bounded in-memory byte stream with reader and writer views."""

__version__ = "0.1.0"
__all__ = ["stream"]