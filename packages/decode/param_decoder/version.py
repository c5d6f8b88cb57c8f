"""Version information for param-decoder."""

__version__ = "0.3.0"
