"""Version information for field-access."""

__version__ = "0.3.0"
