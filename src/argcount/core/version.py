"""Version information for argcount."""

__version__ = "1.0.0"
