"""Version information for neo-cache."""

__version__ = "1.0.0"
