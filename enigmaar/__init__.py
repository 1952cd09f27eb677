"""Reference tables, models and input-checking services for astrological research."""

__version__ = "0.1.0"