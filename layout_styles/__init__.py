"""Style registry and cascade resolution for layout elements."""

__version__ = "0.1.0"
