"""Status-bar stock quote widget."""

__version__ = "0.1.0"
