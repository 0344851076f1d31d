"""Classic algorithm and data-structure solutions as plain Python functions."""

__version__ = "0.1.0"