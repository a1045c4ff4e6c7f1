"""Classic data structures, algorithms and small simulations in plain Python."""

__version__ = "0.1.0"