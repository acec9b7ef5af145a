"""A mouse-driven card-collecting slot machine game built on pygame."""

__version__ = "0.1.0"