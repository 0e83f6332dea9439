"""Loading and validating tile-based puzzle maps read from .ber files."""

__version__ = "0.1.0"