"""A small vertical space shooter with two levels and a high-score table."""

__version__ = "0.1.0"
__all__ = ["__version__"]