"""A terminal card game of poker hands played against a rising blind."""

__version__ = "0.1.0"
__all__ = ["__version__"]