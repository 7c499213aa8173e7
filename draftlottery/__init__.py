"""Weighted draft lottery with an animated elimination reveal."""

__version__ = "1.0.0"

__all__ = ["__version__"]