"""HTTP service listing users' notification rules, with tools to format and dispatch them."""

__version__ = "0.1.0"
__all__ = ["__version__"]