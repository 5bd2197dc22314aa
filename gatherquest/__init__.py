"""A top-down resource gathering game and the systems that drive it."""

__version__ = "0.1.0"
__all__ = ["__version__"]