"""A text adventure role-playing game for the terminal, with its world, items and actions."""

__version__ = "0.1.0"
__all__ = ["__version__"]