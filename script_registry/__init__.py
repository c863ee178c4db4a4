"""Script registry: shell automation scripts and the customers they target."""

__version__ = "0.1.0"
