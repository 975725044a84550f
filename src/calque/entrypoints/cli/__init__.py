"""The ``calque`` command-line interface."""

from .main import calque

__all__ = ["calque"]
