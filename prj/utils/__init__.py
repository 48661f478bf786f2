"""Utilities package for prj."""

from .progress import Spinner

__all__ = [
    'Spinner',
]
