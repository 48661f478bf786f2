"""Version-control clients."""

from .base import VcsClient, VcsError
from .git import GitClient

__all__ = [
    'VcsClient',
    'VcsError',
    'GitClient',
]
