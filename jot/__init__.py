"""Jot - a minimal local version control engine."""

__version__ = '0.1.0'

from jot.core.repository import Repository
from jot.core.objects import JotObject, Blob, Commit

__all__ = [
    'Repository',
    'JotObject',
    'Blob',
    'Commit',
]
