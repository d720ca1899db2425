"""Core functionality for Jot.

This module contains the core data structures:
- Jot objects (Blob, Commit)
- Content store, staging index and commit history
- Flat-file persistence
- Repository management
- Configuration management
- Hashing utilities
"""

from jot.core.objects import JotObject, Blob, Commit, compute_tree_hash
from jot.core.repository import Repository, RepositoryStatus, CheckoutResult
from jot.core.hash import digest, hash_object, hash_file
from jot.core.store import ContentStore
from jot.core.index import Index
from jot.core.history import CommitGraph
from jot.core.records import RecordStore
from jot.core.config import Config, get_config
from jot.core.errors import (
    JotError,
    NotARepositoryError,
    WorkFileNotFoundError,
    StorageIOError,
    ContentMissingError,
    NothingToCommitError,
    CommitNotFoundError,
    NotTrackedError,
)

__all__ = [
    'JotObject',
    'Blob',
    'Commit',
    'compute_tree_hash',
    'Repository',
    'RepositoryStatus',
    'CheckoutResult',
    'ContentStore',
    'Index',
    'CommitGraph',
    'RecordStore',
    'Config',
    'get_config',
    'digest',
    'hash_object',
    'hash_file',
    'JotError',
    'NotARepositoryError',
    'WorkFileNotFoundError',
    'StorageIOError',
    'ContentMissingError',
    'NothingToCommitError',
    'CommitNotFoundError',
    'NotTrackedError',
]
