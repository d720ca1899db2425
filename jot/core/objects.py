"""Content objects for Jot."""

from abc import ABC, abstractmethod
from datetime import datetime, timezone
from typing import Mapping, Optional
from .hash import digest


class JotObject(ABC):
    """
    Base class for all Jot objects.

    An object's identity is a pure function of its type and content.
    Objects are read-only once built; changing anything means building
    a new object.
    """

    def __init__(self):
        self._hash: Optional[str] = None

    @abstractmethod
    def serialize(self) -> bytes:
        """
        Serialize object to bytes.

        Returns:
            bytes: Canonical object content
        """
        pass

    @property
    def type(self) -> str:
        """
        Return object type name.

        Returns:
            str: Object type (blob, commit)
        """
        return self.__class__.__name__.lower()

    @property
    def content(self) -> bytes:
        """Canonical content bytes."""
        return self.serialize()

    def compute_hash(self) -> str:
        """
        Compute and cache object hash.

        Format hashed: <type> <size>\\0<content>

        Returns:
            str: 40-character SHA-1 hash
        """
        if self._hash is None:
            self._hash = digest(self.type, self.serialize())
        return self._hash

    @property
    def hash(self) -> str:
        """
        Get object hash.

        Returns:
            str: 40-character SHA-1 hash
        """
        return self.compute_hash()

    def __eq__(self, other) -> bool:
        if not isinstance(other, JotObject):
            return NotImplemented
        return self.type == other.type and self.hash == other.hash

    def __hash__(self) -> int:
        return hash((self.type, self.hash))


class Blob(JotObject):
    """
    Represents file content.

    A blob stores the raw content of a file without any metadata
    like filename or permissions.
    """

    def __init__(self, data: Optional[bytes] = None):
        """
        Initialize a blob.

        Args:
            data: File content as bytes
        """
        super().__init__()
        self._data = bytes(data or b'')

    @property
    def data(self) -> bytes:
        """Raw file content."""
        return self._data

    def serialize(self) -> bytes:
        return self._data

    @classmethod
    def create(cls, data: bytes) -> 'Blob':
        """Create a blob from raw bytes."""
        return cls(data)

    @classmethod
    def from_file(cls, filepath: str) -> 'Blob':
        """
        Create blob from file.

        Args:
            filepath: Path to file

        Returns:
            Blob: New blob containing file content
        """
        with open(filepath, 'rb') as f:
            return cls(f.read())

    def __repr__(self) -> str:
        """String representation of blob."""
        return f"Blob(hash={self.hash[:7]}, size={len(self._data)})"


def compute_tree_hash(entries: Mapping[str, str]) -> str:
    """
    Compute the tree hash of a staged file set.

    Pairs are sorted by filename so the result depends only on the set of
    (filename, content hash) pairs, not on the order they were staged in.

    Args:
        entries: Mapping of filename to content hash

    Returns:
        str: 40-character SHA-1 hash
    """
    lines = [f"{name} {entries[name]}\n" for name in sorted(entries)]
    return digest('tree', ''.join(lines).encode())


class Commit(JotObject):
    """
    Represents a commit with metadata.

    A commit captures:
    - Tree hash of the staged file set
    - Parent commit (None for the first commit)
    - Author
    - Timestamp (UTC, captured when the commit is created)
    - Commit message

    Commits come from one of two constructors. ``create`` builds a fresh
    commit and derives its timestamp and hash. ``restore`` rebuilds a
    commit read back from disk and keeps the hash it was stored under.
    """

    def __init__(
        self,
        tree_hash: str,
        parent_hash: Optional[str],
        author: str,
        timestamp: datetime,
        message: str,
        commit_hash: Optional[str] = None,
    ):
        super().__init__()
        self._tree_hash = tree_hash
        self._parent_hash = parent_hash
        self._author = author
        self._timestamp = timestamp
        self._message = message
        self._hash = commit_hash

    @property
    def tree_hash(self) -> str:
        return self._tree_hash

    @property
    def parent_hash(self) -> Optional[str]:
        return self._parent_hash

    @property
    def author(self) -> str:
        return self._author

    @property
    def timestamp(self) -> datetime:
        return self._timestamp

    @property
    def message(self) -> str:
        return self._message

    @property
    def is_root(self) -> bool:
        """True for the first commit in a history."""
        return self._parent_hash is None

    def serialize(self) -> bytes:
        """
        Serialize commit to its canonical form.

        Format:
        tree <tree-hash>
        parent <parent-hash>  (omitted for the first commit)
        author <author>
        date <ISO-8601 timestamp>

        <commit message>

        Returns:
            bytes: Serialized commit data
        """
        lines = [f'tree {self._tree_hash}']

        if self._parent_hash is not None:
            lines.append(f'parent {self._parent_hash}')

        lines.append(f'author {self._author}')
        lines.append(f'date {self._timestamp.isoformat()}')
        lines.append('')
        lines.append(self._message)

        return ('\n'.join(lines) + '\n').encode()

    @classmethod
    def create(
        cls,
        tree_hash: str,
        parent_hash: Optional[str],
        author: str,
        message: str,
    ) -> 'Commit':
        """
        Create a new commit stamped with the current UTC time.

        Args:
            tree_hash: Hash of the staged file set
            parent_hash: Hash of the previous commit, or None
            author: Author name
            message: Commit message

        Returns:
            Commit: New commit object
        """
        return cls(
            tree_hash=tree_hash,
            parent_hash=parent_hash,
            author=author,
            timestamp=datetime.now(timezone.utc),
            message=message,
        )

    @classmethod
    def restore(
        cls,
        commit_hash: str,
        tree_hash: str,
        parent_hash: Optional[str],
        author: str,
        timestamp: datetime,
        message: str,
    ) -> 'Commit':
        """
        Rebuild a stored commit with its original hash and timestamp.

        The hash is trusted as given and not recomputed.
        """
        return cls(
            tree_hash=tree_hash,
            parent_hash=parent_hash,
            author=author,
            timestamp=timestamp,
            message=message,
            commit_hash=commit_hash,
        )

    def __repr__(self) -> str:
        """String representation."""
        parent_info = f", parent={self._parent_hash[:7]}" if self._parent_hash else ""
        msg_preview = self._message.split('\n')[0][:50]
        return f"Commit(hash={self.hash[:7]}{parent_info}, msg='{msg_preview}')"
