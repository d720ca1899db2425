"""Index (staging area) implementation."""

from typing import Dict, Iterator, Mapping, Optional


class Index:
    """
    Jot index (staging area) implementation.

    The index maps each working-tree filename to the content hash that
    will go into the next commit. Entries keep the order they were first
    staged in.
    """

    def __init__(self, entries: Optional[Mapping[str, str]] = None):
        """Initialize index, optionally from existing entries."""
        self.entries: Dict[str, str] = dict(entries or {})

    def stage(self, filename: str, content_hash: str) -> None:
        """Add or update the entry for a file."""
        self.entries[filename] = content_hash

    def unstage(self, filename: str) -> bool:
        """
        Remove entry from index.

        Returns:
            bool: False if the file was not staged
        """
        if filename not in self.entries:
            return False
        del self.entries[filename]
        return True

    def get(self, filename: str) -> Optional[str]:
        """Get staged hash for a file."""
        return self.entries.get(filename)

    def snapshot(self) -> Dict[str, str]:
        """Return a copy of the staged entries."""
        return dict(self.entries)

    def replace(self, entries: Mapping[str, str]) -> None:
        """Replace all entries."""
        self.entries = dict(entries)

    def clear(self) -> None:
        """Clear all entries from index."""
        self.entries.clear()

    def __contains__(self, filename: str) -> bool:
        return filename in self.entries

    def __iter__(self) -> Iterator[str]:
        return iter(list(self.entries))

    def __len__(self) -> int:
        """Number of entries in index."""
        return len(self.entries)

    def __repr__(self) -> str:
        """String representation."""
        return f"Index(entries={len(self.entries)})"
