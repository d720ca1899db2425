"""Linear commit history and per-commit snapshots."""

from typing import Dict, Iterator, List, Mapping, Optional
from .objects import Commit


class CommitGraph:
    """
    Append-only sequence of commits in the order they were made.

    Alongside the commits it keeps the snapshot table: for each commit
    hash, the complete filename -> content hash mapping that was staged
    when the commit was created.

    The graph does not check parent links. Jot has a single linear
    history, so the repository supplies the current HEAD as parent.
    """

    def __init__(self):
        self._commits: List[Commit] = []
        self._by_hash: Dict[str, Commit] = {}
        self._snapshots: Dict[str, Dict[str, str]] = {}

    def append(self, commit: Commit, snapshot: Mapping[str, str]) -> None:
        """Record a commit and the file set it captured."""
        self._commits.append(commit)
        self._by_hash[commit.hash] = commit
        self._snapshots[commit.hash] = dict(snapshot)

    def find_by_hash(self, commit_hash: str) -> Optional[Commit]:
        """Get commit by full hash, or None."""
        return self._by_hash.get(commit_hash)

    def find_by_prefix(self, prefix: str) -> List[Commit]:
        """Get every commit whose hash starts with prefix."""
        return [c for c in self._commits if c.hash.startswith(prefix)]

    def snapshot_for(self, commit_hash: str) -> Optional[Dict[str, str]]:
        """Get a copy of the snapshot recorded for a commit."""
        snapshot = self._snapshots.get(commit_hash)
        return dict(snapshot) if snapshot is not None else None

    def all(self) -> Iterator[Commit]:
        """Iterate commits oldest first."""
        return iter(tuple(self._commits))

    @property
    def latest(self) -> Optional[Commit]:
        """Most recently appended commit."""
        return self._commits[-1] if self._commits else None

    def __contains__(self, commit_hash: str) -> bool:
        return commit_hash in self._by_hash

    def __len__(self) -> int:
        return len(self._commits)

    def __repr__(self) -> str:
        return f"CommitGraph(commits={len(self._commits)})"
