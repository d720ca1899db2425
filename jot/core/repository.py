"""Repository management for Jot."""

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Optional, Tuple
from .errors import (
    JotError,
    NotARepositoryError,
    WorkFileNotFoundError,
    StorageIOError,
    ContentMissingError,
    NothingToCommitError,
    CommitNotFoundError,
    NotTrackedError,
)
from .history import CommitGraph
from .index import Index
from .objects import Blob, Commit, compute_tree_hash
from .records import RecordStore
from .store import ContentStore

logger = logging.getLogger(__name__)

JOT_DIR = '.jot'
MIN_PREFIX_LENGTH = 4


@dataclass
class RepositoryStatus:
    """Staged files and HEAD position."""
    staged: Dict[str, str]
    head: Optional[str]

    @property
    def has_commits(self) -> bool:
        return self.head is not None


@dataclass
class CheckoutResult:
    """Outcome of restoring a commit into the working tree."""
    commit: Commit
    restored: List[str] = field(default_factory=list)
    missing: List[str] = field(default_factory=list)
    failed: List[str] = field(default_factory=list)

    @property
    def complete(self) -> bool:
        return not self.missing and not self.failed


class Repository:
    """
    Represents a Jot repository.

    The repository owns the content store, the staging index, the commit
    graph and HEAD. State is loaded from the .jot directory when the
    repository is constructed and written back after every operation
    that changes it.
    """

    def __init__(self, path: str = '.'):
        """
        Initialize repository.

        Args:
            path: Path to repository root (defaults to current directory)
        """
        self.work_tree = Path(path).resolve()
        self.jot_dir = self.work_tree / JOT_DIR
        self.config_file = self.jot_dir / 'config'
        self.records = RecordStore(self.jot_dir)

        self.store = ContentStore()
        self.index = Index()
        self.graph = CommitGraph()
        self.head: Optional[str] = None

        self.load()

    @property
    def is_initialized(self) -> bool:
        return self.jot_dir.is_dir()

    def load(self) -> None:
        """Reload all state from disk. An uninitialized repository loads empty."""
        if not self.is_initialized:
            self.store = ContentStore()
            self.index = Index()
            self.graph = CommitGraph()
            self.head = None
            return

        self.store = self.records.load_contents()
        self.index = Index(self.records.load_index())
        self.graph = self.records.load_commits()
        self.head = self.records.load_head()
        if self.head is not None and self.head not in self.graph:
            logger.debug("HEAD %s not in commit history, resetting", self.head[:7])
            self.head = None
        logger.debug(
            "loaded %s: %d commits, %d staged, %d objects",
            self.jot_dir, len(self.graph), len(self.index), len(self.store),
        )

    def save(
        self,
        index: bool = True,
        contents: bool = True,
        commits: bool = True,
        head: bool = True,
    ) -> None:
        """
        Write state to disk.

        Args:
            index: Write the index record
            contents: Write the contents record
            commits: Write the commits record
            head: Write the HEAD record

        Raises:
            StorageIOError: If a record cannot be written
        """
        if index:
            self.records.save_index(self.index.snapshot())
        if contents:
            self.records.save_contents(self.store)
        if commits:
            self.records.save_commits(self.graph)
        if head:
            self.records.save_head(self.head)

    def init(self) -> bool:
        """
        Initialize a new repository.

        Creates the .jot directory:
        .jot/
        ├── index          # Staging area
        ├── commits        # Commit history and snapshots
        ├── contents       # Blob store
        ├── HEAD           # Current commit
        └── config         # Repository configuration

        Calling init on an existing repository changes nothing.

        Returns:
            bool: True if created, False if it already existed
        """
        if self.jot_dir.exists():
            logger.debug("repository already exists at %s", self.jot_dir)
            return False

        try:
            self.jot_dir.mkdir(parents=True)
            self.config_file.write_text('[core]\n\trepositoryformatversion = 0\n')
        except OSError as e:
            raise StorageIOError(self.jot_dir, e) from e

        self.load()
        self.save()
        logger.debug("initialized repository at %s", self.jot_dir)
        return True

    @classmethod
    def find_repository(cls, path: str = '.') -> Optional['Repository']:
        """
        Find repository by searching up the directory tree.

        Args:
            path: Starting path for search

        Returns:
            Repository if found, None otherwise
        """
        current = Path(path).resolve()

        while True:
            if (current / JOT_DIR).is_dir():
                return cls(str(current))

            # Reached filesystem root
            if current == current.parent:
                return None

            current = current.parent

    def _require_initialized(self) -> None:
        if not self.is_initialized:
            raise NotARepositoryError(f"Not a jot repository: {self.work_tree}")

    def relative_name(self, name: str) -> str:
        """
        Convert a path to the filename used in the index.

        Relative paths are taken from the repository root.

        Raises:
            JotError: If the path is outside the working tree or inside .jot
        """
        path = Path(name)
        if not path.is_absolute():
            path = self.work_tree / path
        path = Path(os.path.normpath(str(path)))

        try:
            rel = path.relative_to(self.work_tree)
        except ValueError:
            raise JotError(f"{name} is outside repository at {self.work_tree}") from None

        if not rel.parts:
            raise JotError(f"{name} is not a file")
        if rel.parts[0] == JOT_DIR:
            raise JotError(f"{name} is inside the repository directory")
        return rel.as_posix()

    def add_file(self, name: str) -> str:
        """
        Stage a working-tree file.

        Args:
            name: File path (relative to the repository root, or absolute)

        Returns:
            str: Content hash of the staged file

        Raises:
            WorkFileNotFoundError: If the file does not exist
            StorageIOError: If the file cannot be read
        """
        self._require_initialized()
        rel = self.relative_name(name)
        path = self.work_tree / rel

        if not path.is_file():
            raise WorkFileNotFoundError(name)

        try:
            blob = Blob.from_file(str(path))
        except OSError as e:
            raise StorageIOError(path, e) from e

        self.store.put(blob.hash, blob.data)
        self.index.stage(rel, blob.hash)
        self.save(commits=False, head=False)
        logger.debug("staged %s as %s", rel, blob.hash[:7])
        return blob.hash

    def _work_path(self, name: str) -> Path:
        """
        Working-tree path for a recorded filename.

        Raises:
            JotError: If the name points outside the working tree
        """
        return self.work_tree / self.relative_name(name)

    def _backfill(self, snapshot: Dict[str, str]) -> None:
        """
        Store content for staged entries the store does not hold yet.

        Content is re-read from the working tree and only accepted when it
        still hashes to the staged value. Failures are logged and the
        remaining entries are still processed.
        """
        for name, content_hash in snapshot.items():
            if content_hash in self.store:
                continue

            try:
                blob = Blob.from_file(str(self._work_path(name)))
            except (JotError, OSError) as e:
                logger.warning("%s", ContentMissingError(content_hash, name))
                logger.debug("backfill read of %s failed: %s", name, e)
                continue

            if blob.hash != content_hash:
                logger.warning("%s (file changed since it was staged)", ContentMissingError(content_hash, name))
                continue

            self.store.put(content_hash, blob.data)

    def commit(self, message: str, author: str) -> Commit:
        """
        Record the staged files as a new commit.

        Args:
            message: Commit message
            author: Author name

        Returns:
            Commit: The new commit, now HEAD

        Raises:
            NothingToCommitError: If nothing is staged
        """
        self._require_initialized()
        if not len(self.index):
            raise NothingToCommitError()

        snapshot = self.index.snapshot()
        self._backfill(snapshot)

        commit = Commit.create(
            tree_hash=compute_tree_hash(snapshot),
            parent_hash=self.head,
            author=author,
            message=message,
        )

        self.graph.append(commit, snapshot)
        self.head = commit.hash
        self.index.clear()
        self.save()
        logger.debug("committed %s with %d file(s)", commit.hash[:7], len(snapshot))
        return commit

    def log(self) -> List[Commit]:
        """Commit history, oldest first."""
        return list(self.graph.all())

    def status(self) -> RepositoryStatus:
        """Currently staged files and HEAD."""
        return RepositoryStatus(staged=self.index.snapshot(), head=self.head)

    def remove_file(self, name: str) -> None:
        """
        Unstage a file. The working-tree file is left alone.

        Raises:
            NotTrackedError: If the file is not staged
        """
        self._require_initialized()
        try:
            rel = self.relative_name(name)
        except JotError:
            raise NotTrackedError(name) from None

        if not self.index.unstage(rel):
            raise NotTrackedError(name)

        self.save(contents=False, commits=False, head=False)
        logger.debug("unstaged %s", rel)

    def resolve_commit(self, ref: str) -> Commit:
        """
        Find a commit by full hash or unique prefix.

        Raises:
            CommitNotFoundError: If no single commit matches
        """
        commit = self.graph.find_by_hash(ref)
        if commit is not None:
            return commit

        if len(ref) >= MIN_PREFIX_LENGTH:
            matches = self.graph.find_by_prefix(ref)
            if len(matches) == 1:
                return matches[0]
            if len(matches) > 1:
                raise CommitNotFoundError(ref, "is ambiguous")

        raise CommitNotFoundError(ref)

    def _restore_file(self, name: str, content_hash: str) -> Tuple[bool, bool]:
        """Write one snapshot file. Returns (written, content_present)."""
        try:
            data = self.store.get(content_hash)
        except ContentMissingError:
            logger.warning("%s", ContentMissingError(content_hash, name))
            return False, False

        try:
            path = self._work_path(name)
        except JotError as e:
            logger.warning("skipping %s: %s", name, e)
            return False, True

        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_bytes(data)
        except OSError as e:
            logger.warning("%s", StorageIOError(path, e))
            return False, True
        return True, True

    def checkout(self, ref: str) -> CheckoutResult:
        """
        Restore the working tree to a commit and move HEAD to it.

        Files whose content is missing or cannot be written are skipped;
        the rest are still restored. The index is empty afterwards.

        Args:
            ref: Commit hash or unique prefix

        Returns:
            CheckoutResult

        Raises:
            CommitNotFoundError: If the commit is unknown
        """
        self._require_initialized()
        commit = self.resolve_commit(ref)
        snapshot = self.graph.snapshot_for(commit.hash) or {}

        result = CheckoutResult(commit=commit)
        for name, content_hash in snapshot.items():
            written, present = self._restore_file(name, content_hash)
            if written:
                result.restored.append(name)
            elif not present:
                result.missing.append(name)
            else:
                result.failed.append(name)

        self.index.replace(snapshot)
        self.index.clear()
        self.head = commit.hash
        self.save(contents=False, commits=False)
        logger.debug("checked out %s (%d restored)", commit.hash[:7], len(result.restored))
        return result

    @property
    def head_commit(self) -> Optional[Commit]:
        """Commit HEAD points to, if any."""
        return self.graph.find_by_hash(self.head) if self.head else None

    def __repr__(self) -> str:
        """String representation of repository."""
        return f"Repository(path={self.work_tree})"
