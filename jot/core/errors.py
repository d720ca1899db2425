"""Exceptions raised by Jot repository operations."""


class JotError(Exception):
    """Base class for all Jot errors."""


class NotARepositoryError(JotError):
    """Operation needs an initialized .jot directory."""


class WorkFileNotFoundError(JotError):
    """A working-tree file does not exist."""

    def __init__(self, filename: str):
        super().__init__(f"File not found: {filename}")
        self.filename = filename


class StorageIOError(JotError):
    """Reading or writing a working file or record failed."""

    def __init__(self, path, reason):
        super().__init__(f"I/O failure on {path}: {reason}")
        self.path = path
        self.reason = reason


class ContentMissingError(JotError):
    """A referenced content hash is absent from the content store."""

    def __init__(self, content_hash: str, filename: str = None):
        target = f" for {filename}" if filename else ""
        super().__init__(f"Content {content_hash} missing from store{target}")
        self.content_hash = content_hash
        self.filename = filename


class NothingToCommitError(JotError):
    """The staging index is empty."""

    def __init__(self):
        super().__init__("Nothing to commit (staging area is empty)")


class CommitNotFoundError(JotError):
    """No commit in the history matches the requested hash."""

    def __init__(self, commit_hash: str, reason: str = "not found"):
        super().__init__(f"Commit {commit_hash} {reason}")
        self.commit_hash = commit_hash


class NotTrackedError(JotError):
    """The file is not in the staging index."""

    def __init__(self, filename: str):
        super().__init__(f"File not tracked: {filename}")
        self.filename = filename
