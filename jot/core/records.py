"""Flat-file persistence for repository state.

Four records live under the repository directory:

    index      filename = hash                        (one per staged file)
    commits    hash|tree|parent|author|date|message|snapshot
    contents   hash|content                           (binary, one per blob)
    HEAD       current commit hash, empty before the first commit

Text fields are escaped so that newlines and the field separators never
appear raw inside a field. Blob content is escaped at the byte level so
arbitrary binary files survive a round trip.

A record that is missing or cannot be parsed loads as empty.
"""

import logging
import re
from datetime import datetime
from pathlib import Path
from typing import Dict, Optional
from .errors import StorageIOError
from .history import CommitGraph
from .objects import Commit
from .store import ContentStore

logger = logging.getLogger(__name__)

NULL_PARENT = 'null'

_TEXT_ESCAPES = {
    '\\': '\\\\',
    '\n': '\\n',
    '\r': '\\r',
    '|': '\\p',
    ';': '\\s',
    '=': '\\e',
}
_TEXT_UNESCAPES = {code[1]: char for char, code in _TEXT_ESCAPES.items()}
_TEXT_ESCAPE_RE = re.compile(r'\\(.)', re.DOTALL)

_BYTE_ESCAPES = {b'\\': b'\\\\', b'\n': b'\\n', b'\r': b'\\r'}
_BYTE_UNESCAPES = {b'\\': b'\\', b'n': b'\n', b'r': b'\r'}
_BYTE_SPECIAL_RE = re.compile(rb'[\\\n\r]')
_BYTE_ESCAPE_RE = re.compile(rb'\\(.)', re.DOTALL)


class RecordFormatError(ValueError):
    """A persisted record line could not be parsed."""


def escape_text(value: str) -> str:
    """Escape a text field for a pipe-delimited record."""
    return ''.join(_TEXT_ESCAPES.get(ch, ch) for ch in value)


def unescape_text(value: str) -> str:
    """Reverse escape_text."""
    def replace(match):
        code = match.group(1)
        if code not in _TEXT_UNESCAPES:
            raise RecordFormatError(f"Unknown escape sequence: \\{code}")
        return _TEXT_UNESCAPES[code]

    return _TEXT_ESCAPE_RE.sub(replace, value)


def escape_bytes(data: bytes) -> bytes:
    """Escape blob content so it fits on one line."""
    return _BYTE_SPECIAL_RE.sub(lambda m: _BYTE_ESCAPES[m.group()], data)


def unescape_bytes(data: bytes) -> bytes:
    """Reverse escape_bytes."""
    def replace(match):
        code = match.group(1)
        if code not in _BYTE_UNESCAPES:
            raise RecordFormatError(f"Unknown escape sequence in content: {code!r}")
        return _BYTE_UNESCAPES[code]

    return _BYTE_ESCAPE_RE.sub(replace, data)


def format_commit_line(commit: Commit, snapshot: Dict[str, str]) -> str:
    """Render one line of the commits record."""
    entries = ';'.join(
        f"{escape_text(name)}={content_hash}"
        for name, content_hash in snapshot.items()
    )
    fields = [
        commit.hash,
        commit.tree_hash,
        commit.parent_hash or NULL_PARENT,
        escape_text(commit.author),
        commit.timestamp.isoformat(),
        escape_text(commit.message),
        entries,
    ]
    return '|'.join(fields)


def parse_commit_line(line: str):
    """
    Parse one line of the commits record.

    Returns:
        Tuple of (Commit, snapshot dict)

    Raises:
        RecordFormatError: If the line is malformed
    """
    fields = line.split('|')
    if len(fields) != 7:
        raise RecordFormatError(f"Expected 7 fields, got {len(fields)}")

    commit_hash, tree_hash, parent, author, date, message, entries = fields

    try:
        timestamp = datetime.fromisoformat(date)
    except ValueError as e:
        raise RecordFormatError(f"Invalid timestamp {date!r}") from e

    snapshot = {}
    if entries:
        for entry in entries.split(';'):
            name, sep, content_hash = entry.partition('=')
            if not sep or not name or not content_hash:
                raise RecordFormatError(f"Invalid snapshot entry {entry!r}")
            snapshot[unescape_text(name)] = content_hash

    commit = Commit.restore(
        commit_hash=commit_hash,
        tree_hash=tree_hash,
        parent_hash=None if parent == NULL_PARENT else parent,
        author=unescape_text(author),
        timestamp=timestamp,
        message=unescape_text(message),
    )
    return commit, snapshot


class RecordStore:
    """
    Reads and writes the four repository records.

    Loading never fails: a missing or corrupt record yields an empty
    structure. Saving raises StorageIOError when a record cannot be
    written.
    """

    def __init__(self, jot_dir: Path):
        self.jot_dir = Path(jot_dir)
        self.index_file = self.jot_dir / 'index'
        self.commits_file = self.jot_dir / 'commits'
        self.contents_file = self.jot_dir / 'contents'
        self.head_file = self.jot_dir / 'HEAD'

    # Loading

    def _read_lines(self, path: Path) -> Optional[list]:
        if not path.exists():
            return None
        try:
            text = path.read_text(encoding='utf-8')
        except (OSError, UnicodeDecodeError) as e:
            logger.debug("cannot read %s: %s", path.name, e)
            return None
        return [line for line in text.split('\n') if line]

    def load_index(self) -> Dict[str, str]:
        """Load staged entries; empty on missing or corrupt record."""
        lines = self._read_lines(self.index_file)
        if not lines:
            return {}

        entries = {}
        try:
            for line in lines:
                name, sep, content_hash = line.rpartition(' = ')
                if not sep or not name or not content_hash:
                    raise RecordFormatError(f"Invalid index line {line!r}")
                entries[unescape_text(name)] = content_hash.strip()
        except RecordFormatError as e:
            logger.debug("index record unreadable, starting empty: %s", e)
            return {}
        return entries

    def load_commits(self) -> CommitGraph:
        """Load commit history; empty on missing or corrupt record."""
        graph = CommitGraph()
        lines = self._read_lines(self.commits_file)
        if not lines:
            return graph

        try:
            for line in lines:
                commit, snapshot = parse_commit_line(line)
                graph.append(commit, snapshot)
        except RecordFormatError as e:
            logger.debug("commits record unreadable, starting empty: %s", e)
            return CommitGraph()
        return graph

    def load_contents(self) -> ContentStore:
        """Load stored blobs; empty on missing or corrupt record."""
        store = ContentStore()
        if not self.contents_file.exists():
            return store

        try:
            data = self.contents_file.read_bytes()
        except OSError as e:
            logger.debug("cannot read contents record: %s", e)
            return store

        try:
            for line in data.split(b'\n'):
                if not line:
                    continue
                content_hash, sep, content = line.partition(b'|')
                if not sep or not content_hash:
                    raise RecordFormatError("Invalid contents line")
                store.put(content_hash.decode('ascii'), unescape_bytes(content))
        except (RecordFormatError, UnicodeDecodeError) as e:
            logger.debug("contents record unreadable, starting empty: %s", e)
            return ContentStore()
        return store

    def load_head(self) -> Optional[str]:
        """Load HEAD hash, or None before the first commit."""
        lines = self._read_lines(self.head_file)
        if not lines:
            return None
        return lines[0].strip() or None

    # Saving

    def _write(self, path: Path, data: bytes) -> None:
        try:
            path.write_bytes(data)
        except OSError as e:
            raise StorageIOError(path, e) from e

    def save_index(self, entries: Dict[str, str]) -> None:
        lines = [f"{escape_text(name)} = {content_hash}\n" for name, content_hash in entries.items()]
        self._write(self.index_file, ''.join(lines).encode('utf-8'))

    def save_commits(self, graph: CommitGraph) -> None:
        lines = [
            format_commit_line(commit, graph.snapshot_for(commit.hash) or {}) + '\n'
            for commit in graph.all()
        ]
        self._write(self.commits_file, ''.join(lines).encode('utf-8'))

    def save_contents(self, store: ContentStore) -> None:
        data = b''.join(
            content_hash.encode('ascii') + b'|' + escape_bytes(content) + b'\n'
            for content_hash, content in store.items()
        )
        self._write(self.contents_file, data)

    def save_head(self, head: Optional[str]) -> None:
        self._write(self.head_file, f"{head}\n".encode() if head else b'')

    def __repr__(self) -> str:
        return f"RecordStore(path={self.jot_dir})"
