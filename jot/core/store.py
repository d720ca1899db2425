"""Content-addressable blob store."""

import logging
from typing import Dict, Iterator, Tuple
from .errors import ContentMissingError

logger = logging.getLogger(__name__)


class ContentStore:
    """
    Append-only mapping from content hash to raw bytes.

    Identical content is stored once. Entries are never removed or
    overwritten; the first bytes written under a hash are kept.
    """

    def __init__(self):
        self._objects: Dict[str, bytes] = {}

    def put(self, content_hash: str, data: bytes) -> bool:
        """
        Store content under its hash.

        Args:
            content_hash: Hash of the content
            data: Raw bytes

        Returns:
            bool: True if stored, False if the hash was already present
        """
        if content_hash in self._objects:
            return False
        self._objects[content_hash] = bytes(data)
        logger.debug("stored %s (%d bytes)", content_hash[:7], len(data))
        return True

    def get(self, content_hash: str) -> bytes:
        """
        Fetch content by hash.

        Raises:
            ContentMissingError: If the hash is unknown
        """
        try:
            return self._objects[content_hash]
        except KeyError:
            raise ContentMissingError(content_hash) from None

    def items(self) -> Iterator[Tuple[str, bytes]]:
        """Iterate (hash, bytes) pairs in insertion order."""
        return iter(list(self._objects.items()))

    def __contains__(self, content_hash: str) -> bool:
        return content_hash in self._objects

    def __len__(self) -> int:
        return len(self._objects)

    def __repr__(self) -> str:
        return f"ContentStore(objects={len(self._objects)})"
