"""Hash utilities for Jot."""

import hashlib


def hash_object(data: bytes) -> str:
    """
    Compute SHA-1 hash of data.
    
    Args:
        data: Bytes to hash
        
    Returns:
        40-character hex string
    """
    return hashlib.sha1(data).hexdigest()


def digest(tag: str, content: bytes) -> str:
    """
    Compute the identity of typed content.
    
    The hashed bytes are ``<tag> <size>\\0<content>``, so the same bytes
    stored under different tags never share an identity.
    
    Args:
        tag: Object type tag (e.g. 'blob', 'commit', 'tree')
        content: Raw content bytes
        
    Returns:
        40-character hex string
    """
    header = f"{tag} {len(content)}\0".encode()
    return hash_object(header + content)


def hash_file(filepath: str) -> str:
    """
    Compute the blob identity of a file.
    
    Args:
        filepath: Path to file
        
    Returns:
        40-character hex string
    """
    with open(filepath, 'rb') as f:
        return digest('blob', f.read())
