"""Hash utilities tests."""

import hashlib
import pytest
from jot.core.hash import digest, hash_object, hash_file


def test_hash_object_empty():
    """Test hashing empty bytes."""
    result = hash_object(b'')
    assert len(result) == 40
    assert isinstance(result, str)


def test_hash_object_different_data():
    """Test different data produces different hashes."""
    assert hash_object(b'hello') != hash_object(b'world')


def test_digest_deterministic():
    """Test same tag and content always hash the same."""
    assert digest('blob', b'hello world') == digest('blob', b'hello world')


def test_digest_header_format():
    """Test digest hashes '<tag> <size>\\0<content>'."""
    expected = hashlib.sha1(b'blob 5\x00hello').hexdigest()
    assert digest('blob', b'hello') == expected


def test_digest_depends_on_tag():
    """Test same content under different tags has different hashes."""
    assert digest('blob', b'data') != digest('commit', b'data')


def test_digest_different_content():
    """Test different content has different hashes."""
    assert digest('blob', b'hello') != digest('blob', b'hello!')


@pytest.mark.parametrize('content', [b'', b'\x00\xff\n\r\\', 'é'.encode()])
def test_digest_length(content):
    """Test digest is always 40 hex characters."""
    result = digest('blob', content)
    assert len(result) == 40
    int(result, 16)


def test_hash_file(tmp_path):
    """Test hashing file contents as a blob."""
    path = tmp_path / 'f.txt'
    path.write_bytes(b'test content')

    assert hash_file(str(path)) == digest('blob', b'test content')
    assert hash_file(str(path)) == hash_file(str(path))
