"""Content store tests."""

import pytest
from jot.core.store import ContentStore
from jot.core.errors import ContentMissingError


def test_put_and_get():
    """Test stored bytes come back exactly."""
    store = ContentStore()
    store.put('a' * 40, b'\x00binary\ncontent')
    assert store.get('a' * 40) == b'\x00binary\ncontent'


def test_put_is_idempotent():
    """Test repeated put stores once."""
    store = ContentStore()
    assert store.put('a' * 40, b'data') is True
    assert store.put('a' * 40, b'data') is False
    assert len(store) == 1


def test_first_writer_wins():
    """Test existing entries are never overwritten."""
    store = ContentStore()
    store.put('a' * 40, b'first')
    store.put('a' * 40, b'second')
    assert store.get('a' * 40) == b'first'


def test_get_missing_raises():
    """Test unknown hash is a data-integrity failure."""
    store = ContentStore()
    with pytest.raises(ContentMissingError) as exc_info:
        store.get('b' * 40)
    assert exc_info.value.content_hash == 'b' * 40


def test_contains_and_items():
    """Test membership and ordered iteration."""
    store = ContentStore()
    store.put('b' * 40, b'2')
    store.put('a' * 40, b'1')

    assert 'a' * 40 in store
    assert 'c' * 40 not in store
    assert list(store.items()) == [('b' * 40, b'2'), ('a' * 40, b'1')]
