"""Tests for stream utilities."""

import pytest
from hypothesis import given, strategies as st

from core import TokenBatcher, batch_tokens_sync


@pytest.mark.unit
def test_token_batcher_add():
    """Test adding tokens to batcher."""
    batcher = TokenBatcher(batch_size=10)

    assert batcher.add("hello") is None
    assert batcher.add(" world!") == "hello world!"


@pytest.mark.unit
def test_token_batcher_flush():
    """Test flushing remaining tokens."""
    batcher = TokenBatcher(batch_size=10)
    batcher.add("hi")

    assert batcher.flush() == "hi"
    assert batcher.flush() is None


@pytest.mark.unit
def test_batch_tokens_sync_string():
    """Test a plain string streams in fixed-size chunks."""
    chunks = list(batch_tokens_sync("abcdefghij", batch_size=4))
    assert chunks == ["abcd", "efgh", "ij"]


@pytest.mark.unit
def test_batch_tokens_sync_empty():
    assert list(batch_tokens_sync("", batch_size=4)) == []


@pytest.mark.unit
@given(st.text(max_size=300), st.integers(min_value=1, max_value=50))
def test_batches_reassemble(text, size):
    """Property: batching never loses or reorders text."""
    chunks = list(batch_tokens_sync(text, size))
    assert "".join(chunks) == text
    assert all(len(chunk) >= size for chunk in chunks[:-1])
