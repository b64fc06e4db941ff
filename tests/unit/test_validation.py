"""Validation tests."""

import pytest
from hypothesis import given, strategies as st
from returns.pipeline import is_successful

from core import QueryRequest, validate_query


@pytest.mark.unit
def test_query_request_valid():
    """Test valid query request."""
    req = QueryRequest(message="  show me buttons  ")
    assert req.message == "show me buttons"


@pytest.mark.unit
def test_query_request_empty():
    with pytest.raises(Exception):
        QueryRequest(message="")


@pytest.mark.unit
def test_query_request_whitespace():
    """Test whitespace-only message validation."""
    with pytest.raises(Exception):
        QueryRequest(message="   ")


@pytest.mark.unit
def test_query_request_is_strict():
    with pytest.raises(Exception):
        QueryRequest(message=42)


@pytest.mark.unit
def test_validate_query_success():
    result = validate_query("  ghost button ")
    assert is_successful(result)
    assert result.unwrap().message == "ghost button"


@pytest.mark.unit
@pytest.mark.parametrize("message", [None, 12, ["button"], "", "   "])
def test_validate_query_failure(message):
    """Test rejected inputs come back as Failure, never raise."""
    result = validate_query(message)
    assert not is_successful(result)
    assert result.failure().message


@pytest.mark.unit
def test_validate_query_too_long():
    result = validate_query("x" * 11, max_length=10)
    assert not is_successful(result)
    assert "too long" in result.failure().message


@pytest.mark.unit
@given(st.text(min_size=1, max_size=200))
def test_validate_query_never_raises(message):
    """Property: validation returns a Result for any text."""
    result = validate_query(message)
    if is_successful(result):
        assert result.unwrap().message == message.strip()
    else:
        assert not message.strip() or len(message.strip()) > 1000
