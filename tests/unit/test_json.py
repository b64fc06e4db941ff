"""JSON extraction tests."""

import pytest

from core import extract_json, safe_json_dumps, JSONParseError


@pytest.mark.unit
def test_extract_plain_object():
    assert extract_json('{"type": "divider"}') == {"type": "divider"}


@pytest.mark.unit
def test_extract_from_fence():
    """Test JSON wrapped in a markdown fence."""
    text = 'Here you go:\n```json\n{"type": "text", "children": "Hi"}\n```\nEnjoy!'
    assert extract_json(text) == {"type": "text", "children": "Hi"}


@pytest.mark.unit
def test_extract_with_surrounding_prose():
    text = 'The node is {"type": "button", "text": "Go"} as requested.'
    assert extract_json(text)["text"] == "Go"


@pytest.mark.unit
def test_extract_repairs_trailing_comma():
    """Test json_repair recovers common mistakes."""
    result = extract_json('{"type": "card-group", "variants": ["elevated",],}')
    assert result == {"type": "card-group", "variants": ["elevated"]}


@pytest.mark.unit
def test_extract_without_repair_fails():
    with pytest.raises(JSONParseError):
        extract_json('{"type": "divider",}', repair=False)


@pytest.mark.unit
@pytest.mark.parametrize("text", ["", "no json here", "[1, 2, 3]", "}{"])
def test_extract_no_object(text):
    with pytest.raises(JSONParseError):
        extract_json(text)


@pytest.mark.unit
def test_safe_json_dumps_compact():
    assert safe_json_dumps({"email": "", "password": ""}) == '{"email":"","password":""}'


@pytest.mark.unit
def test_safe_json_dumps_indent():
    assert safe_json_dumps({"a": 1}, indent=2) == '{\n  "a": 1\n}'


@pytest.mark.unit
def test_safe_json_dumps_none():
    assert safe_json_dumps(None) == "null"
