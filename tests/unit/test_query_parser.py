"""Query parser tests."""

import pytest
from hypothesis import given, strategies as st

from agents import (
    ParsedQuery,
    QueryParser,
    contains_phrase,
    parse_query,
    parse_component_query,
    get_component_response,
)
from agents.patterns import EMPTY_RESPONSE, FALLBACK_RESPONSE
from nodes import ButtonNode, CardGroupNode, CheckboxNode, UIGroupNode


# ============================================================================
# Dynamic patterns
# ============================================================================

@pytest.mark.unit
def test_ghost_button():
    result = parse_query("ghost button")
    assert result.kind == "dynamic"
    assert result.match_stage == "pattern"
    assert isinstance(result.node, ButtonNode)
    assert result.node.variant == "ghost"
    assert result.node.text == "Ghost Button"
    assert result.response_text.startswith("Here's a ghost button")
    assert result.component_type is None


@pytest.mark.unit
def test_elevated_card():
    result = parse_query("Can I see an elevated card?")
    assert isinstance(result.node, CardGroupNode)
    assert result.node.variants == ("elevated",)


@pytest.mark.unit
def test_login_form():
    result = parse_query("login form")
    assert isinstance(result.node, UIGroupNode)
    assert result.node.props.title == "Login"
    assert result.node.events.on_submit == "formSubmitDemo"
    assert [c.props.name for c in result.node.components[:2]] == ["email", "password"]
    assert result.node.components[2].text == "Sign In"


@pytest.mark.unit
def test_dynamic_beats_category():
    """Test a narrow request wins over its broad category."""
    result = parse_query("checkbox")
    assert result.kind == "dynamic"
    assert isinstance(result.node, CheckboxNode)


@pytest.mark.unit
def test_dynamic_substring_by_default():
    """Test dynamic patterns match inside words unless strict."""
    loose = QueryParser().parse("dictate a button")
    assert loose.kind == "dynamic"
    assert loose.node.text == "Get Started"

    strict = QueryParser(strict_dynamic=True).parse("dictate a button")
    assert strict.kind == "preset"
    assert strict.component_type == "button-variants"


# ============================================================================
# Categories
# ============================================================================

@pytest.mark.unit
def test_show_me_cards():
    result = parse_query("show me cards")
    assert result.kind == "preset"
    assert result.component_type == "card-variants"
    assert result.node is None
    assert "card" in result.response_text
    assert "Elevated" in result.response_text


@pytest.mark.unit
@pytest.mark.parametrize("query, expected", [
    ("chat bubble", "chat-bubbles"),
    ("a button please", "button-variants"),
    ("text field", "input-variants"),
    ("info card", "card-variants"),
    ("select menu", "form-variants"),
])
def test_phrase_matches(query, expected):
    result = parse_query(query)
    assert result.component_type == expected
    assert result.match_stage == "phrase"


@pytest.mark.unit
def test_combination_stage():
    result = parse_query("primary and secondary")
    assert result.component_type == "button-variants"
    assert result.match_stage == "combination"


@pytest.mark.unit
def test_phrase_respects_word_boundaries():
    """Test 'buttonhole' is not the phrase 'button'."""
    result = parse_query("buttonhole")
    assert result.component_type == "button-variants"
    assert result.match_stage != "phrase"


@pytest.mark.unit
def test_category_priority():
    """Test chat bubbles are checked before buttons."""
    assert parse_query("chat message with a button").component_type == "chat-bubbles"


@pytest.mark.unit
@pytest.mark.parametrize("query", ["SHOW ME A BUTTON", "Show Me A Button", "  show me a button  "])
def test_case_and_whitespace_insensitive(query):
    assert parse_query(query).component_type == "button-variants"


# ============================================================================
# Fallbacks
# ============================================================================

@pytest.mark.unit
@pytest.mark.parametrize("query", ["", "   ", None, 42])
def test_empty_input(query):
    result = parse_query(query)
    assert result.kind == "preset"
    assert result.response_text == EMPTY_RESPONSE
    assert not result.matched
    assert result.to_node() is None


@pytest.mark.unit
def test_no_match():
    result = parse_query("what is the weather like")
    assert result.response_text == FALLBACK_RESPONSE
    assert result.component_type is None
    assert result.node is None


@pytest.mark.unit
@given(st.one_of(st.none(), st.text(max_size=120)))
def test_parse_never_raises(query):
    """Property: any input yields a well-formed result."""
    result = parse_query(query)
    assert result.response_text
    assert result.component_type is None or result.node is None
    if not result.matched:
        assert result.response_text in (EMPTY_RESPONSE, FALLBACK_RESPONSE)
        assert result.match_stage is None


# ============================================================================
# Helpers
# ============================================================================

@pytest.mark.unit
def test_contains_phrase():
    assert contains_phrase("a button please", "button")
    assert contains_phrase("chat bubble!", "chat bubble")
    assert not contains_phrase("buttonhole", "button")


@pytest.mark.unit
def test_parse_component_query_ignores_dynamic():
    assert parse_component_query("ghost button") == "button-variants"
    assert parse_component_query("hello there") is None
    assert parse_component_query(None) is None


@pytest.mark.unit
def test_get_component_response():
    assert "Elevated" in get_component_response("card-variants")
    assert get_component_response(None) == EMPTY_RESPONSE


@pytest.mark.unit
def test_parsed_query_exclusive():
    with pytest.raises(Exception):
        ParsedQuery(
            kind="preset",
            response_text="x",
            component_type="card-variants",
            node=ButtonNode(text="Go"),
        )


@pytest.mark.unit
def test_preset_to_node_is_fresh():
    result = parse_query("show me cards")
    assert result.to_node() == result.to_node()
    assert result.to_node() is not result.to_node()
