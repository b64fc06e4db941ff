"""Node schema and parser tests."""

import pytest

from core import ValidationError
from nodes import (
    NODE_TYPES,
    ButtonNode,
    CardGroupNode,
    ContainerNode,
    NodeParser,
    TextNode,
    UIGroupNode,
    dump_node,
    parse_node,
    try_parse_node,
)


@pytest.mark.unit
def test_all_kinds_registered():
    assert len(NODE_TYPES) == 15
    assert {"chatBubble", "ui-group", "card-group", "button-group"} <= NODE_TYPES


@pytest.mark.unit
def test_parse_flat_button():
    """Test the flat button shorthand used by generated nodes."""
    node = parse_node({"type": "button", "variant": "ghost", "text": "Ghost Button"})
    assert isinstance(node, ButtonNode)
    assert node.variant == "ghost"
    assert node.text == "Ghost Button"


@pytest.mark.unit
def test_parse_camel_case_fields():
    node = parse_node({
        "type": "button",
        "props": {"label": "Go", "ariaLabel": "Go now", "className": "w-full"},
        "events": {"onClick": "likeDemo"},
        "eventPayload": {"id": 3},
    })
    assert node.props.aria_label == "Go now"
    assert node.props.class_name == "w-full"
    assert node.events.on_click == "likeDemo"
    assert node.event_payload == {"id": 3}


@pytest.mark.unit
def test_parse_json_text():
    """Test parsing from JSON text with a code fence."""
    node = parse_node('```json\n{"type": "card-group", "variants": ["elevated"]}\n```')
    assert isinstance(node, CardGroupNode)
    assert node.variants == ("elevated",)


@pytest.mark.unit
def test_parse_nested(login_form):
    node = parse_node(login_form)
    assert isinstance(node, UIGroupNode)
    assert [c.type for c in node.components] == ["input", "input", "button"]
    assert node.events.on_submit == "formSubmitDemo"


@pytest.mark.unit
def test_string_children_become_text():
    node = parse_node({"type": "container", "children": ["Hello", {"type": "divider"}]})
    assert isinstance(node.children[0], TextNode)
    assert node.children[0].children == "Hello"


@pytest.mark.unit
def test_parse_passthrough():
    node = TextNode(children="hi")
    assert parse_node(node) is node


@pytest.mark.unit
@pytest.mark.parametrize("payload", [
    {"type": "video"},
    {"children": []},
    {"type": "chatBubble"},
    {"type": "input", "props": {"label": "No name"}},
    "not json",
])
def test_parse_rejects_malformed(payload):
    with pytest.raises(ValidationError):
        parse_node(payload)


@pytest.mark.unit
def test_strict_parse_rejects_bad_child():
    with pytest.raises(ValidationError):
        parse_node({"type": "container", "children": [{"type": "video"}]})


@pytest.mark.unit
def test_try_parse_drops_bad_children():
    """Test lenient parsing keeps valid siblings."""
    node = try_parse_node({
        "type": "container",
        "children": [{"type": "video"}, {"type": "text", "children": "kept"}, 7],
    })
    assert isinstance(node, ContainerNode)
    assert len(node.children) == 1
    assert node.children[0].children == "kept"


@pytest.mark.unit
@pytest.mark.parametrize("payload", [None, 3, [], {"type": "video"}, "{broken"])
def test_try_parse_returns_none(payload):
    assert try_parse_node(payload) is None


def _nested(levels: int) -> dict:
    payload: dict = {"type": "text", "props": {"className": "leaf"}, "children": "leaf"}
    for _ in range(levels):
        payload = {"type": "container", "props": {"className": "wrap"}, "children": [payload]}
    return payload


@pytest.mark.unit
def test_depth_counts_nodes():
    """Test the depth limit counts node levels, not JSON levels."""
    payload = _nested(15)

    with pytest.raises(ValidationError):
        NodeParser(max_depth=14).parse(payload)
    assert NodeParser(max_depth=15).parse(payload) is not None


@pytest.mark.unit
def test_default_depth_accepts_twenty_levels():
    assert parse_node(_nested(20)) is not None
    with pytest.raises(ValidationError):
        parse_node(_nested(21))


@pytest.mark.unit
def test_lenient_parse_cuts_too_deep_branch():
    """Test lenient parsing keeps a deep branch up to the limit."""
    node = NodeParser(max_depth=3).try_parse({
        "type": "container",
        "children": [{"type": "divider"}, _nested(5)],
    })
    assert [c.type for c in node.children] == ["divider", "container"]

    depth, current = 1, node.children[1]
    while current.children:
        depth, current = depth + 1, current.children[0]
    assert depth == 3


@pytest.mark.unit
def test_nodes_are_immutable():
    node = ButtonNode(text="Go")
    with pytest.raises(Exception):
        node.text = "Stop"


@pytest.mark.unit
def test_dump_node_uses_wire_names():
    node = parse_node({"type": "button", "props": {"ariaLabel": "x"}, "events": {"onClick": "likeDemo"}})
    assert dump_node(node) == {
        "type": "button",
        "props": {"ariaLabel": "x"},
        "events": {"onClick": "likeDemo"},
    }


@pytest.mark.unit
def test_dump_then_parse_is_equal(login_form):
    node = parse_node(login_form)
    assert parse_node(dump_node(node)) == node
