"""Node Parser - JSON to Node with validation."""

from typing import Any

from pydantic import TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from core import get_logger, ValidationError
from core.json import extract_json, JSONParseError
from core.validate import MAX_NODE_DEPTH
from .models import BaseNode, Node, NODE_TYPES

logger = get_logger(__name__)

_NODE_ADAPTER: TypeAdapter[Node] = TypeAdapter(Node)

# Fields holding nested nodes, per node type
_CHILD_FIELDS = {
    "container": "children",
    "card": "children",
    "form": "children",
    "ui-group": "components",
}


class NodeParser:
    """Parses node payloads (JSON text or dicts) into validated Node trees."""

    def __init__(self, max_depth: int = MAX_NODE_DEPTH):
        self.max_depth = max_depth

    def parse(self, content: str | dict[str, Any] | BaseNode) -> Node:
        """
        Parse a node payload strictly.

        Args:
            content: JSON string (fences and surrounding prose allowed),
                a dict, or an already built node

        Returns:
            Validated Node

        Raises:
            ValidationError: If the payload or any nested node is malformed
        """
        return self._load(content, lenient=False)

    def try_parse(self, content: Any) -> Node | None:
        """
        Parse a payload for display.

        Malformed nested nodes are dropped so their siblings still render;
        a malformed root yields None. Never raises.
        """
        if not isinstance(content, (str, dict, BaseNode)):
            logger.warning("node_rejected", reason="unsupported value", type=type(content).__name__)
            return None
        try:
            return self._load(content, lenient=True)
        except ValidationError as e:
            logger.warning("node_rejected", reason=str(e))
            return None

    def _load(self, content: str | dict[str, Any] | BaseNode, lenient: bool) -> Node:
        if isinstance(content, BaseNode):
            return content

        if isinstance(content, str):
            try:
                data = extract_json(content, repair=True)
            except JSONParseError as e:
                logger.error("json_parse_failed", error=str(e))
                raise ValidationError(f"Invalid JSON: {e}") from e
        else:
            data = content

        if not isinstance(data, dict):
            logger.error("invalid_format", type=type(data).__name__)
            raise ValidationError("Invalid node: expected JSON object")

        return self._validate(self._expand_node(data, lenient))

    def _validate(self, data: dict[str, Any]) -> Node:
        try:
            return _NODE_ADAPTER.validate_python(data)
        except PydanticValidationError as e:
            logger.error("node_invalid", type=data.get("type"), errors=e.error_count())
            raise ValidationError(f"Invalid '{data.get('type')}' node: {e}") from e

    def _expand_node(self, data: dict[str, Any], lenient: bool, depth: int = 0) -> dict[str, Any]:
        """
        Check the type tag and depth, and expand shortcuts recursively.

        ``depth`` counts nodes, not JSON levels: the root is 0 and each child
        list adds one.

        Bare strings inside a child list become text nodes:
        ``"Hello"`` -> ``{"type": "text", "children": "Hello"}``.
        """
        node_type = data.get("type")
        if node_type not in NODE_TYPES:
            raise ValidationError(f"Unknown node type: {node_type!r}")
        if depth > self.max_depth:
            raise ValidationError(f"Node nesting depth {depth} exceeds maximum {self.max_depth}")

        field = _CHILD_FIELDS.get(node_type)
        if field is None or not isinstance(data.get(field), list):
            return data

        children = []
        for child in data[field]:
            if isinstance(child, str):
                children.append({"type": "text", "children": child})
                continue
            try:
                if not isinstance(child, dict):
                    raise ValidationError(f"Invalid child in '{node_type}.{field}': {type(child).__name__}")
                expanded = self._expand_node(child, lenient, depth + 1)
                if lenient:
                    self._validate(expanded)
                children.append(expanded)
            except ValidationError as e:
                if not lenient:
                    raise
                logger.warning("child_dropped", parent=node_type, reason=str(e))

        return {**data, field: children}


def parse_node(content: str | dict[str, Any] | BaseNode, max_depth: int = MAX_NODE_DEPTH) -> Node:
    """Convenience function to parse a node payload."""
    return NodeParser(max_depth=max_depth).parse(content)


def try_parse_node(content: Any, max_depth: int = MAX_NODE_DEPTH) -> Node | None:
    """Convenience function: parse for display or return None."""
    return NodeParser(max_depth=max_depth).try_parse(content)


def dump_node(node: BaseNode) -> dict[str, Any]:
    """Serialize a node to its camelCase wire form, omitting unset fields."""
    return node.model_dump(mode="json", by_alias=True, exclude_none=True)
