"""
Node Schema
Declarative UI nodes and their parser.
"""

from .models import (
    NODE_TYPES,
    BaseNode,
    ButtonGroupNode,
    ButtonNode,
    ButtonProps,
    CardGroupNode,
    CardNode,
    CardProps,
    ChatBubbleNode,
    ChatBubbleProps,
    ChatGroupNode,
    CheckboxNode,
    CheckboxProps,
    ClickEvents,
    ContainerNode,
    DividerNode,
    FormEvents,
    FormNode,
    FormProps,
    InputGroupNode,
    InputNode,
    InputProps,
    Node,
    NodeType,
    SelectNode,
    SelectOption,
    SelectProps,
    StyledProps,
    SubmitEvents,
    TextNode,
    TextProps,
    UIGroupNode,
)
from .parser import NodeParser, parse_node, try_parse_node, dump_node

__all__ = [
    "NODE_TYPES",
    "BaseNode",
    "ButtonGroupNode",
    "ButtonNode",
    "ButtonProps",
    "CardGroupNode",
    "CardNode",
    "CardProps",
    "ChatBubbleNode",
    "ChatBubbleProps",
    "ChatGroupNode",
    "CheckboxNode",
    "CheckboxProps",
    "ClickEvents",
    "ContainerNode",
    "DividerNode",
    "FormEvents",
    "FormNode",
    "FormProps",
    "InputGroupNode",
    "InputNode",
    "InputProps",
    "Node",
    "NodeType",
    "SelectNode",
    "SelectOption",
    "SelectProps",
    "StyledProps",
    "SubmitEvents",
    "TextNode",
    "TextProps",
    "UIGroupNode",
    "NodeParser",
    "parse_node",
    "try_parse_node",
    "dump_node",
]
