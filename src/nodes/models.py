"""Node Data Models.

A node tree is pure data: every field is JSON-serializable and events are
symbolic handler names resolved later through an EventRegistry.
"""

from typing import Annotated, Any, Literal, Union
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


NodeType = Literal[
    "container",
    "text",
    "card",
    "card-group",
    "chatBubble",
    "chat-group",
    "button",
    "button-group",
    "input",
    "input-group",
    "select",
    "checkbox",
    "divider",
    "form",
    "ui-group",
]

NODE_TYPES: frozenset[str] = frozenset(NodeType.__args__)


class NodeModel(BaseModel):
    """Immutable model with camelCase wire names."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
        extra="ignore",
    )


# ============================================================================
# Props
# ============================================================================

class StyledProps(NodeModel):
    class_name: str | None = None


class TextProps(StyledProps):
    max_length: int | None = Field(default=None, gt=0, description="Collapse text longer than this")


class CardProps(StyledProps):
    title: str | None = None
    description: str | None = None
    variant: str | None = None


class ChatBubbleProps(StyledProps):
    role: str = Field(..., description="user, assistant or system")
    text: str
    timestamp: str | None = None
    variant: str | None = None


class ButtonProps(StyledProps):
    label: str | None = None
    aria_label: str | None = None
    variant: str | None = None
    counter: bool | None = Field(default=None, description="Render as a like counter")


class InputProps(StyledProps):
    name: str
    label: str | None = None
    placeholder: str | None = None
    type: str | None = None
    required: bool | None = None
    default_value: str | None = None
    error: str | None = None


class SelectOption(NodeModel):
    label: str
    value: str


class SelectProps(StyledProps):
    name: str
    options: tuple[SelectOption, ...] = ()
    label: str | None = None
    required: bool | None = None
    default_value: str | None = None


class CheckboxProps(StyledProps):
    name: str
    label: str
    default_checked: bool | None = None


class FormProps(StyledProps):
    title: str | None = None
    description: str | None = None


# ============================================================================
# Events
# ============================================================================

class ClickEvents(NodeModel):
    on_click: str | None = None


class SubmitEvents(NodeModel):
    on_submit: str | None = None


class FormEvents(SubmitEvents):
    on_reset: str | None = None


# ============================================================================
# Nodes
# ============================================================================

class BaseNode(NodeModel):
    """Common node fields. ``key`` overrides positional identity."""

    key: str | None = None


class ContainerNode(BaseNode):
    type: Literal["container"] = "container"
    props: StyledProps | None = None
    children: tuple["Node", ...] = ()


class TextNode(BaseNode):
    type: Literal["text"] = "text"
    props: TextProps | None = None
    children: str | None = None


class CardNode(BaseNode):
    type: Literal["card"] = "card"
    props: CardProps | None = None
    children: tuple["Node", ...] = ()


class CardGroupNode(BaseNode):
    type: Literal["card-group"] = "card-group"
    props: StyledProps | None = None
    variants: tuple[str, ...] = ()


class ChatBubbleNode(BaseNode):
    type: Literal["chatBubble"] = "chatBubble"
    props: ChatBubbleProps


class ChatGroupNode(BaseNode):
    type: Literal["chat-group"] = "chat-group"
    props: StyledProps | None = None
    messages: tuple[ChatBubbleProps, ...] = ()


class ButtonNode(BaseNode):
    """Button. ``variant``/``text`` are the flat shorthand used by generated nodes."""

    type: Literal["button"] = "button"
    props: ButtonProps | None = None
    variant: str | None = None
    text: str | None = None
    events: ClickEvents | None = None
    event_payload: Any = None


class ButtonGroupNode(BaseNode):
    type: Literal["button-group"] = "button-group"
    props: StyledProps | None = None
    variants: tuple[str, ...] = ()
    events: ClickEvents | None = None


class InputNode(BaseNode):
    type: Literal["input"] = "input"
    props: InputProps


class InputGroupNode(BaseNode):
    type: Literal["input-group"] = "input-group"
    props: StyledProps | None = None
    inputs: tuple[InputProps, ...] = ()


class SelectNode(BaseNode):
    type: Literal["select"] = "select"
    props: SelectProps


class CheckboxNode(BaseNode):
    type: Literal["checkbox"] = "checkbox"
    props: CheckboxProps


class DividerNode(BaseNode):
    type: Literal["divider"] = "divider"
    props: StyledProps | None = None


class FormNode(BaseNode):
    type: Literal["form"] = "form"
    props: FormProps | None = None
    children: tuple["Node", ...] = ()
    events: FormEvents | None = None


class UIGroupNode(BaseNode):
    type: Literal["ui-group"] = "ui-group"
    props: FormProps | None = None
    components: tuple["Node", ...] = ()
    events: SubmitEvents | None = None


Node = Annotated[
    Union[
        ContainerNode,
        TextNode,
        CardNode,
        CardGroupNode,
        ChatBubbleNode,
        ChatGroupNode,
        ButtonNode,
        ButtonGroupNode,
        InputNode,
        InputGroupNode,
        SelectNode,
        CheckboxNode,
        DividerNode,
        FormNode,
        UIGroupNode,
    ],
    Field(discriminator="type"),
]


for _model in (ContainerNode, CardNode, FormNode, UIGroupNode):
    _model.model_rebuild()
