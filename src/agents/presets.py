"""Preset node trees for each component category."""

from collections.abc import Callable

from nodes import (
    ButtonNode,
    ButtonProps,
    CardGroupNode,
    ChatBubbleProps,
    ChatGroupNode,
    CheckboxNode,
    CheckboxProps,
    ClickEvents,
    ContainerNode,
    FormEvents,
    FormNode,
    FormProps,
    InputGroupNode,
    InputProps,
    Node,
    SelectNode,
    SelectOption,
    SelectProps,
    TextNode,
    TextProps,
)
from renderer.handlers import FORM_SUBMIT_DEMO, LIKE_DEMO, RESET_DEMO
from .patterns import ComponentType


class Templates:
    """Node templates."""

    @staticmethod
    def heading(content: str) -> TextNode:
        return TextNode(props=TextProps(class_name="font-semibold text-gray-900 mb-3"), children=content)

    @staticmethod
    def caption(content: str) -> TextNode:
        return TextNode(props=TextProps(class_name="text-xs text-gray-600 mb-2"), children=content)

    @staticmethod
    def button(label: str, variant: str, on_click: str | None = None) -> ButtonNode:
        return ButtonNode(
            props=ButtonProps(label=label, variant=variant),
            events=ClickEvents(on_click=on_click) if on_click else None,
            event_payload={"variant": variant} if on_click else None,
        )

    @staticmethod
    def section(*children: Node) -> ContainerNode:
        return ContainerNode(children=children)

    @staticmethod
    def showcase(title: str, *children: Node) -> ContainerNode:
        return ContainerNode(children=(Templates.heading(title), *children))


def button_variants() -> ContainerNode:
    t = Templates
    return t.showcase(
        "Button Variations",
        t.section(t.caption("Primary Button"), t.button("Click me", "primary", LIKE_DEMO)),
        t.section(t.caption("Secondary Button"), t.button("Secondary", "secondary", LIKE_DEMO)),
        t.section(t.caption("Ghost Button"), t.button("Ghost", "ghost", LIKE_DEMO)),
    )


def card_variants() -> ContainerNode:
    return Templates.showcase(
        "Card Variations",
        CardGroupNode(variants=("default", "elevated", "outlined", "gradient")),
    )


def input_variants() -> ContainerNode:
    return Templates.showcase(
        "Input Variations",
        InputGroupNode(inputs=(
            InputProps(name="text", label="Default Input", placeholder="Enter text..."),
            InputProps(name="search", label="Search Input", type="search", placeholder="Search..."),
            InputProps(name="email", label="Email Input", type="email", placeholder="email@example.com"),
            InputProps(name="invalid", label="Error State", placeholder="Invalid input", error="This field is required"),
        )),
    )


def chat_bubbles() -> ContainerNode:
    return Templates.showcase(
        "Chat Bubble Variations",
        ChatGroupNode(messages=(
            ChatBubbleProps(role="user", text="User message bubble", timestamp="2:30 PM"),
            ChatBubbleProps(role="assistant", text="Assistant message bubble", timestamp="2:31 PM"),
            ChatBubbleProps(role="user", text="Gradient user bubble", variant="gradient"),
            ChatBubbleProps(role="system", text="System message"),
        )),
    )


def form_variants() -> FormNode:
    return FormNode(
        props=FormProps(title="Form Elements", description="Select, checkbox and like counter controls"),
        events=FormEvents(on_submit=FORM_SUBMIT_DEMO, on_reset=RESET_DEMO),
        children=(
            SelectNode(props=SelectProps(
                name="plan",
                label="Plan",
                default_value="pro",
                options=(
                    SelectOption(label="Free", value="free"),
                    SelectOption(label="Pro", value="pro"),
                    SelectOption(label="Team", value="team"),
                ),
            )),
            CheckboxNode(props=CheckboxProps(name="newsletter", label="Subscribe to updates", default_checked=True)),
            ButtonNode(events=ClickEvents(on_click=LIKE_DEMO)),
        ),
    )


PRESETS: dict[str, Callable[[], Node]] = {
    "button-variants": button_variants,
    "card-variants": card_variants,
    "input-variants": input_variants,
    "chat-bubbles": chat_bubbles,
    "form-variants": form_variants,
}


def build_preset(component_type: ComponentType) -> Node:
    """Build a fresh preset node for a category."""
    try:
        return PRESETS[component_type]()
    except KeyError:
        raise ValueError(f"Unknown component type: {component_type}") from None
