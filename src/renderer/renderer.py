"""Renderer - interprets node trees into interactive element trees."""

from dataclasses import dataclass
from typing import Any

from core import get_logger
from nodes import (
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
    ContainerNode,
    DividerNode,
    FormEvents,
    FormNode,
    FormProps,
    InputGroupNode,
    InputNode,
    InputProps,
    Node,
    NodeParser,
    SelectNode,
    SelectProps,
    StyledProps,
    TextNode,
    TextProps,
    UIGroupNode,
)
from . import styles
from .styles import cx, resolve_variant
from .elements import Element, UIEvent
from .registry import EventRegistry
from .handlers import LIKE_DEMO

logger = get_logger(__name__)


class LocalState:
    """Interaction state owned by a single rendered instance, keyed by node path."""

    def __init__(self) -> None:
        self._values: dict[tuple[str, ...], Any] = {}

    def get(self, path: tuple[str, ...], default: Any = None) -> Any:
        return self._values.get(path, default)

    def set(self, path: tuple[str, ...], value: Any) -> None:
        self._values[path] = value

    def increment(self, path: tuple[str, ...]) -> int:
        value = self._values.get(path, 0) + 1
        self._values[path] = value
        return value


@dataclass(frozen=True)
class _Context:
    state: LocalState
    path: tuple[str, ...] = ()
    in_form: bool = False
    implicit_submit: bool = False

    def child(self, key: str, in_form: bool = False, implicit_submit: bool | None = None) -> "_Context":
        # in_form covers direct children only; implicit_submit is inherited
        # unless a nested form resets it.
        if implicit_submit is None:
            implicit_submit = self.implicit_submit
        return _Context(self.state, self.path + (key,), in_form, implicit_submit)


def _compact(attrs: dict[str, Any]) -> dict[str, Any]:
    return {k: v for k, v in attrs.items() if v is not None}


def expand_card_group(node: CardGroupNode) -> tuple[CardNode, ...]:
    """Expand a card-group into the card nodes it stands for."""
    cards = []
    for variant in node.variants:
        meta = styles.CARD_METADATA.get(variant, styles.CARD_METADATA["default"])
        cards.append(CardNode(props=CardProps(title=meta.title, description=meta.description, variant=variant)))
    return tuple(cards)


def expand_button_group(node: ButtonGroupNode) -> tuple[ButtonNode, ...]:
    """Expand a button-group into buttons sharing its handler, each with its own payload."""
    return tuple(
        ButtonNode(
            variant=variant,
            text=f"{variant.capitalize()} Button",
            events=node.events,
            event_payload={"variant": variant},
        )
        for variant in node.variants
    )


class Renderer:
    """
    Renders nodes into Element trees.

    Rendering is pure apart from per-instance interaction state (like
    counters, expand/collapse), which lives in a LocalState created for each
    ``render`` call and never on the node itself.
    """

    def __init__(
        self,
        registry: EventRegistry,
        like_event: str = LIKE_DEMO,
        parser: NodeParser | None = None,
    ) -> None:
        self.registry = registry
        self.like_event = like_event
        self.parser = parser or NodeParser()

    def render(self, node: Node | dict[str, Any] | str) -> Element | None:
        """
        Render a node (or a raw payload) into a fresh element tree.

        Raw payloads are validated first; anything that is not a known node
        renders as None instead of raising.
        """
        if not isinstance(node, BaseNode):
            node = self.parser.try_parse(node)
            if node is None:
                return None
        return self._render(node, _Context(state=LocalState()), node.key)

    # ------------------------------------------------------------------
    # Dispatch
    # ------------------------------------------------------------------

    def _render(self, node: BaseNode, ctx: _Context, key: str | None) -> Element | None:
        match node:
            case ContainerNode():
                el = self._container(node, ctx)
            case TextNode():
                el = self._text(node, ctx)
            case CardNode():
                el = self._card(node, ctx)
            case CardGroupNode():
                el = self._card_group(node, ctx)
            case ChatBubbleNode():
                el = self._chat_bubble(node.props)
            case ChatGroupNode():
                el = self._chat_group(node, ctx)
            case ButtonNode():
                el = self._button(node, ctx)
            case ButtonGroupNode():
                el = self._button_group(node, ctx)
            case InputNode():
                el = self._input(node.props)
            case InputGroupNode():
                el = self._input_group(node, ctx)
            case SelectNode():
                el = self._select(node.props)
            case CheckboxNode():
                el = self._checkbox(node.props)
            case DividerNode():
                el = self._divider(node)
            case FormNode():
                el = self._form(node, ctx)
            case UIGroupNode():
                el = self._ui_group(node, ctx)
            case _:
                logger.warning("unsupported_node", type=getattr(node, "type", None))
                return None
        el.key = key
        return el

    def _render_children(
        self,
        nodes: tuple[BaseNode, ...],
        ctx: _Context,
        in_form: bool = False,
        implicit_submit: bool | None = None,
    ) -> list[Element]:
        rendered = []
        for index, child in enumerate(nodes):
            key = child.key or str(index)
            el = self._render(child, ctx.child(key, in_form, implicit_submit), key)
            if el is not None:
                rendered.append(el)
        return rendered

    def _invoke(self, name: str | None, payload: Any = None) -> None:
        if name:
            self.registry.invoke(name, payload)

    # ------------------------------------------------------------------
    # Structure
    # ------------------------------------------------------------------

    def _container(self, node: ContainerNode, ctx: _Context) -> Element:
        props = node.props or StyledProps()
        return Element(
            "div",
            {"class": cx(styles.CONTAINER, props.class_name)},
            self._render_children(node.children, ctx),
            kind="container",
        )

    def _text(self, node: TextNode, ctx: _Context) -> Element:
        props = node.props or TextProps()
        content = node.children or ""
        el = Element("p", {"class": cx(styles.TEXT, props.class_name)}, kind="text")

        if props.max_length and len(content) > props.max_length:
            self._collapsible(el, content, props.max_length, ctx)
        elif content:
            el.append(content)
        return el

    def _collapsible(self, el: Element, content: str, limit: int, ctx: _Context) -> None:
        truncated = content[:limit].rstrip() + "…"
        body = Element("span", children=[truncated], kind="content")
        toggle = Element(
            "button",
            {"type": "button", "class": styles.TOGGLE_BUTTON, "aria-expanded": "false"},
            ["Show more"],
            kind="toggle",
        )
        path = ctx.path

        def on_toggle(event: UIEvent) -> None:
            expanded = not ctx.state.get(path, False)
            ctx.state.set(path, expanded)
            body.set_text(content if expanded else truncated)
            toggle.set_text("Show less" if expanded else "Show more")
            toggle.attrs["aria-expanded"] = "true" if expanded else "false"

        toggle.on("click", on_toggle)
        el.append(body)
        el.append(" ")
        el.append(toggle)

    def _divider(self, node: DividerNode) -> Element:
        props = node.props or StyledProps()
        return Element("div", {"role": "separator", "class": cx(styles.DIVIDER, props.class_name)}, kind="divider")

    # ------------------------------------------------------------------
    # Cards
    # ------------------------------------------------------------------

    def _card(self, node: CardNode, ctx: _Context) -> Element:
        props = node.props or CardProps()
        variant = resolve_variant(styles.CARD_STYLES, props.variant)
        gradient = variant == "gradient"

        el = Element(
            "div",
            {"class": cx(styles.CARD_BASE, styles.CARD_STYLES[variant], props.class_name), "data-variant": variant},
            kind="card",
        )
        if props.title:
            el.append(Element(
                "div",
                {"class": cx("text-sm font-semibold", "text-white" if gradient else "text-gray-900")},
                [props.title],
                kind="title",
            ))
        if props.description:
            el.append(Element(
                "div",
                {"class": cx("text-xs mt-1", "text-white/90" if gradient else "text-gray-600")},
                [props.description],
                kind="description",
            ))

        children = self._render_children(node.children, ctx)
        if children:
            el.append(Element("div", {"class": cx("mt-3", "text-white" if gradient else "text-gray-900")}, children, kind="body"))
        return el

    def _card_group(self, node: CardGroupNode, ctx: _Context) -> Element:
        props = node.props or StyledProps()
        return Element(
            "div",
            {"class": cx(styles.CARD_GROUP, props.class_name)},
            self._render_children(expand_card_group(node), ctx),
            kind="card-group",
        )

    # ------------------------------------------------------------------
    # Chat bubbles
    # ------------------------------------------------------------------

    def _chat_bubble(self, props: ChatBubbleProps) -> Element:
        is_user = props.role == "user"
        variant = resolve_variant(styles.BUBBLE_VARIANTS, props.variant)
        if props.role == "system":
            style = styles.BUBBLE_STYLES["system"]
        else:
            style = styles.BUBBLE_STYLES[f"{'user' if is_user else 'assistant'}-{variant}"]

        bubble = Element("div", {"class": cx(styles.BUBBLE_BASE, style)}, kind="bubble")
        bubble.append(Element("div", {"class": "whitespace-pre-wrap leading-relaxed"}, [props.text], kind="message"))
        if props.timestamp:
            bubble.append(Element(
                "time",
                {"class": cx("mt-1 text-[10px]", "text-white/80" if is_user else "text-gray-500")},
                [props.timestamp],
                kind="timestamp",
            ))

        return Element(
            "div",
            {
                "class": cx("flex", "justify-end" if is_user else "justify-start", props.class_name),
                "data-role": props.role,
                "data-variant": variant,
            },
            [bubble],
            kind="chatBubble",
        )

    def _chat_group(self, node: ChatGroupNode, ctx: _Context) -> Element:
        props = node.props or StyledProps()
        bubbles = tuple(ChatBubbleNode(props=message) for message in node.messages)
        return Element(
            "div",
            {"role": "log", "class": cx(styles.CHAT_GROUP, props.class_name)},
            self._render_children(bubbles, ctx),
            kind="chat-group",
        )

    # ------------------------------------------------------------------
    # Buttons
    # ------------------------------------------------------------------

    def _button(self, node: ButtonNode, ctx: _Context) -> Element:
        props = node.props or ButtonProps()
        on_click = node.events.on_click if node.events else None
        if props.counter or (ctx.in_form and on_click == self.like_event):
            return self._like_button(props, on_click, ctx)
        return self._plain_button(node, props, on_click, ctx)

    def _plain_button(self, node: ButtonNode, props: ButtonProps, on_click: str | None, ctx: _Context) -> Element:
        variant = resolve_variant(styles.BUTTON_STYLES, props.variant or node.variant)
        el = Element(
            "button",
            _compact({
                "type": "submit" if ctx.implicit_submit and not on_click else "button",
                "class": cx(styles.BUTTON_BASE, styles.BUTTON_STYLES[variant], props.class_name),
                "aria-label": props.aria_label,
                "data-variant": variant,
            }),
            [props.label or node.text or "Button"],
            kind="button",
        )
        if on_click:
            payload = node.event_payload
            el.on("click", lambda event: self._invoke(on_click, payload))
        return el

    def _like_button(self, props: ButtonProps, handler: str | None, ctx: _Context) -> Element:
        """Counter local to this rendered instance. Without a handler it only counts."""
        path = ctx.path
        count = Element("span", children=[str(ctx.state.get(path, 0))], kind="count")
        el = Element(
            "button",
            {"type": "button", "class": cx(styles.LIKE_BUTTON, props.class_name), "aria-label": props.aria_label or "Like"},
            [Element("span", children=["❤️"]), count],
            kind="like-counter",
        )

        def on_like(event: UIEvent) -> None:
            total = ctx.state.increment(path)
            count.set_text(str(total))
            self._invoke(handler, {"count": total})

        el.on("click", on_like)
        return el

    def _button_group(self, node: ButtonGroupNode, ctx: _Context) -> Element:
        props = node.props or StyledProps()
        on_click = node.events.on_click if node.events else None
        el = Element("div", {"role": "group", "class": cx(styles.BUTTON_GROUP, props.class_name)}, kind="button-group")
        for index, button in enumerate(expand_button_group(node)):
            key = str(index)
            child = self._plain_button(button, ButtonProps(), on_click, ctx.child(key))
            child.key = key
            el.append(child)
        return el

    # ------------------------------------------------------------------
    # Form controls
    # ------------------------------------------------------------------

    def _input(self, props: InputProps) -> Element:
        el = Element("label", {"class": cx("block", props.class_name)}, kind="input")
        if props.label:
            el.append(Element("span", {"class": styles.FIELD_LABEL}, [props.label], kind="label"))
        el.append(Element("input", _compact({
            "name": props.name,
            "type": props.type or "text",
            "required": props.required,
            "value": props.default_value,
            "placeholder": props.placeholder,
            "class": styles.FIELD_ERROR if props.error else styles.FIELD,
            "aria-invalid": "true" if props.error else None,
        })))
        if props.error:
            el.append(Element("p", {"role": "alert", "class": styles.ERROR_MESSAGE}, [props.error], kind="error"))
        return el

    def _input_group(self, node: InputGroupNode, ctx: _Context) -> Element:
        props = node.props or StyledProps()
        inputs = tuple(InputNode(props=field) for field in node.inputs)
        return Element(
            "div",
            {"class": cx(styles.INPUT_GROUP, props.class_name)},
            self._render_children(inputs, ctx),
            kind="input-group",
        )

    def _select(self, props: SelectProps) -> Element:
        el = Element("label", {"class": cx("block", props.class_name)}, kind="select")
        if props.label:
            el.append(Element("span", {"class": styles.FIELD_LABEL}, [props.label], kind="label"))
        select = Element("select", _compact({"name": props.name, "required": props.required, "class": styles.FIELD}))
        for option in props.options:
            select.append(Element(
                "option",
                _compact({"value": option.value, "selected": True if option.value == props.default_value else None}),
                [option.label],
            ))
        el.append(select)
        return el

    def _checkbox(self, props: CheckboxProps) -> Element:
        return Element(
            "label",
            {"class": cx(styles.CHECKBOX_ROW, props.class_name)},
            [
                Element("input", _compact({
                    "name": props.name,
                    "type": "checkbox",
                    "checked": props.default_checked,
                    "class": styles.CHECKBOX,
                })),
                Element("span", {"class": "text-sm text-gray-700"}, [props.label], kind="label"),
            ],
            kind="checkbox",
        )

    # ------------------------------------------------------------------
    # Forms
    # ------------------------------------------------------------------

    def _form_shell(self, props: FormProps, on_submit: str | None, kind: str) -> Element:
        el = Element("form", {"class": cx(styles.FORM, props.class_name)}, kind=kind)
        if props.title:
            el.append(Element("h4", {"class": styles.FORM_TITLE}, [props.title], kind="title"))
        if props.description:
            el.append(Element("p", {"class": styles.FORM_DESCRIPTION}, [props.description], kind="description"))

        def submit(event: UIEvent) -> None:
            event.prevent_default()
            self._invoke(on_submit, el.form_data())

        el.on("submit", submit)
        return el

    def _form(self, node: FormNode, ctx: _Context) -> Element:
        events = node.events or FormEvents()
        el = self._form_shell(node.props or FormProps(), events.on_submit, "form")
        body = self._render_children(node.children, ctx, in_form=True, implicit_submit=False)
        el.append(Element("div", {"class": styles.FORM_BODY}, body, kind="body"))
        el.append(Element(
            "div",
            {"class": styles.FORM_ACTIONS},
            [
                Element("button", {"type": "submit", "class": cx(styles.BUTTON_BASE, styles.BUTTON_STYLES["primary"])}, ["Submit"], kind="submit"),
                Element("button", {"type": "reset", "class": cx(styles.BUTTON_BASE, styles.BUTTON_STYLES["secondary"])}, ["Reset"], kind="reset"),
            ],
            kind="actions",
        ))

        on_reset = events.on_reset
        el.on("reset", lambda event: self._invoke(on_reset))
        return el

    def _ui_group(self, node: UIGroupNode, ctx: _Context) -> Element:
        on_submit = node.events.on_submit if node.events else None
        el = self._form_shell(node.props or FormProps(), on_submit, "ui-group")
        el.append(Element(
            "div",
            {"class": styles.FORM_BODY},
            self._render_children(node.components, ctx, in_form=True, implicit_submit=True),
            kind="body",
        ))
        return el
