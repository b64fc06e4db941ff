"""
Rendered Elements
A small DOM-like tree produced by the Renderer, with event dispatch and
HTML serialization. Text is always escaped, never interpreted as markup.
"""

from collections.abc import Callable, Iterator
from dataclasses import dataclass, field
from html import escape
from typing import Any

VOID_TAGS = frozenset({"input", "hr", "br", "img"})
FIELD_TAGS = frozenset({"input", "select", "textarea"})


@dataclass
class UIEvent:
    """Event passed to element listeners."""

    type: str
    target: "Element"
    default_prevented: bool = False

    def prevent_default(self) -> None:
        self.default_prevented = True


Listener = Callable[[UIEvent], None]


@dataclass(eq=False)
class Element:
    """
    One rendered UI element.

    ``attrs`` hold HTML attributes (defaults for form controls); ``value``
    and ``checked`` hold live control state set through :meth:`fill` and
    :meth:`check`.
    """

    tag: str
    attrs: dict[str, Any] = field(default_factory=dict)
    children: list["Element | str"] = field(default_factory=list)
    kind: str | None = None
    key: str | None = None
    listeners: dict[str, Listener] = field(default_factory=dict, repr=False)
    value: str | None = field(default=None, repr=False)
    checked: bool | None = field(default=None, repr=False)
    parent: "Element | None" = field(default=None, repr=False)

    def __post_init__(self) -> None:
        for child in self.children:
            if isinstance(child, Element):
                child.parent = self

    # ------------------------------------------------------------------
    # Tree helpers
    # ------------------------------------------------------------------

    def append(self, child: "Element | str") -> None:
        if isinstance(child, Element):
            child.parent = self
        self.children.append(child)

    def set_text(self, text: str) -> None:
        """Replace all children with a single text node."""
        self.children = [text]

    def walk(self) -> Iterator["Element"]:
        """Depth-first iteration over this element and its descendants."""
        yield self
        for child in self.children:
            if isinstance(child, Element):
                yield from child.walk()

    def find_all(self, tag: str | None = None, kind: str | None = None, **attrs: Any) -> list["Element"]:
        return [
            el for el in self.walk()
            if (tag is None or el.tag == tag)
            and (kind is None or el.kind == kind)
            and all(el.attrs.get(k.replace("_", "-")) == v for k, v in attrs.items())
        ]

    def find(self, tag: str | None = None, kind: str | None = None, **attrs: Any) -> "Element | None":
        found = self.find_all(tag, kind, **attrs)
        return found[0] if found else None

    def closest(self, tag: str) -> "Element | None":
        el = self.parent
        while el is not None and el.tag != tag:
            el = el.parent
        return el

    def text_content(self) -> str:
        return "".join(
            child if isinstance(child, str) else child.text_content()
            for child in self.children
        )

    # ------------------------------------------------------------------
    # Form control state
    # ------------------------------------------------------------------

    @property
    def is_checkbox(self) -> bool:
        return self.tag == "input" and self.attrs.get("type") == "checkbox"

    def current_value(self) -> str:
        if self.value is not None:
            return self.value
        if self.tag == "select":
            options = self.find_all("option")
            for option in options:
                if option.attrs.get("selected"):
                    return str(option.attrs.get("value", ""))
            return str(options[0].attrs.get("value", "")) if options else ""
        value = self.attrs.get("value")
        return "" if value is None else str(value)

    def is_checked(self) -> bool:
        if self.checked is not None:
            return self.checked
        return bool(self.attrs.get("checked"))

    def fill(self, value: str) -> None:
        """Simulate typing into a text control or choosing a select option."""
        if self.tag not in FIELD_TAGS or self.is_checkbox:
            raise TypeError(f"Cannot fill <{self.tag}>")
        self.value = str(value)

    def check(self, checked: bool = True) -> None:
        if not self.is_checkbox:
            raise TypeError(f"Cannot check <{self.tag}>")
        self.checked = checked

    def restore_defaults(self) -> None:
        for el in self.walk():
            el.value = None
            el.checked = None

    def form_data(self) -> dict[str, str | bool]:
        """Collect named controls below this element into a flat payload."""
        data: dict[str, str | bool] = {}
        for el in self.walk():
            name = el.attrs.get("name")
            if el.tag not in FIELD_TAGS or not name:
                continue
            data[name] = el.is_checked() if el.is_checkbox else el.current_value()
        return data

    # ------------------------------------------------------------------
    # Events
    # ------------------------------------------------------------------

    def on(self, event_type: str, listener: Listener) -> None:
        self.listeners[event_type] = listener

    def dispatch(self, event_type: str) -> UIEvent:
        """Run this element's listener, then the default action unless prevented."""
        event = UIEvent(type=event_type, target=self)
        listener = self.listeners.get(event_type)
        if listener is not None:
            listener(event)
        if not event.default_prevented:
            self._default_action(event)
        return event

    def click(self) -> UIEvent:
        return self.dispatch("click")

    def submit(self) -> UIEvent:
        return self.dispatch("submit")

    def reset(self) -> UIEvent:
        return self.dispatch("reset")

    def _default_action(self, event: UIEvent) -> None:
        if event.type == "click" and self.tag == "button":
            form = self.closest("form")
            button_type = self.attrs.get("type", "submit")
            if form is not None and button_type == "submit":
                form.submit()
            elif form is not None and button_type == "reset":
                form.reset()
        elif event.type == "click" and self.is_checkbox:
            self.checked = not self.is_checked()
        elif event.type == "reset" and self.tag == "form":
            self.restore_defaults()
        # A form submit that nobody prevented would navigate; there is no
        # network surface here, so it ends silently.

    # ------------------------------------------------------------------
    # Serialization
    # ------------------------------------------------------------------

    def structure(self) -> dict[str, Any]:
        """Handler-free nested description, for structural comparison."""
        return {
            "tag": self.tag,
            "kind": self.kind,
            "key": self.key,
            "attrs": dict(self.attrs),
            "children": [
                child if isinstance(child, str) else child.structure()
                for child in self.children
            ],
        }

    def to_html(self) -> str:
        attrs = "".join(_format_attr(name, value) for name, value in self.attrs.items())
        if self.tag in VOID_TAGS:
            return f"<{self.tag}{attrs}>"
        inner = "".join(
            escape(child) if isinstance(child, str) else child.to_html()
            for child in self.children
        )
        return f"<{self.tag}{attrs}>{inner}</{self.tag}>"


def _format_attr(name: str, value: Any) -> str:
    if value is None or value is False:
        return ""
    if value is True:
        return f" {name}"
    return f' {name}="{escape(str(value), quote=True)}"'
