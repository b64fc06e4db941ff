"""
Query Patterns
Keyword tables mapping user queries to component categories and nodes.
"""

from typing import Any, Literal
from pydantic import BaseModel, ConfigDict, Field


ComponentType = Literal[
    "button-variants",
    "chat-bubbles",
    "card-variants",
    "input-variants",
    "form-variants",
]

MatchStage = Literal["pattern", "phrase", "combination", "keyword"]


class CategoryPattern(BaseModel):
    """Matching rules for one preset category."""

    model_config = ConfigDict(frozen=True)

    type: ComponentType
    phrases: tuple[str, ...] = Field(description="Word-boundary matched, checked first")
    combinations: tuple[tuple[str, ...], ...] = Field(default=(), description="All substrings must be present")
    keywords: tuple[str, ...] = Field(description="Single substrings, checked last")
    response: str


class DynamicPattern(BaseModel):
    """A narrow request answered with a purpose-built node."""

    model_config = ConfigDict(frozen=True)

    patterns: tuple[str, ...]
    response: str
    node: dict[str, Any]


FALLBACK_RESPONSE = (
    "I can help you explore our component library! "
    "Try asking about buttons, cards, inputs, or chat bubbles."
)
EMPTY_RESPONSE = "I can help you explore our component library!"
DEFAULT_CATEGORY_RESPONSE = "Here are the components you requested:"


# Priority order: most specific category first to avoid conflicts
CATEGORY_PATTERNS: tuple[CategoryPattern, ...] = (
    CategoryPattern(
        type="chat-bubbles",
        phrases=(
            "chat bubble",
            "message bubble",
            "chat layout",
            "chat message",
            "conversation bubble",
            "speech bubble",
        ),
        combinations=(("chat", "message"), ("message", "style")),
        keywords=("bubble", "message"),
        response=(
            "Let me show you chat bubble variations: User messages (right-aligned with blue gradient), "
            "Assistant messages (left-aligned with white background), Gradient bubbles for special messages, "
            "and System messages. All include timestamps and proper spacing."
        ),
    ),
    CategoryPattern(
        type="button-variants",
        phrases=("button", "ghost button", "action button", "submit button", "click button"),
        combinations=(("primary", "secondary"), ("button", "variant")),
        keywords=("button", "btn", "cta"),
        response=(
            "Here are different button variations you can use: Primary for main actions, "
            "Secondary for less important actions and Ghost for subtle interactions. "
            "Each button is interactive and follows modern design patterns."
        ),
    ),
    CategoryPattern(
        type="input-variants",
        phrases=(
            "text field",
            "input field",
            "search field",
            "email field",
            "form field",
            "text input",
            "search box",
        ),
        combinations=(("search", "field"), ("text", "input")),
        keywords=("input", "field", "textbox", "textarea"),
        response=(
            "Here are different input field types: Default text inputs, Search inputs with icons, "
            "Email inputs with validation styling, and Error states showing validation feedback. "
            "Each input has focus states and proper accessibility."
        ),
    ),
    CategoryPattern(
        type="card-variants",
        phrases=("card", "card component", "info card", "content card", "card layout"),
        combinations=(("elevated", "outlined"), ("card", "style")),
        keywords=("card", "panel", "tile"),
        response=(
            "I'll show you various card components: Default cards with subtle shadows, "
            "Elevated cards with prominent shadows for emphasis, Outlined cards with borders, "
            "and Gradient cards for eye-catching designs. All cards have hover animations."
        ),
    ),
    CategoryPattern(
        type="form-variants",
        phrases=(
            "form element",
            "form control",
            "checkbox",
            "radio button",
            "toggle switch",
            "select menu",
            "dropdown menu",
        ),
        combinations=(("form", "component"), ("checkbox", "radio")),
        keywords=("form", "checkbox", "radio", "toggle", "select", "dropdown"),
        response=(
            "Here are form component examples including checkboxes, radio buttons, toggles, "
            "and select menus. Each component follows accessibility best practices and has "
            "proper states (default, hover, active, disabled)."
        ),
    ),
)


def _email_input() -> dict[str, Any]:
    return {"name": "email", "label": "Email", "type": "email", "placeholder": "you@example.com"}


# Ordered: first match wins
DYNAMIC_PATTERNS: tuple[DynamicPattern, ...] = (
    # Single buttons
    DynamicPattern(
        patterns=("ghost button", "ghost btn"),
        response="Here's a ghost button - subtle and minimal, perfect for secondary actions:",
        node={"type": "button", "variant": "ghost", "text": "Ghost Button"},
    ),
    DynamicPattern(
        patterns=("primary button", "primary btn", "main button"),
        response="Here's a primary button - bold and prominent for main actions:",
        node={"type": "button", "variant": "primary", "text": "Primary Button"},
    ),
    DynamicPattern(
        patterns=("secondary button", "secondary btn"),
        response="Here's a secondary button - less prominent, for supporting actions:",
        node={"type": "button", "variant": "secondary", "text": "Secondary Button"},
    ),
    DynamicPattern(
        patterns=("cta", "call to action", "action button"),
        response="Here's a CTA button - designed to grab attention and drive conversions:",
        node={"type": "button", "variant": "primary", "text": "Get Started"},
    ),
    DynamicPattern(
        patterns=("submit button", "submit btn"),
        response="Here's a submit button for forms:",
        node={"type": "button", "variant": "primary", "text": "Submit"},
    ),
    # Single cards
    DynamicPattern(
        patterns=("elevated card", "shadow card"),
        response="Here's an elevated card with prominent shadow:",
        node={"type": "card-group", "variants": ["elevated"]},
    ),
    DynamicPattern(
        patterns=("gradient card",),
        response="Here's a gradient card for eye-catching designs:",
        node={"type": "card-group", "variants": ["gradient"]},
    ),
    DynamicPattern(
        patterns=("outlined card", "border card"),
        response="Here's an outlined card with border-only style:",
        node={"type": "card-group", "variants": ["outlined"]},
    ),
    # Single inputs
    DynamicPattern(
        patterns=("email input", "email field"),
        response="Here's an email input field:",
        node={"type": "input-group", "inputs": [_email_input()]},
    ),
    DynamicPattern(
        patterns=("search input", "search field", "search box"),
        response="Here's a search input field:",
        node={
            "type": "input-group",
            "inputs": [{"name": "search", "label": "Search", "type": "search", "placeholder": "Search..."}],
        },
    ),
    DynamicPattern(
        patterns=("password input", "password field"),
        response="Here's a password input field:",
        node={
            "type": "input-group",
            "inputs": [{"name": "password", "label": "Password", "type": "password", "placeholder": "Enter password"}],
        },
    ),
    # Chat bubbles
    DynamicPattern(
        patterns=("user bubble", "user message"),
        response="Here's a user message bubble:",
        node={
            "type": "chat-group",
            "messages": [{"role": "user", "text": "This is a user message", "timestamp": "12:30"}],
        },
    ),
    DynamicPattern(
        patterns=("assistant bubble", "bot message", "assistant message"),
        response="Here's an assistant message bubble:",
        node={
            "type": "chat-group",
            "messages": [{"role": "assistant", "text": "This is an assistant response", "timestamp": "12:31"}],
        },
    ),
    DynamicPattern(
        patterns=("system message", "system bubble"),
        response="Here's a system message bubble:",
        node={"type": "chat-group", "messages": [{"role": "system", "text": "System notification"}]},
    ),
    # Form elements
    DynamicPattern(
        patterns=("checkbox", "check box"),
        response="Here's a checkbox component:",
        node={"type": "checkbox", "props": {"name": "agree", "label": "I agree to the terms"}},
    ),
    DynamicPattern(
        patterns=("contact form", "callback form"),
        response="Here's a contact form:",
        node={
            "type": "ui-group",
            "props": {"title": "Contact Us"},
            "events": {"onSubmit": "formSubmitDemo"},
            "components": [
                {"type": "input", "props": {"name": "name", "label": "Name", "placeholder": "Your name"}},
                {"type": "input", "props": _email_input()},
                {"type": "button", "variant": "primary", "text": "Submit"},
            ],
        },
    ),
    DynamicPattern(
        patterns=("login form", "signin form", "sign in form"),
        response="Here's a login form:",
        node={
            "type": "ui-group",
            "props": {"title": "Login"},
            "events": {"onSubmit": "formSubmitDemo"},
            "components": [
                {"type": "input", "props": _email_input()},
                {
                    "type": "input",
                    "props": {"name": "password", "label": "Password", "type": "password", "placeholder": "Password"},
                },
                {"type": "button", "variant": "primary", "text": "Sign In"},
            ],
        },
    ),
)


class PatternLibrary:
    """Lookup helpers over the pattern tables."""

    RESPONSES: dict[str, str] = {p.type: p.response for p in CATEGORY_PATTERNS}

    @classmethod
    def category(cls, component_type: str) -> CategoryPattern | None:
        return next((p for p in CATEGORY_PATTERNS if p.type == component_type), None)

    @classmethod
    def response_for(cls, component_type: str | None) -> str:
        if not component_type:
            return EMPTY_RESPONSE
        return cls.RESPONSES.get(component_type, DEFAULT_CATEGORY_RESPONSE)
