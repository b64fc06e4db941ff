"""Node rendering and event dispatch."""

from .elements import Element, UIEvent
from .registry import EventRegistry, Handler
from .handlers import register_demo_handlers, FORM_SUBMIT_DEMO, RESET_DEMO, LIKE_DEMO
from .renderer import Renderer, LocalState, expand_card_group, expand_button_group

__all__ = [
    "Element",
    "UIEvent",
    "EventRegistry",
    "Handler",
    "register_demo_handlers",
    "FORM_SUBMIT_DEMO",
    "RESET_DEMO",
    "LIKE_DEMO",
    "Renderer",
    "LocalState",
    "expand_card_group",
    "expand_button_group",
]
