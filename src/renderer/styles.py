"""Style presets per node kind and variant."""

from collections.abc import Collection
from typing import NamedTuple


def cx(*parts: str | None) -> str:
    """Join non-empty class names."""
    return " ".join(p for p in parts if p)


def resolve_variant(presets: Collection[str], variant: str | None, default: str = "default") -> str:
    """Return ``variant`` if it has a preset, else the kind's default."""
    if variant and variant in presets:
        return variant
    return default


TEXT = "text-sm text-gray-700"
CONTAINER = "w-full"
DIVIDER = "h-px bg-gray-200 my-3"

# Cards
CARD_BASE = "rounded-xl p-4"
CARD_STYLES = {
    "default": "bg-white shadow-sm border border-gray-200",
    "elevated": "bg-white shadow-md border border-gray-100",
    "outlined": "bg-white border border-gray-200",
    "gradient": "text-white bg-gradient-to-br from-blue-600 to-cyan-500",
}
CARD_GROUP = "grid grid-cols-2 gap-4"


class CardMeta(NamedTuple):
    title: str
    description: str


CARD_METADATA = {
    "default": CardMeta("Default", "Basic card with shadow"),
    "elevated": CardMeta("Elevated", "Card with large shadow"),
    "outlined": CardMeta("Outlined", "Card with border"),
    "gradient": CardMeta("Gradient", "Card with gradient bg"),
}

# Chat bubbles
BUBBLE_BASE = "max-w-[85%] rounded-2xl px-4 py-2 text-sm"
BUBBLE_STYLES = {
    "user-default": "text-white bg-blue-600 rounded-br-sm",
    "user-gradient": "text-white bg-gradient-to-r from-blue-600 to-cyan-500 rounded-br-sm",
    "assistant-default": "text-gray-800 bg-white rounded-bl-sm border border-gray-200 shadow-sm",
    "assistant-gradient": "text-white bg-gradient-to-r from-slate-700 to-slate-900 rounded-bl-sm",
    "system": "text-gray-700 bg-gray-100 border border-gray-200",
}
BUBBLE_VARIANTS = frozenset({"default", "gradient"})
CHAT_GROUP = "space-y-3"

# Buttons
BUTTON_BASE = "inline-flex items-center justify-center rounded-md px-3 py-2 text-sm font-medium transition-colors"
_PRIMARY = "bg-blue-600 text-white hover:bg-blue-700"
BUTTON_STYLES = {
    "default": _PRIMARY,
    "primary": _PRIMARY,
    "secondary": "bg-gray-100 text-gray-900 hover:bg-gray-200",
    "ghost": "bg-transparent text-gray-700 hover:bg-gray-100",
}
BUTTON_GROUP = "flex flex-wrap gap-2"
LIKE_BUTTON = "inline-flex items-center gap-2 rounded-md border border-gray-200 bg-white px-3 py-2 text-sm text-gray-900 hover:bg-gray-50"
TOGGLE_BUTTON = "ml-1 text-xs font-medium text-blue-600 hover:underline"

# Form controls
FIELD_LABEL = "block text-xs font-medium text-gray-700 mb-1"
FIELD = "w-full rounded-md border border-gray-300 bg-white px-3 py-2 text-sm text-gray-900 focus:outline-none focus:ring-2 focus:ring-blue-500"
FIELD_ERROR = "w-full rounded-md border-2 border-red-500 bg-white px-3 py-2 text-sm text-gray-900 focus:outline-none focus:ring-2 focus:ring-red-500"
ERROR_MESSAGE = "text-xs text-red-600 mt-1"
INPUT_GROUP = "space-y-3"
CHECKBOX_ROW = "flex items-center gap-2"
CHECKBOX = "h-4 w-4 rounded border-gray-300 text-blue-600 focus:ring-blue-500"

# Forms
FORM = "w-full rounded-xl border border-gray-200 bg-white p-4 shadow-sm"
FORM_TITLE = "text-sm font-semibold text-gray-900"
FORM_DESCRIPTION = "text-xs text-gray-600 mt-1"
FORM_BODY = "mt-3 space-y-3"
FORM_ACTIONS = "mt-4 flex items-center gap-2"
