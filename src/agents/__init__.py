"""Query parsing, presets and chat orchestration."""

from .chat import ChatAgent, ChatReply
from .patterns import ComponentType, MatchStage, CATEGORY_PATTERNS, DYNAMIC_PATTERNS, PatternLibrary
from .presets import build_preset, PRESETS
from .query_parser import (
    ParsedQuery,
    QueryParser,
    contains_phrase,
    parse_query,
    parse_component_query,
    get_component_response,
)

__all__ = [
    "ChatAgent",
    "ChatReply",
    "ComponentType",
    "MatchStage",
    "CATEGORY_PATTERNS",
    "DYNAMIC_PATTERNS",
    "PatternLibrary",
    "build_preset",
    "PRESETS",
    "ParsedQuery",
    "QueryParser",
    "contains_phrase",
    "parse_query",
    "parse_component_query",
    "get_component_response",
]
