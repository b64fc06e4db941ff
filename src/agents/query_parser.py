"""Query Parser - free text to a preset category or a dynamic node."""

import re
from functools import lru_cache
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, model_validator

from core import get_logger
from nodes import Node, parse_node
from .presets import build_preset
from .patterns import (
    CATEGORY_PATTERNS,
    DYNAMIC_PATTERNS,
    EMPTY_RESPONSE,
    FALLBACK_RESPONSE,
    CategoryPattern,
    ComponentType,
    DynamicPattern,
    MatchStage,
    PatternLibrary,
)

logger = get_logger(__name__)


class ParsedQuery(BaseModel):
    """Result of parsing a query. Carries a category or a node, never both."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["preset", "dynamic"]
    response_text: str
    component_type: ComponentType | None = None
    node: Node | None = None
    match_stage: MatchStage | None = None

    @model_validator(mode="after")
    def check_payload(self) -> "ParsedQuery":
        if self.component_type is not None and self.node is not None:
            raise ValueError("component_type and node are mutually exclusive")
        if self.kind == "dynamic" and self.node is None:
            raise ValueError("dynamic results require a node")
        if self.kind == "preset" and self.node is not None:
            raise ValueError("preset results carry a component_type, not a node")
        return self

    @property
    def matched(self) -> bool:
        return self.component_type is not None or self.node is not None

    def to_node(self) -> Node | None:
        """The node to render: the dynamic node, a fresh preset, or None."""
        if self.node is not None:
            return self.node
        if self.component_type is not None:
            return build_preset(self.component_type)
        return None


@lru_cache(maxsize=256)
def _phrase_regex(phrase: str) -> re.Pattern[str]:
    return re.compile(rf"\b{re.escape(phrase)}\b", re.IGNORECASE)


def contains_phrase(query: str, phrase: str) -> bool:
    """True if ``phrase`` occurs in ``query`` on word boundaries."""
    return _phrase_regex(phrase).search(query) is not None


def _normalize(query: Any) -> str:
    if not isinstance(query, str):
        return ""
    return query.lower().strip()


class QueryParser:
    """
    Two-phase matcher.

    Dynamic patterns (narrow requests such as "ghost button") are checked
    before the broad categories so a specific request yields a single
    focused node. Within a category, word-boundary phrases beat keyword
    combinations, which beat single keywords.
    """

    def __init__(
        self,
        strict_dynamic: bool = False,
        dynamic_patterns: tuple[DynamicPattern, ...] = DYNAMIC_PATTERNS,
        category_patterns: tuple[CategoryPattern, ...] = CATEGORY_PATTERNS,
    ) -> None:
        self.strict_dynamic = strict_dynamic
        self.dynamic_patterns = dynamic_patterns
        self.category_patterns = category_patterns

    def parse(self, query: Any) -> ParsedQuery:
        """Parse a query. Empty, None or non-string input yields the fallback."""
        lowered = _normalize(query)
        if not lowered:
            return ParsedQuery(kind="preset", response_text=EMPTY_RESPONSE)

        dynamic = self.match_dynamic(lowered)
        if dynamic is not None:
            logger.debug("query_matched", kind="dynamic", pattern=dynamic.patterns[0])
            return ParsedQuery(
                kind="dynamic",
                node=parse_node(dynamic.node),
                response_text=dynamic.response,
                match_stage="pattern",
            )

        category = self.match_category(lowered)
        if category is not None:
            pattern, stage = category
            logger.debug("query_matched", kind="preset", component_type=pattern.type, stage=stage)
            return ParsedQuery(
                kind="preset",
                component_type=pattern.type,
                response_text=pattern.response,
                match_stage=stage,
            )

        logger.debug("query_unmatched", length=len(lowered))
        return ParsedQuery(kind="preset", response_text=FALLBACK_RESPONSE)

    def match_dynamic(self, lowered: str) -> DynamicPattern | None:
        for dynamic in self.dynamic_patterns:
            if any(self._contains(lowered, p) for p in dynamic.patterns):
                return dynamic
        return None

    def match_category(self, lowered: str) -> tuple[CategoryPattern, MatchStage] | None:
        for pattern in self.category_patterns:
            if any(contains_phrase(lowered, phrase) for phrase in pattern.phrases):
                return pattern, "phrase"
            if any(all(word in lowered for word in combo) for combo in pattern.combinations):
                return pattern, "combination"
            if any(keyword in lowered for keyword in pattern.keywords):
                return pattern, "keyword"
        return None

    def _contains(self, lowered: str, pattern: str) -> bool:
        if self.strict_dynamic:
            return contains_phrase(lowered, pattern)
        return pattern in lowered


_default_parser = QueryParser()


def parse_query(query: Any) -> ParsedQuery:
    """Parse with the default (compatibility) matching rules."""
    return _default_parser.parse(query)


def parse_component_query(query: Any) -> ComponentType | None:
    """Category-only match, ignoring dynamic patterns."""
    lowered = _normalize(query)
    if not lowered:
        return None
    category = _default_parser.match_category(lowered)
    return category[0].type if category else None


def get_component_response(component_type: ComponentType | None) -> str:
    """Descriptive response text for a category."""
    return PatternLibrary.response_for(component_type)
