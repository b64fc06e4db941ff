"""Chat Agent - query in, response text then component out."""

from collections.abc import Iterator
from typing import Literal

from pydantic import BaseModel, ConfigDict
from returns.pipeline import is_successful

from core import Settings, get_logger, LogContext, validate_query, batch_tokens_sync
from nodes import Node
from renderer import Element, Renderer
from .patterns import ComponentType
from .query_parser import QueryParser

logger = get_logger(__name__)


class ChatReply(BaseModel):
    """Assistant reply: descriptive text plus an optional node to show after it."""

    model_config = ConfigDict(frozen=True)

    content: str
    kind: Literal["preset", "dynamic"] = "preset"
    component_type: ComponentType | None = None
    node: Node | None = None


class ChatAgent:
    """Answers component questions with text followed by a rendered node."""

    def __init__(self, parser: QueryParser, renderer: Renderer, settings: Settings | None = None) -> None:
        self.parser = parser
        self.renderer = renderer
        self.settings = settings or Settings()

    def respond(self, message: object) -> ChatReply:
        """Build the reply for a message. Invalid input gets the fallback reply."""
        result = validate_query(message, self.settings.max_message_length)

        if not is_successful(result):
            logger.info("query_rejected", reason=result.failure().message)
            parsed = self.parser.parse(None)
        else:
            query = result.unwrap().message
            with LogContext(query=query[:50]):
                parsed = self.parser.parse(query)
                logger.info("query_parsed", kind=parsed.kind, matched=parsed.matched)

        return ChatReply(
            content=parsed.response_text,
            kind=parsed.kind,
            component_type=parsed.component_type,
            node=parsed.to_node(),
        )

    def stream(self, message: object) -> Iterator[str | ChatReply]:
        """
        Stream a reply: text chunks first, then the complete ChatReply.

        Consumers mount the reply's node only once the ChatReply arrives,
        so the component never appears before its description.
        """
        reply = self.respond(message)
        yield from batch_tokens_sync(reply.content, self.settings.stream_chunk_size)
        yield reply

    def render_reply(self, reply: ChatReply) -> Element | None:
        if reply.node is None:
            return None
        return self.renderer.render(reply.node)
