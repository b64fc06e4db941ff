"""Dependency Injection Container."""

from injector import Injector, Module, provider, singleton

from nodes import NodeParser
from renderer import EventRegistry, Renderer, register_demo_handlers
from agents.query_parser import QueryParser
from agents.chat import ChatAgent
from .config import Settings, get_settings
from .logging_config import configure_logging


class CoreModule(Module):
    """Core dependencies."""

    def __init__(self, settings: Settings | None = None) -> None:
        self.settings = settings or get_settings()

    @singleton
    @provider
    def provide_settings(self) -> Settings:
        return self.settings

    @singleton
    @provider
    def provide_event_registry(self) -> EventRegistry:
        """Provide event registry with the demo handlers installed."""
        registry = EventRegistry()
        register_demo_handlers(registry)
        return registry

    @singleton
    @provider
    def provide_node_parser(self, settings: Settings) -> NodeParser:
        return NodeParser(max_depth=settings.max_node_depth)

    @singleton
    @provider
    def provide_renderer(self, registry: EventRegistry, parser: NodeParser, settings: Settings) -> Renderer:
        return Renderer(registry, like_event=settings.like_event, parser=parser)

    @singleton
    @provider
    def provide_query_parser(self, settings: Settings) -> QueryParser:
        return QueryParser(strict_dynamic=settings.strict_dynamic_matching)

    @singleton
    @provider
    def provide_chat_agent(self, parser: QueryParser, renderer: Renderer, settings: Settings) -> ChatAgent:
        """Provide chat agent with all dependencies."""
        return ChatAgent(parser, renderer, settings)


def create_container(settings: Settings | None = None) -> Injector:
    """Create configured injector."""
    module = CoreModule(settings)
    configure_logging(module.settings.log_level, module.settings.json_logs)
    return Injector([module])
