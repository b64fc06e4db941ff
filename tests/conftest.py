"""Pytest configuration and fixtures."""

import os
from typing import Any

import pytest

from core import Settings, get_settings
from nodes import NodeParser
from renderer import EventRegistry, Renderer, FORM_SUBMIT_DEMO, RESET_DEMO, LIKE_DEMO
from agents import ChatAgent, QueryParser


# ============================================================================
# Pytest Hooks
# ============================================================================

def pytest_configure(config):
    """Configure pytest with environment variables."""
    os.environ["UI_LOG_LEVEL"] = "DEBUG"
    os.environ["UI_JSON_LOGS"] = "false"


# ============================================================================
# Core Fixtures
# ============================================================================

@pytest.fixture
def settings():
    """Test settings."""
    get_settings.cache_clear()
    return get_settings()


class Recorder:
    """Collects (handler name, payload) pairs in call order."""

    def __init__(self) -> None:
        self.calls: list[tuple[str, Any]] = []

    def handler_for(self, name: str):
        def record(payload: Any = None) -> None:
            self.calls.append((name, payload))
        return record

    def payloads(self, name: str) -> list[Any]:
        return [payload for called, payload in self.calls if called == name]


@pytest.fixture
def recorder():
    return Recorder()


@pytest.fixture
def registry(recorder):
    """Registry with recording handlers for the demo event names."""
    reg = EventRegistry()
    for name in (FORM_SUBMIT_DEMO, RESET_DEMO, LIKE_DEMO):
        reg.register(name, recorder.handler_for(name))
    return reg


@pytest.fixture
def renderer(registry):
    return Renderer(registry)


@pytest.fixture
def node_parser():
    return NodeParser()


@pytest.fixture
def query_parser():
    return QueryParser()


@pytest.fixture
def chat_agent(query_parser, renderer):
    """Chat agent with small stream chunks."""
    return ChatAgent(query_parser, renderer, Settings(stream_chunk_size=8))


# ============================================================================
# Data Fixtures
# ============================================================================

@pytest.fixture
def login_form():
    """Login form payload as generated for 'login form' queries."""
    return {
        "type": "ui-group",
        "props": {"title": "Login"},
        "events": {"onSubmit": FORM_SUBMIT_DEMO},
        "components": [
            {"type": "input", "props": {"name": "email", "label": "Email", "type": "email"}},
            {"type": "input", "props": {"name": "password", "label": "Password", "type": "password"}},
            {"type": "button", "variant": "primary", "text": "Sign In"},
        ],
    }
