"""Core utilities and infrastructure."""

from .config import Settings, get_settings
from .validate import (
    ValidationError,
    ValidationResult,
    QueryRequest,
    validate_query,
)
from .logging_config import configure_logging, get_logger, LogContext
from .stream import TokenBatcher, batch_tokens_sync
from .json import extract_json, safe_json_dumps, JSONParseError


def create_container(settings: Settings | None = None):
    """Create dependency injection container (lazy import to avoid circular deps)."""
    from .container import create_container as _create_container

    return _create_container(settings)


__all__ = [
    # Config
    "Settings",
    "get_settings",
    # Validation
    "ValidationError",
    "ValidationResult",
    "QueryRequest",
    "validate_query",
    # Logging
    "configure_logging",
    "get_logger",
    "LogContext",
    # Streaming
    "TokenBatcher",
    "batch_tokens_sync",
    # JSON
    "extract_json",
    "safe_json_dumps",
    "JSONParseError",
    # DI
    "create_container",
]
