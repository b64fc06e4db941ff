"""
Reference Handlers
Trivial demo behaviors shipped with the engine. Hosts replace them freely.
"""

from typing import Any, TYPE_CHECKING

from core import get_logger, safe_json_dumps

if TYPE_CHECKING:
    from .registry import EventRegistry

logger = get_logger(__name__)

FORM_SUBMIT_DEMO = "formSubmitDemo"
RESET_DEMO = "resetDemo"
LIKE_DEMO = "likeDemo"


def form_submit_demo(payload: Any = None) -> None:
    logger.info("form_submitted", message=f"Submitted: {safe_json_dumps(payload)}")


def reset_demo(payload: Any = None) -> None:
    logger.info("form_reset", message="Form reset")


def like_demo(payload: Any = None) -> None:
    logger.info("liked", message=f"Liked: {safe_json_dumps(payload)}")


def register_demo_handlers(registry: "EventRegistry") -> None:
    """Register the reference handlers used by presets and generated nodes."""
    registry.register(FORM_SUBMIT_DEMO, form_submit_demo)
    registry.register(RESET_DEMO, reset_demo)
    registry.register(LIKE_DEMO, like_demo)
