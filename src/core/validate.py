"""Input validation for queries and node payloads."""

from dataclasses import dataclass
from typing import Any
from returns.result import Result, Success, Failure

from pydantic import BaseModel, Field, field_validator, ConfigDict
from pydantic import ValidationError as PydanticValidationError


MAX_MESSAGE_LENGTH = 1000
MAX_NODE_DEPTH = 20


class ValidationError(Exception):
    """Validation failed."""

    pass


@dataclass(frozen=True)
class ValidationResult:
    """Validation error with details (for Result pattern)."""

    message: str
    field: str | None = None
    value: Any | None = None


class QueryRequest(BaseModel):
    """Validated chat query."""

    model_config = ConfigDict(strict=True, extra="forbid", frozen=True)

    message: str = Field(min_length=1, max_length=MAX_MESSAGE_LENGTH)

    @field_validator("message")
    @classmethod
    def validate_message(cls, v: str) -> str:
        """Ensure message is non-empty after stripping."""
        stripped = v.strip()
        if not stripped:
            raise ValueError("Message cannot be only whitespace")
        return stripped


def validate_query(message: Any, max_length: int = MAX_MESSAGE_LENGTH) -> Result[QueryRequest, ValidationResult]:
    """
    Validate a raw chat message (Result pattern).

    Args:
        message: Untrusted user input
        max_length: Maximum allowed length after trimming

    Returns:
        Success with the validated request, or Failure describing the problem
    """
    if not isinstance(message, str):
        return Failure(ValidationResult("Message must be a string", "message", message))
    if len(message.strip()) > max_length:
        return Failure(ValidationResult(f"Message is too long (max {max_length} characters)", "message"))
    try:
        return Success(QueryRequest(message=message.strip()))
    except PydanticValidationError as e:
        return Failure(ValidationResult(e.errors()[0]["msg"], "message", message))

