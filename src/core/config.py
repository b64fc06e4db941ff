"""Configuration Management."""

from functools import lru_cache
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()


class Settings(BaseSettings):
    """Engine settings from environment."""

    model_config = SettingsConfigDict(
        env_prefix="UI_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Logging
    log_level: str = Field(default="INFO", description="Log level")
    json_logs: bool = Field(default=False, description="Use JSON log format")

    # Validation
    max_message_length: int = Field(default=1000, gt=0, le=1000, description="Max chat message length")
    max_node_depth: int = Field(default=20, gt=0, description="Max node nesting depth; the root node is depth 0")

    # Streaming
    stream_chunk_size: int = Field(default=20, gt=0, description="Characters per streamed text chunk")

    # Rendering
    like_event: str = Field(default="likeDemo", description="Handler name rendered as a like counter")

    # Query parsing
    strict_dynamic_matching: bool = Field(
        default=False, description="Use word-boundary matching for dynamic patterns"
    )


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
