"""
Shared configuration management for the stream rules client.
"""

from functools import lru_cache
from typing import Optional

from pydantic import Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict


DEFAULT_RULES_URL = "https://api.twitter.com/2/tweets/search/stream/rules"


class StreamRulesConfig(BaseSettings):
    """Settings for talking to the filtered stream rules API."""

    model_config = SettingsConfigDict(
        env_prefix="STREAM_RULES_",
        env_file=".env",
        case_sensitive=False,
        extra="ignore"
    )

    # Environment
    env: str = Field(default="local")
    log_level: str = Field(default="info")

    # Remote API
    rules_url: str = Field(default=DEFAULT_RULES_URL)
    bearer_token: Optional[SecretStr] = Field(default=None)
    request_timeout: float = Field(default=10.0, gt=0)
    user_agent: str = Field(default="stream-rules-client/1.0")


@lru_cache()
def get_config() -> StreamRulesConfig:
    """Get the process configuration."""
    return StreamRulesConfig()
