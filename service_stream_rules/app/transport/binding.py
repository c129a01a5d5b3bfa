"""
Transport binding for the rules API.

Holds the single authenticated ``httpx.Client`` every rule operation goes
through. A binding is created once (usually at startup) and handed to the
``RuleRepository``; it performs no I/O on its own.
"""

from typing import Optional

import httpx

from shared.config import StreamRulesConfig, get_config
from shared.errors import ConfigurationError
from shared.logging import get_logger


class TransportBinding:
    """Authenticated request-execution capability for the rules API."""

    def __init__(self, config: Optional[StreamRulesConfig] = None):
        self.config = config or get_config()
        self.logger = get_logger("stream_rules.transport")
        self._client: Optional[httpx.Client] = None
        self._owns_client = False

    @classmethod
    def from_config(cls, config: Optional[StreamRulesConfig] = None) -> "TransportBinding":
        """Create a binding, binding the configured bearer token if one is set."""
        binding = cls(config)
        if binding.config.bearer_token is not None:
            binding.use_bearer_token(binding.config.bearer_token.get_secret_value())
        return binding

    @property
    def is_bound(self) -> bool:
        return self._client is not None

    def use_http_client(self, client: httpx.Client) -> "TransportBinding":
        """Bind a preconfigured client. The caller keeps ownership of it."""
        self._bind(client, owns_client=False)
        self.logger.info("Transport bound to external client")
        return self

    def use_bearer_token(self, bearer_token: str) -> "TransportBinding":
        """Bind a client that sends ``Authorization: Bearer <token>`` on every request."""
        if not bearer_token:
            raise ConfigurationError("Bearer token must not be empty")

        client = httpx.Client(
            headers={
                "Authorization": f"Bearer {bearer_token}",
                "User-Agent": self.config.user_agent,
            },
            timeout=self.config.request_timeout,
        )
        self._bind(client, owns_client=True)
        self.logger.info("Transport bound with bearer token", timeout=self.config.request_timeout)
        return self

    def require(self) -> httpx.Client:
        """Return the bound client or fail before any request is attempted."""
        if self._client is None:
            raise ConfigurationError(
                "Transport binding required before use: call use_http_client() or use_bearer_token()"
            )
        return self._client

    def close(self) -> None:
        """Close the client if this binding created it."""
        if self._client is not None and self._owns_client:
            self._client.close()
        self._client = None
        self._owns_client = False

    def _bind(self, client: httpx.Client, owns_client: bool) -> None:
        if self._client is not None:
            self.logger.warning("Replacing existing transport binding")
            self.close()
        self._client = client
        self._owns_client = owns_client
