"""
Shared error handling for the stream rules client.
"""

from typing import Dict, Any, Optional
from pydantic import BaseModel


class ErrorResponse(BaseModel):
    """Standard error payload format."""

    operation_id: Optional[str] = None
    code: str
    message: str
    details: Dict[str, Any] = {}


class StreamRulesException(Exception):
    """Base exception for stream rule operations."""

    def __init__(self, code: str, message: str, details: Optional[Dict[str, Any]] = None):
        self.code = code
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def to_response(self, operation_id: Optional[str] = None) -> ErrorResponse:
        """Convert to error payload."""
        return ErrorResponse(
            operation_id=operation_id,
            code=self.code,
            message=self.message,
            details=self.details
        )


class ConfigurationError(StreamRulesException):
    """Local setup errors, e.g. using rules before a transport is bound."""

    def __init__(self, message: str = "Transport binding required before use", details: Optional[Dict[str, Any]] = None):
        super().__init__("CONFIGURATION_ERROR", message, details)


class ValidationError(StreamRulesException):
    """Validation-related errors."""

    def __init__(self, message: str = "Validation failed", details: Optional[Dict[str, Any]] = None):
        super().__init__("VALIDATION_ERROR", message, details)


class RemoteRuleError(StreamRulesException):
    """The API accepted the call but reported a logical error."""

    def __init__(self, message: str = "Rule operation rejected", details: Optional[Dict[str, Any]] = None):
        super().__init__("REMOTE_RULE_ERROR", message, details)

    @classmethod
    def from_errors(cls, errors: list) -> "RemoteRuleError":
        """Build from an ``errors`` array; only the first entry shapes the message."""
        first = errors[0] if errors else {}
        details = first.get("details") or [first.get("detail", "")]
        if isinstance(details, str):
            details = [details]
        message = f"{first.get('title', '')}: {details[0]}({first.get('type', '')})"
        return cls(message, details={"errors": errors})


class TransportError(StreamRulesException):
    """HTTP client-level failures (non-2xx responses, connection errors)."""

    def __init__(self, message: str = "Transport error", details: Optional[Dict[str, Any]] = None):
        super().__init__("TRANSPORT_ERROR", message, details)

    @property
    def status_code(self) -> Optional[int]:
        return self.details.get("status_code")

    @classmethod
    def from_status_error(cls, exc) -> "TransportError":
        """Translate an ``httpx.HTTPStatusError`` using the problem body when present."""
        response = exc.response
        details: Dict[str, Any] = {
            "status_code": response.status_code,
            "url": str(exc.request.url),
        }
        try:
            problem = response.json()
        except ValueError:
            problem = None

        if isinstance(problem, dict):
            for key in ("title", "detail", "type"):
                if key in problem:
                    details[key] = problem[key]

        if "title" in details:
            message = f"{details['title']}: {details.get('detail', '')} ({response.status_code})"
        else:
            details["body"] = response.text
            message = f"Rules API error: {response.status_code}"
        return cls(message, details=details)
