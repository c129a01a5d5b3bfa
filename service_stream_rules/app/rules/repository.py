"""
Rule repository for the filtered stream rules API.
"""

from typing import Any, Callable, Dict, List, Optional

import httpx

from shared.errors import StreamRulesException, TransportError
from shared.logging import get_logger, set_operation_id, clear_context
from ..transport.binding import TransportBinding
from .codec import ADD, DELETE, BulkOperations, encode_bulk, decode_response, resolve_created
from .models import Rule


class RuleRepository:
    """Collection-level operations on the remote rule set."""

    def __init__(self, binding: TransportBinding, rules_url: Optional[str] = None):
        self.binding = binding
        self.rules_url = rules_url or binding.config.rules_url
        self.logger = get_logger("stream_rules.repository")

    def new_rule(self, value: str, tag: Optional[str] = None) -> Rule:
        """Construct a rule, failing early when no transport is bound."""
        self.binding.require()
        return Rule(value, tag)

    def all(self) -> List[Rule]:
        """List every rule currently configured on the stream."""
        client = self.binding.require()
        operation_id = set_operation_id()
        try:
            response = self._send(client.get, "GET", operation_id)
            payload = decode_response(response)
        finally:
            clear_context()

        data = payload.get("data") or []
        if not data:
            self.logger.debug("No rules configured")
            return []

        rules = [Rule.from_payload(raw) for raw in data]
        self.logger.info("Rules listed", count=len(rules))
        return rules

    def create(self, value: str, tag: Optional[str] = None) -> Rule:
        """Create a rule and return it with its server-assigned id."""
        return self.add(self.new_rule(value, tag))

    def add(self, rule: Rule) -> Rule:
        results = self.add_bulk(rule)
        if results.get("data"):
            return resolve_created([rule], results)[0]
        return rule

    def add_bulk(self, *rules: Rule) -> Dict[str, Any]:
        if not rules:
            return {}
        return self.bulk({ADD: rules})

    def delete(self, rule: Rule) -> Dict[str, Any]:
        return self.delete_bulk(rule)

    def delete_bulk(self, *rules: Rule) -> Dict[str, Any]:
        if not rules:
            return {}
        return self.bulk({DELETE: rules})

    def bulk(self, operations: BulkOperations) -> Dict[str, Any]:
        """Send all add and delete operations in a single POST."""
        client = self.binding.require()
        body = encode_bulk(operations)
        if not body:
            self.logger.debug("Skipping empty bulk request")
            return {}

        operation_id = set_operation_id()
        try:
            self.logger.info(
                "Sending bulk rule operation",
                add_count=len(body.get(ADD, [])),
                delete_count=len(body.get(DELETE, {}).get("ids", []))
            )
            response = self._send(
                client.post,
                "POST",
                operation_id,
                headers={"Content-Type": "application/json"},
                json=body
            )
            try:
                results = decode_response(response)
            except StreamRulesException as e:
                self.logger.error("Bulk rule operation rejected", **e.to_response(operation_id).model_dump())
                raise
        finally:
            clear_context()

        summary = (results.get("meta") or {}).get("summary")
        if summary:
            self.logger.info("Bulk rule operation completed", summary=summary)
        return results

    def _send(self, request: Callable[..., httpx.Response], method: str, operation_id: str, **kwargs) -> httpx.Response:
        """Execute one request against the rules endpoint, translating httpx failures."""
        try:
            response = request(self.rules_url, **kwargs)
            response.raise_for_status()
        except httpx.HTTPError as e:
            if isinstance(e, httpx.HTTPStatusError):
                error = TransportError.from_status_error(e)
            else:
                error = TransportError(
                    "Rules API unavailable",
                    details={"http_error": str(e), "url": self.rules_url}
                )
            self.logger.error("Rules API request failed", method=method, **error.to_response(operation_id).model_dump())
            raise error from e

        return response
