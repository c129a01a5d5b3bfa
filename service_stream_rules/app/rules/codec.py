"""
Bulk operation encoding and response decoding for the rules endpoint.
"""

from typing import Any, Dict, List, Mapping, Optional, Sequence

import httpx

from shared.errors import RemoteRuleError, TransportError, ValidationError
from .models import Rule


ADD = "add"
DELETE = "delete"
BULK_OPERATIONS = (ADD, DELETE)

BulkOperations = Mapping[str, Sequence[Rule]]


def encode_bulk(operations: BulkOperations) -> Dict[str, Any]:
    """Build the POST body for a batch of add and delete operations.

    Rules without an id are dropped from ``delete``: deleting a rule that was
    never created is a no-op. An empty dict means there is nothing to send.
    """
    unknown = set(operations) - set(BULK_OPERATIONS)
    if unknown:
        raise ValidationError(
            f"Unsupported bulk operation(s): {', '.join(sorted(unknown))}",
            details={"allowed": list(BULK_OPERATIONS)}
        )

    body: Dict[str, Any] = {}

    if DELETE in operations:
        ids = [rule.id for rule in operations[DELETE] if rule.id is not None]
        if ids:
            body[DELETE] = {"ids": ids}

    if ADD in operations and operations[ADD]:
        body[ADD] = [rule.to_payload() for rule in operations[ADD]]

    return body


def decode_response(response: httpx.Response) -> Dict[str, Any]:
    """Parse a rules endpoint response, raising on API-reported errors."""
    try:
        payload = response.json()
    except ValueError as e:
        raise TransportError(
            "Rules API returned a non-JSON body",
            details={"status_code": response.status_code, "body": response.text}
        ) from e

    if not isinstance(payload, dict):
        raise TransportError(
            "Rules API returned an unexpected body",
            details={"status_code": response.status_code, "body": response.text}
        )

    errors = payload.get("errors")
    if errors:
        raise RemoteRuleError.from_errors(errors)

    return payload


def resolve_created(rules: Sequence[Rule], payload: Mapping[str, Any]) -> List[Rule]:
    """Assign the ids in ``payload['data']`` back onto the submitted rules.

    Entries are first matched on the echoed value and tag (an entry without
    a tag matches on value alone). Rules left unmatched then take the
    remaining entries in submission order. Rules with no entry left are
    returned without an id.
    """
    remaining = [entry for entry in payload.get("data") or [] if entry.get("id") is not None]
    matched: List[Optional[Mapping[str, Any]]] = []

    for rule in rules:
        match = None
        for entry in remaining:
            if "value" not in entry or entry["value"] != rule.value:
                continue
            if "tag" in entry and entry["tag"] != rule.tag:
                continue
            match = entry
            break
        if match is not None:
            remaining.remove(match)
        matched.append(match)

    leftovers = iter(remaining)
    resolved = []
    for rule, match in zip(rules, matched):
        if match is None:
            match = next(leftovers, None)
        resolved.append(rule.with_id(match["id"]) if match is not None else rule)
    return resolved
