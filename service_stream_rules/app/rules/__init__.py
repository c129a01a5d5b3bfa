"""
Rules package.

Modules of interest:
- models: The Rule value type (value, tag, server-assigned id).
- codec: Encodes add/delete batches into one request body and decodes
  responses, surfacing API-reported errors.
- repository: List, create, add and delete operations against the remote
  rule set.
"""

from .models import Rule
from .codec import encode_bulk, decode_response, resolve_created
from .repository import RuleRepository

__all__ = [
    "Rule",
    "RuleRepository",
    "encode_bulk",
    "decode_response",
    "resolve_created",
]
