"""
Stream rules client package.

Manages the rule set of a filtered real-time stream through its remote
control-plane API: listing, creating and deleting match rules, with
batched add/delete requests and tag-based identification.

Structure:
- app.transport: The authenticated HTTP client binding shared by all operations.
- app.rules: Rule value type, bulk request codec, and the rule repository.
"""

from .transport import TransportBinding
from .rules import Rule, RuleRepository

__all__ = [
    "TransportBinding",
    "Rule",
    "RuleRepository",
]
