"""
Rule data models for the filtered stream.
"""

from dataclasses import dataclass, replace
from typing import Any, Dict, Mapping, Optional

from shared.errors import ValidationError


@dataclass(frozen=True)
class Rule:
    """One server-side filter criterion.

    ``tag`` falls back to ``value`` so individual matches can be tracked
    without inventing labels. ``id`` is only ever set from a server response.
    """
    value: str
    tag: Optional[str] = None
    id: Optional[str] = None

    def __post_init__(self):
        if not self.value:
            raise ValidationError("Rule value must not be empty")
        if self.tag is None:
            object.__setattr__(self, "tag", self.value)

    @property
    def is_persisted(self) -> bool:
        return self.id is not None

    def with_id(self, rule_id: str) -> "Rule":
        """Return a copy of this rule annotated with a server-assigned id."""
        return replace(self, id=str(rule_id))

    def to_payload(self) -> Dict[str, str]:
        return {"value": self.value, "tag": self.tag}

    @classmethod
    def from_payload(cls, raw: Mapping[str, Any]) -> "Rule":
        """Rebuild a persisted rule from a listing or creation entry."""
        rule_id = raw.get("id")
        return cls(
            value=raw["value"],
            tag=raw.get("tag"),
            id=str(rule_id) if rule_id is not None else None
        )
