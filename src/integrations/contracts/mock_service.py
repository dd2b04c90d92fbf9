"""
Mock service contracts.

Request bodies accepted by the mock endpoints. Every field is optional: the
mock service never rejects a request, it synthesizes whatever is missing.
"""

from __future__ import annotations

from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict


class RegisterRequest(BaseModel):
    model_config = ConfigDict(extra="ignore")

    name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None

    @classmethod
    def from_payload(cls, payload: Any) -> "RegisterRequest":
        """Keep the string fields of a JSON object; anything else is treated as missing."""
        if not isinstance(payload, dict):
            return cls()
        return cls(**{k: v for k, v in payload.items() if k in cls.model_fields and isinstance(v, str)})


class MockPreview(BaseModel):
    """Last generated mock: the fixed endpoint URL and the pretty-printed body."""

    model_config = ConfigDict(frozen=True)

    url: str
    preview: str
    body: Any


def description_from_payload(payload: Optional[Dict[str, Any]]) -> str:
    """Extract a lowercased description; anything unusable becomes ''."""
    if not isinstance(payload, dict):
        return ""
    value = payload.get("description")
    if not isinstance(value, str):
        return ""
    return value.lower()
