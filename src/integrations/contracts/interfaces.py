from __future__ import annotations

from enum import Enum
from typing import Any, Dict, Optional, Union

from pydantic import BaseModel, ConfigDict, model_validator


# ---------------------------------------------------------------------------
# Enums
# ---------------------------------------------------------------------------

class HttpMethod(str, Enum):
    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    PATCH = "PATCH"
    DELETE = "DELETE"


class FailureKind(str, Enum):
    INVALID_INPUT = "INVALID_INPUT"      # rejected before any network call
    TRANSPORT = "TRANSPORT"              # no response received
    REMOTE = "REMOTE"                    # response received with a non-2xx status


# Sentinel statuses for records that carry no HTTP status code
STATUS_ERROR = "Error"
STATUS_INVALID_JSON = "Invalid JSON"
STATUS_INVALID_URL = "Invalid URL"

# Methods whose custom calls never carry a body
BODYLESS_METHODS = frozenset({HttpMethod.GET.value, HttpMethod.DELETE.value})


# ---------------------------------------------------------------------------
# Shared data models
# ---------------------------------------------------------------------------

class ApiDefinition(BaseModel):
    """One entry of the static test catalog."""

    model_config = ConfigDict(frozen=True)

    name: str
    method: HttpMethod = HttpMethod.GET
    url: str
    body: Optional[Any] = None


class ResultRecord(BaseModel):
    """
    Normalized outcome of one executed call.

    Exactly one of data/error is present, gated by success. Records are never
    mutated after creation.
    """

    model_config = ConfigDict(frozen=True)

    name: str
    status: Union[int, str]
    success: bool
    data: Optional[Any] = None
    error: Optional[str] = None

    @model_validator(mode="after")
    def _check_outcome(self) -> "ResultRecord":
        if self.success and self.error is not None:
            raise ValueError("a successful record cannot carry an error")
        if not self.success:
            if self.error is None:
                raise ValueError("a failed record must carry an error message")
            if self.data is not None:
                raise ValueError("a failed record cannot carry response data")
        return self

    @classmethod
    def passed(cls, name: str, status: int, data: Any) -> "ResultRecord":
        return cls(name=name, status=status, success=True, data=data)

    @classmethod
    def failed(cls, name: str, status: Union[int, str], error: str) -> "ResultRecord":
        return cls(name=name, status=status, success=False, error=error)

    def to_dict(self) -> Dict[str, Any]:
        out: Dict[str, Any] = {"name": self.name, "status": self.status, "success": self.success}
        if self.success:
            out["data"] = self.data
        else:
            out["error"] = self.error
        return out
