"""
Integrations layer.
This package contains all code used to communicate with HTTP endpoints:
- the third-party demo endpoints exercised by the dashboard catalog
- the local mock service (description-driven mock generation)

Key rule:
- Dashboard state code MUST NOT call external APIs directly.
- It should call integration clients (under src/integrations/clients).
- MOCK clients build payloads in-process; REAL_HTTP clients talk to the network.
"""

from .contracts.interfaces import (
    BODYLESS_METHODS,
    STATUS_ERROR,
    STATUS_INVALID_JSON,
    STATUS_INVALID_URL,
    ApiDefinition,
    FailureKind,
    HttpMethod,
    ResultRecord,
)
from .contracts.mock_service import MockPreview, RegisterRequest

__all__ = [
    # interfaces
    "ApiDefinition", "FailureKind", "HttpMethod", "ResultRecord",
    "BODYLESS_METHODS", "STATUS_ERROR", "STATUS_INVALID_JSON", "STATUS_INVALID_URL",
    # mock service
    "MockPreview", "RegisterRequest",
]
