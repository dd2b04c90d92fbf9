"""
Real HTTP API caller.

Purpose:
- Issues one HTTP call against an arbitrary endpoint (catalog entry or custom URL)
- Converts the outcome, success or failure, into a ResultRecord

Failure classification:
- TRANSPORT: no response was received (connection refused, DNS, TLS, timeout)
- REMOTE: a response arrived with a non-2xx status

Important:
- Keep this client as the ONLY place where dashboard test calls are made.
- Exceptions from the HTTP layer never escape: every call yields a record.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Optional

import httpx

from src.integrations.contracts.interfaces import STATUS_ERROR, STATUS_INVALID_URL, FailureKind, ResultRecord

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CallOutcome:
    record: ResultRecord
    failure: Optional[FailureKind] = None


def decode_body(response: httpx.Response) -> Any:
    """JSON body when parseable, raw text otherwise."""
    if not response.content:
        return ""
    try:
        return response.json()
    except ValueError:
        return response.text


class ApiCaller:
    def __init__(
        self,
        timeout_seconds: Optional[float] = None,
        follow_redirects: bool = True,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self.timeout_seconds = timeout_seconds
        self.follow_redirects = follow_redirects
        # Injected in tests (httpx.MockTransport); None means the real network.
        self.transport = transport

    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            timeout=self.timeout_seconds,
            follow_redirects=self.follow_redirects,
            transport=self.transport,
        )

    async def call(self, name: str, method: str, url: str, body: Any = None) -> CallOutcome:
        """Issue one call; `body` is sent as JSON when not None."""
        method = method.upper()
        try:
            logger.info(f"{method} {url} ({name})")
            async with self._client() as client:
                response = await client.request(method, url, json=body)
                response.raise_for_status()
                data = decode_body(response)
            logger.debug("Response for %s: status=%s", name, response.status_code)
            return CallOutcome(ResultRecord.passed(name, response.status_code, data))
        except httpx.HTTPStatusError as e:
            status_code = e.response.status_code
            logger.warning(f"{name} failed with status {status_code}")
            record = ResultRecord.failed(name, status_code, f"Request failed with status code {status_code}")
            return CallOutcome(record, FailureKind.REMOTE)
        except httpx.InvalidURL as e:
            logger.warning(f"{name} has an invalid URL: {e}")
            return CallOutcome(ResultRecord.failed(name, STATUS_INVALID_URL, str(e)), FailureKind.INVALID_INPUT)
        except httpx.HTTPError as e:
            message = str(e) or type(e).__name__
            logger.warning(f"{name} failed without a response: {message}")
            return CallOutcome(ResultRecord.failed(name, STATUS_ERROR, message), FailureKind.TRANSPORT)
