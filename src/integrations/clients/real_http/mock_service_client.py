"""
Mock Service HTTP Client.

Purpose:
- Sends a free-text description to the mock service (POST /api/generate-mock)
- Returns the generated body, its pretty-printed preview and the fixed mock URL

Usage:
- Called by the dashboard "Generate Mock API" action
- The returned URL can be copied into the custom API tester
"""

from __future__ import annotations

import json
import logging
import os
from typing import Optional

import httpx

from src.integrations.contracts.mock_service import MockPreview

logger = logging.getLogger(__name__)

GENERATE_MOCK_PATH = "/api/generate-mock"


class MockGenerationError(RuntimeError):
    """The mock service could not be reached or answered with an error."""


class MockServiceClient:
    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout_seconds: float = 15.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self.base_url = (base_url or os.getenv("MOCK_SERVICE_BASE_URL", "http://localhost:5000")).rstrip("/")
        self.timeout_seconds = timeout_seconds
        self.transport = transport

    @property
    def mock_url(self) -> str:
        return f"{self.base_url}{GENERATE_MOCK_PATH}"

    async def generate(self, description: str) -> MockPreview:
        try:
            async with httpx.AsyncClient(timeout=self.timeout_seconds, transport=self.transport) as client:
                response = await client.post(self.mock_url, json={"description": description})
                response.raise_for_status()
                body = response.json()
        except (httpx.HTTPError, ValueError) as e:
            logger.error(f"Mock generation failed against {self.mock_url}: {e}")
            raise MockGenerationError("Failed to generate mock API") from e

        logger.info("Generated mock for description %r", description[:80])
        return MockPreview(url=self.mock_url, preview=json.dumps(body, indent=2, ensure_ascii=False), body=body)
