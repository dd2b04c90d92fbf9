"""Glue between the mock service client and the dashboard state."""

from __future__ import annotations

import logging

from src.dashboard.state import ResultStore, use_mock_in_custom, with_mock_preview
from src.integrations.clients.real_http.mock_service_client import MockServiceClient
from src.integrations.contracts.mock_service import MockPreview

logger = logging.getLogger(__name__)


async def create_mock_api(store: ResultStore, client: MockServiceClient, description: str) -> MockPreview:
    """
    Generate a mock for `description` and keep it as the last preview.

    Raises:
        MockGenerationError: If the mock service call fails; the previous preview is kept
    """
    preview = await client.generate(description)
    store.dispatch(with_mock_preview(preview))
    return preview


def copy_mock_to_custom(store: ResultStore) -> bool:
    """Fill the custom tester with the last mock URL. False when nothing was generated yet."""
    if store.state.mock_preview is None:
        return False
    store.dispatch(use_mock_in_custom)
    logger.info("Mock API copied to Custom API tester")
    return True
