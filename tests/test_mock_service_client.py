"""Tests for the mock service client, including a round trip through the real mock endpoints."""

import json

import httpx
import pytest

import src.api.endpoints.mock_service as mock_service_module
from src.api.main import app
from src.integrations.clients.real_http.mock_service_client import MockGenerationError, MockServiceClient


@pytest.mark.asyncio
async def test_generate_against_in_process_mock_service(monkeypatch, values):
    monkeypatch.setattr(mock_service_module, "values", values)
    client = MockServiceClient(base_url="http://mock.test", transport=httpx.ASGITransport(app=app))

    preview = await client.generate("open a complaint")

    assert preview.url == "http://mock.test/api/generate-mock"
    assert preview.body["status"] == "Open"
    assert json.loads(preview.preview) == preview.body
    assert preview.preview.startswith('{\n  "complaintId"')


@pytest.mark.asyncio
async def test_generate_failure_raises_generation_error():
    def handler(request):
        raise httpx.ConnectError("connection refused", request=request)

    client = MockServiceClient(base_url="http://mock.test/", transport=httpx.MockTransport(handler))

    with pytest.raises(MockGenerationError, match="Failed to generate mock API"):
        await client.generate("anything")


@pytest.mark.asyncio
async def test_generate_rejects_non_json_reply():
    client = MockServiceClient(
        base_url="http://mock.test",
        transport=httpx.MockTransport(lambda request: httpx.Response(200, text="<html>")),
    )
    with pytest.raises(MockGenerationError):
        await client.generate("anything")
