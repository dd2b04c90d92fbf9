"""
Mock service endpoints.

A sandbox, not a production service: nothing is validated, rate limited or
persisted, and every documented case answers 200 with a JSON body.
"""

from typing import Any

from fastapi import APIRouter, Body

from src.integrations.clients.mocks import (
    MockValueProvider,
    build_billing,
    build_generic,
    build_registration,
    build_sim_info,
    generate_mock,
)
from src.integrations.contracts.mock_service import RegisterRequest, description_from_payload

router = APIRouter(prefix="/api", tags=["Mock Service"])

# Replaced in tests with a seeded provider.
values = MockValueProvider()


@router.get("/sim-info")
async def sim_info():
    return build_sim_info(values)


@router.post("/register")
async def register(payload: Any = Body(default=None)):
    """
    Register a mock user. Missing or non-string fields are synthesized.

    Example payload:
    {
        "name": "Aisha Al-Harthy",
        "phone": "+96891234567"
    }
    """
    body = RegisterRequest.from_payload(payload)
    return build_registration(values, name=body.name, email=body.email, phone=body.phone)


@router.get("/billing")
async def billing():
    return build_billing(values)


@router.get("/generate-mock")
async def generate_mock_preview():
    return build_generic(values)


@router.post("/generate-mock")
async def generate_mock_from_description(payload: Any = Body(default=None)):
    """
    Build a mock payload from a free-text description.

    Example payload:
    {
        "description": "register a new user with name and email"
    }
    """
    return generate_mock(description_from_payload(payload), values)
