"""
Mock integration clients.

These builders return fake (but realistic) telecom payloads without calling any external API.
They are used by:
- the mock service endpoints (src/api/endpoints/mock_service.py)
- tests that need payloads of a known shape

Important:
- All randomness goes through MockValueProvider so it can be seeded.
- Payload shapes must stay stable: the dashboard previews them verbatim.
"""

from .mock_generator import MOCK_RULES, classify_description, generate_mock
from .telecom import (
    MockValueProvider,
    build_billing,
    build_generic,
    build_registration,
    build_sim_info,
    email_for,
)

__all__ = [
    "MOCK_RULES",
    "MockValueProvider",
    "build_billing",
    "build_generic",
    "build_registration",
    "build_sim_info",
    "classify_description",
    "email_for",
    "generate_mock",
]
