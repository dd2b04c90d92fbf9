"""Description-driven mock generator: keyword rules evaluated top to bottom, first match wins."""

from __future__ import annotations

import logging
from typing import Any, Callable, Dict, List, Tuple

from src.integrations.clients.mocks.telecom import (
    BILLING_MONTH,
    COMPLAINT_MESSAGE,
    MockValueProvider,
    build_generic,
    email_for,
)

logger = logging.getLogger(__name__)

Predicate = Callable[[str], bool]
Builder = Callable[[MockValueProvider], Dict[str, Any]]


def _all_of(*words: str) -> Predicate:
    return lambda text: all(word in text for word in words)


def _any_of(*words: str) -> Predicate:
    return lambda text: any(word in text for word in words)


def _user_registration(values: MockValueProvider) -> Dict[str, Any]:
    name = values.full_name()
    return {
        "userId": "omantel" + values.short_id(),
        "name": name,
        "email": email_for(name),
        "phone": values.phone(),
        "registeredAt": values.timestamp(),
    }


def _sim_activation(values: MockValueProvider) -> Dict[str, Any]:
    return {
        "simId": "SIM" + values.short_id(),
        "status": "Activated",
        "activatedAt": values.timestamp(),
    }


def _billing_info(values: MockValueProvider) -> Dict[str, Any]:
    return {
        "accountNumber": "ACC-" + values.short_id(),
        "amountDue": values.amount(8, 13),
        "dueDate": values.due_date(),
        "billingMonth": BILLING_MONTH,
    }


def _complaint(values: MockValueProvider) -> Dict[str, Any]:
    return {
        "complaintId": "CMP" + values.short_id(),
        "status": "Open",
        "message": COMPLAINT_MESSAGE,
    }


# (rule name, predicate, builder); order is precedence.
MOCK_RULES: List[Tuple[str, Predicate, Builder]] = [
    ("user_registration", _all_of("register", "user"), _user_registration),
    ("sim_activation", _all_of("sim", "activation"), _sim_activation),
    ("billing_info", _all_of("billing", "info"), _billing_info),
    ("complaint", _any_of("complaint", "issue"), _complaint),
]

FALLBACK_RULE = "generic"


def _match(description: str) -> Tuple[str, Builder]:
    text = (description or "").lower()
    for rule_name, predicate, builder in MOCK_RULES:
        if predicate(text):
            return rule_name, builder
    return FALLBACK_RULE, build_generic


def classify_description(description: str) -> str:
    """Name of the first rule matching the description, or the generic fallback."""
    return _match(description)[0]


def generate_mock(description: str, values: MockValueProvider) -> Dict[str, Any]:
    """Build the randomized payload for a free-text description. Never fails."""
    rule_name, builder = _match(description)
    logger.debug("Mock description matched rule %s", rule_name)
    return builder(values)
