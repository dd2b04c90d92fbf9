"""
Telecom mock payload builders.

⚠️  Every value here is fake. Payloads are shaped like the Omantel sandbox
    responses (SIM info, registration, billing) and are randomized on every
    call. Randomness and the clock come from MockValueProvider so tests can
    seed them.
"""

import logging
import random
from datetime import date, datetime, timedelta, timezone
from typing import Any, Callable, Dict, List, Optional

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Seed data
# ---------------------------------------------------------------------------

FIRST_NAMES: List[str] = ["Fatma", "Ali", "Salim", "Aisha", "Huda", "Mohammed"]
SURNAMES: List[str] = ["Al-Maskari", "Al-Busaidi", "Al-Harthy", "Al-Lawati"]

EMAIL_DOMAIN = "omantel.om"
EMAIL_SEPARATOR = "."
PHONE_PREFIX = "+9689"
CURRENCY = "OMR"
BILLING_MONTH = "August 2025"
GENERIC_MESSAGE = "Generic Omantel Mock Response"
REGISTERED_MESSAGE = "User registered successfully"
COMPLAINT_MESSAGE = "Thank you. Your issue has been logged. We'll get back to you."


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


# ---------------------------------------------------------------------------
# Value provider
# ---------------------------------------------------------------------------

class MockValueProvider:
    """
    Source of every random value used by the mock service.

    Parameters
    ----------
    seed : int, optional
        Seed for the private Random instance. Unseeded by default.
    clock : callable, optional
        Returns the current aware datetime. Defaults to UTC now.
    """

    def __init__(self, seed: Optional[int] = None, clock: Optional[Callable[[], datetime]] = None):
        self._rng = random.Random(seed)
        self._clock = clock or _utc_now

    # ------------------------------------------------------------------
    # Primitives
    # ------------------------------------------------------------------

    def digits(self, count: int) -> str:
        """A number with exactly `count` digits (no leading zero)."""
        low = 10 ** (count - 1)
        return str(self._rng.randrange(low, low * 10))

    def choice(self, options: List[str]) -> str:
        return self._rng.choice(options)

    def amount(self, low: int, high: int) -> str:
        """Decimal in [low, high) formatted with 3 decimals and the currency suffix."""
        # Drawn in thousandths so rounding can never reach `high`.
        thousandths = self._rng.randrange(low * 1000, high * 1000)
        return f"{thousandths / 1000:.3f} {CURRENCY}"

    def now(self) -> datetime:
        return self._clock()

    def today(self) -> date:
        return self._clock().date()

    def timestamp(self) -> str:
        """ISO-8601 UTC timestamp with millisecond precision and a Z suffix."""
        now = self._clock().astimezone(timezone.utc)
        return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")

    # ------------------------------------------------------------------
    # Domain values
    # ------------------------------------------------------------------

    def short_id(self) -> str:
        return self.digits(4)

    def full_name(self) -> str:
        return f"{self.choice(FIRST_NAMES)} {self.choice(SURNAMES)}"

    def phone(self) -> str:
        return PHONE_PREFIX + self.digits(7)

    def due_date(self) -> str:
        """Today plus 1..14 days, date only."""
        offset = self._rng.randint(1, 14)
        return (self.today() + timedelta(days=offset)).isoformat()


def email_for(name: str) -> str:
    """Lowercased name, spaces replaced by the separator, fixed domain."""
    local = name.lower().replace(" ", EMAIL_SEPARATOR)
    return f"{local}@{EMAIL_DOMAIN}"


# ---------------------------------------------------------------------------
# Endpoint payloads
# ---------------------------------------------------------------------------

def build_sim_info(values: MockValueProvider) -> Dict[str, Any]:
    return {
        "simId": "SIM-" + values.digits(6),
        "status": "Activated",
        "activatedAt": values.timestamp(),
    }


def build_registration(
    values: MockValueProvider,
    name: Optional[str] = None,
    email: Optional[str] = None,
    phone: Optional[str] = None,
) -> Dict[str, Any]:
    # Empty strings count as omitted.
    name = name or values.full_name()
    email = email or email_for(name)
    phone = phone or values.phone()

    return {
        "message": REGISTERED_MESSAGE,
        "user": {
            "id": "OMT" + values.short_id(),
            "name": name,
            "email": email,
            "phone": phone,
        },
    }


def build_billing(values: MockValueProvider) -> Dict[str, Any]:
    return {
        "accountNumber": "OM-BILL-" + values.short_id(),
        "billingMonth": BILLING_MONTH,
        "amountDue": values.amount(5, 25),
        "dueDate": values.due_date(),
    }


def build_generic(values: MockValueProvider) -> Dict[str, Any]:
    return {
        "message": GENERIC_MESSAGE,
        "timestamp": values.timestamp(),
    }
