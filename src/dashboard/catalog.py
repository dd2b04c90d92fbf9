"""
Static test catalog: the third-party demo endpoints exercised by the dashboard, grouped by category.

The catalog is fixed at build time. Its endpoints are opaque call targets; the only
behaviour relied on is "returns some HTTP status and optionally a JSON body".
"""

from __future__ import annotations

from typing import Dict, List, Mapping, Optional, Tuple

from src.integrations.contracts.interfaces import ApiDefinition, HttpMethod

CUSTOM_TAB = "custom"

Catalog = Mapping[str, Tuple[ApiDefinition, ...]]

_PLACEHOLDER = "https://jsonplaceholder.typicode.com"

DEFAULT_CATALOG: Dict[str, Tuple[ApiDefinition, ...]] = {
    "SIM": (
        ApiDefinition(name="SIM Info Success", method=HttpMethod.GET, url=f"{_PLACEHOLDER}/posts/1"),
        ApiDefinition(name="SIM Info Fail", method=HttpMethod.GET, url=f"{_PLACEHOLDER}/404"),
    ),
    "OTP": (
        ApiDefinition(
            name="Send OTP",
            method=HttpMethod.POST,
            url=f"{_PLACEHOLDER}/posts",
            body={"phone": "1234567890", "message": "Your OTP is 1234"},
        ),
    ),
    "Send": (
        ApiDefinition(
            name="Send Message",
            method=HttpMethod.POST,
            url=f"{_PLACEHOLDER}/posts",
            body={"user": "areej", "text": "hello"},
        ),
    ),
    "Valid": (
        ApiDefinition(name="Validate Email", method=HttpMethod.GET, url=f"{_PLACEHOLDER}/comments/1"),
    ),
}


class UnknownCategoryError(KeyError):
    def __init__(self, category: str) -> None:
        super().__init__(category)
        self.category = category

    def __str__(self) -> str:
        return f"Unknown category '{self.category}'"


def categories(catalog: Catalog = DEFAULT_CATALOG) -> List[str]:
    return list(catalog.keys())


def definitions_for(category: str, catalog: Catalog = DEFAULT_CATALOG) -> Tuple[ApiDefinition, ...]:
    try:
        return tuple(catalog[category])
    except KeyError:
        raise UnknownCategoryError(category) from None


def find_definition(category: str, name: str, catalog: Catalog = DEFAULT_CATALOG) -> Optional[ApiDefinition]:
    """Catalog lookup by category + name; None when either is unknown."""
    for definition in catalog.get(category, ()):
        if definition.name == name:
            return definition
    return None


def catalog_to_dict(catalog: Catalog = DEFAULT_CATALOG) -> Dict[str, List[dict]]:
    return {
        category: [d.model_dump(mode="json", exclude_none=True) for d in definitions]
        for category, definitions in catalog.items()
    }
