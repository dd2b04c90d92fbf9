"""
Request runner: executes catalog categories and ad-hoc custom calls, writing results to the ResultStore.

Calls inside a category run strictly one after the other, and run_all walks the
categories one after the other too, so result order always equals catalog order.
"""

from __future__ import annotations

import json
import logging
from typing import List, Optional

from src.dashboard.catalog import DEFAULT_CATALOG, Catalog, definitions_for
from src.dashboard.state import (
    ResultStore,
    with_all_loading,
    with_category_results,
    with_custom_result,
    with_loading_category,
)
from src.integrations.clients.real_http.api_caller import ApiCaller, CallOutcome
from src.integrations.contracts.interfaces import (
    BODYLESS_METHODS,
    STATUS_INVALID_JSON,
    STATUS_INVALID_URL,
    FailureKind,
    HttpMethod,
    ResultRecord,
)

logger = logging.getLogger(__name__)

CUSTOM_RESULT_NAME = "Custom API"


def _reject_constant(token: str):
    raise ValueError(f"{token} is not valid JSON")


def parse_custom_body(method: str, body_text: Optional[str]):
    """
    Parse the custom tester body.

    Returns None for bodyless methods and {} for blank text.

    Raises:
        ValueError: If the text is not strict JSON (NaN and Infinity included)
    """
    if method.upper() in BODYLESS_METHODS:
        return None
    if not body_text or not body_text.strip():
        return {}
    return json.loads(body_text, parse_constant=_reject_constant)


class RequestRunner:
    def __init__(
        self,
        store: ResultStore,
        caller: Optional[ApiCaller] = None,
        catalog: Catalog = DEFAULT_CATALOG,
        cors_proxy_url: str = "https://cors-anywhere.herokuapp.com/",
    ) -> None:
        self.store = store
        self.caller = caller or ApiCaller()
        self.catalog = catalog
        # Empty string disables the proxy retry.
        self.cors_proxy_url = cors_proxy_url

    async def run_category(self, category: str) -> List[ResultRecord]:
        """Run every definition of a category in order and overwrite its stored results."""
        definitions = definitions_for(category, self.catalog)
        logger.info(f"Running category {category} ({len(definitions)} calls)")

        self.store.dispatch(with_loading_category(category))
        records: List[ResultRecord] = []
        try:
            for definition in definitions:
                body = definition.body if definition.method != HttpMethod.GET else None
                outcome = await self.caller.call(definition.name, definition.method.value, definition.url, body)
                records.append(outcome.record)
            self.store.dispatch(with_category_results(category, records))
        finally:
            self.store.dispatch(with_loading_category(None))

        passed = sum(1 for r in records if r.success)
        logger.info(f"Category {category} finished: {passed} passed, {len(records) - passed} failed")
        return records

    async def run_all(self) -> None:
        """Run every category sequentially; one category's failures never stop the next."""
        self.store.dispatch(with_all_loading(True))
        try:
            for category in self.catalog:
                await self.run_category(category)
        finally:
            self.store.dispatch(with_all_loading(False))

    async def run_custom(self, method: str, url: str, body_text: Optional[str] = None) -> ResultRecord:
        """Run one ad-hoc call and store it in the custom result slot."""
        record = await self._custom_call(method.upper(), (url or "").strip(), body_text)
        self.store.dispatch(with_custom_result(record))
        return record

    async def _custom_call(self, method: str, url: str, body_text: Optional[str]) -> ResultRecord:
        try:
            body = parse_custom_body(method, body_text)
        except ValueError as e:
            logger.info(f"Custom call rejected, body is not JSON: {e}")
            return ResultRecord.failed(CUSTOM_RESULT_NAME, STATUS_INVALID_JSON, f"Invalid JSON body: {e}")

        if not url:
            return ResultRecord.failed(CUSTOM_RESULT_NAME, STATUS_INVALID_URL, "Request URL is empty")

        outcome = await self.caller.call(CUSTOM_RESULT_NAME, method, url, body)
        if not self._should_retry_via_proxy(outcome):
            return outcome.record

        proxied_url = f"{self.cors_proxy_url}{url}"
        logger.info(f"Custom call got no response, retrying once via proxy: {proxied_url}")
        retry = await self.caller.call(CUSTOM_RESULT_NAME, method, proxied_url, body)
        return retry.record

    def _should_retry_via_proxy(self, outcome: CallOutcome) -> bool:
        # Only calls that never received a response; a non-2xx answer is final.
        return outcome.failure == FailureKind.TRANSPORT and bool(self.cors_proxy_url)
