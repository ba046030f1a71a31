"""Sources of billboard facts.

A source never raises for a billboard it cannot provide: it logs a warning
and returns identity-only facts, which render through the placeholder paths.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Any, Protocol

import httpx
from pydantic import ValidationError

from billboard_print.print_engine.cli.io import load_json
from billboard_print.print_engine.layout.facts import BillboardPrintFacts, ContractInfo
from billboard_print.print_engine.prepare.transport import RateLimitedAsyncTransport

logger = logging.getLogger(__name__)


class FactsSource(Protocol):
    """Anything that can fetch the facts of one billboard."""

    async def fetch(self, billboard_id: int) -> BillboardPrintFacts: ...


def facts_from_record(
    record: Mapping[str, Any], contract: ContractInfo | None = None
) -> BillboardPrintFacts:
    """Validate one billboard record, attaching ``contract`` if it has none.

    Raises:
        ValidationError: If the record is not a billboard record.
    """
    facts = BillboardPrintFacts.model_validate(record)
    if facts.contract is None and contract is not None:
        facts = facts.model_copy(update={"contract": contract})
    return facts


class JsonFactsSource:
    """Billboard records read from a JSON file.

    The file holds either a list of billboard records or an object with a
    ``billboards`` list and an optional ``contract`` record shared by all.
    Plain, ``.gz`` and ``.bz2`` files are supported.

    Raises:
        ValueError: If the file holds neither shape.
    """

    def __init__(self, path: Path):
        self.path = path
        data = load_json(path)
        if isinstance(data, list):
            records, contract_record = data, None
        elif isinstance(data, dict) and isinstance(data.get("billboards", []), list):
            records = data.get("billboards", [])
            contract_record = data.get("contract")
        else:
            raise ValueError(
                f"{path}: expected a list of billboard records"
                " or an object with a billboards list"
            )

        self.contract = (
            ContractInfo.model_validate(contract_record) if contract_record else None
        )
        self._facts: dict[int, BillboardPrintFacts] = {}
        for index, record in enumerate(records):
            try:
                facts = facts_from_record(record, self.contract)
            except ValidationError as e:
                logger.warning("Skipping record %d of %s: %s", index, path, e)
                continue
            self._facts[facts.id] = facts
        logger.debug("Loaded %d billboards from %s", len(self._facts), path)

    def all(self) -> list[BillboardPrintFacts]:
        """Every valid billboard of the file, in file order."""
        return list(self._facts.values())

    async def fetch(self, billboard_id: int) -> BillboardPrintFacts:
        facts = self._facts.get(billboard_id)
        if facts is None:
            logger.warning("Billboard %s not found in %s", billboard_id, self.path)
            return BillboardPrintFacts.identity_only(billboard_id)
        return facts


class HttpFactsSource:
    """Billboard records fetched over HTTP, one GET per billboard.

    Records are read from ``{base_url}/billboards/{id}``.
    """

    def __init__(
        self,
        base_url: str,
        *,
        contract: ContractInfo | None = None,
        client: httpx.AsyncClient | None = None,
        max_calls: int = 10,
        period: float = 1,
        timeout: float = 30,
    ):
        """Initialize the source.

        Args:
            base_url: Root URL of the billboard API.
            contract: Contract attached to records that carry none.
            client: Optional client to use (if None, creates one internally).
            max_calls: Maximum number of requests per period.
            period: The rate limit period in seconds.
            timeout: Request timeout in seconds.
        """
        self.base_url = base_url.rstrip("/")
        self.contract = contract
        self._client = client
        self._owns_client = client is None
        self.max_calls = max_calls
        self.period = period
        self.timeout = timeout

    def _get_client(self) -> httpx.AsyncClient:
        if self._client is None:
            transport = RateLimitedAsyncTransport(
                max_calls=self.max_calls, period=self.period
            )
            self._client = httpx.AsyncClient(
                transport=transport, follow_redirects=True, timeout=self.timeout
            )
        return self._client

    async def aclose(self) -> None:
        """Close the HTTP client if we own it."""
        if self._owns_client and self._client is not None:
            await self._client.aclose()
            self._client = None

    async def __aenter__(self) -> HttpFactsSource:
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.aclose()

    async def fetch(self, billboard_id: int) -> BillboardPrintFacts:
        url = f"{self.base_url}/billboards/{billboard_id}"
        try:
            response = await self._get_client().get(url)
            response.raise_for_status()
            return facts_from_record(response.json(), self.contract)
        except (httpx.HTTPError, json.JSONDecodeError, ValidationError) as e:
            logger.warning("Could not fetch billboard %s: %s", billboard_id, e)
            facts = BillboardPrintFacts.identity_only(billboard_id)
            return facts.model_copy(update={"contract": self.contract})
