"""
Rate provider abstraction.

A provider fetches one rate table per call from a remote service and derives
the cross rate between two currencies from it. Variants only differ in the
endpoint, the query parameter that carries the API key and the shape of
their error payloads.
"""
from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from decimal import Decimal, DecimalException
from typing import Any, Dict, Optional

import httpx
from pydantic import ValidationError

from ..errors import ProviderError
from ..models import RateTable
from ..settings import settings

logger = logging.getLogger(__name__)


class RateProvider(ABC):
    name: str = "provider"
    key_param: str = "api_key"

    def __init__(self, api_key: str, base_url: Optional[str] = None, timeout: Optional[float] = None):
        self.api_key = api_key
        self.base_url = base_url or self.default_url()
        self.timeout = timeout if timeout is not None else settings.HTTP_TIMEOUT_SEC

    @classmethod
    @abstractmethod
    def default_url(cls) -> str:
        raise NotImplementedError

    @abstractmethod
    def error_message(self, status_code: int, data: Any) -> Optional[str]:
        """Return the provider's own failure description, or None when the payload is not an error."""
        raise NotImplementedError

    def params(self, from_ccy: str, to_ccy: str) -> Dict[str, str]:
        return {self.key_param: self.api_key, "symbols": f"{from_ccy},{to_ccy}"}

    async def fetch_rates(self, from_ccy: str, to_ccy: str) -> RateTable:
        logger.debug("Fetching %s rates for %s,%s", self.name, from_ccy, to_ccy)
        async with httpx.AsyncClient(timeout=self.timeout) as client:
            try:
                r = await client.get(self.base_url, params=self.params(from_ccy, to_ccy))
            except httpx.HTTPError as exc:
                logger.warning("%s request failed: %s", self.name, exc)
                raise ProviderError(f"{self.name} request failed: {exc}") from exc

        try:
            data = r.json()
        except ValueError:
            data = None

        message = self.error_message(r.status_code, data)
        if message is None and r.is_error:
            message = f"{self.name} returned HTTP {r.status_code}"
        if message:
            logger.warning("%s error (HTTP %s): %s", self.name, r.status_code, message)
            raise ProviderError(message)

        if data is None:
            raise ProviderError(f"{self.name} returned a non-JSON response")
        try:
            return RateTable.model_validate(data)
        except ValidationError as exc:
            logger.warning("%s returned an unexpected payload: %s", self.name, exc.errors())
            raise ProviderError(f"{self.name} returned an unexpected payload") from exc

    def cross_rate(self, table: RateTable, from_ccy: str, to_ccy: str) -> Decimal:
        # A missing or null quote currency yields a zero rate rather than an error
        quote = table.rates.get(to_ccy) or 0.0
        base = table.rates.get(from_ccy)
        if not base:
            raise ProviderError(f"{self.name} has no rate for {from_ccy}")
        try:
            return Decimal(str(quote)) / Decimal(str(base))
        except DecimalException as exc:
            raise ProviderError(f"{self.name} rate for {from_ccy} to {to_ccy} is out of range") from exc

    async def get_exchange_rate(self, from_ccy: str, to_ccy: str) -> Decimal:
        table = await self.fetch_rates(from_ccy, to_ccy)
        return self.cross_rate(table, from_ccy, to_ccy)

    async def convert_currency(self, amount: Decimal, from_ccy: str, to_ccy: str) -> Decimal:
        rate = await self.get_exchange_rate(from_ccy, to_ccy)
        try:
            return amount * rate
        except DecimalException as exc:
            raise ProviderError(f"converted amount out of range for {from_ccy} to {to_ccy}") from exc

    def __repr__(self) -> str:
        return f"{type(self).__name__}(base_url={self.base_url!r})"
