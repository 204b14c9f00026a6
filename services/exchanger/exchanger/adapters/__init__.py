"""
Exchange rate provider adapters, selected by name per request.
"""
from typing import Dict, Type

from ..errors import UnsupportedProvider
from .base import RateProvider
from .fixerio import FixerIoProvider
from .openexchangerates import OpenExchangeRatesProvider

PROVIDERS: Dict[str, Type[RateProvider]] = {
    OpenExchangeRatesProvider.name: OpenExchangeRatesProvider,
    FixerIoProvider.name: FixerIoProvider,
}


def make_provider(source: str, api_key: str) -> RateProvider:
    cls = PROVIDERS.get(source)
    if cls is None:
        raise UnsupportedProvider()
    return cls(api_key)


__all__ = [
    "PROVIDERS",
    "make_provider",
    "RateProvider",
    "OpenExchangeRatesProvider",
    "FixerIoProvider",
]
