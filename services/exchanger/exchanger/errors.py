"""Error taxonomy for the exchange endpoint.

Every failure is terminal for the request. The exception handler in
``exchanger.main`` renders these as ``{"error": message, "name": field}``
(``name`` omitted when the failure is not tied to an input field).
"""
from __future__ import annotations

from typing import Any, Dict, Optional


class ExchangeError(Exception):
    status_code: int = 400
    default_message: str = "exchange failed"
    name: Optional[str] = None

    def __init__(self, message: Optional[str] = None):
        self.message = message or self.default_message
        super().__init__(self.message)

    def to_body(self) -> Dict[str, Any]:
        body: Dict[str, Any] = {"error": self.message}
        if self.name:
            body["name"] = self.name
        return body


class MissingCredential(ExchangeError):
    status_code = 401
    default_message = "API key is required!"
    name = "key"


class UnsupportedProvider(ExchangeError):
    default_message = "Invalid exchange rate source"
    name = "source"


class InvalidAmount(ExchangeError):
    default_message = "Invalid amount"
    name = "amount"


class ProviderError(ExchangeError):
    """Network, HTTP or parse failure while talking to a rate provider."""

    default_message = "exchange rate provider failed"


__all__ = [
    "ExchangeError",
    "MissingCredential",
    "UnsupportedProvider",
    "InvalidAmount",
    "ProviderError",
]
