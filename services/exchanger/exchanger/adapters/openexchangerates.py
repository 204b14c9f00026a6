from __future__ import annotations

from typing import Any, Optional

from ..settings import settings
from .base import RateProvider


class OpenExchangeRatesProvider(RateProvider):
    """
    openexchangerates.org latest rates.

    Errors come back as {"error": true, "status": 401, "message": "invalid_app_id",
    "description": "..."} with a matching HTTP status.
    """

    name = "openexchangerates"
    key_param = "app_id"

    @classmethod
    def default_url(cls) -> str:
        return settings.OPENEXCHANGERATES_URL

    def error_message(self, status_code: int, data: Any) -> Optional[str]:
        if not isinstance(data, dict) or not data.get("error"):
            return None
        return data.get("description") or data.get("message") or f"{self.name} returned HTTP {status_code}"
