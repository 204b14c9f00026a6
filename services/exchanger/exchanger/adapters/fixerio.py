from __future__ import annotations

from typing import Any, Optional

from ..settings import settings
from .base import RateProvider


class FixerIoProvider(RateProvider):
    """
    data.fixer.io latest rates. Reports its base currency alongside the table.

    Fixer answers HTTP 200 even on failure and flags it in the body:
    {"success": false, "error": {"code": 101, "type": "invalid_access_key", "info": "..."}}
    """

    name = "fixerio"
    key_param = "access_key"

    @classmethod
    def default_url(cls) -> str:
        return settings.FIXERIO_URL

    def error_message(self, status_code: int, data: Any) -> Optional[str]:
        if not isinstance(data, dict) or data.get("success") is not False:
            return None
        err = data.get("error")
        if isinstance(err, dict):
            return err.get("info") or err.get("type") or f"{self.name} error {err.get('code')}"
        return f"{self.name} request was not successful"
