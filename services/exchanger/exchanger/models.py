from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Dict, Optional

from pydantic import BaseModel, ConfigDict, Field


@dataclass(frozen=True)
class ConversionRequest:
    """Validated inbound conversion parameters."""
    source: str
    api_key: str
    amount: Decimal
    from_ccy: str
    to_ccy: str


class RateTable(BaseModel):
    """Rate table as reported by a provider, relative to its own base currency."""
    model_config = ConfigDict(extra="ignore")

    rates: Dict[str, Optional[float]]
    base: Optional[str] = None


class ConversionResult(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    source: str
    from_ccy: str = Field(alias="from")
    to_ccy: str = Field(alias="to")
    amount: float
    converted: float


class ErrorResponse(BaseModel):
    error: str
    name: Optional[str] = None
