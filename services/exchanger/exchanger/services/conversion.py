from __future__ import annotations

import math
from decimal import Decimal, InvalidOperation
from typing import Optional

from ..adapters import PROVIDERS, make_provider
from ..errors import InvalidAmount, MissingCredential, ProviderError, UnsupportedProvider
from ..models import ConversionRequest, ConversionResult


def parse_amount(raw: Optional[str]) -> Decimal:
    """
    Parse a decimal amount. Surrounding whitespace and digit separators are
    rejected, as is anything that does not fit in a finite float.
    """
    if raw is None or raw != raw.strip() or "_" in raw:
        raise InvalidAmount()
    try:
        amount = Decimal(raw)
    except (InvalidOperation, ValueError):
        raise InvalidAmount()
    if not amount.is_finite() or not math.isfinite(float(amount)):
        raise InvalidAmount()
    return amount


def build_request(
    source: Optional[str],
    key: Optional[str],
    amount: Optional[str],
    from_ccy: Optional[str],
    to_ccy: Optional[str],
) -> ConversionRequest:
    """
    Validate raw query values in a fixed order: credential, provider, amount.
    The first failing check decides the error. Currency codes are passed
    through untouched; the provider is the one to reject them.
    """
    if not key:
        raise MissingCredential()
    if source not in PROVIDERS:
        raise UnsupportedProvider()
    return ConversionRequest(
        source=source,
        api_key=key,
        amount=parse_amount(amount),
        from_ccy=from_ccy or "",
        to_ccy=to_ccy or "",
    )


async def convert(req: ConversionRequest) -> ConversionResult:
    provider = make_provider(req.source, req.api_key)
    converted = await provider.convert_currency(req.amount, req.from_ccy, req.to_ccy)
    converted_f = float(converted)
    if not math.isfinite(converted_f):
        raise ProviderError(f"converted amount out of range for {req.from_ccy} to {req.to_ccy}")
    return ConversionResult(
        source=req.source,
        from_ccy=req.from_ccy,
        to_ccy=req.to_ccy,
        amount=float(req.amount),
        converted=converted_f,
    )
