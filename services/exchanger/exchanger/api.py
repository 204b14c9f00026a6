from typing import Optional

from fastapi import APIRouter, Query

from .models import ConversionResult, ErrorResponse
from .services.conversion import build_request, convert

router = APIRouter()


# Raw strings; build_request validates them in order
@router.get(
    "/exchange",
    response_model=ConversionResult,
    responses={400: {"model": ErrorResponse}, 401: {"model": ErrorResponse}},
)
async def exchange(
    source: Optional[str] = Query(None, description="openexchangerates | fixerio"),
    key: Optional[str] = Query(None, description="Provider API key"),
    amount: Optional[str] = Query(None, description="Decimal amount to convert"),
    from_ccy: Optional[str] = Query(None, alias="from", description="Currency code to convert from"),
    to_ccy: Optional[str] = Query(None, alias="to", description="Currency code to convert to"),
):
    """
    Convert an amount between currencies using the selected provider.
    Examples:
      /exchange?source=openexchangerates&key=...&amount=100&from=USD&to=EUR
      /exchange?source=fixerio&key=...&amount=5.5&from=EUR&to=GBP
    """
    req = build_request(source, key, amount, from_ccy, to_ccy)
    return await convert(req)
