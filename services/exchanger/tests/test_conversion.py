from decimal import Decimal

import pytest

from exchanger.errors import InvalidAmount, MissingCredential, UnsupportedProvider
from exchanger.models import ConversionRequest
from exchanger.services.conversion import build_request, convert, parse_amount


def test_parse_amount():
    assert parse_amount("100") == Decimal("100")
    assert parse_amount("2.50") == Decimal("2.50")
    assert parse_amount("1e2") == Decimal("100")
    assert parse_amount("-3") == Decimal("-3")
    for bad in (None, "", "abc", "NaN", "-Infinity", "1e400", " 2.50", "2.50 ", "1_000"):
        with pytest.raises(InvalidAmount):
            parse_amount(bad)


def test_build_request_validation_order():
    with pytest.raises(MissingCredential):
        build_request("bogus", None, "abc", "USD", "EUR")
    with pytest.raises(UnsupportedProvider):
        build_request("bogus", "k", "abc", "USD", "EUR")
    with pytest.raises(InvalidAmount):
        build_request("fixerio", "k", "abc", "USD", "EUR")


def test_build_request_ok():
    req = build_request("fixerio", "k", "12.5", "USD", None)
    assert req == ConversionRequest(
        source="fixerio", api_key="k", amount=Decimal("12.5"), from_ccy="USD", to_ccy=""
    )


@pytest.mark.asyncio
async def test_convert_builds_result(fake_rates):
    req = ConversionRequest(source="openexchangerates", api_key="k", amount=Decimal("100"), from_ccy="USD", to_ccy="EUR")
    result = await convert(req)
    assert result.model_dump(by_alias=True) == {
        "source": "openexchangerates",
        "from": "USD",
        "to": "EUR",
        "amount": 100.0,
        "converted": 90.0,
    }
