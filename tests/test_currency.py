"""Тесты конвертации валют: валидация, курс из Frankfurter, неподдерживаемые пары."""

import httpx
import pytest

from infohub.core.exceptions import (
    InvalidAmountError,
    InvalidRequestError,
    UnsupportedPairError,
    UpstreamError,
)
from infohub.currency.client import FrankfurterClient
from infohub.currency.services import CurrencyService, parse_amount

from conftest import RATES_HOST


def make_service(http_client, config):
    return CurrencyService(FrankfurterClient(http_client, url=config.FRANKFURTER_URL, timeout=1.0))


@pytest.mark.parametrize("raw", [
    "abc", "-5", "Infinity", "-Infinity", "NaN", "1e400",
    "1_000", "١٢٣", "１２", "0x1_0", "-0x10", "1.2.3", "5e", "0x" + "f" * 300,
])
def test_parse_amount_rejects(raw):
    with pytest.raises(InvalidAmountError):
        parse_amount(raw)


@pytest.mark.parametrize("raw, expected", [
    ("100", 100.0), ("0", 0.0), (" 2.5 ", 2.5), ("1e3", 1000.0),
    (".5", 0.5), ("5.", 5.0), ("+7", 7.0), ("0x10", 16.0), ("0b11", 3.0), ("0o7", 7.0),
    ("", 0.0), ("   ", 0.0),
])
def test_parse_amount_accepts(raw, expected):
    assert parse_amount(raw) == expected


def test_parse_amount_negative_zero_is_zero():
    assert str(parse_amount("-0")) == "0.0"


async def test_empty_amount_converts_zero(upstream, http_client, config):
    upstream.on(RATES_HOST, json={"amount": 1.0, "base": "INR", "rates": {"USD": 0.012}})
    service = make_service(http_client, config)

    result = await service.convert("INR", "USD", "")

    assert result.amount == 0
    assert result.converted == 0
    assert len(upstream.calls) == 1


@pytest.mark.parametrize("raw", ["abc", "-5", "Infinity"])
async def test_invalid_amount_fails_without_upstream_call(upstream, http_client, config, raw):
    service = make_service(http_client, config)

    with pytest.raises(InvalidAmountError):
        await service.convert("INR", "USD", raw)

    assert upstream.calls == []


@pytest.mark.parametrize("base, target, amount", [
    (None, "USD", "1"),
    ("INR", None, "1"),
    ("INR", "USD", None),
    ("  ", "USD", "1"),
])
async def test_missing_params(upstream, http_client, config, base, target, amount):
    service = make_service(http_client, config)

    with pytest.raises(InvalidRequestError):
        await service.convert(base, target, amount)

    assert upstream.calls == []


@pytest.mark.parametrize("code", ["US", "USDT", "U$D", "12A"])
async def test_malformed_currency_code(upstream, http_client, config, code):
    service = make_service(http_client, config)

    with pytest.raises(InvalidRequestError):
        await service.convert(code, "USD", "1")

    assert upstream.calls == []


async def test_codes_are_upper_cased(upstream, http_client, config):
    upstream.on(RATES_HOST, json={"amount": 1.0, "base": "INR", "rates": {"USD": 0.012}})
    service = make_service(http_client, config)

    result = await service.convert("inr", " usd ", "100")

    assert result.from_currency == "INR"
    assert result.to_currency == "USD"
    params = upstream.calls[0].url.params
    assert params["from"] == "INR"
    assert params["to"] == "USD"


@pytest.mark.parametrize("rates", [{}, {"EUR": 0.011}, {"USD": 0}, {"USD": None}, {"USD": "0.012"}])
async def test_missing_rate_is_unsupported_pair(upstream, http_client, config, rates):
    upstream.on(RATES_HOST, json={"amount": 1.0, "base": "INR", "rates": rates})
    service = make_service(http_client, config)

    with pytest.raises(UnsupportedPairError) as exc_info:
        await service.convert("INR", "USD", "100")

    assert exc_info.value.status_code == 400


async def test_upstream_error_message(upstream, http_client, config):
    upstream.on(RATES_HOST, status=404, json={"message": "not found"})
    service = make_service(http_client, config)

    with pytest.raises(UpstreamError) as exc_info:
        await service.convert("INR", "XYZ", "1")

    assert exc_info.value.status_code == 404
    assert exc_info.value.message == "not found"


async def test_upstream_network_error(upstream, http_client, config):
    upstream.on(RATES_HOST, exc=httpx.ReadTimeout("timed out"))
    service = make_service(http_client, config)

    with pytest.raises(UpstreamError) as exc_info:
        await service.convert("INR", "USD", "1")

    assert exc_info.value.status_code == 500
    assert exc_info.value.message == "Failed to convert currency"


def test_convert_endpoint(client, upstream):
    upstream.on(RATES_HOST, json={"amount": 1.0, "base": "INR", "date": "2026-10-16", "rates": {"USD": 0.012}})

    response = client.get("/api/convert", params={"from": "INR", "to": "USD", "amount": "100"})

    assert response.status_code == 200
    assert response.json() == {"from": "INR", "to": "USD", "rate": 0.012, "amount": 100, "converted": 1.2}


def test_convert_endpoint_is_idempotent(client, upstream):
    upstream.on(RATES_HOST, json={"amount": 1.0, "base": "EUR", "rates": {"GBP": 0.86}})
    params = {"from": "EUR", "to": "GBP", "amount": "12.5"}

    first = client.get("/api/convert", params=params)
    second = client.get("/api/convert", params=params)

    assert first.status_code == 200
    assert first.content == second.content


def test_convert_endpoint_missing_params(client, upstream):
    response = client.get("/api/convert", params={"from": "INR"})

    assert response.status_code == 400
    assert response.json() == {"error": "Missing required query params: from, to, amount"}
    assert upstream.calls == []


def test_convert_endpoint_invalid_amount(client, upstream):
    response = client.get("/api/convert", params={"from": "INR", "to": "USD", "amount": "abc"})

    assert response.status_code == 400
    assert response.json() == {"error": "Invalid amount"}
    assert upstream.calls == []


def test_convert_endpoint_unsupported_pair(client, upstream):
    upstream.on(RATES_HOST, json={"amount": 1.0, "base": "INR", "rates": {}})

    response = client.get("/api/convert", params={"from": "INR", "to": "USD", "amount": "5"})

    assert response.status_code == 400
    assert response.json() == {"error": "Unsupported currency pair"}


def test_convert_endpoint_upstream_error_field(client, upstream):
    upstream.on(RATES_HOST, status=422, json={"error": "invalid currency"})

    response = client.get("/api/convert", params={"from": "INR", "to": "USD", "amount": "5"})

    assert response.status_code == 422
    assert response.json() == {"error": "invalid currency"}
