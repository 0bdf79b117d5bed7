"""Wallet balance and fixed-rate conversion tests."""

from __future__ import annotations

import logging
from decimal import Decimal

import pytest

from tradezone.services.fx import FixedRateTable
from tradezone.services.records import Wallet
from tradezone.services.wallets import wallet_balance


def build_fx() -> FixedRateTable:
    return FixedRateTable(rates={"usdt": Decimal("1"), "EUR": Decimal("1.10")}, base_currency="USD")


def test_rate_lookup_is_case_insensitive():
    fx = build_fx()
    assert fx.rate("usd") == Decimal("1")
    assert fx.rate("eur") == Decimal("1.10")
    assert fx.convert(Decimal("100"), "USDT") == Decimal("100")


def test_missing_rate_raises_key_error():
    with pytest.raises(KeyError):
        build_fx().rate("JPY")


def test_balances_grouped_and_converted():
    wallets = [
        Wallet(id="1", owner_id="u1", name="Binance", balance="1200", currency="usdt"),
        Wallet(id="2", owner_id="u1", name="Bank", balance=500, currency="EUR"),
        Wallet(id="3", owner_id="u1", name="Broker", balance=300, currency="USD"),
        Wallet(id="4", owner_id="u1", name="Empty", balance=None, currency="USD"),
    ]
    result = wallet_balance(wallets, build_fx())
    assert result.total_balance == Decimal("2000")
    assert result.by_currency == {"EUR": Decimal("500"), "USD": Decimal("300"), "USDT": Decimal("1200")}
    assert result.total_in_base == Decimal("2050.00")
    assert result.unconverted == []


def test_currency_without_rate_is_reported(caplog):
    wallets = [
        Wallet(id="1", owner_id="u1", name="Yen", balance=10000, currency="JPY"),
        Wallet(id="2", owner_id="u1", name="Broker", balance=300, currency="USD"),
    ]
    with caplog.at_level(logging.WARNING, logger="tradezone.services.wallets"):
        result = wallet_balance(wallets, build_fx())
    assert result.total_balance == Decimal("10300")
    assert result.total_in_base == Decimal("300")
    assert result.unconverted == ["JPY"]
    assert "JPY" in caplog.text


def test_no_wallets():
    result = wallet_balance([], build_fx())
    assert result.total_balance == 0
    assert result.by_currency == {}
    assert result.base_currency == "USD"
