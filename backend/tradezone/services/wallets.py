"""Wallet balance totals."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from decimal import Decimal
from typing import Iterable

from tradezone.services.fx import FixedRateTable
from tradezone.services.records import ZERO, Wallet

logger = logging.getLogger(__name__)


@dataclass
class WalletBalance:
    total_balance: Decimal = ZERO
    by_currency: dict[str, Decimal] = field(default_factory=dict)
    base_currency: str = "USD"
    total_in_base: Decimal = ZERO
    unconverted: list[str] = field(default_factory=list)


def wallet_balance(wallets: Iterable[Wallet], fx: FixedRateTable) -> WalletBalance:
    """Sum wallet balances raw, per currency, and converted to the base currency.

    ``total_balance`` adds balances regardless of currency. Currencies missing
    from the rate table are left out of ``total_in_base`` and listed in
    ``unconverted``.
    """

    result = WalletBalance(base_currency=fx.base_currency.upper())
    by_currency: dict[str, Decimal] = {}
    for wallet in wallets:
        result.total_balance += wallet.balance
        by_currency[wallet.currency] = by_currency.get(wallet.currency, ZERO) + wallet.balance
    for currency, amount in sorted(by_currency.items()):
        try:
            result.total_in_base += fx.convert(amount, currency)
        except KeyError:
            logger.warning("No fixed rate for %s; excluded from %s total", currency, result.base_currency)
            result.unconverted.append(currency)
    result.by_currency = dict(sorted(by_currency.items()))
    return result


__all__ = ["WalletBalance", "wallet_balance"]
