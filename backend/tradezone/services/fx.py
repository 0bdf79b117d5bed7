"""Fixed-rate currency conversion."""
from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal
from typing import Mapping

from tradezone.services.records import to_decimal


@dataclass
class FixedRateTable:
    """Static conversion rates from a currency code to the base currency."""

    rates: Mapping[str, Decimal] = field(default_factory=dict)
    base_currency: str = "USD"

    def rate(self, from_currency: str) -> Decimal:
        """Return the rate converting ``from_currency`` into the base currency."""

        source = from_currency.upper()
        if source == self.base_currency.upper():
            return Decimal("1")
        normalized = {code.upper(): value for code, value in self.rates.items()}
        if source not in normalized:
            raise KeyError(f"Missing FX rate for {source}->{self.base_currency.upper()}")
        return to_decimal(normalized[source])

    def convert(self, amount: Decimal, from_currency: str) -> Decimal:
        return amount * self.rate(from_currency)


__all__ = ["FixedRateTable"]
