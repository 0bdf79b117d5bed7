"""Typed journal records and the accessor protocol used by the aggregators.

Records are normalised on construction: amounts become ``Decimal`` and any
missing or malformed numeric value counts as zero, so downstream reductions
never have to guard against ``None`` or bad input.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import date, datetime
from decimal import Decimal, InvalidOperation, getcontext
from enum import Enum
from typing import Any, Iterable, Protocol, Union

from tradezone.services.windows import TimeWindow

getcontext().prec = 28

ZERO = Decimal("0")
# Headroom for sums and FX products without tripping the context's Overflow trap.
MAX_EXPONENT = getcontext().Emax // 4


class WithdrawalStatus(str, Enum):
    PENDING = "pending"
    COMPLETED = "completed"
    REJECTED = "rejected"
    CANCELLED = "cancelled"


COUNTED_WITHDRAWAL_STATUSES = frozenset({WithdrawalStatus.COMPLETED.value, WithdrawalStatus.PENDING.value})


class RecordKind(str, Enum):
    PNL = "pnl"
    DEPOSIT = "deposit"
    WITHDRAWAL = "withdrawal"
    WALLET = "wallet"


def to_decimal(value: Any) -> Decimal:
    """Coerce ``value`` to a finite, in-range ``Decimal``; anything unusable becomes 0."""

    if value is None or isinstance(value, bool):
        return ZERO
    try:
        number = value if isinstance(value, Decimal) else Decimal(str(value).strip())
    except (InvalidOperation, ValueError, TypeError):
        return ZERO
    if not number.is_finite():
        return ZERO
    if number and abs(number.adjusted()) > MAX_EXPONENT:
        return ZERO
    return number


def _optional_decimal(value: Any) -> Decimal | None:
    if value is None:
        return None
    return to_decimal(value)


def to_day(value: date | datetime | str) -> date:
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    return datetime.fromisoformat(str(value).strip()).date()


@dataclass
class FinancialRecord:
    id: str
    amount: Decimal
    occurred_at: date
    owner_id: str
    label: str | None = None
    notes: str | None = None

    def __post_init__(self) -> None:
        self.id = str(self.id)
        self.amount = to_decimal(self.amount)
        self.occurred_at = to_day(self.occurred_at)

    @property
    def category(self) -> str | None:
        return None

    @property
    def has_split(self) -> bool:
        return False


@dataclass
class PnLEntry(FinancialRecord):
    """Net P&L for one trade; ``label`` carries the trader's display name."""

    symbol: str | None = None
    profit: Decimal | None = None
    loss: Decimal | None = None

    def __post_init__(self) -> None:
        super().__post_init__()
        self.profit = _optional_decimal(self.profit)
        self.loss = _optional_decimal(self.loss)

    @property
    def category(self) -> str | None:
        return self.symbol

    @property
    def has_split(self) -> bool:
        return True


@dataclass
class Deposit(FinancialRecord):
    method: str | None = None

    @property
    def category(self) -> str | None:
        return self.method


@dataclass
class Withdrawal(FinancialRecord):
    """A withdrawal request; ``occurred_at`` is the day it was requested."""

    method: str | None = None
    status: str = WithdrawalStatus.COMPLETED.value
    completed_on: date | None = None

    def __post_init__(self) -> None:
        super().__post_init__()
        self.status = str(getattr(self.status, "value", self.status) or "").strip().lower()
        if self.completed_on is not None:
            self.completed_on = to_day(self.completed_on)

    @property
    def category(self) -> str | None:
        return self.method

    @property
    def counted(self) -> bool:
        return self.status in COUNTED_WITHDRAWAL_STATUSES

    @property
    def settled_on(self) -> date:
        return self.completed_on or self.occurred_at


def settled_withdrawals(records: Iterable[FinancialRecord]) -> list[Withdrawal]:
    """Completed and pending withdrawals, each re-dated to the day it settled.

    Rejected or cancelled requests never moved money and are dropped.
    """

    return [
        replace(record, occurred_at=record.settled_on)
        for record in records
        if isinstance(record, Withdrawal) and record.counted
    ]


@dataclass
class Wallet:
    id: str
    owner_id: str
    name: str
    balance: Decimal
    currency: str = "USD"
    platform: str | None = None
    notes: str | None = None

    def __post_init__(self) -> None:
        self.id = str(self.id)
        self.balance = to_decimal(self.balance)
        self.currency = (self.currency or "USD").upper()


LedgerItem = Union[FinancialRecord, Wallet]

_KIND_TYPES: dict[RecordKind, type] = {
    RecordKind.PNL: PnLEntry,
    RecordKind.DEPOSIT: Deposit,
    RecordKind.WITHDRAWAL: Withdrawal,
    RecordKind.WALLET: Wallet,
}


class RecordSource(Protocol):
    """Pluggable record accessor.

    ``owner_id=None`` selects every owner. ``window`` and ``on_date`` are
    mutually exclusive filters on ``occurred_at``; wallets ignore both.
    """

    async def list_records(
        self,
        owner_id: str | None,
        kind: RecordKind,
        *,
        window: TimeWindow | None = None,
        on_date: date | None = None,
    ) -> list[Any]:
        ...


def matches_scope(record: FinancialRecord, window: TimeWindow | None, on_date: date | None) -> bool:
    if on_date is not None:
        return record.occurred_at == on_date
    if window is not None:
        return window.contains(record.occurred_at)
    return True


class InMemoryRecordSource:
    """Simple record source for tests and examples."""

    def __init__(self, records: Iterable[LedgerItem] = ()):
        self._records: list[LedgerItem] = list(records)

    def add(self, record: LedgerItem) -> LedgerItem:
        self._records.append(record)
        return record

    async def list_records(
        self,
        owner_id: str | None,
        kind: RecordKind,
        *,
        window: TimeWindow | None = None,
        on_date: date | None = None,
    ) -> list[Any]:
        record_type = _KIND_TYPES[RecordKind(kind)]
        selected = [r for r in self._records if type(r) is record_type]
        if owner_id is not None:
            selected = [r for r in selected if r.owner_id == owner_id]
        if record_type is Wallet:
            return sorted(selected, key=lambda w: w.id)
        selected = [r for r in selected if matches_scope(r, window, on_date)]
        return sorted(selected, key=lambda r: (r.occurred_at, r.id))


__all__ = [
    "RecordKind",
    "FinancialRecord",
    "PnLEntry",
    "Deposit",
    "Withdrawal",
    "WithdrawalStatus",
    "COUNTED_WITHDRAWAL_STATUSES",
    "settled_withdrawals",
    "Wallet",
    "LedgerItem",
    "RecordSource",
    "InMemoryRecordSource",
    "matches_scope",
    "to_decimal",
    "to_day",
    "ZERO",
]
