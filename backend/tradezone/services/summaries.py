"""Grouped totals over journal records."""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from datetime import date
from decimal import Decimal
from typing import Iterable, Union

from tradezone.services.records import (
    ZERO,
    FinancialRecord,
    WithdrawalStatus,
    matches_scope,
    settled_withdrawals,
    to_day,
)
from tradezone.services.windows import TimeWindow

Scope = Union[TimeWindow, date, None]


@dataclass
class GroupedTotal:
    sum: Decimal = ZERO
    count: int = 0


@dataclass
class RecordSummary:
    total_amount: Decimal = ZERO
    total_profit: Decimal = ZERO
    total_loss: Decimal = ZERO
    count: int = 0
    by_user: dict[str, GroupedTotal] = field(default_factory=dict)
    by_symbol: dict[str, GroupedTotal] = field(default_factory=dict)


@dataclass
class WindowStats:
    total: Decimal = ZERO
    count: int = 0
    average: Decimal = ZERO
    maximum: Decimal = ZERO


@dataclass
class WithdrawalStats(WindowStats):
    completed_count: int = 0
    pending_count: int = 0


def select_records(records: Iterable[FinancialRecord], scope: Scope = None) -> list[FinancialRecord]:
    """Return the records inside ``scope``: a window, a single day, or everything."""

    if isinstance(scope, TimeWindow):
        return [r for r in records if matches_scope(r, scope, None)]
    if isinstance(scope, date):
        day = to_day(scope)
        return [r for r in records if matches_scope(r, None, day)]
    return list(records)


def profit_contribution(record: FinancialRecord) -> Decimal:
    if not record.has_split:
        return ZERO
    profit = getattr(record, "profit", None)
    if profit is not None:
        return profit
    return max(record.amount, ZERO)


def loss_contribution(record: FinancialRecord) -> Decimal:
    if not record.has_split:
        return ZERO
    loss = getattr(record, "loss", None)
    if loss is not None:
        return abs(loss)
    return abs(min(record.amount, ZERO))


def _add(groups: dict[str, GroupedTotal], key: str | None, amount: Decimal) -> None:
    if not key:
        return
    group = groups.setdefault(key, GroupedTotal())
    group.sum += amount
    group.count += 1


def summarize(records: Iterable[FinancialRecord], scope: Scope = None) -> RecordSummary:
    """Reduce ``records`` inside ``scope`` to totals plus per-user and per-symbol groups.

    Profit and loss are taken from the entry's split when present and derived
    from the sign of ``amount`` otherwise; loss is reported as a magnitude.
    Records without a user or symbol still count towards the totals.
    """

    summary = RecordSummary()
    by_user: dict[str, GroupedTotal] = {}
    by_symbol: dict[str, GroupedTotal] = {}
    for record in select_records(records, scope):
        summary.total_amount += record.amount
        summary.total_profit += profit_contribution(record)
        summary.total_loss += loss_contribution(record)
        summary.count += 1
        _add(by_user, record.label, record.amount)
        _add(by_symbol, record.category, record.amount)
    summary.by_user = dict(sorted(by_user.items()))
    summary.by_symbol = dict(sorted(by_symbol.items()))
    return summary


def window_stats(records: Iterable[FinancialRecord], window: TimeWindow) -> WindowStats:
    amounts = [r.amount for r in select_records(records, window)]
    if not amounts:
        return WindowStats()
    total = sum(amounts, ZERO)
    return WindowStats(
        total=total,
        count=len(amounts),
        average=total / len(amounts),
        maximum=max(amounts),
    )


def withdrawal_stats(records: Iterable[FinancialRecord], window: TimeWindow) -> WithdrawalStats:
    """Window statistics over completed and pending withdrawals, with a count per status.

    Each withdrawal is placed in the window by its completion day when it has
    one and by its request day otherwise.
    """

    settled = select_records(settled_withdrawals(records), window)
    statuses = [record.status for record in settled]
    return WithdrawalStats(
        **asdict(window_stats(settled, window)),
        completed_count=statuses.count(WithdrawalStatus.COMPLETED.value),
        pending_count=statuses.count(WithdrawalStatus.PENDING.value),
    )


__all__ = [
    "GroupedTotal",
    "RecordSummary",
    "WindowStats",
    "WithdrawalStats",
    "Scope",
    "select_records",
    "profit_contribution",
    "loss_contribution",
    "summarize",
    "window_stats",
    "withdrawal_stats",
]
