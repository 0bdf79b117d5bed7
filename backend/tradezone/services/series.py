"""Day-indexed chart series over a trailing window.

Every builder emits exactly one point per calendar day from the window start
to the window end, both included, whether or not any record falls on that
day. Running totals start from zero at the window start: records dated
before the window never contribute, even to "cumulative" values.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, timedelta
from decimal import Decimal
from typing import Iterable, Iterator

from tradezone.services.records import ZERO, FinancialRecord, settled_withdrawals
from tradezone.services.summaries import select_records
from tradezone.services.windows import TimeWindow


@dataclass
class SeriesPoint:
    date: date
    cumulative_amount: Decimal


@dataclass
class DailyPnLPoint:
    date: date
    pnl: Decimal
    cumulative: Decimal


@dataclass
class FlowPoint:
    date: date
    deposits: Decimal
    withdrawals: Decimal
    net: Decimal


def iter_days(window: TimeWindow) -> Iterator[date]:
    for offset in range(window.days + 1):
        yield window.start_date + timedelta(days=offset)


def _daily_totals(records: Iterable[FinancialRecord], window: TimeWindow) -> dict[date, Decimal]:
    totals: dict[date, Decimal] = {}
    for record in select_records(records, window):
        totals[record.occurred_at] = totals.get(record.occurred_at, ZERO) + record.amount
    return totals


def build_cumulative_series(records: Iterable[FinancialRecord], window: TimeWindow) -> list[SeriesPoint]:
    """Return the windowed running total of ``amount`` for each day of ``window``."""

    in_window = sorted(select_records(records, window), key=lambda r: r.occurred_at)
    points: list[SeriesPoint] = []
    running = ZERO
    cursor = 0
    for day in iter_days(window):
        while cursor < len(in_window) and in_window[cursor].occurred_at <= day:
            running += in_window[cursor].amount
            cursor += 1
        points.append(SeriesPoint(date=day, cumulative_amount=running))
    return points


def build_daily_pnl_series(entries: Iterable[FinancialRecord], window: TimeWindow) -> list[DailyPnLPoint]:
    per_day = _daily_totals(entries, window)
    points: list[DailyPnLPoint] = []
    running = ZERO
    for day in iter_days(window):
        pnl = per_day.get(day, ZERO)
        running += pnl
        points.append(DailyPnLPoint(date=day, pnl=pnl, cumulative=running))
    return points


def build_daily_flow_series(
    deposits: Iterable[FinancialRecord],
    withdrawals: Iterable[FinancialRecord],
    window: TimeWindow,
) -> list[FlowPoint]:
    """Per-day deposit and withdrawal amounts (not cumulative) with their net.

    Only completed and pending withdrawals count, on the day they settled.
    """

    deposits_by_day = _daily_totals(deposits, window)
    withdrawals_by_day = _daily_totals(settled_withdrawals(withdrawals), window)
    points: list[FlowPoint] = []
    for day in iter_days(window):
        deposited = deposits_by_day.get(day, ZERO)
        withdrawn = withdrawals_by_day.get(day, ZERO)
        points.append(FlowPoint(date=day, deposits=deposited, withdrawals=withdrawn, net=deposited - withdrawn))
    return points


__all__ = [
    "SeriesPoint",
    "DailyPnLPoint",
    "FlowPoint",
    "iter_days",
    "build_cumulative_series",
    "build_daily_pnl_series",
    "build_daily_flow_series",
]
