"""Unified dashboard summary across deposits, withdrawals and trade P&L.

The summary feeds a display widget, so it never raises: if any one of the
three record fetches fails, callers receive an all-zero summary instead of
an error or a partial mix of real and zero values. Failures are logged, which
is the only place an upstream outage becomes visible.
"""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from decimal import Decimal
from typing import Any, Awaitable, Callable, Generic, TypeVar

from tradezone.services.records import ZERO, RecordKind, RecordSource

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass
class DashboardSummary:
    total_deposits: Decimal = ZERO
    total_withdrawals: Decimal = ZERO
    total_trades: int = 0
    total_profit: Decimal = ZERO
    total_loss: Decimal = ZERO


@dataclass
class FetchResult(Generic[T]):
    """Outcome of one upstream fetch: either ``value`` or ``error`` is set."""

    name: str
    value: T | None = None
    error: BaseException | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


async def capture(name: str, fetch: Callable[[], Awaitable[T]]) -> FetchResult[T]:
    try:
        return FetchResult(name=name, value=await fetch())
    except Exception as exc:  # noqa: BLE001 - converted into an explicit result
        return FetchResult(name=name, error=exc)


def _reduce(deposit_rows: list[Any], withdrawal_rows: list[Any], trade_rows: list[Any]) -> DashboardSummary:
    # Stored loss is already a magnitude here; no abs() unlike summarize().
    return DashboardSummary(
        total_deposits=sum((d.amount for d in deposit_rows), ZERO),
        total_withdrawals=sum((w.amount for w in withdrawal_rows), ZERO),
        total_trades=len(trade_rows),
        total_profit=sum((t.profit or ZERO for t in trade_rows), ZERO),
        total_loss=sum((t.loss or ZERO for t in trade_rows), ZERO),
    )


def combine(
    deposits: FetchResult[list[Any]],
    withdrawals: FetchResult[list[Any]],
    trades: FetchResult[list[Any]],
) -> DashboardSummary:
    """All-or-nothing reduction of the three fetches into a summary."""

    failed = [result for result in (deposits, withdrawals, trades) if not result.ok]
    if failed:
        for result in failed:
            logger.error(
                "Dashboard fetch %r failed: %s",
                result.name,
                result.error,
                exc_info=result.error,
            )
        return DashboardSummary()

    try:
        return _reduce(deposits.value or [], withdrawals.value or [], trades.value or [])
    except Exception:  # noqa: BLE001 - a bad row degrades like a failed fetch
        logger.exception("Dashboard reduction failed")
        return DashboardSummary()


async def get_unified_summary(owner_id: str, source: RecordSource) -> DashboardSummary:
    """Fetch the owner's deposits, withdrawals and P&L concurrently and total them."""

    deposits, withdrawals, trades = await asyncio.gather(
        capture("deposits", lambda: source.list_records(owner_id, RecordKind.DEPOSIT)),
        capture("withdrawals", lambda: source.list_records(owner_id, RecordKind.WITHDRAWAL)),
        capture("trades", lambda: source.list_records(owner_id, RecordKind.PNL)),
    )
    return combine(deposits, withdrawals, trades)


__all__ = ["DashboardSummary", "FetchResult", "capture", "combine", "get_unified_summary"]
