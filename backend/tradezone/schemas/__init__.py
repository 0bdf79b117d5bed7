"""Pydantic schema exports."""

from .ledger import (
    CumulativeSeriesResponse,
    DailyPnLSeriesResponse,
    DashboardSummarySchema,
    FlowSeriesResponse,
    RecordSummarySchema,
    TimeWindowSchema,
    WalletBalanceSchema,
    WindowStatsResponse,
    WindowSummaryResponse,
)

__all__ = [
    "CumulativeSeriesResponse",
    "DailyPnLSeriesResponse",
    "DashboardSummarySchema",
    "FlowSeriesResponse",
    "RecordSummarySchema",
    "TimeWindowSchema",
    "WalletBalanceSchema",
    "WindowStatsResponse",
    "WindowSummaryResponse",
]
