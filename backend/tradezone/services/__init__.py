"""Aggregation services for the ledger journal."""

from .dashboard import DashboardSummary, get_unified_summary
from .series import build_cumulative_series, build_daily_flow_series, build_daily_pnl_series
from .summaries import summarize, window_stats, withdrawal_stats
from .wallets import wallet_balance
from .windows import TimeWindow, resolve_window

__all__ = [
    "TimeWindow",
    "resolve_window",
    "summarize",
    "window_stats",
    "withdrawal_stats",
    "build_cumulative_series",
    "build_daily_pnl_series",
    "build_daily_flow_series",
    "wallet_balance",
    "DashboardSummary",
    "get_unified_summary",
]
