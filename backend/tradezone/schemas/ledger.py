"""Pydantic response schemas for ledger aggregations."""

from __future__ import annotations

from datetime import date, datetime

from pydantic import BaseModel, ConfigDict, Field


class TimeWindowSchema(BaseModel):
    token: str = Field(..., examples=["1M"])
    start: datetime
    end: datetime


class GroupedTotalSchema(BaseModel):
    sum: float
    count: int


class RecordSummarySchema(BaseModel):
    total_amount: float
    total_profit: float
    total_loss: float
    count: int
    by_user: dict[str, GroupedTotalSchema] = Field(default_factory=dict)
    by_symbol: dict[str, GroupedTotalSchema] = Field(default_factory=dict)

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "total_amount": 40.0,
                "total_profit": 60.0,
                "total_loss": 20.0,
                "count": 3,
                "by_user": {"A": {"sum": 30.0, "count": 2}, "B": {"sum": 10.0, "count": 1}},
                "by_symbol": {"BTCUSDT": {"sum": 40.0, "count": 3}},
            }
        }
    )


class WindowStatsSchema(BaseModel):
    total: float
    count: int
    average: float
    maximum: float
    completed_count: int | None = None
    pending_count: int | None = None


class SeriesPointSchema(BaseModel):
    date: date
    cumulative_amount: float


class DailyPnLPointSchema(BaseModel):
    date: date
    pnl: float
    cumulative: float


class FlowPointSchema(BaseModel):
    date: date
    deposits: float
    withdrawals: float
    net: float


class CumulativeSeriesResponse(BaseModel):
    window: TimeWindowSchema
    points: list[SeriesPointSchema]


class DailyPnLSeriesResponse(BaseModel):
    window: TimeWindowSchema
    points: list[DailyPnLPointSchema]


class FlowSeriesResponse(BaseModel):
    window: TimeWindowSchema
    points: list[FlowPointSchema]


class WindowStatsResponse(BaseModel):
    window: TimeWindowSchema
    stats: WindowStatsSchema


class WindowSummaryResponse(BaseModel):
    window: TimeWindowSchema
    summary: RecordSummarySchema


class DashboardSummarySchema(BaseModel):
    total_deposits: float = 0.0
    total_withdrawals: float = 0.0
    total_trades: int = 0
    total_profit: float = 0.0
    total_loss: float = 0.0


class WalletBalanceSchema(BaseModel):
    total_balance: float
    by_currency: dict[str, float]
    base_currency: str
    total_in_base: float
    unconverted: list[str] = Field(default_factory=list)


__all__ = [
    "TimeWindowSchema",
    "GroupedTotalSchema",
    "RecordSummarySchema",
    "WindowStatsSchema",
    "SeriesPointSchema",
    "DailyPnLPointSchema",
    "FlowPointSchema",
    "CumulativeSeriesResponse",
    "DailyPnLSeriesResponse",
    "FlowSeriesResponse",
    "WindowStatsResponse",
    "WindowSummaryResponse",
    "DashboardSummarySchema",
    "WalletBalanceSchema",
]
