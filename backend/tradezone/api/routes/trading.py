"""Trade P&L summaries, series and wallet balances."""

from __future__ import annotations

from dataclasses import asdict
from datetime import date

from fastapi import APIRouter, Depends, Query

from tradezone.api.dependencies import (
    RequestContext,
    WindowSelection,
    get_fx_table,
    get_record_source,
    get_request_context,
    get_window,
)
from tradezone.schemas import (
    DailyPnLSeriesResponse,
    RecordSummarySchema,
    WalletBalanceSchema,
    WindowSummaryResponse,
)
from tradezone.services.fx import FixedRateTable
from tradezone.services.records import RecordKind, RecordSource
from tradezone.services.series import build_daily_pnl_series
from tradezone.services.summaries import summarize
from tradezone.services.wallets import wallet_balance

router = APIRouter()


@router.get("/pnl/summary/daily", response_model=RecordSummarySchema)
async def daily_pnl_summary(
    on_date: date = Query(..., alias="date"),
    _: RequestContext = Depends(get_request_context),
    source: RecordSource = Depends(get_record_source),
) -> RecordSummarySchema:
    """Journal-wide P&L for one trading day, grouped by trader and symbol."""

    entries = await source.list_records(None, RecordKind.PNL, on_date=on_date)
    return RecordSummarySchema.model_validate(asdict(summarize(entries, on_date)))


@router.get("/pnl/summary", response_model=WindowSummaryResponse)
async def pnl_summary(
    selection: WindowSelection = Depends(get_window),
    context: RequestContext = Depends(get_request_context),
    source: RecordSource = Depends(get_record_source),
) -> WindowSummaryResponse:
    entries = await source.list_records(context.user_id, RecordKind.PNL, window=selection.window)
    summary = summarize(entries, selection.window)
    return WindowSummaryResponse(
        window=selection.to_schema(),
        summary=RecordSummarySchema.model_validate(asdict(summary)),
    )


@router.get("/pnl/series", response_model=DailyPnLSeriesResponse)
async def pnl_series(
    selection: WindowSelection = Depends(get_window),
    context: RequestContext = Depends(get_request_context),
    source: RecordSource = Depends(get_record_source),
) -> DailyPnLSeriesResponse:
    entries = await source.list_records(context.user_id, RecordKind.PNL, window=selection.window)
    points = build_daily_pnl_series(entries, selection.window)
    return DailyPnLSeriesResponse.model_validate(
        {"window": selection.to_schema(), "points": [asdict(point) for point in points]}
    )


@router.get("/wallets/balance", response_model=WalletBalanceSchema)
async def wallets_balance(
    context: RequestContext = Depends(get_request_context),
    source: RecordSource = Depends(get_record_source),
    fx: FixedRateTable = Depends(get_fx_table),
) -> WalletBalanceSchema:
    wallets = await source.list_records(context.user_id, RecordKind.WALLET)
    return WalletBalanceSchema.model_validate(asdict(wallet_balance(wallets, fx)))


__all__ = ["router"]
