"""Deposit and withdrawal charts and statistics."""

from __future__ import annotations

import asyncio
from dataclasses import asdict
from typing import Literal

from fastapi import APIRouter, Depends

from tradezone.api.dependencies import (
    RequestContext,
    WindowSelection,
    get_record_source,
    get_request_context,
    get_window,
)
from tradezone.schemas import CumulativeSeriesResponse, FlowSeriesResponse, WindowStatsResponse
from tradezone.services.records import RecordKind, RecordSource
from tradezone.services.series import build_cumulative_series, build_daily_flow_series
from tradezone.services.summaries import window_stats, withdrawal_stats

router = APIRouter()

FundKind = Literal["deposits", "withdrawals"]
_KINDS: dict[str, RecordKind] = {
    "deposits": RecordKind.DEPOSIT,
    "withdrawals": RecordKind.WITHDRAWAL,
}


@router.get("/flows", response_model=FlowSeriesResponse)
async def fund_flows(
    selection: WindowSelection = Depends(get_window),
    context: RequestContext = Depends(get_request_context),
    source: RecordSource = Depends(get_record_source),
) -> FlowSeriesResponse:
    deposits, withdrawals = await asyncio.gather(
        source.list_records(context.user_id, RecordKind.DEPOSIT, window=selection.window),
        # Withdrawals are windowed by settlement day, which the store cannot filter on.
        source.list_records(context.user_id, RecordKind.WITHDRAWAL),
    )
    points = build_daily_flow_series(deposits, withdrawals, selection.window)
    return FlowSeriesResponse.model_validate(
        {"window": selection.to_schema(), "points": [asdict(point) for point in points]}
    )


@router.get("/{kind}/series", response_model=CumulativeSeriesResponse)
async def fund_series(
    kind: FundKind,
    selection: WindowSelection = Depends(get_window),
    context: RequestContext = Depends(get_request_context),
    source: RecordSource = Depends(get_record_source),
) -> CumulativeSeriesResponse:
    records = await source.list_records(context.user_id, _KINDS[kind], window=selection.window)
    points = build_cumulative_series(records, selection.window)
    return CumulativeSeriesResponse.model_validate(
        {"window": selection.to_schema(), "points": [asdict(point) for point in points]}
    )


@router.get("/{kind}/stats", response_model=WindowStatsResponse)
async def fund_stats(
    kind: FundKind,
    selection: WindowSelection = Depends(get_window),
    context: RequestContext = Depends(get_request_context),
    source: RecordSource = Depends(get_record_source),
) -> WindowStatsResponse:
    if kind == "withdrawals":
        records = await source.list_records(context.user_id, RecordKind.WITHDRAWAL)
        stats = withdrawal_stats(records, selection.window)
    else:
        records = await source.list_records(context.user_id, _KINDS[kind], window=selection.window)
        stats = window_stats(records, selection.window)
    return WindowStatsResponse.model_validate({"window": selection.to_schema(), "stats": asdict(stats)})


__all__ = ["router"]
