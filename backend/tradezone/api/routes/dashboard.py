"""Unified dashboard endpoint."""

from __future__ import annotations

from dataclasses import asdict

from fastapi import APIRouter, Depends

from tradezone.api.dependencies import RequestContext, get_record_source, get_request_context
from tradezone.schemas import DashboardSummarySchema
from tradezone.services.dashboard import get_unified_summary
from tradezone.services.records import RecordSource

router = APIRouter()


@router.get("/summary", response_model=DashboardSummarySchema)
async def dashboard_summary(
    context: RequestContext = Depends(get_request_context),
    source: RecordSource = Depends(get_record_source),
) -> DashboardSummarySchema:
    # Zeroed on upstream failure; never an error response.
    summary = await get_unified_summary(context.user_id, source)
    return DashboardSummarySchema.model_validate(asdict(summary))


__all__ = ["router"]
