"""Shared FastAPI dependencies for the ledger routes."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from fastapi import Depends, Header, HTTPException, Query, Request, status

from tradezone.config import get_settings
from tradezone.services.fx import FixedRateTable
from tradezone.schemas import TimeWindowSchema
from tradezone.services.records import RecordSource
from tradezone.services.windows import TimeWindow, effective_token, resolve_window


@dataclass
class RequestContext:
    user_id: str


def get_request_context(x_user_id: str | None = Header(default=None)) -> RequestContext:
    if not x_user_id:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Missing user context")
    return RequestContext(user_id=x_user_id)


def get_record_source(request: Request) -> RecordSource:
    return request.app.state.record_source


def get_fx_table() -> FixedRateTable:
    settings = get_settings()
    return FixedRateTable(rates=dict(settings.fx_rates), base_currency=settings.base_currency)


def get_now() -> datetime:
    """Reference moment for window resolution; overridden in tests."""

    return datetime.now()


@dataclass
class WindowSelection:
    token: str
    window: TimeWindow

    def to_schema(self) -> TimeWindowSchema:
        return TimeWindowSchema(token=self.token, start=self.window.start, end=self.window.end)


def get_window(
    window: str | None = Query(default=None, description="Period token: 1W, 1M, 6M, 1Y or 5Y"),
    now: datetime = Depends(get_now),
) -> WindowSelection:
    token = effective_token(window or get_settings().default_window)
    return WindowSelection(token=token, window=resolve_window(token, now))


__all__ = [
    "RequestContext",
    "WindowSelection",
    "get_request_context",
    "get_record_source",
    "get_fx_table",
    "get_now",
    "get_window",
]
