"""Route registration helpers."""

from __future__ import annotations

from fastapi import APIRouter

from .dashboard import router as dashboard_router
from .funds import router as funds_router
from .trading import router as trading_router

api_router = APIRouter()
api_router.include_router(dashboard_router, prefix="/dashboard", tags=["dashboard"])
api_router.include_router(trading_router, prefix="/trading", tags=["trading"])
api_router.include_router(funds_router, prefix="/funds", tags=["funds"])

__all__ = ["api_router"]
