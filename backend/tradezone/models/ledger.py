"""Journal ledger models: trade P&L entries, fund movements and wallets."""

from __future__ import annotations

from datetime import date, datetime

from sqlalchemy import Date, DateTime, Index, Numeric, String
from sqlalchemy.orm import Mapped, mapped_column

from tradezone.db.base import Base


class TradePnL(Base):
    __tablename__ = "trade_pnl"
    __table_args__ = (
        Index("ix_trade_pnl_owner_date", "owner_id", "trade_date"),
        Index("ix_trade_pnl_symbol", "symbol"),
    )

    id: Mapped[int] = mapped_column(primary_key=True)
    owner_id: Mapped[str] = mapped_column(String(64))
    user_name: Mapped[str | None] = mapped_column(String(128), nullable=True)
    symbol: Mapped[str | None] = mapped_column(String(20), nullable=True)
    pnl: Mapped[float | None] = mapped_column(Numeric(18, 6), nullable=True)
    profit: Mapped[float | None] = mapped_column(Numeric(18, 6), nullable=True)
    loss: Mapped[float | None] = mapped_column(Numeric(18, 6), nullable=True)
    trade_date: Mapped[date] = mapped_column(Date)
    notes: Mapped[str | None] = mapped_column(String(512), nullable=True)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=datetime.utcnow)


class Deposit(Base):
    __tablename__ = "deposit"
    __table_args__ = (Index("ix_deposit_owner_date", "owner_id", "deposited_on"),)

    id: Mapped[int] = mapped_column(primary_key=True)
    owner_id: Mapped[str] = mapped_column(String(64))
    amount: Mapped[float | None] = mapped_column(Numeric(18, 6), nullable=True)
    method: Mapped[str | None] = mapped_column(String(64), nullable=True)
    description: Mapped[str | None] = mapped_column(String(255), nullable=True)
    deposited_on: Mapped[date] = mapped_column(Date)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=datetime.utcnow)


class Withdrawal(Base):
    __tablename__ = "withdrawal"
    __table_args__ = (Index("ix_withdrawal_owner_date", "owner_id", "requested_on"),)

    id: Mapped[int] = mapped_column(primary_key=True)
    owner_id: Mapped[str] = mapped_column(String(64))
    amount: Mapped[float | None] = mapped_column(Numeric(18, 6), nullable=True)
    method: Mapped[str | None] = mapped_column(String(64), nullable=True)
    description: Mapped[str | None] = mapped_column(String(255), nullable=True)
    status: Mapped[str] = mapped_column(String(16), default="pending")
    requested_on: Mapped[date] = mapped_column(Date)
    completed_on: Mapped[date | None] = mapped_column(Date, nullable=True)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=datetime.utcnow)


class TradingWallet(Base):
    __tablename__ = "trading_wallet"
    __table_args__ = (Index("ix_trading_wallet_owner", "owner_id"),)

    id: Mapped[int] = mapped_column(primary_key=True)
    owner_id: Mapped[str] = mapped_column(String(64))
    name: Mapped[str] = mapped_column(String(64))
    balance: Mapped[float | None] = mapped_column(Numeric(18, 6), nullable=True)
    currency: Mapped[str] = mapped_column(String(4), default="USD")
    platform: Mapped[str | None] = mapped_column(String(64), nullable=True)
    notes: Mapped[str | None] = mapped_column(String(255), nullable=True)
    updated_on: Mapped[date] = mapped_column(Date, default=date.today)


__all__ = ["TradePnL", "Deposit", "Withdrawal", "TradingWallet"]
