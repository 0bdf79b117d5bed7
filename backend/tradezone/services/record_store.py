"""SQLAlchemy-backed record accessor."""

from __future__ import annotations

from datetime import date
from typing import Any

from sqlalchemy import select

from tradezone.db.session import Database
from tradezone.models import Deposit as DepositRow
from tradezone.models import TradePnL, TradingWallet
from tradezone.models import Withdrawal as WithdrawalRow
from tradezone.services.records import Deposit, PnLEntry, RecordKind, Wallet, Withdrawal
from tradezone.services.windows import TimeWindow

_DATE_COLUMNS = {
    RecordKind.PNL: TradePnL.trade_date,
    RecordKind.DEPOSIT: DepositRow.deposited_on,
    RecordKind.WITHDRAWAL: WithdrawalRow.requested_on,
}
_MODELS = {
    RecordKind.PNL: TradePnL,
    RecordKind.DEPOSIT: DepositRow,
    RecordKind.WITHDRAWAL: WithdrawalRow,
    RecordKind.WALLET: TradingWallet,
}


def _to_record(kind: RecordKind, row: Any) -> Any:
    if kind == RecordKind.PNL:
        return PnLEntry(
            id=row.id,
            amount=row.pnl,
            occurred_at=row.trade_date,
            owner_id=row.owner_id,
            label=row.user_name,
            notes=row.notes,
            symbol=row.symbol,
            profit=row.profit,
            loss=row.loss,
        )
    if kind == RecordKind.DEPOSIT:
        return Deposit(
            id=row.id,
            amount=row.amount,
            occurred_at=row.deposited_on,
            owner_id=row.owner_id,
            notes=row.description,
            method=row.method,
        )
    if kind == RecordKind.WITHDRAWAL:
        return Withdrawal(
            id=row.id,
            amount=row.amount,
            occurred_at=row.requested_on,
            owner_id=row.owner_id,
            notes=row.description,
            method=row.method,
            status=row.status,
            completed_on=row.completed_on,
        )
    return Wallet(
        id=row.id,
        owner_id=row.owner_id,
        name=row.name,
        balance=row.balance,
        currency=row.currency,
        platform=row.platform,
        notes=row.notes,
    )


class SqlRecordSource:
    """Read journal records for an owner from the ledger tables."""

    def __init__(self, database: Database):
        self._database = database

    async def list_records(
        self,
        owner_id: str | None,
        kind: RecordKind,
        *,
        window: TimeWindow | None = None,
        on_date: date | None = None,
    ) -> list[Any]:
        kind = RecordKind(kind)
        model = _MODELS[kind]
        stmt = select(model)
        if owner_id is not None:
            stmt = stmt.where(model.owner_id == owner_id)
        date_column = _DATE_COLUMNS.get(kind)
        if date_column is not None:
            if on_date is not None:
                stmt = stmt.where(date_column == on_date)
            elif window is not None:
                stmt = stmt.where(date_column >= window.start_date, date_column <= window.end_date)
            stmt = stmt.order_by(date_column, model.id)
        else:
            stmt = stmt.order_by(model.id)
        async with self._database.session() as session:
            rows = (await session.execute(stmt)).scalars().all()
        return [_to_record(kind, row) for row in rows]


__all__ = ["SqlRecordSource"]
