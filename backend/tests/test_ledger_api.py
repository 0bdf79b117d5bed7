"""HTTP surface tests for the ledger aggregations."""

from __future__ import annotations

from contextlib import asynccontextmanager
from datetime import date, datetime, timedelta
from pathlib import Path

from httpx import ASGITransport, AsyncClient

from tradezone.api.dependencies import get_now
from tradezone.db.session import Database
from tradezone.main import create_app
from tradezone.models import Deposit as DepositRow
from tradezone.services.records import (
    Deposit,
    InMemoryRecordSource,
    PnLEntry,
    RecordKind,
    Wallet,
    Withdrawal,
)

NOW = datetime(2025, 10, 20, 10, 0)
TODAY = NOW.date()
HEADERS = {"X-User-Id": "u1"}


def _source() -> InMemoryRecordSource:
    return InMemoryRecordSource(
        [
            PnLEntry(id="p1", amount=100, occurred_at=TODAY, owner_id="u1", label="A", symbol="BTCUSDT", profit=100),
            PnLEntry(id="p2", amount=-40, occurred_at=TODAY - timedelta(days=2), owner_id="u1", label="A", symbol="ETHUSDT", loss=40),
            PnLEntry(id="p3", amount=10, occurred_at=TODAY, owner_id="u2", label="B", symbol="BTCUSDT"),
            Deposit(id="d1", amount=500, occurred_at=TODAY - timedelta(days=3), owner_id="u1"),
            Deposit(id="d2", amount=100, occurred_at=TODAY, owner_id="u1"),
            Withdrawal(id="w1", amount=150, occurred_at=TODAY - timedelta(days=1), owner_id="u1"),
            Wallet(id="wa1", owner_id="u1", name="Binance", balance=900, currency="USDT"),
            Wallet(id="wa2", owner_id="u1", name="Yen", balance=1000, currency="JPY"),
        ]
    )


@asynccontextmanager
async def _client(source=None, database: Database | None = None):
    app = create_app(database=database, record_source=source)
    app.dependency_overrides[get_now] = lambda: NOW
    async with app.router.lifespan_context(app):
        transport = ASGITransport(app=app)
        async with AsyncClient(transport=transport, base_url="http://test") as client:
            yield client


async def test_dashboard_summary():
    async with _client(_source()) as client:
        response = await client.get("/dashboard/summary", headers=HEADERS)
    assert response.status_code == 200
    assert response.json() == {
        "total_deposits": 600.0,
        "total_withdrawals": 150.0,
        "total_trades": 2,
        "total_profit": 100.0,
        "total_loss": 40.0,
    }


async def test_dashboard_summary_degrades_to_zero_on_failure():
    class BrokenSource:
        async def list_records(self, owner_id, kind, *, window=None, on_date=None):
            if kind == RecordKind.WITHDRAWAL:
                raise ConnectionError("withdrawals offline")
            return []

    async with _client(BrokenSource()) as client:
        response = await client.get("/dashboard/summary", headers=HEADERS)
    assert response.status_code == 200
    assert set(response.json().values()) == {0}


async def test_missing_user_header_is_rejected():
    async with _client(_source()) as client:
        response = await client.get("/dashboard/summary")
    assert response.status_code == 401


async def test_daily_pnl_summary_spans_all_owners():
    async with _client(_source()) as client:
        response = await client.get(
            "/trading/pnl/summary/daily", params={"date": TODAY.isoformat()}, headers=HEADERS
        )
    assert response.status_code == 200
    payload = response.json()
    assert payload["total_amount"] == 110.0
    assert payload["count"] == 2
    assert payload["by_user"] == {"A": {"sum": 100.0, "count": 1}, "B": {"sum": 10.0, "count": 1}}
    assert payload["by_symbol"]["BTCUSDT"] == {"sum": 110.0, "count": 2}


async def test_daily_pnl_summary_requires_valid_date():
    async with _client(_source()) as client:
        response = await client.get("/trading/pnl/summary/daily", params={"date": "yesterday"}, headers=HEADERS)
    assert response.status_code == 422


async def test_pnl_summary_and_series_for_window():
    async with _client(_source()) as client:
        summary = await client.get("/trading/pnl/summary", params={"window": "1W"}, headers=HEADERS)
        series = await client.get("/trading/pnl/series", params={"window": "1W"}, headers=HEADERS)
    assert summary.status_code == 200
    body = summary.json()
    assert body["window"]["token"] == "1W"
    assert body["summary"]["total_amount"] == 60.0
    assert body["summary"]["total_profit"] == 100.0
    assert body["summary"]["total_loss"] == 40.0

    points = series.json()["points"]
    assert len(points) == 8
    assert [p["cumulative"] for p in points] == [0, 0, 0, 0, 0, -40, -40, 60]
    assert points[-1]["date"] == TODAY.isoformat()


async def test_unknown_window_token_uses_default():
    async with _client(_source()) as client:
        response = await client.get("/funds/deposits/series", params={"window": "2W"}, headers=HEADERS)
    assert response.status_code == 200
    body = response.json()
    assert body["window"]["token"] == "1M"
    assert len(body["points"]) == 31
    assert body["points"][-1]["cumulative_amount"] == 600.0


async def test_withdrawal_stats_and_flows():
    async with _client(_source()) as client:
        stats = await client.get("/funds/withdrawals/stats", params={"window": "1W"}, headers=HEADERS)
        flows = await client.get("/funds/flows", params={"window": "1W"}, headers=HEADERS)
    assert stats.json()["stats"] == {
        "total": 150.0,
        "count": 1,
        "average": 150.0,
        "maximum": 150.0,
        "completed_count": 1,
        "pending_count": 0,
    }
    by_day = {p["date"]: p for p in flows.json()["points"]}
    assert by_day[(TODAY - timedelta(days=3)).isoformat()]["net"] == 500.0
    assert by_day[(TODAY - timedelta(days=1)).isoformat()]["net"] == -150.0


async def test_withdrawal_stats_skip_rejected_requests():
    source = InMemoryRecordSource(
        [
            Withdrawal(id="w1", amount=150, occurred_at=TODAY - timedelta(days=1), owner_id="u1"),
            Withdrawal(
                id="w2",
                amount=60,
                occurred_at=TODAY - timedelta(days=20),
                completed_on=TODAY - timedelta(days=2),
                owner_id="u1",
                status="pending",
            ),
            Withdrawal(id="w3", amount=900, occurred_at=TODAY, owner_id="u1", status="rejected"),
        ]
    )
    async with _client(source) as client:
        stats = await client.get("/funds/withdrawals/stats", params={"window": "1W"}, headers=HEADERS)
        flows = await client.get("/funds/flows", params={"window": "1W"}, headers=HEADERS)
    body = stats.json()["stats"]
    assert body["total"] == 210.0
    assert body["completed_count"] == 1
    assert body["pending_count"] == 1
    by_day = {p["date"]: p for p in flows.json()["points"]}
    assert by_day[(TODAY - timedelta(days=2)).isoformat()]["withdrawals"] == 60.0
    assert by_day[TODAY.isoformat()]["withdrawals"] == 0.0


async def test_unknown_fund_kind_is_rejected():
    async with _client(_source()) as client:
        response = await client.get("/funds/transfers/series", headers=HEADERS)
    assert response.status_code == 422


async def test_wallet_balance():
    async with _client(_source()) as client:
        response = await client.get("/trading/wallets/balance", headers=HEADERS)
    body = response.json()
    assert body["total_balance"] == 1900.0
    assert body["by_currency"] == {"JPY": 1000.0, "USDT": 900.0}
    assert body["total_in_base"] == 900.0
    assert body["unconverted"] == ["JPY"]


async def test_health_and_sql_backed_app(tmp_path: Path):
    database = Database(url=f"sqlite+aiosqlite:///{tmp_path / 'api.db'}")
    async with _client(database=database) as client:
        async with database.session() as session:
            session.add(DepositRow(owner_id="u1", amount=75, deposited_on=date(2025, 10, 19)))
            await session.commit()
        health = await client.get("/health")
        stats = await client.get("/funds/deposits/stats", params={"window": "1W"}, headers=HEADERS)
    assert health.json()["status"] == "ok"
    assert stats.json()["stats"]["total"] == 75.0
