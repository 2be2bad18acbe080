"""Pytest configuration and fixtures."""
import json

import httpx
import pytest
from fastapi.testclient import TestClient
from sqlalchemy import func, select

from stock_api.api.dependencies import get_quote_service
from stock_api.infrastructure.eastmoney_client import EastmoneyQuoteClient
from stock_api.main import app
from stock_api.repository.models import StockPriceRecord
from stock_api.repository.sqlite_client import SQLiteConnection
from stock_api.repository.stock_repository import SQLitePriceObservationRepository
from stock_api.services.quote_service import QuoteService


class FakeUpstream:
    """httpx mock transport handler that records requests."""

    def __init__(self):
        self.requests = []
        self.status_code = 200
        self.body = json.dumps({"rc": 0, "data": {"f43": 12.5, "f58": "Pudong Bank"}})
        self.error = None

    def respond_json(self, payload) -> None:
        self.body = json.dumps(payload)

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        return httpx.Response(self.status_code, content=self.body.encode())


@pytest.fixture
def upstream():
    """Fake eastmoney endpoint."""
    return FakeUpstream()


@pytest.fixture
def quote_client(upstream):
    """Quote client wired to the fake endpoint."""
    http = httpx.AsyncClient(transport=httpx.MockTransport(upstream))
    return EastmoneyQuoteClient(
        url="https://push2.eastmoney.com/api/qt/stock/get",
        ut="test-ut",
        timeout=1.0,
        client=http,
    )


@pytest.fixture
def connection(tmp_path):
    """Connected SQLite database in a temporary file."""
    conn = SQLiteConnection(url=f"sqlite:///{tmp_path / 'stocks.db'}", echo=False)
    conn.connect()
    yield conn
    conn.disconnect()


@pytest.fixture
def repository(connection):
    return SQLitePriceObservationRepository(connection)


@pytest.fixture
def count_records(connection):
    """Return a callable counting persisted observations."""
    def _count() -> int:
        with connection.session() as session:
            return session.scalar(select(func.count()).select_from(StockPriceRecord))
    return _count


@pytest.fixture
def client(quote_client, repository):
    """Test client with the quote service overridden."""
    service = QuoteService(quote_client, repository)
    app.dependency_overrides[get_quote_service] = lambda: service
    yield TestClient(app)
    app.dependency_overrides.clear()
