"""Tests for the quote lookup pipeline."""
import asyncio
from datetime import datetime
from unittest.mock import AsyncMock, MagicMock

import pytest

from stock_api.domain.entities import PriceObservation, Quote
from stock_api.domain.errors import (
    InvalidInputError, PersistenceError, UnsupportedMarketError, UpstreamDataError
)
from stock_api.services.quote_service import QuoteService


@pytest.fixture
def provider():
    provider = MagicMock()
    provider.fetch_quote = AsyncMock(return_value=Quote(stock_name="Pudong Bank", price=12.5))
    return provider


@pytest.fixture
def mock_repository():
    repository = MagicMock()
    repository.insert.side_effect = lambda record: PriceObservation(
        id=1,
        stock_code=record.stock_code,
        stock_name=record.stock_name,
        price=record.price,
        created_at=datetime(2024, 1, 1, 12, 0, 0),
    )
    return repository


def test_lookup_persists_observation(provider, mock_repository):
    service = QuoteService(provider, mock_repository)
    observation = asyncio.run(service.lookup("600000"))

    provider.fetch_quote.assert_awaited_once_with("1.600000")
    record = mock_repository.insert.call_args.args[0]
    assert record.stock_code == "600000"
    assert record.stock_name == "Pudong Bank"
    assert record.price == 12.5
    assert observation.price == 12.5


def test_lookup_shenzhen(provider, mock_repository):
    asyncio.run(QuoteService(provider, mock_repository).lookup("000001"))
    provider.fetch_quote.assert_awaited_once_with("0.000001")


def test_lookup_no_price(provider, mock_repository):
    provider.fetch_quote.return_value = Quote(stock_name="停牌股", price=None)
    result = asyncio.run(QuoteService(provider, mock_repository).lookup("600000"))

    assert result is None
    mock_repository.insert.assert_not_called()


@pytest.mark.parametrize("code", ["ABCDEF", "12345", "6000001"])
def test_invalid_code_short_circuits(provider, mock_repository, code):
    with pytest.raises(InvalidInputError):
        asyncio.run(QuoteService(provider, mock_repository).lookup(code))
    provider.fetch_quote.assert_not_called()
    mock_repository.insert.assert_not_called()


def test_unsupported_market_short_circuits(provider, mock_repository):
    with pytest.raises(UnsupportedMarketError):
        asyncio.run(QuoteService(provider, mock_repository).lookup("900901"))
    provider.fetch_quote.assert_not_called()


def test_upstream_error_skips_persistence(provider, mock_repository):
    provider.fetch_quote.side_effect = UpstreamDataError()
    with pytest.raises(UpstreamDataError):
        asyncio.run(QuoteService(provider, mock_repository).lookup("600000"))
    mock_repository.insert.assert_not_called()


def test_persistence_error_propagates(provider, mock_repository):
    mock_repository.insert.side_effect = PersistenceError()
    with pytest.raises(PersistenceError):
        asyncio.run(QuoteService(provider, mock_repository).lookup("600000"))
