"""FastAPI dependency injection setup."""
from typing import Optional

from stock_api.domain.interfaces import QuoteProvider
from stock_api.repository.sqlite_client import SQLiteConnection
from stock_api.repository.stock_repository import SQLitePriceObservationRepository
from stock_api.services.quote_service import QuoteService


# Application state (set during lifespan)
_quote_service: Optional[QuoteService] = None


def init_services(connection: SQLiteConnection, provider: QuoteProvider) -> None:
    """Initialize services with the storage connection and quote provider."""
    global _quote_service
    repository = SQLitePriceObservationRepository(connection)
    _quote_service = QuoteService(provider, repository)


def get_quote_service() -> QuoteService:
    """Get quote service dependency."""
    if _quote_service is None:
        raise RuntimeError("Services not initialized")
    return _quote_service
