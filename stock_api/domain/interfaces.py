"""Repository and provider interfaces (Ports)."""
from abc import ABC, abstractmethod

from stock_api.domain.entities import PriceObservation, PriceObservationCreate, Quote


class PriceObservationRepository(ABC):
    """Interface for price observation storage. Append only."""

    @abstractmethod
    def insert(self, record: PriceObservationCreate) -> PriceObservation:
        """Insert a single observation and return it with id and timestamp."""
        pass


class QuoteProvider(ABC):
    """Interface for fetching the current quote of a security."""

    @abstractmethod
    async def fetch_quote(self, secid: str) -> Quote:
        """Fetch name and current price for a security identifier."""
        pass
