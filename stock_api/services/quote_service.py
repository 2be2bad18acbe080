"""Stock quote lookup business logic."""
import asyncio
from typing import Optional
import logging

from stock_api.domain import market
from stock_api.domain.entities import PriceObservation, PriceObservationCreate
from stock_api.domain.interfaces import PriceObservationRepository, QuoteProvider

logger = logging.getLogger(__name__)


class QuoteService:
    """Validate -> resolve market -> fetch -> persist, stopping at the first error."""

    def __init__(self, provider: QuoteProvider, repository: PriceObservationRepository):
        self._provider = provider
        self._repository = repository

    async def lookup(self, code: str) -> Optional[PriceObservation]:
        """Fetch and record the current price of a stock.

        Returns None when the upstream has no current price for the stock
        (e.g. trading suspended); nothing is persisted in that case.
        """
        market.validate_code(code)
        secid = market.security_id(code)

        quote = await self._provider.fetch_quote(secid)
        if quote.price is None:
            logger.info(f"No current price for {secid}")
            return None

        record = PriceObservationCreate(
            stock_code=code,
            stock_name=quote.stock_name,
            price=quote.price,
        )
        observation = await asyncio.to_thread(self._repository.insert, record)
        logger.info(f"Recorded {code} ({quote.stock_name}) at {observation.price}")
        return observation
