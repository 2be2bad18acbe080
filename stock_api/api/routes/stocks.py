"""Stock price endpoint."""
from typing import Union
from fastapi import APIRouter, Depends
import logging

from stock_api.api.schemas import (
    ErrorResponse, MessageResponse, StockQuoteResponse,
    NO_PRICE_MESSAGE, QUERY_TIME_FORMAT,
)
from stock_api.api.dependencies import get_quote_service
from stock_api.services.quote_service import QuoteService

logger = logging.getLogger(__name__)
router = APIRouter(tags=["stocks"])


@router.get(
    "/stock/{code}",
    response_model=Union[StockQuoteResponse, MessageResponse],
    responses={
        400: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
        503: {"model": ErrorResponse},
    },
)
async def get_stock(
    code: str,
    service: QuoteService = Depends(get_quote_service)
) -> Union[StockQuoteResponse, MessageResponse]:
    """Get current price for a stock and record it."""
    observation = await service.lookup(code)
    if observation is None:
        return MessageResponse(message=NO_PRICE_MESSAGE)
    return StockQuoteResponse(
        stock_code=observation.stock_code,
        stock_name=observation.stock_name,
        price=observation.price,
        query_time=observation.created_at.strftime(QUERY_TIME_FORMAT),
    )
