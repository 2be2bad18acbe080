"""API request/response schemas (DTOs)."""
from pydantic import BaseModel

QUERY_TIME_FORMAT = "%Y-%m-%d %H:%M:%S"
NO_PRICE_MESSAGE = "该股票当前无有效价格（可能已停牌）"


class StockQuoteResponse(BaseModel):
    """Response for a recorded stock price."""
    stock_code: str
    stock_name: str
    price: float
    query_time: str


class MessageResponse(BaseModel):
    """Informational response."""
    message: str


class ErrorResponse(BaseModel):
    """Error response."""
    error: str

