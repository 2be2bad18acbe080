"""Domain entities - core business objects."""
from datetime import datetime
from typing import Optional
from pydantic import BaseModel, Field

STOCK_CODE_PATTERN = r"^[0-9]{6}$"


class PriceObservation(BaseModel):
    """Persisted price lookup for one stock."""
    id: int
    stock_code: str = Field(pattern=STOCK_CODE_PATTERN)
    stock_name: str = ""
    price: float
    created_at: datetime

    class Config:
        from_attributes = True
        frozen = True


class PriceObservationCreate(BaseModel):
    """DTO for creating price observation records."""
    stock_code: str = Field(pattern=STOCK_CODE_PATTERN)
    stock_name: str = ""
    price: float


class Quote(BaseModel):
    """Decoded upstream quote. price is None when no current price is published."""
    stock_name: str = ""
    price: Optional[float] = None
