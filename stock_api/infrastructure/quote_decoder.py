"""Decode the eastmoney quote envelope into a Quote.

Envelope shape::

    {"rc": 0, "data": {"f43": 12.5, "f58": "浦发银行"}}

f43 (current price) arrives either as a JSON number or as a numeric string
depending on the fltt flag; both normalize to float. An absent f43 means no
current price (e.g. suspended trading) and is not an error.
"""
import json
import logging
import math
from functools import singledispatch
from typing import Any, Dict

from stock_api.domain.entities import Quote
from stock_api.domain.errors import (
    ParseError, PriceFormatError, ShapeError, UpstreamDataError
)

logger = logging.getLogger(__name__)

FIELD_PRICE = "f43"
FIELD_NAME = "f58"
RC_SUCCESS = 0


@singledispatch
def normalize_price(value: Any) -> float:
    """Normalize a raw f43 value to float. Unknown JSON types are rejected."""
    raise PriceFormatError("未知价格类型")


@normalize_price.register
def _(value: bool) -> float:
    raise PriceFormatError("未知价格类型")


@normalize_price.register(int)
@normalize_price.register(float)
def _(value) -> float:
    try:
        price = float(value)
    except OverflowError:
        logger.warning("Integer price too large for float")
        raise PriceFormatError() from None
    return _finite(price, value)


@normalize_price.register
def _(value: str) -> float:
    try:
        price = float(value.strip())
    except ValueError:
        raise PriceFormatError() from None
    return _finite(price, value)


def _finite(price: float, raw: Any) -> float:
    if not math.isfinite(price):
        logger.warning(f"Non-finite price from upstream: {raw!r}")
        raise PriceFormatError()
    return price


def _is_success(rc: Any) -> bool:
    return isinstance(rc, (int, float)) and not isinstance(rc, bool) and rc == RC_SUCCESS


def decode_quote(body: bytes) -> Quote:
    """Parse raw response bytes into a Quote."""
    try:
        envelope = json.loads(body)
    except ValueError as e:
        logger.error(f"Upstream body is not JSON: {e}")
        raise ParseError() from e

    if not isinstance(envelope, dict):
        logger.error(f"Upstream body is not a JSON object: {type(envelope).__name__}")
        raise ParseError()

    rc = envelope.get("rc")
    if not _is_success(rc):
        logger.error(f"Upstream returned rc={rc!r}")
        raise UpstreamDataError()

    data: Dict[str, Any] = envelope.get("data")
    if not isinstance(data, dict):
        logger.error(f"Upstream data is not an object: {type(data).__name__}")
        raise ShapeError()

    name = data.get(FIELD_NAME)
    if not isinstance(name, str):
        name = ""

    if FIELD_PRICE not in data:
        return Quote(stock_name=name, price=None)

    try:
        price = normalize_price(data[FIELD_PRICE])
    except PriceFormatError:
        logger.error(f"Bad price value from upstream: {data[FIELD_PRICE]!r}")
        raise
    return Quote(stock_name=name, price=price)
