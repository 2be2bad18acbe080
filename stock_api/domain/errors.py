"""Error hierarchy - one exception per failure stage of a quote lookup.

Every error carries the HTTP status it maps to and a user-facing message.
The global handler in main.py renders them as {"error": message}.
"""


class StockApiError(Exception):
    """Base exception for all stock API errors."""
    http_status: int = 500
    default_message: str = "服务器内部错误"

    def __init__(self, message: str = None):
        self.message = message or self.default_message
        super().__init__(self.message)

    def to_response(self) -> dict:
        """Convert to error response body."""
        return {"error": self.message}


# Request errors (400)

class InvalidInputError(StockApiError):
    """Stock code is not exactly six ASCII digits."""
    http_status = 400
    default_message = "股票代码必须为6位数字"


class UnsupportedMarketError(StockApiError):
    """Leading digit does not map to Shanghai or Shenzhen."""
    http_status = 400
    default_message = "不支持的股票类型"


# Upstream errors

class UpstreamUnavailableError(StockApiError):
    """Quote API could not be reached or answered with a non-2xx status."""
    http_status = 503
    default_message = "API请求失败"


class UpstreamDataError(StockApiError):
    """Quote API answered with a non-success rc."""
    http_status = 503
    default_message = "数据接口异常"


class ParseError(StockApiError):
    """Quote API body is not valid JSON."""
    http_status = 500
    default_message = "JSON解析失败"


class ShapeError(StockApiError):
    """Envelope has no data object."""
    http_status = 500
    default_message = "数据格式异常"


class PriceFormatError(StockApiError):
    """Price field is neither a number nor a numeric string."""
    http_status = 500
    default_message = "价格格式异常"


# Storage errors

class PersistenceError(StockApiError):
    """Observation could not be written."""
    http_status = 500
    default_message = "保存数据失败"
