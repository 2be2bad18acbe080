"""Stock code validation and market prefix resolution."""
import re

from stock_api.domain.errors import InvalidInputError, UnsupportedMarketError

_CODE_RE = re.compile(r"[0-9]{6}")

# Leading digit -> eastmoney market prefix
MARKET_PREFIXES = {
    "6": "1.",  # Shanghai
    "0": "0.",  # Shenzhen
    "3": "0.",  # Shenzhen (ChiNext)
}


def validate_code(code: str) -> str:
    """Return code unchanged if it is exactly six ASCII digits."""
    if not isinstance(code, str) or not _CODE_RE.fullmatch(code):
        raise InvalidInputError()
    return code


def resolve_prefix(code: str) -> str:
    """Get market prefix for a validated code."""
    try:
        return MARKET_PREFIXES[code[0]]
    except KeyError:
        raise UnsupportedMarketError() from None


def security_id(code: str) -> str:
    """Build the upstream security identifier, e.g. 600000 -> 1.600000."""
    return resolve_prefix(code) + code
