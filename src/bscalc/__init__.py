# bscalc — Black-Scholes European option calculator
# Public API

from .core import OptionQuote, ModelInputs, CALL, PUT, DAYS_PER_YEAR, PERCENT
from .black_scholes import norm_cdf, d1_d2, call_price, put_price, price
from .parsing import ParsedNumber, scan_number, parse_number
from .exceptions import BSCalcError, UsageError, MalformedNumericInput, DomainError

__all__ = [
    # Data model
    "OptionQuote", "ModelInputs", "CALL", "PUT", "DAYS_PER_YEAR", "PERCENT",
    # Pricing
    "norm_cdf", "d1_d2", "call_price", "put_price", "price",
    # Parsing
    "ParsedNumber", "scan_number", "parse_number",
    # Errors
    "BSCalcError", "UsageError", "MalformedNumericInput", "DomainError",
]

__version__ = "0.1.0"
