from __future__ import annotations
from dataclasses import dataclass

from .exceptions import DomainError

CALL = "call"
PUT  = "put"

DAYS_PER_YEAR = 365.0
PERCENT = 100.0


# ---------------------------------------------------------------------------
# Model units — what the pricing functions consume
# ---------------------------------------------------------------------------
@dataclass(frozen=True)
class ModelInputs:
    """Black-Scholes inputs in model units.

    Parameters
    ----------
    S : float
        Spot price.
    K : float
        Strike price, same currency as ``S``.
    T : float
        Time to expiry in years.
    sigma : float
        Annualised volatility as a decimal fraction.
    r : float
        Continuously-compounded risk-free rate as a decimal fraction.

    No validation happens on construction: ``T = 0`` or ``sigma = 0`` are
    accepted and price to inf / NaN.  Call :meth:`check_domain` to reject
    them explicitly.
    """
    S: float
    K: float
    T: float          # years
    sigma: float
    r: float          # continuous risk-free

    def check_domain(self) -> None:
        if not self.T > 0:
            raise DomainError("T", self.T)
        if not self.sigma > 0:
            raise DomainError("sigma", self.sigma)


# ---------------------------------------------------------------------------
# User units — what arrives on the command line
# ---------------------------------------------------------------------------
@dataclass(frozen=True)
class OptionQuote:
    """Inputs as a user quotes them: dollars, days and percentages."""
    stock_price: float
    strike_price: float
    days_to_expiration: float
    volatility_pct: float
    risk_free_rate_pct: float

    def to_model(self) -> ModelInputs:
        """Convert days to years and percentages to fractions."""
        return ModelInputs(
            S=self.stock_price,
            K=self.strike_price,
            T=self.days_to_expiration / DAYS_PER_YEAR,
            sigma=self.volatility_pct / PERCENT,
            r=self.risk_free_rate_pct / PERCENT,
        )
