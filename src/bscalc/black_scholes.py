# black_scholes.py
# Closed-form Black-Scholes prices for European options (no dividends).
# Arithmetic runs in float64 so that T = 0 or sigma = 0 propagate inf / NaN
# rather than raising ZeroDivisionError.

from __future__ import annotations
from typing import Literal

import numpy as np
from scipy.special import erf

from .core import ModelInputs, CALL, PUT

_SQRT1_2 = np.sqrt(0.5)   # 1 / sqrt(2)


def norm_cdf(x: float) -> float:
    """Standard normal CDF, phi(x) = 0.5 * (1 + erf(x / sqrt(2)))."""
    with np.errstate(invalid="ignore"):
        return float(0.5 * (1.0 + erf(np.float64(x) * _SQRT1_2)))


def d1_d2(S: float, K: float, T: float, sigma: float, r: float) -> tuple[float, float]:
    """Dimensionless d1 and d2 of the closed-form price."""
    S, K, T, sigma, r = (np.float64(x) for x in (S, K, T, sigma, r))
    with np.errstate(divide="ignore", invalid="ignore"):
        rt = sigma * np.sqrt(T)
        d1 = (np.log(S / K) + (r + sigma * sigma / 2.0) * T) / rt
        d2 = d1 - rt
    return float(d1), float(d2)


def call_price(S: float, K: float, T: float, sigma: float, r: float) -> float:
    """European call value.

    ``T`` is in years, ``sigma`` and ``r`` are decimal fractions.  Inputs are
    not validated; a zero ``T`` or ``sigma`` yields the IEEE-754 limit of the
    formula (inf / NaN intermediates), never an exception.
    """
    d1, d2 = d1_d2(S, K, T, sigma, r)
    with np.errstate(over="ignore", invalid="ignore"):
        return float(norm_cdf(d1) * S - norm_cdf(d2) * K * np.exp(-r * T))


def put_price(S: float, K: float, T: float, sigma: float, r: float) -> float:
    """European put value via put-call parity on :func:`call_price`."""
    with np.errstate(over="ignore", invalid="ignore"):
        return float(call_price(S, K, T, sigma, r) + K * np.exp(-r * T) - S)


def price(inputs: ModelInputs, kind: Literal["call", "put"] = CALL) -> float:
    args = (inputs.S, inputs.K, inputs.T, inputs.sigma, inputs.r)
    if kind == CALL:
        return call_price(*args)
    elif kind == PUT:
        return put_price(*args)
    else:
        raise ValueError("kind must be 'call' or 'put'")
