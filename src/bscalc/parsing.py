"""String-to-float conversion with C ``strtod`` semantics.

``strtod`` converts the longest numeric prefix of a string and returns 0.0
when there is none, so ``"abc"`` and ``"0"`` are indistinguishable from the
value alone.  :func:`scan_number` reports how much of the input was used so
callers can tell the two apart; :func:`parse_number` applies the lenient
(coerce and warn) or strict (raise) policy on top of it.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass

from .exceptions import MalformedNumericInput

__all__ = ["ParsedNumber", "scan_number", "parse_number"]

logger = logging.getLogger(__name__)

_WHITESPACE = " \t\n\v\f\r"

_NUMBER = re.compile(
    r"""
    (?P<sign>[+-]?)
    (?:
        (?P<hex>0x(?:[0-9a-f]+\.?[0-9a-f]*|\.[0-9a-f]+)(?:p[+-]?[0-9]+)?)
      | (?P<dec>(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:e[+-]?[0-9]+)?)
      | (?P<inf>inf(?:inity)?)
      | (?P<nan>nan(?:\([0-9a-z_]*\))?)
    )
    """,
    re.VERBOSE | re.IGNORECASE,
)


@dataclass(frozen=True)
class ParsedNumber:
    """Result of scanning a string for a leading number.

    ``consumed`` is the offset just past the number (0 when ``ok`` is False).
    ``exact`` is True when nothing but whitespace follows the number.
    """
    value: float
    consumed: int
    ok: bool
    exact: bool


def scan_number(text: str) -> ParsedNumber:
    start = len(text) - len(text.lstrip(_WHITESPACE))
    m = _NUMBER.match(text, start)
    if m is None:
        return ParsedNumber(0.0, 0, False, False)

    sign = -1.0 if m.group("sign") == "-" else 1.0
    if m.group("hex"):
        value = float.fromhex(m.group("hex"))
    elif m.group("dec"):
        value = float(m.group("dec"))
    elif m.group("inf"):
        value = float("inf")
    else:
        value = float("nan")

    end = m.end()
    exact = text[end:].strip(_WHITESPACE) == ""
    return ParsedNumber(sign * value, end, True, exact)


def parse_number(text: str, *, strict: bool = False) -> float:
    """Convert ``text`` to float.

    Lenient mode mirrors ``strtod``: a missing number becomes 0.0 and
    trailing characters are dropped, each with a logged warning.  Strict
    mode raises :class:`MalformedNumericInput` instead.
    """
    parsed = scan_number(text)
    if parsed.exact:
        return parsed.value
    if strict:
        raise MalformedNumericInput(text)
    if not parsed.ok:
        logger.warning("%r is not a number; using 0.0", text)
    else:
        logger.warning("ignoring trailing characters %r in %r",
                       text[parsed.consumed:], text)
    return parsed.value
