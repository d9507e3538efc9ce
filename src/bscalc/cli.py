from __future__ import annotations
import argparse
import logging
import sys

from .core import OptionQuote
from .black_scholes import call_price, put_price, d1_d2
from .exceptions import UsageError, DomainError
from .parsing import parse_number

logger = logging.getLogger(__name__)

BANNER = "Options pricing calculator based on the Black-Scholes Model."
USAGE = ("Error: Input [Stock Price ($)] [Strike Price ($)] "
         "[Days to Expiration (days)] [Volatility (%)] "
         "[Risk-Free Rate of Interest (%)]")


class _Parser(argparse.ArgumentParser):
    """ArgumentParser that raises instead of exiting with status 2."""

    def error(self, message):
        raise UsageError(message)


_FLAGS = frozenset({"--strict", "-v", "--verbose", "-h", "--help"})


def _split_flags(argv: list[str]) -> list[str]:
    """Put every non-flag token after "--" so values like -5e-1 stay positional."""
    flags = [a for a in argv if a in _FLAGS]
    values = [a for a in argv if a not in _FLAGS]
    return flags + ["--"] + values


def build_parser() -> argparse.ArgumentParser:
    p = _Parser(prog="bscalc", description=BANNER)
    p.add_argument("stock_price", help="stock price ($)")
    p.add_argument("strike_price", help="strike price ($)")
    p.add_argument("days", help="days to expiration")
    p.add_argument("volatility", help="volatility (%%)")
    p.add_argument("rate", help="risk-free rate of interest (%%)")
    p.add_argument("--strict", action="store_true",
                   help="reject malformed numbers and non-positive T or sigma")
    p.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    return p


def _quote(args) -> OptionQuote:
    fields = (args.stock_price, args.strike_price, args.days,
              args.volatility, args.rate)
    return OptionQuote(*(parse_number(f, strict=args.strict) for f in fields))


def run(args) -> int:
    quote = _quote(args)

    print(f"Stock Price: ${quote.stock_price:g}")
    print(f"Strike Price: ${quote.strike_price:g}")
    print(f"Days to Expiration: {quote.days_to_expiration:g} days")
    print(f"Volatility: {quote.volatility_pct:g}%")
    print(f"Risk-Free Rate of Interest: {quote.risk_free_rate_pct:g}%")
    print()

    m = quote.to_model()
    logger.debug("model inputs: %s", m)
    if args.strict:
        m.check_domain()
    if logger.isEnabledFor(logging.DEBUG):
        logger.debug("d1=%r d2=%r", *d1_d2(m.S, m.K, m.T, m.sigma, m.r))

    call = call_price(m.S, m.K, m.T, m.sigma, m.r)
    put = put_price(m.S, m.K, m.T, m.sigma, m.r)
    print(f"Call Option Value: ${call:.2f}")
    print(f"Put Option Value: ${put:.2f}")
    return 0


def main(argv=None) -> int:
    print(BANNER)
    try:
        argv = sys.argv[1:] if argv is None else list(argv)
        args = build_parser().parse_args(_split_flags(argv))
    except UsageError as exc:
        print(USAGE, file=sys.stderr)
        print(f"bscalc: {exc}", file=sys.stderr)
        return 1

    logging.basicConfig(
        stream=sys.stderr,
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    print()

    try:
        return run(args)
    except (UsageError, DomainError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
