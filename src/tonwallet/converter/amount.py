"""Exact conversion between on-chain integer units and decimal amounts."""

import logging
from decimal import MAX_EMAX, MAX_PREC, MIN_EMIN, ROUND_DOWN, Context, Decimal, InvalidOperation

from tonwallet.exceptions import AmountPrecisionError

logger = logging.getLogger(__name__)

# Unbounded context: scaling, negation and sums never round.
EXACT_CONTEXT = Context(prec=MAX_PREC, Emax=MAX_EMAX, Emin=MIN_EMIN, rounding=ROUND_DOWN)


def to_decimal(raw: int | str | Decimal, decimals: int) -> Decimal:
    """Convert a raw amount in smallest units into a decimal amount (raw / 10**decimals).

    Accepts an int, an already-parsed Decimal, or a decimal string. Strings that do not
    parse (empty, garbage, nan/inf) yield Decimal(0) instead of raising.
    """
    if decimals < 0:
        raise ValueError(f"decimals must be non-negative, got {decimals}")

    if isinstance(raw, Decimal):
        return EXACT_CONTEXT.scaleb(raw, -decimals)

    if isinstance(raw, str):
        text = raw.strip()
        # Decimal() also takes Python literal forms like "1_000"
        if "_" in text:
            logger.warning("Unparseable amount %r, using 0", raw)
            return Decimal(0)
        try:
            parsed = Decimal(text)
        except InvalidOperation:
            logger.warning("Unparseable amount %r, using 0", raw)
            return Decimal(0)
        if not parsed.is_finite():
            logger.warning("Non-finite amount %r, using 0", raw)
            return Decimal(0)
        return to_decimal(parsed, decimals)

    return to_decimal(Decimal(raw), decimals)


def to_raw(amount: Decimal, decimals: int) -> int:
    """Convert a decimal amount into smallest units (amount * 10**decimals).

    Raises AmountPrecisionError if the result is negative, not finite, or has a
    fractional part, i.e. the amount carries more than ``decimals`` fractional digits.
    """
    if decimals < 0:
        raise ValueError(f"decimals must be non-negative, got {decimals}")
    if not amount.is_finite():
        raise AmountPrecisionError(f"Amount is not finite: {amount}")

    scaled = EXACT_CONTEXT.scaleb(amount, decimals)
    if scaled < 0:
        raise AmountPrecisionError(f"Amount is negative: {amount}")

    integral = scaled.to_integral_value(rounding=ROUND_DOWN)
    if integral != scaled:
        raise AmountPrecisionError(f"Amount {amount} has more than {decimals} fractional digits")
    return int(integral)


def negate(amount: Decimal) -> Decimal:
    return amount.copy_negate()


def exact_sum(*amounts: Decimal) -> Decimal:
    total = Decimal(0)
    for amount in amounts:
        total = EXACT_CONTEXT.add(total, amount)
    return total
