# qif_csv/utilities/converters_scalar.py
from __future__ import annotations

import re
from datetime import datetime, timezone
from decimal import ROUND_HALF_EVEN, Decimal, InvalidOperation, localcontext
from typing import Final

from .errors import AmountFormatError, DateFormatError

QIF_DATE_FORMAT: Final[str] = "%d/%m/%Y"
THOUSANDS_SEPARATOR: Final[str] = ","
# largest magnitude a 64-bit float holds is about 1.8e308
MAX_AMOUNT_EXPONENT: Final[int] = 308

_TWO_PLACES: Final[Decimal] = Decimal("0.01")
_QIF_DATE_RE: Final[re.Pattern[str]] = re.compile(r"^\d{2}/\d{2}/\d{4}$", re.ASCII)
_AMOUNT_RE: Final[re.Pattern[str]] = re.compile(
    r"^[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?$", re.ASCII
)


def to_datetime(value: str, /) -> datetime:
    """
    Parse a QIF ``DD/MM/YYYY`` date into an aware ``datetime`` at midnight UTC.

    The day and month must be two digits and the year four, so ``1/2/2023``
    and ``01/02/23`` are rejected along with impossible calendar dates such
    as ``31/13/2023`` or ``30/02/2023``. Surrounding whitespace is rejected
    too.

    Raises
    ------
    DateFormatError
        If the value does not match the pattern or is not a real date.
    """
    if not _QIF_DATE_RE.fullmatch(value):
        raise DateFormatError(f"invalid date {value!r}, expected DD/MM/YYYY")
    try:
        parsed = datetime.strptime(value, QIF_DATE_FORMAT)
    except ValueError as e:
        raise DateFormatError(f"invalid date {value!r}: {e}") from e
    return parsed.replace(tzinfo=timezone.utc)


def to_iso_midnight(value: str, /) -> str:
    """``"25/12/2023"`` -> ``"2023-12-25T00:00:00Z"``; years below 1000 keep four digits."""
    dt = to_datetime(value)
    return f"{dt.year:04d}-{dt.month:02d}-{dt.day:02d}T00:00:00Z"


def to_decimal(value: str) -> Decimal:
    """
    Convert a QIF amount to Decimal after dropping every thousands separator.

    Examples:
        to_decimal("1,234.5")    -> Decimal('1234.5')
        to_decimal("-3,188.32")  -> Decimal('-3188.32')
        to_decimal("+7")         -> Decimal('7')

    Only plain ASCII decimal notation is accepted: no whitespace, no ``_``
    digit grouping, no ``NaN``/``Infinity``.

    Raises:
        AmountFormatError: if the cleaned value is empty, not a base-10
            number, or larger in magnitude than a 64-bit float can hold.
    """
    cleaned = value.replace(THOUSANDS_SEPARATOR, "")
    if not _AMOUNT_RE.fullmatch(cleaned):
        raise AmountFormatError(
            f"invalid amount {value!r} (normalized to {cleaned!r})"
        )
    try:
        amount = Decimal(cleaned)
    except InvalidOperation as e:
        raise AmountFormatError(
            f"invalid amount {value!r} (normalized to {cleaned!r})"
        ) from e
    if amount and amount.adjusted() > MAX_AMOUNT_EXPONENT:
        raise AmountFormatError(f"invalid amount {value!r}: value out of range")
    return amount


def to_amount_string(value: str, /) -> str:
    """Normalize an amount to exactly two fraction digits: ``"1,234.5"`` -> ``"1234.50"``."""
    amount = to_decimal(value)
    with localcontext() as ctx:
        # room for every integer digit plus the two fraction digits
        ctx.prec = max(ctx.prec, amount.adjusted() + 3)
        try:
            quantized = amount.quantize(_TWO_PLACES, rounding=ROUND_HALF_EVEN)
        except InvalidOperation as e:
            raise AmountFormatError(f"invalid amount {value!r}: {e}") from e
    return f"{quantized:f}"
