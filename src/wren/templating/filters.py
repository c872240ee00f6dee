"""Built-in wren template filters.

Auto-registered on every wren kida Environment, next to Kida's own
filters.
"""

from decimal import ROUND_HALF_UP, Decimal, InvalidOperation, localcontext
from typing import Any


def number_format(
    number: Any,
    decimals: int = 2,
    decimal_point: str = ".",
    thousands_sep: str = ",",
) -> str:
    """Format a number with grouped thousands and fixed decimals.

    Rounds half away from zero. ``None`` and empty strings format as zero;
    other non-numeric input raises ``ValueError``.

    Example:
        {{ price | number_format }}                 → "1,234.57"
        {{ price | number_format(1, ",", ".") }}    → "1.234,6"
        {{ count | number_format(0) }}              → "1,235"

    """
    if number is None or number == "":
        number = 0
    try:
        value = Decimal(str(number))
    except InvalidOperation:
        msg = f"number_format expects a number, got {number!r}"
        raise ValueError(msg) from None
    if not value.is_finite():
        msg = f"number_format cannot format {number!r}"
        raise ValueError(msg)

    decimals = max(int(decimals), 0)
    # quantize and abs need room for every integer digit plus the decimals
    with localcontext() as dctx:
        dctx.prec = max(dctx.prec, value.adjusted() + decimals + 2)
        value = value.quantize(Decimal(1).scaleb(-decimals), rounding=ROUND_HALF_UP)
        sign = "-" if value < 0 else ""
        integer_part, _, fraction = f"{abs(value):f}".partition(".")

    groups = []
    while len(integer_part) > 3:
        groups.append(integer_part[-3:])
        integer_part = integer_part[:-3]
    groups.append(integer_part)
    grouped = thousands_sep.join(reversed(groups))

    if decimals:
        return f"{sign}{grouped}{decimal_point}{fraction}"
    return f"{sign}{grouped}"


BUILTIN_FILTERS: dict[str, Any] = {
    "number_format": number_format,
}
