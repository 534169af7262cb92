from decimal import ROUND_HALF_UP, Context, Decimal
from typing import Optional, Union

Number = Union[int, float]


def format_number(
    value: Number,
    decimals: Optional[int] = None,
    compact: bool = False,
) -> str:
    """
    Format a coordinate value as text.

    Without decimals the value is written using its default string conversion. With decimals,
    the decimal representation of the value is rounded half up to exactly that many fractional
    digits, so the same value always formats to the same text.

    Args:
        value: The number to format
        decimals: The number of fractional digits to write. If None, the default string conversion is used.
        compact: If True and no decimals are set, floats without a fractional part are written
            without the trailing ".0". Default is False.

    Returns:
        The formatted number

    Examples:
        >>> format_number(10.1)
        '10.1'
        >>> format_number(1.005, decimals=2)
        '1.01'
        >>> format_number(2.0, decimals=2)
        '2.00'
        >>> format_number(15.0, compact=True)
        '15'
    """
    if decimals is None:
        if compact and isinstance(value, float) and value.is_integer():
            return str(int(value))
        return str(value)

    d = Decimal(str(value))
    if not d.is_finite():
        return str(value)

    # precision must cover every integer digit plus the requested fraction
    context = Context(prec=max(28, d.adjusted() + decimals + 2))
    quantum = Decimal(1).scaleb(-decimals)
    return str(d.quantize(quantum, rounding=ROUND_HALF_UP, context=context))
