"""
Locale-independent formatting primitives used by the translator.

Provides:
- Grouped number formatting with caller-supplied separators
- Splitting of strftime formats into translatable and literal parts
"""

from __future__ import annotations

import functools
import re
from decimal import ROUND_HALF_UP, Decimal, localcontext

# strftime directives whose output is an English word and must be translated:
# weekday (abbreviated, full), month (abbreviated, full), AM/PM.
TRANSLATABLE_DIRECTIVES = "aAbBp"

_DATE_TOKEN = re.compile(
    rf"(?P<translatable>%[{TRANSLATABLE_DIRECTIVES}])|(?:%[^{TRANSLATABLE_DIRECTIVES}]|%$|[^%])+",
    re.DOTALL,
)


def number_format(
    number: int | float,
    decimals: int = 0,
    decimal_point: str = ".",
    thousands_sep: str = ",",
) -> str:
    """
    Format a number with grouped thousands and a fixed number of decimals.

    Args:
        number: Number to format
        decimals: Number of decimal places (rounded half away from zero)
        decimal_point: Decimal separator
        thousands_sep: Thousands separator

    Returns:
        Formatted number string

    Examples:
        >>> number_format(1234.5, 2)
        '1,234.50'
        >>> number_format(1234.5, 2, ",", ".")
        '1.234,50'
    """
    decimals = max(int(decimals), 0)
    value = Decimal(str(number))
    if not value.is_finite():
        return str(number)

    # Default context precision (28 digits) is too small for large values.
    with localcontext() as context:
        context.prec = max(value.adjusted(), 0) + decimals + 2
        value = value.quantize(Decimal(1).scaleb(-decimals), rounding=ROUND_HALF_UP)
        if value == 0:
            value = abs(value)
        formatted = f"{value:,.{decimals}f}"

    # Use placeholder to avoid replacement conflicts
    if decimal_point != "." or thousands_sep != ",":
        formatted = formatted.replace(",", "\x00")
        formatted = formatted.replace(".", decimal_point)
        formatted = formatted.replace("\x00", thousands_sep)

    return formatted


@functools.lru_cache(maxsize=None)
def tokenize_date_format(fmt: str) -> tuple[tuple[str, bool], ...]:
    """
    Split a strftime format into chunks.

    Args:
        fmt: Format accepted by datetime.strftime()

    Returns:
        Tuple of (chunk, translatable) pairs. Translatable chunks are single
        directives producing words (%a, %A, %b, %B, %p); everything between
        them is grouped into one chunk.
    """
    return tuple(
        (match.group(0), match.group("translatable") is not None)
        for match in _DATE_TOKEN.finditer(fmt)
    )
