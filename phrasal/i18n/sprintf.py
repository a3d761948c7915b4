"""
printf-style interpolation for translation templates.

Supports the directives translators are used to from gettext catalogs:

- %s, %d, %u, %c, %f, %F, %e, %E, %g, %G, %x, %X, %o, %b and %%
- flags (-, +, space, 0, 'c for a custom pad character), width, precision
- explicit argument positions so translations can reorder parameters:
  "%2$s is owned by %1$s."
"""

from __future__ import annotations

import re
from collections.abc import Sequence
from typing import Any

_DIRECTIVE = re.compile(
    r"%(?:"
    r"(?P<percent>%)"
    r"|(?:(?P<position>[1-9]\d*)\$)?"
    r"(?P<flags>(?:[-+ 0]|'.)*)"
    r"(?P<width>\d+)?"
    r"(?:\.(?P<precision>\d+))?"
    r"(?P<conversion>[bcdeEfFgGosuxX])"
    r"|(?P<malformed>)"
    r")",
    re.DOTALL,
)

_NUMERIC_PREFIX = re.compile(r"\s*([+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?)")

_UNSIGNED_MASK = (1 << 64) - 1


class InterpolationError(ValueError):
    """Raised when a template cannot be filled with the given arguments."""


def _to_float(value: Any) -> float:
    if isinstance(value, (int, float)):
        return float(value)
    if isinstance(value, str):
        # Strings are read up to the first non-numeric character, "12 apples" -> 12.
        match = _NUMERIC_PREFIX.match(value)
        return float(match.group(1)) if match else 0.0
    if value is None:
        return 0.0
    try:
        return float(value)
    except (TypeError, ValueError) as e:
        raise InterpolationError(f"Cannot use {value!r} as a number") from e


def _to_int(value: Any) -> int:
    if isinstance(value, int):
        return int(value)
    return int(_to_float(value))


def _convert(conversion: str, value: Any, precision: int | None, plus: bool) -> str:
    if conversion == "s":
        text = str(value)
        return text[:precision] if precision is not None else text

    if conversion in "du":
        number = _to_int(value)
        if conversion == "u" and number < 0:
            number &= _UNSIGNED_MASK
        return f"{number:+d}" if plus else str(number)

    if conversion == "c":
        return chr(_to_int(value))

    if conversion in "boxX":
        number = _to_int(value)
        if number < 0:
            number &= _UNSIGNED_MASK
        return format(number, conversion)

    # Floating point conversions
    number = _to_float(value)
    digits = 6 if precision is None else precision
    sign = "+" if plus else ""
    return format(number, f"{sign}.{digits}{conversion}")


def _pad(text: str, width: int, pad_char: str, left_align: bool, numeric: bool) -> str:
    if len(text) >= width:
        return text
    if left_align:
        # Zero padding on the right would change the value.
        return text.ljust(width, " " if pad_char == "0" else pad_char)
    if pad_char == "0" and numeric and text[:1] in "+-":
        return text[0] + text[1:].rjust(width - 1, "0")
    return text.rjust(width, pad_char)


def vsprintf(template: str, args: Sequence[Any]) -> str:
    """
    Fill a printf-style template with positional arguments.

    Args:
        template: Template containing % directives
        args: Values consumed in order, or by explicit position (%2$s)

    Returns:
        The interpolated string

    Raises:
        InterpolationError: If a directive is malformed, refers to an
            argument that was not supplied, or cannot represent its argument
    """
    next_index = 0

    def replace(match: re.Match) -> str:
        nonlocal next_index

        if match.group("percent"):
            return "%"
        if match.group("malformed") is not None:
            raise InterpolationError(f"Malformed directive at offset {match.start()} in {template!r}")

        position = match.group("position")
        if position:
            index = int(position) - 1
        else:
            index = next_index
            next_index += 1

        if index >= len(args):
            raise InterpolationError(
                f"Template {template!r} needs argument {index + 1}, only {len(args)} given"
            )

        flags = match.group("flags")
        left_align = "-" in flags
        plus = "+" in flags
        pad_char = " "
        for flag in re.findall(r"'.|0", flags):
            pad_char = flag[-1]

        precision = match.group("precision")
        conversion = match.group("conversion")
        try:
            text = _convert(
                conversion,
                args[index],
                int(precision) if precision is not None else None,
                plus,
            )
        except (ValueError, OverflowError, TypeError) as e:
            # nan/inf as integers, chr() out of range
            raise InterpolationError(
                f"Cannot format argument {index + 1} ({args[index]!r}) as %{conversion}: {e}"
            ) from e

        if " " in flags and conversion not in "sc" and text[:1] not in "+-":
            text = " " + text

        width = match.group("width")
        if width:
            text = _pad(text, int(width), pad_char, left_align, conversion not in "sc")
        return text

    return _DIRECTIVE.sub(replace, template)
