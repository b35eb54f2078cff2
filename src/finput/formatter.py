"""Convert between raw numeric strings, display strings and numbers."""

from __future__ import annotations

import math
import re
import string
from decimal import Decimal

from finput.models import Options, Range

# Beyond these magnitudes a float only renders in exponential notation.
_MAX_PLAIN = Decimal("1e21")
_MIN_PLAIN = Decimal("1e-6")

_NUMBER_RE = re.compile(r"-?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)")


def _decimal_index(value: str, options: Options) -> int:
    """Index of the decimal separator, or ``len(value)`` when there is none."""
    index = value.find(options.decimal)
    return index if index > -1 else len(value)


def _sign(value: str) -> str:
    return "-" if value.startswith("-") else ""


def edit_string(text: str, to_add: str, start: int, end: int | None = None) -> str:
    """Replace ``text[start:end]`` with *to_add*.

    Args:
        text: The original string.
        to_add: The replacement (may be empty to delete).
        start: Start of the replaced region.
        end: End of the replaced region; defaults to *start* (pure insert).

    Returns:
        The edited string.
    """
    if end is None:
        end = start
    return f"{text[:start]}{to_add}{text[end:]}"


def format_thousands(value: str, options: Options) -> str:
    """Insert thousands separators into the integer part of *value*.

    The value must not already contain separators.  The sign and the
    decimal part are left untouched.

    Args:
        value: A raw numeric string, e.g. ``'-1234567.5'``.
        options: Formatting options.

    Returns:
        The grouped string, e.g. ``'-1,234,567.5'``.
    """
    sign = _sign(value)
    index = _decimal_index(value, options)
    integer_part = value[len(sign):index]

    groups: list[str] = []
    while len(integer_part) > 3:
        groups.append(integer_part[-3:])
        integer_part = integer_part[:-3]
    groups.append(integer_part)

    return sign + options.thousands.join(reversed(groups)) + value[index:]


def remove_leading_zeros(value: str, options: Options) -> str:
    """Strip redundant leading zeros from the integer part (``'007'`` -> ``'7'``).

    A single zero in front of the decimal separator is kept (``'00.5'`` ->
    ``'0.5'``).
    """
    sign = _sign(value)
    index = _decimal_index(value, options)
    integer_part = value[len(sign):index]
    stripped = integer_part.lstrip("0")
    if integer_part and not stripped:
        stripped = "0"
    return sign + stripped + value[index:]


def remove_extra_decimals(value: str, options: Options) -> str:
    """Truncate the decimal part of *value* to ``options.scale`` digits."""
    index = _decimal_index(value, options)
    if options.scale == 0:
        return value[:index]
    return value[: index + 1] + value[index + 1 :][: options.scale]


def format_partial(value: str | None, options: Options) -> str:
    """Format a value the way the field shows it while the user is typing.

    Thousands separators are stripped and re-inserted, leading zeros removed
    and the decimal part capped at ``options.scale`` digits.  The decimal part
    is not padded.

    Args:
        value: Field text, with or without separators.
        options: Formatting options.

    Returns:
        The partially formatted value, or ``''`` for empty input.
    """
    if not value:
        return ""
    value = value.replace(options.thousands, "")
    value = remove_leading_zeros(value, options)
    value = remove_extra_decimals(value, options)
    return format_thousands(value, options)


def to_display(value: str | None, options: Options) -> str:
    """Fully format a value for display once it is committed.

    Runs :func:`format_partial` and then, when ``options.fixed`` is set,
    pads or truncates the decimal part to exactly ``options.scale`` digits.

    Args:
        value: Field text or a raw numeric string (e.g. ``'1234.5'``).
        options: Formatting options.

    Returns:
        The display string (e.g. ``'1,234.50'``), or ``''`` for empty input.
    """
    value = format_partial(value, options)
    if not value or not options.fixed:
        return value

    sign = _sign(value)
    index = _decimal_index(value, options)
    integer_part = value[len(sign):index]
    decimal_part = value[index + 1 :]

    if options.scale == 0:
        return f"{sign}{integer_part}"

    decimal_part = decimal_part[: options.scale].ljust(options.scale, "0")
    return f"{sign}{integer_part or '0'}{options.decimal}{decimal_part}"


def allowed_decimal(value: str, options: Options) -> bool:
    """Whether the decimal part of *value* fits within ``options.scale``."""
    return len(value[_decimal_index(value, options) + 1 :]) <= options.scale


def allowed_zero(value: str, caret: int, options: Options) -> bool:
    """Whether a digit may be inserted into *value* at *caret*.

    A lone ``0`` integer part accepts no further digits, and no digit may go
    in front of an existing integer part (which would allow ``'0123'``).
    Positions in the decimal part are always allowed.

    Args:
        value: The field text with any selected region already removed.
        caret: Insert position in *value*.
        options: Formatting options.
    """
    sign = _sign(value)
    integer_part = value[len(sign):_decimal_index(value, options)]
    caret -= len(sign)

    if integer_part and caret < len(integer_part) + 1:
        return integer_part != "0" and caret > 0
    return True


def to_raw(display: str, options: Options) -> float:
    """Convert a display string to a number.

    Only exact character substitution is used: thousands separators are
    removed and the decimal separator becomes ``.``.  No locale-aware
    parsing happens, so the two separators are never confused.

    Args:
        display: A display or raw string, e.g. ``'1,234.50'``.
        options: Formatting options.

    Returns:
        The numeric value, or ``nan`` if the text is empty or not a number.
    """
    if not isinstance(display, str):
        return math.nan
    normalised = display.replace(options.thousands, "").replace(options.decimal, ".")
    if not _NUMBER_RE.fullmatch(normalised):
        return math.nan
    return float(normalised)


def _plain_number(number: float) -> str | None:
    """Shortest round-trip rendering of *number* without an exponent.

    Returns None when the magnitude only renders in exponential notation.
    """
    value = Decimal(repr(float(number)))
    if value == 0:
        return "0"
    magnitude = abs(value)
    if magnitude >= _MAX_PLAIN or magnitude < _MIN_PLAIN:
        return None
    if value == value.to_integral_value():
        return str(int(value))
    return format(value.normalize(), "f")


def from_number(number: float, options: Options) -> str:
    """Convert a number to a raw string in the configured separator convention.

    Args:
        number: The value to convert.
        options: Formatting options.

    Returns:
        A raw string such as ``'1234,5'`` (with ``decimal=','``), or ``''``
        when *number* is not a finite number or needs exponential notation.
    """
    if isinstance(number, bool) or not isinstance(number, (int, float)):
        return ""
    if not math.isfinite(number):
        return ""
    text = _plain_number(number)
    if text is None:
        return ""
    return text.replace(".", options.decimal)


def parse_free_text(text: str, options: Options) -> str:
    """Extract a number from arbitrary pasted or dropped text.

    Digits and the first decimal separator are kept, shortcut characters
    multiply the result, a ``-`` is kept only as the very first character
    (and only when negative values are allowed), everything else is dropped.

    Args:
        text: The external text, e.g. ``'$ 2.5m'``.
        options: Formatting options.

    Returns:
        A raw string in the configured convention (e.g. ``'2500000'``), or
        ``''`` if nothing numeric was found or the result is out of range.
    """
    multiplier = 1.0
    parsed = ""

    for char in text:
        if char in string.digits:
            parsed += char
        elif char == options.decimal and options.decimal not in parsed:
            parsed += char
        elif char.lower() in options.shortcuts:
            multiplier *= options.shortcuts[char.lower()]
        elif char == "-" and not parsed and options.range != Range.POSITIVE:
            parsed = char

    if not parsed:
        return ""
    return from_number(to_raw(parsed, options) * multiplier, options)
