"""Text notations for WGS84 latitude and longitude.

Supported notations (``º`` is U+00BA, the ordinal indicator used by the
Swedish interchange format, not the degree sign):

  DEGREES                  59.330231
  DEGREES_MINUTES          N 59º 19.8138'
  DEGREES_MINUTES_SECONDS  N 59º 19' 48.8316"

Numbers are always read and written with a period as decimal separator,
independent of the host locale.

A component that cannot be given a finite value (empty text, or a
magnitude above 90) is returned as the UNSET sentinel instead of raising.
The 90 limit is also applied to longitudes.

Degree, minute and second fields are plain unsigned decimals; the sign
comes only from the hemisphere letter.
"""

import math
import re
import sys
from enum import Enum
from typing import Tuple


UNSET = -sys.float_info.max

DEGREE_MARK = "º"
MINUTE_MARK = "'"
SECOND_MARK = '"'

_MAX_MAGNITUDE = 90.0

_DECIMAL_RE = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")
_FIELD_RE = re.compile(r"\d+\.?\d*|\.\d+")


class FormatError(ValueError):
    """A coordinate string is missing a delimiter or holds a non-number."""


class CoordinateFormat(Enum):
    DEGREES = 0
    DEGREES_MINUTES = 1
    DEGREES_MINUTES_SECONDS = 2


def is_unset(value: float) -> bool:
    return value == UNSET


# ---------------------------------------------------------------------------
# Numbers
# ---------------------------------------------------------------------------

def parse_decimal(text: str) -> float:
    """Parse *text* as a culture-invariant decimal number.

    Raises:
        FormatError: if *text* is not a plain decimal number.
    """
    stripped = text.strip()
    if not _DECIMAL_RE.fullmatch(stripped):
        raise FormatError(f"not a decimal number: {text!r}")
    return float(stripped)


def _parse_field(text: str) -> float:
    """Parse an unsigned degree/minute/second field (no sign, no exponent)."""
    if not _FIELD_RE.fullmatch(text):
        raise FormatError(f"not an unsigned decimal field: {text!r}")
    return float(text)


def format_decimal(value: float) -> str:
    """Shortest round-trip text for *value*; integral values carry no '.0'."""
    text = repr(float(value))
    if text.endswith(".0"):
        text = text[:-2]
    return text


# ---------------------------------------------------------------------------
# Parsing
# ---------------------------------------------------------------------------

def _split_at(text: str, mark: str) -> Tuple[str, str]:
    """Return (before, after) around the first *mark*, both stripped."""
    index = text.find(mark)
    if index < 0:
        raise FormatError(f"expected {mark!r} in {text!r}")
    return text[:index].strip(), text[index + 1:].strip()


def _parse_sexagesimal(text: str, negative_letter: str, with_seconds: bool) -> float:
    if not text:
        return UNSET

    direction = text[0]
    rest = text[1:].strip()

    degrees, rest = _split_at(rest, DEGREE_MARK)
    minutes, rest = _split_at(rest, MINUTE_MARK)
    value = _parse_field(degrees) + _parse_field(minutes) / 60.0
    if with_seconds:
        seconds, _ = _split_at(rest, SECOND_MARK)
        value += _parse_field(seconds) / 3600.0

    if value > _MAX_MAGNITUDE:
        return UNSET

    if direction == negative_letter or direction == "-":
        value = -value
    return value


def _parse_component(text: str, fmt: CoordinateFormat, negative_letter: str) -> float:
    text = text.strip()
    if fmt is CoordinateFormat.DEGREES:
        return parse_decimal(text)
    if fmt is CoordinateFormat.DEGREES_MINUTES:
        return _parse_sexagesimal(text, negative_letter, with_seconds=False)
    if fmt is CoordinateFormat.DEGREES_MINUTES_SECONDS:
        return _parse_sexagesimal(text, negative_letter, with_seconds=True)
    raise TypeError(f"unknown coordinate format: {fmt!r}")


def parse_latitude(text: str, fmt: CoordinateFormat) -> float:
    """Parse one latitude; 'S' or '-' marks the southern hemisphere."""
    return _parse_component(text or "", fmt, "S")


def parse_longitude(text: str, fmt: CoordinateFormat) -> float:
    """Parse one longitude; 'W' or '-' marks the western hemisphere."""
    return _parse_component(text or "", fmt, "W")


def parse_position(text: str, fmt: CoordinateFormat) -> Tuple[float, float]:
    """Parse a latitude/longitude pair.

    DEGREES expects exactly two numbers separated by a single space. The
    sexagesimal formats are split after the first minute mark (DM) or
    second mark (DMS); the first half is the latitude.

    Returns:
        (latitude, longitude); either may be UNSET.

    Raises:
        FormatError: on a missing delimiter or malformed number.
    """
    if fmt is CoordinateFormat.DEGREES:
        parts = text.strip().split(" ")
        if len(parts) != 2:
            raise FormatError(f"the position string is invalid: {text!r}")
        return parse_decimal(parts[0]), parse_decimal(parts[1])

    mark = MINUTE_MARK if fmt is CoordinateFormat.DEGREES_MINUTES else SECOND_MARK
    end = text.find(mark)
    latitude = text[:end + 1]
    longitude = text[end + 1:]
    return parse_latitude(latitude, fmt), parse_longitude(longitude, fmt)


# ---------------------------------------------------------------------------
# Formatting
# ---------------------------------------------------------------------------

def _to_dm(value: float, positive: str, negative: str) -> str:
    magnitude = abs(value)
    degrees = math.floor(magnitude)
    minutes = (magnitude - degrees) * 60.0
    minutes = math.floor(minutes * 10000.0) / 10000.0
    letter = positive if value >= 0 else negative
    return f"{letter} {degrees}{DEGREE_MARK} {format_decimal(minutes)}{MINUTE_MARK}"


def _to_dms(value: float, positive: str, negative: str) -> str:
    magnitude = abs(value)
    degrees = math.floor(magnitude)
    minutes = math.floor((magnitude - degrees) * 60.0)
    seconds = (magnitude - degrees - minutes / 60.0) * 3600.0
    letter = positive if value >= 0 else negative
    return (
        f"{letter} {degrees}{DEGREE_MARK} {minutes}{MINUTE_MARK} "
        f"{format_decimal(round(seconds, 5))}{SECOND_MARK}"
    )


def _format_component(value: float, fmt: CoordinateFormat, positive: str, negative: str) -> str:
    if is_unset(value):
        return ""
    if fmt is CoordinateFormat.DEGREES_MINUTES:
        return _to_dm(value, positive, negative)
    if fmt is CoordinateFormat.DEGREES_MINUTES_SECONDS:
        return _to_dms(value, positive, negative)
    return format_decimal(value)


def format_latitude(value: float, fmt: CoordinateFormat) -> str:
    return _format_component(value, fmt, "N", "S")


def format_longitude(value: float, fmt: CoordinateFormat) -> str:
    return _format_component(value, fmt, "E", "W")
