# ==============================================================================
# geochainage - Road Chainage and Geodesy Tools
# Copyright (c) 2025 Michael Yoder / Desert Springs Civil Engineering PLLC
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
#
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
# You should have received a copy of the GNU General Public License along with this program. If not, see <https://www.gnu.org/licenses/>.
#
# Primary Author: Michael Yoder
# Company: Desert Springs Civil Engineering PLLC
# ==============================================================================

"""
Station Formatting Utilities

Handles conversion between chainage notation (K<km>+<m>) and numeric values.

Chainage Notation:
- K<kilometres><separator><metres>, metres zero-padded to 3 digits
  Examples: K0+000 = 0m, K1+010 = 1010m, K12+345 = 12345m
- Parsing accepts "+", "-" or "." as the separator and an optional
  leading "K" or "k"; survey data often mixes all of them.

station_to_num() and station_to_str() never raise: malformed text returns a
caller-supplied default and a NaN station formats as "K--", so one bad
record does not abort a batch. parse_station() is the strict counterpart
and raises ValueError.
"""

import math
import re
from typing import Optional, Tuple, Union

from .constants import DEFAULT_STATION_SENTINEL, INVALID_STATION_TEXT
from .logging_config import get_logger

logger = get_logger(__name__)

_INT_RE = re.compile(r"^\s*[+-]?\d+\s*$")
_METRES_RE = re.compile(r"^\s*\d+\s*$")


def station_to_str(station_value: Union[int, float], join: str = "+") -> str:
    """
    Format a numeric station value (metres) as K<km><join><m>.

    Kilometres are rounded to 3 decimals, so fractional metres round to the
    nearest metre.

    Args:
        station_value: Station value in metres
        join: Separator between kilometres and metres (default: "+")

    Returns:
        Formatted chainage string, or "K--" for NaN or infinite values

    Examples:
        >>> station_to_str(1010)
        'K1+010'
        >>> station_to_str(2000)
        'K2+000'
        >>> station_to_str(12345.4, join="-")
        'K12-345'
    """
    if not math.isfinite(station_value):
        logger.debug("Station value %r is not finite", station_value)
        return INVALID_STATION_TEXT

    km_str = f"{station_value / 1000.0:.3f}"
    km_part, metres_part = km_str.split(".")
    return f"K{km_part}{join}{metres_part}"


def _split_index(cleaned: str) -> int:
    """Index of the km/m separator, or -1 when there is none.

    "+" wins over "-", which wins over "."; a leading minus sign is a sign,
    not a separator.
    """
    for separator in ("+", "-", "."):
        index = cleaned.rfind(separator)
        if index > 0 or (index == 0 and separator != "-"):
            return index
    return -1


def _parse(station_str: str) -> Optional[int]:
    cleaned = station_str.strip().lstrip("Kk")
    index = _split_index(cleaned)

    if index < 0:
        return int(cleaned) if _INT_RE.match(cleaned) else None

    km_text, metres_text = cleaned[:index], cleaned[index + 1:]
    if not _INT_RE.match(km_text) or not _METRES_RE.match(metres_text):
        return None

    km = int(km_text)
    metres = int(metres_text)
    # K-1+200 is 1.2 km behind the origin, not 800 m behind it
    if km_text.strip().startswith("-"):
        return km * 1000 - metres
    return km * 1000 + metres


def station_to_num(station_str: str, default: int = DEFAULT_STATION_SENTINEL) -> int:
    """
    Convert chainage text to a station value in metres.

    Accepts formats:
    - "K1+234" → 1234
    - "k1-234" → 1234
    - "1.234"  → 1234 (dot separator)
    - "1234"   → 1234 (no separator)

    Args:
        station_str: Chainage text
        default: Value returned for malformed input (default: -1)

    Returns:
        Station value in metres, or ``default`` if the text is malformed
    """
    if not isinstance(station_str, str):
        logger.debug("Station value %r is not text", station_str)
        return default

    value = _parse(station_str)
    if value is None:
        logger.debug("Malformed station %r, using default %s", station_str, default)
        return default
    return value


def parse_station(station_str: Union[str, int, float]) -> int:
    """
    Parse chainage input, raising on malformed text.

    Args:
        station_str: Chainage text or numeric value (metres)

    Returns:
        Station value in metres

    Raises:
        ValueError: If input format is invalid
    """
    if isinstance(station_str, (int, float)) and not isinstance(station_str, bool):
        return int(round(station_str))

    if not isinstance(station_str, str):
        raise ValueError(f"Invalid station value: {station_str!r}")

    value = _parse(station_str)
    if value is None:
        raise ValueError(
            f"Invalid station format: {station_str!r}. Expected format: K<km>+<m>"
        )
    return value


def normalize_station(
    station_str: str,
    join: str = "+",
    default: Optional[str] = None
) -> Optional[str]:
    """
    Rewrite chainage text in canonical K<km><join><mmm> form.

    Examples:
        >>> normalize_station("k1-5")
        'K1+005'
        >>> normalize_station("12.345", join="+")
        'K12+345'
        >>> normalize_station("K--") is None
        True
    """
    value = _parse(station_str) if isinstance(station_str, str) else None
    if value is None:
        return default
    return station_to_str(value, join)


def validate_station_input(station_str: str) -> Tuple[bool, Optional[int], Optional[str]]:
    """
    Validate chainage input format.

    Args:
        station_str: Chainage text to validate

    Returns:
        Tuple of (is_valid, value, error_message)
        If valid, error_message is None; if invalid, value is None
    """
    try:
        return True, parse_station(station_str), None
    except ValueError as e:
        return False, None, str(e)


__all__ = [
    "station_to_str",
    "station_to_num",
    "parse_station",
    "normalize_station",
    "validate_station_input",
]
