"""
Field normalizer for usage-parser.

Takes the raw candidates a format handler extracted (numeric strings,
hex-decoded integers, free text) and builds the canonical ``UsageRecord``.
Values that cannot be converted become ``None`` for that field only; the
normalizer itself never fails.

Rules:
- Numeric fields (id, mnc, bytes_used, cellid): ``int`` passes through,
  integral finite ``float`` is converted, strings are stripped and must be
  a decimal integer or an integral decimal/exponent literal. Empty
  strings, hex/underscore literals and fractional values are absent.
- dmcc: kept verbatim when it is a non-empty string.
- ip: kept only when it is four dot-separated decimal octets in 0..255.
"""

from __future__ import annotations

import math
import re
from dataclasses import astuple
from decimal import Decimal

from usage_parser.record import UsageRecord

_INT_PATTERN = re.compile(r"[+-]?\d+", re.ASCII)
_DECIMAL_PATTERN = re.compile(r"[+-]?(?:\d+\.\d*|\.\d+|\d+)(?:[eE][+-]?\d+)?", re.ASCII)

_OCTET = r"(?:25[0-5]|2[0-4]\d|[01]?\d?\d)"
_IP_PATTERN = re.compile(rf"{_OCTET}(?:\.{_OCTET}){{3}}", re.ASCII)

# Matches the interpreter's default int string conversion limit
_MAX_DIGITS = 4300


def to_int(value: object) -> int | None:
    """Convert a raw candidate to ``int``, or ``None`` if it is not a whole number."""
    # bool is an int subclass but never a valid counter
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        if math.isfinite(value) and value.is_integer():
            return int(value)
        return None
    if not isinstance(value, str):
        return None

    text = value.strip()
    if _INT_PATTERN.fullmatch(text):
        try:
            return int(text)
        except ValueError:
            # Exceeds the interpreter's int string conversion limit
            return None
    if _DECIMAL_PATTERN.fullmatch(text):
        # Exact arithmetic; float would round values past 2**53
        number = Decimal(text)
        if number.is_zero():
            return 0
        if number.adjusted() > _MAX_DIGITS or number != number.to_integral_value():
            return None
        return int(number)
    return None


def is_number(value: object) -> bool:
    """Return True if the value converts to a whole number."""
    return to_int(value) is not None


def to_text(value: object) -> str | None:
    """Keep a non-empty string verbatim, otherwise ``None``."""
    if isinstance(value, str) and value:
        return value
    return None


def is_valid_ip(value: object) -> bool:
    """Check for a dotted-quad IPv4 string with every octet in 0..255."""
    return isinstance(value, str) and _IP_PATTERN.fullmatch(value) is not None


def to_ip(value: object) -> str | None:
    """Keep a valid dotted-quad IPv4 string, otherwise ``None``."""
    return value if is_valid_ip(value) else None


def normalize(
    id: object,
    mnc: object,
    bytes_used: object,
    dmcc: object = None,
    cellid: object = None,
    ip: object = None,
) -> UsageRecord:
    """Build a ``UsageRecord`` from raw field candidates.

    Args:
        id: Raw ID token (usually a string).
        mnc: Raw mobile network code.
        bytes_used: Raw usage counter.
        dmcc: Raw DMCC text.
        cellid: Raw cell identifier.
        ip: Candidate dotted-quad string.

    Returns:
        A fully-formed UsageRecord; invalid fields are ``None``.
    """
    return UsageRecord(
        id=to_int(id),
        dmcc=to_text(dmcc),
        mnc=to_int(mnc),
        bytes_used=to_int(bytes_used),
        cellid=to_int(cellid),
        ip=to_ip(ip),
    )


def normalize_record(record: UsageRecord) -> UsageRecord:
    """Re-normalize an existing record. A no-op for already normalized records."""
    id_, dmcc, mnc, bytes_used, cellid, ip = astuple(record)
    return normalize(id_, mnc, bytes_used, dmcc=dmcc, cellid=cellid, ip=ip)
