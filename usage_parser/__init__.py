"""
usage-parser: normalize usage-accounting lines into structured records.

Lines look like ``<ID>,<payload>``. The last character of the ID selects
the payload layout:

- ``...6`` -- hex-packed: 24 hex nibbles (mnc, bytes_used, cellid, ip).
- ``...4`` -- extended: ``dmcc,mnc,bytes_used,cellid``.
- anything else -- default: a single ``bytes_used`` number.

Public API surface:

- ``parse(input, config=None)`` -- accepts one line or a batch and returns
  a list with one ``UsageRecord`` (or ``None`` for an unparseable line)
  per input line.
- ``parse_line(line, config=None)`` -- a single line, no list wrapping.
- ``parse_frame(lines, ...)`` -- ``parse`` followed by ``to_frame``.

Malformed input never raises. Whole-line failures come back as ``None``;
individual bad values come back as ``None`` fields.

Example::

    >>> import usage_parser
    >>> usage_parser.parse("123,500")
    [UsageRecord(id=123, dmcc=None, mnc=None, bytes_used=500, cellid=None, ip=None)]
"""

from __future__ import annotations

from usage_parser._pipeline import parse, parse_line
from usage_parser.config import DEFAULT_CONFIG, ParserConfig, load_config, save_config
from usage_parser.frame import parse_frame, to_frame
from usage_parser.normalize import normalize, normalize_record
from usage_parser.record import FIELDS, UsageRecord

__all__ = [
    "parse",
    "parse_line",
    "parse_frame",
    "to_frame",
    "normalize",
    "normalize_record",
    "UsageRecord",
    "FIELDS",
    "ParserConfig",
    "DEFAULT_CONFIG",
    "load_config",
    "save_config",
]
