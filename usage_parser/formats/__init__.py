"""
Formats sub-package for usage-parser.

Contains the format-specific handlers that turn a line's payload into raw
field candidates for the normalizer.

Design: Strategy Pattern
- base.py defines the BaseFormat ABC, the FormatKind tag and RawFields.
- default.py implements DefaultFormat for ``<id>,<bytes_used>`` lines.
- extended.py implements ExtendedFormat for ``<id>,<dmcc>,<mnc>,<bytes_used>,<cellid>``.
- hexpacked.py implements HexFormat for ``<id>,<24 hex nibbles>``.

The dispatcher (detect.py) picks the handler from the last character of
the ID token, in the fixed order hex -> extended -> default.
"""

from usage_parser.formats.base import BaseFormat, FormatKind, RawFields
from usage_parser.formats.default import DefaultFormat
from usage_parser.formats.extended import ExtendedFormat
from usage_parser.formats.hexpacked import HexFormat

__all__ = [
    "BaseFormat",
    "FormatKind",
    "RawFields",
    "DefaultFormat",
    "ExtendedFormat",
    "HexFormat",
]
