"""
Extended format handler: ``<id>,<dmcc>,<mnc>,<bytes_used>,<cellid>``.

The payload has exactly four comma-delimited tokens. Token contents are
not checked here; non-numeric values are softened to ``None`` by the
normalizer, so a line with a garbage ``mnc`` still yields a record.
"""

from __future__ import annotations

from usage_parser.formats.base import BaseFormat, FormatKind, RawFields

_TOKEN_COUNT = 4


class ExtendedFormat(BaseFormat):
    """Handler for extended comma-delimited lines."""

    kind = FormatKind.EXTENDED

    def is_shape_valid(self, payload: tuple[str, ...]) -> bool:
        return len(payload) == _TOKEN_COUNT

    def extract(self, id_token: str, payload: tuple[str, ...]) -> RawFields:
        dmcc, mnc, bytes_used, cellid = payload
        return RawFields(
            id=id_token,
            dmcc=dmcc,
            mnc=mnc,
            bytes_used=bytes_used,
            cellid=cellid,
        )
