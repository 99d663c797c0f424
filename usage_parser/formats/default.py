"""
Default format handler: ``<id>,<bytes_used>``.

The catch-all layout for any ID whose last character is not a known
discriminant. The payload is a single numeric token.
"""

from __future__ import annotations

from usage_parser.formats.base import BaseFormat, FormatKind, RawFields
from usage_parser.normalize import is_number


class DefaultFormat(BaseFormat):
    """Handler for compact ``<id>,<bytes_used>`` lines."""

    kind = FormatKind.DEFAULT

    def is_shape_valid(self, payload: tuple[str, ...]) -> bool:
        return len(payload) == 1 and is_number(payload[0])

    def extract(self, id_token: str, payload: tuple[str, ...]) -> RawFields:
        return RawFields(id=id_token, bytes_used=payload[0])
