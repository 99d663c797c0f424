"""
Hex-packed format handler: ``<id>,<24 lowercase hex nibbles>``.

The payload is a fixed-width binary record written as hex text. Layout
(nibble offsets, each slice read big-endian as base 16):

    [0:4]    mnc          16-bit
    [4:8]    bytes_used   16-bit
    [8:16]   cellid       32-bit
    [16:24]  ip           four 8-bit octets, [16:18].[18:20].[20:22].[22:24]

Example::

    deadbeef00000000cafe0102
    mnc=0xdead  bytes_used=0xbeef  cellid=0  ip=202.254.1.2

``encode()`` packs a record back into the same 24 nibbles.
"""

from __future__ import annotations

import re

from usage_parser.exceptions import EncodingError
from usage_parser.formats.base import BaseFormat, FormatKind, RawFields
from usage_parser.normalize import is_valid_ip
from usage_parser.record import UsageRecord

PAYLOAD_LENGTH = 24

_PAYLOAD_PATTERN = re.compile(rf"[0-9a-f]{{{PAYLOAD_LENGTH}}}")

# Numeric fields: name -> (start, end) nibble offsets
NUMERIC_SLICES: dict[str, tuple[int, int]] = {
    "mnc": (0, 4),
    "bytes_used": (4, 8),
    "cellid": (8, 16),
}

# IP octets, most significant first
IP_OCTET_SLICES: tuple[tuple[int, int], ...] = ((16, 18), (18, 20), (20, 22), (22, 24))


class HexFormat(BaseFormat):
    """Handler for hex-packed lines."""

    kind = FormatKind.HEX
    tokenized = False

    def is_shape_valid(self, payload: str) -> bool:
        return isinstance(payload, str) and _PAYLOAD_PATTERN.fullmatch(payload) is not None

    def extract(self, id_token: str, payload: str) -> RawFields:
        values = {
            name: int(payload[start:end], 16)
            for name, (start, end) in NUMERIC_SLICES.items()
        }
        ip = ".".join(
            str(int(payload[start:end], 16)) for start, end in IP_OCTET_SLICES
        )
        return RawFields(id=id_token, ip=ip, **values)

    def encode(self, record: UsageRecord) -> str:
        """Pack a record's mnc, bytes_used, cellid and ip into a hex payload.

        Args:
            record: A record with all four hex-format fields present.

        Returns:
            The 24-character lowercase hex payload.

        Raises:
            EncodingError: If a field is absent, negative, too wide for
                its slice, or the IP is not a valid dotted quad.
        """
        parts: list[str] = []
        for name, (start, end) in NUMERIC_SLICES.items():
            value = getattr(record, name)
            width = end - start
            if value is None:
                raise EncodingError(f"Cannot encode record: '{name}' is absent")
            if not 0 <= value < 16 ** width:
                raise EncodingError(
                    f"Cannot encode record: '{name}'={value} does not fit in {width} nibbles"
                )
            parts.append(f"{value:0{width}x}")

        if not is_valid_ip(record.ip):
            raise EncodingError(f"Cannot encode record: invalid ip {record.ip!r}")
        parts.extend(f"{int(octet):02x}" for octet in record.ip.split("."))

        return "".join(parts)
