"""
Canonical output record for usage-parser.

Every format (Default, Hex, Extended) produces the same ``UsageRecord``
shape so callers never branch on which layout a line used. All six fields
are independently optional; a field is ``None`` when its raw value could
not be converted.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass, fields
from typing import Any


@dataclass(frozen=True)
class UsageRecord:
    """A normalized usage-accounting record.

    Attributes:
        id: Numeric parse of the ID token.
        dmcc: Free-text DMCC code (Extended format only).
        mnc: Mobile network code.
        bytes_used: Usage counter.
        cellid: Cell tower identifier.
        ip: Dotted-quad IPv4 address (Hex format only).
    """
    id: int | None = None
    dmcc: str | None = None
    mnc: int | None = None
    bytes_used: int | None = None
    cellid: int | None = None
    ip: str | None = None

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


# Output column order, shared by the DataFrame builder
FIELDS: tuple[str, ...] = tuple(f.name for f in fields(UsageRecord))
