"""
Base format protocol / ABC for usage-parser.

All format handlers implement this interface. The contract is:
1. is_shape_valid() checks the payload without extracting anything.
2. extract() is only called after is_shape_valid() returned True, and
   returns a RawFields of unnormalized candidates.

A handler receives either the tokenized payload (``tuple[str, ...]``) or the
opaque remainder of the line (``str``), as declared by ``tokenized``.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum


class FormatKind(str, Enum):
    """Tag for each known line layout."""
    HEX = "hex"
    EXTENDED = "extended"
    DEFAULT = "default"


@dataclass(frozen=True)
class RawFields:
    """Field candidates as extracted, before normalization.

    Each value is still a raw string, a decoded integer, or ``None``.
    """
    id: str | int | None = None
    dmcc: str | None = None
    mnc: str | int | None = None
    bytes_used: str | int | None = None
    cellid: str | int | None = None
    ip: str | None = None


class BaseFormat(ABC):
    """Abstract base class for line format handlers."""

    kind: FormatKind
    # True: payload is the list of separator-split tokens.
    # False: payload is the raw remainder after the ID separator.
    tokenized: bool = True

    @abstractmethod
    def is_shape_valid(self, payload: tuple[str, ...] | str) -> bool:
        """Return True if the payload has the shape this format expects."""

    @abstractmethod
    def extract(self, id_token: str, payload: tuple[str, ...] | str) -> RawFields:
        """Extract raw field candidates from a shape-valid payload."""
