"""
Format detection for usage-accounting lines.

A line has the shape ``<ID><sep><payload>``. The last character of the ID
token (the discriminant) selects the format handler, tested in a fixed
priority order: hex -> extended -> default.

Design: Strategy Pattern
- classify_and_split() returns a SplitLine naming the selected FormatKind.
- get_format() maps the kind to its handler in an immutable table built
  once at import time.
- Default matches every discriminant, so it always comes last.

Detection algorithm:
1. Reject non-text input.
2. Split on the first separator into id_token and rest; no separator
   means the line is structurally invalid.
3. Take the last character of id_token as the discriminant.
4. Walk DETECTION_ORDER and return the first kind whose rule matches.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType

from usage_parser.config import DEFAULT_CONFIG, ParserConfig
from usage_parser.exceptions import ParsingError
from usage_parser.formats import (
    BaseFormat,
    DefaultFormat,
    ExtendedFormat,
    FormatKind,
    HexFormat,
)

logger = logging.getLogger(__name__)

# Most specific first; DEFAULT is the catch-all
DETECTION_ORDER: tuple[FormatKind, ...] = (
    FormatKind.HEX,
    FormatKind.EXTENDED,
    FormatKind.DEFAULT,
)

_FORMATS: Mapping[FormatKind, BaseFormat] = MappingProxyType({
    FormatKind.HEX: HexFormat(),
    FormatKind.EXTENDED: ExtendedFormat(),
    FormatKind.DEFAULT: DefaultFormat(),
})


@dataclass(frozen=True)
class SplitLine:
    """A line split into its ID token and payload.

    Attributes:
        id_token: Everything before the first separator.
        discriminant: Last character of id_token ("" if id_token is empty).
        kind: The format selected by the discriminant.
        rest: Everything after the first separator, untouched.
        tokens: rest split on the separator.
    """
    id_token: str
    discriminant: str
    kind: FormatKind
    rest: str
    tokens: tuple[str, ...]

    @property
    def payload(self) -> tuple[str, ...] | str:
        """The payload in the form the selected handler consumes."""
        return self.tokens if get_format(self.kind).tokenized else self.rest


def _matches(kind: FormatKind, discriminant: str, config: ParserConfig) -> bool:
    if kind is FormatKind.HEX:
        return discriminant == config.hex_discriminant
    if kind is FormatKind.EXTENDED:
        return discriminant == config.extended_discriminant
    return True


def select_format(discriminant: str, config: ParserConfig = DEFAULT_CONFIG) -> FormatKind:
    """Pick the format for a discriminant, checking kinds in DETECTION_ORDER."""
    for kind in DETECTION_ORDER:
        if _matches(kind, discriminant, config):
            return kind
    # Unreachable while DEFAULT is in DETECTION_ORDER
    raise ParsingError(f"No format matches discriminant {discriminant!r}")


def get_format(kind: FormatKind) -> BaseFormat:
    """Return the shared handler instance for a format kind."""
    return _FORMATS[kind]


def classify_and_split(line: object, config: ParserConfig = DEFAULT_CONFIG) -> SplitLine:
    """Split a raw line and select its format.

    Args:
        line: The raw input line.
        config: Separator and discriminant settings.

    Returns:
        SplitLine with the ID token, discriminant, selected kind and payload.

    Raises:
        ParsingError: If the line is not a string or has no separator.
    """
    if not isinstance(line, str):
        raise ParsingError(f"Expected a text line, got {type(line).__name__}")

    id_token, sep, rest = line.partition(config.separator)
    if not sep:
        raise ParsingError(f"No {config.separator!r} separator in line: {line!r}")

    discriminant = id_token[-1:]
    kind = select_format(discriminant, config)
    logger.debug("Selected format '%s' for discriminant %r", kind.value, discriminant)

    return SplitLine(
        id_token=id_token,
        discriminant=discriminant,
        kind=kind,
        rest=rest,
        tokens=tuple(rest.split(config.separator)),
    )
