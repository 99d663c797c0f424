"""
Custom exception hierarchy for usage-parser.

The public parsing API never raises on malformed input: a bad line comes
back as ``None``. These exceptions signal failures between internal
stages (dispatcher -> pipeline) and errors in the caller's own setup
(config files, re-encoding records).
"""


class UsageParserError(Exception):
    """Base exception for all usage-parser errors."""


class ConfigValidationError(UsageParserError):
    """Raised when a parser config file fails validation.

    This can happen if:
    - The YAML file is empty or not a mapping.
    - A discriminant or separator is not a single character.
    - Two discriminants collide with each other or with the separator.
    """


class ParsingError(UsageParserError):
    """Raised when a line is structurally invalid.

    For example, the line is not text, has no separator, or its payload
    does not have the shape the selected format expects. Always caught by
    the pipeline and turned into a ``None`` record.
    """


class EncodingError(UsageParserError):
    """Raised when a record cannot be packed back into a hex payload.

    For example, a numeric field is absent or too large for its nibble
    width, or the IP is not a valid dotted quad.
    """
