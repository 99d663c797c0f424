"""
Internal pipeline orchestration for usage-parser.

Runs a single line through dispatcher -> format handler -> normalizer,
and maps batches of lines through that sequence. Every line is handled
independently: a structurally invalid line becomes ``None`` and never
affects its neighbours.

This module is **not** part of the public API.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from concurrent.futures import ThreadPoolExecutor

from usage_parser.config import DEFAULT_CONFIG, ParserConfig
from usage_parser.detect import classify_and_split, get_format
from usage_parser.exceptions import ParsingError
from usage_parser.normalize import normalize
from usage_parser.record import UsageRecord

logger = logging.getLogger(__name__)


def parse_line(line: object, config: ParserConfig | None = None) -> UsageRecord | None:
    """Parse one line into a UsageRecord.

    Args:
        line: Raw ``<ID>,<payload>`` text. Non-text input is accepted and
            yields ``None``.
        config: Separator and discriminant settings (defaults if None).

    Returns:
        The normalized record, or ``None`` if the line is structurally
        invalid (no separator, wrong payload shape, not text).
    """
    config = config or DEFAULT_CONFIG
    try:
        split = classify_and_split(line, config)
        handler = get_format(split.kind)
        payload = split.payload
        if not handler.is_shape_valid(payload):
            raise ParsingError(
                f"Payload does not match {split.kind.value} format: {split.rest!r}"
            )
        raw = handler.extract(split.id_token, payload)
    except ParsingError as e:
        logger.debug("Skipping line: %s", e)
        return None

    return normalize(
        raw.id,
        raw.mnc,
        raw.bytes_used,
        dmcc=raw.dmcc,
        cellid=raw.cellid,
        ip=raw.ip,
    )


def parse_lines(
    lines: Iterable[object],
    config: ParserConfig | None = None,
) -> list[UsageRecord | None]:
    """Parse a batch of lines, one output slot per input, order preserved.

    Uses a thread pool when ``config.max_workers > 1`` and the batch has at
    least ``config.parallel_threshold`` lines.
    """
    config = config or DEFAULT_CONFIG
    lines = list(lines)

    if config.max_workers > 1 and len(lines) >= config.parallel_threshold:
        logger.debug(
            "Parsing %d lines with %d workers", len(lines), config.max_workers
        )
        with ThreadPoolExecutor(max_workers=config.max_workers) as pool:
            records = list(pool.map(lambda line: parse_line(line, config), lines))
    else:
        records = [parse_line(line, config) for line in lines]

    parsed = sum(1 for r in records if r is not None)
    logger.info("Parsed %d/%d lines", parsed, len(records))
    return records


def parse(input: object, config: ParserConfig | None = None) -> list[UsageRecord | None]:
    """Parse a single line or a batch of lines.

    Args:
        input: A ``str`` (treated as a one-line batch) or an iterable of
            lines. Anything else, including ``bytes``, is a single non-text
            line and yields ``[None]``.
        config: Separator, discriminant and batch settings.

    Returns:
        One slot per input line, in input order; ``None`` marks a line
        that could not be parsed.
    """
    if isinstance(input, (str, bytes, bytearray)) or not isinstance(input, Iterable):
        return [parse_line(input, config)]
    return parse_lines(input, config)
