"""
DataFrame builder for parsed usage records.

Turns a list of ``UsageRecord | None`` into a pandas DataFrame with one row
per input slot. Integer columns use pandas' nullable ``Int64`` dtype and
text columns use ``string``, so absent fields stay ``<NA>`` instead of
upcasting whole columns to float. An integer column holding a value
outside int64 keeps ``object`` dtype with the exact Python ints instead.

A boolean ``parsed`` column marks which rows came from a successfully
parsed line; ``drop_unparsed=True`` removes the rest.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

import pandas as pd

from usage_parser._pipeline import parse
from usage_parser.config import ParserConfig
from usage_parser.record import FIELDS, UsageRecord

logger = logging.getLogger(__name__)

_COLUMN_DTYPES: dict[str, str] = {
    "id": "Int64",
    "dmcc": "string",
    "mnc": "Int64",
    "bytes_used": "Int64",
    "cellid": "Int64",
    "ip": "string",
}

PARSED_COLUMN = "parsed"

_INT64_MIN = -(2 ** 63)
_INT64_MAX = 2 ** 63 - 1


def _column_dtypes(df: pd.DataFrame) -> dict[str, str]:
    """Pick a dtype per column, keeping ``object`` for ints outside int64."""
    dtypes = dict(_COLUMN_DTYPES)
    for col, dtype in _COLUMN_DTYPES.items():
        if dtype != "Int64":
            continue
        values = df[col].dropna()
        if any(not _INT64_MIN <= v <= _INT64_MAX for v in values):
            logger.warning(
                "Column '%s' holds values outside int64; keeping object dtype", col
            )
            dtypes[col] = "object"
    return dtypes


def to_frame(
    records: Iterable[UsageRecord | None],
    drop_unparsed: bool = False,
) -> pd.DataFrame:
    """Build a DataFrame from parse results.

    Args:
        records: Output of ``parse()`` (records and ``None`` slots).
        drop_unparsed: If True, drop rows for lines that failed to parse
            and reset the index.

    Returns:
        DataFrame with columns ``FIELDS`` + ``parsed``.
    """
    rows = []
    for record in records:
        if record is None:
            row = dict.fromkeys(FIELDS)
            row[PARSED_COLUMN] = False
        else:
            row = record.to_dict()
            row[PARSED_COLUMN] = True
        rows.append(row)

    df = pd.DataFrame(rows, columns=[*FIELDS, PARSED_COLUMN])
    df = df.astype({**_column_dtypes(df), PARSED_COLUMN: "bool"})

    if drop_unparsed:
        total = len(df)
        df = df[df[PARSED_COLUMN]].reset_index(drop=True)
        logger.info("Dropped %d unparsed rows of %d", total - len(df), total)

    return df


def parse_frame(
    lines: object,
    config: ParserConfig | None = None,
    drop_unparsed: bool = False,
) -> pd.DataFrame:
    """Parse lines and return the results as a DataFrame."""
    return to_frame(parse(lines, config), drop_unparsed=drop_unparsed)
