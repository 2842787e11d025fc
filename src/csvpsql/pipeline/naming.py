"""
Pipeline step: column and table naming

Exactly one naming source is active per run:
- explicit override list
- header row (lowercased, whitespace replaced by underscores)
- fallback letters a..z
"""

import os
import re
import string
from typing import List, Optional, Sequence, Union

from csvpsql.utils.exceptions import (
    ColumnCountMismatchError,
    UnsupportedColumnCountError,
)

FALLBACK_ALPHABET = tuple(string.ascii_lowercase)
DEFAULT_TABLE_NAME = "csvpsql"

_WHITESPACE = re.compile(r"\s")


# ------------------------------------------------------------------
# Helpers
# ------------------------------------------------------------------

def split_column_override(columns: Union[str, Sequence[str]]) -> List[str]:
    """
    Accept "a,b,c" or an already split sequence.
    """
    if isinstance(columns, str):
        return columns.split(",")
    return [str(c) for c in columns]


def normalize_header_name(name: str) -> str:
    return _WHITESPACE.sub("_", name.lower())


def letter_names(column_count: int) -> List[str]:
    if column_count > len(FALLBACK_ALPHABET):
        raise UnsupportedColumnCountError(
            f"Cannot name {column_count} columns with letters; "
            f"at most {len(FALLBACK_ALPHABET)} are supported. "
            "Provide a header row or --columns."
        )
    return list(FALLBACK_ALPHABET[:column_count])


# ------------------------------------------------------------------
# Entry points
# ------------------------------------------------------------------

def resolve_names(
    override: Optional[Union[str, Sequence[str]]],
    header: Optional[Sequence[str]],
    column_count: int,
) -> List[str]:
    """
    Resolve one name per column. Override wins over header,
    header wins over fallback letters.
    """
    if override is not None:
        names = split_column_override(override)
        if len(names) != column_count:
            raise ColumnCountMismatchError(
                f"{len(names)} column names were provided "
                f"but the file has {column_count} columns."
            )
        return names

    if header is not None:
        return [normalize_header_name(h) for h in header]

    return letter_names(column_count)


def resolve_table_name(
    table_name: Optional[str] = None,
    source_identifier: Optional[str] = None,
) -> str:
    """
    Explicit name, else the source file stem, else the fallback name.
    """
    if table_name:
        return table_name
    if source_identifier:
        return os.path.splitext(os.path.basename(source_identifier))[0]
    return DEFAULT_TABLE_NAME
