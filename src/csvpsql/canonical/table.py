from dataclasses import dataclass
from typing import Tuple

from csvpsql.canonical.field import Column


@dataclass(frozen=True)
class Table:
    """
    Canonical representation of the inferred table.

    Built only by the schema assembler; columns are never empty.
    """
    name: str
    columns: Tuple[Column, ...]
