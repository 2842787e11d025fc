from enum import Enum
from functools import total_ordering


@total_ordering
class PrimitiveType(Enum):
    """
    Column data types, ordered from most to least specific.

    Each member carries an explicit rank (drives widening) and the
    lowercase tag rendered in the statement.
    """
    UNKNOWN = (0, "unknown")
    BOOLEAN = (1, "boolean")
    INTEGER = (2, "integer")
    FLOATING_POINT = (3, "numeric")
    DATE = (4, "date")
    TIMESTAMP = (5, "timestamp")
    TEXT = (6, "text")

    def __init__(self, rank: int, tag: str):
        self.rank = rank
        self.tag = tag

    def __lt__(self, other):
        if not isinstance(other, PrimitiveType):
            return NotImplemented
        return self.rank < other.rank

    def widen(self, other: "PrimitiveType") -> "PrimitiveType":
        return other if other.rank > self.rank else self

    def __str__(self) -> str:
        return self.tag


@total_ordering
class Nullability(Enum):
    """
    Column constraint. NOT_NULL ranks above NULLABLE.
    """
    NULLABLE = (0, "")
    NOT_NULL = (1, "not null")

    def __init__(self, rank: int, keyword: str):
        self.rank = rank
        self.keyword = keyword

    def __lt__(self, other):
        if not isinstance(other, Nullability):
            return NotImplemented
        return self.rank < other.rank

    def strengthen(self, other: "Nullability") -> "Nullability":
        return other if other.rank > self.rank else self

    def __str__(self) -> str:
        return self.keyword
