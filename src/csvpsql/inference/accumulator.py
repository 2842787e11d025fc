from typing import Iterable, List, Sequence, Tuple

from csvpsql.canonical.types import Nullability, PrimitiveType
from csvpsql.inference.type_inference import (
    DateParser,
    classify_constraint,
    classify_type,
    parse_datetime,
)
from csvpsql.utils.exceptions import EmptyInputError, RowArityMismatchError


class ColumnAccumulator:
    """
    Running (type, constraint) state for every column of one run.

    Each slot starts at (UNKNOWN, NULLABLE). Types only widen and
    constraints only move toward NOT_NULL, so a column stays NULLABLE
    only when every value it saw was the null sentinel.
    """

    def __init__(
        self,
        column_count: int,
        null_sentinel: str = "",
        date_parser: DateParser = parse_datetime,
    ):
        if column_count < 1:
            raise EmptyInputError("csv file has no columns.")

        self.column_count = column_count
        self.null_sentinel = null_sentinel
        self.date_parser = date_parser
        self.types: List[PrimitiveType] = [PrimitiveType.UNKNOWN] * column_count
        self.constraints: List[Nullability] = [Nullability.NULLABLE] * column_count
        self.row_count = 0

    def add_row(self, row: Sequence[str]) -> None:
        if len(row) != self.column_count:
            raise RowArityMismatchError(
                f"Row {self.row_count + 1} has {len(row)} fields, "
                f"expected {self.column_count}."
            )

        for idx, field in enumerate(row):
            field_type = classify_type(field, self.date_parser)
            self.types[idx] = self.types[idx].widen(field_type)

            field_constraint = classify_constraint(field, self.null_sentinel)
            self.constraints[idx] = self.constraints[idx].strengthen(field_constraint)

        self.row_count += 1

    def consume(self, rows: Iterable[Sequence[str]]) -> "ColumnAccumulator":
        for row in rows:
            self.add_row(row)
        return self

    def finalize(self) -> Tuple[List[PrimitiveType], List[Nullability]]:
        """
        Return final per-column types and constraints.

        Columns never observed with a value are declared TEXT.
        """
        if self.row_count == 0:
            raise EmptyInputError("csv file has no records.")

        types = [
            PrimitiveType.TEXT if t is PrimitiveType.UNKNOWN else t
            for t in self.types
        ]
        return types, list(self.constraints)


def accumulate(
    rows: Iterable[Sequence[str]],
    column_count: int,
    null_sentinel: str = "",
    date_parser: DateParser = parse_datetime,
) -> Tuple[List[PrimitiveType], List[Nullability]]:
    """
    Fold every row into per-column state in a single pass.
    """
    accumulator = ColumnAccumulator(column_count, null_sentinel, date_parser)
    return accumulator.consume(rows).finalize()
