from typing import Sequence

from csvpsql.canonical.field import Column
from csvpsql.canonical.table import Table
from csvpsql.canonical.types import Nullability, PrimitiveType
from csvpsql.utils.exceptions import EmptyInputError, SchemaAssemblyError


def assemble(
    table_name: str,
    names: Sequence[str],
    types: Sequence[PrimitiveType],
    constraints: Sequence[Nullability],
) -> Table:
    """
    Zip names, types and constraints positionally into a Table.
    """
    if not (len(names) == len(types) == len(constraints)):
        raise SchemaAssemblyError(
            f"Cannot assemble columns from {len(names)} names, "
            f"{len(types)} types and {len(constraints)} constraints."
        )
    if not names:
        raise EmptyInputError("csv file has no columns.")

    columns = tuple(
        Column(name=name, data_type=data_type, constraint=constraint)
        for name, data_type, constraint in zip(names, types, constraints)
    )
    return Table(name=table_name, columns=columns)
