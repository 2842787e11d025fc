from dataclasses import dataclass

from csvpsql.canonical.types import Nullability, PrimitiveType


@dataclass(frozen=True)
class Column:
    """
    Canonical representation of an inferred column.
    """
    name: str
    data_type: PrimitiveType
    constraint: Nullability

    @property
    def nullable(self) -> bool:
        return self.constraint is Nullability.NULLABLE

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "type": self.data_type.tag,
            "nullable": self.nullable,
        }
