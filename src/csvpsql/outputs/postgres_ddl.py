from csvpsql.canonical.field import Column
from csvpsql.canonical.table import Table

INDENT = "    "


class PostgresDDLGenerator:
    """
    Generates a PostgreSQL CREATE TABLE statement.

    Pure formatting: every decision was made upstream.
    Output is deterministic for a given Table.
    """

    def __init__(self, table: Table):
        self.table = table

    def _render_column(self, column: Column) -> str:
        return f"{column.name} {column.data_type.tag} {column.constraint.keyword}".rstrip()

    def generate(self) -> str:
        lines = [f"create table {self.table.name} ("]
        column_sql = [self._render_column(c) for c in self.table.columns]
        for col in column_sql[:-1]:
            lines.append(f"{INDENT}{col},")
        lines.append(f"{INDENT}{column_sql[-1]}")
        lines.append(");")
        return "\n".join(lines) + "\n"


def render(table: Table) -> str:
    return PostgresDDLGenerator(table).generate()
