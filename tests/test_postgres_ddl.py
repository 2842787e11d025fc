import pytest

from csvpsql.canonical.types import Nullability, PrimitiveType
from csvpsql.outputs.postgres_ddl import PostgresDDLGenerator, render
from csvpsql.pipeline.assembler import assemble
from csvpsql.utils.exceptions import EmptyInputError, SchemaAssemblyError

from conftest import CITIES_DDL

T = PrimitiveType
N = Nullability


@pytest.fixture
def cities_table():
    return assemble(
        "cities",
        ["city", "country", "population"],
        [T.TEXT, T.TEXT, T.INTEGER],
        [N.NOT_NULL, N.NOT_NULL, N.NOT_NULL],
    )


def test_assemble_zips_positionally(cities_table):
    assert [c.name for c in cities_table.columns] == ["city", "country", "population"]
    assert cities_table.columns[2].data_type is T.INTEGER
    assert cities_table.columns[2].to_dict() == {
        "name": "population", "type": "integer", "nullable": False,
    }


def test_assemble_length_mismatch():
    with pytest.raises(SchemaAssemblyError):
        assemble("t", ["a", "b"], [T.TEXT], [N.NOT_NULL, N.NOT_NULL])


def test_assemble_no_columns():
    with pytest.raises(EmptyInputError):
        assemble("t", [], [], [])


def test_render_cities(cities_table):
    assert render(cities_table) == CITIES_DDL


def test_render_nullable_has_no_trailing_space():
    table = assemble(
        "t",
        ["id", "note", "price", "seen"],
        [T.INTEGER, T.TEXT, T.FLOATING_POINT, T.TIMESTAMP],
        [N.NOT_NULL, N.NULLABLE, N.NOT_NULL, N.NULLABLE],
    )
    assert render(table) == (
        "create table t (\n"
        "    id integer not null,\n"
        "    note text,\n"
        "    price numeric not null,\n"
        "    seen timestamp\n"
        ");\n"
    )


def test_render_single_column():
    table = assemble("t", ["a"], [T.BOOLEAN], [N.NOT_NULL])
    assert render(table) == "create table t (\n    a boolean not null\n);\n"


def test_render_is_idempotent(cities_table):
    generator = PostgresDDLGenerator(cities_table)
    assert generator.generate() == generator.generate()
    assert render(cities_table) == render(cities_table)
