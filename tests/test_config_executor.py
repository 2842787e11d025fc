import pytest

from csvpsql.execution.config_executor import ConfigExecutor
from csvpsql.utils.exceptions import ConfigurationError

from conftest import CITIES_DDL


def _write_config(tmp_path, text):
    path = tmp_path / "run.yaml"
    path.write_text(text, encoding="utf-8")
    return str(path)


def test_build_payload_defaults(tmp_path, cities_csv):
    executor = ConfigExecutor(_write_config(tmp_path, f"source:\n  file_path: {cities_csv}\n"))
    assert executor.build_payload() == {
        "file_path": str(cities_csv),
        "delimiter": ",",
        "no_header": False,
        "null_as": "",
        "table_name": None,
        "columns": None,
    }
    assert executor.output_file is None


def test_execute_writes_output(tmp_path, cities_csv):
    target = tmp_path / "sql" / "cities.sql"
    config = _write_config(
        tmp_path,
        "source:\n"
        f"  file_path: {cities_csv}\n"
        "output:\n"
        f"  file: {target}\n",
    )
    result = ConfigExecutor(config).execute()
    assert result["ddl"] == CITIES_DDL
    assert target.read_text(encoding="utf-8") == CITIES_DDL


def test_columns_list_and_options(tmp_path, write_csv):
    data = write_csv("raw.csv", "1|NULL\n2|NULL\n")
    config = _write_config(
        tmp_path,
        "source:\n"
        f"  file_path: {data}\n"
        "  delimiter: '|'\n"
        "  no_header: true\n"
        "  null_as: 'NULL'\n"
        "table_name: raw_things\n"
        "columns: [id, missing]\n",
    )
    result = ConfigExecutor(config).execute()
    assert result["ddl"] == (
        "create table raw_things (\n"
        "    id integer not null,\n"
        "    missing text\n"
        ");\n"
    )


def test_missing_config(tmp_path):
    with pytest.raises(ConfigurationError):
        ConfigExecutor(str(tmp_path / "nope.yaml"))


def test_invalid_yaml(tmp_path):
    with pytest.raises(ConfigurationError):
        ConfigExecutor(_write_config(tmp_path, "source: [unclosed\n"))


def test_non_mapping_root(tmp_path):
    with pytest.raises(ConfigurationError):
        ConfigExecutor(_write_config(tmp_path, "- a\n- b\n"))


def test_wrong_option_type(tmp_path, cities_csv):
    config = _write_config(
        tmp_path,
        "source:\n"
        f"  file_path: {cities_csv}\n"
        "  no_header: 'no'\n",
    )
    with pytest.raises(ConfigurationError):
        ConfigExecutor(config).execute()
