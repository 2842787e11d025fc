import io

import pytest

from csvpsql.cli import main

from conftest import CITIES_DDL


def test_prints_statement(cities_csv, capsys):
    assert main([str(cities_csv)]) == 0
    assert capsys.readouterr().out == CITIES_DDL


def test_table_name_option(cities_csv, capsys):
    main([str(cities_csv), "-t", "towns"])
    assert capsys.readouterr().out.startswith("create table towns (\n")


def test_no_header_short_flag(write_csv, capsys):
    path = write_csv("pairs.csv", "1,x\n2,y\n")
    main([str(path), "-h"])
    assert capsys.readouterr().out == (
        "create table pairs (\n"
        "    a integer not null,\n"
        "    b text not null\n"
        ");\n"
    )


def test_columns_and_delimiter(write_csv, capsys):
    path = write_csv("semi.csv", "a;b\n1;2\n")
    main([str(path), "-d", ";", "--columns", "left,right"])
    out = capsys.readouterr().out
    assert "    left integer not null,\n" in out
    assert "    right integer not null\n" in out


def test_null_as(write_csv, capsys):
    path = write_csv("n.csv", "id,v\n1,NA\n2,NA\n")
    main([str(path), "-n", "NA"])
    assert "    v text\n" in capsys.readouterr().out


def test_output_file(cities_csv, tmp_path, capsys):
    target = tmp_path / "out" / "cities.sql"
    main([str(cities_csv), "-o", str(target)])
    assert target.read_text(encoding="utf-8") == CITIES_DDL
    assert capsys.readouterr().out == ""


def test_stdin(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.TextIOWrapper(io.BytesIO(b"a,b\n1,2\n")))
    main(["-t", "piped"])
    assert capsys.readouterr().out.startswith("create table piped (\n")


def test_stdin_requires_table_name(capsys):
    with pytest.raises(SystemExit) as exc:
        main([])
    assert exc.value.code == 2
    assert "--table-name" in capsys.readouterr().err


def test_failure_exits_with_message(write_csv, capsys):
    path = write_csv("bad.csv", "a,b\n1,2\n3\n")
    with pytest.raises(SystemExit) as exc:
        main([str(path)])
    assert exc.value.code == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "[FAILED]" in captured.err


def test_column_count_mismatch(cities_csv, capsys):
    with pytest.raises(SystemExit) as exc:
        main([str(cities_csv), "--columns", "a,b"])
    assert exc.value.code == 1
    assert "3 columns" in capsys.readouterr().err


def test_config_file(cities_csv, tmp_path, capsys):
    config = tmp_path / "run.yaml"
    config.write_text(
        "source:\n"
        f"  file_path: {cities_csv}\n"
        "table_name: cities\n",
        encoding="utf-8",
    )
    main(["--config", str(config)])
    assert capsys.readouterr().out == CITIES_DDL
