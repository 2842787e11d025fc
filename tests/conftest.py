"""Shared pytest fixtures for all tests."""

import logging

import pytest


CITIES_CSV = (
    "city,country,population\n"
    "Paris,France,2100000\n"
    "Lyon,France,513000\n"
)

CITIES_DDL = (
    "create table cities (\n"
    "    city text not null,\n"
    "    country text not null,\n"
    "    population integer not null\n"
    ");\n"
)


@pytest.fixture
def write_csv(tmp_path):
    """Write text to a csv file under tmp_path and return its path."""

    def _write(name: str, text: str):
        path = tmp_path / name
        path.write_text(text, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def cities_csv(write_csv):
    return write_csv("cities.csv", CITIES_CSV)


@pytest.fixture
def csvpsql_events(caplog):
    """Capture structured events from the non-propagating csvpsql logger."""
    logger = logging.getLogger("csvpsql")
    previous = logger.level
    logger.addHandler(caplog.handler)
    logger.setLevel(logging.INFO)
    yield caplog
    logger.removeHandler(caplog.handler)
    logger.setLevel(previous)
