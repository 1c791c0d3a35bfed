"""Tests for the SQLite record store."""

import asyncio
import json
import sqlite3

import pytest

from minimarket.models import Record
from minimarket.persistence import (
    bootstrap_schema,
    fetch_records,
    load_records,
    read_seed_file,
    save_records,
    seed_records,
)


def test_round_trip_preserves_order_and_shapes(tmp_path, sample_records):
    db_path = tmp_path / "store.db"

    assert save_records(sample_records, db_path) == 12
    loaded = load_records(db_path)

    assert [record.id for record in loaded] == [record.id for record in sample_records]
    assert loaded[1].products == {"p1": {"name": "Pan", "quantity": 1}}
    assert loaded[0].products == [{"name": "Leche", "quantity": 1}, {"name": "Huevos", "quantity": 12}]
    assert loaded[1].date == {"seconds": 1_700_086_400}
    assert loaded[0].date == "2024-05-01"
    assert loaded[10].name is None
    assert loaded[2].total == 4500


def test_save_appends_after_existing_rows(tmp_path):
    db_path = tmp_path / "store.db"
    save_records([Record(id="b", name="Beto")], db_path)
    save_records([Record(id="a", name="Ana")], db_path)

    assert [record.id for record in load_records(db_path)] == ["b", "a"]


def test_bootstrap_is_idempotent(tmp_path):
    db_path = tmp_path / "store.db"
    bootstrap_schema(db_path)
    bootstrap_schema(db_path)

    assert load_records(db_path) == []


def test_fetch_records_runs_async(tmp_path, sample_records):
    db_path = tmp_path / "store.db"
    save_records(sample_records[:3], db_path)

    loaded = asyncio.run(fetch_records(db_path))

    assert [record.name for record in loaded] == ["Ana Pérez", "Bruno Díaz", "Carla Gómez"]


def test_fetch_without_schema_raises(tmp_path):
    with pytest.raises(sqlite3.OperationalError):
        asyncio.run(fetch_records(tmp_path / "empty.db"))


def test_seed_file_keyed_by_id(tmp_path):
    seed = tmp_path / "seed.json"
    seed.write_text(
        json.dumps(
            {
                "p1": {"name": "Ana", "status": "pendiente", "total": 1500, "date": {"seconds": 1_700_000_000}},
                "p2": {"name": "Bruno", "products": {"x": {"name": "Pan", "quantity": 2}}},
            }
        ),
        encoding="utf-8",
    )

    records = read_seed_file(seed)

    assert [record.id for record in records] == ["p1", "p2"]
    assert records[0].date == {"seconds": 1_700_000_000}
    assert records[1].total is None


def test_seed_file_as_list(tmp_path):
    seed = tmp_path / "seed.json"
    seed.write_text(json.dumps([{"id": 7, "name": "Carla"}]), encoding="utf-8")

    assert read_seed_file(seed) == [Record(id="7", name="Carla")]


def test_seed_file_rejects_scalar(tmp_path):
    seed = tmp_path / "seed.json"
    seed.write_text("42", encoding="utf-8")

    with pytest.raises(ValueError):
        read_seed_file(seed)


def test_seed_records_only_fills_empty_store(tmp_path):
    db_path = tmp_path / "store.db"
    seed = tmp_path / "seed.json"
    seed.write_text(json.dumps({"a": {"name": "Ana"}, "b": {"name": "Beto"}}), encoding="utf-8")

    assert seed_records(seed, db_path) == 2
    assert seed_records(seed, db_path) == 0
    assert [record.id for record in load_records(db_path)] == ["a", "b"]
