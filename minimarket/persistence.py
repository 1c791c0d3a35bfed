"""SQLite record store and the async fetch collaborator."""

from __future__ import annotations

import asyncio
import json
import logging
import sqlite3
from pathlib import Path
from typing import Any, Iterable

from minimarket.config import DB_PATH
from minimarket.models import Record

logger = logging.getLogger(__name__)


def _connect(db_path: str | Path) -> sqlite3.Connection:
    db_file = Path(db_path)
    db_file.parent.mkdir(parents=True, exist_ok=True)
    return sqlite3.connect(db_file)


def _dump(value: Any) -> str | None:
    if value is None:
        return None
    return json.dumps(value, ensure_ascii=False)


def _load(raw: str | None) -> Any:
    if raw is None:
        return None
    return json.loads(raw)


def bootstrap_schema(db_path: str | Path = DB_PATH) -> None:
    """Create the record table if it does not already exist."""
    with _connect(db_path) as conn:
        conn.executescript(
            """
            CREATE TABLE IF NOT EXISTS pedidos (
                id TEXT PRIMARY KEY,
                position INTEGER NOT NULL,
                name TEXT,
                date_json TEXT,
                status TEXT,
                address TEXT,
                total REAL,
                products_json TEXT
            );

            CREATE INDEX IF NOT EXISTS idx_pedidos_position
                ON pedidos(position);
            """
        )


def save_records(records: Iterable[Record], db_path: str | Path = DB_PATH) -> int:
    """Insert or replace records, appending them after existing rows. Returns the count."""
    bootstrap_schema(db_path)
    saved = 0
    with _connect(db_path) as conn:
        with conn:
            (next_position,) = conn.execute("SELECT COALESCE(MAX(position) + 1, 0) FROM pedidos").fetchone()
            for record in records:
                conn.execute(
                    """
                    INSERT OR REPLACE INTO pedidos
                        (id, position, name, date_json, status, address, total, products_json)
                    VALUES (?, ?, ?, ?, ?, ?, ?, ?)
                    """,
                    (
                        record.id,
                        next_position + saved,
                        record.name,
                        _dump(record.date),
                        record.status,
                        record.address,
                        record.total,
                        _dump(record.products),
                    ),
                )
                saved += 1
    return saved


def load_records(db_path: str | Path = DB_PATH) -> list[Record]:
    """Read every record in insertion order."""
    with _connect(db_path) as conn:
        rows = conn.execute(
            """
            SELECT id, name, date_json, status, address, total, products_json
            FROM pedidos
            ORDER BY position
            """
        ).fetchall()

    return [
        Record(
            id=row[0],
            name=row[1],
            date=_load(row[2]),
            status=row[3],
            address=row[4],
            total=row[5],
            products=_load(row[6]),
        )
        for row in rows
    ]


async def fetch_records(db_path: str | Path = DB_PATH) -> list[Record]:
    """Load records off the event loop."""
    return await asyncio.to_thread(load_records, db_path)


def read_seed_file(path: str | Path) -> list[Record]:
    """Parse a JSON seed: an object keyed by record id, or a list of objects with an ``id``."""
    payload = json.loads(Path(path).read_text(encoding="utf-8"))
    if isinstance(payload, dict):
        return [Record.from_mapping(record_id, data) for record_id, data in payload.items()]
    if isinstance(payload, list):
        return [Record.from_mapping(data["id"], data) for data in payload]
    raise ValueError(f"seed file {path} must hold a JSON object or list")


def seed_records(path: str | Path, db_path: str | Path = DB_PATH) -> int:
    """Load a seed file into an empty store. Returns how many records were written."""
    bootstrap_schema(db_path)
    with _connect(db_path) as conn:
        (existing,) = conn.execute("SELECT COUNT(*) FROM pedidos").fetchone()
    if existing:
        logger.info("store %s already holds %d records; seed skipped", db_path, existing)
        return 0
    saved = save_records(read_seed_file(path), db_path)
    logger.info("seeded %d records from %s", saved, path)
    return saved
