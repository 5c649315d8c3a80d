import os
import sqlite3
from contextlib import contextmanager
from datetime import datetime, timezone
from typing import Optional

def _connect(db_path: str) -> sqlite3.Connection:
    conn = sqlite3.connect(db_path)
    conn.row_factory = sqlite3.Row
    return conn

def init_db(db_path: str) -> None:
    os.makedirs(os.path.dirname(db_path), exist_ok=True) if os.path.dirname(db_path) else None
    with get_conn(db_path) as conn:
        conn.execute(
            """
            CREATE TABLE IF NOT EXISTS oracle_state (
                id INTEGER PRIMARY KEY CHECK (id = 1),
                starting_time INTEGER NOT NULL,
                created_at TEXT NOT NULL
            )
            """
        )
        conn.commit()

@contextmanager
def get_conn(db_path: str):
    conn = _connect(db_path)
    try:
        yield conn
    finally:
        conn.close()

def load_starting_time(db_path: str) -> Optional[int]:
    with get_conn(db_path) as conn:
        row = conn.execute("SELECT starting_time FROM oracle_state WHERE id=1").fetchone()
    if row is None:
        return None
    return int(row["starting_time"])

def save_starting_time(db_path: str, starting_time: int) -> None:
    # first write wins; the start instant is never overwritten
    with get_conn(db_path) as conn:
        conn.execute(
            "INSERT OR IGNORE INTO oracle_state (id, starting_time, created_at) VALUES (1, ?, ?)",
            (int(starting_time), datetime.now(timezone.utc).isoformat()),
        )
        conn.commit()
