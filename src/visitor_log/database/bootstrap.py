from __future__ import annotations

import sqlite3
from contextlib import closing
from pathlib import Path

SCHEMA_SQL = """
CREATE TABLE IF NOT EXISTS students (
    student_number TEXT PRIMARY KEY,
    full_name TEXT,
    course TEXT
);

CREATE TABLE IF NOT EXISTS visitor_log (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    student_number TEXT,
    visit_time TEXT
);
"""


def _ensure_parent_dir(db_path: str | Path) -> None:
    if str(db_path) == ":memory:":
        return
    Path(db_path).expanduser().resolve().parent.mkdir(parents=True, exist_ok=True)


def apply_schema(db_path: str | Path) -> None:
    """Create both tables when absent. Safe to run on every startup."""
    _ensure_parent_dir(db_path)
    with closing(sqlite3.connect(str(db_path))) as conn:
        conn.executescript(SCHEMA_SQL)
        conn.commit()


def list_tables(db_path: str | Path) -> list[str]:
    with closing(sqlite3.connect(str(db_path))) as conn:
        cur = conn.execute(
            "SELECT name FROM sqlite_master WHERE type='table' AND name NOT LIKE 'sqlite_%' ORDER BY name"
        )
        return [row[0] for row in cur.fetchall()]
