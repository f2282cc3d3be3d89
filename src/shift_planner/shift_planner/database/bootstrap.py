from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import Iterable

from ..attendance.mysql_clock_event_repository import MySQLClockEventRepository
from ..shifts.mysql_shift_repository import MySQLShiftRepository
from ..shifts.service import ShiftStore
from .connection import DatabaseConnection
from .fixtures import FixtureData

logger = logging.getLogger(__name__)


def _strip_create_db_and_use(sql: str) -> str:
    # Keep schema.sql compatible regardless of DB name.
    sql = re.sub(r"(?im)^\s*CREATE\s+DATABASE\b.*?;\s*$", "", sql)
    sql = re.sub(r"(?im)^\s*USE\b.*?;\s*$", "", sql)
    return sql


def _iter_sql_statements(sql: str) -> Iterable[str]:
    # Minimal SQL splitter for schema files (handles ';' inside quotes).
    buf: list[str] = []
    in_single = False
    in_double = False
    escape = False

    for ch in sql:
        if escape:
            buf.append(ch)
            escape = False
            continue

        if ch == "\\":
            buf.append(ch)
            escape = True
            continue

        if ch == "'" and not in_double:
            in_single = not in_single
        elif ch == '"' and not in_single:
            in_double = not in_double
        elif ch == ";" and not in_single and not in_double:
            stmt = "".join(buf).strip()
            buf.clear()
            if stmt:
                yield stmt
            continue

        buf.append(ch)

    tail = "".join(buf).strip()
    if tail:
        yield tail


def ensure_database_exists(conn_factory: DatabaseConnection) -> None:
    conn = conn_factory.connect(with_database=False)
    try:
        cur = conn.cursor()
        cur.execute(
            f"CREATE DATABASE IF NOT EXISTS `{conn_factory.config.database}` "
            "CHARACTER SET utf8mb4 COLLATE utf8mb4_unicode_ci;"
        )
        conn.commit()
    finally:
        conn.close()


def apply_schema(conn_factory: DatabaseConnection, *, schema_path: str | Path) -> None:
    ensure_database_exists(conn_factory)
    sql = _strip_create_db_and_use(Path(schema_path).read_text(encoding="utf-8"))

    conn = conn_factory.connect()
    try:
        cur = conn.cursor()
        for stmt in _iter_sql_statements(sql):
            cur.execute(stmt)
        conn.commit()
    finally:
        conn.close()
    logger.info("Applied schema %s", schema_path)


def seed_from_fixtures(conn_factory: DatabaseConnection, data: FixtureData) -> None:
    """Insert fixture shifts and clock events that are not in the database yet.

    Shifts go through the store, so one overlapping an existing shift of the same
    employee raises ``ConflictError``.
    """

    added = ShiftStore(MySQLShiftRepository(conn_factory)).seed(data.shifts, skip_existing=True)

    events = MySQLClockEventRepository(conn_factory)
    existing = {(e.employee_id, e.work_date) for e in events.list_all()}
    for event in data.clock_events:
        if (event.employee_id, event.work_date) not in existing:
            events.add(event)
    logger.info("Seeded %d shifts, %d clock events", added, len(data.clock_events))


def list_tables(conn_factory: DatabaseConnection) -> list[str]:
    conn = conn_factory.connect()
    try:
        cur = conn.cursor()
        cur.execute("SHOW TABLES")
        return [row[0] for row in cur.fetchall()]
    finally:
        conn.close()
