"""Test fixtures and fakes."""
import sqlite3

import pytest

from sqlloader.driver import Database, Engine


class FakeCursor:
    """DB‑API cursor that records statements and fails on request."""

    def __init__(self, conn):
        self.conn = conn
        self.description = None

    def execute(self, stmt):
        self.conn.executed.append(stmt)
        if stmt in self.conn.fail_on:
            raise sqlite3.OperationalError(f"boom: {stmt}")

    def fetchall(self):
        return []

    def close(self):
        self.conn.cursor_closes += 1
        if self.conn.cursor_close_error is not None:
            raise self.conn.cursor_close_error


class FakeConnection:
    def __init__(self, fail_on=(), close_error=None, cursor_error=None, cursor_close_error=None):
        self.executed = []
        self.fail_on = set(fail_on)
        self.close_error = close_error
        self.cursor_error = cursor_error
        self.cursor_close_error = cursor_close_error
        self.close_calls = 0
        self.cursor_closes = 0

    def cursor(self):
        if self.cursor_error is not None:
            raise self.cursor_error
        return FakeCursor(self)

    def close(self):
        self.close_calls += 1
        if self.close_error is not None:
            raise self.close_error


@pytest.fixture
def fake_db():
    """Factory for a :class:`Database` backed by a recording fake."""

    def make(**kwargs):
        conn = FakeConnection(**kwargs)
        return Database(Engine.SQLITE, conn), conn

    return make


@pytest.fixture
def sqlite_path(tmp_path):
    return str(tmp_path / "test.db")


@pytest.fixture
def write_script(tmp_path):
    """Write *text* to a .sql file under tmp_path and return its path."""

    def write(text, name="script.sql"):
        path = tmp_path / name
        path.write_bytes(text.encode("utf-8"))
        return str(path)

    return write


def fetch_rows(path, sql):
    with sqlite3.connect(path) as conn:
        return conn.execute(sql).fetchall()
