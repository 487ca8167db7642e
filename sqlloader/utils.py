"""
Statement splitting and sequential execution.

The default splitter is purely lexical: every ``;`` ends a statement, even
one inside a string literal, a comment or a procedural body.  Scripts that
need those should be run with ``aware=True``, which delegates to sqlparse.
"""
from __future__ import annotations

import logging

import sqlparse

from sqlloader.driver import Database
from sqlloader.errors import StatementExecutionError

log = logging.getLogger(__name__)


def split_sql(sql: str, *, aware: bool = False) -> list[str]:
    """Split *sql* into trimmed, non‑empty statements in source order."""
    if not sql.strip():
        return []
    if aware:
        return [s.strip() for s in sqlparse.split(sql) if s.strip()]
    return [s.strip() for s in sql.split(";") if s.strip()]


def execute_script(db: Database, sql: str, *, aware: bool = False) -> int:
    """
    Execute every statement of *sql* on *db*, one after the other.

    Stops at the first failing statement; statements before it stay applied.
    Returns the number of statements executed.
    """
    statements = split_sql(sql, aware=aware)
    if not statements:
        return 0

    try:
        cur = db.cursor()
    except db.errors as exc:
        raise StatementExecutionError(1, statements[0], exc) from exc

    try:
        for position, stmt in enumerate(statements, start=1):
            log.debug("statement #%d: %s", position, stmt)
            try:
                cur.execute(stmt)
                if cur.description is not None:
                    # drain result rows; mysql‑connector refuses the next
                    # execute while a result set is unread
                    cur.fetchall()
            except db.errors as exc:
                raise StatementExecutionError(position, stmt, exc) from exc
    finally:
        try:
            cur.close()
        except db.errors as exc:
            # every statement has already run or failed by now
            log.warning("failed to close cursor: %s", exc)

    return len(statements)
