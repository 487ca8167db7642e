from __future__ import annotations

import pathlib
import time

import click

from sqlloader.config import Environment
from sqlloader.driver import connection
from sqlloader.errors import ConfigurationError
from sqlloader.loader import load_script
from sqlloader.utils import execute_script, split_sql


class ScriptRunner:
    """
    Runs one script file against the database described by *env*:
    load → connect → execute → close, in that order, on a single thread.
    """

    def __init__(self, env: Environment, script_path: str | pathlib.Path | None) -> None:
        self.env: Environment = env
        self.script_path = script_path

    def _check(self, dry_run: bool) -> None:
        if not self.env.dsn and not dry_run:
            raise ConfigurationError("DSN is required (use -dsn flag)")
        if not self.script_path:
            raise ConfigurationError("script file is required (use -file flag)")

    def run(self, *, dry_run: bool = False, aware: bool = False) -> int:
        """Execute the script and return the number of statements run."""
        self._check(dry_run)
        script = load_script(self.script_path, self.env.encoding)

        if dry_run:
            statements = split_sql(script, aware=aware)
            for stmt in statements:
                click.echo(stmt if stmt.endswith(";") else f"{stmt};")
            click.echo(f"\n-- DRY‑RUN complete ({len(statements)} statements, nothing executed)")
            return len(statements)

        click.echo(f"Loading SQL script from {self.script_path} into {self.env.driver} database")
        with connection(self.env.driver, self.env.dsn) as db:
            start = time.perf_counter()
            count = execute_script(db, script, aware=aware)
            duration_ms = int((time.perf_counter() - start) * 1000)

        click.echo(f"✅  Script executed successfully ({count} statements in {duration_ms} ms)")
        return count
