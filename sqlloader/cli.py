#!/usr/bin/env python3
"""
sql-loader – run a SQL script file against PostgreSQL, SQLite or MariaDB.

    sql-loader -driver sqlite -dsn ./app.db -file schema.sql

Settings come from, in order of precedence: flags / environment variables,
the selected environment of the YAML config file, built‑in defaults.

The script is split on ``;`` and each statement is executed in autocommit
mode; the first failure stops the run and leaves earlier statements applied.
"""
from __future__ import annotations

import logging
import sys

import click

from sqlloader import __build_date__, __commit__, __version__
from sqlloader.config import load
from sqlloader.errors import SqlLoaderError
from sqlloader.runner import ScriptRunner

VERSION_MESSAGE = f"%(prog)s version %(version)s (commit: {__commit__}, built: {__build_date__})"


def _configure_logging(verbose: bool) -> logging.Handler:
    """Send the package's log records to stderr; returns the handler to detach."""
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter("[%(name)s] %(message)s"))
    pkg_log = logging.getLogger("sqlloader")
    pkg_log.addHandler(handler)
    pkg_log.setLevel(logging.DEBUG if verbose else logging.WARNING)
    return handler


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.option(
    "-driver", "--driver", "driver", envvar="SQL_LOADER_DRIVER",
    help="Database driver (postgres, sqlite, mariadb). [default: postgres]",
)
@click.option("-dsn", "--dsn", "dsn", envvar="SQL_LOADER_DSN", help="Database connection string.")
@click.option("-file", "--file", "script_file", help="SQL script file to execute.")
@click.option("-c", "--config", "config_path", type=click.Path(dir_okay=False), help="env config YAML")
@click.option("-e", "--env", "env_name", help="Environment to use from the config file.")
@click.option("--encoding", default=None, help="Script file encoding. [default: utf-8]")
@click.option(
    "--aware-split", is_flag=True,
    help="Split with sqlparse (respects quotes and comments) instead of on every ';'.",
)
@click.option("--dry-run", is_flag=True, help="Print the statements without connecting.")
@click.option("-v", "--verbose", is_flag=True, help="Trace every statement on stderr.")
@click.version_option(
    __version__, "-version", "--version", prog_name="sql-loader", message=VERSION_MESSAGE
)
def main(driver, dsn, script_file, config_path, env_name, encoding, aware_split, dry_run, verbose):
    """Execute the statements of a SQL script file, in order."""
    handler = _configure_logging(verbose)
    try:
        env = load(config_path, env_name).merged(driver=driver, dsn=dsn, encoding=encoding)
        ScriptRunner(env, script_file).run(dry_run=dry_run, aware=aware_split)
    except SqlLoaderError as exc:
        click.echo(f"Error: {exc.describe()}", err=True)
        sys.exit(1)
    finally:
        logging.getLogger("sqlloader").removeHandler(handler)


if __name__ == "__main__":
    main()
