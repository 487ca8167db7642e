from __future__ import annotations

import os
import pathlib
import typing as t

import yaml

from sqlloader.errors import ConfigurationError

DEFAULT_PATH = pathlib.Path("sqlloader.config.yml")
DEFAULT_DRIVER = "postgres"
DEFAULT_ENCODING = "utf-8"


def _expand(value: t.Any, key: str) -> str:
    """Resolve the ``${ENV_VAR}`` form; anything else is returned as text."""
    raw = "" if value is None else str(value)
    if not (raw.startswith("${") and raw.endswith("}")):
        return raw
    var = raw[2:-1]
    if var not in os.environ:
        raise ConfigurationError(f"{key}: environment variable {var} is not set")
    return os.environ[var]


class Environment:
    """
    A thin value‑object holding what is needed to reach one database.
    Nothing here talks to the database.
    """

    def __init__(self, name: str, d: dict[str, t.Any]) -> None:
        self.name: str = name
        self.driver: str = _expand(d.get("driver"), "driver") or DEFAULT_DRIVER
        self.dsn: str = _expand(d.get("dsn"), "dsn")
        self.encoding: str = _expand(d.get("encoding"), "encoding") or DEFAULT_ENCODING

    def merged(
        self,
        *,
        driver: str | None = None,
        dsn: str | None = None,
        encoding: str | None = None,
    ) -> "Environment":
        """Return a copy where every non‑None argument wins."""
        other = Environment(self.name, {})
        other.driver = driver if driver is not None else self.driver
        other.dsn = dsn if dsn is not None else self.dsn
        other.encoding = encoding if encoding is not None else self.encoding
        return other

    def __repr__(self) -> str:
        return f"Environment({self.name!r}, driver={self.driver!r})"


def load(path: pathlib.Path | str | None = None, env: str | None = None) -> Environment:
    """
    Parse *path* (or the default YAML, when present) and return an
    :class:`Environment`.

    Without any config file an empty ``default`` environment is returned so
    that CLI flags alone are enough.
    """
    cfg_file = pathlib.Path(path) if path else DEFAULT_PATH
    if not cfg_file.exists():
        if path or env:
            raise ConfigurationError(f"Config file {cfg_file} not found.")
        return Environment("default", {})

    try:
        with cfg_file.open(encoding="utf-8") as fh:
            raw = yaml.safe_load(fh) or {}
    except yaml.YAMLError as exc:
        raise ConfigurationError(f"Config file {cfg_file} is not valid YAML: {exc}") from exc

    if not isinstance(raw, dict):
        raise ConfigurationError(f"Config file {cfg_file} must contain a mapping")

    env_name = env or raw.get("default_env")
    if not env_name:
        raise ConfigurationError("No environment specified and no default_env in config")

    environments = raw.get("environments")
    if not isinstance(environments, dict) or env_name not in environments:
        raise ConfigurationError(f"Environment {env_name!r} not found in config")

    entry = environments[env_name] or {}
    if not isinstance(entry, dict):
        raise ConfigurationError(
            f"Environment {env_name!r} must be a mapping with driver/dsn keys, got {entry!r}"
        )
    return Environment(env_name, entry)
