from __future__ import annotations

import pathlib

from sqlloader.errors import EmptyPathError, ReadError


def load_script(path: str | pathlib.Path | None, encoding: str = "utf-8") -> str:
    """
    Return the full text of the script at *path*, exactly as stored.

    The file is read in binary mode so line endings survive untouched.
    """
    if not path:
        raise EmptyPathError("script path cannot be empty")

    try:
        raw = pathlib.Path(path).read_bytes()
    except OSError as exc:
        raise ReadError(
            f"failed to read script file {str(path)!r}: {exc.strerror or exc}", str(path)
        ) from exc

    try:
        return raw.decode(encoding)
    except UnicodeDecodeError as exc:
        raise ReadError(f"script file {str(path)!r} is not valid {encoding}: {exc}", str(path)) from exc
    except (LookupError, TypeError) as exc:
        raise ReadError(f"unknown encoding {encoding!r}", str(path)) from exc
