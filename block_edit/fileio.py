import os
from pathlib import Path

from .errors import EditIOError

# newline="" keeps CRLF/CR line endings intact on both read and write.


def stat_size(path: str | Path) -> int:
    try:
        return os.stat(path).st_size
    except OSError as exc:
        raise EditIOError(f"Cannot stat {path}: {exc.strerror or exc}") from exc


def read_text(path: str | Path) -> str:
    try:
        with open(path, encoding="utf-8", newline="") as fh:
            return fh.read()
    except OSError as exc:
        raise EditIOError(f"Cannot read {path}: {exc.strerror or exc}") from exc
    except UnicodeDecodeError as exc:
        raise EditIOError(f"Cannot read {path}: not valid UTF-8 ({exc.reason} at byte {exc.start})") from exc


def write_text(path: str | Path, text: str, errors: str = "strict") -> None:
    try:
        with open(path, "w", encoding="utf-8", errors=errors, newline="") as fh:
            fh.write(text)
    except OSError as exc:
        raise EditIOError(f"Cannot write {path}: {exc.strerror or exc}") from exc
