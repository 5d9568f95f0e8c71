"""Filesystem helpers for emitting human-readable artifacts."""

from __future__ import annotations

import json
import logging
import os
import tempfile
from pathlib import Path

LOG = logging.getLogger(__name__)


def _as_fs_path(path: str | os.PathLike[str]) -> str:
    return os.fspath(path)


def _ensure_directory(path: str) -> str:
    directory = os.path.dirname(path)
    if not directory:
        directory = "."
    os.makedirs(directory, exist_ok=True)
    return directory


def _atomic_write_text(
    path: str | os.PathLike[str],
    writer,
    *,
    encoding: str = "utf-8",
) -> None:
    target = _as_fs_path(path)
    directory = _ensure_directory(target)
    fd, temp_path = tempfile.mkstemp(prefix=".tmp-", suffix=".partial", dir=directory)
    try:
        with os.fdopen(fd, "w", encoding=encoding) as handle:
            writer(handle)
            handle.flush()
            os.fsync(handle.fileno())
        os.replace(temp_path, target)
    except Exception:
        try:
            os.unlink(temp_path)
        except FileNotFoundError:
            pass
        raise

__all__ = [
    "read_text",
    "write_json",
]


def read_text(path: str | os.PathLike[str], *, encoding: str = "utf-8") -> str:
    """Read ``path`` as text, replacing undecodable bytes."""

    target = Path(path)
    content = target.read_text(encoding=encoding, errors="replace")
    LOG.debug("read %s (%d chars)", target, len(content))
    return content


def write_json(
    path: str | os.PathLike[str],
    obj,
    *,
    encoding: str = "utf-8",
    sort_keys: bool = False,
) -> None:
    """Serialise ``obj`` as pretty JSON at ``path``."""

    def _writer(handle) -> None:
        json.dump(obj, handle, ensure_ascii=False, indent=2, sort_keys=sort_keys)

    _atomic_write_text(path, _writer, encoding=encoding)
