"""Filesystem operations — whole-file reads, atomic writes, removal.

INVARIANT: A reader never observes a partially written file. Writes go
to a temp file in the destination directory, are fsynced, and then
``os.replace``d over the destination. A failure at any step leaves the
previous file untouched.

Invalid paths (for instance an embedded NUL byte) make the OS layer
raise ``ValueError`` rather than ``OSError``; both are classified.
"""

from __future__ import annotations

import contextlib
import os
import stat
import tempfile
from pathlib import Path

from dirjson.domain.errors import IOReadFailed, IOWriteFailed

_FS_FAILURES = (OSError, ValueError)


def _current_umask() -> int:
    mask = os.umask(0)
    os.umask(mask)
    return mask


# Read once; changing the umask per write would race other threads.
_UMASK = _current_umask()


def _target_mode(path: Path) -> int:
    """Mode the written file should carry: the existing one, else 0666 & ~umask."""
    try:
        return stat.S_IMODE(path.stat().st_mode)
    except FileNotFoundError:
        return 0o666 & ~_UMASK


def read_bytes(path: Path) -> bytes:
    """Read the whole file at *path*.

    Raises:
        IOReadFailed: The file is missing, a directory, unreadable, or
            the path is invalid.
    """
    try:
        return path.read_bytes()
    except _FS_FAILURES as exc:
        raise IOReadFailed(path, exc) from exc


def write_bytes_atomic(path: Path, data: bytes) -> None:
    """Replace (or create) *path* with *data* atomically.

    The parent directory must already exist. An existing file keeps its
    permission bits; a new one gets the default ``0666 & ~umask``.

    Raises:
        IOWriteFailed: Creating, writing, syncing, or renaming failed.
    """
    try:
        fd, tmp_name = tempfile.mkstemp(prefix=f".{path.name}.", suffix=".tmp", dir=path.parent)
    except _FS_FAILURES as exc:
        raise IOWriteFailed(path, exc) from exc

    try:
        with os.fdopen(fd, "wb") as handle:
            handle.write(data)
            handle.flush()
            os.fsync(handle.fileno())
        os.chmod(tmp_name, _target_mode(path))
        os.replace(tmp_name, path)
    except _FS_FAILURES as exc:
        with contextlib.suppress(OSError):
            os.unlink(tmp_name)
        raise IOWriteFailed(path, exc) from exc


def remove_file(path: Path, *, missing_ok: bool = False) -> None:
    """Delete the file at *path*.

    Raises:
        IOWriteFailed: The file is missing (unless *missing_ok*), could
            not be removed, or the path is invalid.
    """
    try:
        path.unlink(missing_ok=missing_ok)
    except _FS_FAILURES as exc:
        raise IOWriteFailed(path, exc) from exc
