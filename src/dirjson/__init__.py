"""dirjson — JSON files in well-known per-user directories.

Module-level functions build a fresh :class:`FileCoordinator` with
default settings on every call; construct one yourself to pass custom
:class:`DirJsonSettings`.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, TypeVar

from dirjson.config.logging import configure_logging
from dirjson.config.settings import DirJsonSettings
from dirjson.domain.directories import Directory
from dirjson.domain.errors import (
    CodecError,
    CodingError,
    DirectoryResolutionFailed,
    InvalidFilename,
    IOReadFailed,
    IOWriteFailed,
)
from dirjson.domain.result import Result
from dirjson.services.coding import FileCoordinator, Location
from dirjson.services.mixins import SelfCoding

__version__ = "0.1.0"

__all__ = [
    "CodecError",
    "CodingError",
    "Directory",
    "DirJsonSettings",
    "DirectoryResolutionFailed",
    "FileCoordinator",
    "IOReadFailed",
    "IOWriteFailed",
    "InvalidFilename",
    "Result",
    "SelfCoding",
    "configure_logging",
    "decode",
    "decode_file",
    "decode_file_or_none",
    "decode_or_none",
    "encode",
    "encode_file",
    "remove",
    "remove_file",
    "resolve_directory",
    "resolve_path",
]

T = TypeVar("T")


def resolve_directory(directory: Directory | str) -> Result[Path]:
    return FileCoordinator().resolve_directory(directory)


def resolve_path(filename: str, directory: Directory | str = Directory.DOCUMENTS) -> Result[Path]:
    return FileCoordinator().resolve_path(filename, directory)


def decode(target: type[T], location: Location) -> Result[T]:
    return FileCoordinator().decode(target, location)


def decode_or_none(target: type[T], location: Location) -> T | None:
    return FileCoordinator().decode_or_none(target, location)


def decode_file(
    target: type[T],
    filename: str,
    directory: Directory | str = Directory.DOCUMENTS,
) -> Result[T]:
    return FileCoordinator().decode_file(target, filename, directory)


def decode_file_or_none(
    target: type[T],
    filename: str,
    directory: Directory | str = Directory.DOCUMENTS,
) -> T | None:
    return FileCoordinator().decode_file_or_none(target, filename, directory)


def encode(value: Any, location: Location, *, as_type: Any = None) -> CodingError | None:
    return FileCoordinator().encode(value, location, as_type=as_type)


def encode_file(
    value: Any,
    filename: str,
    directory: Directory | str = Directory.DOCUMENTS,
    *,
    as_type: Any = None,
) -> CodingError | None:
    return FileCoordinator().encode_file(value, filename, directory, as_type=as_type)


def remove(location: Location, *, missing_ok: bool = False) -> CodingError | None:
    return FileCoordinator().remove(location, missing_ok=missing_ok)


def remove_file(
    filename: str,
    directory: Directory | str = Directory.DOCUMENTS,
    *,
    missing_ok: bool = False,
) -> CodingError | None:
    return FileCoordinator().remove_file(filename, directory, missing_ok=missing_ok)
