"""FileCoordinator — resolve, encode/decode and read/write in one place.

INVARIANT: Public methods never raise a :class:`CodingError`. Failures
come back as ``Result.failure(...)`` or as the returned error, and every
failure is logged before it is handed back, so the ``*_or_none``
projections are never silent.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any, TypeVar

import structlog

from dirjson.config.settings import DirJsonSettings
from dirjson.domain.directories import Directory
from dirjson.domain.errors import CodecError, CodingError
from dirjson.domain.result import Result
from dirjson.infrastructure import codec, filesystem
from dirjson.infrastructure.directories import DirectoryResolver

T = TypeVar("T")

Location = str | os.PathLike[str]

log = structlog.get_logger(__name__)


class FileCoordinator:
    """Encode values to, and decode values from, JSON files.

    Files are addressed either by an explicit location or by a filename
    inside a :class:`Directory` category. The two-part form resolves the
    directory first and fails before the codec or the file is touched.

    Usage::

        files = FileCoordinator()
        err = files.encode_file(profile, "profile.json")
        loaded = files.decode_file_or_none(Profile, "profile.json")
    """

    def __init__(self, settings: DirJsonSettings | None = None) -> None:
        self._resolver = DirectoryResolver(settings)

    @property
    def settings(self) -> DirJsonSettings:
        return self._resolver.settings

    # ------------------------------------------------------------------
    # Path resolution
    # ------------------------------------------------------------------

    def resolve_directory(self, directory: Directory | str) -> Result[Path]:
        """Absolute path of *directory*, created if it was missing."""
        try:
            return Result.success(self._resolver.resolve(directory))
        except CodingError as exc:
            log.warning("resolve_failed", directory=str(directory), error=exc.message)
            return Result.failure(exc)

    def resolve_path(
        self,
        filename: str,
        directory: Directory | str = Directory.DOCUMENTS,
    ) -> Result[Path]:
        """Path of *filename* inside *directory*. The name is used verbatim."""
        try:
            return Result.success(self._resolver.build_path(filename, directory))
        except CodingError as exc:
            log.warning(
                "resolve_failed",
                directory=str(directory),
                filename=filename,
                error=exc.message,
            )
            return Result.failure(exc)

    # ------------------------------------------------------------------
    # Decode
    # ------------------------------------------------------------------

    def decode(self, target: type[T], location: Location) -> Result[T]:
        """Read and decode the file at *location* as *target*."""
        path = Path(location)
        try:
            data = filesystem.read_bytes(path)
            value = codec.deserialize(data, target)
        except CodecError as exc:
            located = exc.at(path)
            log.warning(
                "decode_failed",
                location=str(path),
                target=exc.type_name,
                error=str(exc.cause),
            )
            return Result.failure(located)
        except CodingError as exc:
            log.warning(
                "decode_failed",
                location=str(path),
                target=codec.type_name(target),
                error=exc.message,
            )
            return Result.failure(exc)
        log.debug("decoded", location=str(path), target=codec.type_name(target))
        return Result.success(value)

    def decode_or_none(self, target: type[T], location: Location) -> T | None:
        """Like :meth:`decode`, but ``None`` on failure."""
        return self.decode(target, location).value_or_none()

    def decode_file(
        self,
        target: type[T],
        filename: str,
        directory: Directory | str = Directory.DOCUMENTS,
    ) -> Result[T]:
        """Decode *filename* from *directory* as *target*."""
        resolved = self.resolve_path(filename, directory)
        if resolved.error is not None:
            return Result.failure(resolved.error)
        return self.decode(target, resolved.unwrap())

    def decode_file_or_none(
        self,
        target: type[T],
        filename: str,
        directory: Directory | str = Directory.DOCUMENTS,
    ) -> T | None:
        """Like :meth:`decode_file`, but ``None`` on failure."""
        return self.decode_file(target, filename, directory).value_or_none()

    # ------------------------------------------------------------------
    # Encode
    # ------------------------------------------------------------------

    def encode(
        self,
        value: Any,
        location: Location,
        *,
        as_type: Any = None,
    ) -> CodingError | None:
        """Encode *value* and atomically write it to *location*.

        Returns:
            None on success, otherwise the error.
        """
        path = Path(location)
        try:
            data = codec.serialize(value, as_type=as_type)
            filesystem.write_bytes_atomic(path, data)
        except CodecError as exc:
            log.warning(
                "encode_failed",
                location=str(path),
                value_type=codec.type_name(type(value)),
                error=str(exc.cause),
            )
            return exc.at(path)
        except CodingError as exc:
            log.warning(
                "encode_failed",
                location=str(path),
                value_type=codec.type_name(type(value)),
                error=exc.message,
            )
            return exc
        log.debug("encoded", location=str(path), value_type=codec.type_name(type(value)))
        return None

    def encode_file(
        self,
        value: Any,
        filename: str,
        directory: Directory | str = Directory.DOCUMENTS,
        *,
        as_type: Any = None,
    ) -> CodingError | None:
        """Encode *value* into *filename* inside *directory*.

        The filename is used as-is, without adding ``.json``.
        """
        resolved = self.resolve_path(filename, directory)
        if resolved.error is not None:
            return resolved.error
        return self.encode(value, resolved.unwrap(), as_type=as_type)

    # ------------------------------------------------------------------
    # Remove
    # ------------------------------------------------------------------

    def remove(self, location: Location, *, missing_ok: bool = False) -> CodingError | None:
        """Delete the file at *location*."""
        path = Path(location)
        try:
            filesystem.remove_file(path, missing_ok=missing_ok)
        except CodingError as exc:
            log.warning("remove_failed", location=str(path), error=exc.message)
            return exc
        return None

    def remove_file(
        self,
        filename: str,
        directory: Directory | str = Directory.DOCUMENTS,
        *,
        missing_ok: bool = False,
    ) -> CodingError | None:
        """Delete *filename* inside *directory*."""
        resolved = self.resolve_path(filename, directory)
        if resolved.error is not None:
            return resolved.error
        return self.remove(resolved.unwrap(), missing_ok=missing_ok)
