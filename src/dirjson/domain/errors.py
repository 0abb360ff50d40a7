"""Error taxonomy for encode/decode/path-resolution failures.

INVARIANT: Every failure inside dirjson surfaces as a :class:`CodingError`
subclass. Infrastructure raises them (chaining the original exception);
the :class:`~dirjson.services.coding.FileCoordinator` turns them into
return values.
"""

from __future__ import annotations

from typing import Any


class CodingError(Exception):
    """Base class for every classified dirjson failure.

    Attributes:
        code: Stable machine-readable error code.
        message: Human-readable description.
        detail: Structured context for diagnostics.
    """

    code = "CODING_ERROR"

    def __init__(self, message: str, **detail: Any) -> None:
        super().__init__(message)
        self.message = message
        self.detail: dict[str, Any] = detail

    def to_dict(self) -> dict[str, Any]:
        """Structured payload for logs and JSON output."""
        return {"code": self.code, "message": self.message, "detail": dict(self.detail)}


class DirectoryResolutionFailed(CodingError):
    """The platform could not provide or create the requested directory."""

    code = "DIRECTORY_RESOLUTION_FAILED"

    def __init__(self, category: Any, reason: str | None = None) -> None:
        msg = f"Unable to find search path directory of type {category!s}"
        if reason:
            msg = f"{msg}: {reason}"
        super().__init__(msg, category=str(category))
        self.category = category


class InvalidFilename(CodingError):
    """The filename is not a single path component."""

    code = "INVALID_FILENAME"

    def __init__(self, filename: str) -> None:
        super().__init__(f"Not a single path component: {filename!r}", filename=filename)
        self.filename = filename


class IOReadFailed(CodingError):
    """The file is missing, unreadable, or the read faulted."""

    code = "IO_READ_FAILED"

    def __init__(self, location: Any, cause: BaseException) -> None:
        super().__init__(
            f"Unable to read {location!s}: {cause}",
            location=str(location),
            cause=str(cause),
        )
        self.location = location
        self.cause = cause


class IOWriteFailed(CodingError):
    """Writing, renaming, or removing the file faulted."""

    code = "IO_WRITE_FAILED"

    def __init__(self, location: Any, cause: BaseException) -> None:
        super().__init__(
            f"Unable to write {location!s}: {cause}",
            location=str(location),
            cause=str(cause),
        )
        self.location = location
        self.cause = cause


class CodecError(CodingError):
    """Serializing or deserializing a value failed.

    The message names the failing operation and the target type, so the
    failure can be diagnosed from a log line alone.
    """

    code = "CODEC_ERROR"

    def __init__(
        self,
        operation: str,
        type_name: str,
        cause: BaseException,
        location: Any = None,
    ) -> None:
        msg = f"{operation} of {type_name} failed: {cause}"
        if location is not None:
            msg = f"{operation} of {type_name} at {location!s} failed: {cause}"
        super().__init__(
            msg,
            operation=operation,
            type=type_name,
            cause=str(cause),
            location=None if location is None else str(location),
        )
        self.operation = operation
        self.type_name = type_name
        self.cause = cause
        self.location = location

    def at(self, location: Any) -> CodecError:
        """Return a copy of this error annotated with *location*."""
        located = CodecError(self.operation, self.type_name, self.cause, location)
        located.__cause__ = self.__cause__
        return located
