"""Directory resolution and path building.

INVARIANT: A resolved directory exists when it is returned (unless
``create_directories`` is disabled). Nothing is cached: every call asks
the platform again.
"""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import platformdirs
import structlog

from dirjson.config.settings import DirJsonSettings
from dirjson.domain.directories import APP_SCOPED, Directory, coerce_directory
from dirjson.domain.errors import DirectoryResolutionFailed, InvalidFilename

log = structlog.get_logger(__name__)

# Categories that are shared by every application of the user.
_USER_DIRS: dict[Directory, Callable[[], Path]] = {
    Directory.DOCUMENTS: platformdirs.user_documents_path,
    Directory.DOWNLOADS: platformdirs.user_downloads_path,
    Directory.DESKTOP: platformdirs.user_desktop_path,
    Directory.PICTURES: platformdirs.user_pictures_path,
    Directory.MUSIC: platformdirs.user_music_path,
    Directory.VIDEOS: platformdirs.user_videos_path,
}


class DirectoryResolver:
    """Map :class:`Directory` categories to absolute, existing paths."""

    def __init__(self, settings: DirJsonSettings | None = None) -> None:
        self._settings = settings or DirJsonSettings()

    @property
    def settings(self) -> DirJsonSettings:
        return self._settings

    def resolve(self, category: Directory | str) -> Path:
        """Return the directory for *category*, creating it if absent.

        Raises:
            DirectoryResolutionFailed: Unknown category, or the directory
                could not be located or created.
        """
        directory = coerce_directory(category)
        try:
            path = self._locate(directory).absolute()
        except Exception as exc:  # platformdirs backends may raise anything
            raise DirectoryResolutionFailed(directory, str(exc)) from exc

        if self._settings.create_directories:
            try:
                path.mkdir(parents=True, exist_ok=True)
            except OSError as exc:
                raise DirectoryResolutionFailed(directory, str(exc)) from exc

        if path.exists() and not path.is_dir():
            raise DirectoryResolutionFailed(directory, f"{path} is not a directory")

        log.debug("resolved", directory=str(directory), path=str(path))
        return path

    def build_path(self, filename: str, category: Directory | str) -> Path:
        """Join *filename* onto the directory for *category*.

        The filename is used verbatim; no extension is added.

        Raises:
            DirectoryResolutionFailed: See :meth:`resolve`.
            InvalidFilename: *filename* is not a single path component.
        """
        _check_filename(filename)
        return self.resolve(category) / filename

    def _locate(self, directory: Directory) -> Path:
        if self._settings.root is not None:
            return Path(self._settings.root) / directory.value

        if directory in APP_SCOPED:
            name = self._settings.app_name
            author = self._settings.app_author
            if directory is Directory.APPLICATION_SUPPORT:
                return platformdirs.user_data_path(name, author)
            if directory is Directory.CACHES:
                return platformdirs.user_cache_path(name, author)
            if directory is Directory.CONFIG:
                return platformdirs.user_config_path(name, author)
            if directory is Directory.STATE:
                return platformdirs.user_state_path(name, author)
            return platformdirs.user_log_path(name, author)

        return _USER_DIRS[directory]()


def _check_filename(filename: str) -> None:
    """Reject anything that is not exactly one path component."""
    if not filename or filename in (".", ".."):
        raise InvalidFilename(filename)
    if "/" in filename or "\\" in filename or "\x00" in filename:
        raise InvalidFilename(filename)
